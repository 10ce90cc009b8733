"""
Decode buffers of packed IBM-format numbers into Pandas series.

SEG-Y traces store long runs of IBM singles, and SAS Transport (XPORT)
observations store IBM doubles, sometimes truncated to as few as 2
bytes.  A truncated double keeps its most significant bytes; the
discarded low bytes are zero.
"""

# Standard Library
import logging

# Community Packages
import pandas as pd

# Ibmfloat Modules
import ibmfloat
import ibmfloat.sas
from ibmfloat.convert import ieee32_to_float, ieee64_to_float

__all__ = [
    'from_bytes',
    'missing_values',
]

LOG = logging.getLogger(__name__)

FORMATS = {
    # name: (word size, {precision: converter})
    'ibm32': (4, {32: ibmfloat.ibm32_to_ieee32, 64: ibmfloat.ibm32_to_ieee64}),
    'ibm64': (8, {32: ibmfloat.ibm64_to_ieee32, 64: ibmfloat.ibm64_to_ieee64}),
    'sas': (8, {64: ibmfloat.sas.sas_to_ieee64}),
}


def words(bytestring, width, size):
    """
    Iterate over the words of a buffer of ``width``-byte records.

    Each record is padded out to ``size`` bytes before unpacking.
    """
    if not 2 <= width <= size:
        raise ValueError(f'Record width must be between 2 and {size} bytes, got {width}')
    if len(bytestring) % width:
        raise ValueError(f'Buffer of {len(bytestring)} bytes is not a multiple of {width}')
    for i in range(0, len(bytestring), width):
        record = bytestring[i:i + width].ljust(size, b'\x00')
        yield int.from_bytes(record, 'big')


def from_bytes(bytestring, fmt='ibm64', width=None, precision=64, name=None):
    """
    Convert a buffer of big-endian IBM-format numbers to a series.

    ``fmt`` is one of ``'ibm32'``, ``'ibm64'``, or ``'sas'``.  The
    result has dtype ``float32`` or ``float64`` according to
    ``precision``.  SAS missing values become NaN and are only supported
    in double precision.
    """
    try:
        size, converters = FORMATS[fmt]
    except KeyError:
        raise ValueError(f'Unknown format {fmt!r}, expected one of {list(FORMATS)}') from None
    if precision not in (32, 64):
        raise ValueError(f'Precision must be 32 or 64, got {precision!r}')
    if precision not in converters:
        raise ValueError(f'Format {fmt!r} does not support {precision}-bit precision')
    if width is None:
        width = size

    convert = converters[precision]
    unpack = ieee32_to_float if precision == 32 else ieee64_to_float
    values = [unpack(convert(word)) for word in words(bytestring, width, size)]
    LOG.debug(f'Decoded {len(values)} {fmt} values of width {width}')
    return pd.Series(values, dtype=f'float{precision}', name=name)


def missing_values(bytestring, width=8, name=None):
    """
    Get the SAS missing value notation for each number in a buffer.

    Numbers that are not missing map to ``None``.
    """
    notation = []
    for word in words(bytestring, width, 8):
        which = ibmfloat.sas.missing_value(word)
        notation.append(str(which) if which is not None else None)
    return pd.Series(notation, dtype=object, name=name)
