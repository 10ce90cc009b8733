"""
Convert IBM hexadecimal floating point numbers to IEEE 754.

IBM mainframes, SEG-Y seismic traces, and SAS Transport (XPORT) files
store numbers in the IBM System/360 hexadecimal floating point format.
``F32`` and ``F64`` wrap such numbers without interpreting them, and
convert them to native floats on request.

    >>> x = F32.from_bits(0xc276a000)
    >>> float(x)
    -118.625

Every ``F32`` converts exactly to a Python float (an IEEE double).
``F64`` has up to 3 more significant bits than an IEEE double, so most
conversions round, but none can overflow or underflow.
"""

# Standard Library
import operator
import struct

from .__about__ import __version__  # noqa: F401 module imported but unused
from .convert import (
    ibm32_to_ieee32,
    ibm32_to_ieee64,
    ibm64_to_ieee32,
    ibm64_to_ieee64,
    ieee32_to_float,
    ieee64_to_float,
)

__all__ = [
    'F32',
    'F64',
    'ibm32_to_ieee32',
    'ibm32_to_ieee64',
    'ibm64_to_ieee32',
    'ibm64_to_ieee64',
]


class IBMFloat:
    """
    IBM-format floating point number of a fixed width.

    Equality, ordering, and display are those of the represented real
    number, never of the raw bits.  There are no arithmetic operators;
    convert to ``float`` first.
    """

    byte_structure = None
    to_ieee32 = None
    to_ieee64 = None

    def __init__(self, bits=0):
        """
        Wrap a raw bit pattern.
        """
        limit = 8 * struct.calcsize(self.byte_structure)
        if not 0 <= bits < 1 << limit:
            raise ValueError(f'{bits!r} does not fit in {limit} bits')
        self._bits = bits

    @classmethod
    def from_bits(cls, bits: int):
        """
        Create a number from its bit pattern as an unsigned integer.
        """
        return cls(bits)

    @classmethod
    def from_be_bytes(cls, bytestring: bytes):
        """
        Create a number from its big-endian byte string.
        """
        size = struct.calcsize(cls.byte_structure)
        if len(bytestring) != size:
            raise ValueError(f'Expected {size} bytes, got {len(bytestring)}')
        bits, = struct.unpack(cls.byte_structure, bytestring)
        return cls(bits)

    def to_bits(self) -> int:
        """
        Bit pattern as an unsigned integer.
        """
        return self._bits

    def to_be_bytes(self) -> bytes:
        """
        Big-endian (network order) byte string.
        """
        return struct.pack(self.byte_structure, self._bits)

    def __bytes__(self):
        return self.to_be_bytes()

    def ieee32(self) -> int:
        """
        IEEE single bit pattern, rounded to nearest, ties to even.
        """
        return self.to_ieee32(self._bits)

    def ieee64(self) -> int:
        """
        IEEE double bit pattern.
        """
        return self.to_ieee64(self._bits)

    def float32(self) -> float:
        """
        Value after rounding to IEEE single precision.

        Large magnitudes may overflow to infinity and small magnitudes
        may underflow to zero.
        """
        return ieee32_to_float(self.ieee32())

    def float64(self) -> float:
        """
        Value as an IEEE double.
        """
        return ieee64_to_float(self.ieee64())

    def __float__(self):
        return self.float64()

    def __repr__(self):
        """
        REPL-format string.
        """
        digits = 2 * struct.calcsize(self.byte_structure)
        return f'{type(self).__name__}.from_bits({self._bits:#0{digits + 2}x})'

    def __str__(self):
        return str(float(self))

    def __format__(self, spec):
        return format(float(self), spec)

    def __hash__(self):
        return hash(float(self))

    def _compare(self, other, op):
        if not isinstance(other, IBMFloat):
            return NotImplemented
        return op(float(self), float(other))

    def __eq__(self, other):
        return self._compare(other, operator.eq)

    def __lt__(self, other):
        return self._compare(other, operator.lt)

    def __le__(self, other):
        return self._compare(other, operator.le)

    def __gt__(self, other):
        return self._compare(other, operator.gt)

    def __ge__(self, other):
        return self._compare(other, operator.ge)


class F32(IBMFloat):
    """
    32-bit IBM floating point number.

    IBM singles have slightly less precision than IEEE singles but a
    larger domain.  Converting to IEEE single may round, overflow, or
    underflow.  Converting to IEEE double is always exact.
    """

    byte_structure = '>I'
    to_ieee32 = staticmethod(ibm32_to_ieee32)
    to_ieee64 = staticmethod(ibm32_to_ieee64)


class F64(IBMFloat):
    """
    64-bit IBM floating point number.
    """

    byte_structure = '>Q'
    to_ieee32 = staticmethod(ibm64_to_ieee32)
    to_ieee64 = staticmethod(ibm64_to_ieee64)
