"""
SAS floating point numbers and special missing values.

SAS stores numbers as IBM-format doubles.  The IBM hexadecimal floating
point format represents zero with an all-zero fraction, and any sign or
exponent may accompany it.  Because the format has no mechanism for
not-a-number (NaN) values, SAS uses those alternative zeros to mark
missing data.  By default, a SAS missing value is encoded with an
ASCII-encoded period (".") as the first byte.  SAS also supports 27
special missing values, allowing the categorization of missing data by
tagging missing values using the letters A to Z or an underscore.
"""

# Standard Library
import enum
import math
import string

# Ibmfloat Modules
import ibmfloat
from ibmfloat.convert import ibm64_to_ieee32, ibm64_to_ieee64, ieee64_to_float

__all__ = [
    'F64',
    'MissingValue',
    'missing_value',
    'sas_to_ieee32',
    'sas_to_ieee64',
]

# Quiet NaN; the inverted missing value code goes in the payload bits 40-47.
MISSING_NAN = 0xffff000000000000


class MissingValue(enum.Enum):
    """
    Flavors of SAS missing numeric values, ``.``, ``._``, and ``.A`` to ``.Z``.
    """

    PERIOD = '.'
    UNDERSCORE = '_'
    A = 'A'
    B = 'B'
    C = 'C'
    D = 'D'
    E = 'E'
    F = 'F'
    G = 'G'
    H = 'H'
    I = 'I'  # noqa: E741 ambiguous variable name
    J = 'J'
    K = 'K'
    L = 'L'
    M = 'M'
    N = 'N'
    O = 'O'  # noqa: E741 ambiguous variable name
    P = 'P'
    Q = 'Q'
    R = 'R'
    S = 'S'
    T = 'T'
    U = 'U'
    V = 'V'
    W = 'W'
    X = 'X'
    Y = 'Y'
    Z = 'Z'

    def __str__(self):
        """
        SAS notation, for example ``.A``.
        """
        if self is MissingValue.PERIOD:
            return '.'
        return '.' + self.value

    @property
    def code(self) -> int:
        """The ASCII code of the tag character."""  # noqa: D401
        return _CODES[self]

    @classmethod
    def default(cls):
        """
        The ordinary missing value, ``.``.
        """
        return cls.PERIOD

    @classmethod
    def from_code(cls, code: int):
        """
        Look up a missing value by its ASCII code.

        Most codes do not name a missing value, so callers should expect
        and handle the ``ValueError``.
        """
        try:
            return _MEMBERS[code]
        except KeyError:
            raise ValueError(f'Not a missing value: {code!r}') from None


_MEMBERS = {ord('.'): MissingValue.PERIOD, ord('_'): MissingValue.UNDERSCORE}
_MEMBERS.update((ord(c), MissingValue[c]) for c in string.ascii_uppercase)
_CODES = {member: code for code, member in _MEMBERS.items()}


def missing_value(ibm: int):
    """
    Get the missing value encoded in a 64-bit word, or ``None``.
    """
    try:
        return MissingValue.from_code((ibm >> 56) & 0x7f)
    except ValueError:
        return None


def sas_to_ieee64(ibm: int) -> int:
    """
    Convert a SAS double to an IEEE double bit pattern.

    Missing values become quiet NaNs that remember which missing value
    they were.  Everything else converts as an ordinary IBM double.
    """
    which = missing_value(ibm)
    if which is None:
        return ibm64_to_ieee64(ibm)
    return MISSING_NAN | ((~which.code & 0xff) << 40)


def sas_to_ieee32(ibm: int) -> int:
    """
    Convert a SAS double to an IEEE single bit pattern.

    Missing values narrow the way hardware narrows a NaN: the sign and
    the top 23 bits of the payload are kept.
    """
    if missing_value(ibm) is None:
        return ibm64_to_ieee32(ibm)
    nan = sas_to_ieee64(ibm)
    sign = (nan >> 32) & 0x80000000
    payload = (nan & 0x000fffffffffffff) >> 29
    return sign | 0x7f800000 | payload


class F64(ibmfloat.F64):
    """
    64-bit SAS floating point number.

    When the exponent field holds a missing value code, the number is
    missing, whatever the fraction holds.  Converted to a native float,
    a missing value is NaN.
    """

    to_ieee32 = staticmethod(sas_to_ieee32)
    to_ieee64 = staticmethod(sas_to_ieee64)

    def missing_value(self):
        """
        The missing value represented, or ``None``.
        """
        return missing_value(self.to_bits())

    def is_missing_value(self) -> bool:
        """
        Whether this represents a missing numeric value.
        """
        return self.missing_value() is not None

    def is_nan(self) -> bool:
        """
        Whether this converts to a NaN.
        """
        if self.is_missing_value():
            return True
        return math.isnan(ieee64_to_float(ibm64_to_ieee64(self.to_bits())))
