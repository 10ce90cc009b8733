"""
Convert IBM hexadecimal floating point bit patterns to IEEE 754.

All conversions operate on integers holding raw bit patterns and return
integers holding raw bit patterns.  They are total: every input word
produces a defined output word.  Overflow becomes infinity and underflow
becomes zero, never an exception.
"""

# IBM mainframe:    sign * 0.fraction * 16 ** (exponent - 64)
# IEEE 754:         sign * 1.fraction * 2 ** (exponent - bias)

# Standard Library
import struct

__all__ = [
    'ibm32_to_ieee32',
    'ibm32_to_ieee64',
    'ibm64_to_ieee32',
    'ibm64_to_ieee64',
    'ieee32_to_float',
    'ieee64_to_float',
]

IEEE32_INFINITY = 0x7f800000
IEEE32_MAX_EXPONENT = 254

# The IBM bias is 64 hex digits, or 256 bits.  The IEEE single bias is
# 127, a difference of -129.  We get an extra -1 from the different
# significand representations (0.f for IBM versus 1.f for IEEE), and
# another -1 because we never remove the hidden 1-bit from the IEEE
# significand: in the final addition it carries into the exponent.
IEEE32_OFFSET = -131

# Same derivation against the IEEE double bias of 1023.
IEEE64_OFFSET = 765


def split(ibm, width):
    """
    Split an IBM float of ``width`` bits into (sign, exponent, fraction).

    Sign and fraction are left in place, while the exponent is slid all
    the way right.
    """
    sign = ibm & (1 << (width - 1))
    exponent = (ibm >> (width - 8)) & 0x7f
    fraction = ibm & ((1 << (width - 8)) - 1)
    return sign, exponent, fraction


def normalize(exponent, fraction, width):
    """
    Left-align a nonzero fraction, adjusting the exponent to match.

    The IBM exponent counts hex digits, so the fraction may have up to 3
    leading zero-bits even when "normalized", or more if it is not.
    After the shift, the top bit of the ``width - 8`` bit fraction field
    is set and the exponent is expressed in bits rather than hex digits.
    """
    # Leading zeros of the full word, less the 8 bits of sign and exponent.
    shift = width - 8 - fraction.bit_length()
    return (exponent << 2) - shift, fraction << shift


def round_right_shift(value, shift):
    """
    Shift right by ``shift`` bits, rounding half to even.

    Of the bits shifted out, call the most significant the "rounding
    bit" and the rest the "trailing bits".  The least significant bit
    that survives is the "parity bit".  For a 5-bit shift::

        before:     ...xxxprtttt
        after:           ...xxxp   (possibly incremented by one)

    Round up when the rounding bit is set and either the parity bit or
    any trailing bit is set.  The mask selects the parity and trailing
    bits.  We shift by ``shift - 1``, add one if the mask matched, and
    let the final one-bit shift decide: the addition only carries past
    the rounding bit when that bit was set.
    """
    mask = ((1 << (shift - 1)) - 1) | (1 << shift)
    round_up = 1 if value & mask else 0
    return ((value >> (shift - 1)) + round_up) >> 1


def ibm32_to_ieee32(ibm: int) -> int:
    """
    Convert an IBM single to an IEEE single, rounding when necessary.
    """
    sign, exponent, fraction = split(ibm, 32)
    if fraction == 0:
        return sign

    exponent, fraction = normalize(exponent, fraction, 32)
    exponent += IEEE32_OFFSET

    if exponent >= IEEE32_MAX_EXPONENT:
        return sign | IEEE32_INFINITY
    if exponent >= 0:
        # The hidden bit of ``fraction`` increments the exponent.
        return sign + (exponent << 23) + fraction
    if exponent >= -32:
        # Subnormal; fold the exponent deficit into the shift.
        return sign + round_right_shift(fraction, -exponent)
    return sign


def ibm32_to_ieee64(ibm: int) -> int:
    """
    Convert an IBM single to an IEEE double.

    Always exact: no overflow, underflow, subnormal or rounding.
    """
    sign, exponent, fraction = split(ibm, 32)
    sign <<= 32
    if fraction == 0:
        return sign

    exponent, fraction = normalize(exponent, fraction, 32)
    exponent += IEEE64_OFFSET
    return sign + (exponent << 52) + (fraction << 29)


def ibm64_to_ieee32(ibm: int) -> int:
    """
    Convert an IBM double to an IEEE single.

    Overflow and underflow are possible, and rounding can occur in both
    the normal and the subnormal case.
    """
    sign, exponent, fraction = split(ibm, 64)
    sign >>= 32
    if fraction == 0:
        return sign

    exponent, fraction = normalize(exponent, fraction, 64)
    exponent += IEEE32_OFFSET

    if exponent >= IEEE32_MAX_EXPONENT:
        return sign | IEEE32_INFINITY
    if exponent >= 0:
        # A round-up carry may ripple into the exponent, even to infinity.
        return sign + (exponent << 23) + round_right_shift(fraction, 32)
    if exponent >= -32:
        return sign + round_right_shift(fraction, 32 - exponent)
    return sign


def ibm64_to_ieee64(ibm: int) -> int:
    """
    Convert an IBM double to an IEEE double.

    No overflow or underflow is possible, but IBM doubles carry up to 3
    more significant bits, so the result is frequently rounded.
    """
    sign, exponent, fraction = split(ibm, 64)
    if fraction == 0:
        return sign

    exponent, fraction = normalize(exponent, fraction, 64)
    exponent += IEEE64_OFFSET
    return sign + (exponent << 52) + round_right_shift(fraction, 3)


def ieee32_to_float(bits: int) -> float:
    """
    Reinterpret an IEEE single bit pattern as a Python float.
    """
    return struct.unpack('>f', struct.pack('>I', bits))[0]


def ieee64_to_float(bits: int) -> float:
    """
    Reinterpret an IEEE double bit pattern as a Python float.
    """
    return struct.unpack('>d', struct.pack('>Q', bits))[0]
