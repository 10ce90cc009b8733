"""
Tests for the IBM-format number types.
"""

# Standard Library
import math

# Community Packages
import pytest

# Ibmfloat Modules
import ibmfloat


class TestConstruction:
    """
    Verify construction from and conversion to raw bits and bytes.
    """

    def test_from_bits(self):
        x = ibmfloat.F32.from_bits(0x46000001)
        assert x.to_bits() == 0x46000001

    def test_from_be_bytes(self):
        x = ibmfloat.F32.from_be_bytes(b'\x46\x00\x00\x01')
        assert x.to_bits() == 0x46000001
        y = ibmfloat.F64.from_be_bytes(b'\x41\x10\x00\x00\x00\x00\x00\x00')
        assert y.to_bits() == 0x4110000000000000

    def test_to_be_bytes(self):
        x = ibmfloat.F32.from_bits(0x46000001)
        assert x.to_be_bytes() == b'\x46\x00\x00\x01'
        assert bytes(x) == b'\x46\x00\x00\x01'
        y = ibmfloat.F64.from_bits(0x4110000000000000)
        assert bytes(y) == b'\x41\x10' + b'\x00' * 6

    def test_too_many_bits(self):
        with pytest.raises(ValueError):
            ibmfloat.F32.from_bits(1 << 32)
        with pytest.raises(ValueError):
            ibmfloat.F64.from_bits(1 << 64)

    def test_negative_bits(self):
        with pytest.raises(ValueError):
            ibmfloat.F32.from_bits(-1)

    def test_wrong_byte_count(self):
        with pytest.raises(ValueError):
            ibmfloat.F32.from_be_bytes(b'\x41\x10\x00')
        with pytest.raises(ValueError):
            ibmfloat.F64.from_be_bytes(b'\x41\x10\x00\x00')


class TestConversion:
    """
    Verify conversion to native floats.
    """

    def test_example(self):
        x = ibmfloat.F32.from_bits(0b1_1000010_0111_0110_1010_0000_0000_0000)
        assert float(x) == -118.625
        assert x.float32() == -118.625
        assert x.ieee32() == 0xc2ed4000

    def test_denormalized(self):
        x = ibmfloat.F32.from_bits(0x46000001)
        assert x.float32() == 1.0
        assert x.float64() == 1.0

    def test_double(self):
        x = ibmfloat.F64.from_bits(0x4110000000000000)
        assert float(x) == 1.0
        assert x.ieee64() == 0x3ff0000000000000
        assert x.float32() == 1.0

    def test_overflow(self):
        x = ibmfloat.F32.from_bits(0x78ffffff)
        assert x.float32() == math.inf
        assert float(x) == pytest.approx(16.0 ** 56)

    def test_negative_zero(self):
        x = ibmfloat.F64.from_bits(0x8000000000000000)
        assert float(x) == 0.0
        assert math.copysign(1.0, float(x)) == -1.0


class TestComparison:
    """
    Verify comparison by represented value, not by bits.
    """

    def test_equal_values_different_bits(self):
        one = ibmfloat.F32.from_bits(0x41100000)
        also_one = ibmfloat.F32.from_bits(0x46000001)
        assert one.to_bits() != also_one.to_bits()
        assert one == also_one
        assert hash(one) == hash(also_one)

    def test_signed_zeros(self):
        zero = ibmfloat.F32.from_bits(0x00000000)
        assert zero == ibmfloat.F32.from_bits(0x80000000)
        assert zero == ibmfloat.F32.from_bits(0x7f000000)

    def test_mixed_widths(self):
        assert ibmfloat.F32.from_bits(0x41100000) == ibmfloat.F64.from_bits(0x4110000000000000)

    def test_ordering(self):
        small = ibmfloat.F32.from_bits(0x41100000)
        large = ibmfloat.F32.from_bits(0x41200000)
        negative = ibmfloat.F32.from_bits(0xc1200000)
        assert negative < small < large
        assert large > small >= small
        assert small <= small
        assert sorted([large, negative, small]) == [negative, small, large]

    def test_other_types(self):
        one = ibmfloat.F32.from_bits(0x41100000)
        assert one != 1.0
        assert one != 'one'
        with pytest.raises(TypeError):
            one < 1.0


class TestDisplay:

    def test_str(self):
        assert str(ibmfloat.F32.from_bits(0xc276a000)) == '-118.625'

    def test_format(self):
        x = ibmfloat.F64.from_bits(0xc276a00000000000)
        assert f'{x:.1f}' == '-118.6'
        assert f'{x:e}' == '-1.186250e+02'
        assert f'{x:E}' == '-1.186250E+02'

    def test_repr(self):
        assert repr(ibmfloat.F32.from_bits(0x41100000)) == 'F32.from_bits(0x41100000)'
        assert repr(ibmfloat.F64.from_bits(1)) == 'F64.from_bits(0x0000000000000001)'


class TestVersion:

    def test_parse(self):
        from ibmfloat.__about__ import Version
        v = Version.parse('1.2.3')
        assert v == (1, 2, 3)
        assert str(v) == '1.2.3'
        assert v > Version.parse('1.1.9')
