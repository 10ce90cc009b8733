"""
Shared test fixtures.
"""

# Community Packages
import pytest


@pytest.fixture(scope='session')
def counts():
    return [1216, 1761, 2517, 254, 60, 137]


@pytest.fixture(scope='session')
def counts_bytestring():
    """
    Integer counts as IBM doubles, as found in a SAS Transport file.
    """
    return (
        b'CL\x00\x00\x00\x00\x00\x00'
        b'Cn\x10\x00\x00\x00\x00\x00'
        b'C\x9dP\x00\x00\x00\x00\x00'
        b'B\xfe\x00\x00\x00\x00\x00\x00'
        b'B<\x00\x00\x00\x00\x00\x00'
        b'B\x89\x00\x00\x00\x00\x00\x00'
    )


@pytest.fixture(scope='session')
def temperatures():
    return [98.6, 95.4, 86.7, 93.4, 103.5, 56.7]


@pytest.fixture(scope='session')
def temperatures_bytestring():
    """
    Temperatures as IBM doubles, as found in a SAS Transport file.
    """
    return (
        b'Bb\x99\x99\x99\x99\x99\x98'
        b'B_fffffh'
        b'BV\xb333334'
        b'B]fffffh'
        b'Bg\x80\x00\x00\x00\x00\x00'
        b'B8\xb333334'
    )


@pytest.fixture(scope='session')
def missing_bytestring():
    """
    SAS missing values mixed with ordinary numbers.
    """
    return (
        b'.\x00\x00\x00\x00\x00\x00\x00'
        b'A\x00\x00\x00\x00\x00\x00\x00'
        b'A\x10\x00\x00\x00\x00\x00\x00'
        b'_\x00\x00\x00\x00\x00\x00\x00'
        b'Z\x00\x00\x00\x00\x00\x00\x00'
        b'\x00\x00\x00\x00\x00\x00\x00\x00'
    )


@pytest.fixture(scope='session')
def singles_bytestring():
    """
    IBM singles, as found in a SEG-Y trace.
    """
    return b'\xc2\x76\xa0\x00' b'\x41\x10\x00\x00' b'\x00\x00\x00\x00' b'\x78\xff\xff\xff'
