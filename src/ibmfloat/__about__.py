"""
Package metadata: the version number of the installed distribution.
"""

# The version is declared once, in ``setup.cfg``, and read back from the
# installed distribution's metadata.  Importing from a source checkout
# that was never installed leaves ``__version__`` as ``None``.

# Standard Library
import pathlib
from collections import namedtuple
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    '__version__',
]


class Version(namedtuple('Version', 'major minor patch')):
    """
    Semantic version number, comparable as a tuple.
    """

    @classmethod
    def parse(cls, s):
        return cls(*map(int, s.split('.')[:3]))

    def __str__(self):
        return '.'.join(map(str, self))


distribution = pathlib.Path(__file__).parent.name
try:
    __version__ = Version.parse(version(distribution))
except PackageNotFoundError:
    __version__ = None
