"""
Run the converter as ``python -m ibmfloat``.
"""
# Standard Library
import pathlib

from .cli import cli

if __name__ == '__main__':
    # Report usage as ``ibmfloat`` rather than ``__main__.py``.
    cli.main(prog_name=pathlib.Path(__file__).parent.name)
