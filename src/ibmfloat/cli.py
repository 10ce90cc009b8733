"""
Convert packed IBM-format floating point numbers to CSV.
"""

# Standard Library
import functools
import json
import logging
import logging.config
import sys

# Community Packages
import click
import pandas as pd
import yaml

# Ibmfloat Modules
import ibmfloat
import ibmfloat.series

__all__ = [
    'cli',
]

try:
    yaml.load = functools.partial(yaml.load, Loader=yaml.CSafeLoader)
except AttributeError:
    yaml.load = functools.partial(yaml.load, Loader=yaml.SafeLoader)

try:
    with open('logging.yml') as file:
        LOG_CONFIG = yaml.load(file)
except FileNotFoundError:
    LOG_CONFIG = {'version': 1, 'disable_existing_loggers': False}
logging.config.dictConfig(LOG_CONFIG)

LOG = logging.getLogger(__name__)
log_levels = [name for x, name in sorted(logging._levelToName.items()) if x]


@click.command(
    context_settings={'help_option_names': ['-h', '--help']},
)
@click.argument('input', type=click.File('rb'))
@click.argument(
    'output',
    type=click.File('wt'),
    default=sys.stdout,
)
@click.option(
    '--format',
    'fmt',
    type=click.Choice(list(ibmfloat.series.FORMATS), case_sensitive=False),
    default='ibm64',
    show_default=True,
    help='Encoding of the input numbers.',
)
@click.option(
    '--width',
    metavar='BYTES',
    type=int,
    help='Bytes per number, if truncated.  Defaults to the full word.',
)
@click.option(
    '--precision',
    type=click.Choice(['32', '64']),
    default='64',
    show_default=True,
    help='Precision of the IEEE output.',
)
@click.option(
    '--loglevel',
    metavar='LEVEL',
    type=click.Choice(log_levels, case_sensitive=False),
    help=f'Set logging level.  {{{", ".join(log_levels[:-1])}}}',
)
@click.version_option(version=str(ibmfloat.__version__))
def cli(input, output, fmt, width, precision, loglevel):
    """
    Convert big-endian IBM floating point numbers to comma-separated values (CSV).
    """
    if loglevel:
        for config in LOG_CONFIG.get('loggers', {}).values():
            config['level'] = loglevel.upper()
        LOG_CONFIG.setdefault('root', {})['level'] = loglevel.upper()
        logging.config.dictConfig(LOG_CONFIG)

    LOG.debug('Ibmfloat version %s', ibmfloat.__version__)
    LOG.debug('CLI arg --loglevel = %r', loglevel)
    LOG.debug('Using logging config %s', json.dumps(LOG_CONFIG, indent=2))

    fmt = fmt.lower()
    size, _ = ibmfloat.series.FORMATS[fmt]
    if width is None:
        width = size
    bytestring = input.read()
    try:
        values = ibmfloat.series.from_bytes(bytestring, fmt, width, int(precision))
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    words = ibmfloat.series.words(bytestring, width, size)
    df = pd.DataFrame({
        'ibm': [f'{word:0{2 * size}x}' for word in words],
        'value': values,
    })
    if fmt == 'sas':
        df['missing'] = ibmfloat.series.missing_values(bytestring, width)
    LOG.info(f'Converted {len(df)} {fmt} numbers')
    df.to_csv(output, index=False)
