r"""@package symfunc.config

Settings for rendering and the demo driver.

Settings are read with `configparser` from `config.cfg` in the project root,
which may be overridden locally by a (not versioned) `config.mine.cfg` next
to it. Missing files are skipped, in which case the built-in defaults are
used.
"""

from configparser import ConfigParser
import logging
import os.path as op


__all__ = [
    "DEFAULTS",
    "default_config_files",
    "load_config",
]


logger = logging.getLogger(__name__)


## Built-in default values per section.
DEFAULTS = {
    'format': {
        'max_fraction_digits': '3',
        'grouping': 'yes',
        'decimal_point': '.',
        'thousands_sep': ',',
    },
    'demo': {
        'point': '0.1',
        'value_format': '%f',
    },
}


def default_config_files():
    r"""Return the config files read when none are given explicitly."""
    root_dir = op.realpath(op.join(op.dirname(__file__), op.pardir))
    return [op.join(root_dir, 'config.cfg'),
            op.join(root_dir, 'config.mine.cfg')]


def load_config(files=None):
    r"""Create a `ConfigParser` with defaults and the given files applied.

    @param files
        List of config files to read (later ones take precedence). Default
        are the files returned by default_config_files().
    """
    # Interpolation would interpret the '%' in value formats.
    config = ConfigParser(interpolation=None)
    config.read_dict(DEFAULTS)
    if files is None:
        files = default_config_files()
    read = config.read(files)
    for fname in read:
        logger.debug("Read config file: %s", fname)
    return config
