"""monadkit: Option and Writer containers for Python 3.13+.

Flat imports (preferred):
    from monadkit import Option, Some, Nothing, Writer
    from monadkit import some, none, from_nullable, tell, writer_of

Submodule imports (for organization):
    from monadkit.option import Some, Nothing, map_opt
    from monadkit.writer import Writer, flat_map_w
"""

from monadkit._config import LoggingConfig, get_config, init
from monadkit._logging import configure_logging, get_logger
from monadkit.errors import MonadkitError, NoneValueError
from monadkit.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    filter_opt,
    flat_map_opt,
    fold_opt,
    from_nullable,
    get_or_else,
    is_none,
    is_some,
    map_opt,
    none,
    some,
    to_nullable,
)
from monadkit.writer import (
    Writer,
    flat_map_w,
    fold_w,
    get_log,
    get_value,
    map_w,
    tell,
    writer_of,
)

__all__ = [
    # Configuration
    'LoggingConfig',
    # Errors
    'MonadkitError',
    'NoneValueError',
    # Option types
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    # Writer type
    'Writer',
    # Logging
    'configure_logging',
    # Option functions
    'filter_opt',
    'flat_map_opt',
    # Writer functions
    'flat_map_w',
    'fold_opt',
    'fold_w',
    'from_nullable',
    'get_config',
    'get_log',
    'get_logger',
    'get_or_else',
    'get_value',
    'init',
    'is_none',
    'is_some',
    'map_opt',
    'map_w',
    'none',
    'some',
    'tell',
    'to_nullable',
    'writer_of',
]
