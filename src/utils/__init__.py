"""Cross-cutting utilities (lowest dependency layer).

This package provides shared primitives for:
    - Config validation (validators)
    - YAML loading (fs)
    - Matrix helpers and curve basis matrices (matrix)
    - Unified logging (logging_config)

No module in utils/ may import from upper layers (raster).

Convenience imports:
    from src.utils import fs, matrix, validators
    from src.utils.logging_config import setup_logging, get_logger
"""

from . import fs
from . import logging_config
from . import matrix
from . import validators

from .logging_config import get_logger, push_context, setup_logging

__all__ = [
    # Modules
    'fs',
    'logging_config',
    'matrix',
    'validators',
    # Direct exports
    'setup_logging',
    'get_logger',
    'push_context',
]
