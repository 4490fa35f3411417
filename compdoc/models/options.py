"""
Parser options forwarded to the tree-sitter layer.
"""
import logging
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from compdoc.core.config import config
from compdoc.core.error_handling import InvalidConfigurationError
from .enums import Dialect

logger = logging.getLogger(__name__)

def _default_dialect() -> Dialect:
    value = config.get('parsing', 'dialect', Dialect.JAVASCRIPT.value)
    try:
        return Dialect(value)
    except ValueError:
        raise InvalidConfigurationError('parsing.dialect', value, 'no grammar for this dialect') from None

def _default_strict() -> bool:
    return bool(config.get('parsing', 'strict', False))

class ParserOptions(BaseModel):
    """Dialect and syntax flags for one parse operation"""
    model_config = ConfigDict(frozen=True, extra='forbid')

    dialect: Dialect = Field(default_factory=_default_dialect)
    strict: bool = Field(default_factory=_default_strict)

    @classmethod
    def coerce(cls, options: Optional[Union['ParserOptions', Dict[str, Any]]]) -> 'ParserOptions':
        """
        Build options from ``None``, a mapping or an existing instance.

        Args:
            options: Caller supplied options

        Returns:
            ParserOptions instance
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        logger.debug(f'Building parser options from {options!r}')
        return cls.model_validate(options)
