"""
Tree-sitter grammars and parsers for the supported dialects.
"""
import logging
from typing import Dict, Union

import tree_sitter_javascript
import tree_sitter_typescript
from tree_sitter import Language, Parser

from compdoc.core.error_handling import UnsupportedDialectError
from compdoc.models.enums import Dialect

logger = logging.getLogger(__name__)

JS_LANGUAGE = Language(tree_sitter_javascript.language())
TS_LANGUAGE = Language(tree_sitter_typescript.language_typescript())
TSX_LANGUAGE = Language(tree_sitter_typescript.language_tsx())

LANGUAGES: Dict[str, Language] = {
    Dialect.JAVASCRIPT.value: JS_LANGUAGE,
    Dialect.TYPESCRIPT.value: TS_LANGUAGE,
    Dialect.TSX.value: TSX_LANGUAGE,
}

def _dialect_code(dialect: Union[Dialect, str]) -> str:
    return dialect.value if isinstance(dialect, Dialect) else str(dialect).lower()

def get_language(dialect: Union[Dialect, str]) -> Language:
    """
    Return the tree-sitter language for a dialect.

    Raises:
        UnsupportedDialectError: If no grammar is registered for the dialect
    """
    code = _dialect_code(dialect)
    language = LANGUAGES.get(code)
    if language is None:
        raise UnsupportedDialectError(code)
    return language

def get_parser(dialect: Union[Dialect, str]) -> Parser:
    """Create a fresh parser bound to the dialect's grammar."""
    language = get_language(dialect)
    logger.debug(f'Creating tree-sitter parser for {_dialect_code(dialect)}')
    return Parser(language)
