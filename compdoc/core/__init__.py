"""
Core components for compdoc.
"""
from .error_handling import (
    CompDocError, MissingDefinitionError, MultipleDefinitionsError, ParsingError,
    ERROR_MISSING_DEFINITION
)
