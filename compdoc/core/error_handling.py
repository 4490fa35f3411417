"""
Error handling utilities for compdoc.

This module provides the exception hierarchy used throughout compdoc.
Every exception carries an optional context dictionary that is rendered
alongside the message, which makes failures inside resolvers and the
tree-sitter layer easier to trace back to the offending input.
"""
from typing import Optional, Type, Any, Tuple, Union

ERROR_MISSING_DEFINITION = 'No suitable component definition found.'
ERROR_MULTIPLE_DEFINITIONS = 'Multiple exported component definitions found.'

class CompDocError(Exception):
    """Base class for all compdoc exceptions.

    All exceptions specific to compdoc should inherit from this class to allow
    for consistent error handling and identification.
    """
    def __init__(self, message: str, **kwargs):
        self.message = message
        self.context = dict(kwargs.get('context', {}))

        # Capture any additional context information
        for key, value in kwargs.items():
            if key != 'context' and value is not None:
                self.context[key] = value

        super().__init__(message)

    def add_context(self, key: str, value: Any) -> None:
        """Add additional context information to the exception.

        Args:
            key: The context key
            value: The context value
        """
        self.context[key] = value

    def __str__(self) -> str:
        """Return a string representation of the exception.

        If context information is available, it will be included in the string.
        """
        if not self.context:
            return self.message

        context_str = ', '.join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} [Context: {context_str}]"

# ===== Validation Errors =====

class ValidationError(CompDocError):
    """Exception raised for input validation failures.

    This exception should be used when input parameters to functions or methods
    fail to meet required conditions.
    """
    def __init__(self, message: str, parameter: Optional[str] = None,
                 value: Optional[Any] = None, expected: Optional[str] = None, **kwargs):
        super().__init__(message, parameter=parameter, expected=expected, **kwargs)
        self.parameter = parameter
        self.value = value
        self.expected = expected

class MissingParameterError(ValidationError):
    """Exception raised when a required parameter is missing."""
    def __init__(self, parameter: str, **kwargs):
        message = f"Required parameter '{parameter}' is missing"
        super().__init__(message, parameter=parameter, **kwargs)

class InvalidParameterError(ValidationError):
    """Exception raised when a parameter has an invalid value."""
    def __init__(self, parameter: str, value: Any, expected: str, **kwargs):
        message = f"Invalid value for parameter '{parameter}': {value!r}. Expected: {expected}"
        super().__init__(message, parameter=parameter, value=value, expected=expected, **kwargs)

class InvalidTypeError(ValidationError):
    """Exception raised when a parameter has an incorrect type."""
    def __init__(self, parameter: str, value: Any, expected_type: Union[Type, Tuple[Type, ...], str], **kwargs):
        if isinstance(expected_type, str):
            expected_type_str = expected_type
        elif isinstance(expected_type, tuple):
            expected_type_str = ', '.join(t.__name__ for t in expected_type)
        else:
            expected_type_str = expected_type.__name__
        message = f"Invalid type for parameter '{parameter}': {type(value).__name__}. Expected: {expected_type_str}"
        super().__init__(message, parameter=parameter, value=value, expected=expected_type_str, **kwargs)

# ===== Configuration Errors =====

class ConfigurationError(CompDocError):
    """Exception raised for issues with configuration settings."""
    pass

class InvalidConfigurationError(ConfigurationError):
    """Exception raised when a configuration setting has an invalid value."""
    def __init__(self, setting: str, value: Any, reason: str, **kwargs):
        message = f"Invalid configuration setting '{setting}': {value}. Reason: {reason}"
        super().__init__(message, setting=setting, value=value, reason=reason, **kwargs)

# ===== Parsing Errors =====

class ParsingError(CompDocError):
    """Exception raised for failures during source parsing.

    Tree-sitter always produces a tree, so this is only raised when the
    caller asked for strict parsing and the tree contains error nodes.
    """
    def __init__(self, message: str, code_snippet: Optional[str] = None,
                 position: Optional[Tuple[int, int]] = None, **kwargs):
        super().__init__(message, code_snippet=code_snippet, position=position, **kwargs)
        self.code_snippet = code_snippet
        self.position = position

class UnsupportedDialectError(ParsingError):
    """Exception raised when no tree-sitter grammar exists for a dialect."""
    def __init__(self, dialect: str, **kwargs):
        message = f"Unsupported dialect: '{dialect}'"
        super().__init__(message, dialect=dialect, **kwargs)
        self.dialect = dialect

# ===== Definition Resolution Errors =====

class DefinitionResolutionError(CompDocError):
    """Exception raised when component definitions cannot be determined."""
    pass

class MissingDefinitionError(DefinitionResolutionError):
    """Raised when the definition resolver yields no candidate."""
    def __init__(self):
        super().__init__(ERROR_MISSING_DEFINITION)

class MultipleDefinitionsError(DefinitionResolutionError):
    """Raised when a single-definition resolver finds several exports."""
    def __init__(self, count: Optional[int] = None):
        super().__init__(ERROR_MULTIPLE_DEFINITIONS, count=count)
        self.count = count
