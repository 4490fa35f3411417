"""
Input validation helpers for compdoc.

Small validator functions raising the validation errors from
``compdoc.core.error_handling``. They are used at the public entry points
so that misuse fails early with a descriptive message instead of deep
inside the tree-sitter layer.
"""
from typing import Any, Sequence, Tuple, Type, Union

from compdoc.core.error_handling import (
    InvalidParameterError,
    InvalidTypeError,
    MissingParameterError
)

def validate_type(value: Any, expected_type: Union[Type, Tuple[Type, ...]],
                  param_name: str) -> None:
    """
    Validate that a value is of the expected type.

    Args:
        value: The value to check
        expected_type: The expected type(s)
        param_name: The parameter name for error messages

    Raises:
        InvalidTypeError: If the value is not of the expected type
    """
    if value is None:
        return

    if not isinstance(value, expected_type):
        raise InvalidTypeError(param_name, value, expected_type)


def validate_not_none(value: Any, param_name: str) -> None:
    """
    Validate that a value is not None.

    Args:
        value: The value to check
        param_name: The parameter name for error messages

    Raises:
        MissingParameterError: If the value is None
    """
    if value is None:
        raise MissingParameterError(param_name)


def validate_callable(value: Any, param_name: str) -> None:
    """
    Validate that a value can be called.

    Raises:
        MissingParameterError: If the value is None
        InvalidTypeError: If the value is not callable
    """
    validate_not_none(value, param_name)
    if not callable(value):
        raise InvalidTypeError(param_name, value, 'callable')


def validate_callables(values: Sequence[Any], param_name: str) -> None:
    """
    Validate that ``values`` is a list or tuple of callables.

    Raises:
        MissingParameterError: If ``values`` is None
        InvalidTypeError: If ``values`` is not a list or tuple
        InvalidParameterError: If one of the items is not callable
    """
    validate_not_none(values, param_name)
    if not isinstance(values, (list, tuple)):
        raise InvalidTypeError(param_name, values, 'sequence of callables')
    for index, value in enumerate(values):
        if not callable(value):
            raise InvalidParameterError(f'{param_name}[{index}]', value, 'callable')
