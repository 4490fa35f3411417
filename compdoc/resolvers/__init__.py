"""
Definition resolvers shipped with compdoc.
"""
from .component_definitions import (
    find_all_component_definitions,
    find_all_exported_component_definitions,
    find_exported_component_definition,
)

__all__ = [
    'find_all_component_definitions',
    'find_all_exported_component_definitions',
    'find_exported_component_definition',
]
