"""
Lexical value resolution for JavaScript / TypeScript syntax trees.

``resolve_to_value`` maps a reference to the expression it was bound to.
It only understands plain declarations in enclosing blocks; anything it
cannot prove (parameters, loop variables, catch parameters, imports,
destructuring) is reported as unresolved by returning ``None``.
"""
import logging
from typing import Optional, Set

from tree_sitter import Node

from compdoc.core.engine.nodes import first_named_child, iter_descendants, named_children, node_text

logger = logging.getLogger(__name__)

DECLARATION_TYPES = {'lexical_declaration', 'variable_declaration'}
NAMED_DECLARATION_TYPES = {
    'function_declaration',
    'generator_function_declaration',
    'class_declaration',
    'abstract_class_declaration',
}
FUNCTION_TYPES = {
    'function_declaration',
    'generator_function_declaration',
    'function_expression',
    'function',
    'generator_function',
    'arrow_function',
    'method_definition',
}
PATTERN_NAME_TYPES = {'identifier', 'shorthand_property_identifier_pattern'}

def _unwrap_parentheses(node: Node) -> Node:
    while node is not None and node.type == 'parenthesized_expression':
        node = first_named_child(node)
    return node

def _pattern_binds(pattern: Optional[Node], name: str) -> bool:
    """Check whether a binding pattern (plain or destructuring) introduces ``name``."""
    if pattern is None:
        return False
    if pattern.type == 'assignment_pattern':
        pattern = pattern.child_by_field_name('left')
    return any(node_text(target) == name for target in iter_descendants(pattern, PATTERN_NAME_TYPES))

def _shadows(scope: Node, name: str) -> bool:
    # loop variables and catch parameters have no value known statically
    if scope.type == 'for_in_statement':
        return _pattern_binds(scope.child_by_field_name('left'), name)
    if scope.type == 'catch_clause':
        return _pattern_binds(scope.child_by_field_name('parameter'), name)
    return scope.type in FUNCTION_TYPES and _binds_parameter(scope, name)

def _binds_parameter(function_node: Node, name: str) -> bool:
    single = function_node.child_by_field_name('parameter')
    if single is not None:
        return single.type == 'identifier' and node_text(single) == name
    parameters = function_node.child_by_field_name('parameters')
    for parameter in named_children(parameters):
        # TypeScript wraps parameters in required_parameter / optional_parameter
        target = parameter.child_by_field_name('pattern') or parameter
        if target.type == 'assignment_pattern':
            target = target.child_by_field_name('left')
        if target is not None and target.type == 'identifier' and node_text(target) == name:
            return True
    return False

def _find_declaration(container: Node, name: str):
    """
    Look for a binding of ``name`` among the direct statements of ``container``.

    Returns:
        ``(True, value)`` when a binding was found (``value`` may be None for
        declarations without initializer), ``(False, None)`` otherwise.
    """
    for statement in named_children(container):
        if statement.type == 'export_statement':
            statement = statement.child_by_field_name('declaration') or statement
        if statement.type in DECLARATION_TYPES:
            for declarator in named_children(statement):
                if declarator.type != 'variable_declarator':
                    continue
                target = declarator.child_by_field_name('name')
                if target is not None and target.type == 'identifier' and node_text(target) == name:
                    return True, declarator.child_by_field_name('value')
        elif statement.type in NAMED_DECLARATION_TYPES:
            target = statement.child_by_field_name('name')
            if target is not None and node_text(target) == name:
                return True, statement
    return False, None

def lookup_binding(identifier: Node) -> Optional[Node]:
    """
    Find the value bound to ``identifier`` in its enclosing scopes.

    Args:
        identifier: An ``identifier`` node

    Returns:
        The initializer or declaration node, or None when unresolved
    """
    name = node_text(identifier)
    current = identifier.parent
    while current is not None:
        if _shadows(current, name):
            logger.debug(f"'{name}' is bound by a {current.type}, leaving unresolved")
            return None
        found, value = _find_declaration(current, name)
        if found:
            return value
        current = current.parent
    return None

def resolve_to_value(node: Optional[Node], _seen: Optional[Set[int]] = None) -> Optional[Node]:
    """
    Resolve ``node`` to the expression it evaluates to.

    Non-identifier expressions resolve to themselves. Identifiers are looked
    up lexically; chains such as ``const a = b; const b = 'x'`` are followed
    until a non-identifier value is reached.

    Args:
        node: Any expression node

    Returns:
        The resolved node, or None if the reference cannot be resolved
    """
    node = _unwrap_parentheses(node)
    if node is None:
        return None
    if node.type != 'identifier':
        return node
    seen = _seen if _seen is not None else set()
    if node.id in seen:
        logger.debug(f"Cyclic binding for '{node_text(node)}'")
        return None
    seen.add(node.id)
    value = lookup_binding(node)
    if value is None:
        return None
    return resolve_to_value(value, seen)
