"""
Flattening of member and call expressions into path segments.

``foo.bar.baz`` becomes ``['foo', 'bar', 'baz']`` and ``this.props.x()``
becomes ``['this', 'props', 'x']``. Computed keys are resolved through a
value resolver and degrade to ``'<computed>'`` when they cannot be resolved.
"""
from collections import deque
from typing import Callable, List, Optional

from tree_sitter import Node

from compdoc.core.engine.nodes import first_named_child, named_children, node_text
from compdoc.core.utils.value_resolution import resolve_to_value

COMPUTED_SEGMENT = '<computed>'

IDENTIFIER_TYPES = {
    'identifier',
    'property_identifier',
    'shorthand_property_identifier',
    'private_property_identifier',
    'type_identifier',
    'undefined',
}
LITERAL_TYPES = {'string', 'number', 'true', 'false', 'null', 'regex'}

ValueResolver = Callable[[Optional[Node]], Optional[Node]]

def _stringify_key(key: Optional[Node], value_resolver: ValueResolver) -> str:
    if key is not None and key.type == 'computed_property_name':
        key = first_named_child(key)
    return to_path_string(key, value_resolver)

def _stringify_member(member: Node, value_resolver: ValueResolver) -> str:
    if member.type == 'pair':
        key = _stringify_key(member.child_by_field_name('key'), value_resolver)
        value = to_path_string(member.child_by_field_name('value'), value_resolver)
        return f'{key}: {value}'
    if member.type == 'shorthand_property_identifier':
        name = node_text(member)
        return f'{name}: {name}'
    if member.type == 'spread_element':
        return '...' + to_path_string(first_named_child(member), value_resolver)
    # methods, getters and setters have a key but no value expression
    return _stringify_key(member.child_by_field_name('name'), value_resolver) + ': '

def flatten(node: Optional[Node], value_resolver: ValueResolver = resolve_to_value) -> List[str]:
    """
    Split a member expression or call expression into its parts.

    Args:
        node: Expression node to flatten
        value_resolver: Resolves computed keys to the expression they denote

    Returns:
        Path segments ordered from root to leaf
    """
    parts = deque([node])
    result: List[str] = []

    while parts:
        current = parts.popleft()
        if current is None:
            continue
        kind = current.type
        if kind == 'call_expression':
            parts.append(current.child_by_field_name('function'))
        elif kind == 'member_expression':
            parts.append(current.child_by_field_name('object'))
            result.append(node_text(current.child_by_field_name('property')))
        elif kind == 'subscript_expression':
            parts.append(current.child_by_field_name('object'))
            resolved = value_resolver(current.child_by_field_name('index'))
            if resolved is not None:
                # the key path is spliced as is and reversed along with the rest
                result.extend(flatten(resolved, value_resolver))
            else:
                result.append(COMPUTED_SEGMENT)
        elif kind == 'parenthesized_expression':
            parts.append(first_named_child(current))
        elif kind in IDENTIFIER_TYPES or kind in LITERAL_TYPES:
            result.append(node_text(current))
        elif kind == 'this':
            result.append('this')
        elif kind == 'object':
            members = [_stringify_member(member, value_resolver) for member in named_children(current)]
            result.append('{' + ', '.join(members) + '}')
        elif kind == 'array':
            elements = [to_path_string(element, value_resolver) for element in named_children(current)]
            result.append('[' + ', '.join(elements) + ']')

    result.reverse()
    return result

def to_path_string(node: Optional[Node], value_resolver: ValueResolver = resolve_to_value) -> str:
    """
    Creates a string representation of a member expression.
    """
    return '.'.join(flatten(node, value_resolver))
