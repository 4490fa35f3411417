"""
Predicates recognising component definitions in JavaScript / TypeScript trees.
"""
from typing import Iterator, Optional

from tree_sitter import Node

from compdoc.core.engine.nodes import first_named_child, named_children, node_text
from compdoc.core.utils.expression_path import flatten, to_path_string
from compdoc.core.utils.value_resolution import resolve_to_value

CLASS_TYPES = {'class_declaration', 'abstract_class_declaration', 'class'}
FUNCTION_TYPES = {'function_declaration', 'function_expression', 'function', 'arrow_function'}
JSX_TYPES = {'jsx_element', 'jsx_self_closing_element', 'jsx_fragment'}
COMPONENT_BASE_NAMES = {'Component', 'PureComponent'}
CREATE_CLASS_PATHS = {'React.createClass', 'createReactClass', 'createClass'}

def get_superclass(class_node: Node) -> Optional[Node]:
    """Return the expression after ``extends`` of a class, if any."""
    for child in named_children(class_node):
        if child.type != 'class_heritage':
            continue
        for clause in named_children(child):
            if clause.type == 'extends_clause':
                return clause.child_by_field_name('value') or first_named_child(clause)
        return first_named_child(child)
    return None

def has_render_method(class_node: Node) -> bool:
    body = class_node.child_by_field_name('body')
    for member in named_children(body):
        if member.type == 'method_definition' and node_text(member.child_by_field_name('name')) == 'render':
            return True
    return False

def is_component_class(node: Optional[Node]) -> bool:
    """
    Check whether ``node`` is a class component.

    A class counts as a component when it extends ``Component`` /
    ``PureComponent`` (bare or through a namespace such as
    ``React.Component``) or when it declares a ``render`` method.
    """
    if node is None or node.type not in CLASS_TYPES:
        return False
    superclass = get_superclass(node)
    if superclass is not None:
        path = flatten(superclass)
        if path and path[-1] in COMPONENT_BASE_NAMES:
            return True
    return has_render_method(node)

def is_create_class_call(node: Optional[Node]) -> bool:
    """Check for ``React.createClass({...})`` or ``createReactClass({...})``."""
    if node is None or node.type != 'call_expression':
        return False
    callee = node.child_by_field_name('function')
    return to_path_string(callee) in CREATE_CLASS_PATHS

def get_create_class_definition(call: Node) -> Optional[Node]:
    """Return the object literal passed to a createClass call."""
    argument = first_named_child(call.child_by_field_name('arguments'))
    value = resolve_to_value(argument)
    if value is not None and value.type == 'object':
        return value
    return None

def _unwrap_parentheses(node: Optional[Node]) -> Optional[Node]:
    while node is not None and node.type == 'parenthesized_expression':
        node = first_named_child(node)
    return node

def _is_jsx(node: Optional[Node]) -> bool:
    node = _unwrap_parentheses(node)
    if node is None:
        return False
    if node.type in JSX_TYPES:
        return True
    if node.type == 'ternary_expression':
        return _is_jsx(node.child_by_field_name('consequence')) or _is_jsx(node.child_by_field_name('alternative'))
    if node.type == 'binary_expression':
        return _is_jsx(node.child_by_field_name('right'))
    return False

def _own_return_statements(body: Node) -> Iterator[Node]:
    # nested functions and classes have their own returns
    stack = list(reversed(named_children(body)))
    while stack:
        current = stack.pop()
        if current.type == 'return_statement':
            yield current
        elif current.type not in FUNCTION_TYPES and current.type not in CLASS_TYPES:
            stack.extend(reversed(named_children(current)))

def is_stateless_component(node: Optional[Node]) -> bool:
    """Check whether ``node`` is a function returning JSX."""
    if node is None or node.type not in FUNCTION_TYPES:
        return False
    body = node.child_by_field_name('body')
    if body is None:
        return False
    if body.type != 'statement_block':
        return _is_jsx(body)
    return any(_is_jsx(first_named_child(statement)) for statement in _own_return_statements(body))

def resolve_component_definition(node: Optional[Node]) -> Optional[Node]:
    """
    Resolve an exported value to the component definition behind it.

    Identifiers are followed to their bindings and higher-order component
    calls such as ``React.memo(Foo)`` or ``connect(mapState)(Foo)`` are
    unwrapped through their first argument.

    Returns:
        The class, function or createClass object node, or None
    """
    seen = set()
    node = resolve_to_value(node)
    while node is not None and node.id not in seen:
        seen.add(node.id)
        if is_component_class(node) or is_stateless_component(node):
            return node
        if node.type != 'call_expression':
            return None
        if is_create_class_call(node):
            return get_create_class_definition(node)
        node = resolve_to_value(first_named_child(node.child_by_field_name('arguments')))
    return None
