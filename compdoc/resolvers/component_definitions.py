"""
Built-in definition resolvers.

Each resolver has the ``(program, toolkit)`` signature expected by
``extract_documentation``. ``find_exported_component_definition`` returns a
single node and therefore yields a single documentation object; the other
two return lists.
"""
import logging
from typing import TYPE_CHECKING, Iterator, List, Optional

from tree_sitter import Node

from compdoc.core.engine.nodes import first_named_child, iter_descendants, named_children
from compdoc.core.error_handling import MultipleDefinitionsError
from compdoc.core.utils.expression_path import flatten
from compdoc.resolvers.component_checks import (
    get_create_class_definition,
    is_component_class,
    is_create_class_call,
    is_stateless_component,
    resolve_component_definition,
)

if TYPE_CHECKING:
    from compdoc.core.engine.ast_handler import ASTHandler

logger = logging.getLogger(__name__)

DECLARATION_TYPES = {'lexical_declaration', 'variable_declaration'}

def _unique(nodes: List[Node]) -> List[Node]:
    seen = set()
    result = []
    for node in nodes:
        if node.id not in seen:
            seen.add(node.id)
            result.append(node)
    return result

def find_all_component_definitions(program: Node, toolkit: Optional['ASTHandler'] = None) -> List[Node]:
    """
    Find every component definition in the program, exported or not.

    Class components, createClass objects and functions returning JSX are
    collected in source order. The contents of a found definition are not
    searched further, so render helpers inside a component are not reported.

    Args:
        program: Program node
        toolkit: Navigation toolkit used for the descendant walk, if given

    Returns:
        List of definition nodes
    """
    walk = toolkit.iter_descendants if toolkit is not None else iter_descendants
    definitions = []
    enclosing = None
    for node in walk(program):
        # pre-order walk: nodes inside the last match start before it ends
        if enclosing is not None and node.start_byte < enclosing.end_byte:
            continue
        definition = None
        if is_component_class(node) or is_stateless_component(node):
            definition = node
        elif is_create_class_call(node):
            definition = get_create_class_definition(node)
        if definition is not None:
            definitions.append(definition)
            enclosing = node
    logger.debug(f'Found {len(definitions)} component definitions')
    return _unique(definitions)

def _is_module_exports(target: Optional[Node]) -> bool:
    path = flatten(target)
    return path[:2] == ['module', 'exports'] or (len(path) == 2 and path[0] == 'exports')

def _exported_values(program: Node) -> Iterator[Node]:
    for statement in named_children(program):
        if statement.type == 'export_statement':
            value = statement.child_by_field_name('value')
            declaration = statement.child_by_field_name('declaration')
            if value is not None:
                yield value
            elif declaration is not None and declaration.type in DECLARATION_TYPES:
                for declarator in named_children(declaration):
                    if declarator.type == 'variable_declarator':
                        yield declarator.child_by_field_name('value')
            elif declaration is not None:
                yield declaration
            elif statement.child_by_field_name('source') is None:
                for clause in named_children(statement):
                    if clause.type != 'export_clause':
                        continue
                    for specifier in named_children(clause):
                        yield specifier.child_by_field_name('name')
        elif statement.type == 'expression_statement':
            expression = first_named_child(statement)
            if expression is not None and expression.type == 'assignment_expression' \
                    and _is_module_exports(expression.child_by_field_name('left')):
                yield expression.child_by_field_name('right')

def find_all_exported_component_definitions(program: Node, toolkit: Optional['ASTHandler'] = None) -> List[Node]:
    """
    Find the component definitions exported by the module.

    ES module exports (default, named and ``export { ... }`` clauses) and
    CommonJS assignments to ``module.exports`` / ``exports.X`` are
    considered. Re-exports from other modules are ignored.

    Returns:
        List of definition nodes in export order
    """
    definitions = []
    for value in _exported_values(program):
        definition = resolve_component_definition(value)
        if definition is not None:
            definitions.append(definition)
    return _unique(definitions)

def find_exported_component_definition(program: Node, toolkit: Optional['ASTHandler'] = None) -> Optional[Node]:
    """
    Find the single component definition exported by the module.

    Returns:
        The definition node, or None if nothing is exported

    Raises:
        MultipleDefinitionsError: If more than one component is exported
    """
    definitions = find_all_exported_component_definitions(program, toolkit)
    if len(definitions) > 1:
        raise MultipleDefinitionsError(count=len(definitions))
    return definitions[0] if definitions else None
