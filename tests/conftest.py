import pytest

from compdoc.core.config import config
from compdoc.core.engine.ast_handler import get_ast_handler
from compdoc.core.engine.nodes import iter_descendants


@pytest.fixture(autouse=True)
def reset_config():
    """Each test starts from the default configuration."""
    config.reset()
    yield
    config.reset()


@pytest.fixture
def parse_program():
    """Parses a snippet and returns the program node."""
    def _parse(source, dialect='javascript'):
        root, _ = get_ast_handler(dialect).parse(source)
        return root
    return _parse


@pytest.fixture
def find_node(parse_program):
    """Returns the n-th node of the given type in a snippet."""
    def _find(source, node_type, index=0, dialect='javascript'):
        nodes = list(iter_descendants(parse_program(source, dialect), node_type))
        assert len(nodes) > index, f'no {node_type} #{index} in {source!r}'
        return nodes[index]
    return _find


@pytest.fixture
def last_expression(parse_program):
    """Returns the expression of the last expression statement in a snippet."""
    def _expression(source, dialect='javascript'):
        program = parse_program(source, dialect)
        statements = [child for child in program.named_children if child.type == 'expression_statement']
        assert statements, f'no expression statement in {source!r}'
        return statements[-1].named_children[0]
    return _expression
