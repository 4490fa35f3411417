import logging

import pytest

from compdoc import ASTHandler, Dialect, ParsingError, get_ast_handler


def test_handler_is_shared_per_dialect():
    assert get_ast_handler('tsx') is get_ast_handler(Dialect.TSX)
    assert get_ast_handler('tsx') is not get_ast_handler('typescript')
    assert get_ast_handler().dialect == Dialect.JAVASCRIPT


def test_parse_is_cached():
    handler = get_ast_handler()
    first, code_bytes = handler.parse('const cached = 1;')
    second, _ = handler.parse('const cached = 1;')
    assert first is second
    assert code_bytes == b'const cached = 1;'


def test_parse_program():
    program = get_ast_handler().parse_program('foo.bar();')
    assert program.type == 'program'
    assert not program.has_error


def test_strict_parse_reports_position():
    source = 'const ok = 1;\nconst broken = ;'
    with pytest.raises(ParsingError) as excinfo:
        get_ast_handler().parse_program(source, strict=True)
    assert excinfo.value.position[0] == 2
    assert 'Syntax error in javascript source' in str(excinfo.value)


def test_lenient_parse_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger='compdoc.core.engine.ast_handler'):
        program = get_ast_handler().parse_program('if (')
    assert program.type == 'program'
    assert 'continuing with partial tree' in caplog.text


def test_navigation_helpers(find_node):
    source = 'class Foo { render() { return this.props.label; } }'
    member = find_node(source, 'member_expression')
    method = ASTHandler.find_parent_of_type(member, 'method_definition')
    assert ASTHandler.get_node_text(ASTHandler.find_child_by_field_name(method, 'name')) == 'render'
    assert ASTHandler.find_parent_of_type(member, ['class_declaration', 'class']).type == 'class_declaration'
    assert ASTHandler.find_parent_of_type(member, 'arrow_function') is None
    assert ASTHandler.find_child_by_field_name(None, 'name') is None
    assert ASTHandler.get_node_range(method) == (1, 1)


def test_get_node_text_from_bytes():
    handler = get_ast_handler()
    root, code_bytes = handler.parse('let value = "ünïcode";')
    string = next(handler.iter_descendants(root, 'string'))
    assert handler.get_node_text(string, code_bytes) == '"ünïcode"'
    assert handler.get_node_text(string) == '"ünïcode"'


def test_path_helpers_on_toolkit(last_expression):
    handler = get_ast_handler()
    expression = last_expression('const key = "b";\na[key].c();')
    assert handler.flatten(expression) == ['a', '"b"', 'c']
    assert handler.to_path_string(expression) == 'a."b".c'
