import logging

import pytest

from compdoc import (
    MultipleDefinitionsError,
    find_all_component_definitions,
    find_all_exported_component_definitions,
    find_exported_component_definition,
)
from compdoc.core.engine.ast_handler import get_ast_handler
from compdoc.core.engine.nodes import node_text

logger = logging.getLogger(__name__)

ALL_KINDS = """
import React, { Component } from 'react';
import createReactClass from 'create-react-class';

class ClassComponent extends React.Component {
  renderItem = () => <li />;
  render() { return <ul>{this.renderItem()}</ul>; }
}

class RenderOnly {
  render() { return null; }
}

const Legacy = createReactClass({
  render() { return <div />; }
});

function Stateless(props) {
  if (!props.visible) {
    return null;
  }
  return (
    <div>{props.children}</div>
  );
}

const Arrow = ({ label }) => label ? <span>{label}</span> : null;

function helper(value) {
  return value * 2;
}
"""


def _names(nodes):
    names = []
    for node in nodes:
        name = node.child_by_field_name('name')
        if name is None:
            # anonymous definitions are named by their declarator
            parent = node.parent
            while parent is not None and parent.type != 'variable_declarator':
                parent = parent.parent
            name = parent.child_by_field_name('name') if parent is not None else None
        names.append(node_text(name))
    return names


def test_find_all_component_definitions(parse_program):
    definitions = find_all_component_definitions(parse_program(ALL_KINDS))
    logger.debug(f'Found definitions: {[d.type for d in definitions]}')
    assert [d.type for d in definitions] == [
        'class_declaration', 'class_declaration', 'object', 'function_declaration', 'arrow_function'
    ]
    assert _names(definitions) == ['ClassComponent', 'RenderOnly', 'Legacy', 'Stateless', 'Arrow']


def test_find_all_walks_through_toolkit(parse_program):
    program = parse_program(ALL_KINDS)
    handler = get_ast_handler()
    walked = []

    class RecordingToolkit:
        def iter_descendants(self, node, types=None):
            for descendant in handler.iter_descendants(node, types):
                walked.append(descendant.type)
                yield descendant

    definitions = find_all_component_definitions(program, RecordingToolkit())
    assert _names(definitions) == _names(find_all_component_definitions(program, handler))
    assert _names(definitions) == ['ClassComponent', 'RenderOnly', 'Legacy', 'Stateless', 'Arrow']
    assert walked[0] == 'program'


def test_nested_components_are_not_reported(parse_program):
    program = parse_program("""
class Outer extends React.Component {
  render() {
    const Inner = () => <b />;
    return <Inner />;
  }
}
const After = () => <i />;
""")
    assert _names(find_all_component_definitions(program)) == ['Outer', 'After']


def test_find_all_ignores_plain_code(parse_program):
    program = parse_program('function add(a, b) { return a + b; }\nclass Model { save() {} }')
    assert find_all_component_definitions(program) == []


def test_find_all_with_tsx(parse_program):
    source = """
interface Props { title: string }
export class Header extends React.PureComponent<Props> {
  render() { return <h1>{this.props.title}</h1>; }
}
export const Footer = (props: Props): JSX.Element => <footer />;
"""
    definitions = find_all_component_definitions(parse_program(source, 'tsx'))
    assert _names(definitions) == ['Header', 'Footer']


def test_exported_default_class(parse_program):
    program = parse_program("""
export default class Button extends Component {
  render() { return <button />; }
}
""")
    definition = find_exported_component_definition(program)
    assert definition.type in ('class_declaration', 'class')
    assert _names([definition]) == ['Button']


def test_exported_identifier(parse_program):
    program = parse_program('const Link = () => <a />;\nexport default Link;')
    assert _names([find_exported_component_definition(program)]) == ['Link']


def test_exported_anonymous_class(parse_program):
    program = parse_program('export default class extends React.Component {}')
    assert find_exported_component_definition(program).type == 'class'


def test_module_exports(parse_program):
    program = parse_program("""
var Component = require('react').Component;
class Panel extends Component { render() { return null; } }
module.exports = Panel;
""")
    assert _names([find_exported_component_definition(program)]) == ['Panel']


def test_exports_property(parse_program):
    program = parse_program('function Icon() { return <svg />; }\nexports.Icon = Icon;')
    assert _names([find_exported_component_definition(program)]) == ['Icon']


def test_exported_create_class(parse_program):
    program = parse_program('module.exports = React.createClass({ render() { return <div />; } });')
    assert find_exported_component_definition(program).type == 'object'


def test_higher_order_components_are_unwrapped(parse_program):
    memo = parse_program('const Card = () => <div />;\nexport default React.memo(Card);')
    assert _names([find_exported_component_definition(memo)]) == ['Card']

    connected = parse_program(
        'function List(props) { return <ul />; }\nexport default connect(mapStateToProps)(List);'
    )
    assert _names([find_exported_component_definition(connected)]) == ['List']


def test_export_clause(parse_program):
    program = parse_program("const Tab = () => <li />;\nconst unused = 1;\nexport { Tab, unused };")
    assert _names(find_all_exported_component_definitions(program)) == ['Tab']


def test_reexports_are_ignored(parse_program):
    program = parse_program("export { Button } from './Button';")
    assert find_exported_component_definition(program) is None


def test_non_component_exports(parse_program):
    program = parse_program('export const answer = 42;\nexport function add(a, b) { return a + b; }')
    assert find_exported_component_definition(program) is None
    assert find_all_exported_component_definitions(program) == []


def test_multiple_exports(parse_program):
    program = parse_program('export const A = () => <a />;\nexport const B = () => <b />;')
    assert _names(find_all_exported_component_definitions(program)) == ['A', 'B']
    with pytest.raises(MultipleDefinitionsError) as excinfo:
        find_exported_component_definition(program)
    assert excinfo.value.count == 2


def test_same_definition_exported_twice(parse_program):
    program = parse_program('const A = () => <a />;\nexport { A };\nexport default A;')
    assert _names([find_exported_component_definition(program)]) == ['A']
