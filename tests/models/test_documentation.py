import pytest

from compdoc import Documentation, MethodDescriptor, ParserOptions, PropDescriptor
from compdoc.core.config import config
from compdoc.models.enums import Dialect


def test_prop_descriptor_is_keyed_by_name():
    documentation = Documentation()
    first = documentation.get_prop_descriptor('size')
    first.required = True
    second = documentation.get_prop_descriptor('size')
    second.description = 'Size of the button'
    assert first is second
    assert list(documentation.props) == ['size']
    assert documentation.props['size'] == PropDescriptor(required=True, description='Size of the button')


def test_context_slots_are_separate():
    documentation = Documentation()
    documentation.get_context_descriptor('theme')
    documentation.get_child_context_descriptor('locale')
    raw = documentation.to_dict()
    assert list(raw['context']) == ['theme']
    assert list(raw['child_context']) == ['locale']
    assert raw['props'] == {}


def test_method_descriptor_is_keyed_by_name():
    documentation = Documentation()
    documentation.get_method_descriptor('focus').params.append({'name': 'options'})
    documentation.get_method_descriptor('focus').returns = {'type': {'name': 'void'}}
    assert documentation.methods == [
        MethodDescriptor(name='focus', params=[{'name': 'options'}], returns={'type': {'name': 'void'}})
    ]


def test_extra_data():
    documentation = Documentation()
    documentation.set('tags', ['a'])
    assert documentation.get('tags') == ['a']
    assert documentation.get('missing') is None
    assert documentation.get('missing', 'default') == 'default'


def test_composes_keeps_insertion_order():
    documentation = Documentation()
    documentation.add_composes('b')
    documentation.add_composes('a')
    assert documentation.composes == ['b', 'a']


def test_record_schema_is_closed():
    documentation = Documentation()
    with pytest.raises(AttributeError):
        documentation.unknown_slot = 1


def test_descriptor_aliases():
    descriptor = PropDescriptor.model_validate({'defaultValue': {'value': '1'}, 'tsType': {'name': 'number'}})
    assert descriptor.default_value == {'value': '1'}
    assert descriptor.ts_type == {'name': 'number'}


def test_parser_options_defaults_come_from_config():
    assert ParserOptions().dialect == Dialect.JAVASCRIPT
    assert ParserOptions().strict is False
    config.set('parsing', 'dialect', 'tsx')
    config.set('parsing', 'strict', True)
    options = ParserOptions()
    assert options.dialect == Dialect.TSX
    assert options.strict is True


def test_parser_options_coerce():
    options = ParserOptions(dialect='typescript')
    assert ParserOptions.coerce(options) is options
    assert ParserOptions.coerce({'dialect': 'tsx'}).dialect == Dialect.TSX
    assert ParserOptions.coerce(None) == ParserOptions()
