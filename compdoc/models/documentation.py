"""
Models for component documentation.

``Documentation`` is the mutable record that extraction handlers write into;
``DocumentationObject`` is the frozen, normalized result produced from it.
"""
import copy
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

class _DocModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, validate_assignment=True)

class PropDescriptor(_DocModel):
    """Documentation of a single prop or context entry"""
    type: Optional[Dict[str, Any]] = None
    flow_type: Optional[Dict[str, Any]] = None
    ts_type: Optional[Dict[str, Any]] = None
    required: Optional[bool] = None
    description: Optional[str] = None
    default_value: Optional[Dict[str, Any]] = None

class MethodDescriptor(_DocModel):
    """Documentation of a public component method"""
    name: str
    docblock: Optional[str] = None
    modifiers: List[str] = Field(default_factory=list)
    params: List[Dict[str, Any]] = Field(default_factory=list)
    returns: Optional[Dict[str, Any]] = None
    description: Optional[str] = None

class PropEntry(PropDescriptor):
    """Frozen prop descriptor as it appears in a DocumentationObject"""
    model_config = ConfigDict(frozen=True)

class MethodEntry(MethodDescriptor):
    """Frozen method descriptor as it appears in a DocumentationObject"""
    model_config = ConfigDict(frozen=True)

    modifiers: Tuple[str, ...] = ()
    params: Tuple[Dict[str, Any], ...] = ()

class DocumentationObject(_DocModel):
    """Normalized documentation of one component definition"""
    model_config = ConfigDict(frozen=True, extra='forbid')

    description: Optional[str] = None
    display_name: Optional[str] = None
    props: Optional[Mapping[str, PropEntry]] = None
    context: Optional[Mapping[str, PropEntry]] = None
    child_context: Optional[Mapping[str, PropEntry]] = None
    methods: Optional[Tuple[MethodEntry, ...]] = None
    composes: Optional[Tuple[str, ...]] = None
    extra: Optional[Mapping[str, Any]] = None

    @field_validator('props', 'context', 'child_context', 'extra')
    @classmethod
    def _read_only(cls, value: Optional[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
        # mapping slots are exposed as read-only views
        return MappingProxyType(dict(value)) if value is not None else None

    @field_serializer('props', 'context', 'child_context', 'extra', mode='wrap')
    def _serialize_mapping(self, value, handler):
        return handler(dict(value) if value is not None else None)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary with camelCase keys and without empty slots."""
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)

class Documentation:
    """
    Mutable accumulator shared by the handlers run for one definition.

    Collection slots are keyed by name: asking for the descriptor of a known
    prop, context entry or method returns the existing descriptor, so later
    handlers refine what earlier ones wrote instead of adding duplicates.
    """
    __slots__ = ('description', 'display_name', '_props', '_context', '_child_context',
                 '_methods', '_composes', '_data')

    def __init__(self):
        self.description: str = ''
        self.display_name: Optional[str] = None
        self._props: Dict[str, PropDescriptor] = {}
        self._context: Dict[str, PropDescriptor] = {}
        self._child_context: Dict[str, PropDescriptor] = {}
        self._methods: Dict[str, MethodDescriptor] = {}
        self._composes: List[str] = []
        self._data: Dict[str, Any] = {}

    def add_composes(self, module_name: str) -> None:
        """Record a module whose props this component spreads into its own."""
        self._composes.append(module_name)

    def set(self, key: str, value: Any) -> None:
        """Store handler-defined data that has no dedicated slot."""
        self._data[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    @staticmethod
    def _descriptor(collection: Dict[str, PropDescriptor], name: str) -> PropDescriptor:
        descriptor = collection.get(name)
        if descriptor is None:
            descriptor = collection[name] = PropDescriptor()
        return descriptor

    def get_prop_descriptor(self, prop_name: str) -> PropDescriptor:
        return self._descriptor(self._props, prop_name)

    def get_context_descriptor(self, name: str) -> PropDescriptor:
        return self._descriptor(self._context, name)

    def get_child_context_descriptor(self, name: str) -> PropDescriptor:
        return self._descriptor(self._child_context, name)

    def get_method_descriptor(self, method_name: str) -> MethodDescriptor:
        descriptor = self._methods.get(method_name)
        if descriptor is None:
            descriptor = self._methods[method_name] = MethodDescriptor(name=method_name)
        return descriptor

    @property
    def props(self) -> Dict[str, PropDescriptor]:
        return dict(self._props)

    @property
    def methods(self) -> List[MethodDescriptor]:
        return list(self._methods.values())

    @property
    def composes(self) -> List[str]:
        return list(self._composes)

    def to_dict(self) -> Dict[str, Any]:
        """
        Raw projection of the record, before normalization.

        Returns:
            Dictionary keyed by DocumentationObject field names
        """
        return {
            'description': self.description,
            'display_name': self.display_name,
            'props': {name: d.model_dump() for name, d in self._props.items()},
            'context': {name: d.model_dump() for name, d in self._context.items()},
            'child_context': {name: d.model_dump() for name, d in self._child_context.items()},
            'methods': [m.model_dump() for m in self._methods.values()],
            'composes': list(self._composes),
            'extra': copy.deepcopy(self._data),
        }
