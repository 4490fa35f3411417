"""
Normalization of documentation records.

``post_process_documentation`` turns the record filled in by the handler
chain into a frozen ``DocumentationObject``. The transformation is
idempotent, so it is safe to run it again on its own output.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from compdoc.core.config import config
from compdoc.core.error_handling import InvalidTypeError
from compdoc.models.documentation import Documentation, DocumentationObject

logger = logging.getLogger(__name__)

DocumentationSource = Union[Documentation, DocumentationObject, Mapping[str, Any]]

def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False

def _clean_text(value: Optional[str], trim: bool) -> Optional[str]:
    if value is None:
        return None
    if trim:
        value = value.strip()
    return value or None

def _clean_descriptor(descriptor: Dict[str, Any], trim: bool) -> Dict[str, Any]:
    descriptor = dict(descriptor)
    descriptor['description'] = _clean_text(descriptor.get('description'), trim)
    # props with default values should not be required
    if descriptor.get('default_value'):
        descriptor['required'] = False
    return {key: value for key, value in descriptor.items() if not _is_empty(value)}

def _clean_descriptors(descriptors: Optional[Mapping[str, Dict[str, Any]]], trim: bool) -> Dict[str, Dict[str, Any]]:
    if not descriptors:
        return {}
    return {name: _clean_descriptor(descriptor, trim) for name, descriptor in descriptors.items()}

def _clean_methods(methods: Optional[List[Dict[str, Any]]], trim: bool) -> List[Dict[str, Any]]:
    result = []
    for method in methods or []:
        method = dict(method)
        method['docblock'] = _clean_text(method.get('docblock'), trim)
        method['description'] = _clean_text(method.get('description'), trim)
        result.append({key: value for key, value in method.items() if not _is_empty(value)})
    return result

def _unique(items: Optional[List[Any]]) -> List[Any]:
    seen = []
    for item in items or []:
        if item not in seen:
            seen.append(item)
    return seen

def _raw_documentation(documentation: DocumentationSource) -> Dict[str, Any]:
    if isinstance(documentation, Documentation):
        return documentation.to_dict()
    if isinstance(documentation, DocumentationObject):
        return documentation.model_dump()
    if isinstance(documentation, Mapping):
        return DocumentationObject.model_validate(dict(documentation)).model_dump()
    raise InvalidTypeError('documentation', documentation, (Documentation, DocumentationObject, dict))

def post_process_documentation(documentation: DocumentationSource) -> DocumentationObject:
    """
    Normalize a documentation record into an immutable documentation object.

    Empty slots are dropped, descriptions are trimmed, ``composes`` is
    deduplicated keeping the first occurrence, and props with a default
    value are marked as not required.

    Args:
        documentation: A Documentation record, an already normalized
            DocumentationObject, or a mapping with the same fields

    Returns:
        Frozen DocumentationObject
    """
    raw = _raw_documentation(documentation)
    trim = config.get('post_processing', 'trim_descriptions', True)

    cleaned = {
        'description': _clean_text(raw.get('description'), trim),
        'display_name': raw.get('display_name'),
        'props': _clean_descriptors(raw.get('props'), trim),
        'context': _clean_descriptors(raw.get('context'), trim),
        'child_context': _clean_descriptors(raw.get('child_context'), trim),
        'methods': _clean_methods(raw.get('methods'), trim),
        'composes': _unique(raw.get('composes')),
        'extra': {key: value for key, value in (raw.get('extra') or {}).items() if not _is_empty(value)},
    }
    result = DocumentationObject.model_validate(
        {key: value for key, value in cleaned.items() if not _is_empty(value)}
    )
    logger.debug(f'Normalized documentation with slots: {sorted(result.model_fields_set)}')
    return result
