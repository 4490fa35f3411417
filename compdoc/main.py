import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from .core.components.interfaces import DefinitionResolver, ExtractionHandler
from .core.extraction import extract_documentation
from .models.documentation import DocumentationObject
from .models.options import ParserOptions
from .resolvers import find_exported_component_definition

logger = logging.getLogger(__name__)

def parse(
    source: str,
    resolver: Optional[DefinitionResolver] = None,
    handlers: Optional[Sequence[ExtractionHandler]] = None,
    options: Optional[Union[ParserOptions, Dict[str, Any]]] = None,
) -> Union[DocumentationObject, List[DocumentationObject]]:
    """
    Document the component(s) defined in ``source``.

    Defaults to the exported-component resolver and an empty handler chain,
    which yields the bare documentation skeleton of the exported component.

    Args:
        source: JavaScript or TypeScript source code
        resolver: Definition resolver, defaults to find_exported_component_definition
        handlers: Extraction handlers run for each definition
        options: Parser options

    Returns:
        DocumentationObject or list of DocumentationObject, see extract_documentation
    """
    if resolver is None:
        logger.debug('No resolver given, using find_exported_component_definition')
        resolver = find_exported_component_definition
    return extract_documentation(source, resolver, list(handlers or []), options)
