"""
Main entry point for documentation extraction.

Parses the source, asks the definition resolver for component definitions
and runs the handler chain once per definition.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from tree_sitter import Node

from compdoc.core.components.interfaces import DefinitionResolver, ExtractionHandler
from compdoc.core.engine.ast_handler import get_ast_handler
from compdoc.core.error_handling import MissingDefinitionError
from compdoc.core.input_validation import validate_callable, validate_callables, validate_not_none, validate_type
from compdoc.core.post_processor import post_process_documentation
from compdoc.models.documentation import Documentation, DocumentationObject
from compdoc.models.options import ParserOptions

logger = logging.getLogger(__name__)

def execute_handlers(handlers: Sequence[ExtractionHandler], definitions: Iterable[Node]) -> List[DocumentationObject]:
    """
    Run the handler chain on every definition.

    Each definition gets a fresh Documentation record; the handlers are
    called in the given order and share that record. Exceptions raised by a
    handler propagate unchanged, so one failing definition fails the batch.

    Args:
        handlers: Extraction handlers in execution order
        definitions: Component definition nodes

    Returns:
        One normalized DocumentationObject per definition, in input order
    """
    results = []
    for index, definition in enumerate(definitions):
        documentation = Documentation()
        logger.debug(f'Running {len(handlers)} handlers on definition #{index} ({getattr(definition, "type", type(definition).__name__)})')
        for handler in handlers:
            handler(documentation, definition)
        results.append(post_process_documentation(documentation))
    return results

def _is_sequence(value: Any) -> bool:
    if isinstance(value, (Node, str, bytes, dict)):
        return False
    return hasattr(value, '__iter__')

def extract_documentation(
    source: str,
    resolver: DefinitionResolver,
    handlers: Sequence[ExtractionHandler],
    options: Optional[Union[ParserOptions, Dict[str, Any]]] = None,
) -> Union[DocumentationObject, List[DocumentationObject]]:
    """
    Takes JavaScript or TypeScript source code and returns the documentation
    extracted from its component definition(s).

    ``resolver`` is the strategy finding the definition node(s). It is called
    with the program node and the ASTHandler of the dialect. If it returns a
    sequence, a list of documentation objects is returned in the same order;
    if it returns a single node, a single documentation object is returned.

    Args:
        source: Source code to document
        resolver: Definition resolver strategy
        handlers: Extraction handlers, run in order for each definition
        options: ParserOptions or a mapping of option values

    Returns:
        DocumentationObject, or a list of them when the resolver returned a sequence

    Raises:
        MissingDefinitionError: If the resolver found nothing
        ParsingError: If strict parsing was requested and the source has syntax errors
    """
    validate_not_none(source, 'source')
    validate_type(source, str, 'source')
    validate_callable(resolver, 'resolver')
    validate_callables(handlers, 'handlers')
    handlers = list(handlers)

    options = ParserOptions.coerce(options)
    ast_handler = get_ast_handler(options.dialect)
    program = ast_handler.parse_program(source, strict=options.strict)

    definitions = resolver(program, ast_handler)
    if _is_sequence(definitions):
        definitions = list(definitions)
        logger.debug(f'Resolver returned {len(definitions)} definitions')
        if not definitions:
            raise MissingDefinitionError()
        return execute_handlers(handlers, definitions)
    elif isinstance(definitions, Node) or definitions:
        logger.debug(f'Resolver returned a single {getattr(definitions, "type", "definition")}')
        return execute_handlers(handlers, [definitions])[0]

    raise MissingDefinitionError()
