from .core.error_handling import (
    ERROR_MISSING_DEFINITION,
    CompDocError,
    MissingDefinitionError,
    MultipleDefinitionsError,
    ParsingError,
)
from .core.components.interfaces import DefinitionResolver, ExtractionHandler
from .core.engine.ast_handler import ASTHandler, get_ast_handler
from .core.extraction import execute_handlers, extract_documentation
from .core.post_processor import post_process_documentation
from .core.utils.expression_path import COMPUTED_SEGMENT, flatten, to_path_string
from .core.utils.value_resolution import resolve_to_value
from .main import parse
from .models.documentation import Documentation, DocumentationObject, MethodDescriptor, PropDescriptor
from .models.enums import Dialect
from .models.options import ParserOptions
from .resolvers import (
    find_all_component_definitions,
    find_all_exported_component_definitions,
    find_exported_component_definition,
)

__version__ = "1.0.0"
__all__ = [
    "ASTHandler",
    "COMPUTED_SEGMENT",
    "CompDocError",
    "DefinitionResolver",
    "Dialect",
    "Documentation",
    "DocumentationObject",
    "ERROR_MISSING_DEFINITION",
    "ExtractionHandler",
    "MethodDescriptor",
    "MissingDefinitionError",
    "MultipleDefinitionsError",
    "ParserOptions",
    "ParsingError",
    "PropDescriptor",
    "execute_handlers",
    "extract_documentation",
    "find_all_component_definitions",
    "find_all_exported_component_definitions",
    "find_exported_component_definition",
    "flatten",
    "get_ast_handler",
    "parse",
    "post_process_documentation",
    "resolve_to_value",
    "to_path_string",
]
