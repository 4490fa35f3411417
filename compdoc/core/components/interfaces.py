"""
Interfaces for the compdoc extraction pipeline.

Definition resolvers and extraction handlers are plain callables; these
protocols give them names so that type checkers can verify custom
strategies against the contract.
"""
from typing import TYPE_CHECKING, Iterable, Protocol, Union

from tree_sitter import Node

if TYPE_CHECKING:
    from compdoc.core.engine.ast_handler import ASTHandler
    from compdoc.models.documentation import Documentation

ResolverResult = Union[Node, Iterable[Node], None]

class DefinitionResolver(Protocol):
    """
    Strategy locating component definitions in a program.

    Returning a single node makes the pipeline produce a single
    documentation object; returning a sequence produces a list in the same
    order. A falsy result means no definition was found.
    """

    def __call__(self, program: Node, toolkit: 'ASTHandler') -> ResolverResult:
        ...

class ExtractionHandler(Protocol):
    """
    Extractor run against one component definition.

    Handlers mutate the documentation record in place and must not keep a
    reference to the record or the node after they return.
    """

    def __call__(self, documentation: 'Documentation', definition: Node) -> None:
        ...
