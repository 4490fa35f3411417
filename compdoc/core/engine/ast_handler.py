"""
AST Handler for compdoc providing a unified interface for tree-sitter operations.

An ``ASTHandler`` is the navigation toolkit handed to definition resolvers
together with the program node.
"""
import logging
from functools import lru_cache
from typing import Iterator, List, Optional, Set, Tuple, Union

from tree_sitter import Node

from compdoc.core.engine.languages import get_language, get_parser
from compdoc.core.engine.nodes import iter_descendants, node_text
from compdoc.core.error_handling import ParsingError
from compdoc.core.utils.expression_path import flatten, to_path_string
from compdoc.core.utils.hashing import sha1_code
from compdoc.core.utils.value_resolution import resolve_to_value
from compdoc.models.enums import Dialect

logger = logging.getLogger(__name__)

class ASTHandler:
    """
    Handles syntax tree operations using tree-sitter.
    Provides a unified interface for parsing and navigating syntax trees.
    """

    def __init__(self, dialect: Union[Dialect, str], parser, language):
        """
        Initialize the AST handler.

        Args:
            dialect: Dialect code (e.g., 'javascript', 'tsx')
            parser: Tree-sitter parser for the dialect
            language: Tree-sitter language object
        """
        self.dialect = Dialect(dialect)
        self.parser = parser
        self.language = language

    @lru_cache(maxsize=128)
    def _parse_cached(self, code_hash: str, code: str) -> Tuple[Node, bytes]:
        """Internal cached parse implementation."""
        code_bytes = code.encode('utf8')
        tree = self.parser.parse(code_bytes)
        return (tree.root_node, code_bytes)

    def parse(self, code: str) -> Tuple[Node, bytes]:
        """
        Parse source code into a syntax tree. Results are cached using an LRU
        cache keyed by the SHA1 hash of ``code``.

        Args:
            code: Source code as string

        Returns:
            Tuple of (root_node, code_bytes)
        """
        code_hash = sha1_code(code)
        return self._parse_cached(code_hash, code)

    def parse_program(self, code: str, strict: bool = False) -> Node:
        """
        Parse source code and return the program node.

        Args:
            code: Source code as string
            strict: Raise instead of warning when the tree contains syntax errors

        Returns:
            The ``program`` root node

        Raises:
            ParsingError: If ``strict`` is set and the source has syntax errors
        """
        root, _ = self.parse(code)
        if root.has_error:
            error_node = self.find_error_node(root)
            position = None
            snippet = None
            if error_node is not None:
                start_line, _ = self.get_node_range(error_node)
                position = (start_line, error_node.start_point[1] + 1)
                snippet = node_text(error_node)[:80]
            if strict:
                raise ParsingError(f'Syntax error in {self.dialect.value} source',
                                   code_snippet=snippet, position=position)
            logger.warning('Syntax error in %s source at %s, continuing with partial tree',
                           self.dialect.value, position)
        return root

    @staticmethod
    def get_node_text(node: Node, code_bytes: Optional[bytes] = None) -> str:
        """
        Get the text content of a node.

        Args:
            node: Tree-sitter node
            code_bytes: Source code as bytes; the node's own text is used when omitted

        Returns:
            String content of the node
        """
        if code_bytes is None:
            return node_text(node)
        return code_bytes[node.start_byte:node.end_byte].decode('utf8')

    @staticmethod
    def get_node_range(node: Node) -> Tuple[int, int]:
        """
        Get the line range of a node.

        Returns:
            Tuple of (start_line, end_line) in 1-indexed form
        """
        return (node.start_point[0] + 1, node.end_point[0] + 1)

    @staticmethod
    def find_parent_of_type(node: Optional[Node], parent_type: Union[str, List[str]]) -> Optional[Node]:
        """
        Find the nearest parent node matching the specified type or one of the specified types.

        Args:
            node: Starting node
            parent_type: A single type string or a list of type strings to find.

        Returns:
            Parent node or None if not found
        """
        if not node:
            return None
        target_types = {parent_type} if isinstance(parent_type, str) else set(parent_type)
        current = node.parent
        while current is not None:
            if current.type in target_types:
                return current
            current = current.parent
        return None

    @staticmethod
    def find_child_by_field_name(node: Optional[Node], field_name: str) -> Optional[Node]:
        """Find a child node by field name."""
        if node is None:
            return None
        return node.child_by_field_name(field_name)

    @staticmethod
    def iter_descendants(node: Node, types: Union[str, Set[str], None] = None) -> Iterator[Node]:
        """Walk ``node`` and its named descendants in document order."""
        return iter_descendants(node, types)

    @staticmethod
    def find_error_node(root: Node) -> Optional[Node]:
        """Return the first ``ERROR`` or missing node below ``root``."""
        # missing tokens are anonymous, so walk all children
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == 'ERROR' or node.is_missing:
                return node
            stack.extend(reversed(node.children))
        return None

    @staticmethod
    def resolve_to_value(node: Optional[Node]) -> Optional[Node]:
        """Resolve a reference to the expression it is bound to."""
        return resolve_to_value(node)

    @staticmethod
    def flatten(node: Optional[Node]) -> List[str]:
        """Split a member or call chain into root-to-leaf path segments."""
        return flatten(node)

    @staticmethod
    def to_path_string(node: Optional[Node]) -> str:
        """Dotted path representation of a member or call chain."""
        return to_path_string(node)

def get_ast_handler(dialect: Union[Dialect, str] = Dialect.JAVASCRIPT) -> ASTHandler:
    """
    Return the shared ASTHandler for a dialect.

    Raises:
        UnsupportedDialectError: If the dialect has no grammar
    """
    code = dialect.value if isinstance(dialect, Dialect) else str(dialect).lower()
    return _create_ast_handler(code)

@lru_cache(maxsize=None)
def _create_ast_handler(code: str) -> ASTHandler:
    logger.debug(f'Creating ASTHandler for {code}')
    return ASTHandler(code, get_parser(code), get_language(code))
