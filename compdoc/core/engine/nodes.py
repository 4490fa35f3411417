"""
Small helpers for reading tree-sitter nodes.
"""
from typing import Iterator, List, Optional, Set, Union

from tree_sitter import Node

def node_text(node: Optional[Node]) -> str:
    """Return the source text of ``node`` or an empty string."""
    if node is None or node.text is None:
        return ''
    return node.text.decode('utf8')

def named_children(node: Optional[Node]) -> List[Node]:
    """Named children of ``node`` without comments."""
    if node is None:
        return []
    return [child for child in node.named_children if child.type != 'comment']

def first_named_child(node: Optional[Node]) -> Optional[Node]:
    children = named_children(node)
    return children[0] if children else None

def iter_descendants(node: Optional[Node], types: Union[str, Set[str], None] = None) -> Iterator[Node]:
    """
    Walk ``node`` and its named descendants in document order.

    The walk uses an explicit stack so deeply nested sources do not hit the
    interpreter recursion limit.

    Args:
        node: Root of the walk (included in the output)
        types: Optional node type or set of node types to keep

    Yields:
        Matching nodes in pre-order
    """
    if node is None:
        return
    if isinstance(types, str):
        types = {types}
    stack = [node]
    while stack:
        current = stack.pop()
        if types is None or current.type in types:
            yield current
        stack.extend(reversed(current.named_children))
