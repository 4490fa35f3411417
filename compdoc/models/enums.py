"""
Enumerations shared by the compdoc models.
"""
from enum import Enum

class Dialect(str, Enum):
    """Source dialects understood by the tree-sitter layer"""
    JAVASCRIPT = 'javascript'
    TYPESCRIPT = 'typescript'
    TSX = 'tsx'
