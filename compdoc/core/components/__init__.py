"""
Plug-in interfaces of the extraction pipeline.
"""
from .interfaces import DefinitionResolver, ExtractionHandler

__all__ = ['DefinitionResolver', 'ExtractionHandler']
