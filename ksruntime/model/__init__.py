"""Base classes for generated format readers."""

from ksruntime.model.struct import Struct

__all__ = ['Struct']
