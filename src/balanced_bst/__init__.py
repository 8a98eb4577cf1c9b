"""Balanced binary search tree over unique numeric keys."""

from .coerce import process_items, to_number
from .errors import BSTError, CallbackError, ConversionError, NotFoundError
from .node import Node
from .pretty import render
from .tree import Tree

__all__ = [
    "BSTError",
    "CallbackError",
    "ConversionError",
    "Node",
    "NotFoundError",
    "Tree",
    "process_items",
    "render",
    "to_number",
]
