"""
docshape - Field type profiling for document databases.

This library scans a corpus of semi-structured documents and reports, for
every field path seen in any document, how often each JSON type (or a
missing value) occurs there. Fields that carry more than one type or are
sometimes null/missing point to schema drift.
"""

from .analyzer import analyze
from .counter import TypeCounter, count_types
from .exceptions import (
    ConfigError,
    DocShapeError,
    MalformedDocumentError,
    SourceError,
    UnsupportedTypeError,
)
from .shape import Shape, ShapeBuilder, build_shape
from .tags import TypeTag, classify
from .tree import SchemaNode

__version__ = "0.1.0"

__all__ = [
    "analyze",
    "build_shape",
    "count_types",
    "classify",
    "Shape",
    "ShapeBuilder",
    "TypeCounter",
    "TypeTag",
    "SchemaNode",
    "DocShapeError",
    "MalformedDocumentError",
    "UnsupportedTypeError",
    "SourceError",
    "ConfigError",
    "__version__",
]
