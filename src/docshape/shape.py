"""
Union-shape builder.

The first pass over a corpus records every field path that occurs in any
document. Arrays are transparent: the elements of an array field live at the
same path as the field itself.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Mapping, Set, Tuple

from .exceptions import MalformedDocumentError
from .tags import TypeTag, classify, is_object

logger = logging.getLogger(__name__)

FieldPath = Tuple[str, ...]
ROOT: FieldPath = ()


class Shape:
    """
    Immutable set of field paths with their parent/child relationships.

    Paths are stored arena-style, mapping each path to the names of its
    children. The root path is the empty tuple and is always present.
    """

    def __init__(self, children: Mapping[FieldPath, Iterable[str]]):
        frozen = {tuple(path): frozenset(names) for path, names in children.items()}
        frozen.setdefault(ROOT, frozenset())
        self._children = MappingProxyType(frozen)

    def children(self, path: FieldPath = ROOT) -> FrozenSet[str]:
        """Names of the fields known directly below ``path``."""
        return self._children[tuple(path)]

    def paths(self) -> List[FieldPath]:
        """All non-root paths, depth-first with siblings sorted by name."""
        result: List[FieldPath] = []

        def _walk(path: FieldPath):
            for name in sorted(self._children[path]):
                child = path + (name,)
                result.append(child)
                _walk(child)

        _walk(ROOT)
        return result

    @property
    def depth(self) -> int:
        return max((len(path) for path in self._children), default=0)

    def __contains__(self, path) -> bool:
        return tuple(path) in self._children

    def __iter__(self) -> Iterator[FieldPath]:
        return iter(self.paths())

    def __len__(self) -> int:
        return len(self._children) - 1

    def __eq__(self, other) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return dict(self._children) == dict(other._children)

    def __repr__(self) -> str:
        return f"Shape(paths={len(self)}, depth={self.depth})"


class ShapeBuilder:
    """
    Accumulates the union of all object keys seen at every path.

    Usage:
        builder = ShapeBuilder()
        for doc in documents:
            builder.add(doc)
        shape = builder.build()
    """

    def __init__(self):
        self._children: Dict[FieldPath, Set[str]] = {ROOT: set()}
        self.documents = 0

    def add(self, document: Mapping[str, Any]):
        if not is_object(document):
            raise MalformedDocumentError(self.documents, document)
        self._visit(ROOT, document)
        self.documents += 1

    def _visit(self, path: FieldPath, obj: Mapping[str, Any]):
        for key, value in obj.items():
            child = path + (key,)
            self._children[path].add(key)
            self._children.setdefault(child, set())

            tag = classify(value, path=child)
            if tag is TypeTag.ARRAY:
                self._visit_items(child, value)
            elif tag is TypeTag.OBJECT:
                self._visit(child, value)

    def _visit_items(self, path: FieldPath, items):
        # Nested arrays add no path segment, their items are still checked
        for item in items:
            tag = classify(item, path=path)
            if tag is TypeTag.OBJECT:
                self._visit(path, item)
            elif tag is TypeTag.ARRAY:
                self._visit_items(path, item)

    def build(self) -> Shape:
        shape = Shape(self._children)
        logger.debug("Built shape with %d paths from %d documents", len(shape), self.documents)
        return shape


def build_shape(documents: Iterable[Mapping[str, Any]]) -> Shape:
    """Builds the union shape of a whole corpus."""
    builder = ShapeBuilder()
    for document in documents:
        builder.add(document)
    return builder.build()
