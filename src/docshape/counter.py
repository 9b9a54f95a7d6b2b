"""
Type-frequency counter.

The second pass walks the completed shape (not the documents) so that every
known path receives a count from every document, including ``ABSENT`` when
the document does not have the field.
"""

import logging
from collections import Counter, defaultdict
from typing import Any, Dict, Iterable, Mapping

from .exceptions import MalformedDocumentError
from .shape import ROOT, FieldPath, Shape
from .tags import TypeTag, classify, is_object
from .tree import SchemaNode

logger = logging.getLogger(__name__)


class TypeCounter:
    """
    Counts, per field path, the type each document has there.

    The shape must be complete before the first document is added.
    """

    def __init__(self, shape: Shape):
        self.shape = shape
        self._counts: Dict[FieldPath, Counter] = defaultdict(Counter)
        self.documents = 0

    def add(self, document: Mapping[str, Any]):
        if not is_object(document):
            raise MalformedDocumentError(self.documents, document)
        self._visit(ROOT, document)
        self.documents += 1

    def _visit(self, path: FieldPath, obj: Mapping[str, Any]):
        for name in self.shape.children(path):
            child = path + (name,)
            present = name in obj
            value = obj[name] if present else None
            tag = classify(value, present=present, path=child)
            # Arrays count once per occurrence, their object elements are
            # then each walked at the same path.
            self._counts[child][tag] += 1

            if tag is TypeTag.ARRAY:
                for item in value:
                    if is_object(item):
                        self._visit(child, item)
            elif tag is TypeTag.OBJECT:
                self._visit(child, value)

    def counts(self) -> Dict[FieldPath, Dict[TypeTag, int]]:
        """Count table keyed by path, with all seven tags for every path."""
        return {
            path: {tag: self._counts.get(path, Counter())[tag] for tag in TypeTag}
            for path in self.shape.paths()
        }

    def tree(self) -> SchemaNode:
        logger.debug("Assembling tree from %d counted documents", self.documents)
        return SchemaNode.assemble(self.shape, self.counts())


def count_types(shape: Shape, documents: Iterable[Mapping[str, Any]]) -> SchemaNode:
    """Counts the types of a whole corpus against a completed shape."""
    counter = TypeCounter(shape)
    for document in documents:
        counter.add(document)
    return counter.tree()
