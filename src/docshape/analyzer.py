"""
Two-pass analysis of a document corpus.

The corpus is read once into memory, the union shape is built from every
document, and only then are the types counted against that shape.
"""

import logging
from typing import Any, Iterable, List, Mapping

from tqdm import tqdm

from .counter import TypeCounter
from .exceptions import ConfigError, MalformedDocumentError
from .shape import ShapeBuilder
from .tags import is_object
from .tree import SchemaNode

logger = logging.getLogger(__name__)

MALFORMED_POLICIES = ("raise", "skip", "empty")


def _prepare(documents: Iterable[Any], on_malformed: str) -> List[Mapping[str, Any]]:
    """Materialises the corpus, applying the malformed-document policy."""
    corpus = []
    for index, document in enumerate(documents):
        if is_object(document):
            corpus.append(document)
            continue

        if on_malformed == "raise":
            raise MalformedDocumentError(index, document)
        if on_malformed == "empty":
            logger.warning("Document #%d is not an object, counting it as empty", index)
            corpus.append({})
        else:
            logger.warning("Document #%d is not an object, skipping it", index)
    return corpus


def analyze(documents: Iterable[Any], on_malformed: str = "raise", progress: bool = False) -> SchemaNode:
    """
    Profiles the types of every field path in a corpus.

    Args:
        documents: Finite iterable of JSON-compatible objects.
        on_malformed: What to do with top-level elements that are not objects:
            "raise" (default), "skip" them, or count them as "empty" objects.
        progress: Show tqdm progress bars for both passes.

    Returns:
        The root SchemaNode. Its children are the top-level fields.

    Raises:
        MalformedDocumentError: A top-level element is not an object and
            ``on_malformed`` is "raise".
        UnsupportedTypeError: A value is not JSON-compatible.
    """
    if on_malformed not in MALFORMED_POLICIES:
        raise ConfigError(
            f"on_malformed must be one of {', '.join(MALFORMED_POLICIES)}, got {on_malformed!r}"
        )

    corpus = _prepare(documents, on_malformed)
    logger.info("Analyzing %d documents", len(corpus))

    builder = ShapeBuilder()
    for document in tqdm(corpus, desc="Building shape", unit=" docs", disable=not progress):
        builder.add(document)
    shape = builder.build()
    logger.info("Found %d field paths (max depth %d)", len(shape), shape.depth)

    counter = TypeCounter(shape)
    for document in tqdm(corpus, desc="Counting types", unit=" docs", disable=not progress):
        counter.add(document)
    return counter.tree()
