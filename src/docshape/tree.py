"""
Result tree of an analysis.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Sequence

from .shape import ROOT, FieldPath, Shape
from .tags import EMPTY_TAGS, TypeTag


def _zero_counts() -> Dict[TypeTag, int]:
    return {tag: 0 for tag in TypeTag}


@dataclass(frozen=True)
class SchemaNode:
    """
    One field path of the corpus with its type-occurrence counts.

    ``counts`` always holds all seven tags. ``children`` maps field names to
    the nodes below this one; type tags never appear there.
    """
    path: FieldPath
    counts: Mapping[TypeTag, int] = field(default_factory=lambda: MappingProxyType(_zero_counts()))
    children: Mapping[str, "SchemaNode"] = field(default_factory=lambda: MappingProxyType({}))

    # Compared by value, not hashable: counts and children are mappings
    __hash__ = None

    @property
    def name(self) -> Optional[str]:
        return self.path[-1] if self.path else None

    @property
    def dotted(self) -> str:
        return ".".join(self.path)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def present_types(self) -> List[TypeTag]:
        """Tags with a positive count, excluding null and absent."""
        return [tag for tag in TypeTag if tag not in EMPTY_TAGS and self.counts[tag] > 0]

    def count(self, tag: TypeTag) -> int:
        return self.counts[tag]

    def child(self, name: str) -> "SchemaNode":
        return self.children[name]

    def find(self, path: Sequence[str]) -> "SchemaNode":
        """Returns the node at ``path`` relative to this one."""
        node = self
        for name in path:
            node = node.children[name]
        return node

    def walk(self) -> Iterator["SchemaNode"]:
        """Yields every descendant depth-first, siblings sorted by name."""
        for name in sorted(self.children):
            node = self.children[name]
            yield node
            yield from node.walk()

    def size(self) -> int:
        """Number of descendant nodes."""
        return sum(1 for _ in self.walk())

    @classmethod
    def assemble(cls, shape: Shape, counts: Mapping[FieldPath, Mapping[TypeTag, int]],
                 path: FieldPath = ROOT) -> "SchemaNode":
        """Links the per-path count table into a tree following ``shape``."""
        children = {
            name: cls.assemble(shape, counts, path + (name,))
            for name in shape.children(path)
        }
        own = _zero_counts()
        own.update(counts.get(path, {}))
        return cls(path, MappingProxyType(own), MappingProxyType(children))
