"""
Rendering and export of analysis results.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional

import pandas as pd
from rich.console import Console
from rich.table import Table

from .shape import FieldPath
from .tags import RESERVED_PREFIX, VALUE_TAGS, TypeTag
from .tree import SchemaNode

console = Console()

ESCAPE = "\\"


@dataclass(frozen=True)
class DriftFlags:
    multiple_types: bool
    null_or_missing: bool

    @property
    def noteworthy(self) -> bool:
        return self.multiple_types or self.null_or_missing

    def describe(self) -> List[str]:
        notes = []
        if self.multiple_types:
            notes.append("multiple datatypes")
        if self.null_or_missing:
            notes.append("contains null or missing values")
        return notes


@dataclass(frozen=True)
class ReportRow:
    path: FieldPath
    counts: Mapping[TypeTag, int]
    flags: DriftFlags

    @property
    def dotted(self) -> str:
        return ".".join(self.path)


def drift_flags(node: SchemaNode) -> DriftFlags:
    return DriftFlags(
        multiple_types=sum(1 for tag in VALUE_TAGS if node.counts[tag] > 0) > 1,
        null_or_missing=node.counts[TypeTag.NULL] > 0 or node.counts[TypeTag.ABSENT] > 0,
    )


def iter_rows(tree: SchemaNode, only_drift: bool = False) -> Iterator[ReportRow]:
    """Yields one row per path, depth-first with fields sorted by name."""
    for node in tree.walk():
        flags = drift_flags(node)
        if only_drift and not flags.noteworthy:
            continue
        yield ReportRow(node.path, dict(node.counts), flags)


def to_dataframe(tree: SchemaNode, only_drift: bool = False) -> pd.DataFrame:
    """One row per path, one column per type tag plus the two drift flags."""
    columns = ["path"] + [tag.label for tag in TypeTag] + ["multiple_types", "null_or_missing"]
    records = []
    for row in iter_rows(tree, only_drift=only_drift):
        record = {"path": row.dotted}
        for tag in TypeTag:
            record[tag.label] = row.counts[tag]
        record["multiple_types"] = row.flags.multiple_types
        record["null_or_missing"] = row.flags.null_or_missing
        records.append(record)
    return pd.DataFrame(records, columns=columns)


def escape_field(name: str) -> str:
    """Keeps field names from ever reading as a reserved type-tag key."""
    if name.startswith(RESERVED_PREFIX) or name.startswith(ESCAPE):
        return ESCAPE + name
    return name


def to_nested_dict(tree: SchemaNode) -> Dict[str, Any]:
    """
    Nested mapping form of a tree.

    Field names map to child mappings, reserved ``___<tag>`` keys map to the
    counts of that path. Only positive counts are written. The root mapping
    holds no counts.
    """
    def convert(node: SchemaNode) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for name in sorted(node.children):
            child = node.children[name]
            entry = {tag.key: n for tag, n in child.counts.items() if n > 0}
            entry.update(convert(child))
            out[escape_field(name)] = entry
        return out

    return convert(tree)


def export_json(tree: SchemaNode, output_path: str | Path):
    output_path = Path(output_path)
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(to_nested_dict(tree), f, indent=2, ensure_ascii=False)
    console.print(f"[bold green]Report written to {output_path}[/bold green]")


def export_csv(tree: SchemaNode, output_path: str | Path, only_drift: bool = False):
    output_path = Path(output_path)
    to_dataframe(tree, only_drift=only_drift).to_csv(output_path, index=False)
    console.print(f"[bold green]Report written to {output_path}[/bold green]")


def _cell(count: int, style: Optional[str]) -> str:
    if not count:
        return "[dim]0[/dim]"
    return f"[{style}]{count:,}[/{style}]" if style else f"{count:,}"


def build_table(tree: SchemaNode, only_drift: bool = False, documents: Optional[int] = None) -> Table:
    title = "Field Types"
    if documents is not None:
        title += f" ({documents:,} documents)"
    table = Table(title=title)
    table.add_column("Field", style="cyan")
    for tag in TypeTag:
        table.add_column(tag.label, justify="right")
    table.add_column("Notes", style="magenta")

    for row in iter_rows(tree, only_drift=only_drift):
        cells = []
        for tag in TypeTag:
            style = None
            if tag in (TypeTag.NULL, TypeTag.ABSENT):
                style = "red"
            elif row.flags.multiple_types:
                style = "yellow"
            cells.append(_cell(row.counts[tag], style))
        indent = "  " * (len(row.path) - 1)
        table.add_row(f"{indent}{row.path[-1]}", *cells, ", ".join(row.flags.describe()))
    return table


def print_report(tree: SchemaNode, out: Optional[Console] = None, only_drift: bool = False,
                 documents: Optional[int] = None):
    """Prints the tree as a table, one row per field path."""
    out = out or console
    if not tree.children:
        out.print("[yellow]No fields found.[/yellow]")
        return
    out.print(build_table(tree, only_drift=only_drift, documents=documents))
