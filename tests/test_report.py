"""
Tests for report rendering and export.
"""

import json

from rich.console import Console

from docshape import analyze
from docshape.report import (
    drift_flags,
    escape_field,
    export_csv,
    export_json,
    iter_rows,
    print_report,
    to_dataframe,
    to_nested_dict,
)


def test_drift_flags_for_mixed_field(mixed_corpus):
    flags = drift_flags(analyze(mixed_corpus).child("a"))
    assert flags.multiple_types
    assert flags.null_or_missing
    assert flags.describe() == ["multiple datatypes", "contains null or missing values"]


def test_array_items_flagged_multiple_types():
    tree = analyze([{"items": [{"v": 1}, {"v": "s"}]}])
    assert not drift_flags(tree.child("items")).noteworthy
    flags = drift_flags(tree.find(["items", "v"]))
    assert flags.multiple_types
    assert not flags.null_or_missing


def test_rows_sorted_depth_first(orders_corpus):
    paths = [row.dotted for row in iter_rows(analyze(orders_corpus))]
    assert paths == [
        "_id",
        "coupon",
        "customer",
        "customer.email",
        "customer.name",
        "items",
        "items.gift",
        "items.qty",
        "items.sku",
        "total",
    ]


def test_only_drift_rows(orders_corpus):
    paths = [row.dotted for row in iter_rows(analyze(orders_corpus), only_drift=True)]
    assert "_id" not in paths
    assert "items.qty" not in paths
    assert "total" in paths
    assert "customer" in paths


def test_dataframe_columns(mixed_corpus):
    df = to_dataframe(analyze(mixed_corpus))
    assert list(df.columns) == [
        "path", "Null", "Undefined", "Array", "Boolean", "Number", "String", "Object",
        "multiple_types", "null_or_missing",
    ]
    row = df.iloc[0]
    assert row["path"] == "a"
    assert row["Number"] == 1
    assert row["Undefined"] == 1
    assert bool(row["multiple_types"])


def test_dataframe_of_empty_tree():
    df = to_dataframe(analyze([]))
    assert df.empty
    assert "path" in df.columns


def test_nested_dict_uses_reserved_keys(mixed_corpus):
    assert to_nested_dict(analyze(mixed_corpus)) == {
        "a": {"___null": 1, "___undefined": 1, "___number": 1, "___string": 1},
    }


def test_nested_dict_escapes_colliding_field_names():
    tree = analyze([{"___number": {"x": 1}}])
    nested = to_nested_dict(tree)
    assert "___number" not in nested
    assert nested["\\___number"] == {"___object": 1, "x": {"___number": 1}}
    assert escape_field("plain") == "plain"
    assert escape_field("\\odd") == "\\\\odd"


def test_export_json(tmp_path, mixed_corpus):
    out = tmp_path / "report.json"
    export_json(analyze(mixed_corpus), out)
    assert json.loads(out.read_text())["a"]["___string"] == 1


def test_export_csv(tmp_path, orders_corpus):
    out = tmp_path / "report.csv"
    export_csv(analyze(orders_corpus), out, only_drift=True)
    lines = out.read_text().splitlines()
    assert lines[0].startswith("path,Null,Undefined")
    assert any(line.startswith("items.gift,") for line in lines)


def test_print_report_table(orders_corpus):
    console = Console(record=True, width=200)
    print_report(analyze(orders_corpus), out=console, documents=3)
    text = console.export_text()
    assert "Field Types (3 documents)" in text
    assert "gift" in text
    assert "multiple datatypes" in text


def test_print_report_empty():
    console = Console(record=True, width=120)
    print_report(analyze([]), out=console)
    assert "No fields found" in console.export_text()


def test_print_report_defaults_to_stdout(capsys, mixed_corpus):
    print_report(analyze(mixed_corpus))
    assert "Field Types" in capsys.readouterr().out
