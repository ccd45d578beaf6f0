"""
Serialization helpers for transcripts (OutputRecord, Span, Table, ...).

Provides lossless JSON/YAML round-trip via intermediate dict representation.
Keys are stable and explicit so saved transcripts can be diffed.
"""
from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Dict

import yaml

from primer.console import OutputRecord, RecordLevel, Span, Style, Table, Transcript


def style_to_dict(style: Style | None) -> Dict[str, str] | None:
    if style is None:
        return None
    return {name: value for name, value in asdict(style).items() if value is not None}


def style_from_dict(d: Dict[str, str] | None) -> Style | None:
    if d is None:
        return None
    return Style(**d)


def span_to_dict(span: Span) -> Dict[str, Any]:
    return {"text": span.text, "style": style_to_dict(span.style)}


def span_from_dict(d: Dict[str, Any]) -> Span:
    return Span(text=d["text"], style=style_from_dict(d.get("style")))


def table_to_dict(table: Table | None) -> Dict[str, Any] | None:
    if table is None:
        return None
    return {"headers": list(table.headers), "rows": [list(row) for row in table.rows]}


def table_from_dict(d: Dict[str, Any] | None) -> Table | None:
    if d is None:
        return None
    return Table(headers=list(d["headers"]), rows=[list(row) for row in d.get("rows", [])])


def record_to_dict(record: OutputRecord) -> Dict[str, Any]:
    return {
        "level": record.level.value,
        "text": record.text,
        "depth": record.depth,
        "unit": record.unit,
        "label": record.label,
        "collapsed": record.collapsed,
        "spans": [span_to_dict(span) for span in record.spans],
        "table": table_to_dict(record.table),
        "elapsed_ms": record.elapsed_ms,
    }


def record_from_dict(d: Dict[str, Any]) -> OutputRecord:
    return OutputRecord(
        level=RecordLevel(d["level"]),
        text=d.get("text", ""),
        depth=d.get("depth", 0),
        unit=d.get("unit"),
        label=d.get("label"),
        collapsed=d.get("collapsed", False),
        spans=[span_from_dict(span) for span in d.get("spans", [])],
        table=table_from_dict(d.get("table")),
        elapsed_ms=d.get("elapsed_ms"),
    )


def transcript_to_dict(t: Transcript) -> Dict[str, Any]:
    return {"records": [record_to_dict(r) for r in t.records]}


def transcript_from_dict(d: Dict[str, Any]) -> Transcript:
    return Transcript(records=[record_from_dict(r) for r in d.get("records", [])])


def transcript_to_json(t: Transcript) -> str:
    return json.dumps(transcript_to_dict(t), sort_keys=True, ensure_ascii=False)


def transcript_from_json(s: str) -> Transcript:
    d = json.loads(s)
    return transcript_from_dict(d)


def transcript_to_yaml(t: Transcript) -> str:
    return yaml.safe_dump(transcript_to_dict(t), allow_unicode=True, sort_keys=False)


def transcript_from_yaml(s: str) -> Transcript:
    d = yaml.safe_load(s)
    return transcript_from_dict(d or {})
