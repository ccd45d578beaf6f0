"""Backends for transcript output (plain text, ANSI terminal)."""

from .text import (
    RenderMode,
    StreamSink,
    render_record,
    render_transcript,
    save_transcript,
    write_transcript,
)

__all__ = [
    "RenderMode",
    "StreamSink",
    "render_record",
    "render_transcript",
    "save_transcript",
    "write_transcript",
]
