"""
Text renderer for transcripts.

Converts OutputRecords into the lines a terminal shows.

Supports two modes:
    - PLAIN: text only, styles dropped
    - ANSI: warn/error/debug coloring, bold group labels, %c styles,
      all rendered through rich as truecolor escape codes

Layout rules shared by both modes:
    - Records inside a group are indented 2 spaces per depth level
    - Every line of a multi-line record gets the indentation
    - Group end and timer start records print nothing
"""

from enum import Enum
from typing import Optional, TextIO

from rich.color import Color, ColorParseError
from rich.console import Console as TerminalConsole
from rich.style import Style as TerminalStyle
from rich.text import Text

from primer.console import OutputRecord, RecordLevel, Style, Transcript


class RenderMode(Enum):
    """Rendering modes for text output."""
    PLAIN = "plain"
    ANSI = "ansi"


_SILENT_LEVELS = {RecordLevel.GROUP_END, RecordLevel.TIME}

_LEVEL_STYLES = {
    RecordLevel.WARN: TerminalStyle(color="yellow"),
    RecordLevel.ERROR: TerminalStyle(color="red"),
    RecordLevel.DEBUG: TerminalStyle(dim=True),
    RecordLevel.GROUP: TerminalStyle(bold=True),
}

# CSS color keywords; rich's own names follow the xterm palette instead.
_CSS_COLORS = {
    "black": "#000000",
    "silver": "#c0c0c0",
    "gray": "#808080",
    "grey": "#808080",
    "white": "#ffffff",
    "maroon": "#800000",
    "red": "#ff0000",
    "purple": "#800080",
    "fuchsia": "#ff00ff",
    "magenta": "#ff00ff",
    "green": "#008000",
    "lime": "#00ff00",
    "olive": "#808000",
    "yellow": "#ffff00",
    "navy": "#000080",
    "blue": "#0000ff",
    "teal": "#008080",
    "aqua": "#00ffff",
    "cyan": "#00ffff",
    "orange": "#ffa500",
    "pink": "#ffc0cb",
}

_BOLD_WEIGHTS = ("bold", "bolder", "700", "800", "900")

_terminal = TerminalConsole(
    color_system="truecolor",
    force_terminal=True,
    force_jupyter=False,
    no_color=False,
    highlight=False,
    markup=False,
    emoji=False,
    soft_wrap=True,
    legacy_windows=False,
)


def _parse_color(value: Optional[str]) -> Optional[Color]:
    """Parse #rgb, #rrggbb, rgb(r, g, b) or a CSS color keyword."""
    if not value:
        return None
    value = value.strip().lower()
    value = _CSS_COLORS.get(value, value)
    if len(value) == 4 and value.startswith("#"):
        value = "#" + "".join(ch * 2 for ch in value[1:])
    try:
        return Color.parse(value)
    except ColorParseError:
        return None


def to_terminal_style(style: Style) -> TerminalStyle:
    """
    Translate a Style to a rich Style.

    Padding and font size have no terminal equivalent and are ignored,
    as are colors that do not parse.
    """
    decoration = (style.text_decoration or "").lower()
    return TerminalStyle(
        color=_parse_color(style.color),
        bgcolor=_parse_color(style.background_color),
        bold=(style.font_weight or "").strip().lower() in _BOLD_WEIGHTS or None,
        italic=(style.font_style or "").strip().lower() == "italic" or None,
        underline="underline" in decoration or None,
        strike="line-through" in decoration or None,
    )


def _to_text(record: OutputRecord) -> Text:
    base = _LEVEL_STYLES.get(record.level, TerminalStyle.null())
    if not record.spans:
        return Text(record.text, style=base)
    text = Text(style=base)
    for span in record.spans:
        text.append(span.text, style=to_terminal_style(span.style) if span.style else None)
    return text


def _ansi_text(record: OutputRecord) -> str:
    with _terminal.capture() as capture:
        _terminal.print(_to_text(record), end="", crop=False)
    return capture.get()


def render_record(record: OutputRecord, mode: RenderMode = RenderMode.PLAIN) -> Optional[str]:
    """
    Render one record.

    Args:
        record: Record to render
        mode: Rendering mode

    Returns:
        Rendered text (possibly several lines), or None when the record
        prints nothing
    """
    if record.level in _SILENT_LEVELS:
        return None
    if record.level is RecordLevel.GROUP and not record.text:
        return None

    text = _ansi_text(record) if mode == RenderMode.ANSI else record.text
    if record.depth:
        indent = "  " * record.depth
        text = indent + text.replace("\n", "\n" + indent)
    return text


def render_transcript(transcript: Transcript, mode: RenderMode = RenderMode.PLAIN) -> str:
    """
    Render a whole transcript.

    Returns:
        All printed lines joined with newlines (with a trailing newline
        when anything was printed)
    """
    lines = []
    for record in transcript:
        rendered = render_record(record, mode)
        if rendered is not None:
            lines.append(rendered)
    return "\n".join(lines) + "\n" if lines else ""


def write_transcript(
    transcript: Transcript, stream: TextIO, mode: RenderMode = RenderMode.PLAIN
) -> None:
    stream.write(render_transcript(transcript, mode))


def save_transcript(
    transcript: Transcript, filename: str, mode: RenderMode = RenderMode.PLAIN
) -> None:
    """
    Render and save to file.

    Args:
        transcript: Transcript to render
        filename: Output file path
        mode: Rendering mode
    """
    with open(filename, "w", encoding="utf-8") as f:
        f.write(render_transcript(transcript, mode))


class StreamSink:
    """
    Console sink that renders each record the moment it is emitted.

    Example:
        console = Console(sink=StreamSink(sys.stdout))
    """

    def __init__(self, stream: TextIO, mode: RenderMode = RenderMode.PLAIN) -> None:
        self.stream = stream
        self.mode = mode

    def __call__(self, record: OutputRecord) -> None:
        rendered = render_record(record, self.mode)
        if rendered is not None:
            self.stream.write(rendered + "\n")
            self.stream.flush()


__all__ = [
    "RenderMode",
    "StreamSink",
    "render_record",
    "render_transcript",
    "save_transcript",
    "to_terminal_style",
    "write_transcript",
]
