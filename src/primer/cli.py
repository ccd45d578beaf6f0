"""
Command line entry point.

    primer                          run every lesson, plain text on stdout
    primer console variables        run selected lessons, catalog order
    primer --list                   list lessons
    primer --format json -o t.json  save a machine-readable transcript
    primer --report                 print a transcript report on stderr
"""

import argparse
import logging
import sys
from typing import List, Optional

from primer import __version__
from primer.analyzer import analyze_transcript
from primer.backends import RenderMode, StreamSink, render_transcript
from primer.config import FORMATS, ConfigError, RunnerConfig, load_config
from primer.console import Console
from primer.lessons import LESSONS, UnknownLessonError, select_lessons
from primer.logging_config import setup_logging
from primer.runner import run_lessons
from primer.serialization import transcript_to_json, transcript_to_yaml


logger = logging.getLogger(__name__)


def generate_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="primer",
        description="Run language fundamentals demonstrations and print their console output",
    )
    parser.add_argument("lessons", nargs="*", metavar="LESSON", help="lessons to run (default: all)")
    parser.add_argument("--list", action="store_true", help="list lessons and exit")
    parser.add_argument("-f", "--format", choices=FORMATS, help="output format (default: text)")
    parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="ANSI colors in text output",
    )
    parser.add_argument("-o", "--output", metavar="PATH", help="write output to PATH instead of stdout")
    parser.add_argument("-c", "--config", metavar="PATH", help="YAML configuration file")
    parser.add_argument(
        "--report",
        action="store_true",
        default=None,
        help="print a transcript report on stderr",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="more diagnostics (-v INFO, -vv DEBUG)"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _resolve_config(parser: argparse.ArgumentParser, args: argparse.Namespace) -> RunnerConfig:
    try:
        config = load_config(args.config) if args.config else RunnerConfig()
        log_level = {0: None, 1: "INFO"}.get(args.verbose, "DEBUG")
        return config.merged(
            {
                "lessons": args.lessons or None,
                "format": args.format,
                "color": args.color,
                "output": args.output,
                "log_level": log_level,
                "report": args.report,
            }
        )
    except ConfigError as exc:
        parser.error(str(exc))


def _list_lessons() -> None:
    width = max(len(lesson.name) for lesson in LESSONS)
    for lesson in LESSONS:
        print(f"{lesson.name.ljust(width)}  {lesson.title} ({len(lesson.units)} units)")


def main(argv: Optional[List[str]] = None) -> int:
    parser = generate_parser()
    args = parser.parse_args(argv)

    if args.list:
        _list_lessons()
        return 0

    config = _resolve_config(parser, args)
    setup_logging(config.log_level)

    try:
        lessons = select_lessons(config.lessons)
    except UnknownLessonError as exc:
        parser.error(str(exc))

    mode = RenderMode.ANSI if config.color else RenderMode.PLAIN
    streaming = config.format == "text" and config.output is None
    console = Console(sink=StreamSink(sys.stdout, mode) if streaming else None)
    transcript = run_lessons(lessons, console)

    if not streaming:
        if config.format == "json":
            payload = transcript_to_json(transcript) + "\n"
        elif config.format == "yaml":
            payload = transcript_to_yaml(transcript)
        else:
            payload = render_transcript(transcript, mode)

        if config.output:
            with open(config.output, "w", encoding="utf-8") as f:
                f.write(payload)
            logger.info("Wrote %s output to %s", config.format, config.output)
        else:
            sys.stdout.write(payload)

    if config.report:
        report = analyze_transcript(transcript)
        for line in report.summary_lines():
            print(line, file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
