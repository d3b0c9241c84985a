import argparse
import io
import logging
import os
import re
import sys
from typing import TextIO

from rich.markup import escape

from .colorizer import colorize, split_line_ending
from .config import Settings, load_settings
from .console import err_console
from .errors import RecolorError
from .groups import compile_pattern, group_infos, resolve_group_styles
from .overrides import parse_overrides
from .palette import PaletteCycler, parse_palette
from .styles import Style
from .utils import get_version, setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recolor",
        description="Recolor any command output by styling the capture groups of a regex.",
    )
    parser.add_argument(
        "regex",
        help="Regular expression to match each input line against. Each capture group is "
        "styled with the style given for its name or position, or else with the next "
        "default palette color.",
    )
    parser.add_argument(
        "styles",
        nargs="*",
        metavar="KEY=STYLE[,STYLE...]",
        help="Style for the capture group named or numbered KEY. Styles apply in order, "
        "so 'bold,red' is bold and red while 'red,green' is green. Colors may be named "
        "(red, bright_blue, ...) or given as #RRGGBB.",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Style every match in a line, not only the first one.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {get_version()}")
    return parser


def prepare(
    args: argparse.Namespace, settings: Settings
) -> tuple[re.Pattern[str], dict[int, Style]]:
    """Validate the arguments and resolve a style for every capture group.

    Raises a RecolorError subclass for a bad regex, override or palette.
    """
    pattern = compile_pattern(args.regex)
    overrides = parse_overrides(args.styles)
    palette = PaletteCycler(parse_palette(settings.palette))
    logger.debug("palette: %s", ", ".join(str(style) for style in palette.palette))
    group_styles = resolve_group_styles(group_infos(pattern), overrides, palette)
    return pattern, group_styles


def run(
    input_stream: TextIO,
    output_stream: TextIO,
    args: argparse.Namespace,
    settings: Settings | None = None,
) -> None:
    """Colorize input_stream into output_stream, one line at a time."""
    settings = settings or Settings()
    pattern, group_styles = prepare(args, settings)
    all_matches = args.all or settings.all_matches

    for raw in input_stream:
        line, ending = split_line_ending(raw)
        output_stream.write(
            colorize(
                line,
                pattern,
                group_styles,
                color_system=settings.color_system,
                all_matches=all_matches,
            )
            + ending
        )
        output_stream.flush()


def _reconfigure_streams() -> None:
    """Pass undecodable bytes and \\r\\n line endings through unchanged."""
    # Only the process's own streams; leave replacements (e.g. captured output) alone.
    for stream, original in ((sys.stdin, sys.__stdin__), (sys.stdout, sys.__stdout__)):
        if stream is original and isinstance(stream, io.TextIOWrapper):
            stream.reconfigure(encoding="utf-8", errors="surrogateescape", newline="")


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    setup_logging(logging.DEBUG if args.verbose else settings.log_level)
    logger.debug("args: %s", args)

    _reconfigure_streams()
    try:
        run(sys.stdin, sys.stdout, args, settings)
    except RecolorError as e:
        err_console.print(f"[bold red]error:[/bold red] {escape(str(e))}")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)
    except BrokenPipeError:
        # The reader went away (e.g. `| head`). Point stdout at devnull so the
        # interpreter's final flush doesn't raise again.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(0)


if __name__ == "__main__":
    main()
