"""Command-line parsing, help text and version for the wordlist generator."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from .errors import UsageError

VERSION = "0.2.7b"
DEFAULT_PROG = "swg"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Options:
    """Settings collected from the command line."""

    words: str | None = None
    file: str | None = None
    output: str | None = None
    depth: int = 0
    quiet: bool = False
    dry_run: bool = False
    show_help: bool = False
    show_version: bool = False


def _parse_depth(text: str) -> int:
    """Read a leading decimal integer the lenient way; 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _value_for(flag: str, value: str | None, what: str) -> str:
    if value is None or value.startswith("-"):
        raise UsageError(f"Error: '{flag}' requires {what}")
    return value


def parse_args(argv: Sequence[str], prog: str = DEFAULT_PROG) -> Options:
    """Parse the arguments that follow the program name.

    Help and version requests stop parsing at once. Malformed input raises
    UsageError carrying the full message to show.
    """
    if not argv:
        return Options(show_help=True)

    opts = Options()
    args = iter(argv)
    for arg in args:
        match arg:
            case "-h" | "--help":
                return Options(show_help=True)
            case "-v" | "--version":
                return Options(show_version=True)
            case "-w" | "--words":
                opts.words = _value_for(arg, next(args, None), "a comma-separated list of words")
            case "-f" | "--file":
                opts.file = _value_for(arg, next(args, None), "a path to a file")
            case "-o" | "--output":
                opts.output = _value_for(arg, next(args, None), "an output path")
            case "-d" | "--depth":
                depth = _parse_depth(_value_for(arg, next(args, None), "a depth"))
                if depth < 1:
                    raise UsageError("Error: invalid depth")
                opts.depth = depth
            case "-q" | "--quiet":
                opts.quiet = True
            case "-e" | "--estimate":
                opts.dry_run = True
            case _:
                raise UsageError(f"Unknown option: {arg}\nType '{prog} -h' for help")

    if opts.words is not None and opts.file is not None:
        raise UsageError("Error: -w and -f are mutually exclusive")
    if opts.words is None and opts.file is None:
        raise UsageError("Error: you must supply either -w or -f")
    return opts


def help_text(prog: str = DEFAULT_PROG) -> str:
    """Return the help page."""
    return (
        "\x1b[1mSWG - Simple Wordlist Generator\n"
        "This is a \U0001F525blazing fast\U0001F525 and (possibly, most likely) "
        "\U0001F525NOT memory safe\U0001F525 wordlist generator tool!\x1b[m\n\n"
        f"Usage: {prog} [args]\n\n"
        "Required arguments (either/or, but not both):\n"
        "  -w, --words    WORD1,WORD2     Read comma-separated list of words\n"
        "  -f, --file     PATH            Read one word per line from file\n\n"
        "Optional arguments:\n"
        "  -o, --output   PATH            Write the wordlist to specified PATH, otherwise will output to STDOUT\n"
        "  -d, --depth    NUM             Custom depth of a wordlist (how long the generated passwords should be)\n"
        "  -q, --quiet                    Aside from critical errors, informational messages won't be printed\n"
        "  -e, --estimate                 Evaluate the amount of lines you'll generate, without running the code\n"
        "  -h, --help                     Show this help message\n"
        "  -v, --version                  Show current version\n\n"
        "Examples:\n"
        "  swg -w 1,2,3,4,5 -o /usr/share/wordlists/all-five-digit.txt\n"
        "  swg -w foo,bar,baz,qux,quux --depth 3 --estimate\n"
        "  swg -f /tmp/cewl_output.txt -o /usr/share/wordlists/cewl-wordlist.txt\n"
    )


def version_text() -> str:
    """Return the version string."""
    return VERSION