"""Command entry point: load words, estimate, and write the wordlist."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from .args import DEFAULT_PROG, Options, help_text, parse_args, version_text
from .errors import ExitCode, OutputError, SwgError, UsageError
from .generator import PROMPT_THRESHOLD, estimate_lines, write_wordlist
from .wordio import WordLoader, prompt_user


def resolve_depth(
    requested: int,
    word_count: int,
    quiet: bool = False,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Pick the depth to generate: the word count by default, never above it."""
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr
    if requested == 0:
        if not quiet:
            print(f"Max depth: {word_count} (same as word count)", file=stdout)
        return word_count
    if requested > word_count:
        if not quiet:
            print(
                f"Warning: requested depth ({requested}) is bigger than total word count "
                f"({word_count}); capping to {word_count}",
                file=stderr,
            )
            print(f"Max depth: {word_count} (capped)", file=stdout)
        return word_count
    if not quiet:
        print(f"Max depth: {requested}", file=stdout)
    return requested


def _produce(
    opts: Options,
    words: list[str],
    out: TextIO,
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
    say: Callable[[str], None],
) -> int:
    depth = resolve_depth(opts.depth, len(words), opts.quiet, stdout, stderr)
    estimate = estimate_lines(len(words), depth)
    say(f"Rough estimate for total amount of lines: {estimate:.0f}")
    if opts.dry_run:
        print("Dry run detected, exiting...", file=stdout)
        return ExitCode.OK
    if estimate > PROMPT_THRESHOLD and not prompt_user(stdin, stdout):
        print("Aborted by user.", file=stderr)
        return ExitCode.OK
    say("Creating wordlist...")
    write_wordlist(out, words, depth)
    say("Wordlist generation complete.")
    return ExitCode.OK


def _generate(opts: Options, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    def say(message: str) -> None:
        if not opts.quiet:
            print(message, file=stdout)

    loader = WordLoader(quiet=opts.quiet, warn=lambda message: print(message, file=stderr))
    if opts.words is not None:
        say(f"Input: '{opts.words}'")
        loader.load_string(opts.words)
    else:
        loader.load_file(opts.file)
        say(f"Input: '{opts.file}'")

    if opts.output is None:
        out = stdout
        say("Output: STDOUT")
    else:
        try:
            out = open(opts.output, "w", encoding="utf-8", errors="surrogateescape", newline="")
        except OSError as exc:
            print(f"Error creating output file: {exc.strerror or exc}", file=stderr)
            return ExitCode.CANTCREAT
        say(f"Output: '{opts.output}'")

    try:
        status = _produce(opts, loader.words, out, stdin, stdout, stderr, say)
    except BaseException:
        if out is not stdout:
            try:
                out.close()
            except OSError:
                pass
        raise

    try:
        if out is stdout:
            out.flush()
        else:
            out.close()
    except OSError as exc:
        raise OutputError(
            f"failed to close output file '{opts.output}': {exc.strerror or exc}"
        ) from exc
    return status


def run(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run the generator with the arguments that follow the program name; return the exit status."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr
    args = list(argv) if argv is not None else sys.argv[1:]

    try:
        opts = parse_args(args, DEFAULT_PROG)
    except UsageError as exc:
        print(exc.message, file=stderr)
        return int(exc.exit_code)

    if opts.show_help:
        stdout.write(help_text(DEFAULT_PROG))
        return int(ExitCode.OK)
    if opts.show_version:
        print(version_text(), file=stdout)
        return int(ExitCode.OK)

    try:
        return int(_generate(opts, stdin, stdout, stderr))
    except SwgError as exc:
        print(f"Error: {exc.message}", file=stderr)
        return int(exc.exit_code)


def main(argv: Sequence[str] | None = None) -> int:
    """Console entry point."""
    return run(argv)


if __name__ == "__main__":
    sys.exit(main())