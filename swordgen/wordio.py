"""Loading words from files and strings, and asking the user to confirm."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Callable
from typing import TextIO

from .errors import InputError

MAX_WORD_LEN = 1024
MAX_WORDS = 1024

_WORD_END = re.compile(r"[ \r\n]")


def _stderr_warn(message: str) -> None:
    print(message, file=sys.stderr)


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8", "surrogateescape"))


class WordLoader:
    """Collects words from files and comma-separated strings, enforcing limits.

    Warnings are passed to ``warn``; they are suppressed when ``quiet`` is set,
    except for the word-limit error when loading from a string.
    """

    def __init__(self, quiet: bool = False, warn: Callable[[str], None] | None = None) -> None:
        self.quiet = quiet
        self.warn = warn if warn is not None else _stderr_warn
        self.words: list[str] = []

    def _notify(self, message: str) -> None:
        if not self.quiet:
            self.warn(message)

    def load_file(self, path: str | os.PathLike[str]) -> list[str]:
        """Read one word per line from ``path``; return the words added."""
        try:
            fp = open(path, "rb")
        except OSError as exc:
            raise InputError(f"cannot open '{os.fspath(path)}': {exc.strerror or exc}") from exc
        added: list[str] = []
        with fp:
            for linenum, raw in enumerate(fp, start=1):
                line = raw.rstrip(b"\r\n")
                if not line:
                    continue
                if len(line) >= MAX_WORD_LEN:
                    self._notify(
                        f"Warning: line {linenum} in '{os.fspath(path)}' is {len(line)} chars "
                        f"(>= {MAX_WORD_LEN}); skipping"
                    )
                    continue
                if len(self.words) >= MAX_WORDS:
                    self._notify(f"Error: too many words (max {MAX_WORDS}); stopping read")
                    break
                word = line.decode("utf-8", "surrogateescape")
                self.words.append(word)
                added.append(word)
        return added

    def load_string(self, text: str) -> list[str]:
        """Read a comma-separated list of words; return the words added.

        Each token is cut at its first space, CR or LF.
        """
        added: list[str] = []
        tokens = (tok for tok in text.split(",") if tok)
        for index, token in enumerate(tokens, start=1):
            word = _WORD_END.split(token, maxsplit=1)[0]
            if not word:
                self._notify(f"Warning: word #{index} is empty; skipping")
            elif _byte_len(word) >= MAX_WORD_LEN:
                self._notify(
                    f"Warning: word #{index} ('{word[:8]}...') exceeds {MAX_WORD_LEN} characters; skipping"
                )
            elif len(self.words) >= MAX_WORDS:
                self.warn(f"Error: too many words (max {MAX_WORDS}); stopping read")
                break
            else:
                self.words.append(word)
                added.append(word)
        return added


def prompt_user(stdin: TextIO | None = None, stdout: TextIO | None = None) -> bool:
    """Warn that the output will be huge and ask to proceed; True only on y/Y."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stdout.write(
        "Warning: estimated wordlist size is way too big!\n"
        "This may fill your disk or take a very long time.\n"
        "Proceed anyway? (y/N): "
    )
    stdout.flush()
    try:
        answer = stdin.readline()
    except OSError:
        return False
    return answer[:1] in ("y", "Y")