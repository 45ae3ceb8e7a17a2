"""Generation of every concatenation of words up to a given depth."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import product
from typing import TextIO

from .errors import OutputError

OUTPUT_BUF_SIZE = 8 * 1024 * 1024
PROMPT_THRESHOLD = 500e6


def iter_combinations(words: Iterable[str], max_depth: int) -> Iterator[str]:
    """Yield every concatenation of 1..max_depth words, shortest first.

    Within one depth the last position varies fastest, like a counter.
    """
    pool = list(words)
    if not pool:
        return
    for depth in range(1, max_depth + 1):
        for combo in product(pool, repeat=depth):
            yield "".join(combo)


def _flush(out: TextIO, chunk: list[str]) -> None:
    data = "".join(chunk)
    try:
        written = out.write(data)
    except OSError as exc:
        raise OutputError(f"write failed: {exc.strerror or exc}") from exc
    if isinstance(written, int) and written < len(data):
        raise OutputError("write failed: short write")


def write_wordlist(
    out: TextIO,
    words: Iterable[str],
    max_depth: int,
    buffer_size: int = OUTPUT_BUF_SIZE,
) -> int:
    """Write every combination, one per line, batching writes; return the line count."""
    if buffer_size < 1:
        raise ValueError("buffer_size must be positive")
    chunk: list[str] = []
    used = 0
    count = 0
    for word in iter_combinations(words, max_depth):
        line = word + "\n"
        if chunk and used + len(line) > buffer_size:
            _flush(out, chunk)
            chunk.clear()
            used = 0
        chunk.append(line)
        used += len(line)
        count += 1
    if chunk:
        _flush(out, chunk)
    return count


def estimate_lines(word_count: int, max_depth: int) -> float:
    """Return the number of lines a run would produce, as a float."""
    return sum((float(word_count) ** d for d in range(1, max_depth + 1)), 0.0)