"""Timing hash tables on an English word list across several load factors."""

from __future__ import annotations

import argparse
import random
import sys
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from hashoff.chained import ChainedHashTable
from hashoff.hashing import HashFunction, random_hash

DEFAULT_WORDS_PATH = "res/EnglishWords.txt"
DEFAULT_ITERATIONS = 10

LOAD_FACTORS: tuple[float, ...] = (0.50, 0.60, 0.70, 0.80, 0.85, 0.90, 0.93, 0.96, 0.97)

TableFactory = Callable[[HashFunction], Any]

# Tables included in the comparison, as (display name, factory) pairs.
DEFAULT_TABLES: tuple[tuple[str, TableFactory], ...] = (
    ("Chained Hashing", ChainedHashTable),
)

_HTML_HEADER = """<html>
                <head>
                </head>
                <body style="color:black;background-color:white;font-size:13pt;">"""
_HTML_FOOTER = "</body></html>"
_TABLE_INTRO = '<table cellpadding="3" cellspacing="0" align="center">'
_TABLE_OUTRO = "</table>"
_EMPTY_VALUE = "<i>waiting</i>"


@dataclass(frozen=True)
class TimingResult:
    """Average cost in nanoseconds of each kind of operation."""

    insert_success_time: float
    insert_fail_time: float
    lookup_success_time: float
    lookup_fail_time: float
    remove_success_time: float
    remove_fail_time: float


ROWS: tuple[tuple[str, str], ...] = (
    ("Insert (success)", "insert_success_time"),
    ("Insert (failure)", "insert_fail_time"),
    ("Lookup (success)", "lookup_success_time"),
    ("Lookup (failure)", "lookup_fail_time"),
    ("Remove (success)", "remove_success_time"),
    ("Remove (failure)", "remove_fail_time"),
)


def load_words(path: str) -> list[str]:
    """Read the whitespace-separated words in a file."""
    with open(path, encoding="utf-8") as handle:
        return handle.read().split()


class _Timer:
    """Accumulates the time spent inside its ``with`` blocks."""

    def __init__(self) -> None:
        self.elapsed_ns = 0
        self._start = 0

    def __enter__(self) -> "_Timer":
        self._start = time.perf_counter_ns()
        return self

    def __exit__(self, *exc: object) -> None:
        self.elapsed_ns += time.perf_counter_ns() - self._start


def time_test(
    table_factory: TableFactory,
    words: Sequence[str],
    load_factor: float,
    iterations: int = DEFAULT_ITERATIONS,
    rng: Optional[random.Random] = None,
) -> TimingResult:
    """Time inserts, lookups and removals on a table built by ``table_factory``.

    Raises RuntimeError if the table answers any operation wrongly.
    """
    if not words:
        raise ValueError("no words to time")
    rng = rng or random.Random()
    num_slots = int(len(words) / load_factor)

    insert_success = _Timer()
    insert_fail = _Timer()
    lookup_success = _Timer()
    lookup_fail = _Timer()
    remove_success = _Timer()
    remove_fail = _Timer()

    english = list(words)
    for _ in range(iterations):
        table = table_factory(random_hash(num_slots))
        english = [word.lower() for word in english]

        for word in english:
            with insert_success:
                inserted = table.insert(word)
            if not inserted:
                raise RuntimeError(f'Couldn\'t insert "{word}" into the hash table.')
            with insert_fail:
                inserted = table.insert(word)
            if inserted:
                raise RuntimeError(f'Inserted duplicate word "{word}" into the hash table.')

        rng.shuffle(english)
        for word in english:
            with lookup_success:
                found = word in table
            if not found:
                raise RuntimeError(f'Couldn\'t locate word "{word}" in the hash table.')

        english = [word.upper() for word in english]
        for word in english:
            with lookup_fail:
                found = word in table
            if found:
                raise RuntimeError(f'Found word "{word}", which is not in the hash table.')

        rng.shuffle(english)
        for word in english:
            with remove_fail:
                removed = table.remove(word)
            if removed:
                raise RuntimeError(f'Removed word "{word}", which is not in the hash table.')
            to_remove = word.lower()
            with remove_success:
                removed = table.remove(to_remove)
            if not removed:
                raise RuntimeError(
                    f'Couldn\'t remove word "{word}", which is in the hash table.'
                )

    operations = len(english) * iterations
    return TimingResult(
        *(timer.elapsed_ns / operations for timer in (
            insert_success, insert_fail, lookup_success,
            lookup_fail, remove_success, remove_fail,
        ))
    )


def evaluate(
    load_factor: float,
    tables: Sequence[tuple[str, TableFactory]] = DEFAULT_TABLES,
    words: Sequence[str] = (),
    iterations: int = DEFAULT_ITERATIONS,
    rng: Optional[random.Random] = None,
) -> list[TimingResult]:
    """Time every table at one load factor, in the order given."""
    return [time_test(factory, words, load_factor, iterations, rng) for _, factory in tables]


def nice_to_string(value: float) -> str:
    """Format a number with two digits after the decimal point."""
    return f"{value:.2f}"


def _style_for(row: int) -> str:
    colour = "#ffff80" if row % 2 == 0 else "white"
    return f"background-color:{colour};border: 3px solid black; border-collapse:collapse;"


def render_html(
    results: Sequence[Sequence[TimingResult]],
    table_names: Sequence[str],
) -> str:
    """Render the results table; rows not yet measured show as waiting."""
    parts = [_HTML_HEADER, _TABLE_INTRO, "<tr><th></th><th></th>"]
    parts.extend(f"<th>{name}</th>" for name in table_names)
    parts.append("</tr>")

    for row, load in enumerate(LOAD_FACTORS):
        style = _style_for(row)
        parts.append(f'<tr style="{style}">')
        parts.append(f'<td rowspan="{len(ROWS)}">&alpha; = {load:g}</td>')
        for section, (title, field) in enumerate(ROWS):
            parts.append(f"<td>{title}</td>")
            for col in range(len(table_names)):
                if row < len(results):
                    value = nice_to_string(getattr(results[row][col], field)) + "ns"
                else:
                    value = _EMPTY_VALUE
                parts.append(f"<td>{value}</td>")
            parts.append("</tr>")
            if section + 1 != len(ROWS):
                parts.append(f'<tr style="{style}">')

    parts.append(_TABLE_OUTRO)
    parts.append(_HTML_FOOTER)
    return "".join(parts)


def format_report(results: Sequence[TimingResult], table_names: Sequence[str]) -> str:
    """Plain-text report of one load factor's results, one block per table."""
    if len(results) != len(table_names):
        raise ValueError("Internal error: Size mismatch.")
    lines: list[str] = []
    for name, result in zip(table_names, results):
        lines.append(name)
        lines.extend(f"  {title}: {getattr(result, field):g}" for title, field in ROWS)
        lines.append("")
    return "".join(line + "\n" for line in lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Compare hash table performance.")
    parser.add_argument("words", nargs="?", default=DEFAULT_WORDS_PATH,
                        help="file of whitespace-separated words")
    parser.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS)
    args = parser.parse_args(argv)

    try:
        words = load_words(args.words)
    except OSError as exc:
        print(f"Cannot read word list: {exc}", file=sys.stderr)
        return 1

    names = [name for name, _ in DEFAULT_TABLES]
    rng = random.Random()
    for load in LOAD_FACTORS:
        print(f"Evaluating on load factor alpha = {load:g}...")
        results = evaluate(load, DEFAULT_TABLES, words, args.iterations, rng)
        print(format_report(results, names), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())