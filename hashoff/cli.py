"""Console entry point: a menu of the available hash table demos."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, TextIO

from hashoff import interactive, performance
from hashoff.chained import ChainedHashTable
from hashoff.hashing import identity
from hashoff.menu import get_yes_or_no, make_selection_from

InputFn = Callable[[str], str]
DemoCallback = Callable[[InputFn, TextIO], None]

PROGRAM_TITLE = "The Great Hash-Off"


@dataclass(frozen=True)
class MenuOption:
    """A named demo that can be started from the main menu."""

    name: str
    callback: DemoCallback


def _interactive_demo(input_fn: InputFn, out: TextIO) -> None:
    print(interactive.instructions("Chained Hashing"), end="", file=out)
    table = ChainedHashTable(identity(interactive.DEFAULT_SLOTS))
    interactive.run_repl(table, input_fn, out)


def _performance_demo(input_fn: InputFn, out: TextIO) -> None:
    try:
        words = performance.load_words(performance.DEFAULT_WORDS_PATH)
    except OSError as exc:
        print(f"Cannot read word list: {exc}", file=out)
        return

    names = [name for name, _ in performance.DEFAULT_TABLES]
    rng = random.Random()
    for load in performance.LOAD_FACTORS:
        print(f"Evaluating on load factor alpha = {load:g}...", file=out)
        results = performance.evaluate(
            load, performance.DEFAULT_TABLES, words, performance.DEFAULT_ITERATIONS, rng
        )
        print(performance.format_report(results, names), end="", file=out)


def menu_options() -> list[MenuOption]:
    """The demos offered by the main menu, in menu order."""
    return [
        MenuOption("Interactive Chained Hashing", _interactive_demo),
        MenuOption("Performance Analysis", _performance_demo),
    ]


def run_menu(
    options: Sequence[MenuOption],
    input_fn: Optional[InputFn] = None,
    out: Optional[TextIO] = None,
) -> None:
    """Let the user run demos from ``options`` until they choose to quit."""
    input_fn = input_fn or input
    out = out or sys.stdout

    print("You have switched to the console window. Press ENTER to continue.", file=out)
    input_fn("")

    names = [option.name for option in options] + ["Quit"]
    while True:
        print(PROGRAM_TITLE, file=out)
        selection = make_selection_from("Please make a selection:", names, input_fn, out)
        if selection == len(options):
            break
        options[selection].callback(input_fn, out)
        print(file=out)
        if not get_yes_or_no(
            "You are back at the main menu. Would you like to pick again?", input_fn, out
        ):
            break

    print(file=out)
    print("Exiting...", file=out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=PROGRAM_TITLE)
    parser.parse_args(argv)
    try:
        run_menu(menu_options())
    except (EOFError, KeyboardInterrupt):
        print()
        print("Exiting...")
    return 0


if __name__ == "__main__":
    sys.exit(main())