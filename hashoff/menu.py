"""Console prompts: integers, yes/no answers and numbered menus."""

from __future__ import annotations

import os
import sys
from typing import Callable, Optional, Sequence, TextIO

InputFn = Callable[[str], str]


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


def get_integer(prompt: str, input_fn: InputFn = input, out: Optional[TextIO] = None) -> int:
    """Prompt until the reply is a whole integer."""
    out = out or sys.stdout
    while True:
        value = _parse_int(input_fn(prompt))
        if value is not None:
            return value
        print("Illegal integer format. Try again.", file=out)


def get_yes_or_no(prompt: str, input_fn: InputFn = input, out: Optional[TextIO] = None) -> bool:
    """Prompt until the reply starts with Y or N."""
    out = out or sys.stdout
    while True:
        reply = input_fn(prompt).strip().lower()
        if reply[:1] == "y":
            return True
        if reply[:1] == "n":
            return False
        print("Please type a word that starts with 'Y' or 'N'.", file=out)


def make_selection_from(
    title: str,
    options: Sequence[str],
    input_fn: InputFn = input,
    out: Optional[TextIO] = None,
) -> int:
    """List numbered options and return the index the user picks."""
    out = out or sys.stdout
    if not options:
        raise ValueError("Internal error: Requesting the user to pick an item from an empty list.")

    print(title, file=out)
    for index, option in enumerate(options):
        print(f"{index} {option}", file=out)

    while True:
        choice = get_integer("Your choice: ", input_fn, out)
        if 0 <= choice < len(options):
            return choice
        print(f"Please enter a number between 0 and {len(options) - 1}", file=out)


def make_file_selection(
    suffix: str,
    directory: str = "res/",
    input_fn: InputFn = input,
    out: Optional[TextIO] = None,
) -> str:
    """Let the user pick a file ending in ``suffix`` from ``directory``."""
    listed = sorted(os.listdir(directory or "."))
    options = [name for name in listed if name.endswith(suffix)]

    base = directory or "."
    if not base.endswith("/"):
        base += "/"

    choice = make_selection_from("Please choose a demo file from this list:", options, input_fn, out)
    return base + options[choice]