"""An interactive command loop for experimenting with a hash table."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Callable, Optional, Sequence, TextIO

from hashoff.chained import ChainedHashTable
from hashoff.hashing import identity

InputFn = Callable[[str], str]

PROMPT = "Enter command: "
DEFAULT_SLOTS = 10


def _bool(value: bool) -> str:
    return "true" if value else "false"


def instructions(name: str) -> str:
    """Describe the commands the interpreter understands."""
    lines = [
        f"Interactive {name} Test",
        "This environment allows you to type in commands that will be",
        "executed on your hash table.  The interpreter knows the",
        "following commands:",
        "",
        "   isEmpty:         Reports whether the priority queue is empty.",
        "   size:            Reports the size of the priority queue",
        "   insert <str>:    Inserts the string into the data point.",
        "   contains <str>:  Returns whether the table contains the string.",
        "   remove <str>:    Removes the element from the table.",
        "   quit:            Quits the interpret and returns to the menu.",
        "",
        "The first letter of any command can be used as a substitute",
        "for any command name.",
        "",
        "Elements are hashed by treating the string as a number and using",
        "the number's last digit as the hash code. Non-number inputs will be",
        "hashed to zero.",
    ]
    return "".join(line + "\n" for line in lines)


def _single_argument(words: Sequence[str]) -> Optional[str]:
    """The one argument after the command, or None if there is not exactly one."""
    return words[1] if len(words) == 2 else None


def _execute(table: Any, action: str, words: Sequence[str], out: TextIO) -> None:
    if action == "isempty":
        print(_bool(table.is_empty()), file=out)
    elif action in ("size", "s"):
        print(len(table), file=out)
    elif action in ("insert", "i"):
        key = _single_argument(words)
        if key is None:
            print("Please specify a string to insert.", file=out)
        else:
            result = table.insert(key)
            print(f"Attempted to add {key} to the table. Result: {_bool(result)}", file=out)
    elif action in ("contains", "c"):
        key = _single_argument(words)
        if key is None:
            print("Please specify a string to check.", file=out)
        else:
            print(f"Is {key} in the table? {_bool(key in table)}", file=out)
    elif action in ("remove", "r"):
        key = _single_argument(words)
        if key is None:
            print("Please specify a string to remove.", file=out)
        else:
            result = table.remove(key)
            print(f"Attempted to remove {key} from the table. Result: {_bool(result)}", file=out)
    else:
        print("Unknown command.", file=out)


def run_repl(table: Any, input_fn: InputFn = input, out: Optional[TextIO] = None) -> None:
    """Read commands and apply them to ``table`` until the user quits.

    End of input is treated like ``quit``. Errors raised by the table are
    reported and the loop carries on.
    """
    out = out or sys.stdout
    while True:
        try:
            line = input_fn(PROMPT)
        except EOFError:
            line = "quit"

        words = line.split()
        if not words:
            print("Please enter a command.", file=out)
            continue

        action = words[0].lower()
        if action in ("quit", "q"):
            print("Leaving test environment...   ", end="", file=out)
            out.flush()
            break

        try:
            _execute(table, action, words, out)
        except Exception as exc:  # the loop must survive a faulty table
            print(f"An error occurred: {exc}", file=out)

    print("success.", file=out)
    print(file=out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Interactively test a chained hash table.")
    parser.add_argument("--slots", type=int, default=DEFAULT_SLOTS,
                        help="number of slots in the table")
    args = parser.parse_args(argv)
    if args.slots <= 0:
        parser.error("the table needs at least one slot")

    print(instructions("Chained Hashing"), end="")
    run_repl(ChainedHashTable(identity(args.slots)))
    return 0


if __name__ == "__main__":
    sys.exit(main())