# hashoff

A small toolkit for exploring hash tables from the terminal. It includes a
chained hash table, a set of hash functions, an interactive shell for trying
table operations, and a timing harness. The harness measures the cost of
inserts, lookups and removals at several load factors.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

### `hashoff`

Opens a menu with two demos, the interactive shell and the performance
analysis. After each demo it asks whether you want to pick again. The
performance demo reads its words from `res/EnglishWords.txt`.

### `hashoff-repl [--slots N]`

Starts the interactive shell on a `ChainedHashTable` with `N` slots. `N`
defaults to 10.

The shell understands these commands:

- `insert <str>`
- `contains <str>`
- `remove <str>`
- `size`
- `isEmpty`
- `quit`

You can use `i`, `c`, `r`, `s` and `q` in place of the full command names.

Keys are hashed by reading the leading integer of the string modulo the number
of slots. With 10 slots, this is the number's last digit. A string that does
not start with a number hashes to zero. End of input is treated as `quit`.

### `hashoff-perf [WORDS] [--iterations N]`

Times the chained hash table on a word list. The word list is a file of
whitespace-separated words and defaults to `res/EnglishWords.txt`.

The timing runs at each load factor from 0.50 to 0.97. For every load factor
it prints the average cost in nanoseconds of each of these operations:

- successful and failed inserts
- successful and failed lookups
- successful and failed removals

`N` is the number of repetitions and defaults to 10.

## Library use

```python
from hashoff.chained import ChainedHashTable
from hashoff.hashing import identity, random_hash

table = ChainedHashTable(identity(10))
table.insert("137")        # True
table.insert("137")        # False, already present
"137" in table             # True
len(table)                 # 1
table.remove("137")        # True
table.is_empty()           # True

fn = random_hash(1000)     # random tabulation-based hash over 1000 slots
fn("hello")                # a slot index in range(1000)
```

### Modules

- `hashoff.hashing` defines `HashFunction`, which binds a function to a number
  of slots. It also provides the builders `zero`, `constant`, `identity`,
  `random_hash` and `consistent_random`, and the helpers `hash_code` and
  `tabulation_hash`. `consistent_random` gives the same function on every run.
- `hashoff.chained` provides `ChainedHashTable`.
- `hashoff.performance` provides the following:
  - `load_words`
  - `time_test`, which times one table
  - `evaluate`, which times every table at one load factor
  - `render_html`, which renders an HTML results table
  - `format_report`, which produces a plain-text report
  - `TimingResult`
- `hashoff.interactive` provides `run_repl` and `instructions`. `run_repl`
  drives any table object that has `insert`, `remove`, `is_empty`, `in` and
  `len`.
- `hashoff.menu` provides console prompts: `get_integer`, `get_yes_or_no`,
  `make_selection_from` and `make_file_selection`.
- `hashoff.cli` provides `menu_options` and `run_menu`.
- `hashoff.color` and `hashoff.font` provide `Color`, `Font`, `FontFamily` and
  `FontStyle`.
- `hashoff.styled_console` provides `StyledConsole`. It collects text written
  under changing colours and styles and renders it as an HTML document.
- `hashoff.diagnostics` provides `AllocationTracker`. It counts how many
  instances of each tracked class are created and released.

## What it does not do

The only table included is the chained hash table. There is no
open-addressing table, such as linear probing, to compare it against. The
performance harness therefore times a single table. You can time other tables
by passing your own `(name, factory)` pairs to `evaluate`.

Everything runs in the terminal. There is no graphical window. The HTML from
`render_html` and `StyledConsole` is returned as a string and is not displayed.