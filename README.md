# fixlings

`fixlings` is a small library for a course of programming exercises. It
offers three things:

- coloured status lines for the terminal (`fixlings.ui`),
- generation of a `rust-project.json` file so that rust-analyzer can treat
  every exercise file as its own crate (`fixlings.project`),
- worked solutions to many of the exercises, with tests that mirror the
  exercises' own checks (`fixlings.exercises`).

It needs Python 3.11 or later and depends on `rich`.

## Status lines

```python
from fixlings.ui import success, warn

success("Successfully ran exercises/00_intro/intro1.rs")
warn("Compiling of exercises/01_variables/variables1.rs failed!")
```

`success` prints a green line, `warn` a red one, each prefixed with an emoji.
When the `NO_EMOJI` environment variable is set, the prefix is a plain
character instead (`✓` or `!`); `no_emoji()` reports whether it is set.

## rust-project.json

```python
from fixlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("exercises")
project.write_to_disk("rust-project.json")
```

- `get_sysroot_src()` takes the standard-library source path from
  `RUST_SRC_PATH` if it is set. Otherwise it runs `rustc --print sysroot`,
  prints the toolchain it found and uses `<sysroot>/lib/rustlib/src/rust/library`.
- `exercises_to_json(root)` walks `root` recursively (default `exercises`)
  and adds a `Crate` for every `.rs` file, in sorted order. `path_to_json(path)`
  does the same for a single path and ignores anything without a `.rs`
  extension.
- Each `Crate` uses edition `2021`, no dependencies and the `test` cfg, so
  the editor also analyses test code.
- `write_to_disk(path)` writes compact JSON (default `rust-project.json`);
  `to_dict()` returns the same data as a dictionary.

## Worked solutions

The `fixlings.exercises` package holds the solutions as plain Python:

| Module | Contents |
| --- | --- |
| `basics` | `sale_price`, `is_even`, `square`, `bigger`, `foo_if_fizz`, `animal_habitat`, `Rectangle` |
| `quizzes` | `calculate_price_of_apples`, `transformer` with `Uppercase` / `Trim` / `Append`, `ReportCard` |
| `structs` | `ColorClassicStruct`, `ColorTupleStruct`, `UnitLikeStruct`, `Order`, `create_order_template`, `Package` |
| `enums` | `Point`, the messages `ChangeColor` / `Echo` / `Move` / `Quit`, and `State.process` |
| `sequences` | `array_and_vec`, `vec_loop`, `vec_map`, `fill_vec`, `make_filled_vec`, the cons list `Cons` |
| `strings` | `is_a_color_word`, `trim_me`, `compose_me`, `replace_me`, `longest` |
| `hashmaps` | `fruit_basket`, `Fruit`, `complete_fruit_basket`, `Team`, `build_scores_table` |
| `options` | `maybe_icecream` |
| `errors` | `generate_nametag_text`, `total_cost`, `PositiveNonzeroInteger`, `CreationError`, `parse_pos_nonzero`, `ParsePosNonzeroError` |
| `iterators` | capitalising helpers, `divide` and its errors, `result_with_list`, `list_of_results`, `factorial`, `Progress` counting |
| `traits` | `Wrapper`, `append_bar`, `Licensed`, `SomeSoftware`, `OtherSoftware`, `compare_license_types` |

Failures are raised as exceptions: for example `parse_pos_nonzero("0")`
raises `ParsePosNonzeroError` wrapping a `CreationError`, and
`divide(81, 0)` raises `DivideByZeroError`.

```python
from fixlings.exercises.quizzes import Append, Trim, Uppercase, transformer

transformer([("hello", Uppercase()), ("  hi  ", Trim()), ("foo", Append(2))])
# ['HELLO', 'hi', 'foobarbar']
```

## What it does not do

`fixlings` installs no command. It does not read a course's exercise list,
compile, run or test exercise files, check for the `I AM NOT DONE` marker,
watch files for changes, show hints, reset exercises or report progress.
It is a set of building blocks and reference solutions, not a course runner.

## Running the tests

    pip install -e ".[test]"
    pytest