# katas

A library of small, self-contained programming exercises with tested
solutions. Each exercise lives in its own module inside the `katas`
package and is used by importing it; there is no command-line program.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | What it provides |
| --- | --- |
| `katas.numbers` | `is_armstrong_number`, `collatz`, `egg_count`, `square`, `total`, `is_leap_year`, `nth`, `factors`, `raindrops`, `square_of_sum`, `sum_of_squares`, `difference`, `sum_of_multiples` |
| `katas.high_scores` | `HighScores` — all scores, latest, personal best and top three |
| `katas.gigasecond` | `after` — the moment one billion seconds later |
| `katas.etl` | `transform` — turn a score-to-letters table into letter-to-score |
| `katas.kindergarten` | `plants` — which plants a child tends in the garden diagram |
| `katas.text` | `reply`, `recite`, `build_proverb`, `series`, `reverse`, `reverse_graphemes`, `brackets_are_balanced` |
| `katas.circular_buffer` | `CircularBuffer` with `BufferEmptyError` / `BufferFullError` |
| `katas.linked_list` | `LinkedList` — a doubly linked list with a `Cursor` |
| `katas.ocr` | `convert` — read digits drawn with pipes and underscores |
| `katas.forth` | `Forth` — a small Forth evaluator with user-defined words |
| `katas.react` | `Reactor` — input and compute cells with change callbacks |
| `katas.poker` | `winning_hands` — pick the best poker hands |
| `katas.dominoes` | `chain` — arrange dominoes into a closed chain |

## Examples

```python
from katas.numbers import collatz, factors
from katas.text import reply
from katas.forth import Forth
from katas.poker import winning_hands

collatz(16)                 # 4
factors(60)                 # [2, 2, 3, 5]
reply("WATCH OUT!")         # 'Whoa, chill out!'

forth = Forth()
forth.evaluate(": double 2 * ;")
forth.evaluate("5 double")
forth.stack()               # [10]

winning_hands(["4S 5S 7H 8D JC", "2S 4H 6S 4D JH"])  # ['2S 4H 6S 4D JH']
```

## Errors

Errors are reported with exceptions:

- `CircularBuffer.read` on an empty buffer raises `BufferEmptyError`;
  `write` on a full one raises `BufferFullError` (`overwrite` drops the
  oldest element instead).
- `Forth.evaluate` raises `StackUnderflowError`, `DivisionByZeroError`,
  `UnknownWordError` or `InvalidWordError`, all subclasses of `ForthError`.
- `katas.ocr.convert` raises `InvalidRowCountError` or
  `InvalidColumnCountError`, subclasses of `OcrError` (itself a `ValueError`).
- `Reactor` raises `UnknownCellError` for cells it does not hold, and
  `remove_callback` raises `NonexistentCellError` or
  `NonexistentCallbackError`.
- `chain` returns `None` when no closed chain exists; `collatz` returns
  `None` for numbers below 1.