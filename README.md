# algodemos

Small interactive console programs that show how classic searching and
sorting algorithms work. Each program is also a plain Python module whose
algorithm you can import and call. The package has no dependencies beyond
the standard library.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `algodemos-binary-search` | Menu-driven program. Option 1 asks for a positive count, generates that many random integers from 1 to 1000, sorts and prints them, then looks up an element with binary search. Option 2 times best, average and worst case binary searches for input sizes from 100 to 100000 and writes the timings to `binary_search_analysis.csv` in the current directory. Option 3 exits. |
| `algodemos-interpolation` | Generates random integers from 0 to 99, prints them unsorted and sorted, and looks up a key with interpolation search. |
| `algodemos-merge-sort` | Generates random integers from 0 to 999, sorts them with merge sort, then looks up an element with binary search. Both steps are timed in milliseconds. |
| `algodemos-selection-sort` | Menu-driven program. It generates random integers from 0 to 100 and sorts them with selection sort, reporting the time taken. Arrays longer than 20 elements are shown by their first and last 5 elements. |

All commands read their input from standard input. Use them interactively,
or pipe the answers in:

```
printf '10\n42\n' | algodemos-interpolation
```

`algodemos-interpolation` and `algodemos-merge-sort` exit with status 1 when
the count entered is negative. All commands exit quietly when input ends.

## Library use

```python
from algodemos.binary_search import binary_search
from algodemos.interpolation import interpolation_search
from algodemos.merge_sort import merge, merge_sort
from algodemos.selection_sort import format_array, selection_sort

data = merge_sort([5, 3, 9, 1])        # [1, 3, 5, 9]
binary_search(data, 9)                 # 3
interpolation_search(data, 4)          # None, not present
merge([1, 4], [2, 3])                  # [1, 2, 3, 4]
selection_sort([4, 2, 2, 8])           # [2, 2, 4, 8]
print(format_array([2, 4], "Sorted array"), end="")
```

The search functions expect sorted input. They return the index of a
matching element, or `None` when the value is not present. The sort
functions return a new sorted list and leave their argument unchanged.

`algodemos.binary_search` also offers:

- `generate_random_numbers(count, low=1, high=1000, rng=None)`: a list of
  random integers in `[low, high]`, drawn from `rng` (a `random.Random`) if
  given.
- `analyse_performance(path="binary_search_analysis.csv", sizes=..., rng=None)`:
  times best, average and worst case searches for each size, writes them as
  CSV to `path` and returns them as `AnalysisRow` records (`size`, `best_ns`,
  `average_ns`, `worst_ns`, `log2`). A size that is not positive raises
  `ValueError`.
- `perform_search(read=input, write=print, rng=None)`: the interactive search
  of menu option 1, with its input and output functions replaceable; it
  returns the index found or `None`.

`algodemos.selection_sort.generate_random_numbers(count, rng=None)` returns
random integers in `[0, 100]`.

## Limitations

Timings come from `time.perf_counter` and measure single runs, so they vary
between runs and are meant for illustration, not benchmarking. The random
numbers are not seeded by the commands, so each run differs.