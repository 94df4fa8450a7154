# aoc2025

Solutions to the 2025 puzzle calendar. Each solved day has two parts, and each
part reads its puzzle input from a text stream and returns the answer as a
string. Days 1 to 6 are solved.

## Installing

```
pip install .
```

## Running a puzzle

```
aoc2025 DAY PART
```

`DAY` is a number from 1 to 25 and `PART` is 1 or 2. For example:

```
aoc2025 3 2
```

The command reads its input from `./inputs/DD.txt`, where `DD` is the day
written with two digits. If that file does not exist, the command downloads
the input first. It uses the session cookie in the environment variable
`AOC_SESSION_COOKIE` and writes the file into `./inputs`, which must already
exist:

```
export AOC_SESSION_COOKIE=token
aoc2025 1 1
```

Log messages go to standard error. The command logs how long the solver took,
then prints `Result:` followed by the answer. If anything goes wrong (a bad
day or part, a missing cookie, a failed download, malformed input), it logs
the error and exits with status 1.

## What is not included

Only days 1 to 6 have solutions. Asking for any day from 7 to 25 is reported
as an error ("day N has no solution") and nothing is downloaded.

## Using the solvers from Python

The modules `aoc2025.day01` to `aoc2025.day06` each have `part1(stream)` and
`part2(stream)`:

```python
import io
from aoc2025 import day01

print(day01.part1(io.StringIO("L68\nL30\nR48\n")))
```

Malformed input raises `ValueError`.

`aoc2025.cli.solver(day, part)` returns the function for a given day and part,
and raises `aoc2025.cli.UsageError` for a day outside 1 to 25, a part other
than 1 or 2, or a day without a solution. `aoc2025.cli.run(argv)` takes the
day and part as strings and returns the answer; `aoc2025.cli.main(argv=None)`
is the command itself and returns the exit status.

`aoc2025.day04.format_grid(grid)` renders a grid of integers as lines of
digits.

## Helpers

- `aoc2025.arith.modulo_sane(dividend, modulus)` gives a remainder in
  `[0, modulus)`, also for negative dividends. It raises `ValueError` if the
  modulus is not positive.
- `aoc2025.arith.parse_int(text)` parses a decimal integer with an optional
  sign and raises `ValueError` on anything else, including surrounding
  whitespace.
- `aoc2025.matrix.rotate_counter_clockwise(matrix)` rotates a rectangular
  grid by a quarter turn counter-clockwise; an empty grid gives an empty list.
- `aoc2025.download.download_input(session_cookie, year, day, target_folder="")`
  fetches a day's input into `<target_folder>/DD.txt` (`./inputs` when the
  folder is empty). It raises `aoc2025.download.DownloadError` if the request
  fails, the server does not answer with status 200, or the file cannot be
  created.

## Tests

```
pip install .[test]
pytest
```