# weatherstats

Reads a file of weather-station measurements and prints the minimum, mean and
maximum temperature for each station. The input is one measurement per line,
with the station name and the value separated by a semicolon, and every line
ends with a newline:

```
Hamburg;12.0
Bulawayo;8.9
Palembang;38.8
Hamburg;-3.4
```

Values are kept in tenths. Only the first digit after the decimal point is
used, and a value without a decimal point, such as `12`, is read as `12.0`.
Reading stops at the first line that has no `;`.

## Installation

```
pip install .
```

Install with the `test` extra to get the test dependencies:

```
pip install ".[test]"
```

## Summarising measurements

```
weatherstats measurements.txt
```

If no path is given, `measurements.txt` in the current directory is read. The
file is split into one block per CPU at line boundaries, and the blocks are
processed in parallel worker processes. The summaries are printed on one line,
sorted by the bytes of the station name:

```
{Bulawayo=8.9/8.9/8.9, Hamburg=-3.4/4.3/12.0, Palembang=38.8/38.8/38.8}
```

Each entry is `station=min/mean/max`, each value written with one decimal
place.

## Generating sample data

```
weatherstats-generate 100 1000000 > measurements.txt
```

The first argument is the number of distinct stations and the second is the
number of rows to write; both must be non-negative whole numbers. Station
names are random ASCII letters and digits, from 1 to 32 characters long.
Values are random, between -99.9 and 99.9 with one decimal place.

## Using it from Python

```python
import random

from weatherstats.aggregate import summarize, process_block, format_results
from weatherstats.generate import make_cities, make_rows
from weatherstats.records import parse_line, Tally

print(summarize("measurements.txt", workers=4))

data = b"Hamburg;12.0\nHamburg;-3.4\n"
print(format_results(process_block(data, 0, len(data))))
# {Hamburg=-3.4/4.3/12.0}

name, value = parse_line(b"Hamburg;12.0")
tally = Tally(value)
tally.add(parse_line(b"Hamburg;-3.4")[1])
print(name.decode(), tally)  # Hamburg -3.4/4.3/12.0

rng = random.Random(1)
for row in make_rows(make_cities(3, rng), 5, rng):
    print(row)
```

- `weatherstats.records`: `MiniDec` (a signed value in tenths, supporting `+`,
  ordering and `str`), `parse_value`, `parse_line` and `Tally` (started from
  one value, with `add` and `merge`).
- `weatherstats.aggregate`: `split_blocks`, `process_block`, `merge_results`,
  `format_results` and `summarize`, which returns the formatted summary
  string. `workers` defaults to the number of CPUs.
- `weatherstats.generate`: `city_name`, `make_cities` and `make_rows`, each
  taking an optional `random.Random`.