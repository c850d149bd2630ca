"""Generate random station measurement rows."""

from __future__ import annotations

import argparse
import random
import string
import sys
from collections.abc import Iterator, Sequence

MIN_VALUE = -999
MAX_VALUE = 999
MIN_CITY_NAME_LEN = 1
MAX_CITY_NAME_LEN = 32

_ALPHANUMERIC = string.ascii_letters + string.digits


def city_name(rng: random.Random | None = None) -> str:
    """Return a random alphanumeric ASCII name of 1 to 32 characters."""
    rng = random.Random() if rng is None else rng
    length = rng.randint(MIN_CITY_NAME_LEN, MAX_CITY_NAME_LEN)
    return "".join(rng.choice(_ALPHANUMERIC) for _ in range(length))


def make_cities(count: int, rng: random.Random | None = None) -> list[str]:
    """Return ``count`` distinct random city names."""
    rng = random.Random() if rng is None else rng
    cities: dict[str, None] = {}
    while len(cities) < count:
        name = city_name(rng)
        if ";" not in name:
            cities.setdefault(name, None)
    return list(cities)


def make_rows(
    cities: Sequence[str], count: int, rng: random.Random | None = None
) -> Iterator[str]:
    """Yield ``count`` rows of the form ``city;value`` with one decimal."""
    rng = random.Random() if rng is None else rng
    for _ in range(count):
        if not cities:
            raise ValueError("no cities to choose from")
        city = rng.choice(cities)
        value = rng.randint(MIN_VALUE, MAX_VALUE) / 10
        yield f"{city};{value:.1f}"


def _non_negative(text: str) -> int:
    try:
        number = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text!r}")
    return number


def main(argv: list[str] | None = None) -> int:
    """Print random measurement rows to standard output."""
    parser = argparse.ArgumentParser(description="Generate example measurements.")
    parser.add_argument("cities", type=_non_negative, help="number of cities")
    parser.add_argument("rows", type=_non_negative, help="number of rows")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    rng = random.Random()
    cities = make_cities(args.cities, rng)
    for row in make_rows(cities, args.rows, rng):
        print(row)
    return 0


if __name__ == "__main__":
    sys.exit(main())