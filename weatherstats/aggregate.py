"""Read a measurements file and print min/mean/max per station."""

from __future__ import annotations

import argparse
import copy
import mmap
import os
import sys
from collections.abc import Iterable, Mapping
from concurrent.futures import ProcessPoolExecutor

from weatherstats.records import Tally, parse_line

DEFAULT_PATH = "measurements.txt"


def split_blocks(data, parts: int) -> list[tuple[int, int]]:
    """Cut ``data`` into ``parts`` ranges that end on a newline or at the end.

    Each range is ``(start, end)``; the next range starts just after ``end``.
    """
    if parts < 1:
        raise ValueError("parts must be at least 1")
    size = len(data)
    chunk = size // parts
    blocks = []
    current = 0
    for _ in range(parts):
        end = min(current + chunk, size)
        newline = data.find(b"\n", end)
        if newline < 0:
            if end != size:
                raise ValueError("data does not end with a newline")
            newline = end
        blocks.append((current, newline))
        current = newline + 1
    return blocks


def process_block(data, start: int, end: int) -> dict[bytes, Tally]:
    """Tally every newline-terminated line found in ``data[start:end]``.

    Processing stops at the first line without a ``;`` separator.
    """
    tallies: dict[bytes, Tally] = {}
    if end <= start:
        return tallies
    line_start = start
    while True:
        newline = data.find(b"\n", line_start, end)
        if newline < 0:
            break
        try:
            key, value = parse_line(data[line_start:newline])
        except ValueError:
            break
        tally = tallies.get(key)
        if tally is None:
            tallies[key] = Tally(value)
        else:
            tally.add(value)
        line_start = newline + 1
        if line_start >= end:
            break
    return tallies


def merge_results(results: Iterable[Mapping[bytes, Tally]]) -> dict[bytes, Tally]:
    """Combine per-block tallies into one mapping without altering the inputs."""
    merged: dict[bytes, Tally] = {}
    for result in results:
        for key, tally in result.items():
            existing = merged.get(key)
            if existing is None:
                merged[key] = copy.copy(tally)
            else:
                existing.merge(tally)
    return merged


def format_results(tallies: Mapping[bytes, Tally]) -> str:
    """Render tallies as ``{name=min/mean/max, ...}`` sorted by name bytes."""
    entries = (
        f"{key.decode('utf-8', errors='replace')}={tallies[key]}"
        for key in sorted(tallies)
    )
    return "{" + ", ".join(entries) + "}"


def _process_file_block(path: str, start: int, end: int) -> dict[bytes, Tally]:
    if end <= start:
        return {}
    with open(path, "rb") as handle, mmap.mmap(
        handle.fileno(), 0, access=mmap.ACCESS_READ
    ) as data:
        return process_block(data, start, end)


def summarize(path, workers: int | None = None) -> str:
    """Compute the formatted summary of a measurements file."""
    if workers is None:
        workers = os.cpu_count() or 1
    path = os.fspath(path)
    with open(path, "rb") as handle:
        if os.fstat(handle.fileno()).st_size == 0:
            return format_results({})
        with mmap.mmap(handle.fileno(), 0, access=mmap.ACCESS_READ) as data:
            blocks = split_blocks(data, workers)
    if workers == 1:
        results = [_process_file_block(path, start, end) for start, end in blocks]
    else:
        with ProcessPoolExecutor(max_workers=workers) as pool:
            results = list(
                pool.map(
                    _process_file_block,
                    [path] * len(blocks),
                    [start for start, _ in blocks],
                    [end for _, end in blocks],
                )
            )
    return format_results(merge_results(results))


def main(argv: list[str] | None = None) -> int:
    """Print the summary of the file named on the command line."""
    parser = argparse.ArgumentParser(
        description="Summarize station temperature measurements."
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    print(summarize(args.path))
    return 0


if __name__ == "__main__":
    sys.exit(main())