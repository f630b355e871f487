"""Element-wise vector operations and sequential or threaded summation."""

from __future__ import annotations

import argparse
import threading
import time
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Sequence, TypeVar

T = TypeVar("T")


def add_arrays(a1: Sequence[float], a2: Sequence[float]) -> list[float]:
    """Element-wise sum of two equally long sequences."""
    if len(a1) != len(a2):
        raise ValueError(f"length mismatch: {len(a1)} and {len(a2)}")
    return [x + y for x, y in zip(a1, a2)]


def add_array_pairs_in_threads(
    pairs: Iterable[tuple[Sequence[float], Sequence[float]]],
) -> list[list[float]]:
    """Add every pair of arrays in its own thread; results keep the input order."""
    pairs = list(pairs)
    for a1, a2 in pairs:
        if len(a1) != len(a2):
            raise ValueError(f"length mismatch: {len(a1)} and {len(a2)}")
    results: list[list[float]] = [[] for _ in pairs]

    def work(slot: int, a1: Sequence[float], a2: Sequence[float]) -> None:
        results[slot] = add_arrays(a1, a2)

    threads = [
        threading.Thread(target=work, args=(slot, a1, a2))
        for slot, (a1, a2) in enumerate(pairs)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return results


def double_values(values: Iterable[float]) -> list[float]:
    """Each value multiplied by two."""
    return [v * 2 for v in values]


@dataclass(frozen=True)
class FuncResult(Generic[T]):
    """Outcome of a timed computation; ``time`` is in whole microseconds."""

    result: T
    time: int
    status: bool = True

    def describe(self) -> str:
        return f"[val: {self.result:g}; time: {self.time}]"


def _check_range(data: Sequence[float], start: int, end: int) -> None:
    if start < 0:
        raise IndexError(f"start index {start} is negative")
    if end >= len(data):
        raise IndexError(f"end index {end} out of range for length {len(data)}")
    if end < start - 1:
        raise ValueError(f"empty range must have end == start - 1, got {start}..{end}")


def sum_range(data: Sequence[float], start: int, end: int) -> float:
    """Sum of ``data[start]`` through ``data[end]`` inclusive."""
    _check_range(data, start, end)
    total = 0
    for value in data[start:end + 1]:
        total += value
    return total


def sum_threaded(data: Sequence[float], start: int, end: int, threads: int) -> float:
    """Inclusive range sum split into ``threads`` blocks, one thread per block.

    Each block holds ``count // threads`` elements; the last block also takes
    the remainder.
    """
    if threads < 1:
        raise ValueError("at least one thread is required")
    _check_range(data, start, end)
    block = (end - start + 1) // threads
    lock = threading.Lock()
    total = [0]

    def work(first: int, last: int) -> None:
        local = sum_range(data, first, last) if last >= first else 0
        with lock:
            total[0] += local

    workers = []
    for i in range(threads):
        first = start + i * block
        last = end if i == threads - 1 else first + block - 1
        workers.append(threading.Thread(target=work, args=(first, last)))
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return total[0]


def _timed(func, *args) -> FuncResult:
    began = time.perf_counter()
    result = func(*args)
    elapsed = int((time.perf_counter() - began) * 1_000_000)
    return FuncResult(result, elapsed)


class VectorRam:
    """A vector of numbers held in memory."""

    def __init__(self, size: int, fill: float = 0.0) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.data: list[float] = [fill] * size

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[float]:
        return iter(self.data)

    def _bounds(self, start: int, end: int | None) -> tuple[int, int]:
        return start, len(self.data) - 1 if end is None else end

    def sum(self, start: int = 0, end: int | None = None) -> float:
        """Sequential sum over the inclusive range, the whole vector by default."""
        return sum_range(self.data, *self._bounds(start, end))

    def sum_threaded(self, threads: int, start: int = 0, end: int | None = None) -> float:
        return sum_threaded(self.data, *self._bounds(start, end), threads)

    def timed_sum(self, start: int = 0, end: int | None = None) -> FuncResult[float]:
        return _timed(self.sum, start, end)

    def timed_sum_threaded(
        self, threads: int, start: int = 0, end: int | None = None
    ) -> FuncResult[float]:
        return _timed(self.sum_threaded, threads, start, end)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sequential and threaded vector sums.")
    parser.add_argument("--size", type=int, default=1_000_000)
    parser.add_argument("--threads", type=int, default=4)
    parser.add_argument("--value", type=float, default=0.001)
    args = parser.parse_args(argv)

    size, threads, value = args.size, args.threads, args.value
    v = VectorRam(size, value)
    half = size // 2

    print(f"sum must be equal {size * value:g}")
    print(f"sum_seq = {v.sum():g}")
    print(f"sum_seq_half must be equal {half * value:g}")
    print(f"sum_seq_half = {v.sum(0, half):g}")
    print(f"sum_par = {v.sum_threaded(threads):g}")
    print(f"sum_par_half = {v.sum_threaded(threads, 0, half):g}")

    seq = v.timed_sum()
    print("sumFR: " + seq.describe())
    seq_half = v.timed_sum(0, half)
    print("sumFR_half: " + seq_half.describe())
    par = v.timed_sum_threaded(threads)
    print("sumFR_par: " + par.describe())
    par_half = v.timed_sum_threaded(threads, 0, half)
    print("sumFR_par_half: " + par_half.describe())

    speedup = seq.time / par.time if par.time else float("inf")
    speedup_half = seq_half.time / par_half.time if par_half.time else float("inf")
    print(f"S = {speedup:g}")
    print(f"S_half = {speedup_half:g}")
    print(f"E = {speedup / threads:g}")
    print(f"E_half = {speedup_half / threads:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())