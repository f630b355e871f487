"""Statistics over repeated timed runs and the speedup of parallel runs."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from typing import Sequence

from hpclab.vector_sum import FuncResult, VectorRam

_TOLERANCE = 0.0001


def _relative_mismatch(value: float, reference: float) -> bool:
    if reference == 0:
        return value != 0
    return abs((value - reference) / reference) > _TOLERANCE


def _ratio(a: float, b: float) -> float:
    """IEEE-style division: a zero divisor gives an infinity or NaN."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a)
    return a / b


@dataclass(frozen=True)
class CalculationStatistics:
    """Timing statistics (microseconds) of repeated runs of one computation."""

    num_iter: int
    min_value: float
    max_value: float
    avg: float
    median: float
    percentile_95: float
    std_dev: float

    @classmethod
    def from_results(cls, results: Sequence[FuncResult]) -> "CalculationStatistics":
        """Check that the runs agree and summarise their times.

        Raises ``ValueError`` when there are no results, when a later run
        reports failure, or when a result differs from the first by more
        than a relative 0.0001.
        """
        results = list(results)
        if not results:
            raise ValueError("results size is 0")

        reference = float(results[0].result)
        for res in results[1:]:
            if not res.status:
                raise ValueError("a run reported failure")
            if _relative_mismatch(float(res.result), reference):
                raise ValueError(
                    f"result {res.result} differs from {reference} "
                    f"by more than {_TOLERANCE} relative"
                )

        times = sorted(res.time for res in results)
        n = len(times)

        if n % 2 == 0:
            # Times are whole microseconds; the midpoint is truncated.
            median = float((times[n // 2 - 1] + times[n // 2]) // 2)
        else:
            median = float(times[n // 2])

        avg = sum(times) / n
        std_dev = math.sqrt(sum((t - avg) ** 2 for t in times) / n)

        rank = 0.95 * (n - 1) + 1
        lower = math.floor(rank)
        below = times[lower - 1]
        above = times[min(lower, n - 1)]
        percentile = below + (rank - lower) * (above - below)

        return cls(
            num_iter=n,
            min_value=float(times[0]),
            max_value=float(times[-1]),
            avg=avg,
            median=median,
            percentile_95=percentile,
            std_dev=std_dev,
        )

    def describe(self) -> str:
        return (
            f"minValue: {self.min_value:g}; "
            f"median: {self.median:g}; "
            f"avg: {self.avg:g}; "
            f"percentile_95: {self.percentile_95:g}; "
            f"maxValue: {self.max_value:g}; "
            f"stdDev: {self.std_dev:g}; "
        )


@dataclass(frozen=True)
class ParallelCalcIndicators:
    """Speedup ``S`` and efficiency ``E`` of a parallel computation."""

    threads: int
    s_min: float
    s_max: float
    s_avg: float
    s_median: float
    s_perc95: float
    e_min: float
    e_max: float
    e_avg: float
    e_median: float
    e_perc95: float

    @classmethod
    def from_statistics(
        cls,
        seq: CalculationStatistics,
        par: CalculationStatistics,
        threads: int,
    ) -> "ParallelCalcIndicators":
        if threads < 1:
            raise ValueError("at least one thread is required")
        s_min = _ratio(seq.min_value, par.min_value)
        s_max = _ratio(seq.max_value, par.max_value)
        s_avg = _ratio(seq.avg, par.avg)
        s_median = _ratio(seq.median, par.median)
        s_perc95 = _ratio(seq.percentile_95, par.percentile_95)
        return cls(
            threads=threads,
            s_min=s_min,
            s_max=s_max,
            s_avg=s_avg,
            s_median=s_median,
            s_perc95=s_perc95,
            e_min=s_min / threads,
            e_max=s_max / threads,
            e_avg=s_avg / threads,
            e_median=s_median / threads,
            e_perc95=s_perc95 / threads,
        )

    def lines(self) -> list[str]:
        return [
            f"N threads: {self.threads}",
            f"Smin: {self.s_min:g}",
            f"Smax: {self.s_max:g}",
            f"Savg: {self.s_avg:g}",
            f"Smedian: {self.s_median:g}",
            f"Sperc95: {self.s_perc95:g}",
            f"Emin: {self.e_min:g}",
            f"Emax: {self.e_max:g}",
            f"Eavg: {self.e_avg:g}",
            f"Emedian: {self.e_median:g}",
            f"Eperc95: {self.e_perc95:g}",
        ]


def launch_sum(
    vector: VectorRam, threads: int | None = None, iterations: int = 10
) -> list[FuncResult[float]]:
    """Time the whole-vector sum ``iterations`` times.

    With ``threads`` the threaded sum is timed, otherwise the sequential one.
    """
    if iterations < 0:
        raise ValueError("iterations must not be negative")
    if threads is None:
        return [vector.timed_sum() for _ in range(iterations)]
    return [vector.timed_sum_threaded(threads) for _ in range(iterations)]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Speedup and efficiency of a threaded vector sum."
    )
    parser.add_argument("--size", type=int, default=1_000_000)
    parser.add_argument("--threads", type=int, default=4)
    parser.add_argument("--value", type=float, default=0.001)
    parser.add_argument("--iterations", type=int, default=10)
    args = parser.parse_args(argv)

    v = VectorRam(args.size, args.value)

    print("-------LaunchSum sequential Start ------")
    seq_results = launch_sum(v, None, args.iterations)
    print("-------LaunchSum sequential End --------")
    print(f"Seq: testResults_seq size = {len(seq_results)}")
    for res in seq_results:
        print(res.describe())

    print("-------LaunchSum threaded Start ------")
    par_results = launch_sum(v, args.threads, args.iterations)
    print("-------LaunchSum threaded End --------")
    print(f"Parallel: testResults size = {len(par_results)}")
    for res in par_results:
        print(res.describe())

    try:
        stat_seq = CalculationStatistics.from_results(seq_results)
        stat_par = CalculationStatistics.from_results(par_results)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(stat_seq.describe())
    print(stat_par.describe())

    print("--- threads ---")
    indicators = ParallelCalcIndicators.from_statistics(stat_seq, stat_par, args.threads)
    for line in indicators.lines():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())