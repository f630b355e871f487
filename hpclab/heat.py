"""Implicit finite-difference solver for heat conduction in a plate."""

from __future__ import annotations

import argparse
import struct
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Sequence

_DOUBLE = struct.Struct("<d")


@dataclass
class HeatProblem:
    """One-dimensional plate with fixed temperatures on both faces.

    Units: seconds, metres, W/(m K), kg/m^3, J/(kg K), degrees Celsius.
    """

    n: int = 1000001
    t_end: float = 60.0
    length: float = 0.1
    conductivity: float = 46.0
    density: float = 7800.0
    heat_capacity: float = 460.0
    t_initial: float = 20.0
    t_left: float = 300.0
    t_right: float = 100.0
    time: float = field(default=0.0, init=False)
    temperature: list[float] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.n < 2:
            raise ValueError("the grid needs at least two nodes")
        if self.t_end <= 0:
            raise ValueError("simulation time must be positive")
        if self.length <= 0:
            raise ValueError("plate thickness must be positive")
        self.temperature = [float(self.t_initial)] * self.n
        self.temperature[0] = float(self.t_left)
        self.temperature[-1] = float(self.t_right)

    @property
    def h(self) -> float:
        """Spatial step."""
        return self.length / (self.n - 1)

    @property
    def tau(self) -> float:
        """Time step: a hundredth of the simulated time."""
        return self.t_end / 100

    def step(self) -> None:
        """Advance the field by one time step using the sweep (Thomas) method."""
        self.time += self.tau
        h2 = self.h * self.h
        a = self.conductivity / h2
        c = self.conductivity / h2
        inertia = self.density * self.heat_capacity / self.tau
        b = 2 * self.conductivity / h2 + inertia

        alphas: list[float] = []
        betas: list[float] = []
        alpha, beta = 0.0, float(self.t_left)
        for t in self.temperature[1:-1]:
            denom = b - c * alpha
            alpha, beta = a / denom, (c * beta + inertia * t) / denom
            alphas.append(alpha)
            betas.append(beta)

        temps = self.temperature
        for i in range(len(alphas), 0, -1):
            temps[i] = alphas[i - 1] * temps[i + 1] + betas[i - 1]


def solve_heat_1d(problem: HeatProblem) -> list[float]:
    """Step ``problem`` until its time reaches ``t_end`` and return the field."""
    while problem.time < problem.t_end:
        problem.step()
    return problem.temperature


def write_profile(path: str | Path, h: float, start: int, values: Sequence[float]) -> int:
    """Write lines ``index coordinate value`` for ``values`` beginning at ``start``.

    Returns the number of lines written.
    """
    lines = [
        f"{i} {i * h:g} {v:g}\n" for i, v in enumerate(values, start=start)
    ]
    with open(path, "w", encoding="ascii") as out:
        out.writelines(lines)
    return len(lines)


def _write_fixed_profile(path: Path, h: float, values: Sequence[float]) -> None:
    with open(path, "w", encoding="ascii") as out:
        out.writelines(f"{i} {i * h:f} {v:f}\n" for i, v in enumerate(values))


def write_double_array(path: str | Path, values: Iterable[float]) -> int:
    """Write ``values`` as little-endian 8-byte doubles; return how many."""
    data = b"".join(_DOUBLE.pack(v) for v in values)
    Path(path).write_bytes(data)
    return len(data) // _DOUBLE.size


def read_double_array(path: str | Path, count: int) -> list[float]:
    """Read up to ``count`` doubles written by :func:`write_double_array`."""
    if count < 0:
        raise ValueError("count must not be negative")
    with open(path, "rb") as f:
        data = f.read(count * _DOUBLE.size)
    usable = len(data) - len(data) % _DOUBLE.size
    return [v for (v,) in _DOUBLE.iter_unpack(data[:usable])]


@dataclass(frozen=True)
class GridConfig:
    """Number of nodes of a two-dimensional grid."""

    nx: int = 100
    ny: int = 150


def read_grid_config(file_name: str | Path) -> GridConfig:
    """Grid parameters for a geometry file; the standard 100 x 150 grid is used."""
    return GridConfig()


def _check_binary_io(folder: Path) -> None:
    print("--- test_fwrite_fread_double_array() starting ---")
    written = [i + 0.1 * i for i in range(10)]
    print(" ".join(f"{v:f}" for v in written))
    path = folder / "double_arr_w.bin"

    start = time.perf_counter()
    write_double_array(path, written)
    print(f"The time of fwrite_double_array: {_ms(start)} ms")

    start = time.perf_counter()
    read = read_double_array(path, len(written))
    print(f"countr = {len(read)}")
    print(f"The time of fread_double_array: {_ms(start)} ms")

    for i, (w, r) in enumerate(zip(written, read)):
        if abs(w - r) > 0.00001:
            print(f"error! i={i}")
    print(" ".join(f"{v:.4f}" for v in read))


def _ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _run_2d(folder: Path) -> int:
    print("2D Heat Equation")
    conf = read_grid_config(folder / "geometry2d.txt")
    (folder / "report.txt").write_text(f"Nx = {conf.nx}\nNy = {conf.ny}\n")
    return 0


def _run_1d(folder: Path, nodes: int) -> int:
    _check_binary_io(folder)
    print("Уравнение теплопроводности 1D")

    problem = HeatProblem(n=nodes)
    print(f"h = {problem.h:g} м.")
    print(f"tau = {problem.tau:g} сек.")
    print(f"Выделено памяти: {3.0 * nodes * 8 / (1024 * 1024):g} Мб.")

    start = time.perf_counter()
    temps = solve_heat_1d(problem)
    print(f"The time (chrono): {_ms(start)} ms")

    n, h = nodes, problem.h
    quarter = n // 4
    parts = [
        (0, quarter),
        (quarter, quarter),
        (2 * n // 4, quarter),
        (3 * n // 4, quarter + 1),
    ]
    start = time.perf_counter()
    with ThreadPoolExecutor(max_workers=len(parts)) as pool:
        futures = [
            pool.submit(
                write_profile,
                folder / f"out10_{number}.txt",
                h,
                first,
                temps[first:first + size],
            )
            for number, (first, size) in enumerate(parts, start=1)
        ]
        for future in futures:
            future.result()
    print(f"The time (chrono) 10: {_ms(start)} ms (4 threads)")

    start = time.perf_counter()
    _write_fixed_profile(folder / "out11_test_fopen.txt", h, temps)
    print("File has been written")
    print(f"The time (chrono) 11: {_ms(start)} ms (test_fopen)")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Heat conduction solvers.")
    parser.add_argument("mode", nargs="?", choices=("1d", "2d"), default="1d")
    parser.add_argument("--nodes", type=int, default=1000001)
    parser.add_argument("--output", type=Path, default=Path("."))
    args = parser.parse_args(argv)
    args.output.mkdir(parents=True, exist_ok=True)
    if args.mode == "2d":
        return _run_2d(args.output)
    return _run_1d(args.output, args.nodes)


if __name__ == "__main__":
    raise SystemExit(main())