"""Dynamic arrays, nested array containers and 2D/3D index fragments."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass, field
from typing import Iterator, Sequence


def _check_non_negative(**sizes: int) -> None:
    for name, value in sizes.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")


@dataclass(frozen=True)
class Point3D:
    """Point in three-dimensional space with integer coordinates."""

    x: int
    y: int
    z: int

    def distance(self) -> float:
        """Distance from the origin."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def describe(self) -> str:
        return f"Point3D: {{ {self.x}, {self.y}, {self.z} }}"


class Array1D:
    """Fixed-size array of floats, zero-filled on creation."""

    def __init__(self, size: int) -> None:
        _check_non_negative(size=size)
        self._data = [0.0] * size

    @property
    def size(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> float:
        return self._data[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._data[index] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"Array1D({self._data!r})"

    def describe(self) -> str:
        values = "".join(f"{v:f} " for v in self._data)
        return f"Array1D:\n\tsize = {self.size}\n\tdata = {values}\n"


class Arrays1D:
    """Fixed number of slots, each holding an :class:`Array1D`."""

    def __init__(self, num_elements: int, data_num_elements: int = 5) -> None:
        _check_non_negative(num_elements=num_elements, data_num_elements=data_num_elements)
        self._arrays = [Array1D(data_num_elements) for _ in range(num_elements)]

    @property
    def num_elements(self) -> int:
        return len(self._arrays)

    def __len__(self) -> int:
        return len(self._arrays)

    def __getitem__(self, index: int) -> Array1D:
        return self._arrays[index]

    def __iter__(self) -> Iterator[Array1D]:
        return iter(self._arrays)

    def insert(self, array: Array1D, index: int) -> None:
        """Put ``array`` into slot ``index``, replacing what was there."""
        if not 0 <= index < len(self._arrays):
            raise IndexError(f"slot {index} out of range 0..{len(self._arrays) - 1}")
        self._arrays[index] = array

    def describe(self) -> str:
        body = "".join(a.describe() for a in self._arrays)
        return f"Arrays1D:\n\tnumElements = {self.num_elements}\n\tdata:\n{body}\n"


class Arrays1DRepository:
    """A set of :class:`Arrays1D` containers of equal shape."""

    def __init__(self, repository_size: int, num_elements: int, data_num_elements: int) -> None:
        _check_non_negative(repository_size=repository_size)
        self._containers = [
            Arrays1D(num_elements, data_num_elements) for _ in range(repository_size)
        ]

    @property
    def repository_size(self) -> int:
        return len(self._containers)

    def __len__(self) -> int:
        return len(self._containers)

    def __getitem__(self, index: int) -> Arrays1D:
        return self._containers[index]

    def __iter__(self) -> Iterator[Arrays1D]:
        return iter(self._containers)

    def describe(self) -> str:
        body = "".join(c.describe() for c in self._containers)
        return (
            f"Arrays1DRepository:\n\treposytorySize = {self.repository_size}\n"
            f"\tdata:\n{body}\n"
        )


def array2d_by_indexes(rows: int, columns: int) -> list[float]:
    """Row-major 2D array whose every element equals its flat index."""
    _check_non_negative(rows=rows, columns=columns)
    return [float(index) for index in range(rows * columns)]


def _check_length(data: Sequence[float], expected: int) -> None:
    if len(data) != expected:
        raise ValueError(f"expected {expected} values, got {len(data)}")


def _format_rows(data: Sequence[float], rows: int, columns: int) -> str:
    return "".join(
        f"{j}: " + "".join(f"{v:g} " for v in data[j * columns:(j + 1) * columns]) + "\n"
        for j in range(rows)
    )


def format_array2d(data: Sequence[float], rows: int, columns: int) -> str:
    """One line per row: ``row: v v v ``."""
    _check_non_negative(rows=rows, columns=columns)
    _check_length(data, rows * columns)
    return _format_rows(data, rows, columns)


def array3d_by_indexes(rows: int, columns: int, layers: int) -> list[float]:
    """Layer-major 3D array whose every element equals its flat index."""
    _check_non_negative(rows=rows, columns=columns, layers=layers)
    return [float(index) for index in range(rows * columns * layers)]


def format_array3d(data: Sequence[float], rows: int, columns: int, layers: int) -> str:
    """Each layer as a ``Layer k:`` heading, its rows and a blank line."""
    _check_non_negative(rows=rows, columns=columns, layers=layers)
    _check_length(data, rows * columns * layers)
    plane = rows * columns
    return "".join(
        f"Layer {k}:\n" + _format_rows(data[k * plane:(k + 1) * plane], rows, columns) + "\n"
        for k in range(layers)
    )


@dataclass
class Fragment2D:
    """Two-dimensional block of ``num_y`` rows by ``num_x`` columns."""

    num_x: int
    num_y: int
    data: list[float] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        _check_non_negative(num_x=self.num_x, num_y=self.num_y)
        self.data = [0.0] * (self.num_x * self.num_y)

    def init_by_indexes(self) -> None:
        self.data = array2d_by_indexes(self.num_y, self.num_x)

    def describe(self) -> str:
        return (
            f"Fragment2D:\nnumX = {self.num_x}\nnumY = {self.num_y}\ndata = \n"
            + format_array2d(self.data, self.num_y, self.num_x)
            + "\n"
        )


@dataclass
class Fragment3D:
    """Three-dimensional block: ``num_z`` layers of ``num_y`` by ``num_x``."""

    num_x: int
    num_y: int
    num_z: int
    data: list[float] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        _check_non_negative(num_x=self.num_x, num_y=self.num_y, num_z=self.num_z)
        self.data = [0.0] * (self.num_x * self.num_y * self.num_z)

    def init_by_indexes(self) -> None:
        self.data = array3d_by_indexes(self.num_y, self.num_x, self.num_z)

    def describe(self) -> str:
        return (
            f"Fragment3D:\nnumX = {self.num_x}\nnumY = {self.num_y}\n"
            f"numZ = {self.num_z}\ndata = \n"
            + format_array3d(self.data, self.num_y, self.num_x, self.num_z)
            + "\n"
        )


def _ask(value: int | None, message: str) -> int:
    if value is not None:
        return value
    return int(input(message))


def _insert_demo() -> None:
    arrays = Arrays1D(3, 10)
    print(arrays.describe(), end="")
    for index, size in enumerate((3, 4, 5)):
        arrays.insert(Array1D(size), index)
    print("------------------------")
    print(arrays.describe(), end="")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Array and fragment demonstrations.")
    parser.add_argument(
        "demo",
        nargs="?",
        default="point",
        choices=(
            "array", "point", "array1d", "arrays1d", "insert",
            "repository", "array2d", "fragment2d", "fragment3d",
        ),
    )
    parser.add_argument("--size", type=int)
    parser.add_argument("--rows", type=int)
    parser.add_argument("--columns", type=int)
    parser.add_argument("--layers", type=int)
    args = parser.parse_args(argv)

    try:
        if args.demo == "array":
            n = _ask(args.size, "Input number of array elements: ")
            _check_non_negative(size=n)
            print(f"numElements = {n}")
            print("".join(f"{float(i):g} " for i in range(n)))
        elif args.demo == "point":
            point = Point3D(5, 10, 15)
            print(point.describe())
            print(f"distance = {point.distance():.3f}")
        elif args.demo == "array1d":
            arr = Array1D(10)
            arr[0] = 0.01
            arr[9] = 0.09
            print(arr.describe(), end="")
        elif args.demo == "arrays1d":
            print(Arrays1D(3).describe(), end="")
        elif args.demo == "insert":
            _insert_demo()
        elif args.demo == "repository":
            _insert_demo()
            print("<<<<<<<<<<<<<<<<<<<<<<<<>>>>>>>>>>>>>>>")
            print(Arrays1DRepository(2, 3, 4).describe(), end="")
        else:
            rows = _ask(args.rows, "Input number of array rows: ")
            columns = _ask(args.columns, "Input number of array columns: ")
            if args.demo == "array2d":
                print(format_array2d(array2d_by_indexes(rows, columns), rows, columns), end="")
            elif args.demo == "fragment2d":
                fragment = Fragment2D(rows, columns)
                fragment.init_by_indexes()
                print(fragment.describe(), end="")
            else:
                layers = _ask(args.layers, "Input number of array layers: ")
                fragment3 = Fragment3D(rows, columns, layers)
                fragment3.init_by_indexes()
                print(fragment3.describe(), end="")
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())