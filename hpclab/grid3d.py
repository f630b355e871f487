"""Layer-per-file data sets on a three-dimensional grid."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

CONF_NAME = "grid.conf"


class DataType(IntEnum):
    """Kind of field stored in a data set."""

    R = 1
    U = 2
    V = 3
    W = 4
    C0 = 5
    C1 = 6
    C2 = 7
    C3 = 8
    C4 = 9
    C5 = 10
    C6 = 11


def _fmt(x: float) -> str:
    return f"{x:g}"


@dataclass
class DataFiles:
    """A folder holding ``grid.conf`` and one ``<k>.dat`` file per z-layer."""

    folder: Path
    nx: int = -1
    ny: int = -1
    nz: int = -1
    data_type: DataType = DataType.R

    def __post_init__(self) -> None:
        self.folder = Path(self.folder)

    def write_data(self) -> None:
        """Write the grid description and sample values ``i + 0.1 j + 0.01 k``."""
        self.folder.mkdir(parents=True, exist_ok=True)
        (self.folder / CONF_NAME).write_text(
            f"{self.nx} {self.ny} {self.nz} {int(self.data_type)}"
        )
        for k in range(self.nz):
            rows = (
                " ".join(_fmt(i + 0.1 * j + 0.01 * k) for i in range(self.nx))
                for j in range(self.ny)
            )
            (self.folder / f"{k}.dat").write_text("\n".join(rows))

    @classmethod
    def open(cls, folder: str | Path) -> "DataFiles":
        folder = Path(folder)
        tokens = (folder / CONF_NAME).read_text().split()
        if len(tokens) < 4:
            raise ValueError(f"{folder / CONF_NAME}: expected nx ny nz type")
        nx, ny, nz, dt = (int(t) for t in tokens[:4])
        return cls(folder, nx, ny, nz, DataType(dt))

    def read_x_line(self, ind_z: int, ind_y: int) -> list[float]:
        """Values along x at layer ``ind_z`` and row ``ind_y``."""
        if not 0 <= ind_z < self.nz:
            raise IndexError(f"z index {ind_z} out of range 0..{self.nz - 1}")
        if not 0 <= ind_y < self.ny:
            raise IndexError(f"y index {ind_y} out of range 0..{self.ny - 1}")
        tokens = (self.folder / f"{ind_z}.dat").read_text().split()
        row = tokens[ind_y * self.nx:(ind_y + 1) * self.nx]
        if len(row) != self.nx:
            raise ValueError(f"{ind_z}.dat holds too few values for row {ind_y}")
        return [float(t) for t in row]

    def describe(self) -> str:
        return f"{self.nx} {self.ny} {self.nz} {int(self.data_type)}"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    folder = Path(args[0] if args else "../data/r/")
    print("--- grid3d ---")

    DataFiles(folder, 30, 20, 10, DataType.R).write_data()
    print(f"{folder} created")

    files = DataFiles.open(folder)
    print(f"{folder} conf readed")
    print(files.describe())
    print(" ".join(_fmt(v) for v in files.read_x_line(1, 2)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())