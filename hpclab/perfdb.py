"""Catalogue of benchmark tasks and an in-memory store of test results."""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass
from enum import IntEnum
from itertools import count
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class TaskTypeGroup(IntEnum):
    """Groups of computational operations."""

    NONE = 0
    VECTOR = 1
    VECVEC = 2
    MATRIX = 3
    MATVEC = 4
    MATMAT = 5


class TaskType(IntEnum):
    """Computational operations."""

    NONE = 0
    SUM = 1
    MIN = 2
    MAX = 3
    DOT_PRODUCT = 4


_GROUP_NAMES = {
    TaskTypeGroup.VECTOR: "Vector",
    TaskTypeGroup.VECVEC: "VecVec",
}

_TYPE_NAMES = {
    TaskType.SUM: "Sum",
}


@dataclass(frozen=True)
class Task:
    """A computational task: an operation within its group."""

    task_type_group: TaskTypeGroup = TaskTypeGroup.NONE
    task_type: TaskType = TaskType.NONE

    def describe(self) -> str:
        group = _GROUP_NAMES.get(self.task_type_group, "None")
        kind = _TYPE_NAMES.get(self.task_type, "None")
        return f"[ group: {group}, type: {kind}]"


class PerfDb(Generic[T]):
    """Results store that hands out the lowest free identifier starting at 1."""

    def __init__(self) -> None:
        self._last_id = 0
        self._data: dict[int, T] = {}

    def add(self, entry: T) -> int:
        """Store ``entry`` and return the identifier it was given."""
        next_id = next(i for i in count(self._last_id + 1) if i not in self._data)
        self._data[next_id] = entry
        return next_id

    def items(self) -> list[tuple[int, T]]:
        """Entries ordered by identifier."""
        return sorted(self._data.items())

    def lines(self) -> list[str]:
        return [f"[{key}: {value}]" for key, value in self.items()]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[tuple[int, T]]:
        return iter(self.items())


_ROW_FORMAT = struct.Struct("<QHHH")


@dataclass(frozen=True)
class FileDbRow:
    """One record of the results file: 8-byte id followed by three 2-byte ids."""

    id: int
    id_comp_system: int
    id_task_type_group: int
    id_task_type: int

    SIZE = _ROW_FORMAT.size

    def to_bytes(self) -> bytes:
        try:
            return _ROW_FORMAT.pack(
                self.id, self.id_comp_system, self.id_task_type_group, self.id_task_type
            )
        except struct.error as exc:
            raise ValueError(f"field out of range: {exc}") from exc

    @classmethod
    def from_bytes(cls, data: bytes) -> "FileDbRow":
        if len(data) != _ROW_FORMAT.size:
            raise ValueError(
                f"expected {_ROW_FORMAT.size} bytes, got {len(data)}"
            )
        return cls(*_ROW_FORMAT.unpack(data))


def main(argv: list[str] | None = None) -> int:
    out = sys.stdout
    print("---", file=out)
    print(int(TaskType.SUM), file=out)
    print(Task(TaskTypeGroup.VECTOR, TaskType.SUM).describe(), file=out)

    db: PerfDb[str] = PerfDb()
    for entry in ("111", "222", "333", "444"):
        db.add(entry)
    for line in db.lines():
        print(line, file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())