"""Finite-difference stencils for grid equations in one to three dimensions."""

from __future__ import annotations

from numbers import Real

_SIZE = 7


def _fmt(x: float) -> str:
    return f"{x:g}"


class DVal:
    """Unknown of a differential equation on a uniform grid.

    The coefficients are ordered (i,j,k), (i+1,j,k), (i-1,j,k), (i,j+1,k),
    (i,j-1,k), (i,j,k+1), (i,j,k-1).
    """

    def __init__(
        self,
        hx: float | None = None,
        hy: float | None = None,
        hz: float | None = None,
    ) -> None:
        steps = [hx, hy, hz]
        dim = 0
        while dim < 3 and steps[dim] is not None:
            dim += 1
        if any(s is not None for s in steps[dim:]):
            raise ValueError("grid steps must be given in order hx, hy, hz")
        self.dim = dim
        self.hx = float(hx or 0.0)
        self.hy = float(hy or 0.0)
        self.hz = float(hz or 0.0)
        self.koeff = [1.0 if i < 2 * dim + 1 else 0.0 for i in range(_SIZE)]
        self.num = 0.0

    def _steps(self) -> tuple[float, ...]:
        return (self.hx, self.hy, self.hz)[: self.dim]

    def _like(self, source: "DVal", koeff: list[float]) -> "DVal":
        result = DVal()
        result.dim = source.dim
        result.hx, result.hy, result.hz = source.hx, source.hy, source.hz
        result.koeff = koeff
        return result

    def describe(self) -> str:
        if self.dim not in (1, 2, 3):
            raise ValueError("Error in type!!!")
        names = ("hx", "hy", "hz")
        steps = "".join(f"{n} = {_fmt(h)};" for n, h in zip(names, self._steps()))
        coeffs = "; ".join(
            f"k{i}: {_fmt(k)}" for i, k in enumerate(self.koeff[: 2 * self.dim + 1])
        )
        return f"{steps}{coeffs}."

    def __add__(self, other: "DVal") -> "DVal":
        if not isinstance(other, DVal):
            return NotImplemented
        source = self if self.dim > other.dim else other
        return self._like(source, [a + b for a, b in zip(self.koeff, other.koeff)])

    def __mul__(self, k: float) -> "DVal":
        if not isinstance(k, Real):
            return NotImplemented
        return self._like(self, [k * c for c in self.koeff])

    def __rmul__(self, k: float) -> "DVal":
        return self.__mul__(k)

    def __repr__(self) -> str:
        return f"DVal(dim={self.dim}, koeff={self.koeff})"


def second_derivative(dval: DVal) -> DVal:
    """Apply the second-derivative stencil to ``dval`` in place and return it."""
    if dval.dim == 0:
        raise ValueError("Error in type!!!")
    steps = dval._steps()
    dval.koeff[0] *= sum(-2 / (h * h) for h in steps)
    for axis, h in enumerate(steps):
        scale = 1 / (h * h)
        dval.koeff[2 * axis + 1] *= scale
        dval.koeff[2 * axis + 2] *= scale
    return dval


def main(argv: list[str] | None = None) -> int:
    print("---1D---")
    t1 = DVal(2)
    print(t1.describe())
    print(second_derivative(t1).describe())
    print("---2D---")
    t2 = DVal(2, 3)
    print(t2.describe())
    print(second_derivative(t2).describe())
    print("---3D---")
    t3 = DVal(2, 3, 4)
    print(t3.describe())
    print(second_derivative(t3).describe())
    print("--------")
    print("T2: " + t2.describe())
    print("T3: " + t3.describe())
    print((t3 + t3).describe())
    print("2*T3: " + (2.0 * t3).describe())
    print((t3 * 3.0).describe())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())