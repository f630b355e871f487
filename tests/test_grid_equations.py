import pytest

from hpclab.grid_equations import DVal, main, second_derivative


def test_describe_initial_1d():
    assert DVal(2).describe() == "hx = 2;k0: 1; k1: 1; k2: 1."


def test_describe_initial_3d():
    text = DVal(2, 3, 4).describe()
    assert text.startswith("hx = 2;hy = 3;hz = 4;k0: 1; ")
    assert text.endswith("k6: 1.")


def test_dimension_from_steps():
    assert DVal(1.0).dim == 1
    assert DVal(1.0, 2.0).dim == 2
    assert DVal(1.0, 2.0, 3.0).dim == 3
    assert DVal().dim == 0


def test_steps_out_of_order():
    with pytest.raises(ValueError):
        DVal(None, 2.0)


@pytest.mark.parametrize("steps", [(2,), (2, 3), (2, 3, 4)])
def test_second_derivative_stencil_sums_to_zero(steps):
    d = second_derivative(DVal(*steps))
    assert sum(d.koeff) == pytest.approx(0.0)
    assert d.koeff[0] < 0


def test_second_derivative_is_in_place():
    d = DVal(2, 3)
    result = second_derivative(d)
    assert result is d
    assert d.koeff[1] == d.koeff[2]
    assert d.koeff[3] == d.koeff[4]


def test_second_derivative_keeps_unused_zero():
    d = second_derivative(DVal(2))
    assert d.koeff[3:] == [0.0, 0.0, 0.0, 0.0]


def test_add_takes_higher_dimension():
    s = DVal(2) + DVal(2, 3, 4)
    assert s.dim == 3
    assert s.hz == 4
    assert s.koeff[:3] == [2.0, 2.0, 2.0]
    assert s.koeff[3:] == [1.0, 1.0, 1.0, 1.0]


def test_add_twice_equals_times_two():
    d = second_derivative(DVal(2, 3, 4))
    assert (d + d).koeff == pytest.approx((2.0 * d).koeff)


def test_mul_and_rmul_agree():
    d = DVal(2, 3)
    assert (d * 3.0).koeff == (3.0 * d).koeff
    assert (d * 3.0).describe().startswith("hx = 2;hy = 3;k0: 3;")


def test_mul_by_non_number():
    with pytest.raises(TypeError):
        DVal(2) * "x"


def test_describe_uninitialised_raises():
    with pytest.raises(ValueError):
        DVal().describe()
    with pytest.raises(ValueError):
        second_derivative(DVal())


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "---1D---"
    assert out[1] == "hx = 2;k0: 1; k1: 1; k2: 1."
    assert any(line.startswith("2*T3: hx = 2;hy = 3;hz = 4;") for line in out)