import struct

import pytest

from hpclab.heat import (
    GridConfig,
    HeatProblem,
    main,
    read_double_array,
    read_grid_config,
    solve_heat_1d,
    write_double_array,
    write_profile,
)


def test_initial_field_and_steps():
    problem = HeatProblem(n=5, t_end=60.0, length=0.1)
    assert problem.temperature == [300.0, 20.0, 20.0, 20.0, 100.0]
    assert problem.h == pytest.approx(0.1 / 4)
    assert problem.tau == pytest.approx(0.6)


def test_boundaries_are_kept():
    problem = HeatProblem(n=21)
    temps = solve_heat_1d(problem)
    assert temps[0] == problem.t_left
    assert temps[-1] == problem.t_right
    assert problem.time >= problem.t_end
    assert len(temps) == 21


def test_maximum_principle():
    problem = HeatProblem(n=51)
    temps = solve_heat_1d(problem)
    low = min(problem.t_initial, problem.t_left, problem.t_right)
    high = max(problem.t_initial, problem.t_left, problem.t_right)
    assert all(low - 1e-9 <= t <= high + 1e-9 for t in temps)


def test_steady_state_is_linear():
    problem = HeatProblem(n=11, t_end=1e5, length=0.01)
    temps = solve_heat_1d(problem)
    expected = [
        problem.t_left + (problem.t_right - problem.t_left) * i / 10 for i in range(11)
    ]
    assert temps == pytest.approx(expected, rel=1e-6)


def test_symmetric_boundaries_give_symmetric_field():
    problem = HeatProblem(n=31, t_left=200.0, t_right=200.0)
    temps = solve_heat_1d(problem)
    assert temps == pytest.approx(temps[::-1])


def test_single_step_advances_time():
    problem = HeatProblem(n=9)
    problem.step()
    assert problem.time == pytest.approx(problem.tau)
    assert problem.temperature[1] > problem.t_initial


@pytest.mark.parametrize("kwargs", [{"n": 1}, {"t_end": 0.0}, {"length": -1.0}])
def test_invalid_problem(kwargs):
    with pytest.raises(ValueError):
        HeatProblem(**kwargs)


def test_double_array_round_trip(tmp_path):
    values = [i + 0.1 * i for i in range(10)]
    path = tmp_path / "arr.bin"
    assert write_double_array(path, values) == 10
    assert path.stat().st_size == 10 * 8
    assert read_double_array(path, 10) == values


def test_double_array_byte_layout(tmp_path):
    path = tmp_path / "one.bin"
    write_double_array(path, [1.0])
    assert path.read_bytes() == struct.pack("<d", 1.0)


def test_read_double_array_limits(tmp_path):
    path = tmp_path / "arr.bin"
    write_double_array(path, [1.5, 2.5, 3.5])
    assert read_double_array(path, 2) == [1.5, 2.5]
    assert read_double_array(path, 10) == [1.5, 2.5, 3.5]
    with pytest.raises(ValueError):
        read_double_array(path, -1)


def test_write_profile(tmp_path):
    path = tmp_path / "profile.txt"
    assert write_profile(path, 0.1, 2, [5.0, 6.5]) == 2
    assert path.read_text().splitlines() == ["2 0.2 5", "3 0.3 6.5"]


def test_read_grid_config(tmp_path):
    assert read_grid_config(tmp_path / "geometry2d.txt") == GridConfig(100, 150)


def test_main_2d_report(tmp_path):
    assert main(["2d", "--output", str(tmp_path)]) == 0
    assert (tmp_path / "report.txt").read_text() == "Nx = 100\nNy = 150\n"


def test_main_1d_writes_profiles(tmp_path):
    assert main(["1d", "--nodes", "21", "--output", str(tmp_path)]) == 0
    parts = [(tmp_path / f"out10_{k}.txt").read_text().splitlines() for k in range(1, 5)]
    indices = [int(line.split()[0]) for part in parts for line in part]
    assert indices == list(range(21))
    full = (tmp_path / "out11_test_fopen.txt").read_text().splitlines()
    assert len(full) == 21
    assert read_double_array(tmp_path / "double_arr_w.bin", 10) == [
        i + 0.1 * i for i in range(10)
    ]