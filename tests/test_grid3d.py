import pytest

from hpclab.grid3d import DataFiles, DataType, main


def test_write_and_open_round_trip(tmp_path):
    DataFiles(tmp_path, 5, 4, 3, DataType.R).write_data()
    opened = DataFiles.open(tmp_path)
    assert (opened.nx, opened.ny, opened.nz) == (5, 4, 3)
    assert opened.data_type is DataType.R


def test_conf_format(tmp_path):
    DataFiles(tmp_path, 3, 2, 1).write_data()
    assert (tmp_path / "grid.conf").read_text() == "3 2 1 1"


def test_one_file_per_layer(tmp_path):
    DataFiles(tmp_path, 3, 2, 4).write_data()
    assert sorted(p.name for p in tmp_path.glob("*.dat")) == [
        "0.dat", "1.dat", "2.dat", "3.dat"
    ]


def test_layer_file_shape(tmp_path):
    DataFiles(tmp_path, 3, 2, 1).write_data()
    lines = (tmp_path / "0.dat").read_text().split("\n")
    assert len(lines) == 2
    assert all(len(line.split(" ")) == 3 for line in lines)
    assert lines[0] == "0 1 2"


def test_read_x_line_invariants(tmp_path):
    DataFiles(tmp_path, 6, 4, 3).write_data()
    files = DataFiles.open(tmp_path)
    line = files.read_x_line(1, 2)
    assert len(line) == 6
    diffs = [b - a for a, b in zip(line, line[1:])]
    assert diffs == pytest.approx([1.0] * 5)
    layer_step = [b - a for a, b in zip(files.read_x_line(0, 2), line)]
    assert layer_step == pytest.approx([0.01] * 6)
    row_step = [b - a for a, b in zip(files.read_x_line(1, 1), line)]
    assert row_step == pytest.approx([0.1] * 6)


def test_read_x_line_out_of_range(tmp_path):
    DataFiles(tmp_path, 3, 2, 2).write_data()
    files = DataFiles.open(tmp_path)
    with pytest.raises(IndexError):
        files.read_x_line(2, 0)
    with pytest.raises(IndexError):
        files.read_x_line(0, 5)


def test_open_missing_folder(tmp_path):
    with pytest.raises(FileNotFoundError):
        DataFiles.open(tmp_path / "absent")


def test_open_unknown_type(tmp_path):
    (tmp_path / "grid.conf").write_text("1 1 1 99")
    with pytest.raises(ValueError):
        DataFiles.open(tmp_path)


def test_describe(tmp_path):
    assert DataFiles(tmp_path, 30, 20, 10, DataType.R).describe() == "30 20 10 1"


def test_main(tmp_path, capsys):
    folder = tmp_path / "r"
    assert main([str(folder)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "30 20 10 1" in out
    assert len(out[-1].split(" ")) == 30
    assert (folder / "9.dat").exists()