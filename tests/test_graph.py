from hpclab.graph import CalcProcessStep, DataLocation, Graph, main


def _sample():
    g = Graph()
    g.add_node(0, "start")
    g.add_node(1, "create a", [0])
    g.add_node(2, "create b", [0])
    g.add_node(3, "init a", [1])
    g.add_node(4, "init b", [2])
    g.add_node(5, "(a, b)", [3, 4])
    g.add_node(6, "end", [5])
    return g


def test_lines_match_format():
    lines = _sample().lines()
    assert lines[0] == "Graph"
    assert lines[1] == "0 (start) -> { 1 2 }"
    assert lines[6] == "5 ((a, b)) -> { 6 }"
    assert lines[7] == "6 (end) -> { }"


def test_successors():
    g = _sample()
    assert g.successors(0) == [1, 2]
    assert g.successors(3) == [5]
    assert g.successors(6) == []


def test_copy_is_independent():
    g = _sample()
    clone = g.copy()
    assert clone.lines() == g.lines()
    clone.add_node(7, "extra", [6])
    assert g.successors(6) == []
    assert clone.successors(6) == [7]
    assert 7 not in g


def test_readding_node_replaces_value():
    g = Graph()
    g.add_node("a", 1)
    g.add_node("a", 2)
    assert g["a"] == 2
    assert len(g) == 1


def test_predecessor_without_node_is_not_listed():
    g = Graph()
    g.add_node(1, "x", [0])
    assert g.successors(0) == [1]
    assert g.lines() == ["Graph", "1 (x) -> { }"]


def test_enum_labels():
    g = Graph()
    g.add_node(0, CalcProcessStep.CREATE_VECTOR)
    g.add_node(1, CalcProcessStep.SCALAR_PRODUCT, [0])
    g.add_node(2, DataLocation.RAM_VRAM, [1])
    assert g.lines() == [
        "Graph",
        "0 (CreateVector) -> { 1 }",
        "1 (ScalarProduct) -> { 2 }",
        "2 (RAM_VRAM) -> { }",
    ]


def test_graph_with_steps():
    g = Graph()
    g.add_node(0, CalcProcessStep.START)
    g.add_node(1, CalcProcessStep.END, [0])
    assert g.lines() == ["Graph", "0 (Start) -> { 1 }", "1 (End) -> { }"]


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "1 (CreateVector) -> { 3 }" in out
    assert out[-1] == "CreateVector -> { RAM VRAM RAM_VRAM }"