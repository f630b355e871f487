# hpclab

This is a set of small numerical and parallel-computing experiments. It uses
only the Python standard library.

## Modules

- `hpclab.heat` solves the one-dimensional heat equation for a plate. It uses
  an implicit scheme with a tridiagonal sweep (`HeatProblem`, `HeatProblem.step`,
  `solve_heat_1d`). It can write temperature profiles as text
  (`write_profile`). It can write and read little-endian double arrays
  (`write_double_array`, `read_double_array`). `GridConfig` and
  `read_grid_config` describe a 2D grid.
- `hpclab.grid_equations` builds finite-difference stencils for 1D, 2D and 3D
  grid equations. `DVal` supports `+` and multiplication by a number, and
  `second_derivative` applies the second-derivative stencil in place.
- `hpclab.grid3d` writes and reads a 3D data set. The data set is a folder
  with `grid.conf` and one `<k>.dat` file per z-layer (`DataFiles`,
  `DataFiles.write_data`, `DataFiles.open`, `DataFiles.read_x_line`).
- `hpclab.graph` is a keyed graph with successor lists (`Graph`), together with
  the `CalcProcessStep` and `DataLocation` enumerations.
- `hpclab.perfdb` holds a catalogue of tasks (`TaskTypeGroup`, `TaskType`,
  `Task`). It also has an in-memory results store that gives out the lowest
  free id from 1 upward (`PerfDb`). `FileDbRow` is a fixed 14-byte binary
  record with `to_bytes` and `from_bytes`.
- `hpclab.vector_sum` does element-wise addition (`add_arrays`,
  `add_array_pairs_in_threads`, `double_values`). It also has inclusive range
  sums, sequential or split across threads (`sum_range`, `sum_threaded`,
  `VectorRam`), and timed variants that return a `FuncResult`.
- `hpclab.calcstats` summarises repeated timed runs
  (`CalculationStatistics.from_results`): minimum, maximum, mean, median,
  95th percentile and standard deviation. It then derives speedup and
  efficiency (`ParallelCalcIndicators.from_statistics`). `launch_sum` collects
  the runs.
- `hpclab.concurrency` contains threading patterns:
  - `ThreadSafeQueue`
  - `run_sleeping_thread` and `timed_thread`
  - `producer_consumer` over a condition variable
  - `run_error_workers`, which has an error-logging worker pool
  - `run_master_workers`, which has a status handshake using `WorkerStatus`
  - a command-driven background `Listener` that uses `ListenerCommand`
- `hpclab.arrays` contains `Point3D`, `Array1D`, `Arrays1D`,
  `Arrays1DRepository`, `Fragment2D` and `Fragment3D`. It also has index-filled
  2D/3D arrays and their text layouts (`array2d_by_indexes`, `format_array2d`,
  `array3d_by_indexes`, `format_array3d`).
- `hpclab.config` reads the project configuration (`read_config`, giving a
  `Config` with `nodes_number` and `node_id`). It also reads a node's
  `node_<id>/threads.conf` (`read_node_config`, giving a `NodeConfig`).

## Installation

```
pip install .
```

Tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from hpclab.graph import Graph

graph = Graph()
graph.add_node(0, "start")
graph.add_node(1, "create a", [0])
graph.add_node(2, "create b", [0])
graph.add_node(3, "(a, b)", [1, 2])
print("\n".join(graph.lines()))
```

```python
from hpclab.grid_equations import DVal, second_derivative

stencil = DVal(2.0, 3.0, 4.0)
print((stencil + stencil).describe())
print(second_derivative(stencil).describe())
```

```python
from hpclab.heat import HeatProblem, solve_heat_1d

temperatures = solve_heat_1d(HeatProblem(n=101))
```

```python
from hpclab.vector_sum import VectorRam
from hpclab.calcstats import CalculationStatistics, ParallelCalcIndicators, launch_sum

v = VectorRam(100_000, 0.001)
seq = CalculationStatistics.from_results(launch_sum(v))
par = CalculationStatistics.from_results(launch_sum(v, threads=4))
print("\n".join(ParallelCalcIndicators.from_statistics(seq, par, 4).lines()))
```

## Commands

| Command | What it does |
| --- | --- |
| `hpclab-perfdb` | prints a task description and the contents of a small results store |
| `hpclab-graph` | builds and prints two process graphs and their copies |
| `hpclab-grid-equations` | prints 1D, 2D and 3D stencils and their sums and multiples |
| `hpclab-config [PATH]` | reads the project configuration (default `../config/main.conf`), then `node_<id>/threads.conf` next to it |
| `hpclab-grid3d [FOLDER]` | writes a 30×20×10 data set into FOLDER (default `../data/r/`) and reads one line back |
| `hpclab-heat [1d\|2d] [--nodes N] [--output DIR]` | `1d` checks binary array I/O, solves the plate problem and writes profiles; `2d` writes the grid size to `report.txt` |
| `hpclab-vector-sum [--size N] [--threads T] [--value X]` | sequential and threaded sums with timings, speedup and efficiency |
| `hpclab-calcstats [--size N] [--threads T] [--value X] [--iterations K]` | timing statistics for repeated sums, then speedup and efficiency |
| `hpclab-concurrency [DEMO]` | one threading demo: `hello`, `thread`, `timed`, `producer`, `errors`, `master` or `listener`; options `--pause`, `--threads`, `--seed`, `--max-delay`, `--command`, `--startup-delay` |
| `hpclab-arrays [DEMO]` | one array demo: `array`, `point`, `array1d`, `arrays1d`, `insert`, `repository`, `array2d`, `fragment2d` or `fragment3d`; sizes come from `--size`, `--rows`, `--columns` and `--layers`, or are asked for on the console |

The `listener` demo reads the commands `add`, `sub`, `val` and `stop` from
standard input. It ends on `q` or at end of input.

`hpclab-heat 1d` writes the following files into the output directory:
- `double_arr_w.bin`
- `out10_1.txt` to `out10_4.txt`
- `out11_test_fopen.txt`

It uses 1,000,001 nodes by default, which is slow in pure Python. Use
`--nodes` for a quicker run.

## Limitations

- No 2D heat equation is solved. `read_grid_config` always returns the standard
  100 × 150 grid, and `hpclab-heat 2d` only records that size.
- `PerfDb` keeps its entries in memory only. `FileDbRow` encodes and decodes
  single records but nothing stores them in a file.
- The threaded sums use Python threads. They show how the work is split and
  combined, but they do not run faster than the sequential sum.