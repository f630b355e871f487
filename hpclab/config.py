"""Project and node configuration files for the solver."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG_PATH = "../config/main.conf"


@dataclass
class Config:
    """Project configuration."""

    nodes_number: int = -1
    node_id: int = -1


@dataclass
class NodeConfig:
    """Configuration of one compute node."""

    cpu_threads_num: int = -1


def _parse(text: str, keys: set[str]) -> dict[str, int]:
    values: dict[str, int] = {}
    tokens = iter(text.split())
    for token in tokens:
        if token in keys:
            raw = next(tokens, None)
            if raw is None:
                raise ValueError(f"missing value for {token!r}")
            try:
                values[token] = int(raw)
            except ValueError as exc:
                raise ValueError(f"bad value for {token!r}: {raw!r}") from exc
    return values


def read_config(path: str | Path) -> Config:
    """Read ``nodes_number`` and ``node_id`` from a whitespace-separated file."""
    text = Path(path).read_text()
    return Config(**_parse(text, {"nodes_number", "node_id"}))


def read_node_config(node_id: int, root: str | Path = "../config") -> NodeConfig:
    """Read ``<root>/node_<node_id>/threads.conf``."""
    text = (Path(root) / f"node_{node_id}" / "threads.conf").read_text()
    return NodeConfig(**_parse(text, {"cpu_threads_num"}))


def format_config(config: Config) -> str:
    return "\n".join(
        [
            "----- Config ----- ",
            f"nodes_number = {config.nodes_number}",
            f"node_id = {config.node_id}",
            "------------------ ",
        ]
    )


def format_node_config(config: NodeConfig) -> str:
    return "\n".join(
        [
            "----- Node Configuration ----- ",
            f"cpu_threads_num = {config.cpu_threads_num}",
            "------------------------------ ",
        ]
    )


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0] if args else DEFAULT_CONFIG_PATH)

    print("Reading configuration... ", end="")
    try:
        config = read_config(path)
        print("OK")
    except OSError:
        print("[ERROR] File not opened!\n")
        config = Config()
    print(format_config(config))

    print("Reading node configuration... ", end="")
    try:
        node_config = read_node_config(config.node_id, path.parent)
        print("OK")
    except OSError:
        print("[ERROR] File not opened!\n")
        node_config = NodeConfig()
    print(format_node_config(node_config))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())