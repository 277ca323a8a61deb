"""Pytest configuration and fixtures for ContextMap tests."""

import shutil
import tempfile
from pathlib import Path
from typing import Callable, Dict, Generator

import pytest

from contextmap_cli.graph import DependencyGraph


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path_factory):
    """Keep the user's ~/.contextmap/config.toml out of every test."""
    home = tmp_path_factory.mktemp("contextmap_home")
    monkeypatch.setattr("contextmap_cli.config.BASE_DIR", home)
    monkeypatch.setattr("contextmap_cli.config.CONFIG_FILE", home / "config.toml")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def sample_project_path() -> Path:
    """Get path to the sample TypeScript project."""
    return Path(__file__).parent / "fixtures" / "sample_project"


@pytest.fixture
def make_tree(temp_dir: Path) -> Callable[[Dict[str, str]], Path]:
    """Write ``{relative path: content}`` under a fresh directory and return it."""

    def _make(files: Dict[str, str]) -> Path:
        for rel, content in files.items():
            target = temp_dir / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return temp_dir

    return _make


@pytest.fixture
def abc_tree(make_tree) -> Path:
    """a.ts -> b.ts -> c.ts, with ``b`` used as an identifier only in a.ts."""
    return make_tree({
        "a.ts": 'import { b } from "./b";\n\nexport const a = b + 1;\n',
        "b.ts": 'import { c } from "./c";\n\nexport const value = c;\n',
        "c.ts": "export const c = 42;\n",
    })


@pytest.fixture
def chain_graph() -> DependencyGraph:
    """A -> B -> C."""
    graph = DependencyGraph()
    graph.add_edge("A", "B")
    graph.add_edge("B", "C")
    return graph


@pytest.fixture
def cyclic_graph() -> DependencyGraph:
    """A -> B -> A, plus D -> A."""
    graph = DependencyGraph()
    graph.add_edge("A", "B")
    graph.add_edge("B", "A")
    graph.add_edge("D", "A")
    return graph
