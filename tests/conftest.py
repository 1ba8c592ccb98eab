"""Shared fixtures and helpers for tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from tree_sitter import Parser
from tree_sitter_language_pack import get_parser

from fparams.core.ast import parse_go_source
from fparams.models import FuncDecl

_REPO_ROOT = Path(__file__).parent.parent

GO_HEADER = "package main\n\n"


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def testdata_dir() -> Path:
    """Return the directory holding the Go fixture files."""
    return Path(__file__).parent / "testdata"


@pytest.fixture
def go_parser() -> Parser:
    """Return a tree-sitter parser for Go."""
    return get_parser("go")


@pytest.fixture
def parse_decl() -> Callable[[str], FuncDecl]:
    """Return a helper parsing a single Go declaration placed after a package clause.

    Rows in the returned positions count the two header lines.
    """

    def _parse(declaration: str) -> FuncDecl:
        decls = parse_go_source((GO_HEADER + declaration).encode("utf-8"))
        assert len(decls) == 1
        return decls[0]

    return _parse
