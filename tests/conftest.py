"""Shared fixtures."""

import pytest
from graphql import parse


@pytest.fixture
def parse_modules():
    """Parse a mapping of import path to GraphQL source."""

    def _parse(sources: dict[str, str]):
        return {import_path: parse(source) for import_path, source in sources.items()}

    return _parse


@pytest.fixture
def write_tree(tmp_path):
    """Write a mapping of relative path to source below a fresh root."""

    def _write(files: dict[str, str]):
        root = tmp_path / "graphql"
        for relative, source in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(source, encoding="utf-8")
        return root

    return _write
