"""Reads GraphQL source files and derives their import paths.

An import path is the file's location below the root, with the extension
stripped and the path segments joined by dots::

    <root>/queries/timeline.graphql  ->  queries.timeline
"""

import logging
import os
from pathlib import Path

from graphql import DocumentNode, GraphQLError, parse

from .errors import DocumentParseError, ImportPathCollision, InvalidImportPath
from .ir import DEFAULT_EXTENSION, IMPORT_PATH_SEPARATOR, SourceModule

logger = logging.getLogger(__name__)


def derive_import_path(
    file_path: str | Path,
    root: str | Path,
    extension: str = DEFAULT_EXTENSION,
) -> str:
    """Return the import path of ``file_path`` relative to ``root``."""
    file_path = Path(file_path)
    try:
        relative = file_path.relative_to(root)
    except ValueError as e:
        raise InvalidImportPath(f"{file_path} is not below root {root}") from e

    parts = [part for part in relative.parts if part]
    if parts and parts[-1].endswith(extension):
        parts[-1] = parts[-1][: -len(extension)]
    if not parts or not parts[-1]:
        raise InvalidImportPath(f"Could not derive an import path for {file_path}")
    return IMPORT_PATH_SEPARATOR.join(parts)


class DocumentReader:
    """Reads and parses every source file below a root directory."""

    def __init__(self, root: str | Path, extension: str = DEFAULT_EXTENSION):
        """Initialize a reader for a root directory."""
        self.root = Path(root)
        self.extension = extension

    def read_all(self) -> dict[str, SourceModule]:
        """Parse all source files and key them by import path."""
        modules: dict[str, SourceModule] = {}
        for file_path in self.collect_source_files():
            import_path = derive_import_path(file_path, self.root, self.extension)
            if import_path in modules:
                raise ImportPathCollision(
                    import_path, modules[import_path].file_path, file_path
                )
            modules[import_path] = SourceModule(
                import_path=import_path,
                file_path=file_path,
                document=self.parse_file(file_path),
            )
        logger.debug("Read %d module(s) from %s", len(modules), self.root)
        return modules

    def collect_source_files(self) -> list[Path]:
        """Collect all source files below the root, sorted."""
        files = []
        for dirpath, _, filenames in os.walk(self.root):
            for filename in filenames:
                if filename.endswith(self.extension):
                    files.append(Path(dirpath) / filename)
        return sorted(files)

    @staticmethod
    def parse_file(file_path: Path) -> DocumentNode:
        try:
            with open(file_path, encoding="utf-8") as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise DocumentParseError(file_path, e) from e
        try:
            return parse(content)
        except GraphQLError as e:
            raise DocumentParseError(file_path, e) from e
