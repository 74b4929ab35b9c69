"""Data model for cross-file fragment composition.

Documents and definitions are graphql-core AST nodes. This module adds the
directive vocabulary, the lookup tables built from a set of modules and the
per-run resolution state.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from graphql import (
    DefinitionNode,
    DocumentNode,
    FragmentDefinitionNode,
    OperationDefinitionNode,
)

IMPORT_DIRECTIVE_NAME = "import"
IMPORT_DIRECTIVE_FROM_ARGUMENT = "from"
EXPORT_DIRECTIVE_NAME = "export"

DEFAULT_EXTENSION = ".graphql"
IMPORT_PATH_SEPARATOR = "."

# import path -> fragment name -> definition
ExportIndex = dict[str, dict[str, FragmentDefinitionNode]]
FragmentTable = dict[str, dict[str, FragmentDefinitionNode]]

# (import path, fragment name)
CacheKey = tuple[str, str]


class DefinitionKind(Enum):
    """Variants of a top-level definition the resolver cares about."""
    OPERATION = "operation"
    FRAGMENT = "fragment"
    OTHER = "other"


def definition_kind(definition: DefinitionNode) -> DefinitionKind:
    """Classify a top-level definition. Unknown kinds pass through as OTHER."""
    if isinstance(definition, OperationDefinitionNode):
        return DefinitionKind.OPERATION
    if isinstance(definition, FragmentDefinitionNode):
        return DefinitionKind.FRAGMENT
    return DefinitionKind.OTHER


def fragments_of(document: DocumentNode) -> list[FragmentDefinitionNode]:
    """Return all fragment definitions of a document, in source order."""
    return [
        definition
        for definition in document.definitions
        if definition_kind(definition) is DefinitionKind.FRAGMENT
    ]


def operations_of(document: DocumentNode) -> list[OperationDefinitionNode]:
    """Return all operation definitions of a document, in source order."""
    return [
        definition
        for definition in document.definitions
        if definition_kind(definition) is DefinitionKind.OPERATION
    ]


@dataclass
class SourceModule:
    """A parsed source file together with its import path."""
    import_path: str
    file_path: Path
    document: DocumentNode


@dataclass
class ResolutionContext:
    """Mutable state of one generation run.

    The cache maps ``(import_path, fragment_name)`` to the complete closure of
    that fragment. Entries are only written once the closure is fully built, so
    every entry is complete and cycle-free.

    ``path`` holds the keys currently being expanded. It is a stack scoped to a
    single chain of resolution: keys are pushed while their closure is being
    computed and popped once it is done.
    """
    cache: dict[CacheKey, tuple[FragmentDefinitionNode, ...]] = field(default_factory=dict)
    path: list[CacheKey] = field(default_factory=list)
    hits: int = 0
    misses: int = 0

    def is_active(self, key: CacheKey) -> bool:
        return key in self.path

    @contextmanager
    def entering(self, key: CacheKey) -> Iterator[None]:
        """Mark ``key`` as being resolved for the duration of the block."""
        self.path.append(key)
        try:
            yield
        finally:
            self.path.pop()

    def reset_path(self):
        """Start a new, independent resolution chain."""
        self.path.clear()
