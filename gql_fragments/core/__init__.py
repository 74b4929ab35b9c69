"""Core modules for fragment composition."""

from .config import GeneratorConfig
from .errors import (
    DocumentParseError,
    FragmentImportError,
    FragmentNotExported,
    GeneratorConfigError,
    ImportCycleDetected,
    ImportPathCollision,
    InvalidImportPath,
    MissingImportArgument,
    UnknownImportPath,
    UnresolvedLocalFragment,
)
from .exports import build_export_index, build_fragment_table, is_exported
from .generator import generate, generate_documents, has_operations
from .hooks import (
    AddHeaderHook,
    HookRunner,
    PostGenerateHook,
    PreResolveHook,
)
from .ir import (
    DefinitionKind,
    ExportIndex,
    FragmentTable,
    ResolutionContext,
    SourceModule,
    definition_kind,
)
from .printer import print_document, strip_import_directives, write_documents
from .reader import DocumentReader, derive_import_path
from .resolver import (
    FragmentResolver,
    collect_fragment_spreads,
    get_import_path,
    resolve_document,
)

__all__ = [
    # Config
    "GeneratorConfig",
    # Errors
    "FragmentImportError",
    "UnresolvedLocalFragment",
    "MissingImportArgument",
    "UnknownImportPath",
    "FragmentNotExported",
    "ImportCycleDetected",
    "GeneratorConfigError",
    "InvalidImportPath",
    "ImportPathCollision",
    "DocumentParseError",
    # Data model
    "DefinitionKind",
    "ExportIndex",
    "FragmentTable",
    "ResolutionContext",
    "SourceModule",
    "definition_kind",
    # Export index
    "build_export_index",
    "build_fragment_table",
    "is_exported",
    # Resolver
    "FragmentResolver",
    "collect_fragment_spreads",
    "get_import_path",
    "resolve_document",
    # Generation
    "generate",
    "generate_documents",
    "has_operations",
    # Reader
    "DocumentReader",
    "derive_import_path",
    # Printer
    "print_document",
    "strip_import_directives",
    "write_documents",
    # Hooks
    "PreResolveHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "HookRunner",
]
