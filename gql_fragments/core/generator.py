"""Generation run: resolve every module, keep the ones with operations.

Fragment-only modules exist to be imported and are never emitted on their own.
"""

import logging
from collections.abc import Mapping
from pathlib import Path

from graphql import DocumentNode

from .exports import build_export_index, build_fragment_table
from .hooks import HookRunner
from .ir import DEFAULT_EXTENSION, ResolutionContext, operations_of
from .reader import DocumentReader
from .resolver import FragmentResolver

logger = logging.getLogger(__name__)


def has_operations(document: DocumentNode) -> bool:
    """Check whether a document defines at least one operation."""
    return bool(operations_of(document))


def generate(
    modules: Mapping[str, DocumentNode],
    context: ResolutionContext | None = None,
) -> dict[str, DocumentNode]:
    """Resolve every module and drop fragment-only ones.

    Args:
        modules: Parsed documents keyed by import path
        context: Resolution state for the run; one is created when omitted

    Returns:
        Resolved documents keyed by import path, for modules with operations

    Raises:
        FragmentImportError: On the first failure, for any module
    """
    context = context if context is not None else ResolutionContext()
    resolver = FragmentResolver(
        build_fragment_table(modules), build_export_index(modules), context
    )

    resolved: dict[str, DocumentNode] = {}
    for import_path, document in modules.items():
        logger.debug("Resolving %s", import_path)
        final = resolver.resolve_document(document)
        if not has_operations(final):
            logger.debug("Skipping fragment-only module %s", import_path)
            continue
        resolved[import_path] = final

    logger.info(
        "Resolved %d module(s), %d with operations (closure cache: %d hit(s), %d miss(es))",
        len(modules),
        len(resolved),
        context.hits,
        context.misses,
    )
    return resolved


def generate_documents(
    root: str | Path,
    extension: str = DEFAULT_EXTENSION,
    hooks: HookRunner | None = None,
) -> dict[Path, DocumentNode]:
    """Read every file below ``root`` and resolve it.

    Returns:
        Resolved documents keyed by source file path
    """
    modules = DocumentReader(root, extension).read_all()
    documents = {import_path: module.document for import_path, module in modules.items()}
    if hooks:
        documents = hooks.run_pre_hooks(documents)

    resolved = generate(documents)
    by_file: dict[Path, DocumentNode] = {}
    for import_path, document in resolved.items():
        module = modules.get(import_path)
        if module is None:
            # Added by a pre-resolve hook; there is no source file to key it by.
            logger.warning("Dropping %s: not read from %s", import_path, root)
            continue
        by_file[module.file_path] = document
    return by_file
