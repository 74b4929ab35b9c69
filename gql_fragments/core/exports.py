"""Fragment tables built once per generation run.

The export index only holds fragments marked with ``@export``; the fragment
table holds every fragment of every module and is used to resolve un-annotated
spreads relative to the module a fragment was defined in.
"""

import logging
from collections.abc import Mapping

from graphql import DocumentNode, FragmentDefinitionNode

from .ir import EXPORT_DIRECTIVE_NAME, ExportIndex, FragmentTable, fragments_of

logger = logging.getLogger(__name__)


def is_exported(fragment: FragmentDefinitionNode) -> bool:
    """Check whether a fragment carries the export marker."""
    return any(
        directive.name.value == EXPORT_DIRECTIVE_NAME
        for directive in fragment.directives or ()
    )


def exported_fragments(document: DocumentNode) -> dict[str, FragmentDefinitionNode]:
    """Return the exported fragments of a single document by name."""
    return {
        fragment.name.value: fragment
        for fragment in fragments_of(document)
        if is_exported(fragment)
    }


def build_export_index(modules: Mapping[str, DocumentNode]) -> ExportIndex:
    """Build the export index for all modules.

    Modules that export nothing are left out, so a missing key means
    "this import path exports nothing".
    """
    index: ExportIndex = {}
    for import_path, document in modules.items():
        exports = exported_fragments(document)
        if exports:
            index[import_path] = exports
    logger.debug(
        "Export index: %d of %d modules export %d fragments",
        len(index),
        len(modules),
        sum(len(exports) for exports in index.values()),
    )
    return index


def build_fragment_table(modules: Mapping[str, DocumentNode]) -> FragmentTable:
    """Build the unfiltered per-module fragment table."""
    return {
        import_path: {fragment.name.value: fragment for fragment in fragments_of(document)}
        for import_path, document in modules.items()
    }
