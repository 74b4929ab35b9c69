"""Printing and writing of resolved documents."""

import logging
from collections.abc import Mapping
from pathlib import Path

from graphql import REMOVE, DocumentNode, Visitor, print_ast, visit

from .hooks import HookRunner
from .ir import EXPORT_DIRECTIVE_NAME, IMPORT_DIRECTIVE_NAME

logger = logging.getLogger(__name__)


class ImportDirectiveRemover(Visitor):
    """Removes @import and @export, which a server does not know about."""

    def enter_directive(self, node, *_args):
        if node.name.value in (IMPORT_DIRECTIVE_NAME, EXPORT_DIRECTIVE_NAME):
            return REMOVE
        return None


def strip_import_directives(document: DocumentNode) -> DocumentNode:
    """Return a copy of ``document`` without @import and @export directives."""
    return visit(document, ImportDirectiveRemover())


def print_document(document: DocumentNode, strip_directives: bool = False) -> str:
    """Print a document as GraphQL source, ending with a newline."""
    if strip_directives:
        document = strip_import_directives(document)
    return print_ast(document) + "\n"


def write_documents(
    documents: Mapping[Path, DocumentNode],
    root: str | Path,
    output_dir: str | Path,
    hooks: HookRunner | None = None,
    strip_directives: bool = False,
) -> list[Path]:
    """Write each document below ``output_dir``, mirroring its place below ``root``.

    Returns:
        The written file paths, sorted
    """
    root = Path(root)
    output_dir = Path(output_dir)
    written = []
    for source_path, document in sorted(documents.items()):
        target = output_dir / Path(source_path).relative_to(root)
        target.parent.mkdir(parents=True, exist_ok=True)

        content = print_document(document, strip_directives)
        if hooks:
            content = hooks.run_post_hooks(target.name, content)

        with open(target, "w", encoding="utf-8") as f:
            f.write(content)
        logger.debug("Wrote %s", target)
        written.append(target)
    return written
