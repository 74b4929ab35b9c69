"""Fragment resolution engine.

Turns a parsed document whose fragment spreads may point at other files into a
self-contained document. Spreads annotated with ``@import(from: "...")`` are
looked up in the export index of the named module and pulled in together with
everything they depend on, transitively.

Example:
    resolver = FragmentResolver(build_fragment_table(modules), build_export_index(modules))
    final = resolver.resolve_document(modules["queries.timeline"])
"""

import logging

from graphql import (
    DefinitionNode,
    DirectiveNode,
    DocumentNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    Node,
    StringValueNode,
    Visitor,
    print_ast,
    visit,
)

from .errors import (
    FragmentNotExported,
    ImportCycleDetected,
    MissingImportArgument,
    UnknownImportPath,
    UnresolvedLocalFragment,
)
from .ir import (
    IMPORT_DIRECTIVE_FROM_ARGUMENT,
    IMPORT_DIRECTIVE_NAME,
    ExportIndex,
    FragmentTable,
    ResolutionContext,
    fragments_of,
)

logger = logging.getLogger(__name__)


class FragmentSpreadCollector(Visitor):
    """Collects every fragment spread below a node, in document order."""

    def __init__(self):
        super().__init__()
        self.spreads: list[FragmentSpreadNode] = []

    def enter_fragment_spread(self, node, *_args):
        self.spreads.append(node)


def collect_fragment_spreads(node: Node) -> list[FragmentSpreadNode]:
    """Return all fragment spreads reachable from ``node``."""
    collector = FragmentSpreadCollector()
    visit(node, collector)
    return collector.spreads


def definition_key(definition: DefinitionNode) -> tuple[type, str]:
    """Identify a definition by kind and content, ignoring where it was parsed."""
    return type(definition), print_ast(definition)


def merge_definitions(merged: dict, definitions) -> None:
    """Add ``definitions`` to ``merged``, keeping the first of equal ones."""
    for definition in definitions:
        merged.setdefault(definition_key(definition), definition)


def get_import_directive(spread: FragmentSpreadNode) -> DirectiveNode | None:
    for directive in spread.directives or ():
        if directive.name.value == IMPORT_DIRECTIVE_NAME:
            return directive
    return None


def get_import_path(spread: FragmentSpreadNode) -> str | None:
    """Return the import path a spread pulls its fragment from.

    Returns None for local spreads. Raises MissingImportArgument when the
    spread has an @import directive without a string ``from`` argument.
    """
    directive = get_import_directive(spread)
    if directive is None:
        return None
    for argument in directive.arguments or ():
        if argument.name.value == IMPORT_DIRECTIVE_FROM_ARGUMENT:
            if isinstance(argument.value, StringValueNode):
                return argument.value.value
            break
    raise MissingImportArgument(spread.name.value)


class FragmentResolver:
    """Resolves fragment spreads across modules.

    The resolver itself is stateless apart from the tables it was built with;
    the cache and the cycle-tracking path live in a ResolutionContext that can
    be shared by every document of one generation run.
    """

    def __init__(
        self,
        fragment_table: FragmentTable,
        export_index: ExportIndex,
        context: ResolutionContext | None = None,
    ):
        """Initialize the resolver.

        Args:
            fragment_table: Every fragment of every module, by import path
            export_index: Exported fragments only, by import path
            context: Run state to share with other resolvers; a fresh one is
                     created when omitted
        """
        self.fragment_table = fragment_table
        self.export_index = export_index
        self.context = context if context is not None else ResolutionContext()

    def resolve_document(self, original: DocumentNode) -> DocumentNode:
        """Build the self-contained version of ``original``.

        The result keeps the original definitions in order, followed by every
        imported fragment and its dependencies. Definitions with the same kind
        and printed content appear once, wherever they were parsed.
        """
        definitions: dict[tuple[type, str], DefinitionNode] = {}
        merge_definitions(definitions, original.definitions)
        local_names = {fragment.name.value for fragment in fragments_of(original)}

        # Walks operations and local fragments alike, so spreads nested in
        # local fragments are covered here.
        for spread in collect_fragment_spreads(original):
            name = spread.name.value
            import_path = get_import_path(spread)
            if import_path is None:
                if name not in local_names:
                    raise UnresolvedLocalFragment(name)
                continue

            fragment = self._lookup_export(import_path, name)
            self.context.reset_path()
            merge_definitions(definitions, self.resolve_closure(import_path, fragment))

        return DocumentNode(definitions=list(definitions.values()))

    def resolve_closure(
        self, import_path: str, fragment: FragmentDefinitionNode
    ) -> list[FragmentDefinitionNode]:
        """Return ``fragment`` and every fragment it depends on.

        ``import_path`` is the module ``fragment`` is defined in. Un-annotated
        spreads inside the fragment are looked up in that module, and expanded
        to their own closure as well.
        """
        name = fragment.name.value
        key = (import_path, name)
        context = self.context

        cached = context.cache.get(key)
        if cached is not None:
            context.hits += 1
            logger.debug("Closure cache hit for %s:%s", import_path, name)
            return list(cached)

        if context.is_active(key):
            raise ImportCycleDetected(name, import_path, list(context.path))

        context.misses += 1
        closure = {definition_key(fragment): fragment}
        with context.entering(key):
            for spread in collect_fragment_spreads(fragment):
                spread_path = get_import_path(spread)
                if spread_path is None:
                    spread_path = import_path
                    dependency = self._lookup_local(import_path, spread.name.value)
                else:
                    dependency = self._lookup_export(spread_path, spread.name.value)
                merge_definitions(closure, self.resolve_closure(spread_path, dependency))

        resolved = tuple(closure.values())
        context.cache[key] = resolved
        logger.debug(
            "Resolved %s:%s to %d fragment(s)", import_path, name, len(resolved)
        )
        return list(resolved)

    def _lookup_export(self, import_path: str, name: str) -> FragmentDefinitionNode:
        exports = self.export_index.get(import_path)
        if exports is None:
            raise UnknownImportPath(name, import_path)
        fragment = exports.get(name)
        if fragment is None:
            raise FragmentNotExported(name, import_path)
        return fragment

    def _lookup_local(self, import_path: str, name: str) -> FragmentDefinitionNode:
        fragment = self.fragment_table.get(import_path, {}).get(name)
        if fragment is None:
            raise UnresolvedLocalFragment(name, import_path)
        return fragment


def resolve_document(
    original: DocumentNode,
    export_index: ExportIndex,
    fragment_table: FragmentTable,
    context: ResolutionContext | None = None,
) -> DocumentNode:
    """Resolve a single document. See FragmentResolver.resolve_document."""
    return FragmentResolver(fragment_table, export_index, context).resolve_document(original)
