#!/usr/bin/env python3
"""Demonstration of cross-file fragment imports.

This script shows how to:
1. Read a tree of GraphQL files
2. Resolve @import spreads against @export fragments
3. Print the self-contained documents
"""

from pathlib import Path

from gql_fragments.core import (
    DocumentReader,
    ResolutionContext,
    generate,
    print_document,
)


def main():
    root = Path(__file__).parent / "graphql"

    print("=== Fragment Import Demo ===\n")

    print("1. Reading GraphQL files...")
    modules = DocumentReader(root).read_all()
    for import_path, module in modules.items():
        print(f"   {import_path:<20} {module.file_path.relative_to(root)}")

    print("\n2. Resolving imports...")
    context = ResolutionContext()
    resolved = generate(
        {import_path: module.document for import_path, module in modules.items()},
        context,
    )
    print(f"   {len(resolved)} of {len(modules)} modules contain operations")
    print(f"   Closure cache: {context.hits} hit(s), {context.misses} miss(es)")

    print("\n3. Resolved documents:")
    for import_path, document in resolved.items():
        print(f"\n   === {import_path} ===")
        print(print_document(document, strip_directives=True))

    print("=== Demo Complete ===")


if __name__ == "__main__":
    main()
