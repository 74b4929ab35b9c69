"""Generation hooks for customizing a run.

Pre-resolve hooks receive the parsed modules before resolution and may return
a modified mapping. Post-generate hooks receive the printed text of each output
file and may transform it before it is written.

Example usage:
    from gql_fragments.core.hooks import HookRunner, AddHeaderHook

    runner = HookRunner()
    runner.add_post_hook(AddHeaderHook("Generated by gql-fragments - do not edit"))
"""

from typing import Protocol, runtime_checkable

from graphql import DocumentNode


@runtime_checkable
class PreResolveHook(Protocol):
    """Protocol for pre-resolve hooks.

    Example:
        class DropDrafts(PreResolveHook):
            def pre_resolve(self, modules):
                return {k: v for k, v in modules.items() if not k.startswith("drafts.")}
    """

    def pre_resolve(self, modules: dict[str, DocumentNode]) -> dict[str, DocumentNode]:
        """Called once before resolution.

        Modules added here are resolved, but only modules read from a source
        file are written out.

        Args:
            modules: Parsed documents keyed by import path

        Returns:
            The (possibly modified) modules to resolve
        """
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generate hooks."""

    def post_generate(self, filename: str, content: str) -> str:
        """Called for each output file.

        Args:
            filename: The name of the output file (e.g., "timeline.graphql")
            content: The printed document

        Returns:
            The (possibly transformed) text to write
        """
        ...


class AddHeaderHook:
    """Built-in hook to add a comment header to output files.

    Lines not already starting with ``#`` are turned into GraphQL comments.

    Example:
        hook = AddHeaderHook("Auto-generated - do not edit")
    """

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, _filename: str, content: str) -> str:
        """Add the header to the beginning of the file."""
        lines = [
            line if line.startswith("#") else f"# {line}".rstrip()
            for line in self.header.rstrip("\n").splitlines()
        ]
        return "\n".join(lines) + "\n\n" + content


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.pre_hooks: list[PreResolveHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_pre_hook(self, hook: PreResolveHook):
        """Add a pre-resolve hook."""
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        """Add a post-generate hook."""
        self.post_hooks.append(hook)

    def run_pre_hooks(self, modules: dict[str, DocumentNode]) -> dict[str, DocumentNode]:
        """Run all pre-resolve hooks in order."""
        for hook in self.pre_hooks:
            modules = hook.pre_resolve(modules)
        return modules

    def run_post_hooks(self, filename: str, content: str) -> str:
        """Run all post-generate hooks in order."""
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
