"""Errors raised while composing fragments across files.

Every error aborts the whole generation run. Nothing is retried.
"""


class FragmentImportError(Exception):
    """Base class for fragment resolution failures."""

    def __init__(
        self,
        message: str,
        fragment_name: str | None = None,
        import_path: str | None = None,
    ):
        self.message = message
        self.fragment_name = fragment_name
        self.import_path = import_path
        super().__init__(message)


class UnresolvedLocalFragment(FragmentImportError):
    """A spread without @import names a fragment its document does not define."""

    def __init__(self, fragment_name: str, import_path: str | None = None):
        where = f" in '{import_path}'" if import_path else " in this document"
        super().__init__(
            f"Fragment '{fragment_name}' has no @import and is not defined{where}",
            fragment_name,
            import_path,
        )


class MissingImportArgument(FragmentImportError):
    """An @import directive lacks a string 'from' argument."""

    def __init__(self, fragment_name: str):
        super().__init__(
            f"@import on fragment '{fragment_name}' requires a string argument 'from'",
            fragment_name,
        )


class FragmentNotExported(FragmentImportError):
    """The target module does not export the requested fragment."""

    def __init__(self, fragment_name: str, import_path: str, message: str | None = None):
        super().__init__(
            message or f"Fragment '{fragment_name}' is not exported from '{import_path}'",
            fragment_name,
            import_path,
        )


class UnknownImportPath(FragmentNotExported):
    """An @import names a module without any exports.

    Also a FragmentNotExported: a module that exports nothing does not export
    the requested fragment either.
    """

    def __init__(self, fragment_name: str, import_path: str):
        super().__init__(
            fragment_name,
            import_path,
            f"Cannot import fragment '{fragment_name}': "
            f"'{import_path}' does not export any fragments",
        )


class ImportCycleDetected(FragmentImportError):
    """Following spreads led back to a fragment already being resolved."""

    def __init__(self, fragment_name: str, import_path: str, chain: list[tuple[str, str]]):
        self.chain = chain
        trail = " -> ".join(f"{path}:{name}" for path, name in chain)
        super().__init__(
            f"Cycle in fragment resolution: {trail} -> {import_path}:{fragment_name}",
            fragment_name,
            import_path,
        )


class GeneratorConfigError(Exception):
    """Invalid input set or configuration, detected before resolution starts."""


class InvalidImportPath(GeneratorConfigError):
    """A source file does not yield a usable import path."""


class ImportPathCollision(GeneratorConfigError):
    """Two source files map to the same import path."""

    def __init__(self, import_path: str, first, second):
        self.import_path = import_path
        self.files = (first, second)
        super().__init__(
            f"Files '{first}' and '{second}' both map to import path '{import_path}'"
        )


class DocumentParseError(GeneratorConfigError):
    """A source file is not valid GraphQL."""

    def __init__(self, file_path, error: Exception):
        self.file_path = file_path
        self.error = error
        super().__init__(f"Error parsing {file_path}: {error}")
