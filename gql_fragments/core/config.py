"""Run configuration."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, DirectoryPath, field_validator

from .ir import DEFAULT_EXTENSION


class GeneratorConfig(BaseModel):
    """Options of a generation run.

    Attributes:
        root: Directory import paths are derived from; must exist
        output: Directory output files are written to
        extension: Source file extension, stripped from import paths
        header: Comment header prepended to every output file
        strip_directives: Remove @import/@export from the output
    """

    model_config = ConfigDict(frozen=True)

    root: DirectoryPath
    output: Path | None = None
    extension: str = DEFAULT_EXTENSION
    header: str | None = None
    strip_directives: bool = False

    @field_validator("extension")
    @classmethod
    def normalize_extension(cls, value: str) -> str:
        value = value.strip()
        if value in ("", "."):
            raise ValueError("extension must not be empty")
        return value if value.startswith(".") else f".{value}"
