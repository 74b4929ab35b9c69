"""Command-line interface for gql-fragments."""

import logging
from pathlib import Path

import click
from pydantic import ValidationError

from .core.config import GeneratorConfig
from .core.errors import FragmentImportError, GeneratorConfigError
from .core.generator import generate_documents
from .core.hooks import AddHeaderHook, HookRunner
from .core.ir import DEFAULT_EXTENSION
from .core.printer import write_documents


def configure_logging(verbose: bool):
    """Send library debug logging to stderr when running verbosely."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def load_config(**options) -> GeneratorConfig:
    try:
        return GeneratorConfig(**options)
    except ValidationError as e:
        raise click.UsageError(str(e)) from e


def resolve_all(config: GeneratorConfig) -> dict:
    """Run resolution, turning library errors into click errors."""
    try:
        return generate_documents(config.root, config.extension)
    except (FragmentImportError, GeneratorConfigError) as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(package_name="gql-fragments")
def main():
    """Compose GraphQL documents from fragments spread across files.

    Fragments marked @export can be spread in other files with
    @import(from: "path.to.module").
    """
    pass


@main.command()
@click.option(
    "--root",
    "-r",
    required=True,
    type=click.Path(exists=True, file_okay=False),
    help="Root directory; import paths are relative to it.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(file_okay=False),
    help="Output directory for resolved documents.",
)
@click.option(
    "--extension",
    "-e",
    default=DEFAULT_EXTENSION,
    show_default=True,
    help="Extension of GraphQL source files.",
)
@click.option(
    "--header",
    default=None,
    help="Comment header added to every output file.",
)
@click.option(
    "--strip-directives",
    is_flag=True,
    help="Remove @import and @export from the output.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    root: str,
    output: str,
    extension: str,
    header: str | None,
    strip_directives: bool,
    verbose: bool,
):
    """Resolve fragment imports and write one document per operation file.

    Files that only define fragments are not written.

    Examples:

        gql-fragments generate --root ./graphql --output ./build/graphql

        gql-fragments generate -r ./graphql -o ./out --strip-directives
    """
    configure_logging(verbose)
    config = load_config(
        root=Path(root).resolve(),
        output=Path(output).resolve(),
        extension=extension,
        header=header,
        strip_directives=strip_directives,
    )

    if verbose:
        click.echo(f"Root: {config.root}")
        click.echo(f"Output: {config.output}")

    click.echo("Resolving documents...")
    documents = resolve_all(config)

    hooks = HookRunner()
    if config.header:
        hooks.add_post_hook(AddHeaderHook(config.header))

    click.echo("Writing documents...")
    written = write_documents(
        documents,
        config.root,
        config.output,
        hooks=hooks,
        strip_directives=config.strip_directives,
    )
    if verbose:
        for path in written:
            click.echo(f"  {path}")

    click.echo(f"Done! Wrote {len(written)} document(s) to {config.output}")


@main.command()
@click.option(
    "--root",
    "-r",
    required=True,
    type=click.Path(exists=True, file_okay=False),
    help="Root directory; import paths are relative to it.",
)
@click.option(
    "--extension",
    "-e",
    default=DEFAULT_EXTENSION,
    show_default=True,
    help="Extension of GraphQL source files.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def check(root: str, extension: str, verbose: bool):
    """Resolve fragment imports without writing anything.

    Exits with status 1 on the first unresolved fragment, missing export or
    import cycle.
    """
    configure_logging(verbose)
    config = load_config(root=Path(root).resolve(), extension=extension)

    documents = resolve_all(config)
    if verbose:
        for path in sorted(documents):
            click.echo(f"  {path.relative_to(config.root)}")

    click.echo(f"OK: {len(documents)} document(s) resolve")


if __name__ == "__main__":
    main()
