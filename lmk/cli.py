"""lmkdir command-line entry point."""

from pathlib import Path

import click

from . import __version__
from .commands import add, config, init, list_names, pick, remove, search
from .config import get_verbosity
from .utils import set_verbosity_override


@click.group(invoke_without_command=True)
@click.option("--manifest", "-m", type=click.Path(dir_okay=False, path_type=Path),
              help="Manifest file (overrides LMKDIR_MANIFEST and config)")
@click.option("--verbose", "-v", count=True, help="More output (repeatable)")
@click.option("--quiet", "-q", is_flag=True, help="Only show errors")
@click.version_option(__version__, prog_name="lmkdir")
@click.pass_context
def cli(ctx, manifest: Path | None, verbose: int, quiet: bool):
    """Pick, create and delete directories from a fuzzy-searchable manifest.

    Without a command, starts the interactive picker.
    """
    ctx.ensure_object(dict)
    ctx.obj["manifest"] = manifest

    if quiet:
        set_verbosity_override(0)
    elif verbose:
        set_verbosity_override(get_verbosity() + verbose)
    else:
        set_verbosity_override(None)

    if ctx.invoked_subcommand is None:
        ctx.invoke(pick)


cli.add_command(pick)
cli.add_command(init)
cli.add_command(list_names)
cli.add_command(search)
cli.add_command(add)
cli.add_command(remove)
cli.add_command(config)


def main():
    cli()


if __name__ == "__main__":
    main()
