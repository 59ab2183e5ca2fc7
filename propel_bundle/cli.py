# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Provides the command-line interface of the bundle.
#
# COMMANDS:
# ---------
# 1. Build the model classes from the bundles' XML schemas:
#    propel-bundle propel:build-model
#
#    Prints one line per schema:
#      Built model classes for bundle "<name>"
#    and exits with the generator's exit status (1 if the bundles
#    directory does not exist).
#
# Settings (generator command, bundles directory, ...) come from
# the environment / .env, see config.py.
#
# ==============================================

import click

from .command import BuildError, BuildModelCommand, BuildTool, SchemaLocator
from .config import get_config


@click.group()
def cli():
    """Propel bundle commands."""


@cli.command(
    BuildModelCommand.name,
    help="Build the Propel Object Model classes based on XML schemas.",
)
@click.pass_context
def build_model(ctx: click.Context):
    config = get_config().build

    try:
        schemas = SchemaLocator(config.schema_pattern).locate(config.bundles_dir)
    except FileNotFoundError as e:
        click.echo(f"✗ {e}", err=True)
        ctx.exit(1)

    if not schemas:
        click.echo(f"No schemas found in {config.bundles_dir}")
        return

    command = BuildModelCommand(BuildTool(config), schemas)
    try:
        command.execute(click.echo)
    except BuildError as e:
        if e.output:
            click.echo(e.output, err=True)
        click.echo(f"✗ {e}", err=True)
        ctx.exit(e.returncode)


def main():
    cli()


if __name__ == "__main__":
    main()
