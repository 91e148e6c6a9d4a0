"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

import click

from json2rst.configuration import ConfigurationError, load_render_settings
from json2rst.conversion_run import ConversionError, ConversionRequest, convert_schema_tree

EXIT_FAILURE = 2
_PROG_NAME = "json2rst"


class CliError(Exception):
    """Custom CLI error."""


@click.command(name=_PROG_NAME, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="json2rst")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML file overriding table layout settings",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Log discovered references and transformed files to stderr.",
)
@click.argument("schema_file", type=click.Path(path_type=Path, dir_okay=False))
@click.argument("output_dir", type=click.Path(path_type=Path, file_okay=False))
@click.argument("tabular_columns", required=False)
def cli(
    config_path: str | None,
    verbose: bool,
    schema_file: Path,
    output_dir: Path,
    tabular_columns: str | None,
) -> None:
    """Convert SCHEMA_FILE and every schema it references into reStructuredText pages.

    Pages are written to OUTPUT_DIR. TABULAR_COLUMNS overrides the
    tabularcolumns directive value (default: |p{4cm}|l|p{8cm}|).
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        settings = load_render_settings(config_path, tabular_columns=tabular_columns)
        convert_schema_tree(
            ConversionRequest(schema_path=schema_file, output_dir=output_dir, settings=settings),
            on_transformed=_echo_transformed,
        )
    except (ConfigurationError, ConversionError) as exc:
        raise CliError(str(exc)) from exc


def _echo_transformed(source: Path, output: Path) -> None:
    click.echo(f"{source} => {output}")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name=_PROG_NAME, standalone_mode=False)
    except CliError as exc:
        click.echo(f"{_PROG_NAME}: {exc}", err=True)
        return EXIT_FAILURE
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return EXIT_FAILURE
    except Exception as exc:  # pylint: disable=broad-exception-caught
        click.echo(f"{_PROG_NAME}: {exc}", err=True)
        click.echo(traceback.format_exc(), err=True, nl=False)
        return EXIT_FAILURE
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
