"""Command line interface entry point."""

from __future__ import annotations

import sys

import click

from crd_schema_extractor.configuration import (
    DEFAULT_FILENAME_FORMAT,
    DEFAULT_LOG_LEVEL,
    ConfigurationError,
    load_settings,
)
from crd_schema_extractor.extraction_run import ExtractionRequest, run_extraction
from crd_schema_extractor.observability import configure_logging
from crd_schema_extractor.source_reading import build_http_session


class CliError(Exception):
    """Custom CLI error."""


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="crd-schema-extractor")
@click.argument("sources", nargs=-1, required=True)
@click.option(
    "--filename-format",
    "filename_format",
    envvar="FILENAME_FORMAT",
    default=None,
    help=(
        f"Output filename template (default: {DEFAULT_FILENAME_FORMAT}). "
        "Tokens: {kind}, {version}, {group}, {fullgroup}."
    ),
)
@click.option(
    "--output-dir",
    "output_dir",
    envvar="OUTPUT_DIR",
    default=".",
    show_default=True,
    type=click.Path(file_okay=False, path_type=str),
    help="Directory that output filenames are resolved against",
)
@click.option(
    "--log-level",
    "log_level",
    envvar="LOG_LEVEL",
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    help="Logging level for messages written to stderr",
)
def cli(
    sources: tuple[str, ...], filename_format: str | None, output_dir: str, log_level: str
) -> None:
    """Extract OpenAPI v3 schemas from CRD files or URLs into JSON Schema files.

    Each SOURCE is a local path or an http(s) URL holding one or more YAML
    documents. Sources, documents and files that fail are logged and skipped.
    """
    try:
        settings = load_settings(
            filename_format=filename_format,
            output_dir=output_dir,
            log_level=log_level,
        )
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc

    logger = configure_logging(settings.log_level)
    summary = run_extraction(
        ExtractionRequest(sources=tuple(sources), settings=settings),
        logger=logger,
        http_session_factory=build_http_session,
    )
    for path in summary.written_paths:
        click.echo(str(path))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="crd-schema-extractor", standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
