"""
Main CLI application.

Entry point for csvcursor command.
"""

from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003
from typing import TYPE_CHECKING, Annotated

import typer

import csvcursor
from csvcursor.cli.context import CliContext, ExitCode, get_exit_code, resolve_max_bytes
from csvcursor.cli.output import OutputFormat, get_output_adapter

if TYPE_CHECKING:
    from csvcursor.cli.scan import ScanResult
    from csvcursor.core.tokenizer import Tokenizer

# Create main app
app = typer.Typer(
    name="csvcursor",
    help="Cursor-driven CSV field tokenizer",
    add_completion=False,
    no_args_is_help=True,
)

FormatOption = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format: terminal, json"),
]
OutOption = Annotated[
    Path | None,
    typer.Option("--out", "-o", help="Write output to file"),
]
ColorOption = Annotated[
    bool,
    typer.Option("--color/--no-color", help="Enable/disable colored output"),
]
QuietOption = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Suppress non-error output"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable debug logging"),
]
EncodingOption = Annotated[
    str | None,
    typer.Option("--encoding", "-e", help="Input encoding (detected if omitted)"),
]
MaxBytesOption = Annotated[
    int | None,
    typer.Option(
        "--max-bytes",
        help="Maximum input size in bytes (0 = unlimited). Defaults to CSVCURSOR_MAX_BYTES or 100MiB.",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"csvcursor {csvcursor.__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Cursor-driven CSV field tokenizer."""
    pass


def _build_context(
    format: str,
    output: Path | None,
    color: bool,
    quiet: bool,
    verbose: bool,
    encoding: str | None,
    max_bytes: int | None,
) -> CliContext:
    try:
        max_bytes_value = resolve_max_bytes(max_bytes)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from None

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    return CliContext(
        format=format,
        output_file=output,
        color=color,
        quiet=quiet,
        verbose=verbose,
        encoding=encoding,
        max_bytes=max_bytes_value,
    )


def _open(file: Path, ctx: CliContext) -> Tokenizer:
    from csvcursor.core.tokenizer import InputTooLargeError, Tokenizer

    try:
        return Tokenizer.from_file(file, ctx.encoding, max_bytes=ctx.max_bytes)
    except InputTooLargeError as e:
        typer.echo(f"Error reading file: {e.message}", err=True)
        raise typer.Exit(ExitCode.FATAL) from None
    except (OSError, LookupError) as e:
        typer.echo(f"Error reading file: {e}", err=True)
        raise typer.Exit(ExitCode.FATAL) from None


def _emit(result: ScanResult, ctx: CliContext) -> None:
    try:
        output_format = OutputFormat(ctx.format)
    except ValueError:
        typer.echo(f"Unknown format: {ctx.format}", err=True)
        typer.echo("Available formats: terminal, json", err=True)
        raise typer.Exit(ExitCode.USAGE) from None

    adapter = get_output_adapter(output_format, color=ctx.color)
    rendered = adapter.render_result(result)

    if ctx.output_file:
        ctx.output_file.write_text(rendered, encoding="utf-8")
        if not ctx.quiet:
            typer.echo(f"Output written to {ctx.output_file}")
    elif not ctx.quiet or result.issues:
        typer.echo(rendered)

    raise typer.Exit(get_exit_code(result.severities))


# =============================================================================
# Fields Command
# =============================================================================


@app.command()
def fields(
    file: Annotated[Path, typer.Argument(help="CSV file to tokenize", exists=True)],
    format: FormatOption = "terminal",
    output: OutOption = None,
    color: ColorOption = True,
    quiet: QuietOption = False,
    verbose: VerboseOption = False,
    encoding: EncodingOption = None,
    max_bytes: MaxBytesOption = None,
) -> None:
    """List every field with its row and column."""
    from csvcursor.cli.scan import scan_fields

    ctx = _build_context(format, output, color, quiet, verbose, encoding, max_bytes)
    tokenizer = _open(file, ctx)
    _emit(scan_fields(tokenizer, file=str(file)), ctx)


# =============================================================================
# Records Command
# =============================================================================


@app.command()
def records(
    file: Annotated[Path, typer.Argument(help="CSV file to parse", exists=True)],
    types: Annotated[
        str,
        typer.Option(
            "--types",
            "-t",
            help="Comma-separated field types: short, int, long, float, double, string, bool",
        ),
    ],
    format: FormatOption = "terminal",
    output: OutOption = None,
    color: ColorOption = True,
    quiet: QuietOption = False,
    verbose: VerboseOption = False,
    encoding: EncodingOption = None,
    max_bytes: MaxBytesOption = None,
) -> None:
    """Parse each record into typed values."""
    from csvcursor.cli.scan import scan_records
    from csvcursor.core.tokenizer import FieldType

    try:
        field_types = FieldType.parse_list(types)
    except ValueError:
        typer.echo(f"Invalid field types: {types}", err=True)
        typer.echo("Available types: " + ", ".join(t.value for t in FieldType), err=True)
        raise typer.Exit(ExitCode.USAGE) from None

    if not field_types:
        typer.echo("At least one field type is required", err=True)
        raise typer.Exit(ExitCode.USAGE)

    ctx = _build_context(format, output, color, quiet, verbose, encoding, max_bytes)
    tokenizer = _open(file, ctx)
    _emit(scan_records(tokenizer, field_types, file=str(file)), ctx)


if __name__ == "__main__":
    app()
