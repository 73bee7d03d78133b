from pathlib import Path

import typer
from lxml import etree  # type: ignore
from rich.console import Console
from rich.table import Table

from ..core import config as config_module
from ..core.config import Settings
from ..core.logging import log, setup_logging

app = typer.Typer(add_completion=False, help="markup2text CLI: TEI/XHTML to plain text")


def _load_settings(config_file: str | None) -> Settings:
    """Load settings (config file < env vars) and make them the defaults."""
    try:
        settings = Settings.load_config(config_file)
    except Exception as e:
        typer.echo(f"❌ Config error: {e}", err=True)
        raise typer.Exit(1) from e

    config_module.SETTINGS = settings
    setup_logging(settings.LOG_FORMAT, settings.LOG_LEVEL)
    log.info("config.loaded", config_file=config_file or "auto-discovered")
    return settings


def _conversion(mode: str | None, settings: Settings):
    from ..pipeline import parse_conversion

    try:
        return parse_conversion(mode or settings.CONVERSION)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--mode") from e


def _require_file(file: str) -> Path:
    path = Path(file)
    if not path.is_file():
        typer.echo(f"❌ File not found: {file}", err=True)
        raise typer.Exit(1)
    return path


@app.callback()
def _init() -> None:
    setup_logging()


@app.command()
def version() -> None:
    from .. import __version__

    typer.echo(__version__)


@app.command()
def config(
    config_file: str | None = typer.Option(None, "--config", help="Config file (.markup2text.yaml auto-discovered)"),
) -> None:
    """Show effective settings."""
    settings = _load_settings(config_file)
    for k, v in settings.model_dump().items():
        typer.echo(f"{k}={v}")


@app.command()
def convert(
    input_dir: str = typer.Argument(..., help="Directory with XML documents"),
    output_dir: str = typer.Argument(..., help="Directory for text files"),
    mode: str | None = typer.Option(None, "--mode", help="Conversion type: human|tools"),
    config_file: str | None = typer.Option(None, "--config", help="Config file (.markup2text.yaml auto-discovered)"),
    suffix: str | None = typer.Option(None, "--suffix", help="Override output file suffix"),
) -> None:
    """Convert every TEI/XHTML file of a directory to plain text."""
    from ..pipeline import convert_directory

    settings = _load_settings(config_file)
    if suffix is not None:
        settings.OUTPUT_SUFFIX = suffix
    conversion = _conversion(mode, settings)

    try:
        metrics = convert_directory(input_dir, output_dir, conversion, settings)
    except ValueError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1) from e

    typer.echo(f"Converted {metrics['converted']}/{metrics['files']} files to: {output_dir}")
    if metrics["failed"]:
        for failure in metrics["failures"]:
            typer.echo(f"❌ {failure['file']}: {failure['error']}", err=True)
        raise typer.Exit(1)


@app.command()
def text(
    file: str = typer.Argument(..., help="XML document"),
    mode: str | None = typer.Option(None, "--mode", help="Conversion type: human|tools"),
    config_file: str | None = typer.Option(None, "--config", help="Config file (.markup2text.yaml auto-discovered)"),
) -> None:
    """Print the plain text of one document."""
    from ..adapters import UnsupportedDocumentError
    from ..pipeline import extract_text
    from ..rendering import UnrenderableTokenError

    settings = _load_settings(config_file)
    conversion = _conversion(mode, settings)
    path = _require_file(file)

    try:
        result = extract_text(path, conversion, settings)
    except (etree.XMLSyntaxError, UnsupportedDocumentError, UnrenderableTokenError) as e:
        typer.echo(f"❌ Cannot convert {path.name}: {e}", err=True)
        raise typer.Exit(1) from e

    typer.echo(result)


@app.command()
def tokens(
    file: str = typer.Argument(..., help="XML document"),
    mode: str | None = typer.Option(None, "--mode", help="Conversion type: human|tools"),
    raw: bool = typer.Option(False, "--raw", help="Show tokens before normalization"),
    config_file: str | None = typer.Option(None, "--config", help="Config file (.markup2text.yaml auto-discovered)"),
) -> None:
    """Show the token sequence of one document."""
    from ..adapters import UnsupportedDocumentError
    from ..pipeline import tokens_for_document
    from ..tree import load_document

    settings = _load_settings(config_file)
    conversion = _conversion(mode, settings)
    path = _require_file(file)

    try:
        root = load_document(path, recover=settings.XML_RECOVER)
        sequence = tokens_for_document(root, conversion, settings, normalized=not raw)
    except (etree.XMLSyntaxError, UnsupportedDocumentError) as e:
        typer.echo(f"❌ Cannot convert {path.name}: {e}", err=True)
        raise typer.Exit(1) from e

    console = Console()
    table = Table(
        title=f"{'Raw' if raw else 'Normalized'} tokens: {path.name}",
        show_header=True,
        header_style="bold yellow",
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Type", style="bold cyan", no_wrap=True)
    table.add_column("Class", style="white")
    table.add_column("Text", style="green")
    table.add_column("Conversions", style="white")

    for position, token in enumerate(sequence):
        table.add_row(
            str(position),
            token.type.name,
            token.token_class.name,
            "∅" if token.text is None else repr(token.text),
            str(token.conversions.name),
        )

    console.print(table)


@app.command()
def split(
    file: str = typer.Argument(..., help="TEI document"),
    output_dir: str = typer.Argument(..., help="Directory for text files"),
    mode: str | None = typer.Option(None, "--mode", help="Conversion type: human|tools"),
    config_file: str | None = typer.Option(None, "--config", help="Config file (.markup2text.yaml auto-discovered)"),
) -> None:
    """Convert each top-level division of a TEI document separately."""
    from ..adapters import UnsupportedDocumentError
    from ..pipeline import split_file

    settings = _load_settings(config_file)
    conversion = _conversion(mode, settings)
    path = _require_file(file)

    try:
        result = split_file(path, output_dir, conversion, settings)
    except (etree.XMLSyntaxError, UnsupportedDocumentError) as e:
        typer.echo(f"❌ Cannot split {path.name}: {e}", err=True)
        raise typer.Exit(1) from e

    for entry in result["splits"]:
        typer.echo(f"{entry['file']}\t{entry['heading'] or ''}")


if __name__ == "__main__":
    app()
