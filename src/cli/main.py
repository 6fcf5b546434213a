"""
Main CLI interface for Style-Report.

This module provides the command-line interface for running readability
reports over whole documents or selected regions.
"""

import subprocess
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

import click
import yaml

from ..config.settings import ReportSettings, SettingsLoader
from ..export.formatters import ExportManager
from ..logging.manager import LoggingManager
from ..report.data_models import AnalysisRequest, Document
from ..report.errors import StyleReportError
from ..report.orchestrator import ReportOrchestrator
from ..report.surface import ReportSurface
from ..tools.locator import ToolAvailability, ToolLocator
from ..validation.diagnostics import ValidationLevel, ValidationResult


def echo_diagnostic(diagnostic: ValidationResult) -> None:
    """Print a diagnostic to stderr."""
    icon = "❌" if diagnostic.level == ValidationLevel.ERROR else "⚠️ "
    click.echo(f"{icon} {diagnostic.format()}", err=True)


def load_settings(ctx: click.Context) -> ReportSettings:
    """Load settings for the current invocation, exiting on invalid config."""
    loader = SettingsLoader(ctx.obj.get("config_file") if ctx.obj else None)
    try:
        return loader.load()
    except (OSError, ValueError, yaml.YAMLError) as e:
        click.echo(f"❌ Error loading settings: {e}", err=True)
        sys.exit(1)


def report_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by the report commands."""
    options = [
        click.option(
            "--language",
            "-L",
            help="Language of the text, passed to the analysis tool",
        ),
        click.option(
            "--long-sentences",
            "-l",
            type=click.IntRange(min=1),
            help="Also list sentences longer than this many words",
        ),
        click.option(
            "--output",
            "-o",
            type=click.Path(dir_okay=False, path_type=Path),
            help="Save report to file (default: auto-generated timestamped directory in output/)",
        ),
        click.option(
            "--format",
            "format_type",
            default="text",
            type=click.Choice(["text", "markdown", "html"]),
            help="Report format",
        ),
        click.option(
            "--plain",
            is_flag=True,
            help="Show a plain text report without cross-reference anchors",
        ),
        click.option("--no-save", is_flag=True, help="Only print the report"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.version_option(version="0.1.0")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Settings file (default: $STYLE_REPORT_CONFIG or ./style-report.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, config_file: Path | None) -> None:
    """Style-Report: readability reports from GNU style."""
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file


@cli.command("file")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--buffer",
    type=click.File("r", encoding="utf-8"),
    help="Current editor text of the document ('-' for stdin), compared with the saved file",
)
@click.option("--modified", is_flag=True, help="Declare that the document has unsaved changes")
@report_options
@click.pass_context
def file_command(
    ctx: click.Context,
    path: Path,
    buffer: Any,
    modified: bool,
    language: str | None,
    long_sentences: int | None,
    output: Path | None,
    format_type: str,
    plain: bool,
    no_save: bool,
) -> None:
    """Analyze the saved file at PATH.

    The analysis runs on the file as saved on disk. When the editor buffer
    has unsaved changes (see --buffer and --modified) the report carries a
    warning that its statistics may be inaccurate.
    """
    settings = load_settings(ctx)

    if buffer is not None:
        document = Document(text=buffer.read(), path=path, declared_modified=modified)
    elif path.is_file():
        document = Document.from_path(path)
        document.declared_modified = modified
    else:
        document = Document(text="", path=path, declared_modified=modified)

    request = AnalysisRequest.for_file(
        document, settings.command_line(language, long_sentences)
    )
    _run_report(request, settings, output, format_type, plain, no_save)


@cli.command()
@click.argument(
    "path", type=click.Path(exists=True, dir_okay=False, path_type=Path), required=False
)
@click.option("--start", type=click.IntRange(min=0), help="Start offset of the selection")
@click.option("--end", type=click.IntRange(min=0), help="End offset of the selection")
@report_options
@click.pass_context
def region(
    ctx: click.Context,
    path: Path | None,
    start: int | None,
    end: int | None,
    language: str | None,
    long_sentences: int | None,
    output: Path | None,
    format_type: str,
    plain: bool,
    no_save: bool,
) -> None:
    """Analyze text in memory, or just the selection within it.

    The text comes from PATH, or from stdin when PATH is omitted. Give both
    --start and --end to analyze only that selection; otherwise the whole
    text is analyzed.

    Examples:
      region notes.txt --start 120 --end 480
      xclip -o | region
    """
    if (start is None) != (end is None):
        raise click.UsageError("--start and --end must be given together")

    settings = load_settings(ctx)

    if path is not None:
        document = Document.from_path(path)
        click.echo(f"📁 Reading text from: {path}")
    elif not sys.stdin.isatty():
        document = Document(text=sys.stdin.read())
    else:
        click.echo("❌ No text provided. Pass a file or pipe text via stdin", err=True)
        sys.exit(1)

    request = AnalysisRequest.for_region(
        document, settings.command_line(language, long_sentences), start, end
    )
    _run_report(request, settings, output, format_type, plain, no_save)


@cli.command()
@click.pass_context
def check(ctx: click.Context) -> None:
    """Check that the analysis tool is installed and runs."""
    settings = load_settings(ctx)
    locator = ToolLocator(settings.command, settings.install_hint, on_diagnostic=echo_diagnostic)

    if locator.check() is not ToolAvailability.AVAILABLE:
        sys.exit(1)

    click.echo(f"✅ '{locator.program}' is available")


@cli.command()
@click.pass_context
def reference(ctx: click.Context) -> None:
    """Print the reference text appended to every report."""
    settings = load_settings(ctx)
    click.echo(settings.reference_text, nl=False)


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show Style-Report status and configuration."""
    loader = SettingsLoader(ctx.obj.get("config_file"))
    config_info = loader.get_config_info()
    settings = load_settings(ctx)

    click.echo("📊 Style-Report Status")
    click.echo("=" * 30)
    click.echo(f"Command: {settings.command}")
    click.echo(f"Timeout: {settings.timeout or 'none'}")
    click.echo(f"Structured reports: {'yes' if settings.structured else 'no'}")
    click.echo(f"Output directory: {settings.output_dir}")
    click.echo(f"Log directory: {settings.log_dir}")

    status_icon = "✅" if config_info["config_file_exists"] else "➖"
    source_info = " (from env var)" if config_info["is_using_env_var"] else ""
    click.echo(f"\n📁 Settings file: {config_info['config_file']} {status_icon}{source_info}")
    if config_info["env_command"]:
        click.echo(f"🌍 STYLE_REPORT_COMMAND: {config_info['env_command']}")

    locator = ToolLocator(settings.command, settings.install_hint)
    availability = locator.check()
    if availability is ToolAvailability.AVAILABLE:
        click.echo(f"\n✅ Analysis tool '{locator.program}' is available")
    else:
        click.echo(f"\n❌ Analysis tool '{locator.program}': {availability.value}")
        for diagnostic in locator.diagnostics:
            click.echo(f"   {diagnostic.format()}")


def _run_report(
    request: AnalysisRequest,
    settings: ReportSettings,
    output: Path | None,
    format_type: str,
    plain: bool,
    no_save: bool,
) -> None:
    """Run one analysis, print the report and save it."""
    logging_manager = LoggingManager.get_instance()
    logging_manager.base_log_dir = settings.log_dir
    session_id = logging_manager.start_session(
        source=request.document.name,
        mode=request.mode.value,
        command=request.command,
    )
    click.echo(f"📝 Started logging session: {session_id}")

    structured = settings.structured and not plain
    locator = ToolLocator(request.command, settings.install_hint, on_diagnostic=echo_diagnostic)
    orchestrator = ReportOrchestrator(
        lambda: ReportSurface.get_instance(structured=structured),
        locator,
        reference_text=settings.reference_text,
        timeout=settings.timeout,
        on_diagnostic=echo_diagnostic,
    )

    try:
        logging_manager.log_event(
            "Analysis started",
            {"extent": [request.extent.start, request.extent.end], "mode": request.mode.value},
        )
        orchestrator.run_analysis(request)

        if locator.diagnostics:
            logging_manager.log_event("Analysis tool unavailable")
            sys.exit(1)

        surface = orchestrator.surface
        logging_manager.log_event("Report produced", {"surface": surface.name, "length": len(surface)})

        export_manager = ExportManager()
        click.echo(export_manager.render(surface, format_type))

        if not no_save:
            if output is None:
                timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
                extension = export_manager.extension_for(format_type)
                output = settings.output_dir / f"report_{timestamp}" / f"report.{extension}"

            metadata = {
                "source": request.document.name,
                "mode": request.mode.value,
                "command": request.command,
            }
            if export_manager.export_report(surface, output, format_type, metadata):
                click.echo(f"💾 Report saved to: {output}")

    except StyleReportError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)
    except subprocess.TimeoutExpired:
        click.echo(
            f"❌ Analysis tool did not finish within {settings.timeout} seconds", err=True
        )
        sys.exit(1)
    finally:
        session_dir = logging_manager.get_session_dir()
        logging_manager.end_session()
        if session_dir:
            click.echo(f"📁 Logs saved to: {session_dir}")


if __name__ == "__main__":
    cli()
