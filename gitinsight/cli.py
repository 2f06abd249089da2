"""CLI entry point — clone a repo, scan it, print the report."""

from pathlib import Path

import click
import typer
import yaml

from . import __version__
from .advisory import ADVISORY_DETAILS
from .analyzer import SAMPLE_REPOSITORIES, analyze_many, analyze_repository
from .config import ScanSettings, load_settings
from .errors import GitInsightError, UnsupportedOutputFormatError
from .format import check_format, format_advisory, format_console, render, save_report
from .log import configure_logging


def _err(msg: str) -> None:
    """Raise a styled error (red box) — used for all CLI usage errors."""
    raise click.BadParameter(msg)


def _fail(msg: str, color: bool) -> None:
    """Report an analysis failure on stderr and exit 1."""
    mark = click.style("✗", fg="red", bold=True) if color else "✗"
    typer.echo(f"{mark} Error: {msg}", err=True)
    raise typer.Exit(1)


def _settings(config: Path | None) -> ScanSettings:
    try:
        return load_settings(config)
    except (ValueError, yaml.YAMLError) as e:
        _err(f"Invalid config {config}: {e}")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gitinsight {__version__}")
        raise typer.Exit()


app = typer.Typer(help="Git Repository Security Analyzer — clone a repository and report on it.")


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Analyze Git repositories and show the pinned git library advisory."""


@app.command("analyze")
def analyze_cmd(
    repo: str = typer.Option(..., "--repo", "-r", help="Repository URL to analyze (required)"),
    output: str = typer.Option("console", "--output", "-o", help="Output format: console, json"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    save: Path | None = typer.Option(None, "--save", "-s", dir_okay=False, help="Also write the report to this file"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    config: Path | None = typer.Option(None, "--config", "-c", dir_okay=False, help="YAML settings file"),
) -> None:
    """Analyze a Git repository and generate a security report."""
    color = not no_color
    # Reject the format before touching the network
    try:
        fmt = check_format(output)
    except UnsupportedOutputFormatError as e:
        _err(str(e))
    settings = _settings(config)
    configure_logging(verbose)

    if fmt == "console":
        typer.echo(f"Starting analysis of repository: {repo}", err=True)
        if verbose:
            typer.echo(
                f"Cloning with depth {settings.clone_depth}, walking at most {settings.max_commits} commits",
                err=True,
            )

    try:
        report = analyze_repository(repo, settings)
    except GitInsightError as e:
        _fail(f"failed to analyze repository: {e}", color)

    typer.echo(render(report, fmt, color=color))

    if save:
        try:
            saved = save_report(report, save, "json" if fmt == "json" else "text")
        except OSError as e:
            _fail(f"failed to save report: {e}", color)
        typer.echo(f"Report saved: {saved}", err=True)


@app.command("demo")
def demo_cmd(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    config: Path | None = typer.Option(None, "--config", "-c", dir_okay=False, help="YAML settings file"),
) -> None:
    """Run demo analysis with sample repositories."""
    color = not no_color
    settings = _settings(config)
    configure_logging(verbose)

    typer.echo("Running demo analysis with sample repositories")

    def progress(i: int, total: int, url: str) -> None:
        typer.echo(f"\n→ [{i}/{total}] Analyzing: {url}")

    for result in analyze_many(SAMPLE_REPOSITORIES, settings, on_start=progress):
        if not result.ok:
            mark = click.style("✗", fg="red", bold=True) if color else "✗"
            typer.echo(f"{mark} Failed to analyze {result.url}: {result.error}", err=True)
            continue
        typer.echo(format_console(result.report, color=color))


@app.command("vulnerability")
def vulnerability_cmd(
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
) -> None:
    """Show information about the vulnerable dependency."""
    typer.echo(format_advisory(ADVISORY_DETAILS, color=not no_color))


def _main() -> None:
    app()


if __name__ == "__main__":
    _main()
