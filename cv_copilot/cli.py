"""CLI interface for CV Copilot."""
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from . import __version__
from .advisors import resolve_locale
from .models.enums import Locale, Priority
from .models.profile import CVProfile
from .parsers.base_parser import guess_media_type
from .services.analysis_service import AnalysisService, AnalysisSession
from .services.configuration_manager import ConfigurationManager
from .utils.exceptions import CVCopilotError
from .utils.logging import get_logger, setup_logging


console = Console()
logger = get_logger("cli")

ERROR_MESSAGES = {
    "UNSUPPORTED_FORMAT": {
        Locale.FR: "Format de fichier non pris en charge. Téléversez un fichier PDF ou Word.",
        Locale.EN: "Unsupported file format. Please upload a PDF or Word file.",
    },
    "INSUFFICIENT_TEXT": {
        Locale.FR: "Impossible d'extraire suffisamment de texte de ce fichier. Essayez un PDF contenant du texte.",
        Locale.EN: "Could not extract enough text from this file. Try a PDF that contains text.",
    },
    "EXTRACTION_FAILURE": {
        Locale.FR: "Le fichier n'a pas pu être lu. Il est peut-être endommagé.",
        Locale.EN: "The file could not be read. It may be damaged.",
    },
    "FILE_TOO_LARGE": {
        Locale.FR: "Le fichier est trop volumineux.",
        Locale.EN: "The file is too large.",
    },
    "TIMEOUT": {
        Locale.FR: "L'analyse a pris trop de temps. Veuillez réessayer.",
        Locale.EN: "The analysis took too long. Please try again.",
    },
}

GENERIC_ERROR = {
    Locale.FR: "Une erreur est survenue pendant l'analyse de votre CV.",
    Locale.EN: "An error occurred while analyzing your CV.",
}

PRIORITY_STYLES = {Priority.HIGH: "red", Priority.MEDIUM: "yellow", Priority.LOW: "green"}


def error_message(error_code: Optional[str], locale: Locale) -> str:
    """Get the user-facing message for an error code."""
    return ERROR_MESSAGES.get(error_code or "", GENERIC_ERROR)[locale]


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", type=click.Path(file_okay=False), default="config", help="Configuration directory")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, config: str, verbose: bool):
    """CV Copilot - CV analysis and advice for the Quebec job market."""
    ctx.ensure_object(dict)

    try:
        config_manager = ConfigurationManager(config)
        config_manager.initialize()
    except CVCopilotError as e:
        console.print(f"[red]Failed to load configuration: {e}[/red]")
        sys.exit(1)

    logging_config = config_manager.get_logging_config()
    if verbose:
        logging_config["level"] = "DEBUG"
    setup_logging(**logging_config)

    ctx.obj["config_manager"] = config_manager
    ctx.obj["service"] = AnalysisService(config_manager.get_config())
    logger.debug("CLI initialized")


def _resolve_cli_locale(ctx: click.Context, lang: Optional[str]) -> Locale:
    if lang:
        return resolve_locale(lang)
    return ctx.obj["config_manager"].get_locale()


def _submit(ctx: click.Context, file: str, locale: Locale) -> AnalysisSession:
    """Analyze a file in a fresh session, exiting with a localized message on failure.

    The timeout cancels the wait, not the decoding thread; ``asyncio.run``
    still joins that thread before the error is reported.
    """
    path = Path(file)
    session = AnalysisSession(ctx.obj["service"], locale=locale)
    timeout = ctx.obj["config_manager"].get_config().analysis.timeout_seconds

    async def run():
        return await asyncio.wait_for(
            session.submit(path.read_bytes(), guess_media_type(path.name), path.name),
            timeout=timeout,
        )

    try:
        with Progress(SpinnerColumn(), TextColumn("[progress.description]{task.description}"),
                      console=console, transient=True) as progress:
            progress.add_task(f"Analyzing {path.name}...", total=None)
            asyncio.run(run())
    except asyncio.TimeoutError:
        logger.error(f"Analysis of {path.name} timed out after {timeout}s")
        console.print(f"[red]{error_message('TIMEOUT', locale)}[/red]")
        sys.exit(1)
    except CVCopilotError as e:
        logger.error(f"Analysis of {path.name} failed: {e}")
        console.print(f"[red]{error_message(e.error_code, locale)}[/red]")
        sys.exit(1)

    return session


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--lang", "-l", type=click.Choice(["fr", "en"]), default=None, help="Display language")
@click.option("--json", "as_json", is_flag=True, help="Print the analysis as JSON")
@click.pass_context
def analyze(ctx: click.Context, file: str, lang: Optional[str], as_json: bool):
    """Analyze a CV and show recommendations and insights."""
    locale = _resolve_cli_locale(ctx, lang)
    session = _submit(ctx, file, locale)
    profile = session.profile
    recommendations = session.recommendations()
    insights = session.insights()

    if as_json:
        payload = {
            "profile": profile.model_dump(mode="json", exclude={"raw_text"}),
            "recommendations": [r.model_dump(mode="json") for r in recommendations],
            "insights": [i.model_dump(mode="json") for i in insights],
        }
        click.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    _print_profile(profile, locale)

    table = Table(title="Recommandations" if locale == Locale.FR else "Recommendations")
    table.add_column("Poste" if locale == Locale.FR else "Job", style="bold", no_wrap=True)
    table.add_column("Score", justify="right")
    table.add_column("Raison" if locale == Locale.FR else "Reason")
    for recommendation in recommendations:
        table.add_row(recommendation.title, f"{recommendation.match_score}%", recommendation.reason)
    console.print(table)

    for insight in insights:
        console.print(Panel(
            f"{insight.description}\n\n[italic]{insight.suggestion}[/italic]",
            title=f"{insight.title} ({insight.priority.value})",
            border_style=PRIORITY_STYLES[insight.priority],
        ))


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.argument("text")
@click.option("--lang", "-l", type=click.Choice(["fr", "en"]), default=None, help="Display language")
@click.pass_context
def enhance(ctx: click.Context, file: str, text: str, lang: Optional[str]):
    """Suggest an improvement for a fragment of a CV."""
    locale = _resolve_cli_locale(ctx, lang)
    session = _submit(ctx, file, locale)
    suggestion = session.enhance(text)

    content = "\n".join([
        f"[bold]{suggestion.original_text}[/bold]",
        "",
        suggestion.suggestion,
        "",
        f"[italic]{suggestion.reason}[/italic]",
    ])
    console.print(Panel(content, title=f"Impact: {suggestion.impact}", border_style="cyan"))


def _print_profile(profile: CVProfile, locale: Locale) -> None:
    """Render the profile summary and extracted fields."""
    if profile.is_placeholder:
        console.print(Panel(
            "Aucun texte n'a pu être lu, un CV d'exemple est affiché."
            if locale == Locale.FR else
            "No text could be read, a sample CV is shown.",
            border_style="yellow",
        ))

    console.print(Panel(profile.summary, title=profile.file_name or "CV", border_style="blue"))

    fields = Table(show_header=False)
    fields.add_column(style="bold")
    fields.add_column()
    info = profile.personal_info
    rows = [
        ("Name", info.name),
        ("Email", info.email),
        ("Phone", info.phone),
        ("Location", info.location),
        ("Years", str(profile.years_of_experience)),
        ("Skills", ", ".join(profile.skills)),
        ("Languages", ", ".join(profile.languages)),
        ("Job titles", ", ".join(profile.job_titles)),
        ("Companies", ", ".join(profile.companies)),
        ("Degrees", ", ".join(profile.degrees)),
        ("Institutions", ", ".join(profile.institutions)),
        ("Certifications", ", ".join(profile.certifications)),
    ]
    for label, value in rows:
        if value:
            fields.add_row(label, value)
    console.print(fields)


def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user.[/yellow]")
        sys.exit(0)


if __name__ == "__main__":
    main()
