"""
Command-line interface for the Event SEO engine.

Provides commands to validate, analyze, generate, extract keywords from and
preview SEO fields, and to audit an exported content listing in bulk.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .analysis import analyze_seo
from .audit import audit_rows
from .config import DEFAULT_CONFIG
from .content_loader import ContentLoadError, load_content_rows, split_keywords
from .generator import generate_auto_seo, generate_seo_suggestions
from .keyword_extractor import DEFAULT_MAX_KEYWORDS, extract_keywords
from .models import ContentType, RawContentContext, SEOContent
from .preview import preview_content
from .scoring import score_band
from .validator import validate_seo

console = Console()

BAND_STYLES = {
    "green": "green",
    "yellow": "yellow",
    "orange": "dark_orange",
    "red": "red",
}


class InputFileError(Exception):
    """Raised when a JSON input file cannot be used."""
    pass


def _load_json_content(path: Path) -> SEOContent:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InputFileError(f"Failed to read {path}: {e}")
    if not isinstance(data, dict):
        raise InputFileError(f"Expected a JSON object in {path}, got {type(data).__name__}")
    try:
        return SEOContent.from_dict(data)
    except ValueError as e:
        raise InputFileError(f"Invalid content in {path}: {e}")


def _build_content(
    input_file: Optional[Path],
    title: Optional[str],
    description: Optional[str],
    keywords: Optional[str],
    url: Optional[str] = None,
) -> SEOContent:
    """Build content from a JSON file, with command-line options taking precedence."""
    content = _load_json_content(input_file) if input_file else SEOContent()
    return SEOContent(
        title=title if title is not None else content.title,
        description=description if description is not None else content.description,
        keywords=split_keywords(keywords) if keywords is not None else content.keywords,
        canonical_url=url if url is not None else content.canonical_url,
    )


def _styled_score(score: int) -> str:
    band = score_band(score)
    style = BAND_STYLES[band.color.value]
    return f"[{style}]{score}/100 - {band.label.value}[/{style}]"


def _content_options(func):
    """Attach the shared content options to a command."""
    func = click.option(
        "--input", "-i", "input_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="JSON file with title, description, keywords and canonical_url.",
    )(func)
    func = click.option("--keywords", "-k", type=str, help="Comma-separated keywords.")(func)
    func = click.option("--description", "-d", type=str, help="Meta description.")(func)
    func = click.option("--title", "-t", type=str, help="Meta title.")(func)
    return func


def _exit_with_error(label: str, error: Exception) -> None:
    console.print(f"[red]{label}:[/red] {error}")
    sys.exit(1)


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose (debug) logging.",
)
def main(verbose: bool) -> None:
    """
    Event SEO - Score, generate and preview SEO metadata.

    Examples:

        event-seo validate --title "Summer Art Camp" --keywords "art,kids,camp"

        event-seo generate --title "Summer Art Camp" --description "..." --type event

        event-seo audit events.csv --output report.csv
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@_content_options
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the raw result as JSON.")
def validate(
    title: Optional[str],
    description: Optional[str],
    keywords: Optional[str],
    input_file: Optional[Path],
    as_json: bool,
) -> None:
    """Validate SEO fields and list warnings and suggestions."""
    try:
        content = _build_content(input_file, title, description, keywords)
    except InputFileError as e:
        _exit_with_error("Input error", e)

    result = validate_seo(content)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    status = "[green]Valid[/green]" if result.is_valid else "[red]Needs attention[/red]"
    console.print(Panel.fit(
        f"[bold]SEO Score:[/bold] {_styled_score(result.score)}\n{status}",
        border_style="blue",
    ))

    table = Table(title="Field Scores", show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Score")
    table.add_row("Title", _styled_score(result.title_score))
    table.add_row("Description", _styled_score(result.description_score))
    table.add_row("Keywords", _styled_score(result.keyword_score))
    console.print(table)

    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")
    for suggestion in result.suggestions:
        console.print(f"[cyan]Suggestion:[/cyan] {suggestion}")

    if not result.is_valid:
        sys.exit(2)


@main.command()
@_content_options
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the raw result as JSON.")
def analyze(
    title: Optional[str],
    description: Optional[str],
    keywords: Optional[str],
    input_file: Optional[Path],
    as_json: bool,
) -> None:
    """Show lengths, counts and scores of SEO fields."""
    try:
        content = _build_content(input_file, title, description, keywords)
    except InputFileError as e:
        _exit_with_error("Input error", e)

    result = analyze_seo(content)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    limits = DEFAULT_CONFIG.thresholds
    table = Table(title="SEO Analysis", show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Current")
    table.add_column("Target")
    table.add_column("Score")
    table.add_row(
        "Title", str(result.title_length),
        f"{limits.title.min}-{limits.title.max}", _styled_score(result.title_score),
    )
    table.add_row(
        "Description", str(result.description_length),
        f"{limits.description.min}-{limits.description.max}",
        _styled_score(result.description_score),
    )
    table.add_row(
        "Keywords", str(result.keyword_count),
        f"{limits.keywords.min}-{limits.keywords.max}", _styled_score(result.keyword_score),
    )
    console.print(table)
    console.print(f"[bold]Overall:[/bold] {_styled_score(result.overall_score)}")


@main.command()
@click.option("--title", "-t", type=str, required=True, help="Content title.")
@click.option("--description", "-d", type=str, required=True, help="Content description.")
@click.option(
    "--type", "content_type",
    type=click.Choice([t.value for t in ContentType]),
    default=ContentType.EVENT.value,
    show_default=True,
    help="Kind of content.",
)
@click.option("--category", type=str, help="Event category.")
@click.option("--location", type=str, help="Event location.")
@click.option("--tag", "tags", type=str, multiple=True, help="Content tag (repeatable).")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the raw result as JSON.")
def generate(
    title: str,
    description: str,
    content_type: str,
    category: Optional[str],
    location: Optional[str],
    tags: tuple[str, ...],
    as_json: bool,
) -> None:
    """Generate SEO fields from raw event or article content."""
    context = RawContentContext(
        title=title,
        description=description,
        content_type=ContentType(content_type),
        category=category,
        location=location,
        tags=list(tags),
    )
    generated = generate_auto_seo(context)

    if as_json:
        click.echo(json.dumps(generated.to_dict(), indent=2))
        return

    table = Table(title="Generated SEO", show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Title", generated.title)
    table.add_row("Description", generated.description)
    table.add_row("Keywords", ", ".join(generated.keywords))
    console.print(table)

    score = analyze_seo(generated.to_content()).overall_score
    console.print(f"[bold]Score:[/bold] {_styled_score(score)}")

    for suggestion in generate_seo_suggestions(
        generated.to_content(), category=category, location=location,
        content_type=context.content_type,
    ):
        console.print(f"[cyan]{suggestion.priority.value.upper()}:[/cyan] {suggestion.message}")


@main.command()
@click.argument("text", type=str)
@click.option(
    "--max-keywords", "-n",
    type=click.IntRange(min=0),
    default=DEFAULT_MAX_KEYWORDS,
    show_default=True,
    help="Number of keywords to extract.",
)
def extract(text: str, max_keywords: int) -> None:
    """Extract the most frequent keywords from TEXT."""
    for keyword in extract_keywords(text, max_keywords):
        click.echo(keyword)


@main.command()
@_content_options
@click.option("--url", "-u", type=str, help="Page URL. Defaults to the canonical URL.")
@click.option(
    "--base-url",
    type=str,
    envvar="EVENT_SEO_BASE_URL",
    default=DEFAULT_CONFIG.base_url,
    show_default=True,
    help="Site root used when no URL is given.",
)
def preview(
    title: Optional[str],
    description: Optional[str],
    keywords: Optional[str],
    input_file: Optional[Path],
    url: Optional[str],
    base_url: str,
) -> None:
    """Preview how the fields render in search results and social cards."""
    try:
        content = _build_content(input_file, title, description, keywords, url)
    except InputFileError as e:
        _exit_with_error("Input error", e)

    rendered = preview_content(content, config=DEFAULT_CONFIG.with_base_url(base_url))

    for rendering, heading in (
        (rendered.search_result, "Search Result"),
        (rendered.social_card_a, "Social Card (Facebook)"),
        (rendered.social_card_b, "Social Card (Twitter)"),
    ):
        console.print(Panel(
            f"[dim]{rendering.display_url}[/dim]\n"
            f"[bold blue]{rendering.title}[/bold blue]\n"
            f"{rendering.description}",
            title=f"{heading} ({rendering.title_budget}/{rendering.description_budget} chars)",
            border_style="blue",
        ))

    console.print(
        f"[dim]Title: {rendered.title_length} - Description: {rendered.description_length}[/dim]"
    )


@main.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--sheet", type=str, default=None, help="Excel sheet name.")
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the audit report to this CSV file.",
)
def audit(source: Path, sheet: Optional[str], output: Optional[Path]) -> None:
    """Audit SEO fields of every row in a CSV or Excel SOURCE file."""
    try:
        with console.status("[bold green]Loading content..."):
            rows = load_content_rows(source, sheet_name=sheet)
    except ContentLoadError as e:
        _exit_with_error("Content loading error", e)

    report = audit_rows(rows)

    table = Table(title=f"SEO Audit ({len(report)} items)", show_header=True)
    table.add_column("ID", style="cyan")
    table.add_column("Title", justify="right")
    table.add_column("Description", justify="right")
    table.add_column("Keywords", justify="right")
    table.add_column("Overall")

    for record in report.itertuples(index=False):
        table.add_row(
            str(record.row_id),
            str(record.title_score),
            str(record.description_score),
            str(record.keyword_score),
            _styled_score(int(record.overall_score)),
        )
    console.print(table)

    invalid = int((~report["is_valid"]).sum())
    console.print(f"[bold]{invalid}[/bold] of {len(report)} items have warnings.")

    if output:
        report.to_csv(output, index=False)
        console.print(f"\n[bold green]Success![/bold green] Report saved to: {output}")


def run_cli() -> None:
    """Entry point for the CLI."""
    main()


if __name__ == "__main__":
    run_cli()
