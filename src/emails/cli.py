"""
Command-line interface for the EventMail engine.

Usage:
    python -m src.emails.cli types
    python -m src.emails.cli generate event.json --type pain_sale --topic "MLOps"
    python -m src.emails.cli generate event.json --type digest --json
    python -m src.emails.cli render template.html output.json --out email.html
"""

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import EngineConfig
from .errors import EventMailError
from .generator import generate_email
from .models import ContentType, EmailOutput
from .renderer import DEFAULT_TEMPLATE, render_template
from .store import EventStore
from .strategies import STRATEGY_REGISTRY
from .validator import DEFAULT_RULES, EXTENDED_RULES, Validator

console = Console()

CONTENT_TYPE_CHOICES = [ct.value for ct in ContentType]


def setup_logging(verbose: bool = False) -> None:
    """Configure logging with rich handler."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


def _fail(message: str) -> None:
    console.print(f"[bold red]Error: {escape(message)}[/bold red]")
    sys.exit(1)


def _read_json(path: Path) -> dict:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        _fail(f"{path} is not valid JSON: {e}")
    if not isinstance(data, dict):
        _fail(f"{path} must contain a JSON object")
    return data


def _print_output(output: EmailOutput) -> None:
    if output.errors:
        lines = "\n".join(f"• {e.slot}: {e.reason}" for e in output.errors)
        console.print(Panel(lines, title="Validation issues", border_style="red"))

    table = Table(title="Generated email", show_lines=True)
    table.add_column("Slot", style="cyan", no_wrap=True)
    table.add_column("Value")
    for slot, value in output.to_dict().items():
        if slot in ("utm_params", "errors"):
            continue
        table.add_row(slot, "[dim]—[/dim]" if value is None else escape(str(value)))
    table.add_row("tracked_cta_url", output.tracked_cta_url)
    console.print(table)


# =============================================================================
# CLI
# =============================================================================


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool):
    """Generate and render event marketing emails."""
    setup_logging(verbose)


@cli.command()
def types():
    """List the available content types."""
    table = Table(title="Content types")
    table.add_column("Type", style="cyan")
    table.add_column("Label")
    table.add_column("Description")
    for strategy in STRATEGY_REGISTRY.values():
        table.add_row(strategy.content_type.value, strategy.label, strategy.description)
    console.print(table)


@cli.command()
@click.argument("event_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--type", "-t", "content_type",
    type=click.Choice(CONTENT_TYPE_CHOICES),
    default=ContentType.ANNOUNCE.value,
    show_default=True,
    help="Content type (generation strategy).",
)
@click.option("--topic", default=None, help="Optional extra topic for the intro.")
@click.option(
    "--base-url",
    envvar="BASE_URL",
    default=EngineConfig.base_url,
    show_default=True,
    help="Public site URL used for the CTA link.",
)
@click.option("--strict", is_flag=True, help="Apply the extended validation rules.")
@click.option("--json", "as_json", is_flag=True, help="Print the output as JSON.")
@click.option(
    "--html", "html_out",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also render HTML (event template or the default layout) to this file.",
)
def generate(
    event_file: Path,
    content_type: str,
    topic: str | None,
    base_url: str,
    strict: bool,
    as_json: bool,
    html_out: Path | None,
):
    """Generate an email from an event described in EVENT_FILE (JSON)."""
    store = EventStore()
    config = EngineConfig(base_url=base_url)
    validator = Validator(EXTENDED_RULES if strict else DEFAULT_RULES)

    try:
        event = store.add(_read_json(event_file))
        output = generate_email(
            store, event.id, content_type, topic, config=config, validator=validator
        )
        if html_out is not None:
            template = event.html_template or DEFAULT_TEMPLATE
            html_out.write_text(render_template(template, output), encoding="utf-8")
    except EventMailError as e:
        _fail(str(e))

    if as_json:
        click.echo(output.to_json())
    else:
        _print_output(output)
        if html_out is not None:
            console.print(f"[green]✓ HTML written to {html_out}[/green]")


@cli.command()
@click.argument("template_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--out", "out_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the rendered HTML here instead of stdout.",
)
@click.option("--flatten-utm", is_flag=True, help="Expose utm_* and tracked_cta_url placeholders.")
@click.option("--autoescape", is_flag=True, help="HTML-escape substituted values.")
def render(
    template_file: Path,
    output_file: Path,
    out_file: Path | None,
    flatten_utm: bool,
    autoescape: bool,
):
    """Merge a generated OUTPUT_FILE (JSON) into TEMPLATE_FILE (HTML)."""
    data = _read_json(output_file)
    template = template_file.read_text(encoding="utf-8")

    try:
        output = EmailOutput.from_dict(data)
        html = render_template(
            template,
            output.to_template_context(flatten_utm=flatten_utm),
            autoescape=autoescape,
        )
    except EventMailError as e:
        _fail(str(e))

    if out_file is None:
        click.echo(html)
    else:
        out_file.write_text(html, encoding="utf-8")
        console.print(f"[green]✓ Rendered {template_file} → {out_file}[/green]")


if __name__ == "__main__":
    cli()
