#!/usr/bin/env python3
"""
Resume Rendering CLI

Renders resume YAML files with any catalog template and browses the template catalog.

Commands:
    render     - Render a resume file to PDF (or HTML)
    templates  - List registered templates
    catalog    - Show one page of the template picker (filter, search, page buttons)
    thumbnails - Generate previews of a catalog page concurrently

Examples:\n

    render_resume.py render resume.yaml                          # Template/color from the file

    render_resume.py render resume.yaml -t modern -c "#059669"   # Override template and accent

    render_resume.py render --sample -t timeline --html          # Bundled sample, HTML output

    render_resume.py templates --category creative               # List one category

    render_resume.py catalog --search minimal --page 1           # Picker page
"""

import asyncio
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from resumekit.contexts.catalog import TEMPLATES_PER_PAGE, filter_templates, page_buttons, paginate, total_pages
from resumekit.contexts.rendering import (
    PreviewBoard,
    PreviewKey,
    PreviewState,
    compositor_generator,
    render_resume_file,
)
from resumekit.contexts.rendering.serializer import HtmlSerializer
from resumekit.contexts.templating import get_registry, sample_resume
from resumekit.contexts.templating.exceptions import ResumeKitError
from resumekit.contexts.templating.logger import setup_templating_logger
from resumekit.contexts.templating.resume_data_structure import SAMPLE_RESUME_PATH, ResumeSettings
from resumekit.utils.logger import setup_logger
from resumekit.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("RESUMEKIT_LOGS_PATH", "outs/logs"))


app = typer.Typer(
    help="Render resumes with interchangeable templates and browse the template catalog",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("render")
def render_command(
    resume_file: Annotated[
        Optional[Path],
        typer.Argument(help="Resume YAML file (resume record plus optional settings block)"),
    ] = None,
    template: Annotated[
        Optional[str],
        typer.Option("--template", "-t", help="Template id (default: the file's settings.template)"),
    ] = None,
    color: Annotated[
        Optional[str],
        typer.Option("--color", "-c", help="Accent hex color (default: file setting or template default)"),
    ] = None,
    output_dir: Annotated[
        Optional[Path],
        typer.Option("--output-dir", "-o", help="Output directory (default: outs/results/<date>)"),
    ] = None,
    sample: Annotated[
        bool,
        typer.Option("--sample", help="Render the bundled sample resume"),
    ] = False,
    html: Annotated[
        bool,
        typer.Option("--html", help="Write HTML instead of PDF (no WeasyPrint needed)"),
    ] = False,
):
    """
    Render a resume file.

    Examples:\n

        $ render_resume.py render resume.yaml

        $ render_resume.py render resume.yaml --template modern --color 7c3aed
    """
    if resume_file is None and not sample:
        typer.secho("Error: give a resume file or --sample\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    source = SAMPLE_RESUME_PATH if sample else resume_file
    if not source.exists():
        typer.secho(f"Error: file not found: {source}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"\nRendering: {source.name}", fg=typer.colors.BLUE, bold=True)

    try:
        output_path = render_resume_file(
            source,
            template_id=template,
            accent_color=color,
            output_dir=output_dir,
            serializer=HtmlSerializer() if html else None,
        )
    except ResumeKitError as e:
        typer.secho(f"\n✗ {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"\n✓ Saved: {output_path}", fg=typer.colors.GREEN, bold=True)


@app.command("templates")
def templates_command(
    category: Annotated[
        str,
        typer.Option("--category", help="Category value ('all' for every template)"),
    ] = "all",
):
    """List registered templates with their layout and default accent."""
    setup_templating_logger(LOGS_PATH / f"template_{now()}", phase="catalog")
    registry = get_registry()
    matches = filter_templates(registry.list(), category=category)

    typer.secho(f"\n{len(matches)} template(s)\n", fg=typer.colors.BLUE, bold=True)
    for info in matches:
        badges = " ".join(b for b, on in (("[popular]", info.is_popular), ("[new]", info.is_new)) if on)
        typer.echo(f"  {info.id:<14} {info.layout:<13} {info.default_accent}  {info.label} {badges}".rstrip())

    typer.echo("\nCategories: " + ", ".join(c.value for c in registry.categories()))


@app.command("catalog")
def catalog_command(
    category: Annotated[str, typer.Option("--category", help="Category filter")] = "all",
    search: Annotated[Optional[str], typer.Option("--search", "-s", help="Search label/description")] = None,
    page: Annotated[int, typer.Option("--page", "-p", help="Page number (clamped)")] = 1,
    per_page: Annotated[int, typer.Option("--per-page", min=1)] = TEMPLATES_PER_PAGE,
):
    """Show one page of the template picker."""
    matches = filter_templates(get_registry().list(), category=category, query=search)
    pages = total_pages(len(matches), per_page)

    if not matches:
        typer.secho("\nNo templates match.\n", fg=typer.colors.YELLOW)
        return

    for info in paginate(matches, per_page, page):
        typer.echo(f"  {info.label:<14} {info.description}")

    buttons = page_buttons(pages, page)
    typer.echo("\nPages: " + " ".join(f"[{b}]" if b == min(max(page, 1), pages) else str(b) for b in buttons))


@app.command("thumbnails")
def thumbnails_command(
    color: Annotated[
        Optional[str],
        typer.Option("--color", "-c", help="Accent for every thumbnail (default: template defaults)"),
    ] = None,
    page: Annotated[int, typer.Option("--page", "-p", help="Catalog page to preview")] = 1,
):
    """
    Generate previews of a catalog page with the sample resume.

    Previews are generated concurrently and kept until the command exits.
    """
    setup_logger("preview", LOGS_PATH / f"preview_{now()}", extra_provenance={"Catalog page": str(page)})
    templates = paginate(get_registry().list(), TEMPLATES_PER_PAGE, page)
    generate = compositor_generator(sample_resume(), ResumeSettings())

    async def run():
        async with PreviewBoard(generate, debounce_s=0) as board:
            snapshots = await board.request_many({info.id: PreviewKey(info.id, color) for info in templates})
            for consumer_id, snapshot in snapshots.items():
                if snapshot.state == PreviewState.READY:
                    typer.secho(f"  ✓ {consumer_id:<14} {snapshot.handle.size} bytes", fg=typer.colors.GREEN)
                else:
                    typer.secho(f"  ✗ {consumer_id:<14} {snapshot.error.message}", fg=typer.colors.RED)

    asyncio.run(run())


if __name__ == "__main__":
    app()
