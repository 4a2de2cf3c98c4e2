"""CLI interface using typer + rich."""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn

from career_advisor.config import load_config
from career_advisor.dictionaries import INDUSTRIES, load_dictionary
from career_advisor.export import (
    render_html_report,
    render_json_report,
    render_markdown_report,
    render_pdf,
    render_text_report,
    report_filename,
)
from career_advisor.models.analysis import CareerAnalysisResult
from career_advisor.parsers.jd_parser import load_jd_file
from career_advisor.parsers.resume_parser import parse_resume
from career_advisor.pipeline.orchestrator import CareerAnalyzer

app = typer.Typer(
    name="career-advisor",
    help="Resume and job posting compatibility analysis",
    no_args_is_help=True,
)
console = Console()

FORMAT_SUFFIXES = {
    "text": "txt",
    "markdown": "md",
    "html": "html",
    "pdf": "pdf",
    "json": "json",
}


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _render(result: CareerAnalysisResult, fmt: str, language: str) -> str | bytes:
    if fmt == "pdf":
        return render_pdf(result, language)
    if fmt == "html":
        return render_html_report(result, language)
    if fmt == "markdown":
        return render_markdown_report(result, language)
    if fmt == "json":
        return render_json_report(result)
    return render_text_report(result, language)


def _score_color(score: int) -> str:
    if score >= 80:
        return "green"
    if score >= 60:
        return "yellow"
    return "red"


def _print_summary(result: CareerAnalysisResult) -> None:
    scores = result.scores
    job = result.job_posting
    color = _score_color(scores.overall)
    console.print(
        Panel(
            f"{escape(job.job_title)} @ {escape(job.company)} ({job.industry}, {escape(job.location)})\n"
            f"ATS: {scores.ats} | Keywords: {scores.keyword_density} | "
            f"Experience: {scores.experience_alignment} | Skills: {scores.skills_match}\n"
            f"[bold {color}]Overall: {scores.overall}[/bold {color}]",
            title="Compatibility",
        )
    )
    skills = result.skill_match
    if skills.matched_skills:
        console.print(f"[green]Matched:[/green] {', '.join(skills.matched_skills)}")
    if skills.missing_skills:
        console.print(f"[yellow]Missing:[/yellow] {', '.join(skills.missing_skills)}")

    immediate = result.action_plan.immediate
    if immediate:
        console.print("\n[bold]Next steps:[/bold]")
        for item in immediate:
            console.print(f"  - {item.task} [dim]({item.timeframe})[/dim]")


@app.command()
def analyze(
    resume: Path = typer.Option(..., "--resume", help="Resume file (PDF/DOCX/TXT/MD)"),
    jd: Path = typer.Option(..., "--jd", help="Job posting text file"),
    fmt: str = typer.Option(None, "--format", "-f", help="Report format: text, markdown, html, pdf, json"),
    output: Path = typer.Option(None, "--output", "-o", help="Report output path"),
    lang: str = typer.Option(None, "--lang", "-l", help="Report language tag (en, ko)"),
    config_path: Path = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Score a resume against a job posting and write a full report."""
    _setup_logging(verbose)

    try:
        config = load_config(config_path)
    except (ValueError, TypeError) as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        raise typer.Exit(1)

    fmt = (fmt or config.export.default_format).lower()
    if fmt not in FORMAT_SUFFIXES:
        console.print(f"[red]Unknown format: {fmt} (choose from {', '.join(FORMAT_SUFFIXES)})[/red]")
        raise typer.Exit(1)
    language = lang or config.export.language

    try:
        resume_text = parse_resume(resume)
        jd_text = load_jd_file(jd)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if not resume_text.strip():
        console.print(f"[red]Resume is empty: {resume}[/red]")
        raise typer.Exit(1)
    if not jd_text.strip():
        console.print(f"[red]Job posting is empty: {jd}[/red]")
        raise typer.Exit(1)

    if verbose:
        console.print(f"[dim]Resume: {len(resume_text)} chars[/dim]")
        console.print(f"[dim]Job posting: {len(jd_text)} chars[/dim]")

    try:
        analyzer = CareerAnalyzer(config=config)
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Analyzing...", total=None)

        def on_phase(phase: str, detail: str) -> None:
            progress.update(task, description=detail)

        result = analyzer.analyze(resume_text, jd_text, on_phase=on_phase)

    _print_summary(result)

    if output is None:
        output = config.export.resolved_output_dir / report_filename(FORMAT_SUFFIXES[fmt])
    output.parent.mkdir(parents=True, exist_ok=True)

    report = _render(result, fmt, language)
    if isinstance(report, bytes):
        output.write_bytes(report)
    else:
        output.write_text(report, encoding="utf-8")
    console.print(f"\n[green]Report saved: {output}[/green]")


@app.command()
def industries(
    config_path: Path = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
) -> None:
    """List the industries and skill counts in the keyword dictionary."""
    config = load_config(config_path)
    try:
        dictionary = load_dictionary(config.extraction.dictionary_path)
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    for name in INDUSTRIES:
        categories = dictionary.industries.get(name)
        if not categories:
            continue
        count = len(dictionary.skills_for(name))
        console.print(f"  [bold]{name}[/bold]: {count} skills ({', '.join(categories)})")


if __name__ == "__main__":
    app()
