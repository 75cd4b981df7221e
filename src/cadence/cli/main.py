"""Main CLI entry point for Cadence"""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from cadence.__version__ import __version__
from cadence.campaign import draft_from_answers
from cadence.config import AnswerSnapshot, AnswersLoader, BuilderDefaults, validate_answers
from cadence.core.errors import CadenceError
from cadence.observability import setup_logging
from cadence.workflow import build_workflow, flatten_to_steps

app = typer.Typer(
    name="cadence",
    help="Cadence - outreach campaign workflow builder",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit"""
    if value:
        typer.echo(f"Cadence version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        "-l",
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    ),
    log_file: str | None = typer.Option(
        None,
        "--log-file",
        help="Also write JSON logs to this file",
    ),
) -> None:
    """Cadence - outreach campaign workflow builder"""
    setup_logging(level=log_level, log_file=log_file)


def _load(
    answers_path: Path, defaults_path: Path | None
) -> tuple[AnswerSnapshot, BuilderDefaults]:
    try:
        answers, defaults = AnswersLoader.load(answers_path)
        if defaults_path is not None:
            defaults = AnswersLoader.load_defaults(defaults_path)
    except CadenceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e
    return answers, defaults


ANSWERS_ARGUMENT = typer.Argument(..., help="YAML or JSON file with questionnaire answers")
DEFAULTS_OPTION = typer.Option(
    None, "--defaults", "-d", help="YAML or JSON file overriding builder defaults"
)


@app.command()
def graph(
    answers_path: Path = ANSWERS_ARGUMENT,
    defaults_path: Path | None = DEFAULTS_OPTION,
) -> None:
    """Print the workflow graph (nodes and edges) as JSON."""
    answers, defaults = _load(answers_path, defaults_path)
    try:
        workflow = build_workflow(answers, defaults)
    except CadenceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e
    typer.echo(json.dumps(workflow.to_dict(), indent=2, ensure_ascii=False))


@app.command()
def steps(
    answers_path: Path = ANSWERS_ARGUMENT,
    defaults_path: Path | None = DEFAULTS_OPTION,
    as_json: bool = typer.Option(False, "--json", help="Print steps as JSON"),
) -> None:
    """Print the ordered step list."""
    answers, defaults = _load(answers_path, defaults_path)
    try:
        workflow = build_workflow(answers, defaults)
        step_list = flatten_to_steps(workflow.nodes, workflow.edges)
    except CadenceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    if as_json:
        payload = [step.model_dump(mode="json") for step in step_list]
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    table = Table(title="Campaign steps")
    table.add_column("Order", justify="right")
    table.add_column("Type")
    table.add_column("Title")
    for step in step_list:
        table.add_row(str(step.order), step.type, step.title)
    console.print(table)


@app.command()
def campaign(
    answers_path: Path = ANSWERS_ARGUMENT,
    defaults_path: Path | None = DEFAULTS_OPTION,
    name: str | None = typer.Option(
        None, "--name", "-n", help="Campaign name (defaults to the campaignName answer)"
    ),
) -> None:
    """Print the draft campaign document sent to the backend."""
    answers, defaults = _load(answers_path, defaults_path)
    try:
        draft = draft_from_answers(answers, name=name, defaults=defaults)
    except CadenceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e
    typer.echo(json.dumps(draft.model_dump(mode="json"), indent=2, ensure_ascii=False))


@app.command()
def check(answers_path: Path = ANSWERS_ARGUMENT) -> None:
    """Report answer combinations the builder will not honor."""
    answers, _ = _load(answers_path, None)
    issues = validate_answers(answers)
    if not issues:
        typer.echo("✓ No issues found")
        return
    for issue in issues:
        typer.echo(f"✗ {issue.field}: {issue.message} [{issue.code}]")
    raise typer.Exit(1)


def cli() -> None:
    """Entry point for CLI"""
    app()


if __name__ == "__main__":
    cli()
