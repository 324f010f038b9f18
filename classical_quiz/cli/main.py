"""CLI entrypoint for classical-quiz — typer app with `play`, `scores` and `catalog` commands."""

import logging
import random
import sys
import time
from pathlib import Path

import structlog
import typer
from rich.console import Console

from classical_quiz.catalog.domain.catalog import Catalog
from classical_quiz.catalog.domain.loader import CatalogLoader
from classical_quiz.catalog.infrastructure.json_loader import JsonCatalogLoader
from classical_quiz.catalog.infrastructure.observer import StructlogCatalogObserver
from classical_quiz.cli.output.console import (
    render_catalog,
    render_question,
    render_result,
    render_summary,
)
from classical_quiz.config.domain.config import QuizConfig
from classical_quiz.config.infrastructure.observer import StructlogConfigObserver
from classical_quiz.config.infrastructure.yaml_loader import YamlConfigLoader
from classical_quiz.core.errors import QuizError
from classical_quiz.quiz.application.session import QuizSession
from classical_quiz.quiz.domain.errors import GameOver
from classical_quiz.quiz.infrastructure.json_score_store import JsonScoreStore
from classical_quiz.quiz.infrastructure.observer import StructlogQuizObserver

app = typer.Typer(add_completion=False)

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

_CONFIG_ARGUMENT = typer.Argument(..., help="Path to quiz config YAML")
_LOG_FORMAT_OPTION = typer.Option(
    "console", "--log-format", help="Log format: 'console' or 'json'"
)
_LOG_LEVEL_OPTION = typer.Option(
    "warning", "--log-level", help="Minimum log level: debug, info, warning, error"
)


def _configure_structlog(log_format: str, log_level: str) -> None:
    """Configure structlog based on the requested format and level. Logs go to stderr."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    level = _LOG_LEVELS.get(log_level.lower())
    if level is None:
        choices = ", ".join(_LOG_LEVELS)
        typer.echo(f"Invalid log level: {log_level!r}. Must be one of: {choices}.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load(config_path: Path) -> tuple[QuizConfig, Catalog]:
    config = YamlConfigLoader(observer=StructlogConfigObserver()).load(path=config_path)
    loader: CatalogLoader = JsonCatalogLoader(observer=StructlogCatalogObserver())
    return config, loader.load_all(config=config.catalog)


def _prompt_choice(option_count: int) -> int:
    """Ask until the player enters a number between 1 and option_count."""
    while True:
        choice: int = typer.prompt("Your answer", type=int)
        if 1 <= choice <= option_count:
            return choice
        typer.echo(f"Please enter a number from 1 to {option_count}.")


@app.command()
def play(
    config_path: Path = _CONFIG_ARGUMENT,
    seed: int | None = typer.Option(
        None, "--seed", help="Seed for question draws and option order"
    ),
    log_format: str = _LOG_FORMAT_OPTION,
    log_level: str = _LOG_LEVEL_OPTION,
) -> None:
    """Play a game: hear a clip, pick the composer."""
    _configure_structlog(log_format=log_format, log_level=log_level)
    console = Console()
    try:
        config, quiz_catalog = _load(config_path=config_path)
        rng = random.Random(seed)
        session = QuizSession(
            catalog=quiz_catalog,
            score_store=JsonScoreStore(path=config.scores.path),
            rules_config=config.rules,
            observer=StructlogQuizObserver(),
            rng=rng,
        )
        reveal_delay_seconds = config.rules.answer_reveal_delay_ms / 1000

        state = session.start()
        round_number = 0
        while True:
            try:
                question = session.next_question(state)
            except GameOver:
                break

            round_number += 1
            display_options = list(question.options)
            rng.shuffle(display_options)
            render_question(
                console=console,
                round_number=round_number,
                remaining=len(state.remaining_ids),
                audio_reference=question.answer.audio_reference,
                display_options=display_options,
            )
            choice = _prompt_choice(option_count=len(display_options))
            result = session.answer(
                state=state,
                question=question,
                chosen_id=display_options[choice - 1].id,
            )
            render_result(
                console=console,
                result=result,
                art_reference=quiz_catalog.art_reference_for(question.answer.id),
            )
            state = result.state
            if reveal_delay_seconds:
                time.sleep(reveal_delay_seconds)

        render_summary(console=console, summary=session.finish(state))

    except (KeyboardInterrupt, typer.Abort):
        typer.echo("\nGame interrupted.")
        sys.exit(1)
    except QuizError as exc:
        typer.echo(str(exc))
        sys.exit(1)


@app.command()
def scores(
    config_path: Path = _CONFIG_ARGUMENT,
    log_format: str = _LOG_FORMAT_OPTION,
    log_level: str = _LOG_LEVEL_OPTION,
) -> None:
    """Show the high score out of the best possible score."""
    _configure_structlog(log_format=log_format, log_level=log_level)
    try:
        config, quiz_catalog = _load(config_path=config_path)
        high_score = JsonScoreStore(path=config.scores.path).get_high_score()
    except QuizError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    typer.echo(f"High score: {high_score}/{quiz_catalog.max_score}")


@app.command()
def catalog(
    config_path: Path = _CONFIG_ARGUMENT,
    log_format: str = _LOG_FORMAT_OPTION,
    log_level: str = _LOG_LEVEL_OPTION,
) -> None:
    """List every sample in the catalog."""
    _configure_structlog(log_format=log_format, log_level=log_level)
    try:
        _, loaded = _load(config_path=config_path)
    except QuizError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    render_catalog(console=Console(), catalog=loaded)


if __name__ == "__main__":
    app()
