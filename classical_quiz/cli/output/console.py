"""Rich rendering for the terminal quiz: questions, reveals, summaries, catalog."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from classical_quiz.catalog.domain.catalog import Catalog
from classical_quiz.catalog.domain.sample import Sample
from classical_quiz.quiz.domain.question import GameSummary, RoundResult


def render_question(
    console: Console,
    round_number: int,
    remaining: int,
    audio_reference: str,
    display_options: list[Sample],
) -> None:
    """Print the numbered composer choices for one round."""
    header = Text.assemble(
        (f"Round {round_number}", "bold cyan"),
        (f"  ({remaining} left)", "dim"),
    )
    body = Text.assemble(("Now playing: ", "dim"), (audio_reference, "italic"))
    console.print()
    console.print(Panel(body, title=header, title_align="left"))
    for number, sample in enumerate(display_options, start=1):
        console.print(f"  [bold]{number}[/bold]. {escape(sample.composer)}")


def render_result(console: Console, result: RoundResult, art_reference: str = "") -> None:
    if result.skipped:
        console.print("[yellow]This round could not be scored and was skipped.[/yellow]")
        return

    answer = result.question.answer
    if result.correct:
        console.print(f"[bold green]Correct![/bold green] {escape(answer.composer)}")
    else:
        console.print(f"[bold red]Wrong.[/bold red] It was {escape(answer.composer)}")
    console.print(f"  [dim]{escape(answer.title)}[/dim]")
    if art_reference:
        console.print(f"  [dim]Portrait: {escape(art_reference)}[/dim]")

    score_line = f"Score: {result.state.current_score}  High score: {result.state.high_score}"
    if result.new_high_score:
        score_line += "  [bold magenta]New high score![/bold magenta]"
    console.print(score_line)


def render_summary(console: Console, summary: GameSummary) -> None:
    console.print()
    console.print("[bold]Game finished[/bold]")
    console.print(f"Your score: {summary.final_score}/{summary.max_score}")
    console.print(f"High score: {summary.high_score}/{summary.max_score}")


def render_catalog(console: Console, catalog: Catalog) -> None:
    table = Table(title=f"{len(catalog)} samples")
    table.add_column("ID", justify="right")
    table.add_column("Composer")
    table.add_column("Title")
    table.add_column("Audio")
    for sample in catalog.samples:
        table.add_row(
            str(sample.id),
            escape(sample.composer),
            escape(sample.title),
            escape(sample.audio_reference),
        )
    console.print(table)
