from __future__ import annotations

from pathlib import Path
from typing import NoReturn, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from quizdeck.config import Settings, load_settings
from quizdeck.content import CategoryRepository
from quizdeck.data_models import Avatar, Player
from quizdeck.errors import QuizdeckError
from quizdeck.session import CategorySession
from quizdeck.storage import PlayerPreferences, PreferencesStore
from quizdeck.utils.logging import configure_logging
from quizdeck.views import (
    AlphaPickerQuizView,
    FillBlankQuizView,
    FillTwoBlanksQuizView,
    MultiSelectQuizView,
    PickerQuizView,
    QuizView,
    SelectItemQuizView,
    TrueFalseQuizView,
)

app = typer.Typer(help="Play categorized quizzes in the terminal.")
profile_app = typer.Typer(help="Show or change the local player profile.")
app.add_typer(profile_app, name="profile")
console = Console()

load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)


def _load_settings(config: Optional[Path]) -> Settings:
    """Load settings and configure logging before any command does real work."""
    settings = load_settings(config)
    configure_logging(settings.logging.level, settings.logging.use_json)
    return settings


def _player_preferences(settings: Settings) -> PlayerPreferences:
    return PlayerPreferences(PreferencesStore(settings.paths.preferences_file))


def _fail(exc: Exception) -> NoReturn:
    console.print(f"[red]{escape(str(exc))}[/red]")
    raise typer.Exit(code=1)


def _collect_answer(view: QuizView) -> None:
    """Prompt for an answer in the shape the view's content handle describes."""
    content = view.content
    console.print(f"\n[bold]{escape(content.prompt)}[/bold]")
    for index, option in enumerate(content.options):
        if content.kind != "letter_picker":
            console.print(f"  {index + 1}. {escape(option)}")

    if isinstance(view, TrueFalseQuizView):
        view.choose(typer.confirm("True?"))
    elif isinstance(view, SelectItemQuizView):
        choice = typer.prompt("Option number", type=int)
        view.select(choice - 1)
    elif isinstance(view, MultiSelectQuizView):
        raw = typer.prompt("Option numbers (comma separated)")
        view.set_selection(int(item) - 1 for item in raw.split(",") if item.strip())
    elif isinstance(view, FillBlankQuizView):
        start = content.extra.get("start") or ""
        end = content.extra.get("end") or ""
        if start or end:
            console.print(f"  {start} ____ {end}".strip())
        view.enter_text(typer.prompt("Answer"))
    elif isinstance(view, FillTwoBlanksQuizView):
        view.enter_text(0, typer.prompt("First blank"))
        view.enter_text(1, typer.prompt("Second blank"))
    elif isinstance(view, PickerQuizView):
        extra = content.extra
        value = typer.prompt(
            f"Number between {extra['minimum']} and {extra['maximum']} (step {extra['step']})",
            type=int,
        )
        view.set_value(value)
    elif isinstance(view, AlphaPickerQuizView):
        view.set_letter(typer.prompt("Letter"))


@app.command()
def categories(
    config: Optional[Path] = typer.Option(None, help="Path to configuration YAML."),
):
    """List the categories found in the configured content file."""
    settings = _load_settings(config)
    try:
        repository = CategoryRepository.from_path(settings.paths.content_file)
    except (FileNotFoundError, ValueError) as exc:
        _fail(exc)

    table = Table(title="Categories")
    table.add_column("Id")
    table.add_column("Name")
    table.add_column("Quizzes", justify="right")
    for category in repository.all():
        table.add_row(category.id, category.name, str(len(category.quizzes)))
    console.print(table)


@app.command()
def play(
    category_id: str = typer.Argument(..., help="Id of the category to play."),
    config: Optional[Path] = typer.Option(None, help="Path to configuration YAML."),
):
    """
    Answer every quiz in a category and print the final score.

    Builds a `CategorySession` over the category, prompts for each quiz with the
    input matching its content handle, and submits through the session.
    """
    settings = _load_settings(config)
    try:
        repository = CategoryRepository.from_path(settings.paths.content_file)
        category = repository.get(category_id)
    except (FileNotFoundError, KeyError, ValueError) as exc:
        _fail(exc)

    try:
        player = _player_preferences(settings).read()
    except QuizdeckError as exc:
        _fail(exc)
    if player.first_name:
        console.print(f"Good luck, {player.first_name} {player.last_initial}.")

    session = CategorySession(category)
    while not session.is_finished:
        view = session.current_view
        while True:
            try:
                _collect_answer(view)
            except (IndexError, ValueError) as exc:
                console.print(f"[yellow]{escape(str(exc))}[/yellow]")
                continue
            if view.is_answered() or typer.confirm("Submit without an answer?"):
                break
        try:
            correct = session.submit()
        except QuizdeckError as exc:
            _fail(exc)
        console.print("[green]Correct![/green]" if correct else "[red]Incorrect.[/red]")

    console.print(
        f"\n[bold]{escape(category.name)}[/bold]: {category.score}/{len(category.quizzes)} correct"
    )


@profile_app.command("show")
def profile_show(
    config: Optional[Path] = typer.Option(None, help="Path to configuration YAML."),
):
    """Print the stored player profile."""
    settings = _load_settings(config)
    preferences = _player_preferences(settings)
    try:
        player = preferences.read()
    except QuizdeckError as exc:
        _fail(exc)
    status = "signed in" if preferences.is_signed_in() else "not signed in"
    console.print(f"First name: {player.first_name}")
    console.print(f"Last initial: {player.last_initial}")
    console.print(f"Avatar: {player.avatar.name}")
    console.print(f"Status: {status}")


@profile_app.command("set")
def profile_set(
    first_name: str = typer.Option(..., help="Player first name."),
    last_initial: str = typer.Option(..., help="Initial of the player's last name."),
    avatar: Avatar = typer.Option(Avatar.ONE, help="Avatar variant."),
    config: Optional[Path] = typer.Option(None, help="Path to configuration YAML."),
):
    """Overwrite the stored player profile."""
    settings = _load_settings(config)
    player = Player(first_name=first_name, last_initial=last_initial[:1].upper(), avatar=avatar)
    try:
        _player_preferences(settings).write(player)
    except QuizdeckError as exc:
        _fail(exc)
    console.print(f"Saved {player.first_name} {player.last_initial} ({player.avatar.name}).")


@profile_app.command("sign-out")
def profile_sign_out(
    config: Optional[Path] = typer.Option(None, help="Path to configuration YAML."),
):
    """Remove the stored player profile."""
    settings = _load_settings(config)
    try:
        _player_preferences(settings).sign_out()
    except QuizdeckError as exc:
        _fail(exc)
    console.print("Signed out.")


if __name__ == "__main__":
    app()
