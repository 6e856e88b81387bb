"""Command-line interface for StreakKeeper."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from .config import BaseConfig
from .logging_config import setup_logging
from .models.habit import Habit
from .services.habit_store import HabitStore
from .services.ledger import is_completed


def _build_store() -> HabitStore:
    from .infra.database import bootstrap_database
    from .infra.repositories import SQLModelSettingsRepository, SQLModelSnapshotRepository

    config = BaseConfig()
    setup_logging(config)
    _engine, session_factory = bootstrap_database(config)
    settings_repo = SQLModelSettingsRepository(session_factory)
    return HabitStore(SQLModelSnapshotRepository(settings_repo, key=config.SNAPSHOT_KEY))


def _find(store: HabitStore, ref: str) -> Optional[Habit]:
    """Resolve a habit by id or (case-insensitive) name."""

    for habit in store.habits:
        if str(habit.id) == ref:
            return habit
    lowered = ref.strip().lower()
    matches = [h for h in store.habits if h.name.lower() == lowered]
    return matches[0] if len(matches) == 1 else None


def _require(store: HabitStore, ref: str) -> Habit:
    habit = _find(store, ref)
    if habit is None:
        raise click.ClickException(f"No habit matches '{ref}'.")
    return habit


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Track daily habits and their streaks."""

    ctx.ensure_object(dict)
    if "store" not in ctx.obj:
        ctx.obj["store"] = _build_store()
    ctx.obj["store"].refresh()


@cli.command("add")
@click.argument("name")
@click.pass_obj
def add_command(obj: dict, name: str) -> None:
    """Add a new habit."""

    habit = obj["store"].add_habit(name)
    if habit is None:
        raise click.ClickException("Habit name cannot be empty.")
    click.echo(f"Added '{habit.name}' ({habit.id})")


@cli.command("list")
@click.pass_obj
def list_command(obj: dict) -> None:
    """Show habits with their streaks."""

    view = obj["store"].view()
    if view.is_empty:
        click.echo("No habits yet. Add one with: streakkeeper add NAME")
        return
    for row in view.rows:
        mark = "x" if row.done_today else " "
        click.echo(f"[{mark}] {row.name:<24} streak {row.streak:>3}  best {row.longest_streak:>3}  ({row.id})")
    click.echo(f"Longest streak: {view.longest_streak} days")


@cli.command("done")
@click.argument("habit")
@click.pass_obj
def done_command(obj: dict, habit: str) -> None:
    """Toggle today's completion for HABIT (id or name)."""

    store: HabitStore = obj["store"]
    updated = store.toggle_completion(_require(store, habit).id)
    state = "done" if is_completed(updated.completed, store.today_key()) else "not done"
    click.echo(f"'{updated.name}' marked {state} today. Streak: {updated.streak}, best: {updated.longest_streak}")


@cli.command("rename")
@click.argument("habit")
@click.argument("new_name")
@click.pass_obj
def rename_command(obj: dict, habit: str, new_name: str) -> None:
    """Rename HABIT."""

    store: HabitStore = obj["store"]
    renamed = store.rename_habit(_require(store, habit).id, new_name)
    if renamed is None:
        raise click.ClickException("Habit name cannot be empty.")
    click.echo(f"Renamed to '{renamed.name}'")


@cli.command("delete")
@click.argument("habit")
@click.option("--yes", is_flag=True, default=False, help="Skip the confirmation prompt")
@click.pass_obj
def delete_command(obj: dict, habit: str, yes: bool) -> None:
    """Delete HABIT and its history."""

    store: HabitStore = obj["store"]
    target = _require(store, habit)
    token = store.request_delete(target.id)
    if token is None:
        raise click.ClickException(f"No habit matches '{habit}'.")
    if not yes and not click.confirm(f"Delete '{target.name}'?", default=False):
        store.cancel_delete(token)
        click.echo("Cancelled.")
        return
    store.confirm_delete(token)
    click.echo(f"Deleted '{target.name}'")


@cli.command("stats")
@click.pass_obj
def stats_command(obj: dict) -> None:
    """Show the longest streak and this week's completion counts."""

    store: HabitStore = obj["store"]
    view = store.view()
    click.echo(f"Habits: {len(view.rows)}")
    click.echo(f"Longest streak: {store.longest_streak_across_all()} days")
    click.echo(f"Completed today: {store.completions_on(view.today)}")
    for bar in view.week:
        click.echo(f"  {bar.key} {bar.label}  {'#' * bar.count} {bar.count}")


@cli.command("chart")
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_obj
def chart_command(obj: dict, output: Path) -> None:
    """Write the 7-day completion chart to OUTPUT as PNG."""

    from .desktop.charts import weekly_completion_png

    path = weekly_completion_png(obj["store"].view().week, output=output)
    click.echo(f"Chart written: {path}")


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
