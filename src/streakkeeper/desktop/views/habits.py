"""Habits view: add form, habit list, month calendar and weekly chart."""

from __future__ import annotations

from typing import TYPE_CHECKING

import flet as ft

from ...devtools import dev_log
from ...logging_config import get_logger
from ...services.view_model import HabitRow, MonthCalendar, TrackerView
from ..charts import weekly_completion_png
from ..components import build_stat_card, empty_state
from ..components.dialogs import show_delete_dialog, show_rename_dialog

if TYPE_CHECKING:
    from ..context import AppContext

logger = get_logger(__name__)


def _calendar_grid(month: MonthCalendar) -> ft.Column:
    header = ft.Row(
        [ft.Container(ft.Text(label, size=11, weight=ft.FontWeight.BOLD), width=36) for label in month.weekday_labels],
        spacing=4,
    )
    rows = [header]
    for week in month.weeks:
        cells = []
        for cell in week:
            if cell.key is None:
                cells.append(ft.Container(width=36, height=36))
                continue
            cells.append(
                ft.Container(
                    content=ft.Text(str(cell.day), size=12),
                    width=36,
                    height=36,
                    alignment=ft.alignment.center,
                    border_radius=6,
                    bgcolor=ft.Colors.GREEN_300 if cell.has_completion else ft.Colors.SURFACE_CONTAINER_HIGHEST,
                    border=ft.border.all(2, ft.Colors.PRIMARY) if cell.is_today else None,
                    tooltip=f"{cell.key} {'✅' if cell.has_completion else '•'}",
                )
            )
        rows.append(ft.Row(cells, spacing=4))
    return ft.Column([ft.Text(month.title, size=16, weight=ft.FontWeight.BOLD), *rows], spacing=4)


def build_habits_view(ctx: AppContext, page: ft.Page) -> ft.View:
    """Build the single habits view."""

    habit_list = ft.Column(spacing=8)
    summary = ft.Row(spacing=12)
    calendar_box = ft.Container()
    chart_image = ft.Image(width=520, fit=ft.ImageFit.CONTAIN)
    name_input = ft.TextField(label="New habit", hint_text="e.g., Read 10 pages", expand=True)

    def _row(row: HabitRow) -> ft.Control:
        return ft.Card(
            content=ft.Container(
                padding=12,
                content=ft.Row(
                    [
                        ft.Column(
                            [
                                ft.Text(row.name, size=16, weight=ft.FontWeight.BOLD),
                                ft.Text(
                                    f"Streak: {row.streak} days · Best: {row.longest_streak}",
                                    size=12,
                                    color=ft.Colors.ON_SURFACE_VARIANT,
                                ),
                            ],
                            spacing=2,
                            expand=True,
                        ),
                        ft.FilledButton(
                            "✓ Done Today" if row.done_today else "Mark Complete",
                            on_click=lambda _, hid=row.id: _toggle(hid),
                        ),
                        ft.IconButton(
                            icon=ft.Icons.EDIT,
                            tooltip="Rename",
                            on_click=lambda _, r=row: show_rename_dialog(ctx, page, r.id, r.name, render),
                        ),
                        ft.IconButton(
                            icon=ft.Icons.DELETE,
                            tooltip="Delete",
                            on_click=lambda _, r=row: show_delete_dialog(ctx, page, r.id, r.name, render),
                        ),
                    ],
                    vertical_alignment=ft.CrossAxisAlignment.CENTER,
                ),
            )
        )

    def _paint(view: TrackerView) -> None:
        if view.is_empty:
            habit_list.controls = [empty_state("No habits yet. Add one above to start a streak.")]
            summary.controls = []
        else:
            habit_list.controls = [_row(row) for row in view.rows]
            summary.controls = [
                build_stat_card(
                    "Longest streak", f"{view.longest_streak} days", icon=ft.Icons.LOCAL_FIRE_DEPARTMENT
                ),
                build_stat_card("Habits", str(len(view.rows)), icon=ft.Icons.CHECKLIST),
            ]
        calendar_box.content = _calendar_grid(view.calendar)
        chart_image.src = str(weekly_completion_png(view.week))

    def render() -> None:
        _paint(ctx.store.view())
        page.update()

    def _toggle(habit_id) -> None:
        habit = ctx.store.toggle_completion(habit_id)
        if habit is not None:
            dev_log(ctx.config, "Habit toggled", context={"habit_id": habit_id, "streak": habit.streak})
        render()

    def _add(_) -> None:
        habit = ctx.store.add_habit(name_input.value or "")
        if habit is None:
            name_input.error_text = "Name is required"
        else:
            name_input.error_text = None
            name_input.value = ""
        render()

    def _toggle_theme(_) -> None:
        mode = ft.ThemeMode.LIGHT if ctx.theme_mode == ft.ThemeMode.DARK else ft.ThemeMode.DARK
        ctx.save_theme(mode)
        page.theme_mode = mode
        page.update()

    name_input.on_submit = _add
    _paint(ctx.store.view())

    return ft.View(
        route="/",
        appbar=ft.AppBar(
            title=ft.Text(ctx.config.APP_NAME),
            actions=[ft.IconButton(icon=ft.Icons.BRIGHTNESS_6, tooltip="Toggle theme", on_click=_toggle_theme)],
        ),
        scroll=ft.ScrollMode.AUTO,
        padding=20,
        controls=[
            ft.Row([name_input, ft.FilledButton("Add Habit", icon=ft.Icons.ADD, on_click=_add)]),
            summary,
            habit_list,
            ft.Divider(),
            ft.Row([calendar_box, chart_image], wrap=True, spacing=24, vertical_alignment=ft.CrossAxisAlignment.START),
        ],
    )
