"""Habit rename and delete-confirmation dialogs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

import flet as ft

from ....logging_config import get_logger
from ....models.habit import HabitId

if TYPE_CHECKING:
    from ...context import AppContext

logger = get_logger(__name__)


def _close(page: ft.Page, dialog: ft.AlertDialog) -> None:
    dialog.open = False
    page.dialog = None
    page.update()


def _snack(page: ft.Page, message: str) -> None:
    page.snack_bar = ft.SnackBar(content=ft.Text(message))
    page.snack_bar.open = True
    page.update()


def show_rename_dialog(
    ctx: AppContext,
    page: ft.Page,
    habit_id: HabitId,
    current_name: str,
    on_save_callback: Optional[Callable[[], None]] = None,
) -> ft.AlertDialog:
    """Show a dialog to rename a habit."""

    name_field = ft.TextField(
        label="Habit Name *",
        value=current_name,
        autofocus=True,
        max_length=100,
        width=400,
    )

    def _save(_):
        name = (name_field.value or "").strip()
        if not name:
            name_field.error_text = "Name is required"
            name_field.update()
            return

        renamed = ctx.store.rename_habit(habit_id, name)
        _close(page, dialog)
        if renamed is None:
            logger.warning("Rename target vanished", extra={"habit_id": habit_id})
            return
        _snack(page, f"Habit renamed to '{renamed.name}'")
        if on_save_callback:
            on_save_callback()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("Rename Habit"),
        content=name_field,
        actions=[
            ft.TextButton("Cancel", on_click=lambda _: _close(page, dialog)),
            ft.FilledButton("Save", on_click=_save),
        ],
    )

    page.dialog = dialog
    dialog.open = True
    page.update()
    return dialog


def show_delete_dialog(
    ctx: AppContext,
    page: ft.Page,
    habit_id: HabitId,
    name: str,
    on_delete_callback: Optional[Callable[[], None]] = None,
) -> Optional[ft.AlertDialog]:
    """Ask before deleting; the store only deletes once the user confirms."""

    token = ctx.store.request_delete(habit_id)
    if token is None:
        return None

    def _confirm(_):
        deleted = ctx.store.confirm_delete(token)
        _close(page, dialog)
        if deleted:
            _snack(page, f"Habit '{name}' deleted")
            if on_delete_callback:
                on_delete_callback()

    def _cancel(_):
        ctx.store.cancel_delete(token)
        _close(page, dialog)

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("Delete Habit?"),
        content=ft.Text(f"'{name}' and its whole completion history will be removed."),
        actions=[
            ft.TextButton("Cancel", on_click=_cancel),
            ft.FilledButton("Delete", on_click=_confirm, style=ft.ButtonStyle(bgcolor=ft.Colors.ERROR)),
        ],
    )

    page.dialog = dialog
    dialog.open = True
    page.update()
    return dialog
