"""Reusable widget components for the desktop app."""

from __future__ import annotations

from typing import Optional

import flet as ft


def build_stat_card(
    label: str,
    value: str,
    icon: Optional[str] = None,
    color: Optional[str] = None,
) -> ft.Card:
    """Build a statistic card."""

    content_column = ft.Column(
        [
            ft.Text(value, size=32, weight=ft.FontWeight.BOLD, color=color),
            ft.Text(label, size=14, color=ft.Colors.ON_SURFACE_VARIANT),
        ],
        spacing=4,
        horizontal_alignment=ft.CrossAxisAlignment.START,
    )

    if icon:
        card_content = ft.Row(
            [
                ft.Icon(icon, size=40, color=color or ft.Colors.PRIMARY),
                ft.Container(width=16),
                content_column,
            ],
            alignment=ft.MainAxisAlignment.START,
        )
    else:
        card_content = content_column

    return ft.Card(content=ft.Container(content=card_content, padding=20), elevation=2)


def empty_state(message: str) -> ft.Container:
    """Simple empty-state placeholder."""

    return ft.Container(
        content=ft.Column(
            [
                ft.Icon(ft.Icons.INBOX, size=40, color=ft.Colors.ON_SURFACE_VARIANT),
                ft.Text(message, color=ft.Colors.ON_SURFACE_VARIANT),
            ],
            alignment=ft.MainAxisAlignment.CENTER,
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        ),
        padding=20,
    )
