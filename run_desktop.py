#!/usr/bin/env python
"""Desktop app entrypoint for StreakKeeper."""

import flet as ft

from streakkeeper.desktop.app import main

if __name__ == "__main__":
    ft.app(target=main)
