"""Main Flet desktop application entry point."""

from __future__ import annotations

import flet as ft

from ..devtools import dev_log
from ..logging_config import session_log_path, setup_logging
from .context import create_app_context
from .views.habits import build_habits_view


def main(page: ft.Page) -> None:
    """Main entry point for the Flet desktop app."""

    ctx = create_app_context()
    logger = setup_logging(ctx.config)
    logger.info("StreakKeeper desktop application starting")

    def on_page_close(_):
        slp = session_log_path()
        logger.info("Application closing", extra={"session_log": str(slp) if slp else None})

    page.on_close = on_page_close

    ctx.page = page
    page.title = f"{ctx.config.APP_NAME} (DEV)" if ctx.dev_mode else ctx.config.APP_NAME
    if ctx.dev_mode:
        dev_log(ctx.config, "Dev mode enabled", context={"data_dir": ctx.config.DATA_DIR})
    page.theme_mode = ctx.theme_mode
    page.padding = 0
    page.window_width = 1100
    page.window_height = 800

    page.views.clear()
    page.views.append(build_habits_view(ctx, page))
    page.update()


def run() -> None:
    ft.app(target=main)


if __name__ == "__main__":
    run()
