"""
Authentication layout components.

Provides a reusable layout for the sign in and sign up screens.
"""

from typing import Callable

from nicegui import ui

from frontend.utils.logger import get_logger

logger = get_logger(__name__)


def auth_layout(title: str, subtitle: str, content_fn: Callable[[], None]) -> None:
    """
    Render a centered authentication layout.

    Args:
        title: Title displayed at the top of the card.
        subtitle: Line shown under the title.
        content_fn: Callback that renders the inner form content.

    Raises:
        RuntimeError: If content rendering fails.
    """
    logger.debug(
        "Rendering authentication layout",
        extra={"title": title},
    )

    with ui.element("div").classes(
        "min-h-screen w-full flex items-center justify-center "
        "bg-gradient-to-br from-[#E0E5E0] to-[#C8E6C9]"
    ):
        with ui.card().classes("w-[380px] p-8 bg-[#F8F9F8] shadow-2xl rounded-2xl"):
            with ui.row().classes("w-full justify-center items-center gap-2 mb-2"):
                ui.icon("eco").classes("text-3xl text-[#4CAF50]")
                ui.label("ShambaGo").classes("text-2xl font-bold text-[#2C3E50]")

            ui.label(title).classes("text-xl font-semibold text-[#2C3E50]")
            ui.label(subtitle).classes("text-sm text-slate-500 mb-6")

            try:
                content_fn()
            except Exception as exc:
                logger.exception(
                    "Failed to render auth layout content",
                    extra={"title": title},
                )
                ui.label("Something went wrong. Please refresh the page.").classes(
                    "text-red-500"
                )
                raise RuntimeError("Auth layout rendering failed") from exc
