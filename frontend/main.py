"""
Application entrypoint and route definitions.

Registers all frontend pages and starts the NiceGUI app.
"""

from nicegui import app, ui

from frontend.config import settings
from frontend.pages.chat_page import show_chat_page
from frontend.pages.home_page import show_home_page
from frontend.pages.login_page import show_login_page
from frontend.pages.scanner_page import show_scanner_page
from frontend.pages.signup_page import show_signup_page
from frontend.state.app_state import AppState
from frontend.utils.logger import get_logger

logger = get_logger(__name__)

app_state = AppState()


def _ensure_state() -> AppState:
    """Bind the app state to NiceGUI's persistent storage on first use."""
    app_state.init(app.storage.general)
    return app_state


def _watch_session(state: AppState) -> None:
    """
    Reload the root route when the signed-in flag flips.
    """
    client = ui.context.client
    shown_authenticated = state.session.is_authenticated

    def on_change(session) -> None:
        if session.is_authenticated != shown_authenticated:
            with client:
                ui.navigate.to("/")

    unsubscribe = state.session.subscribe(on_change)
    client.on_delete(unsubscribe)


@ui.page("/")
def root() -> None:
    """Root route – auth flow or main shell depending on the session."""
    state = _ensure_state()
    _watch_session(state)

    if state.session.is_authenticated:
        logger.debug("Showing main shell")
        show_home_page(state)
    else:
        logger.debug("Showing sign in")
        show_login_page(state)


@ui.page("/signup")
def signup() -> None:
    """Sign up page route."""
    state = _ensure_state()

    if state.session.is_authenticated:
        ui.navigate.to("/")
        return

    show_signup_page(state)


@ui.page("/chat")
def chat() -> None:
    """Chat support route."""
    state = _ensure_state()

    if not state.session.is_authenticated:
        logger.warning("Unauthorized access to chat; redirecting")
        ui.navigate.to("/")
        return

    show_chat_page()


@ui.page("/scan")
def scan() -> None:
    """Crop scanner route."""
    state = _ensure_state()

    if not state.session.is_authenticated:
        logger.warning("Unauthorized access to scanner; redirecting")
        ui.navigate.to("/")
        return

    show_scanner_page()


app.on_shutdown(app_state.teardown)


def start_app() -> None:
    """
    Start the NiceGUI application.
    """
    logger.info("Starting ShambaGo frontend application")

    ui.run(
        title=settings.APP_TITLE,
        port=settings.PORT,
        reload=False,
        storage_secret=settings.STORAGE_SECRET,
    )


if __name__ in {"__main__", "__mp_main__"}:
    start_app()
