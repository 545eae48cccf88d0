"""
Sign in page UI.
"""

from nicegui import ui

from frontend.layouts.auth_layout import auth_layout
from frontend.state.app_state import AppState
from frontend.utils.logger import get_logger

logger = get_logger(__name__)


def show_login_page(app_state: AppState) -> None:
    """
    Render the sign in form.
    """

    def content() -> None:
        email = (
            ui.input(
                label=app_state.t("Email"),
                placeholder="you@example.com",
            )
            .props("outlined dense")
            .classes("w-full")
            .mark("email")
        )

        password = (
            ui.input(
                label=app_state.t("Password"),
                placeholder="••••••••",
                password=True,
                password_toggle_button=True,
            )
            .props("outlined dense")
            .classes("w-full mt-3")
            .mark("password")
        )

        ui.button(
            app_state.t("Sign In"),
            on_click=lambda: _handle_login(app_state, email.value, password.value),
        ).classes(
            "w-full mt-5 bg-[#4CAF50] text-white font-semibold rounded-lg"
        ).mark("sign-in")

        ui.separator().classes("my-4")

        ui.label("Don't have an account?").classes(
            "text-center text-slate-500 text-sm"
        )

        ui.button(
            "Sign Up",
            on_click=lambda: ui.navigate.to("/signup"),
        ).props("flat").classes("w-full text-[#4CAF50]")

    auth_layout(
        app_state.t("Welcome Back!"),
        app_state.t("Connect with farmers"),
        content,
    )


def _handle_login(app_state: AppState, email: str, password: str) -> None:
    """
    Sign in. The root route swaps to the main shell when the session
    becomes authenticated.
    """
    result = app_state.session.sign_in(email or "", password or "")

    if not result.ok:
        logger.info("Sign in refused", extra={"outcome": result.outcome.value})
        ui.notify(result.message, type="warning")
        return

    ui.notify(result.message, type="positive")
