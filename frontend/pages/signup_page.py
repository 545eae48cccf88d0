"""
Sign up page UI.

Includes the password strength meter and a password generator.
"""

from nicegui import ui

from shambago.auth_service.password_strength import (
    evaluate_password,
    generate_secure_password,
)
from frontend.layouts.auth_layout import auth_layout
from frontend.state.app_state import AppState
from frontend.utils.logger import get_logger

logger = get_logger(__name__)

STRENGTH_COLORS = {
    "Empty": "grey",
    "Weak": "red",
    "Fair": "orange",
    "Good": "amber",
    "Strong": "green",
}


def show_signup_page(app_state: AppState) -> None:
    """
    Render the sign up form.
    """

    def content() -> None:
        name = (
            ui.input(label=app_state.t("Full Name"))
            .props("outlined dense")
            .classes("w-full")
            .mark("name")
        )

        email = (
            ui.input(
                label=app_state.t("Email"),
                placeholder="you@example.com",
            )
            .props("outlined dense")
            .classes("w-full mt-3")
            .mark("email")
        )

        password = (
            ui.input(
                label=app_state.t("Password"),
                password=True,
                password_toggle_button=True,
            )
            .props("outlined dense")
            .classes("w-full mt-3")
            .mark("password")
        )

        meter = ui.linear_progress(value=0, show_value=False).classes("mt-2")
        meter_label = ui.label("Empty").classes("text-xs text-slate-500")

        def refresh_meter() -> None:
            strength = evaluate_password(password.value or "")
            meter.value = strength.score
            meter.props(f"color={STRENGTH_COLORS[strength.label]}")
            meter_label.text = strength.label

        password.on_value_change(refresh_meter)

        confirm = (
            ui.input(
                label="Confirm Password",
                password=True,
                password_toggle_button=True,
            )
            .props("outlined dense")
            .classes("w-full mt-3")
            .mark("confirm-password")
        )

        def suggest_password() -> None:
            generated = generate_secure_password()
            password.value = generated
            confirm.value = generated
            ui.notify("Strong password generated", type="info")

        ui.button(
            "Suggest a strong password",
            icon="key",
            on_click=suggest_password,
        ).props("flat dense").classes("text-[#007BFF] mt-1")

        ui.button(
            app_state.t("Create Account"),
            on_click=lambda: _handle_signup(
                app_state,
                email.value,
                name.value,
                password.value,
                confirm.value,
            ),
        ).classes(
            "w-full mt-5 bg-[#4CAF50] text-white font-semibold rounded-lg"
        ).mark("sign-up")

        ui.separator().classes("my-4")

        ui.label("Already have an account?").classes(
            "text-center text-slate-500 text-sm"
        )

        ui.button(
            app_state.t("Sign In"),
            on_click=lambda: ui.navigate.to("/"),
        ).props("flat").classes("w-full text-[#4CAF50]")

    auth_layout(
        app_state.t("Create Account"),
        app_state.t("Connect with farmers"),
        content,
    )


def _handle_signup(
    app_state: AppState,
    email: str,
    name: str,
    password: str,
    confirm_password: str,
) -> None:
    """
    Create the local account and open the main shell.
    """
    result = app_state.session.sign_up(
        email or "",
        name or "",
        password or "",
        confirm_password or "",
    )

    if not result.ok:
        logger.info("Sign up refused", extra={"outcome": result.outcome.value})
        ui.notify(result.message, type="warning")
        return

    ui.notify(result.message, type="positive")
    ui.navigate.to("/")
