"""
Main tabbed shell: Home, Record and Profile.

Shown only while the session is authenticated.
"""

from typing import Callable, Dict

from nicegui import ui

from shambago.common.actions import FeatureAction, QuickAction
from shambago.common.localization import Language
from frontend.pages.record_tab import render_record_tab
from frontend.state.app_state import AppState
from frontend.utils.logger import get_logger

logger = get_logger(__name__)

MARKET_PRICES = [
    ("Maize", "KES 3,200 / 90kg bag", "up"),
    ("Beans", "KES 9,500 / 90kg bag", "down"),
    ("Potatoes", "KES 2,800 / 50kg bag", "flat"),
    ("Tomatoes", "KES 4,000 / crate", "up"),
]

COMMUNITY_POSTS = [
    ("Jane W.", "Early rains in Kiambu this week. Time to plant beans?"),
    ("Peter K.", "Fall armyworm spotted on maize near Thika, check your fields."),
]

SOIL_METRICS = [
    ("pH", "6.5", "Optimal"),
    ("Moisture", "42%", "Good"),
    ("Nitrogen", "Low", "Apply top dressing"),
]

CROP_ALERTS = [
    ("Maize Lethal Necrosis", "High", "Rift Valley"),
    ("Late blight", "Medium", "Nyandarua"),
]

TREND_ICONS = {"up": "trending_up", "down": "trending_down", "flat": "trending_flat"}


def show_home_page(app_state: AppState) -> None:
    """
    Render the tabbed main shell.
    """
    user = app_state.session.current_user

    with ui.header().classes("bg-[#F8F9F8] text-[#2C3E50] items-center"):
        ui.icon("eco").classes("text-2xl text-[#4CAF50]")
        ui.label("ShambaGo").classes("text-lg font-bold")
        ui.space()
        ui.button(icon="support_agent", on_click=lambda: ui.navigate.to("/chat")).props(
            "flat round"
        ).tooltip("Chat Support")

    with ui.tabs().classes("w-full").mark("shell-tabs") as tabs:
        home_tab = ui.tab("Home", icon="home")
        record_tab = ui.tab("Record", icon="edit_note")
        profile_tab = ui.tab("Profile", icon="person")

    with ui.tab_panels(tabs, value=home_tab).classes("w-full"):
        with ui.tab_panel(home_tab):
            _render_home_tab(app_state, user.display_name if user else "")
        with ui.tab_panel(record_tab):
            render_record_tab()
        with ui.tab_panel(profile_tab):
            _render_profile_tab(app_state)


# =================================================
# HOME TAB
# =================================================
def _render_home_tab(app_state: AppState, display_name: str) -> None:
    ui.label(f"Jambo, {display_name}!").classes("text-2xl font-bold text-[#2C3E50]")

    with ui.card().classes("w-full bg-[#F8F9F8]"):
        with ui.row().classes("items-center gap-2"):
            ui.icon("wb_sunny").classes("text-2xl text-[#FFD700]")
            ui.label("Today's Weather").classes("font-semibold")
            ui.space()
            ui.label("Kiambu").classes("text-sm text-slate-500")
        ui.label("24°C · Partly cloudy · Humidity 65%").classes("text-lg")

    with ui.grid(columns=2).classes("w-full gap-3"):
        for action in FeatureAction:
            with ui.card().classes("cursor-pointer").on(
                "click", lambda _, a=action: _open_feature(a)
            ):
                ui.icon(action.icon).classes("text-2xl text-[#4CAF50]")
                ui.label(action.title).classes("font-semibold")

    ui.label(app_state.t("Quick Actions")).classes("text-xl font-bold mt-4")

    with ui.row().classes("gap-3"):
        for action in QuickAction:
            ui.button(
                app_state.t(action.title),
                icon=action.icon,
                on_click=lambda _, a=action: _run_quick_action(a),
            ).props("outline")


def _open_feature(action: FeatureAction) -> None:
    renderers: Dict[FeatureAction, Callable[[], None]] = {
        FeatureAction.MARKET: _render_market,
        FeatureAction.COMMUNITY: _render_community,
        FeatureAction.SOIL_HEALTH: _render_soil_health,
        FeatureAction.CROP_ALERT: _render_crop_alerts,
    }

    logger.debug("Opening feature", extra={"action": action.name})

    with ui.dialog() as dialog, ui.card().classes("w-[420px]"):
        ui.label(action.title).classes("text-lg font-bold")
        renderers[action]()
        ui.button("Close", on_click=dialog.close).props("flat")

    dialog.open()


def _run_quick_action(action: QuickAction) -> None:
    logger.debug("Quick action", extra={"action": action.name})

    if action is QuickAction.SCAN_CROP:
        ui.navigate.to("/scan")
    elif action is QuickAction.SELL_PRODUCE:
        _open_feature(FeatureAction.MARKET)
    elif action is QuickAction.GUIDE:
        with ui.dialog() as dialog, ui.card():
            ui.label("Farming Guide").classes("text-lg font-bold")
            for tip in (
                "Test your soil before each planting season.",
                "Rotate maize with legumes to restore nitrogen.",
                "Scout fields weekly for pests and disease.",
            ):
                ui.label(f"• {tip}")
            ui.button("Close", on_click=dialog.close).props("flat")
        dialog.open()


def _render_market() -> None:
    for crop, price, trend in MARKET_PRICES:
        with ui.row().classes("w-full items-center"):
            ui.label(crop).classes("font-medium")
            ui.space()
            ui.label(price)
            ui.icon(TREND_ICONS[trend])


def _render_community() -> None:
    for author, text in COMMUNITY_POSTS:
        with ui.card().classes("w-full"):
            ui.label(author).classes("font-semibold")
            ui.label(text)


def _render_soil_health() -> None:
    for metric, value, note in SOIL_METRICS:
        with ui.row().classes("w-full"):
            ui.label(metric).classes("font-medium")
            ui.space()
            ui.label(f"{value} ({note})")


def _render_crop_alerts() -> None:
    for title, severity, region in CROP_ALERTS:
        with ui.row().classes("w-full items-center"):
            ui.icon("warning").classes(
                "text-[#FF5733]" if severity == "High" else "text-[#FFD700]"
            )
            ui.label(title).classes("font-medium")
            ui.space()
            ui.label(region).classes("text-sm text-slate-500")


# =================================================
# PROFILE TAB
# =================================================
def _render_profile_tab(app_state: AppState) -> None:
    user = app_state.session.current_user

    with ui.card().classes("w-full items-center"):
        ui.avatar("person", color="green").classes("text-white")
        name_label = ui.label(user.display_name if user else "").classes(
            "text-xl font-bold"
        )
        ui.label(user.email if user else "").classes("text-slate-500")

        # Display-only: edits are not saved to the stored record
        def edit_profile() -> None:
            with ui.dialog() as dialog, ui.card():
                field = ui.input("Display name", value=name_label.text)

                def apply() -> None:
                    name_label.text = field.value or name_label.text
                    dialog.close()

                ui.button("Save", on_click=apply)
            dialog.open()

        ui.button("Edit Profile", icon="edit", on_click=edit_profile).props("flat")

    ui.label(app_state.t("Settings")).classes("text-lg font-bold mt-4")

    ui.select(
        {language.value: language.display_name for language in Language},
        label=app_state.t("Language"),
        value=app_state.localizer.language.value,
        on_change=lambda e: _change_language(app_state, e.value),
    ).classes("w-64")

    with ui.column().classes("mt-2 gap-1"):
        ui.switch(app_state.t("Notifications"), value=True)
        ui.button(
            app_state.t("Privacy"),
            icon="lock",
            on_click=lambda: _open_info(
                app_state.t("Privacy"),
                "Your account stays on this device. Signing out removes it.",
            ),
        ).props("flat")

    with ui.column().classes("mt-4 gap-1"):
        ui.button(
            app_state.t("Help Center"),
            icon="help",
            on_click=lambda: ui.navigate.to("/chat"),
        ).props("flat")
        ui.button(
            app_state.t("Contact Us"),
            icon="mail",
            on_click=lambda: _open_contact(app_state),
        ).props("flat")
        ui.button(
            app_state.t("About"),
            icon="info",
            on_click=lambda: _open_info(
                f"{app_state.t('About')} ShambaGo",
                "Version 1.0.0. Empowering farmers with smart technology for "
                "sustainable agriculture and improved yields.",
            ),
        ).props("flat")
        ui.button(
            app_state.t("Sign Out"),
            icon="logout",
            on_click=lambda: _sign_out(app_state),
        ).props("flat color=red").mark("sign-out")


def _open_info(title: str, text: str) -> None:
    with ui.dialog() as dialog, ui.card().classes("w-[360px]"):
        ui.label(title).classes("text-lg font-bold")
        ui.label(text)
        ui.button("Close", on_click=dialog.close).props("flat")
    dialog.open()


def _open_contact(app_state: AppState) -> None:
    with ui.dialog() as dialog, ui.card().classes("w-[360px]"):
        ui.label(app_state.t("Contact Us")).classes("text-lg font-bold")
        subject = ui.input("Subject").classes("w-full").mark("contact-subject")
        message = ui.textarea("Message").classes("w-full").mark("contact-message")

        def send() -> None:
            if not (subject.value and message.value):
                ui.notify("Please add a subject and a message", type="warning")
                return

            logger.info("Contact message composed")
            dialog.close()
            ui.notify(
                "Thank you for your message. We'll get back to you soon.",
                type="positive",
            )

        ui.button("Send Message", on_click=send).mark("contact-send")
    dialog.open()


def _change_language(app_state: AppState, value: str) -> None:
    app_state.localizer.set_language(Language(value))
    ui.navigate.reload()


def _sign_out(app_state: AppState) -> None:
    logger.info("User requested sign out")
    app_state.session.sign_out()
