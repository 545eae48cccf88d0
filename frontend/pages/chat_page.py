"""
Chat support page.

Messages are answered by the keyword response engine after a short
typing delay. Pending replies are cancelled when the page is deleted
after its browser tab has gone for good.
"""

from nicegui import ui

from shambago.chat_service.conversation import ChatConversation
from shambago.chat_service.schemas import ChatMessage
from frontend.utils.logger import get_logger

logger = get_logger(__name__)

WELCOME_TEXT = "Hi 👋 I'm the ShambaGo assistant. How can I help you today?"


def show_chat_page() -> None:
    """
    Render the chat support page and bind a conversation to it.
    """
    logger.debug("Rendering chat page")

    with ui.column().classes("h-screen w-full overflow-hidden"):

        # ---------- HEADER ----------
        with ui.row().classes(
            "w-full px-6 py-3 bg-[#F8F9F8] justify-between items-center shrink-0"
        ):
            ui.button("Done", on_click=lambda: ui.navigate.to("/")).props("flat")
            ui.label("Chat Support").classes("text-lg font-bold text-[#2C3E50]")
            ui.space()

        # ---------- CHAT AREA ----------
        with ui.element("div").classes("flex-1 w-full overflow-y-auto"):
            container = ui.column().classes("w-full max-w-3xl mx-auto px-6 py-6 gap-3")

        typing = ui.label("ShambaGo is typing…").classes(
            "text-xs text-slate-500 px-6"
        )
        typing.set_visibility(False)

        def render(message: ChatMessage) -> None:
            with container:
                ui.chat_message(
                    message.text,
                    name="You" if message.is_from_user else "ShambaGo",
                    sent=message.is_from_user,
                    stamp=message.timestamp.strftime("%H:%M"),
                )
            typing.set_visibility(conversation.is_typing)

        conversation = ChatConversation(on_message=render)

        with container:
            ui.chat_message(WELCOME_TEXT, name="ShambaGo", sent=False)

        # ---------- INPUT BAR ----------
        with ui.row().classes("w-full px-4 py-3 items-center gap-2 shrink-0"):
            input_box = (
                ui.input(placeholder="Type your message...")
                .props("outlined dense")
                .classes("flex-1")
                .mark("chat-input")
            )

            def send() -> None:
                text = input_box.value or ""
                if conversation.send(text) is None:
                    return

                input_box.value = ""
                typing.set_visibility(True)

            input_box.on("keydown.enter", send)
            ui.button(icon="send", on_click=send).props("round color=green").mark(
                "chat-send"
            )

    ui.context.client.on_delete(conversation.close)
