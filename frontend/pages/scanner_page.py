"""
Crop scanner page.

Uploads a photo and shows the sample analysis after a short delay.
"""

from nicegui import ui

from shambago.scan_service.service import CropScanner
from frontend.utils.logger import get_logger

logger = get_logger(__name__)


def show_scanner_page() -> None:
    """
    Render the crop scanner.
    """
    scanner = CropScanner()

    with ui.column().classes("w-full max-w-xl mx-auto p-6 gap-4"):
        with ui.row().classes("w-full items-center"):
            ui.button(icon="arrow_back", on_click=lambda: ui.navigate.to("/")).props(
                "flat round"
            )
            ui.label("Scan Crop").classes("text-2xl font-bold text-[#2C3E50]")

        ui.label("Take or upload a photo of the affected leaves.").classes(
            "text-slate-500"
        )

        spinner = ui.spinner(size="lg", color="green")
        spinner.set_visibility(False)

        result_card = ui.card().classes("w-full")
        result_card.set_visibility(False)
        with result_card:
            ui.label("Analysis Result").classes("font-semibold")
            result_text = ui.markdown()

        def show_result(text: str) -> None:
            spinner.set_visibility(False)
            result_text.content = f"```\n{text}\n```"
            result_card.set_visibility(True)

        async def on_upload(event) -> None:
            logger.info(
                "User selected an image",
                extra={"uploaded_filename": event.file.name},
            )

            image = await event.file.read()

            if not scanner.analyze(image, on_result=show_result):
                ui.notify("Could not read the selected image", type="warning")
                return

            result_card.set_visibility(False)
            spinner.set_visibility(True)

        ui.upload(
            label="Crop photo",
            auto_upload=True,
            on_upload=on_upload,
        ).props("accept=image/*").classes("w-full")

    ui.context.client.on_delete(scanner.close)
