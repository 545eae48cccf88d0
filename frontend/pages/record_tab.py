"""
Record Data tab.

Collects one field observation and validates it on submit.
"""

from nicegui import ui

from shambago.record_service.schemas import CropType
from shambago.record_service.service import empty_form, submit_record
from frontend.utils.logger import get_logger

logger = get_logger(__name__)


def render_record_tab() -> None:
    """
    Render the field record form.
    """
    defaults = empty_form()

    ui.label("Record Data").classes("text-2xl font-bold text-[#2C3E50]")

    ui.label("Soil Data").classes("font-semibold mt-2")
    soil_ph = ui.input("Soil pH (0-14)").props("outlined dense")
    soil_moisture = ui.input("Soil Moisture (%)").props("outlined dense")

    ui.label("Crop Information").classes("font-semibold mt-2")
    crop = ui.select(
        [c.value for c in CropType],
        label="Crop Type",
        value=defaults.crop.value,
    ).classes("w-64")
    planting_date = ui.date(value=defaults.planting_date.isoformat())
    has_disease = ui.switch("Disease Symptoms", value=defaults.has_disease)

    ui.label("Additional Notes").classes("font-semibold mt-2")
    notes = ui.textarea().props("outlined").classes("w-full")

    def reset() -> None:
        fresh = empty_form()
        soil_ph.value = ""
        soil_moisture.value = ""
        crop.value = fresh.crop.value
        planting_date.value = fresh.planting_date.isoformat()
        has_disease.value = fresh.has_disease
        notes.value = fresh.notes

    def submit() -> None:
        result = submit_record(
            {
                "soil_ph": soil_ph.value,
                "soil_moisture": soil_moisture.value,
                "crop": crop.value,
                "planting_date": planting_date.value,
                "has_disease": has_disease.value,
                "notes": notes.value or "",
            }
        )

        if not result.ok:
            for message in result.errors.values():
                ui.notify(message, type="warning")
            return

        ui.notify(result.message, type="positive")
        reset()

    ui.button("Submit Data", on_click=submit).classes(
        "w-full mt-4 bg-[#4CAF50] text-white font-semibold"
    )
