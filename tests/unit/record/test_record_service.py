from datetime import date

from shambago.record_service.schemas import CropType
from shambago.record_service.service import (
    SUCCESS_MESSAGE,
    empty_form,
    submit_record,
)


def test_valid_record_accepted():
    result = submit_record(
        {
            "soil_ph": "6.5",
            "soil_moisture": "40",
            "crop": "Beans",
            "planting_date": "2025-03-20",
            "has_disease": True,
            "notes": "Leaf spots on lower leaves",
        }
    )

    assert result.ok
    assert result.message == SUCCESS_MESSAGE
    assert result.errors == {}


def test_blank_measurements_allowed():
    assert submit_record({"soil_ph": "", "soil_moisture": "  "}).ok


def test_out_of_range_values_rejected():
    result = submit_record({"soil_ph": "15", "soil_moisture": "abc"})

    assert not result.ok
    assert set(result.errors) == {"soil_ph", "soil_moisture"}


def test_unknown_crop_rejected():
    result = submit_record({"crop": "Coffee"})
    assert "crop" in result.errors


def test_empty_form_defaults():
    form = empty_form()

    assert form.crop is CropType.MAIZE
    assert form.planting_date == date.today()
    assert form.soil_ph is None
    assert form.has_disease is False
    assert form.notes == ""
