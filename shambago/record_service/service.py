"""
Field data submission.

Records are validated and logged; nothing is stored.
"""

from typing import Any, Dict

from pydantic import ValidationError

from shambago.common.logger import get_logger
from shambago.record_service.schemas import FieldRecordForm, RecordSubmission

logger = get_logger(__name__)

SUCCESS_MESSAGE = "Your farming data has been recorded successfully."
FAILURE_MESSAGE = "Please correct the highlighted fields."

FIELD_ERRORS = {
    "soil_ph": "Soil pH must be a number between 0 and 14",
    "soil_moisture": "Soil moisture must be a percentage between 0 and 100",
    "crop": "Please choose a crop from the list",
    "planting_date": "Please enter a valid planting date",
}


def empty_form() -> FieldRecordForm:
    """Return the form in its reset state."""
    return FieldRecordForm()


def submit_record(data: Dict[str, Any]) -> RecordSubmission:
    """
    Validate a submitted field record.

    Args:
        data: Raw form values keyed by field name.

    Returns:
        RecordSubmission: Success, or per-field error messages.
    """
    try:
        record = FieldRecordForm.model_validate(data)

    except ValidationError as exc:
        errors: Dict[str, str] = {}
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else "form"
            errors.setdefault(field, FIELD_ERRORS.get(field, error["msg"]))

        logger.info(
            "Field record rejected",
            extra={"fields": sorted(errors)},
        )
        return RecordSubmission(ok=False, message=FAILURE_MESSAGE, errors=errors)

    logger.info(
        "Field record submitted",
        extra={
            "crop": record.crop.value,
            "has_disease": record.has_disease,
        },
    )
    return RecordSubmission(ok=True, message=SUCCESS_MESSAGE)
