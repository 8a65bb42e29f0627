# releaseZ type definitions
# Rev 0.1.0

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Literal

# Editable draft fields
FormField = Literal["name", "startDate", "endDate", "color"]
# Keys of the error map: draft fields + the cross-field date range check
ErrorField = Literal["name", "startDate", "endDate", "dateRange", "color"]

FORM_FIELDS: tuple[str, ...] = ("name", "startDate", "endDate", "color")
ERROR_FIELDS: tuple[str, ...] = ("name", "startDate", "endDate", "dateRange", "color")
DATE_ERROR_FIELDS: tuple[str, ...] = ("startDate", "endDate", "dateRange")


class ErrorCode(str, Enum):
    REQUIRED = "REQUIRED"
    DUPLICATE_NAME = "DUPLICATE_NAME"
    DUPLICATE_COLOR = "DUPLICATE_COLOR"
    END_BEFORE_START = "END_BEFORE_START"
    INVALID_DATE = "INVALID_DATE"


_MESSAGES: Dict[tuple[str, ErrorCode], str] = {
    ("name", ErrorCode.REQUIRED): "Phase name is required",
    ("name", ErrorCode.DUPLICATE_NAME): "A phase with this name already exists in the plan",
    ("color", ErrorCode.DUPLICATE_COLOR): "This color is already in use. Please select a different color.",
    ("startDate", ErrorCode.REQUIRED): "Start date is required",
    ("endDate", ErrorCode.REQUIRED): "End date is required",
    ("startDate", ErrorCode.INVALID_DATE): "Start date is not a valid date",
    ("endDate", ErrorCode.INVALID_DATE): "End date is not a valid date",
    ("dateRange", ErrorCode.END_BEFORE_START): "End date must be after or equal to start date",
}


@dataclass(frozen=True)
class FieldError:
    """A single validation failure; `message` is what the dialog shows."""
    code: ErrorCode
    message: str

    @classmethod
    def of(cls, field: str, code: ErrorCode) -> "FieldError":
        return cls(code, _MESSAGES.get((field, code), code.value))

    def __str__(self) -> str:
        return self.message


# field -> error; a missing key means the field is currently valid
PhaseFormErrors = Dict[str, FieldError]
