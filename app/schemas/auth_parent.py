import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Leading/trailing whitespace, including a byte-order mark pasted from spreadsheets
_EDGE_SPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def trim(value: str) -> str:
    return _EDGE_SPACE.sub("", value)


class ParentLoginRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    student_id: str = Field(alias="studentId")
    contact_number: str = Field(alias="contactNumber")

    @field_validator("student_id", "contact_number")
    @classmethod
    def not_blank(cls, value: str) -> str:
        # Raw value is kept; trimming happens at lookup/compare time
        if not trim(value):
            raise ValueError("must not be blank")
        return value


class ParentLoginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    doc_id: Optional[str] = Field(default=None, alias="docId")
    message: Optional[str] = None
