from typing import Any

from google.cloud.firestore_v1.base_document import DocumentSnapshot
from pydantic import BaseModel, ConfigDict

from app.core.constants import (
    STUDENT_ID_FIELD,
    CONTACT_FIELD,
    GUARDIAN_CONTACT_FIELD,
)


class StudentRecord(BaseModel):
    """
    Read-only view of a document in the students collection.

    Field values are kept exactly as stored (no trimming, no type coercion).
    """

    model_config = ConfigDict(frozen=True)

    doc_id: str
    student_id: Any = None
    contact: Any = None
    guardian_contact: Any = None

    @classmethod
    def from_snapshot(cls, snapshot: DocumentSnapshot) -> "StudentRecord":
        data = snapshot.to_dict() or {}
        return cls(
            doc_id=snapshot.id,
            student_id=data.get(STUDENT_ID_FIELD),
            contact=data.get(CONTACT_FIELD),
            guardian_contact=data.get(GUARDIAN_CONTACT_FIELD),
        )
