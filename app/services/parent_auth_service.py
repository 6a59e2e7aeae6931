# app/services/parent_auth_service.py

from google.cloud.firestore import AsyncClient
from google.cloud.firestore_v1.base_query import FieldFilter
from loguru import logger

from app.core.config import settings
from app.core.constants import (
    STUDENT_ID_FIELD,
    MSG_STUDENT_NOT_FOUND,
    MSG_CONTACT_MISMATCH,
)
from app.models.student import StudentRecord
from app.schemas.auth_parent import ParentLoginRequest, ParentLoginResponse, trim


# ============================================================================
# NORMALIZE STUDENT ID
# ============================================================================
def normalize_student_id(raw: str) -> str:
    return trim(raw).upper()


# ============================================================================
# FETCH STUDENT BY STUDENT ID
# ============================================================================
async def find_student(db: AsyncClient, student_id: str) -> StudentRecord | None:
    """
    Exact-match lookup on the stored `student_id`.
    If several documents share the id, the first one returned is used.
    """
    query = (
        db.collection(settings.STUDENTS_COLLECTION)
        .where(filter=FieldFilter(STUDENT_ID_FIELD, "==", student_id))
        .limit(1)
    )
    snapshots = await query.get()

    if not snapshots:
        return None

    return StudentRecord.from_snapshot(snapshots[0])


# ============================================================================
# CONTACT CHECK
# ============================================================================
def contact_matches(record: StudentRecord, contact_number: str) -> bool:
    # Only the supplied number is trimmed; stored values are compared as-is
    supplied = trim(contact_number)
    return record.contact == supplied or record.guardian_contact == supplied


# ============================================================================
# AUTHENTICATE PARENT LOGIN
# ============================================================================
async def authenticate_parent(
    db: AsyncClient,
    data: ParentLoginRequest,
) -> ParentLoginResponse:

    # 1) Find the student record
    record = await find_student(db, normalize_student_id(data.student_id))
    if record is None:
        return ParentLoginResponse(success=False, message=MSG_STUDENT_NOT_FOUND)

    # 2) Parent's or guardian's number must match
    if not contact_matches(record, data.contact_number):
        return ParentLoginResponse(success=False, message=MSG_CONTACT_MISMATCH)

    # 3) Caller redirects using the document id
    logger.debug(f"Parent login matched student {record.student_id} ({record.doc_id})")
    return ParentLoginResponse(success=True, doc_id=record.doc_id)
