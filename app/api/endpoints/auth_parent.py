# app/api/endpoints/auth_parent.py

from fastapi import APIRouter, Depends, HTTPException
from google.cloud.firestore import AsyncClient
from loguru import logger

from app.api.deps import get_db
from app.core.constants import MSG_INTERNAL_ERROR
from app.schemas.auth_parent import ParentLoginRequest, ParentLoginResponse
from app.services.parent_auth_service import authenticate_parent

router = APIRouter(prefix="/api", tags=["Parents"])

@router.post(
    "/loginParent",
    response_model=ParentLoginResponse,
    response_model_exclude_none=True,
)
async def parent_login_endpoint(
    data: ParentLoginRequest,
    db: AsyncClient = Depends(get_db),
):
    # Not-found and mismatch come back as 200 with success=false
    try:
        return await authenticate_parent(db, data)
    except Exception:
        logger.exception("Internal Server Error during parent login")
        raise HTTPException(status_code=500, detail=MSG_INTERNAL_ERROR)
