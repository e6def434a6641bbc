from __future__ import annotations

from typing import Annotated, Optional

from fastapi import APIRouter, Body, Depends, Response

from podium.backend.app.api.session.deps import get_create_session_use_case
from podium.backend.app.api.session.schemas import CreateSessionRequest, SuccessResponse
from podium.backend.app.application.auth import CreateSessionInputDTO
from podium.backend.app.application.auth.use_cases import CreateSessionUseCase
from podium.backend.app.core.config import settings

router = APIRouter(prefix="/auth", tags=["auth"])

create_session_dep = Annotated[CreateSessionUseCase, Depends(get_create_session_use_case)]


@router.post("/session", response_model=SuccessResponse)
async def create_session(
        response: Response,
        use_case: create_session_dep,
        body: Annotated[Optional[CreateSessionRequest], Body()] = None,
) -> SuccessResponse:
    dto = CreateSessionInputDTO(id_token=body.id_token if body else None)
    cookie = await use_case.execute(dto)

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=cookie.value,
        max_age=int(cookie.max_age.total_seconds()),
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )
    return SuccessResponse(success=True)


@router.delete("/session", response_model=SuccessResponse)
async def clear_session(response: Response) -> SuccessResponse:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )
    return SuccessResponse(success=True)
