"""FastAPI route definitions."""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from starlette.concurrency import run_in_threadpool

from galleria.models import CompositeSubmission
from galleria.core.mat import list_mats
from galleria.services.composite_service import CompositeService
from galleria.api.schemas import (
    CompositeDimensions, CompositeResponse, ErrorResponse, MatOption, StyleList,
)

router = APIRouter()
health_router = APIRouter()


def get_service(request: Request) -> CompositeService:
    """The service instance built by the app factory."""
    return request.app.state.composite_service


async def _read(upload: Optional[UploadFile]) -> Optional[bytes]:
    if upload is None:
        return None
    data = await upload.read()
    return data or None


@router.post(
    "/generate/composite",
    response_model=CompositeResponse,
    response_model_by_alias=True,
    responses={
        400: {"model": ErrorResponse}, 422: {"model": ErrorResponse},
        500: {"model": ErrorResponse}, 502: {"model": ErrorResponse},
    },
)
async def composite(
    artwork: Optional[UploadFile] = File(None),
    environment: Optional[UploadFile] = File(None),
    environment_url: Optional[str] = Form(None, alias="environmentUrl"),
    width: Optional[str] = Form(None),
    height: Optional[str] = Form(None),
    unit: Optional[str] = Form(None),
    scale: Optional[str] = Form(None),
    frame_style: Optional[str] = Form(None, alias="frameStyle"),
    ai_frame_image_url: Optional[str] = Form(None, alias="aiFrameImageUrl"),
    ai_frame_border_width: Optional[str] = Form(None, alias="aiFrameBorderWidth"),
    mat_option: Optional[str] = Form(None, alias="matOption"),
    mat_width: Optional[str] = Form(None, alias="matWidth"),
    pos_x: Optional[str] = Form(None, alias="posX"),
    pos_y: Optional[str] = Form(None, alias="posY"),
    service: CompositeService = Depends(get_service),
) -> CompositeResponse:
    """Composite framed artwork onto an environment image.

    Form field names match the studio client (camelCase).
    """
    submission = CompositeSubmission(
        artwork=await _read(artwork),
        environment=await _read(environment),
        environment_url=environment_url or None,
        width=width, height=height, unit=unit, scale=scale,
        frame_style=frame_style,
        ai_frame_image_url=ai_frame_image_url or None,
        ai_frame_border_width=ai_frame_border_width,
        mat_option=mat_option, mat_width=mat_width,
        pos_x=pos_x, pos_y=pos_y,
    )

    # Pillow work is blocking; keep it off the event loop
    stored = await run_in_threadpool(service.compose, submission)

    return CompositeResponse(
        mockup_url=stored.url,
        dimensions=CompositeDimensions(
            total_width=stored.total_width,
            total_height=stored.total_height,
            artwork_width=stored.artwork_width,
            artwork_height=stored.artwork_height,
        ),
    )


@router.get("/frames/styles", response_model=StyleList)
async def list_styles(service: CompositeService = Depends(get_service)) -> StyleList:
    """List all preset frame styles."""
    return StyleList(styles=service.registry.list_styles())


@router.get("/mats", response_model=list[MatOption])
async def list_mat_options() -> list[MatOption]:
    return [MatOption(**m) for m in list_mats()]


@health_router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
