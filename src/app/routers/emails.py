"""Email API endpoints — generate slots, render templates, preview."""

import logging

from fastapi import APIRouter, Depends

from src.emails import EngineConfig, EventStore, Validator

from ..dependencies import get_engine_config, get_event_store, get_validator
from ..schemas import (
    EmailOutputResponse,
    GenerateRequest,
    PreviewResponse,
    RenderRequest,
    RenderResponse,
)
from ..services import email_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/emails", tags=["Emails"])


@router.post("/generate", response_model=EmailOutputResponse)
async def generate_email(
    request: GenerateRequest,
    store: EventStore = Depends(get_event_store),
    engine_config: EngineConfig = Depends(get_engine_config),
    validator: Validator = Depends(get_validator),
) -> EmailOutputResponse:
    """Generate email slots for an event and content type."""
    data = email_service.generate(
        store,
        request.event_id,
        request.content_type,
        request.topic,
        engine_config,
        validator,
    )
    return EmailOutputResponse(**data)


@router.post("/render", response_model=RenderResponse)
async def render_email(request: RenderRequest) -> RenderResponse:
    """Merge a generated email into an HTML template."""
    html = email_service.render(
        request.template,
        request.output.model_dump(),
        flatten_utm=request.flatten_utm,
        autoescape=request.autoescape,
    )
    return RenderResponse(html=html)


@router.post("/preview", response_model=PreviewResponse)
async def preview_email(
    request: GenerateRequest,
    store: EventStore = Depends(get_event_store),
    engine_config: EngineConfig = Depends(get_engine_config),
    validator: Validator = Depends(get_validator),
) -> PreviewResponse:
    """Generate an email and render it with the event's template."""
    data = email_service.preview(
        store,
        request.event_id,
        request.content_type,
        request.topic,
        engine_config,
        validator,
    )
    return PreviewResponse(**data)
