"""
Pydantic response and request models for the EventMail API.

Every endpoint has a typed schema. EmailOutput fields keep the stable
serialization order of the core model.
"""

from pydantic import BaseModel, ConfigDict

from src.emails import ContentType


# =============================================================================
# Events
# =============================================================================


class EventCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = ""
    slug: str = ""
    date: str = ""
    program: str = ""
    speakers: str = ""
    pains: str = ""
    rag_links: str = ""
    html_template: str = ""


class EventResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: str
    date: str
    program: str
    speakers: str
    pains: str
    rag_links: str
    html_template: str


# =============================================================================
# Content Types
# =============================================================================


class ContentTypeInfo(BaseModel):
    value: ContentType
    label: str
    description: str


# =============================================================================
# Emails
# =============================================================================


class UTMParamsSchema(BaseModel):
    utm_source: str
    utm_medium: str
    utm_campaign: str
    utm_content: str


class ValidationErrorSchema(BaseModel):
    slot: str
    reason: str


class EmailOutputResponse(BaseModel):
    subject: str
    preheader: str
    headline: str
    intro: str
    pain_point: str | None = None
    value_proposition: str
    agenda_block: str | None = None
    speakers_block: str | None = None
    offer: str
    cta_text: str
    cta_url: str
    utm_params: UTMParamsSchema
    errors: list[ValidationErrorSchema]


class GenerateRequest(BaseModel):
    event_id: str | None = None
    content_type: ContentType = ContentType.ANNOUNCE
    topic: str | None = None


class RenderRequest(BaseModel):
    template: str
    output: EmailOutputResponse
    flatten_utm: bool = False
    autoescape: bool = False


class RenderResponse(BaseModel):
    html: str


class PreviewResponse(BaseModel):
    output: EmailOutputResponse
    html: str
    template_source: str  # "event" or "default"


# =============================================================================
# System
# =============================================================================


class HealthResponse(BaseModel):
    status: str
    demo_mode: bool
    event_count: int


class ErrorResponse(BaseModel):
    error: str
    detail: str | None = None
