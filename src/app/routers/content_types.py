"""Content type catalog endpoint."""

from fastapi import APIRouter

from src.emails import STRATEGY_REGISTRY

from ..schemas import ContentTypeInfo

router = APIRouter(prefix="/content-types", tags=["Content Types"])


@router.get("", response_model=list[ContentTypeInfo])
async def get_content_types() -> list[ContentTypeInfo]:
    """List content types with their labels and descriptions."""
    return [
        ContentTypeInfo(
            value=s.content_type,
            label=s.label,
            description=s.description,
        )
        for s in STRATEGY_REGISTRY.values()
    ]
