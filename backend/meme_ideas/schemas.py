"""
Request/response models.

Wire names are camelCase (``memeIdeaId``, ``isFavorite``); Python attributes
stay snake_case. Every success response is wrapped in ``ApiResponse``.
"""

from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ApiResponse(CamelModel, Generic[DataT]):
    success: bool = True
    data: Optional[DataT] = None


# ============================================================================
# Templates
# ============================================================================


class TemplateCreateRequest(CamelModel):
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    layout_type: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v or not v.strip():
            raise ValueError("name cannot be empty")
        return v.strip()


class TemplateResponse(CamelModel):
    id: str
    user_id: Optional[str] = None
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    layout_type: Optional[str] = None
    is_system: bool
    created_at: datetime
    updated_at: datetime


class TemplatePayload(CamelModel):
    template: TemplateResponse


class TemplateListPayload(CamelModel):
    items: List[TemplateResponse]
    total: int


# ============================================================================
# Ideas
# ============================================================================


class IdeaCreateRequest(CamelModel):
    template_id: Optional[str] = None
    context: Optional[str] = None
    topic: Optional[str] = None


class IdeaResponse(CamelModel):
    id: str
    user_id: str
    template_id: Optional[str] = None
    context: Optional[str] = None
    topic: Optional[str] = None
    created_at: datetime


class IdeaPayload(CamelModel):
    idea: IdeaResponse


class IdeaListPayload(CamelModel):
    items: List[IdeaResponse]
    total: int


# ============================================================================
# Captions
# ============================================================================


class CaptionCreateRequest(CamelModel):
    variant_label: Optional[str] = None
    top_text: Optional[str] = None
    bottom_text: Optional[str] = None
    extra_text: Optional[str] = None
    is_favorite: Optional[bool] = None
    is_used: Optional[bool] = None


class CaptionUpdateRequest(CamelModel):
    """Partial update: only fields present in the request body are applied."""

    variant_label: Optional[str] = None
    top_text: Optional[str] = None
    bottom_text: Optional[str] = None
    extra_text: Optional[str] = None
    is_favorite: Optional[bool] = None
    is_used: Optional[bool] = None

    @field_validator("is_favorite", "is_used")
    @classmethod
    def validate_flag_not_null(cls, v):
        # Defaults are not validated, so this only rejects an explicit null
        if v is None:
            raise ValueError("flag cannot be null")
        return v


class CaptionResponse(CamelModel):
    id: str
    meme_idea_id: str
    variant_label: Optional[str] = None
    top_text: Optional[str] = None
    bottom_text: Optional[str] = None
    extra_text: Optional[str] = None
    is_favorite: bool
    is_used: bool
    created_at: datetime


class CaptionPayload(CamelModel):
    caption: CaptionResponse


class CaptionListPayload(CamelModel):
    items: List[CaptionResponse]
    total: int
