"""Meme template model: reusable meme layouts, either global or user-owned."""

import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from meme_ideas.models.meme_idea import MemeIdea


def _new_id() -> str:
    return str(uuid.uuid4())


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MemeTemplate(SQLModel, table=True):
    """A reusable meme layout. ``user_id=None`` marks a global template."""

    id: str = Field(default_factory=_new_id, primary_key=True)
    user_id: Optional[str] = Field(default=None, index=True)  # None = shared by everyone
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None  # where the template image lives
    layout_type: Optional[str] = None  # "top-bottom", "two-panel", etc.
    is_system: bool = Field(default=False)
    created_at: datetime = Field(default_factory=_utc_now)
    updated_at: datetime = Field(default_factory=_utc_now)

    # Relationships
    ideas: List["MemeIdea"] = Relationship(back_populates="template")


# Built-in global templates, inserted by seed_system_templates()
DEFAULT_SYSTEM_TEMPLATES = [
    {
        "name": "Drake Hotline Bling",
        "description": "Disapprove of the first thing, approve of the second.",
        "layout_type": "two-panel",
    },
    {
        "name": "Distracted Boyfriend",
        "description": "Someone tempted away from what they have by something new.",
        "layout_type": "labels",
    },
    {
        "name": "Two Buttons",
        "description": "Sweating over two mutually exclusive choices.",
        "layout_type": "top-bottom",
    },
    {
        "name": "Change My Mind",
        "description": "A strong opinion presented as an open challenge.",
        "layout_type": "top-bottom",
    },
    {
        "name": "Expanding Brain",
        "description": "Escalating levels of supposed enlightenment.",
        "layout_type": "four-panel",
    },
]
