from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional
import uuid

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from meme_ideas.models.meme_idea import MemeIdea


class MemeCaption(SQLModel, table=True):
    # No owner column: access is always resolved through the parent idea
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    meme_idea_id: str = Field(foreign_key="memeidea.id", index=True)
    variant_label: Optional[str] = None  # "A", "B"
    top_text: Optional[str] = None
    bottom_text: Optional[str] = None
    extra_text: Optional[str] = None  # third panel / label text
    is_favorite: bool = Field(default=False)
    is_used: bool = Field(default=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Relationships
    idea: "MemeIdea" = Relationship(back_populates="captions")
