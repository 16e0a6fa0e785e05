from datetime import datetime, timezone
from typing import TYPE_CHECKING, List, Optional
import uuid

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from meme_ideas.models.meme_caption import MemeCaption
    from meme_ideas.models.meme_template import MemeTemplate


class MemeIdea(SQLModel, table=True):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    user_id: str = Field(index=True)
    # Some memes don't use a known template
    template_id: Optional[str] = Field(default=None, foreign_key="memetemplate.id")
    context: Optional[str] = None  # description of the situation / idea
    topic: Optional[str] = None  # e.g. "coding", "office life"
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Relationships
    template: Optional["MemeTemplate"] = Relationship(back_populates="ideas")
    captions: List["MemeCaption"] = Relationship(back_populates="idea")
