import logging
from typing import List, Optional

from sqlmodel import Session, select

from meme_ideas.auth import CallerContext
from meme_ideas.models.meme_idea import MemeIdea
from meme_ideas.utils.ownership_guards import require_identity, resolve_accessible_template

logger = logging.getLogger(__name__)


def create_meme_idea(
    session: Session,
    caller: CallerContext,
    *,
    template_id: Optional[str] = None,
    context: Optional[str] = None,
    topic: Optional[str] = None,
) -> MemeIdea:
    """
    Create an idea owned by the caller.

    A template reference is optional, but when given it must be one the
    caller can use; the guard raises before anything is written.
    """
    user = require_identity(caller)

    if template_id:
        resolve_accessible_template(session, template_id, user.id)

    idea = MemeIdea(
        user_id=user.id,
        template_id=template_id or None,
        context=context,
        topic=topic,
    )
    session.add(idea)
    session.commit()
    session.refresh(idea)

    logger.info(f"User {user.id} created meme idea {idea.id}")
    return idea


def list_meme_ideas(session: Session, caller: CallerContext) -> List[MemeIdea]:
    user = require_identity(caller)
    return list(session.exec(select(MemeIdea).where(MemeIdea.user_id == user.id)).all())
