"""
Ownership Guards

Reusable guards for enforcing who may act on which record:
- Caller must be signed in
- Templates: global or owned by the caller
- Ideas: owned by the caller (captions inherit this through their idea)
"""

import logging

from sqlmodel import Session, select

from meme_ideas.auth import CallerContext, UserIdentity
from meme_ideas.errors import ForbiddenError, NotFoundError, UnauthenticatedError
from meme_ideas.models.meme_idea import MemeIdea
from meme_ideas.models.meme_template import MemeTemplate

logger = logging.getLogger(__name__)


def require_identity(caller: CallerContext) -> UserIdentity:
    """
    Require a signed-in caller, otherwise raise UnauthenticatedError.

    Must run before any data access in every operation.
    """
    if caller is None or caller.user is None:
        raise UnauthenticatedError("You must be signed in to perform this action.")
    return caller.user


def resolve_accessible_template(session: Session, template_id: str, user_id: str) -> MemeTemplate:
    """
    Require a template the user can use: global (no owner) or their own.

    Args:
        session: Database session
        template_id: Template ID
        user_id: Caller's user ID

    Returns:
        MemeTemplate if accessible

    Raises:
        NotFoundError: No template with this ID
        ForbiddenError: Template exists but belongs to another user
    """
    template = session.get(MemeTemplate, template_id)

    if not template:
        raise NotFoundError("Template not found.")

    if template.user_id and template.user_id != user_id:
        logger.warning(f"User {user_id} denied access to template {template_id}")
        raise ForbiddenError("You do not have access to this template.")

    return template


def resolve_owned_idea(session: Session, idea_id: str, user_id: str) -> MemeIdea:
    """
    Require an idea owned by the user.

    Lookup and ownership check are one query, so an idea that belongs to
    someone else is reported exactly like one that does not exist.

    Raises:
        NotFoundError: Idea missing or not owned by the user
    """
    idea = session.exec(select(MemeIdea).where(MemeIdea.id == idea_id, MemeIdea.user_id == user_id)).first()

    if not idea:
        raise NotFoundError("Meme idea not found.")

    return idea
