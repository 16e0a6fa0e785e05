"""
Meme templates: user-created layouts plus the built-in global catalogue.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlmodel import Session, or_, select

from meme_ideas.auth import CallerContext
from meme_ideas.errors import InvalidInputError
from meme_ideas.models.meme_template import DEFAULT_SYSTEM_TEMPLATES, MemeTemplate
from meme_ideas.utils.ownership_guards import require_identity

logger = logging.getLogger(__name__)


def create_template(
    session: Session,
    caller: CallerContext,
    *,
    name: str,
    description: Optional[str] = None,
    image_url: Optional[str] = None,
    layout_type: Optional[str] = None,
) -> MemeTemplate:
    """Create a template owned by the caller. Both timestamps share one creation time."""
    user = require_identity(caller)

    name = (name or "").strip()
    if not name:
        raise InvalidInputError("Template name cannot be empty.")

    now = datetime.now(timezone.utc)
    template = MemeTemplate(
        user_id=user.id,
        name=name,
        description=description,
        image_url=image_url,
        layout_type=layout_type,
        is_system=False,
        created_at=now,
        updated_at=now,
    )
    session.add(template)
    session.commit()
    session.refresh(template)

    logger.info(f"User {user.id} created template {template.id}")
    return template


def list_templates(session: Session, caller: CallerContext) -> List[MemeTemplate]:
    """Templates the caller owns plus every global (ownerless) template."""
    user = require_identity(caller)

    return list(
        session.exec(
            select(MemeTemplate).where(or_(MemeTemplate.user_id == user.id, MemeTemplate.user_id.is_(None)))
        ).all()
    )


def seed_system_templates(session: Session) -> int:
    """
    Insert the built-in global templates that are not present yet.

    Idempotent: templates are matched by name among existing system templates.

    Returns:
        Number of templates inserted
    """
    existing = set(
        session.exec(
            select(MemeTemplate.name).where(MemeTemplate.is_system == True, MemeTemplate.user_id.is_(None))  # noqa: E712
        ).all()
    )

    inserted = 0
    for entry in DEFAULT_SYSTEM_TEMPLATES:
        if entry["name"] in existing:
            continue
        session.add(MemeTemplate(user_id=None, is_system=True, **entry))
        inserted += 1

    if inserted:
        session.commit()
    logger.info(f"Seeded {inserted} system templates ({len(existing)} already present)")
    return inserted
