"""
Meme captions.

Captions have no owner of their own. Every operation first resolves the
parent idea as owned by the caller, then addresses the caption by the
(caption id, idea id) pair so a caption can never be reached through an
idea it does not belong to.
"""
import logging
from typing import List, Optional

from sqlmodel import Session, select

from meme_ideas.auth import CallerContext
from meme_ideas.errors import InvalidInputError, NotFoundError
from meme_ideas.models.meme_caption import MemeCaption
from meme_ideas.utils.caption_filters import CaptionFilters
from meme_ideas.utils.caption_patch import CaptionPatch
from meme_ideas.utils.ownership_guards import require_identity, resolve_owned_idea

logger = logging.getLogger(__name__)


def _get_caption_for_idea(session: Session, caption_id: str, meme_idea_id: str) -> Optional[MemeCaption]:
    return session.exec(
        select(MemeCaption).where(MemeCaption.id == caption_id, MemeCaption.meme_idea_id == meme_idea_id)
    ).first()


def create_meme_caption(
    session: Session,
    caller: CallerContext,
    *,
    meme_idea_id: str,
    variant_label: Optional[str] = None,
    top_text: Optional[str] = None,
    bottom_text: Optional[str] = None,
    extra_text: Optional[str] = None,
    is_favorite: Optional[bool] = None,
    is_used: Optional[bool] = None,
) -> MemeCaption:
    user = require_identity(caller)
    resolve_owned_idea(session, meme_idea_id, user.id)

    caption = MemeCaption(
        meme_idea_id=meme_idea_id,
        variant_label=variant_label,
        top_text=top_text,
        bottom_text=bottom_text,
        extra_text=extra_text,
        is_favorite=bool(is_favorite) if is_favorite is not None else False,
        is_used=bool(is_used) if is_used is not None else False,
    )
    session.add(caption)
    session.commit()
    session.refresh(caption)

    logger.info(f"User {user.id} created caption {caption.id} on idea {meme_idea_id}")
    return caption


def update_meme_caption(
    session: Session,
    caller: CallerContext,
    *,
    caption_id: str,
    meme_idea_id: str,
    patch: CaptionPatch,
) -> MemeCaption:
    """
    Apply a partial update to a caption.

    Raises:
        UnauthenticatedError: No caller identity
        InvalidInputError: Patch has no fields (checked before any query)
        NotFoundError: Idea not owned by caller, or caption not on that idea
    """
    user = require_identity(caller)

    if patch.is_empty:
        raise InvalidInputError("At least one field must be provided to update.")

    resolve_owned_idea(session, meme_idea_id, user.id)

    caption = _get_caption_for_idea(session, caption_id, meme_idea_id)
    if not caption:
        raise NotFoundError("Meme caption not found.")

    patch.apply_to(caption)
    session.add(caption)
    session.commit()
    session.refresh(caption)

    logger.info(f"User {user.id} updated caption {caption_id} fields={sorted(patch.changes)}")
    return caption


def delete_meme_caption(session: Session, caller: CallerContext, *, caption_id: str, meme_idea_id: str) -> None:
    """Delete one caption. A missing or mismatched pair raises NotFoundError, never a silent no-op."""
    user = require_identity(caller)
    resolve_owned_idea(session, meme_idea_id, user.id)

    caption = _get_caption_for_idea(session, caption_id, meme_idea_id)
    if not caption:
        raise NotFoundError("Meme caption not found.")

    session.delete(caption)
    session.commit()

    logger.info(f"User {user.id} deleted caption {caption_id} from idea {meme_idea_id}")


def list_meme_captions(
    session: Session,
    caller: CallerContext,
    *,
    meme_idea_id: str,
    favorites_only: bool = False,
    used_only: bool = False,
) -> List[MemeCaption]:
    """Captions of an owned idea; favorites_only and used_only combine with AND."""
    user = require_identity(caller)
    resolve_owned_idea(session, meme_idea_id, user.id)

    filters = CaptionFilters(meme_idea_id=meme_idea_id, favorites_only=favorites_only, used_only=used_only)
    return list(session.exec(select(MemeCaption).where(filters.clause())).all())
