"""
Tests for the ownership guards and the service-level ordering guarantees.
"""
import pytest
from sqlmodel import Session, select

from meme_ideas.auth import CallerContext
from meme_ideas.errors import ForbiddenError, InvalidInputError, NotFoundError, UnauthenticatedError
from meme_ideas.models.meme_caption import MemeCaption
from meme_ideas.models.meme_idea import MemeIdea
from meme_ideas.models.meme_template import MemeTemplate
from meme_ideas.services import caption_service, idea_service, template_service
from meme_ideas.utils.caption_patch import CaptionPatch
from meme_ideas.utils.ownership_guards import require_identity, resolve_accessible_template, resolve_owned_idea
from tests.conftest import caller


def _add(session: Session, record):
    session.add(record)
    session.commit()
    session.refresh(record)
    return record


def test_require_identity_returns_user():
    assert require_identity(caller("alice")).id == "alice"


def test_require_identity_rejects_anonymous():
    with pytest.raises(UnauthenticatedError):
        require_identity(CallerContext(user=None))


def test_resolve_accessible_template_global_and_own(session: Session):
    global_template = _add(session, MemeTemplate(name="Global"))
    own_template = _add(session, MemeTemplate(name="Own", user_id="alice"))

    assert resolve_accessible_template(session, global_template.id, "alice").id == global_template.id
    assert resolve_accessible_template(session, global_template.id, "bob").id == global_template.id
    assert resolve_accessible_template(session, own_template.id, "alice").id == own_template.id


def test_resolve_accessible_template_missing_is_not_found(session: Session):
    with pytest.raises(NotFoundError):
        resolve_accessible_template(session, "missing", "alice")


def test_resolve_accessible_template_foreign_is_forbidden(session: Session):
    template = _add(session, MemeTemplate(name="Bob's", user_id="bob"))

    with pytest.raises(ForbiddenError) as exc_info:
        resolve_accessible_template(session, template.id, "alice")
    assert exc_info.value.kind == "FORBIDDEN"


def test_resolve_owned_idea_hides_foreign_ideas(session: Session):
    """Missing and foreign ideas raise identical errors"""
    idea = _add(session, MemeIdea(user_id="alice"))

    assert resolve_owned_idea(session, idea.id, "alice").id == idea.id

    with pytest.raises(NotFoundError) as missing:
        resolve_owned_idea(session, "missing", "bob")
    with pytest.raises(NotFoundError) as foreign:
        resolve_owned_idea(session, idea.id, "bob")

    assert missing.value.to_dict() == foreign.value.to_dict()


def test_anonymous_caller_rejected_by_every_operation(session: Session):
    anonymous = CallerContext(user=None)
    calls = [
        lambda: template_service.create_template(session, anonymous, name="x"),
        lambda: template_service.list_templates(session, anonymous),
        lambda: idea_service.create_meme_idea(session, anonymous),
        lambda: idea_service.list_meme_ideas(session, anonymous),
        lambda: caption_service.create_meme_caption(session, anonymous, meme_idea_id="i"),
        lambda: caption_service.update_meme_caption(
            session, anonymous, caption_id="c", meme_idea_id="i", patch=CaptionPatch({"top_text": "x"})
        ),
        lambda: caption_service.delete_meme_caption(session, anonymous, caption_id="c", meme_idea_id="i"),
        lambda: caption_service.list_meme_captions(session, anonymous, meme_idea_id="i"),
    ]
    for call in calls:
        with pytest.raises(UnauthenticatedError):
            call()


def test_create_template_rejects_blank_name(session: Session):
    with pytest.raises(InvalidInputError):
        template_service.create_template(session, caller("alice"), name="  ")
    assert session.exec(select(MemeTemplate)).all() == []


def test_create_idea_with_forbidden_template_writes_nothing(session: Session):
    template = _add(session, MemeTemplate(name="Bob's", user_id="bob"))

    with pytest.raises(ForbiddenError):
        idea_service.create_meme_idea(session, caller("alice"), template_id=template.id)
    assert session.exec(select(MemeIdea)).all() == []


def test_empty_patch_rejected_before_idea_lookup(session: Session):
    """An empty update is malformed input even when the idea does not exist"""
    with pytest.raises(InvalidInputError):
        caption_service.update_meme_caption(
            session, caller("alice"), caption_id="missing", meme_idea_id="missing", patch=CaptionPatch()
        )


def test_update_caption_service_partial(session: Session):
    idea = _add(session, MemeIdea(user_id="alice"))
    caption = _add(session, MemeCaption(meme_idea_id=idea.id, top_text="x", bottom_text="y"))

    updated = caption_service.update_meme_caption(
        session,
        caller("alice"),
        caption_id=caption.id,
        meme_idea_id=idea.id,
        patch=CaptionPatch({"is_used": True}),
    )

    assert updated.is_used is True
    assert updated.top_text == "x"
    assert updated.bottom_text == "y"


def test_delete_caption_service_missing_is_not_found(session: Session):
    idea = _add(session, MemeIdea(user_id="alice"))

    with pytest.raises(NotFoundError):
        caption_service.delete_meme_caption(session, caller("alice"), caption_id="missing", meme_idea_id=idea.id)
