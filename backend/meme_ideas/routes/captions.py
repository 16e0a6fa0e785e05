"""
Meme Caption API Routes
Captions are nested under their idea; access is decided by idea ownership.
"""

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from meme_ideas.auth import CallerContext, get_caller_context
from meme_ideas.database import get_session
from meme_ideas.schemas import (
    ApiResponse,
    CaptionCreateRequest,
    CaptionListPayload,
    CaptionPayload,
    CaptionResponse,
    CaptionUpdateRequest,
)
from meme_ideas.services import caption_service
from meme_ideas.utils.caption_patch import CaptionPatch

router = APIRouter()


@router.get("/ideas/{meme_idea_id}/captions", response_model=ApiResponse[CaptionListPayload])
def list_meme_captions(
    meme_idea_id: str,
    favorites_only: bool = Query(default=False, alias="favoritesOnly"),
    used_only: bool = Query(default=False, alias="usedOnly"),
    session: Session = Depends(get_session),
    caller: CallerContext = Depends(get_caller_context),
):
    """
    List captions for an idea.

    favoritesOnly and usedOnly narrow the result independently; when both are
    set only captions that are favorite AND used are returned.
    """
    captions = caption_service.list_meme_captions(
        session,
        caller,
        meme_idea_id=meme_idea_id,
        favorites_only=favorites_only,
        used_only=used_only,
    )
    items = [CaptionResponse.model_validate(c) for c in captions]
    return ApiResponse(data=CaptionListPayload(items=items, total=len(items)))


@router.post("/ideas/{meme_idea_id}/captions", response_model=ApiResponse[CaptionPayload], status_code=201)
def create_meme_caption(
    meme_idea_id: str,
    caption_data: CaptionCreateRequest,
    session: Session = Depends(get_session),
    caller: CallerContext = Depends(get_caller_context),
):
    caption = caption_service.create_meme_caption(
        session, caller, meme_idea_id=meme_idea_id, **caption_data.model_dump()
    )
    return ApiResponse(data=CaptionPayload(caption=CaptionResponse.model_validate(caption)))


@router.patch("/ideas/{meme_idea_id}/captions/{caption_id}", response_model=ApiResponse[CaptionPayload])
def update_meme_caption(
    meme_idea_id: str,
    caption_id: str,
    caption_data: CaptionUpdateRequest,
    session: Session = Depends(get_session),
    caller: CallerContext = Depends(get_caller_context),
):
    """Update only the fields present in the request body"""
    caption = caption_service.update_meme_caption(
        session,
        caller,
        caption_id=caption_id,
        meme_idea_id=meme_idea_id,
        patch=CaptionPatch.from_request(caption_data),
    )
    return ApiResponse(data=CaptionPayload(caption=CaptionResponse.model_validate(caption)))


@router.delete("/ideas/{meme_idea_id}/captions/{caption_id}", response_model=ApiResponse[None])
def delete_meme_caption(
    meme_idea_id: str,
    caption_id: str,
    session: Session = Depends(get_session),
    caller: CallerContext = Depends(get_caller_context),
):
    caption_service.delete_meme_caption(session, caller, caption_id=caption_id, meme_idea_id=meme_idea_id)
    return ApiResponse()
