"""
Meme Idea API Routes
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from meme_ideas.auth import CallerContext, get_caller_context
from meme_ideas.database import get_session
from meme_ideas.schemas import ApiResponse, IdeaCreateRequest, IdeaListPayload, IdeaPayload, IdeaResponse
from meme_ideas.services import idea_service

router = APIRouter()


@router.post("/ideas", response_model=ApiResponse[IdeaPayload], status_code=201)
def create_meme_idea(
    idea_data: IdeaCreateRequest,
    session: Session = Depends(get_session),
    caller: CallerContext = Depends(get_caller_context),
):
    """Create a meme idea, optionally based on an accessible template"""
    idea = idea_service.create_meme_idea(session, caller, **idea_data.model_dump())
    return ApiResponse(data=IdeaPayload(idea=IdeaResponse.model_validate(idea)))


@router.get("/ideas", response_model=ApiResponse[IdeaListPayload])
def list_meme_ideas(
    session: Session = Depends(get_session),
    caller: CallerContext = Depends(get_caller_context),
):
    """List the caller's meme ideas"""
    ideas = idea_service.list_meme_ideas(session, caller)
    items = [IdeaResponse.model_validate(i) for i in ideas]
    return ApiResponse(data=IdeaListPayload(items=items, total=len(items)))
