"""
Meme Template API Routes
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from meme_ideas.auth import CallerContext, get_caller_context
from meme_ideas.database import get_session
from meme_ideas.schemas import (
    ApiResponse,
    TemplateCreateRequest,
    TemplateListPayload,
    TemplatePayload,
    TemplateResponse,
)
from meme_ideas.services import template_service

router = APIRouter()


@router.post("/templates", response_model=ApiResponse[TemplatePayload], status_code=201)
def create_template(
    template_data: TemplateCreateRequest,
    session: Session = Depends(get_session),
    caller: CallerContext = Depends(get_caller_context),
):
    """Create a template owned by the caller"""
    template = template_service.create_template(session, caller, **template_data.model_dump())
    return ApiResponse(data=TemplatePayload(template=TemplateResponse.model_validate(template)))


@router.get("/templates", response_model=ApiResponse[TemplateListPayload])
def list_templates(
    session: Session = Depends(get_session),
    caller: CallerContext = Depends(get_caller_context),
):
    """List the caller's templates plus all global templates"""
    templates = template_service.list_templates(session, caller)
    items = [TemplateResponse.model_validate(t) for t in templates]
    return ApiResponse(data=TemplateListPayload(items=items, total=len(items)))
