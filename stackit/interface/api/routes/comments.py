"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from stackit.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from stackit.domain.error import DomainError
from stackit.domain.service import JWTService
from stackit.domain.value import TargetKind
from stackit.interface.error import to_http_exception

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=10000)


async def _create_comment(
    target_kind: TargetKind,
    target_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: CreateCommentUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
) -> CreateCommentResponse:
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to comment",
        )

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                target_kind=target_kind,
                target_id=target_id,
                content=request.content,
                user_id=user_id,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post(
    "/questions/{question_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def comment_on_question(
    question_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on a question. Requires authentication."""
    return await _create_comment(
        TargetKind.QUESTION,
        question_id,
        request,
        create_comment_use_case,
        jwt_service,
        auth_token,
    )


@router.post(
    "/answers/{answer_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def comment_on_answer(
    answer_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on an answer. Requires authentication."""
    return await _create_comment(
        TargetKind.ANSWER,
        answer_id,
        request,
        create_comment_use_case,
        jwt_service,
        auth_token,
    )
