"""Answer routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from stackit.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
)
from stackit.domain.error import DomainError
from stackit.domain.service import JWTService
from stackit.interface.error import to_http_exception

router = APIRouter(tags=["answers"], route_class=DishkaRoute)


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    content: str = Field(min_length=1, max_length=30000)


@router.post(
    "/questions/{question_id}/answers",
    response_model=CreateAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: str,
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateAnswerResponse:
    """Answer a question.

    Requires authentication. The question owner is notified unless they
    answered their own question.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to answer",
        )

    try:
        return await create_answer_use_case.execute(
            CreateAnswerRequest(
                question_id=question_id,
                content=request.content,
                user_id=user_id,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
