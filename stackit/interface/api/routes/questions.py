"""Question routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from stackit.application.usecase.question import (
    AcceptAnswerRequest,
    AcceptAnswerResponse,
    AcceptAnswerUseCase,
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
)
from stackit.domain.error import DomainError
from stackit.domain.service import JWTService
from stackit.interface.error import to_http_exception

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1, max_length=30000)


class AcceptAnswerAPIRequest(BaseModel):
    """API request for accepting an answer."""

    answer_id: str


@router.post(
    "", response_model=CreateQuestionResponse, status_code=status.HTTP_201_CREATED
)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateQuestionResponse:
    """Ask a new question.

    Requires authentication.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to ask a question",
        )

    try:
        return await create_question_use_case.execute(
            CreateQuestionRequest(
                title=request.title,
                description=request.description,
                user_id=user_id,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: str,
    get_question_use_case: FromDishka[GetQuestionUseCase],
) -> GetQuestionResponse:
    """Get a question with its answers.

    Each call counts as a view.

    Raises:
        HTTPException: If the question is not found
    """
    try:
        result = await get_question_use_case.execute(
            GetQuestionRequest(question_id=question_id)
        )
    except ValueError as e:
        raise to_http_exception(e)

    if not result:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Question not found",
        )
    return result


@router.post("/{question_id}/accept", response_model=AcceptAnswerResponse)
async def accept_answer(
    question_id: str,
    request: AcceptAnswerAPIRequest,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AcceptAnswerResponse:
    """Accept one of the question's answers.

    Only the question owner may accept. Accepting the current accepted
    answer again changes nothing.

    Args:
        question_id: Question UUID
        request: Answer to accept
        accept_answer_use_case: Accept answer use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Accept result

    Raises:
        HTTPException: 401 if not authenticated, 403 if not the owner,
            404 if the question or answer is missing
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to accept an answer",
        )

    try:
        return await accept_answer_use_case.execute(
            AcceptAnswerRequest(
                question_id=question_id,
                answer_id=request.answer_id,
                user_id=user_id,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
