"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel

from stackit.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from stackit.domain.error import DomainError
from stackit.domain.service import JWTService
from stackit.domain.value import TargetKind, VoteType
from stackit.interface.error import to_http_exception

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting. 1 is an upvote, -1 a downvote."""

    vote_type: VoteType


async def _cast_vote(
    target_kind: TargetKind,
    target_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: CastVoteUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
) -> CastVoteResponse:
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to vote",
        )

    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                target_kind=target_kind,
                target_id=target_id,
                vote_type=request.vote_type,
                user_id=user_id,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post("/questions/{question_id}/vote", response_model=CastVoteResponse)
async def vote_on_question(
    question_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on a question.

    Repeating the same vote cancels it; the opposite vote flips it.
    Requires authentication.
    """
    return await _cast_vote(
        TargetKind.QUESTION,
        question_id,
        request,
        cast_vote_use_case,
        jwt_service,
        auth_token,
    )


@router.post("/answers/{answer_id}/vote", response_model=CastVoteResponse)
async def vote_on_answer(
    answer_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on an answer. Requires authentication."""
    return await _cast_vote(
        TargetKind.ANSWER,
        answer_id,
        request,
        cast_vote_use_case,
        jwt_service,
        auth_token,
    )
