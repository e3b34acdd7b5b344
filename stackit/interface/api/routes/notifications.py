"""Notification routes.

Notifications are read-only to clients apart from the read flag. The
WebSocket feed pushes a snapshot on connect and another after every new
notification for the authenticated user.
"""

import asyncio
from contextlib import aclosing
from uuid import UUID

import logfire
from dishka import AsyncContainer
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, WebSocket, status

from stackit.application.usecase.notification import (
    GetUnreadCountRequest,
    GetUnreadCountResponse,
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadResponse,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
    NotificationFeed,
    NotificationItem,
)
from stackit.domain.error import DomainError
from stackit.domain.service import JWTService, NotificationBroker
from stackit.domain.value import UserId
from stackit.interface.error import to_http_exception

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


def _require_user(jwt_service: JWTService, auth_token: str | None) -> str:
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user_id


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ListNotificationsResponse:
    """List the current user's most recent notifications.

    Args:
        list_notifications_use_case: List notifications use case from DI
        jwt_service: JWT service for token verification (injected)
        limit: Page size, capped at the configured maximum
        auth_token: JWT token from cookie

    Returns:
        Notifications, newest first, and the unread count

    Raises:
        HTTPException: 400 if limit is below 1
    """
    user_id = _require_user(jwt_service, auth_token)
    try:
        return await list_notifications_use_case.execute(
            ListNotificationsRequest(user_id=user_id, limit=limit)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/unread-count", response_model=GetUnreadCountResponse)
async def get_unread_count(
    get_unread_count_use_case: FromDishka[GetUnreadCountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetUnreadCountResponse:
    """Count the current user's unread notifications."""
    user_id = _require_user(jwt_service, auth_token)
    return await get_unread_count_use_case.execute(
        GetUnreadCountRequest(user_id=user_id)
    )


@router.post("/read-all", response_model=MarkAllNotificationsReadResponse)
async def mark_all_notifications_read(
    mark_all_use_case: FromDishka[MarkAllNotificationsReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MarkAllNotificationsReadResponse:
    """Mark every unread notification of the current user as read."""
    user_id = _require_user(jwt_service, auth_token)
    return await mark_all_use_case.execute(
        MarkAllNotificationsReadRequest(user_id=user_id)
    )


@router.post("/{notification_id}/read", response_model=NotificationItem)
async def mark_notification_read(
    notification_id: str,
    mark_read_use_case: FromDishka[MarkNotificationReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> NotificationItem:
    """Mark one notification as read.

    Marking an already read notification succeeds.

    Raises:
        HTTPException: 404 if it doesn't exist, 403 if it belongs to
            someone else
    """
    user_id = _require_user(jwt_service, auth_token)
    try:
        return await mark_read_use_case.execute(
            MarkNotificationReadRequest(
                notification_id=notification_id, user_id=user_id
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.websocket("/ws")
async def notification_feed(
    websocket: WebSocket,
    limit: int | None = Query(default=None, ge=1),
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Live notification feed.

    Closes with 1008 if the user is not authenticated. Messages are
    NotificationFeedEvent objects; anything the client sends is ignored.
    """
    container: AsyncContainer = websocket.app.state.dishka_container

    async with container() as request_container:
        jwt_service = await request_container.get(JWTService)
        user_id = _parse_user_id(jwt_service.get_user_id_from_token(auth_token))

    if user_id is None:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    broker = await container.get(NotificationBroker)

    async def load_snapshot(uid: UserId) -> ListNotificationsResponse:
        async with container() as snapshot_container:
            use_case = await snapshot_container.get(ListNotificationsUseCase)
            return await use_case.execute(
                ListNotificationsRequest(user_id=str(uid), limit=limit)
            )

    feed = NotificationFeed(broker, load_snapshot)
    await websocket.accept()

    with logfire.span("notification_feed", user_id=str(user_id)):
        sender = asyncio.create_task(_send_events(websocket, feed, user_id))
        receiver = asyncio.create_task(_wait_for_disconnect(websocket))
        try:
            await asyncio.wait(
                {sender, receiver}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            # The sender owns the subscription and releases it when cancelled.
            # Not gather(): its CancelledError would replace this task's own.
            sender.cancel()
            receiver.cancel()
            await asyncio.wait({sender, receiver})

        for task in (sender, receiver):
            if not task.cancelled() and task.exception():
                logfire.warn(
                    "Notification feed ended with error",
                    user_id=str(user_id),
                    error=str(task.exception()),
                )

    # The subscription closed on our side while the client is still there
    if receiver.cancelled() and not sender.cancelled() and not sender.exception():
        await websocket.close()


def _parse_user_id(subject: str | None) -> UserId | None:
    if not subject:
        return None
    try:
        return UserId(UUID(subject))
    except ValueError:
        logfire.warn("Token subject is not a user ID", subject=subject)
        return None


async def _send_events(
    websocket: WebSocket, feed: NotificationFeed, user_id: UserId
) -> None:
    async with aclosing(feed.stream(user_id)) as events:
        async for event in events:
            await websocket.send_json(event.model_dump(mode="json"))


async def _wait_for_disconnect(websocket: WebSocket) -> None:
    while True:
        message = await websocket.receive()
        if message["type"] == "websocket.disconnect":
            return
