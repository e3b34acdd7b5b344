"""Domain layer DI providers."""

from dishka import Scope, provide

from stackit.config import AuthSettings, NotificationSettings
from stackit.domain.repository import (
    AnswerRepository,
    CommentRepository,
    NotificationRepository,
    QuestionRepository,
    TransactionManager,
    VoteRepository,
)
from stackit.domain.service import (
    AnswerService,
    CommentService,
    JWTService,
    NotificationOutbox,
    NotificationRules,
    NotificationService,
    QuestionService,
    VoteService,
)
from stackit.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session
    lifecycle. Each request gets fresh service instances sharing one
    transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_answer_service(
        self, answer_repository: AnswerRepository, question_service: QuestionService
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository, question_service=question_service
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            question_service=question_service,
            answer_service=answer_service,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            question_service=question_service,
            answer_service=answer_service,
        )

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        notification_settings: NotificationSettings,
    ) -> NotificationService:
        """Provide notification store domain service."""
        return NotificationService(
            notification_repository=notification_repository,
            notification_settings=notification_settings,
        )

    @provide
    def get_notification_rules(
        self,
        notification_service: NotificationService,
        question_service: QuestionService,
        answer_service: AnswerService,
        transaction_manager: TransactionManager,
        outbox: NotificationOutbox,
        notification_settings: NotificationSettings,
    ) -> NotificationRules:
        """Provide notification rules."""
        return NotificationRules(
            notification_service=notification_service,
            question_service=question_service,
            answer_service=answer_service,
            transaction_manager=transaction_manager,
            outbox=outbox,
            notification_settings=notification_settings,
        )
