"""SQLAlchemy table definitions for StackIt.

These match the schema created by the Alembic migrations. Users live with the
identity provider, so user_id columns carry no foreign key.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False),
    Column("user_id", UUID, nullable=False),
    # FK to answers is added in the migration (circular reference)
    Column("accepted_answer_id", UUID, nullable=True),
    Column("is_answered", Boolean, nullable=False, server_default="false"),
    Column("votes_count", Integer, nullable=False, server_default="0"),
    Column("answers_count", Integer, nullable=False, server_default="0"),
    Column("views_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "is_answered = (accepted_answer_id IS NOT NULL)",
        name="answered_iff_accepted",
    ),
)

Index("idx_questions_user_id", questions_table.c.user_id)
Index("idx_questions_created_at", questions_table.c.created_at.desc())

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, nullable=False),
    Column("content", Text, nullable=False),
    Column("is_accepted", Boolean, nullable=False, server_default="false"),
    Column("votes_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_answers_question_id", answers_table.c.question_id)
Index("idx_answers_user_id", answers_table.c.user_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "answer_id", UUID, ForeignKey("answers.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "(question_id IS NULL) <> (answer_id IS NULL)",
        name="comment_single_target",
    ),
)

Index("idx_comments_question_id", comments_table.c.question_id)
Index("idx_comments_answer_id", comments_table.c.answer_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, nullable=False),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "answer_id", UUID, ForeignKey("answers.id", ondelete="CASCADE"), nullable=True
    ),
    Column("vote_type", SmallInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("vote_type IN (1, -1)", name="vote_type_valid"),
    CheckConstraint(
        "(question_id IS NULL) <> (answer_id IS NULL)",
        name="vote_single_target",
    ),
    # NULLs are distinct, so each constraint only bites for its own target kind
    UniqueConstraint("user_id", "question_id", name="unique_question_vote"),
    UniqueConstraint("user_id", "answer_id", name="unique_answer_vote"),
)

Index("idx_votes_user_id", votes_table.c.user_id)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    # Insertion order, breaks created_at ties when listing
    Column("seq", BigInteger, Identity(always=True), nullable=False, unique=True),
    Column("user_id", UUID, nullable=False),
    Column(
        "type",
        Enum(
            "answer",
            "accepted",
            "vote",
            "comment_question",
            "comment_answer",
            name="notification_type",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("title", String(255), nullable=False),
    Column("message", Text, nullable=False),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "answer_id", UUID, ForeignKey("answers.id", ondelete="CASCADE"), nullable=True
    ),
    Column("read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "type NOT IN ('comment_question', 'comment_answer') "
        "OR (question_id IS NULL) <> (answer_id IS NULL)",
        name="comment_notification_single_target",
    ),
)

Index(
    "idx_notifications_user_created",
    notifications_table.c.user_id,
    notifications_table.c.created_at.desc(),
)
Index(
    "idx_notifications_user_unread",
    notifications_table.c.user_id,
    postgresql_where=notifications_table.c.read.is_(False),
)
