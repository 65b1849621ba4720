from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Float, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column
from shared.database import Base

ROLES = ("guest", "user", "admin")

# signed 64-bit INTEGER range
MAX_ID = 2**63 - 1
MIN_ID = -(2**63)

class Feedback(Base):
    __tablename__ = "feedback"
    __table_args__ = (
        CheckConstraint("role IN ('guest', 'user', 'admin')", name="ck_feedback_role"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # guests have no account; not enforced against users.id on insert
    user_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    username: Mapped[str] = mapped_column(String(255), default="")  # snapshot, may diverge from users.username
    role: Mapped[str] = mapped_column(String(20))
    feedback_type: Mapped[str] = mapped_column(String(100), default="")
    feedback_text: Mapped[str] = mapped_column(Text)
    sentiment_label: Mapped[str] = mapped_column(String(20))  # positive | neutral | negative
    sentiment_score: Mapped[float] = mapped_column(Float)     # -1.0 .. 1.0
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.current_timestamp())
