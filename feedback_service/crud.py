from sqlalchemy.orm import Session

from shared.errors import InvalidInput
from .models import Feedback, ROLES, MAX_ID, MIN_ID
from .sentiment import Sentiment


def _parse_id(raw) -> int:
    if isinstance(raw, bool):
        raise ValueError(raw)
    value = raw if isinstance(raw, int) else int(str(raw).strip())
    if not MIN_ID <= value <= MAX_ID:
        raise ValueError(raw)
    return value


def insert_feedback(
    db: Session,
    *,
    user_id: int | None,
    username: str,
    role: str,
    feedback_type: str,
    feedback_text: str,
    sentiment: Sentiment,
) -> Feedback:
    if not feedback_text:
        raise InvalidInput("Feedback text is required")
    if role not in ROLES:
        raise InvalidInput(f"Invalid role: {role!r}")
    if user_id is not None and not MIN_ID <= user_id <= MAX_ID:
        raise InvalidInput("Invalid user ID")

    f = Feedback(
        user_id=user_id,
        username=username,
        role=role,
        feedback_type=feedback_type,
        feedback_text=feedback_text,
        sentiment_label=sentiment.label,
        sentiment_score=sentiment.score,
    )
    db.add(f)
    db.commit()
    db.refresh(f)
    return f


def delete_feedback(db: Session, feedback_id) -> bool:
    """
    Delete one feedback row. Returns False when no row had that id.
    Raises InvalidInput if the id is not an integer.
    """
    try:
        fid = _parse_id(feedback_id)
    except (TypeError, ValueError):
        raise InvalidInput("Invalid feedback ID.")

    deleted = db.query(Feedback).filter(Feedback.id == fid).delete(synchronize_session=False)
    db.commit()
    return deleted > 0


def list_feedback(db: Session) -> list[Feedback]:
    # id breaks ties between rows stamped in the same second
    return (
        db.query(Feedback)
        .order_by(Feedback.created_at.desc(), Feedback.id.desc())
        .all()
    )


def list_feedback_for_user(db: Session, user_id) -> list[Feedback]:
    try:
        uid = _parse_id(user_id)
    except (TypeError, ValueError):
        return []

    return (
        db.query(Feedback)
        .filter(Feedback.user_id == uid)
        .order_by(Feedback.created_at.desc(), Feedback.id.desc())
        .all()
    )
