"""
Dashboard aggregates over the feedback table.

Every call runs one GROUP BY statement against the live table, so results
always reflect the latest committed rows.
"""

from sqlalchemy import text
from sqlalchemy.orm import Session


def sentiment_summary(db: Session) -> list[dict]:
    # labels with no rows simply don't show up
    rows = db.execute(text("""
        SELECT sentiment_label, COUNT(*) AS cnt
        FROM feedback
        GROUP BY sentiment_label
    """)).fetchall()
    return [{"sentiment_label": r[0], "count": int(r[1])} for r in rows]


def count_by_type(db: Session) -> list[dict]:
    rows = db.execute(text("""
        SELECT feedback_type, COUNT(*) AS cnt
        FROM feedback
        GROUP BY feedback_type
    """)).fetchall()
    return [{"feedback_type": r[0], "count": int(r[1])} for r in rows]


def average_sentiment_over_time(db: Session) -> list[dict]:
    rows = db.execute(text("""
        SELECT DATE(created_at) AS day, AVG(sentiment_score) AS avg_score
        FROM feedback
        GROUP BY DATE(created_at)
        ORDER BY DATE(created_at)
    """)).fetchall()
    # sqlite hands back 'YYYY-MM-DD' strings, other engines date objects
    return [{"date": str(r[0]), "avg_score": float(r[1] or 0)} for r in rows]
