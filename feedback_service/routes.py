import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.database import db_dependency
from shared.errors import InvalidInput, NotFound, ServiceError, StoreFailure
from .schemas import (
    FeedbackIn, FeedbackOut, SubmitOut, DeleteOut,
    SentimentCountOut, TypeCountOut, DailySentimentOut,
)
from .crud import insert_feedback, delete_feedback, list_feedback, list_feedback_for_user
from .analytics import sentiment_summary, count_by_type, average_sentiment_over_time
from .sentiment import classify

logger = logging.getLogger("feedback-service")


def _store_failure(db: Session, message: str) -> StoreFailure:
    db.rollback()
    logger.exception(message)
    return StoreFailure(message)


def _delete_failure(err: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=err.status_code, content={"success": False, "message": err.message})


def build_router(SessionLocal) -> APIRouter:
    router = APIRouter()
    get_db = db_dependency(SessionLocal)

    @router.post("/feedback", response_model=SubmitOut)
    def submit(payload: FeedbackIn, db: Session = Depends(get_db)):
        if not payload.feedback_text or not payload.role or (not payload.username and not payload.user_id):
            raise InvalidInput("Missing feedback fields")

        sentiment = classify(payload.feedback_text)
        try:
            insert_feedback(
                db,
                user_id=payload.user_id or None,
                username=payload.username or "",
                role=payload.role,
                feedback_type=payload.feedback_type or "",
                feedback_text=payload.feedback_text,
                sentiment=sentiment,
            )
        except SQLAlchemyError:
            raise _store_failure(db, "Failed to save feedback")
        return SubmitOut()

    # Admin view
    @router.get("/all-feedback", response_model=list[FeedbackOut])
    def all_feedback(db: Session = Depends(get_db)):
        try:
            return list_feedback(db)
        except SQLAlchemyError:
            raise _store_failure(db, "DB error fetching feedbacks")

    @router.get("/feedback/user/{user_id}", response_model=list[FeedbackOut])
    def user_feedback(user_id: str, db: Session = Depends(get_db)):
        try:
            return list_feedback_for_user(db, user_id)
        except SQLAlchemyError:
            raise _store_failure(db, "DB error fetching user feedback")

    # Dashboard charts
    @router.get("/sentiment-summary", response_model=list[SentimentCountOut])
    def get_sentiment_summary(db: Session = Depends(get_db)):
        try:
            return sentiment_summary(db)
        except SQLAlchemyError:
            raise _store_failure(db, "DB error fetching sentiment summary")

    @router.get("/feedback-count-by-type", response_model=list[TypeCountOut])
    def get_count_by_type(db: Session = Depends(get_db)):
        try:
            return count_by_type(db)
        except SQLAlchemyError:
            raise _store_failure(db, "DB error fetching feedback count by type")

    @router.get("/avg-sentiment-over-time", response_model=list[DailySentimentOut])
    def get_avg_sentiment_over_time(db: Session = Depends(get_db)):
        try:
            return average_sentiment_over_time(db)
        except SQLAlchemyError:
            raise _store_failure(db, "DB error fetching avg sentiment over time")

    @router.delete("/delete-feedback/{feedback_id}", response_model=DeleteOut)
    def remove(feedback_id: str, db: Session = Depends(get_db)):
        try:
            deleted = delete_feedback(db, feedback_id)
        except InvalidInput as e:
            return _delete_failure(e)
        except SQLAlchemyError:
            return _delete_failure(_store_failure(db, "Failed to delete feedback."))

        if not deleted:
            return _delete_failure(NotFound("Feedback not found."))
        return DeleteOut(success=True, message="Feedback deleted successfully.")

    return router
