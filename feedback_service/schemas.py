from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .models import MAX_ID, MIN_ID

class FeedbackIn(BaseModel):
    user_id: Optional[int] = Field(default=None, ge=MIN_ID, le=MAX_ID)
    username: Optional[str] = None
    role: Optional[str] = Field(default=None, description="guest | user | admin")
    feedback_type: Optional[str] = Field(default=None, description="Free-text category, e.g. 'bug'")
    feedback_text: Optional[str] = None

class FeedbackOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: Optional[int]
    username: str
    role: str
    feedback_type: str
    feedback_text: str
    sentiment_label: str
    sentiment_score: float
    created_at: datetime

class SubmitOut(BaseModel):
    success: bool = True

class DeleteOut(BaseModel):
    success: bool
    message: str

class SentimentCountOut(BaseModel):
    sentiment_label: str
    count: int

class TypeCountOut(BaseModel):
    feedback_type: str
    count: int

class DailySentimentOut(BaseModel):
    date: str
    avg_score: float
