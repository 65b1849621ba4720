"""
Rule-based sentiment for feedback text.

Scores come from VADER's compound polarity (lexicon + negation, intensifier
and punctuation heuristics), which is already normalised to [-1, 1]. Labels
use fixed cut-offs of +/-0.3, wider than VADER's usual +/-0.05.
"""

from typing import NamedTuple

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

POSITIVE_THRESHOLD = 0.3
NEGATIVE_THRESHOLD = -0.3


class Sentiment(NamedTuple):
    label: str
    score: float


_analyzer = None

def _get_analyzer() -> SentimentIntensityAnalyzer:
    global _analyzer
    if _analyzer is None:
        _analyzer = SentimentIntensityAnalyzer()
    return _analyzer


def label_for_score(score: float) -> str:
    # the thresholds themselves count as neutral
    if score > POSITIVE_THRESHOLD:
        return "positive"
    if score < NEGATIVE_THRESHOLD:
        return "negative"
    return "neutral"


def classify(text: str) -> Sentiment:
    if not text or not text.strip():
        return Sentiment("neutral", 0.0)
    score = float(_get_analyzer().polarity_scores(text)["compound"])
    return Sentiment(label_for_score(score), score)
