"""Response records of the review endpoint.

Immutable pydantic models; extra keys in a payload are ignored.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict

from steam_review_api.core import Language, Minutes, UnixTimestamp


class Author(BaseModel):
    """Reviewer summary attached to every review."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    steamid: str
    num_games_owned: int = 0
    num_reviews: int = 0
    playtime_forever: Minutes
    playtime_last_two_weeks: Minutes
    # Absent for reviews written before Steam tracked it
    playtime_at_review: Optional[Minutes] = None
    last_played: UnixTimestamp


class Review(BaseModel):
    """Single user review."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    recommendationid: str
    author: Author
    language: Language
    review: str
    timestamp_created: UnixTimestamp
    timestamp_updated: UnixTimestamp
    voted_up: bool
    votes_up: int = 0
    votes_funny: int = 0
    comment_count: int = 0
    steam_purchase: bool = False
    received_for_free: bool = False
    written_during_early_access: bool = False
