from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringConfig:
    """
    Dish scoring weights.

    A liked ingredient adds ``like_weight``, a disliked one adds
    ``dislike_weight``. Any avoided ingredient pins the dish to
    ``avoid_score`` no matter what else matched.
    """

    like_weight: int = 2
    dislike_weight: int = -1
    avoid_score: int = -999


DEFAULT_SCORING_CONFIG = ScoringConfig()
