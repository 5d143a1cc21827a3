from .stats import (
    ClubStatistics,
    club_statistics,
    overall_shot_stats,
    round_summary,
    score_type_distribution,
    scoring_vs_hole_rank,
)

__all__ = [
    "ClubStatistics",
    "club_statistics",
    "overall_shot_stats",
    "round_summary",
    "score_type_distribution",
    "scoring_vs_hole_rank",
]
