"""Aggregate statistics across stored practice results."""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .models.practice_result import PracticeResult

RECENT_RESULTS_LIMIT = 10
WEEK_DAYS = 7


@dataclass(frozen=True)
class PracticeStatistics:
    total_sessions: int
    total_duration: float
    average_score: float
    today_sessions: int
    today_duration: float
    week_sessions: int
    week_duration: float
    recent_results: Tuple[PracticeResult, ...] = field(default=())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalSessions": self.total_sessions,
            "totalDuration": self.total_duration,
            "formattedTotalDuration": format_duration(self.total_duration),
            "averageScore": self.average_score,
            "todaySessions": self.today_sessions,
            "todayDuration": self.today_duration,
            "weekSessions": self.week_sessions,
            "weekDuration": self.week_duration,
            "recentResultIds": [str(r.id) for r in self.recent_results],
        }


def format_duration(seconds: float) -> str:
    """Format seconds as "1h 5m" or "12m"."""
    total = int(seconds)
    hours = total // 3600
    minutes = (total % 3600) // 60
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def sort_newest_first(results: Iterable[PracticeResult]) -> List[PracticeResult]:
    return sorted(results, key=lambda r: r.created_at, reverse=True)


def results_for_material(results: Iterable[PracticeResult], material_id: uuid.UUID) -> List[PracticeResult]:
    return [r for r in results if r.material_id == material_id]


def average_score(results: Iterable[PracticeResult]) -> Optional[float]:
    """Mean overall score, or None when there are no results."""
    scores = [r.overall_score for r in results]
    if not scores:
        return None
    return sum(scores) / len(scores)


def calculate_statistics(
    results: Iterable[PracticeResult],
    now: Optional[datetime] = None,
) -> PracticeStatistics:
    """Summarize practice activity overall, today, and over the last week.

    "Today" starts at midnight of ``now``'s day; the week window starts seven
    days before that midnight.

    Args:
        results: Results in any order
        now: Reference time (default: current UTC time; naive values are read as UTC)

    Returns:
        PracticeStatistics with up to ten most recent results
    """
    ordered = sort_newest_first(results)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    start_of_today = now.replace(hour=0, minute=0, second=0, microsecond=0)
    week_ago = start_of_today - timedelta(days=WEEK_DAYS)

    today = [r for r in ordered if start_of_today <= r.created_at < start_of_today + timedelta(days=1)]
    week = [r for r in ordered if r.created_at >= week_ago]

    return PracticeStatistics(
        total_sessions=len(ordered),
        total_duration=sum(r.recording.duration for r in ordered),
        average_score=average_score(ordered) or 0.0,
        today_sessions=len(today),
        today_duration=sum(r.recording.duration for r in today),
        week_sessions=len(week),
        week_duration=sum(r.recording.duration for r in week),
        recent_results=tuple(ordered[:RECENT_RESULTS_LIMIT]),
    )
