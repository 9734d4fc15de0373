import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

import pandas as pd

from .constants import GRADE_MAX, PERCENT_SCALE, PROGRESS_SCALE
from .grouping import group_submissions
from .records import SubmissionsLike, submissions_frame

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = ["student_email", "submissions", "average_grade", "average_plagiarism_percent", "exercises"]


@dataclass(frozen=True)
class StudentStatistic:
    key: Optional[str]
    average_grade: float
    average_plagiarism_percent: float
    exercise_titles: List[str] = field(default_factory=list)
    submission_count: int = 0


def _mean_or_zero(samples: Iterable[float]) -> float:
    values = pd.Series(list(samples), dtype=float)
    missing = int(values.isna().sum())
    if missing:
        logger.debug("Skipping %d missing samples out of %d", missing, len(values))
    mean = values.mean()
    return float(mean) if pd.notna(mean) else 0.0


def average_grade(samples: Iterable[float]) -> float:
    """Arithmetic mean of grade samples, 0.0 for an empty sequence."""
    return _mean_or_zero(samples)


def average_plagiarism_percent(samples: Iterable[float]) -> float:
    """Mean plagiarism fraction expressed as a percentage. Not clamped."""
    return _mean_or_zero(samples) * PERCENT_SCALE


def cohort_average_grade(all_submissions: SubmissionsLike) -> float:
    data = submissions_frame(all_submissions)
    return average_grade(data["grade"])


def personal_average(student_submissions: SubmissionsLike) -> float:
    data = submissions_frame(student_submissions)
    return average_grade(data["grade"])


def student_statistics(submissions: SubmissionsLike) -> Dict[Optional[str], StudentStatistic]:
    """Per-student statistics keyed by email, in grouping key order."""

    stats: Dict[Optional[str], StudentStatistic] = {}
    for key, acc in group_submissions(submissions).items():
        stats[key] = StudentStatistic(
            key=key,
            average_grade=average_grade(acc.grades),
            average_plagiarism_percent=average_plagiarism_percent(acc.plagiarism_scores),
            exercise_titles=list(acc.exercise_titles),
            submission_count=len(acc),
        )
    return stats


def student_summary(submissions: SubmissionsLike) -> pd.DataFrame:
    rows = []
    for key, stat in student_statistics(submissions).items():
        rows.append(
            {
                "student_email": key,
                "submissions": stat.submission_count,
                "average_grade": stat.average_grade,
                "average_plagiarism_percent": stat.average_plagiarism_percent,
                "exercises": ", ".join(title for title in stat.exercise_titles if title),
            }
        )

    if not rows:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def submissions_table(submissions: SubmissionsLike) -> pd.DataFrame:
    """Read-only listing of every submission, newest first, for the teacher view."""

    data = submissions_frame(submissions)
    listing = data.sort_values(by="submitted_at", ascending=False, kind="mergesort", na_position="last")
    return pd.DataFrame(
        {
            "student_email": listing["student_email"],
            "exercise_title": listing["exercise_title"],
            "file_path": listing["file_path"],
            "grade": listing["grade"],
            "feedback": listing["feedback"],
            "plagiarism_percent": listing["plagiarism_score"] * PERCENT_SCALE,
            "submitted_at": listing["submitted_at"],
        }
    ).reset_index(drop=True)


def overall_summary(submissions: SubmissionsLike) -> Dict[str, float]:
    data = submissions_frame(submissions)
    return {
        "rows": len(data),
        "students": len(group_submissions(data)),
        "exercises": data["exercise_title"].replace("", pd.NA).nunique(),
        "cohort_average_grade": average_grade(data["grade"]),
        "average_plagiarism_percent": average_plagiarism_percent(data["plagiarism_score"]),
    }


def progress_value(grade: float) -> float:
    """Map a 0-20 grade onto a 0-100 progress value. Out-of-range grades pass through."""
    return grade * PROGRESS_SCALE


def progress_column(submissions: SubmissionsLike) -> pd.Series:
    data = submissions_frame(submissions)
    return (data["grade"] * PROGRESS_SCALE).rename("progress")


def format_grade(value: float) -> str:
    return f"{value:.2f}/{GRADE_MAX:g}"
