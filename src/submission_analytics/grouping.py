from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .records import SubmissionsLike, submissions_frame


@dataclass
class StudentAccumulator:
    """Parallel per-student samples, appended in submission processing order."""

    grades: List[float] = field(default_factory=list)
    exercise_titles: List[str] = field(default_factory=list)
    plagiarism_scores: List[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.grades)


def group_submissions(submissions: SubmissionsLike) -> Dict[Optional[str], StudentAccumulator]:
    """Partition submissions by ``student_email``.

    Keys keep first-occurrence order. Rows without an email are collected
    under the ``None`` key instead of being dropped. The caller's data is
    never mutated; the reducer walks a canonical copy.
    """

    data = submissions_frame(submissions)
    groups: Dict[Optional[str], StudentAccumulator] = {}
    for row in data.itertuples(index=False):
        key = row.student_email if isinstance(row.student_email, str) else None
        acc = groups.setdefault(key, StudentAccumulator())
        acc.grades.append(row.grade)
        acc.exercise_titles.append(row.exercise_title)
        acc.plagiarism_scores.append(row.plagiarism_score)
    return groups
