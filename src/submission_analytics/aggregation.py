"""Single entry point shared by the student and teacher dashboards.

Both views call :func:`aggregate` on the full population they loaded. The
teacher analytics view leaves the student slice empty; the student view passes
its own email or id to also get the personal-vs-class series.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import pandas as pd

from .metrics import StudentStatistic, cohort_average_grade, personal_average, student_statistics, student_summary
from .records import SubmissionsLike, submissions_for_student, submissions_frame
from .series import SeriesBundle, cross_student_series, personal_vs_cohort_series

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalyticsSnapshot:
    statistics: Dict[Optional[str], StudentStatistic]
    summary: pd.DataFrame
    cohort_baseline: float
    comparison: SeriesBundle
    personal: Optional[SeriesBundle] = None
    personal_average: Optional[float] = None
    student_submissions: Optional[pd.DataFrame] = None


def aggregate(
    submissions: SubmissionsLike,
    student_email: Optional[str] = None,
    student_id: Optional[object] = None,
) -> AnalyticsSnapshot:
    data = submissions_frame(submissions)
    statistics = student_statistics(data)
    logger.debug("Aggregated %d submissions into %d student groups", len(data), len(statistics))

    personal = None
    personal_avg = None
    own = None
    if student_email is not None or student_id is not None:
        own = submissions_for_student(data, student_email=student_email, student_id=student_id)
        personal = personal_vs_cohort_series(own, data)
        personal_avg = personal_average(own)

    return AnalyticsSnapshot(
        statistics=statistics,
        summary=student_summary(data),
        cohort_baseline=cohort_average_grade(data),
        comparison=cross_student_series(data),
        personal=personal,
        personal_average=personal_avg,
        student_submissions=own,
    )
