from dataclasses import dataclass, field
from typing import Dict, List

import pandas as pd

from .constants import (
    AVERAGE_GRADE_SERIES,
    AVERAGE_PLAGIARISM_SERIES,
    CLASS_AVERAGE_SERIES,
    DATE_LABEL_FORMAT,
    MISSING_KEY_LABEL,
    PERSONAL_GRADES_SERIES,
)
from .metrics import cohort_average_grade, student_statistics
from .records import SubmissionsLike, submissions_frame


@dataclass(frozen=True)
class ChartSeries:
    name: str
    values: List[float] = field(default_factory=list)


@dataclass(frozen=True)
class SeriesBundle:
    """Chart-ready x-axis labels plus value arrays of the same length."""

    labels: List[str] = field(default_factory=list)
    series: List[ChartSeries] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.labels

    def values_for(self, name: str) -> List[float]:
        for item in self.series:
            if item.name == name:
                return item.values
        raise KeyError(name)

    def to_dict(self) -> Dict[str, object]:
        return {
            "labels": list(self.labels),
            "series": [{"name": item.name, "values": list(item.values)} for item in self.series],
        }

    def to_frame(self) -> pd.DataFrame:
        columns = {"label": list(self.labels)}
        for item in self.series:
            columns[item.name] = list(item.values)
        return pd.DataFrame(columns)


def cross_student_series(submissions: SubmissionsLike) -> SeriesBundle:
    """Average grade and average plagiarism per student, one x position per email."""

    stats = student_statistics(submissions)
    labels = [key if key is not None else MISSING_KEY_LABEL for key in stats]
    return SeriesBundle(
        labels=labels,
        series=[
            ChartSeries(AVERAGE_GRADE_SERIES, [stat.average_grade for stat in stats.values()]),
            ChartSeries(AVERAGE_PLAGIARISM_SERIES, [stat.average_plagiarism_percent for stat in stats.values()]),
        ],
    )


def personal_vs_cohort_series(student_submissions: SubmissionsLike, cohort_submissions: SubmissionsLike) -> SeriesBundle:
    """A student's grades over time against the class average.

    The class average is a flat reference line: the baseline of the whole
    cohort is computed once and repeated for every x position, so both
    series have the same length. It is not a per-date average.
    """

    student = submissions_frame(student_submissions)
    ordered = student.sort_values(by="submitted_at", kind="mergesort", na_position="last")
    baseline = cohort_average_grade(cohort_submissions)

    labels = [ts.strftime(DATE_LABEL_FORMAT) if pd.notna(ts) else "" for ts in ordered["submitted_at"]]
    grades = [float(grade) for grade in ordered["grade"]]
    return SeriesBundle(
        labels=labels,
        series=[
            ChartSeries(PERSONAL_GRADES_SERIES, grades),
            ChartSeries(CLASS_AVERAGE_SERIES, [baseline] * len(grades)),
        ],
    )
