from typing import Dict, List

import pandas as pd

from .constants import GRADE_MAX, GRADE_MIN
from .records import ensure_canonical_columns, rename_aliases

REQUIRED_COLUMNS = ["student_email", "grade", "plagiarism_score", "submitted_at"]


def check_required_columns(df: pd.DataFrame) -> Dict[str, bool]:
    columns = set(rename_aliases(df).columns)
    return {col: col in columns for col in REQUIRED_COLUMNS}


def check_missing_emails(df: pd.DataFrame) -> int:
    return int(df["student_email"].isna().sum())


def check_missing_grades(df: pd.DataFrame) -> int:
    return int(df["grade"].isna().sum())


def check_grade_range(df: pd.DataFrame) -> int:
    grades = df["grade"]
    return int(((grades < GRADE_MIN) | (grades > GRADE_MAX)).sum())


def check_plagiarism_range(df: pd.DataFrame) -> int:
    scores = df["plagiarism_score"]
    return int(((scores < 0) | (scores > 1)).sum())


def check_missing_timestamps(df: pd.DataFrame) -> int:
    return int(df["submitted_at"].isna().sum())


def run_invariants(df: pd.DataFrame) -> List[Dict[str, object]]:
    """Report data-quality problems without altering any value.

    Aggregation itself accepts whatever it is given; callers wanting strict
    input run this first and decide what to do with failing checks.
    """

    results = []

    required = check_required_columns(df)
    missing_required = [col for col, present in required.items() if not present]
    results.append(
        {
            "name": "required_columns",
            "ok": len(missing_required) == 0,
            "detail": ", ".join(missing_required) if missing_required else "all present",
        }
    )

    data = ensure_canonical_columns(df)

    missing_emails = check_missing_emails(data)
    results.append({"name": "missing_emails", "ok": missing_emails == 0, "detail": missing_emails})

    missing_grades = check_missing_grades(data)
    results.append({"name": "missing_grades", "ok": missing_grades == 0, "detail": missing_grades})

    bad_grades = check_grade_range(data)
    results.append({"name": "grade_range_violations", "ok": bad_grades == 0, "detail": bad_grades})

    bad_scores = check_plagiarism_range(data)
    results.append({"name": "plagiarism_range_violations", "ok": bad_scores == 0, "detail": bad_scores})

    missing_ts = check_missing_timestamps(data)
    results.append({"name": "missing_timestamps", "ok": missing_ts == 0, "detail": missing_ts})

    return results
