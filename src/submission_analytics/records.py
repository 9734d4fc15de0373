from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Union

import pandas as pd


CANONICAL_COLUMNS = [
    "id",
    "student_id",
    "student_email",
    "exercise_id",
    "exercise_title",
    "grade",
    "plagiarism_score",
    "submitted_at",
    "feedback",
    "file_path",
]

# Carried for display only; aggregation never reads them.
TEXT_COLUMNS = ["feedback", "file_path"]

REQUIRED_CANONICAL = ["student_email", "grade"]

# Record Store payloads come either straight from the API (snake_case) or from
# client-side exports (camelCase).
CAMEL_CASE_ALIASES = {
    "studentId": "student_id",
    "studentEmail": "student_email",
    "exerciseId": "exercise_id",
    "exerciseTitle": "exercise_title",
    "plagiarismScore": "plagiarism_score",
    "submittedAt": "submitted_at",
    "filePath": "file_path",
    "teacherId": "teacher_id",
}

SubmissionsLike = Union[pd.DataFrame, Iterable[Mapping[str, object]]]


@dataclass
class MappingConfig:
    student_email: str
    grade: str
    id: Optional[str] = None
    student_id: Optional[str] = None
    exercise_id: Optional[str] = None
    exercise_title: Optional[str] = None
    plagiarism_score: Optional[str] = None
    submitted_at: Optional[str] = None
    feedback: Optional[str] = None
    file_path: Optional[str] = None

    @classmethod
    def from_dict(cls, mapping: Dict[str, Optional[str]]) -> "MappingConfig":
        for key in REQUIRED_CANONICAL:
            if not mapping.get(key):
                raise ValueError(f"Missing required mapping for '{key}'")
        return cls(
            student_email=mapping.get("student_email", ""),
            grade=mapping.get("grade", ""),
            id=mapping.get("id"),
            student_id=mapping.get("student_id"),
            exercise_id=mapping.get("exercise_id"),
            exercise_title=mapping.get("exercise_title"),
            plagiarism_score=mapping.get("plagiarism_score"),
            submitted_at=mapping.get("submitted_at"),
            feedback=mapping.get("feedback"),
            file_path=mapping.get("file_path"),
        )

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {col: getattr(self, col) for col in CANONICAL_COLUMNS}


@dataclass(frozen=True)
class Exercise:
    """Exercise record as served by the Record Store. Not used by aggregation."""

    id: object
    teacher_id: object
    title: str
    content: str = ""
    correction: Optional[str] = None

    @classmethod
    def from_dict(cls, record: Mapping[str, object]) -> "Exercise":
        data = {CAMEL_CASE_ALIASES.get(key, key): value for key, value in record.items()}
        return cls(
            id=data.get("id"),
            teacher_id=data.get("teacher_id"),
            title=str(data.get("title") or ""),
            content=str(data.get("content") or ""),
            correction=data.get("correction") or None,
        )


def rename_aliases(df: pd.DataFrame) -> pd.DataFrame:
    """Fold camelCase columns into their snake_case names.

    When a frame carries both spellings (records of both styles in one list),
    the two columns are merged row by row so no duplicate column survives.
    """

    merged = df.copy()
    for camel, snake in CAMEL_CASE_ALIASES.items():
        if camel not in merged.columns:
            continue
        if snake in merged.columns:
            merged[snake] = merged[snake].combine_first(merged[camel])
            merged = merged.drop(columns=[camel])
        else:
            merged = merged.rename(columns={camel: snake})
    return merged


def _clean_key(value: object) -> Optional[str]:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    text = str(value).strip()
    return text or None


def needs_mapping(df: pd.DataFrame) -> bool:
    columns = set(rename_aliases(df).columns)
    return not all(col in columns for col in REQUIRED_CANONICAL)


def suggest_mapping(df: pd.DataFrame) -> Dict[str, Optional[str]]:
    def find_column(keywords):
        for col in df.columns:
            header = str(col).lower()
            if any(keyword in header for keyword in keywords):
                return col
        return None

    return {
        "id": find_column(["submission id", "submission_id"]),
        "student_id": find_column(["student id", "student_id", "studentid", "sid"]),
        "student_email": find_column(["email", "mail", "login"]),
        "exercise_id": find_column(["exercise id", "exercise_id", "exerciseid", "assignment id"]),
        "exercise_title": find_column(["title", "exercise", "assignment"]),
        "grade": find_column(["grade", "note", "score", "mark"]),
        "plagiarism_score": find_column(["plagiarism", "plagiat", "similarity"]),
        "submitted_at": find_column(["submitted", "date", "time"]),
        "feedback": find_column(["feedback", "comment"]),
        "file_path": find_column(["file", "path", "upload"]),
    }


def apply_mapping(df: pd.DataFrame, mapping: MappingConfig) -> pd.DataFrame:
    missing = [source for source in mapping.to_dict().values() if source and source not in df.columns]
    if missing:
        raise ValueError(f"Source columns not found: {missing}")

    normalized = pd.DataFrame(index=df.index)
    for canonical, source in mapping.to_dict().items():
        normalized[canonical] = df[source] if source else None

    return ensure_canonical_columns(normalized)


def ensure_canonical_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Return a canonical copy of ``df``.

    Missing columns are added as empty, ``grade`` and ``plagiarism_score``
    become floats (unparseable values turn into NaN) and ``submitted_at``
    becomes a UTC timestamp. Values are never range-checked here; see
    ``invariants.run_invariants`` for that.
    """

    df_copy = rename_aliases(df).copy()
    for col in CANONICAL_COLUMNS:
        if col not in df_copy.columns:
            df_copy[col] = None

    df_copy["student_email"] = df_copy["student_email"].map(_clean_key).astype(object)
    for col in ["exercise_title", *TEXT_COLUMNS]:
        df_copy[col] = df_copy[col].map(lambda v: "" if _clean_key(v) is None else str(v).strip())

    for col in ["grade", "plagiarism_score"]:
        df_copy[col] = pd.to_numeric(df_copy[col], errors="coerce").astype(float)

    df_copy["submitted_at"] = pd.to_datetime(df_copy["submitted_at"], errors="coerce", utc=True, format="mixed")

    return df_copy[CANONICAL_COLUMNS].reset_index(drop=True)


def submissions_frame(submissions: SubmissionsLike) -> pd.DataFrame:
    """Build a canonical DataFrame from a DataFrame or a list of record dicts."""

    if isinstance(submissions, pd.DataFrame):
        return ensure_canonical_columns(submissions)
    return ensure_canonical_columns(pd.DataFrame(list(submissions)))


def submissions_for_student(
    submissions: SubmissionsLike,
    student_email: Optional[str] = None,
    student_id: Optional[object] = None,
) -> pd.DataFrame:
    """Slice the population down to one student's own submissions.

    Either key may be given; when both are, a row must match both. No key
    yields an empty frame.
    """

    data = submissions_frame(submissions)
    if student_email is None and student_id is None:
        return data.iloc[0:0]

    mask = pd.Series(True, index=data.index)
    if student_email is not None:
        mask &= data["student_email"] == _clean_key(student_email)
    if student_id is not None:
        mask &= data["student_id"].astype(str) == str(student_id)
    return data[mask].reset_index(drop=True)


def exercises_for_teacher(exercises: Iterable[Mapping[str, object]], teacher_id: object) -> List[Exercise]:
    parsed = [Exercise.from_dict(record) for record in exercises]
    return [exercise for exercise in parsed if str(exercise.teacher_id) == str(teacher_id)]
