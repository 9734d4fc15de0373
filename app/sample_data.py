import pandas as pd


SAMPLE_ROWS = [
    {
        "id": 1,
        "student_id": 11,
        "student_email": "alice@school.test",
        "exercise_id": 101,
        "exercise_title": "Variables",
        "grade": 15,
        "plagiarism_score": 0.10,
        "feedback": "Good start",
        "file_path": "uploads/alice-variables.pdf",
        "submitted_at": "2024-03-01T09:00:00Z",
    },
    {
        "id": 2,
        "student_id": 12,
        "student_email": "bob@school.test",
        "exercise_id": 101,
        "exercise_title": "Variables",
        "grade": 10,
        "plagiarism_score": 0.50,
        "feedback": "Half of it matches another copy",
        "file_path": "uploads/bob-variables.pdf",
        "submitted_at": "2024-03-02T10:30:00Z",
    },
    {
        "id": 3,
        "student_id": 13,
        "student_email": "chloe@school.test",
        "exercise_id": 101,
        "exercise_title": "Variables",
        "grade": 18,
        "plagiarism_score": 0.0,
        "feedback": "Excellent",
        "file_path": "uploads/chloe-variables.pdf",
        "submitted_at": "2024-03-03T14:00:00Z",
    },
    {
        "id": 4,
        "student_id": 11,
        "student_email": "alice@school.test",
        "exercise_id": 103,
        "exercise_title": "Recursion",
        "grade": 13,
        "plagiarism_score": 0.05,
        "feedback": "Base case missing",
        "file_path": "uploads/alice-recursion.pdf",
        "submitted_at": "2024-03-15T08:45:00Z",
    },
    {
        "id": 5,
        "student_id": 12,
        "student_email": "bob@school.test",
        "exercise_id": 102,
        "exercise_title": "Loops",
        "grade": 12,
        "plagiarism_score": 0.30,
        "feedback": "Better",
        "file_path": "uploads/bob-loops.pdf",
        "submitted_at": "2024-03-09T16:20:00Z",
    },
    {
        "id": 6,
        "student_id": 11,
        "student_email": "alice@school.test",
        "exercise_id": 102,
        "exercise_title": "Loops",
        "grade": 17,
        "plagiarism_score": 0.20,
        "feedback": "Clean solution",
        "file_path": "uploads/alice-loops.pdf",
        "submitted_at": "2024-03-08T11:10:00Z",
    },
]

SAMPLE_EXERCISES = [
    {"id": 101, "teacher_id": 1, "title": "Variables", "content": "Declare and print three variables.", "correction": "print(a, b, c)"},
    {"id": 102, "teacher_id": 1, "title": "Loops", "content": "Sum the numbers 1..n with a loop.", "correction": None},
    {"id": 103, "teacher_id": 2, "title": "Recursion", "content": "Write factorial recursively.", "correction": "def f(n): return 1 if n < 2 else n * f(n - 1)"},
]


def load_sample_dataframe() -> pd.DataFrame:
    return pd.DataFrame(SAMPLE_ROWS)
