import pandas as pd
import pytest

from app.sample_data import SAMPLE_EXERCISES, load_sample_dataframe


@pytest.fixture()
def sample_df():
    return load_sample_dataframe()


@pytest.fixture()
def sample_exercises():
    return list(SAMPLE_EXERCISES)


@pytest.fixture()
def scenario_records():
    return [
        {"student_email": "a@x", "exercise_title": "E1", "grade": 15, "plagiarism_score": 0.1, "submitted_at": "2024-01-01"},
        {"student_email": "a@x", "exercise_title": "E2", "grade": 17, "plagiarism_score": 0.2, "submitted_at": "2024-01-02"},
        {"student_email": "b@x", "exercise_title": "E1", "grade": 10, "plagiarism_score": 0.5, "submitted_at": "2024-01-03"},
    ]


@pytest.fixture()
def sample_csv_path(tmp_path):
    df = load_sample_dataframe()
    file_path = tmp_path / "sample.csv"
    df.to_csv(file_path, index=False)
    return file_path
