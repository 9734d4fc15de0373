import math

import pandas as pd
import pytest

from submission_analytics.metrics import (
    average_grade,
    average_plagiarism_percent,
    cohort_average_grade,
    format_grade,
    overall_summary,
    personal_average,
    progress_column,
    progress_value,
    student_statistics,
    student_summary,
    submissions_table,
)


def test_empty_inputs_default_to_zero():
    assert average_grade([]) == 0
    assert average_plagiarism_percent([]) == 0
    assert cohort_average_grade([]) == 0
    assert personal_average(pd.DataFrame()) == 0


def test_two_students_scenario(scenario_records):
    stats = student_statistics(scenario_records)

    a = stats["a@x"]
    assert a.average_grade == pytest.approx(16)
    assert a.average_plagiarism_percent == pytest.approx(15)
    assert a.exercise_titles == ["E1", "E2"]
    assert a.submission_count == 2

    b = stats["b@x"]
    assert b.average_grade == pytest.approx(10)
    assert b.average_plagiarism_percent == pytest.approx(50)

    assert cohort_average_grade(scenario_records) == pytest.approx(14)


def test_plagiarism_percent_is_not_clamped():
    assert average_plagiarism_percent([1.5, 1.5]) == pytest.approx(150)
    assert average_plagiarism_percent([-0.2]) == pytest.approx(-20)


def test_out_of_range_grades_propagate():
    assert average_grade([25, 35]) == pytest.approx(30)


def test_missing_grades_are_skipped_not_coerced():
    assert average_grade([12, None, 14]) == pytest.approx(13)
    assert average_grade([None, float("nan")]) == 0.0


def test_submission_counts_cover_population(sample_df):
    stats = student_statistics(sample_df)
    assert sum(stat.submission_count for stat in stats.values()) == len(sample_df)


def test_personal_average_restricted_to_one_student(sample_df):
    alice = sample_df[sample_df["student_email"] == "alice@school.test"]
    assert personal_average(alice) == pytest.approx(15)
    assert cohort_average_grade(sample_df) == pytest.approx(85 / 6)


def test_student_summary_rows_follow_grouping_order(sample_df):
    summary = student_summary(sample_df)
    assert list(summary["student_email"]) == ["alice@school.test", "bob@school.test", "chloe@school.test"]

    bob = summary[summary["student_email"] == "bob@school.test"].iloc[0]
    assert bob["submissions"] == 2
    assert bob["average_grade"] == pytest.approx(11)
    assert bob["average_plagiarism_percent"] == pytest.approx(40)
    assert bob["exercises"] == "Variables, Loops"


def test_student_summary_empty_has_columns():
    summary = student_summary([])
    assert summary.empty
    assert "average_grade" in summary.columns


def test_overall_summary(sample_df):
    summary = overall_summary(sample_df)
    assert summary["rows"] == 6
    assert summary["students"] == 3
    assert summary["exercises"] == 3
    assert summary["cohort_average_grade"] == pytest.approx(85 / 6)
    assert summary["average_plagiarism_percent"] == pytest.approx(115 / 6)


def test_progress_mapping_is_linear_and_unclamped():
    assert progress_value(0) == 0
    assert progress_value(14) == 70
    assert progress_value(20) == 100
    assert progress_value(24) == 120
    assert progress_value(-2) == -10


def test_progress_column(sample_df):
    progress = progress_column(sample_df)
    assert list(progress) == [75, 50, 90, 65, 60, 85]
    assert progress.name == "progress"


def test_format_grade_rounds_for_display_only():
    value = 85 / 6
    assert format_grade(value) == "14.17/20"
    assert not math.isclose(value, 14.17)


def test_submissions_table_lists_every_submission_newest_first(sample_df):
    table = submissions_table(sample_df)
    assert len(table) == len(sample_df)
    assert list(table["grade"]) == [13, 12, 17, 18, 10, 15]
    first = table.iloc[0]
    assert first["student_email"] == "alice@school.test"
    assert first["feedback"] == "Base case missing"
    assert first["file_path"] == "uploads/alice-recursion.pdf"
    assert first["plagiarism_percent"] == pytest.approx(5)
