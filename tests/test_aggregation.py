from concurrent.futures import ThreadPoolExecutor

import pandas as pd
import pytest

from submission_analytics.aggregation import aggregate


def _fingerprint(snapshot):
    return (
        snapshot.comparison.to_dict(),
        snapshot.cohort_baseline,
        {key: (stat.average_grade, stat.average_plagiarism_percent, tuple(stat.exercise_titles), stat.submission_count) for key, stat in snapshot.statistics.items()},
        None if snapshot.personal is None else snapshot.personal.to_dict(),
    )


def test_teacher_view_has_no_personal_slice(sample_df):
    snapshot = aggregate(sample_df)
    assert snapshot.personal is None
    assert snapshot.personal_average is None
    assert snapshot.cohort_baseline == pytest.approx(85 / 6)
    assert snapshot.comparison.labels == list(snapshot.statistics)
    assert len(snapshot.summary) == 3


def test_student_view_slices_by_email(sample_df):
    snapshot = aggregate(sample_df, student_email="bob@school.test")
    assert snapshot.personal_average == pytest.approx(11)
    assert snapshot.personal.values_for("My grades") == [10, 12]
    assert snapshot.personal.values_for("Class average") == pytest.approx([85 / 6, 85 / 6])
    assert len(snapshot.student_submissions) == 2
    # the cohort statistics still cover everyone
    assert len(snapshot.statistics) == 3


def test_student_view_slices_by_id(sample_df):
    snapshot = aggregate(sample_df, student_id=13)
    assert snapshot.personal.values_for("My grades") == [18]


def test_student_without_submissions_gets_empty_series(sample_df):
    snapshot = aggregate(sample_df, student_email="nobody@school.test")
    assert snapshot.personal.empty
    assert snapshot.personal_average == 0


def test_empty_population():
    snapshot = aggregate([])
    assert snapshot.comparison.labels == []
    assert snapshot.cohort_baseline == 0
    assert snapshot.statistics == {}
    assert snapshot.summary.empty


def test_aggregate_is_deterministic(sample_df):
    first = aggregate(sample_df, student_email="alice@school.test")
    second = aggregate(sample_df, student_email="alice@school.test")
    assert _fingerprint(first) == _fingerprint(second)


def test_aggregate_concurrent_calls_agree(sample_df):
    expected = _fingerprint(aggregate(sample_df, student_email="alice@school.test"))
    before = sample_df.copy()

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: _fingerprint(aggregate(sample_df, student_email="alice@school.test")), range(32)))

    assert all(result == expected for result in results)
    pd.testing.assert_frame_equal(sample_df, before)
