"""Streamlit dashboards for submission analytics.

A thin presentation layer: it loads a Record Store export, keeps view state in
``st.session_state`` and renders what ``submission_analytics.aggregation``
returns for the student view and the teacher analytics view.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import pandas as pd
import streamlit as st

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (ROOT, SRC):
    path_str = str(path)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)

from app.sample_data import SAMPLE_EXERCISES, load_sample_dataframe  # noqa: E402
from app.state import ViewState  # noqa: E402
from submission_analytics.aggregation import aggregate  # noqa: E402
from submission_analytics.constants import MISSING_KEY_LABEL  # noqa: E402
from submission_analytics.invariants import run_invariants  # noqa: E402
from submission_analytics.io import load_submissions  # noqa: E402
from submission_analytics.metrics import format_grade, progress_value, submissions_table  # noqa: E402
from submission_analytics.plots import comparison_bar, performance_line  # noqa: E402
from submission_analytics.records import exercises_for_teacher, submissions_frame  # noqa: E402

st.set_page_config(page_title="Submission Analytics", layout="wide", page_icon="📈")

LOG_LEVEL_ENV = "SUBMISSION_ANALYTICS_LOG_LEVEL"

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    logging.basicConfig(
        level=os.environ.get(LOG_LEVEL_ENV, "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _init_state() -> None:
    defaults = {
        "view_state": ViewState(),
        "submissions": None,
        "source_label": None,
    }
    for key, val in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = val


def _view_state() -> ViewState:
    return st.session_state["view_state"]


def _load_source() -> Optional[pd.DataFrame]:
    st.sidebar.subheader("Submissions")
    upload = st.sidebar.file_uploader("Record Store export", type=["csv", "json"])

    if st.sidebar.button("Load sample data"):
        st.session_state["submissions"] = submissions_frame(load_sample_dataframe())
        st.session_state["source_label"] = "Sample data"

    if upload is not None and st.session_state.get("source_label") != upload.name:
        state = _view_state()
        state.loading = True
        try:
            normalized, _, _ = load_submissions(upload)
            st.session_state["submissions"] = normalized
            st.session_state["source_label"] = upload.name
            state.clear_message()
        except ValueError as exc:
            logger.warning("Could not load %s: %s", upload.name, exc)
            state.notify(f"Unable to load submissions: {exc}", error=True)
        finally:
            state.loading = False

    return st.session_state.get("submissions")


def _render_message() -> None:
    state = _view_state()
    if not state.message:
        return
    if state.is_error:
        st.error(state.message)
    else:
        st.success(state.message)


def _render_quality(df: pd.DataFrame) -> None:
    results = run_invariants(df)
    failing = [res for res in results if not res["ok"]]
    if not failing:
        return
    with st.expander(f"Data quality: {len(failing)} check(s) flagged"):
        res_df = pd.DataFrame(results)
        res_df.loc[:, "detail"] = res_df["detail"].astype(str)
        st.dataframe(res_df, use_container_width=True)


def _render_student_view(df: pd.DataFrame) -> None:
    emails = sorted(email for email in df["student_email"].dropna().unique())
    if not emails:
        st.info("No students in this dataset yet.")
        return

    email = st.selectbox("Signed in as", options=emails)
    snapshot = aggregate(df, student_email=email)

    st.subheader("Performance tracking")
    if snapshot.personal is None or snapshot.personal.empty:
        st.info("No submissions yet.")
    else:
        st.plotly_chart(performance_line(snapshot.personal), use_container_width=True)
        left, right = st.columns(2)
        left.metric("Personal average", format_grade(snapshot.personal_average or 0.0))
        right.metric("Class average", format_grade(snapshot.cohort_baseline))

    st.subheader("Your submissions")
    for row in snapshot.student_submissions.itertuples(index=False):
        with st.container(border=True):
            st.markdown(f"**{row.exercise_title or 'Untitled exercise'}**")
            grade = "-" if pd.isna(row.grade) else f"{row.grade:g}/20"
            plagiarism = "-" if pd.isna(row.plagiarism_score) else f"{row.plagiarism_score * 100:.2f}%"
            submitted = "-" if pd.isna(row.submitted_at) else row.submitted_at.strftime("%Y-%m-%d %H:%M")
            st.write(f"Grade: {grade} · Plagiarism: {plagiarism} · Submitted: {submitted}")
            st.write(f"File: {row.file_path or '-'}")
            st.write(f"Feedback: {row.feedback or '-'}")
            if pd.notna(row.grade):
                # st.progress only accepts 0-100
                st.progress(int(min(max(progress_value(row.grade), 0), 100)))


def _render_teacher_view(df: pd.DataFrame) -> None:
    snapshot = aggregate(df)

    st.subheader("Performance statistics")
    if snapshot.comparison.empty:
        st.info("No submissions to analyse yet.")
    else:
        st.plotly_chart(comparison_bar(snapshot.comparison), use_container_width=True)

    st.subheader("Per-student details")
    state = _view_state()
    columns = st.columns(3)
    for idx, (key, stat) in enumerate(snapshot.statistics.items()):
        label = key or MISSING_KEY_LABEL
        with columns[idx % 3].container(border=True):
            st.markdown(f"**{label}**")
            st.write(f"Average grade: {format_grade(stat.average_grade)}")
            st.write(f"Average plagiarism: {stat.average_plagiarism_percent:.2f}%")
            if st.button("Hide exercises" if state.selected_student == key else "Show exercises", key=f"toggle:{label}"):
                state.toggle_student(key)
                st.rerun()
            if state.selected_student == key:
                st.write(", ".join(title for title in stat.exercise_titles if title) or "No titled exercises")

    with st.expander("Summary table"):
        st.dataframe(snapshot.summary, use_container_width=True)

    st.subheader("All submissions")
    st.dataframe(submissions_table(df), use_container_width=True, hide_index=True)

    with st.expander("Exercises"):
        teacher_id = st.number_input("Teacher id", min_value=1, value=1, step=1)
        owned = exercises_for_teacher(SAMPLE_EXERCISES, teacher_id)
        st.dataframe(pd.DataFrame([vars(exercise) for exercise in owned]), use_container_width=True)


def main():
    _configure_logging()
    _init_state()
    st.title("Submission Analytics")

    df = _load_source()
    _render_message()
    if df is None:
        st.info("Upload a Record Store export or load the sample data to get started.")
        return

    st.caption(f"Source: {st.session_state.get('source_label')} · {len(df)} submissions")
    _render_quality(df)

    view = st.radio("Dashboard", options=["Student", "Teacher analytics"], horizontal=True)
    if view == "Student":
        _render_student_view(df)
    else:
        _render_teacher_view(df)


if __name__ == "__main__":
    main()
