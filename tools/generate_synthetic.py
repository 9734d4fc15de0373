#!/usr/bin/env python3
"""Generate a synthetic submissions export for demos.

Usage:
    python tools/generate_synthetic.py --output data/synthetic_submissions.csv --students 40 --exercises 6 --seed 42

Each synthetic student has a latent ability that drives their grades, a
handful of students copy heavily (high plagiarism scores), and exercises are
released one week apart so submissions have a realistic chronology.
"""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable

import numpy as np
import pandas as pd

EXERCISE_TITLES = ["Variables", "Conditionals", "Loops", "Functions", "Recursion", "Lists", "Dictionaries", "Classes"]


def generate_synthetic_dataset(
    output_path: Path,
    n_students: int = 40,
    n_exercises: int = 6,
    seed: int = 42,
    start: str = "2024-01-08",
) -> pd.DataFrame:
    if n_students < 1 or n_exercises < 1:
        raise ValueError("Need at least one student and one exercise")

    rng = np.random.default_rng(seed)
    titles = [EXERCISE_TITLES[i] if i < len(EXERCISE_TITLES) else f"Exercise {i + 1}" for i in range(n_exercises)]
    release = pd.Timestamp(start, tz="UTC")

    students = [f"student{i:03d}@school.test" for i in range(1, n_students + 1)]
    copiers = set(rng.choice(students, size=max(1, n_students // 8), replace=False))

    rows = []
    for student_idx, email in enumerate(students, start=1):
        ability = rng.normal(13.0, 3.0)
        for exercise_idx, title in enumerate(titles, start=1):
            # everyone hands in the first exercise, later ones are sometimes skipped
            if exercise_idx > 1 and rng.random() < 0.15:
                continue

            grade = float(np.clip(np.round(rng.normal(ability, 2.0) * 2) / 2, 0, 20))
            if email in copiers:
                plagiarism = float(rng.beta(6, 2))
            else:
                plagiarism = float(rng.beta(1, 12))

            delay = pd.Timedelta(hours=float(rng.uniform(1, 6 * 24)))
            rows.append(
                {
                    "student_id": student_idx,
                    "student_email": email,
                    "exercise_id": exercise_idx,
                    "exercise_title": title,
                    "grade": grade,
                    "plagiarism_score": round(plagiarism, 3),
                    "submitted_at": (release + pd.Timedelta(weeks=exercise_idx - 1) + delay).isoformat(),
                }
            )

    result = pd.DataFrame(rows)
    result = result.sample(frac=1, random_state=seed).reset_index(drop=True)
    result.insert(0, "id", range(1, len(result) + 1))

    output_path.parent.mkdir(parents=True, exist_ok=True)
    result.to_csv(output_path, index=False)
    return result


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Generate a synthetic submissions export for demos")
    parser.add_argument("--output", type=Path, default=Path("data/synthetic_submissions.csv"), help="Where to write synthetic CSV")
    parser.add_argument("--students", type=int, default=40, help="Number of synthetic students")
    parser.add_argument("--exercises", type=int, default=6, help="Number of exercises")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    args = parser.parse_args(list(argv) if argv is not None else None)

    generate_synthetic_dataset(args.output, n_students=args.students, n_exercises=args.exercises, seed=args.seed)
    print(f"Synthetic dataset written to {args.output}")


if __name__ == "__main__":
    main()
