"""
history.py
=====================================

In-memory log of quiz answers.

Each submitted quiz answer becomes one AnswerRecord. The log lives as long
as the process (or the Streamlit session) and is never written to disk.
The history page shows it as a pandas table.
"""

from __future__ import annotations

import time
from typing import Any, Dict, List, Optional

import pandas as pd

from .models import AnswerRecord


class AnswerHistory:
    """
    Collects AnswerRecords and summarizes them for the UI.
    """

    def __init__(self) -> None:
        self.records: List[AnswerRecord] = []

    # ---------------------------------------------------------
    # Recording
    # ---------------------------------------------------------
    def record(
        self,
        item_name: str,
        given_text: str,
        correct: bool,
        extra: Optional[Dict[str, Any]] = None,
    ) -> AnswerRecord:
        record = AnswerRecord(
            item_name=item_name,
            given_text=given_text,
            correct=correct,
            timestamp=time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
            extra=dict(extra or {}),
        )
        self.records.append(record)
        return record

    def clear(self) -> None:
        self.records = []

    # ---------------------------------------------------------
    # Queries (UI)
    # ---------------------------------------------------------
    def get_records(self) -> List[AnswerRecord]:
        return list(self.records)

    def summary(self) -> Dict[str, Any]:
        """answered / correct / accuracy (None when nothing answered yet)"""
        answered = len(self.records)
        correct = sum(1 for r in self.records if r.correct)
        return {
            "answered": answered,
            "correct": correct,
            "accuracy": (correct / answered) if answered else None,
        }

    def to_dataframe(self) -> pd.DataFrame:
        """Newest first."""
        rows = [
            {
                "Element": r.item_name,
                "Answer": r.given_text,
                "Result": "Correct" if r.correct else "Wrong",
                "Time": r.timestamp,
            }
            for r in reversed(self.records)
        ]
        return pd.DataFrame(rows, columns=["Element", "Answer", "Result", "Time"])

    def __len__(self) -> int:
        return len(self.records)
