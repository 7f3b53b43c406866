"""
models.py
======================

Data types shared by the controller, the catalog and the Streamlit UI.

- Item           : one quiz entry (element name + image key)
- Mode / Phase   : the two axes of the quiz state machine
- Session        : mutable state owned by QuizController
- RenderDirective: what the UI should show for the current state
- AnswerRecord   : one submitted quiz answer (kept in memory only)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


# ----------------------------------------------------------------------
#  Mode / Phase
# ----------------------------------------------------------------------
class Mode(str, Enum):
    FLASHCARD = "flashcard"
    QUIZ = "quiz"


class Phase(str, Enum):
    QUESTION = "question"  # asking which element is on screen
    ANSWER = "answer"      # answer revealed or submitted
    SCORE = "score"        # end of quiz, score pending acknowledgement


# ----------------------------------------------------------------------
#  Item
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class Item:
    """
    A catalog entry.

    name is both the display name and the expected answer.
    image_key is the asset reference the UI resolves to an image file.
    """

    name: str
    image_key: str

    @property
    def answer(self) -> str:
        return self.name

    def matches(self, text: str) -> bool:
        """Case-insensitive exact match. Whitespace is not trimmed."""
        return text.lower() == self.answer.lower()


# ----------------------------------------------------------------------
#  Session
# ----------------------------------------------------------------------
@dataclass
class Session:
    """
    Mutable quiz state. Only QuizController writes to it.
    """

    active_order: List[Item]
    mode: Mode = Mode.FLASHCARD
    phase: Phase = Phase.QUESTION
    current_index: int = 0
    last_answer_correct: bool = False
    correct_count: int = 0

    @property
    def current_item(self) -> Item:
        return self.active_order[self.current_index]

    @property
    def total(self) -> int:
        return len(self.active_order)

    @property
    def is_last_item(self) -> bool:
        return self.current_index == self.total - 1


# ----------------------------------------------------------------------
#  Render directive
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class ControlState:
    visible: bool = True
    enabled: bool = True
    label: str = ""
    focused: bool = False
    cleared: bool = False


HIDDEN = ControlState(visible=False, enabled=False)


@dataclass(frozen=True)
class ScoreSummary:
    correct_count: int
    total: int

    @property
    def title(self) -> str:
        return "Quiz Score"

    @property
    def message(self) -> str:
        return f"Your score is {self.correct_count} out of {self.total}"


@dataclass(frozen=True)
class RenderDirective:
    """
    Everything the rendering layer needs for one frame.

    display_name is None unless the name may be shown (flashcard answer).
    answer_correct is set only in quiz ANSWER phase.
    score_summary is set only while phase is SCORE; the presenter shows it
    once and then calls QuizController.acknowledge_score().
    """

    image_key: str
    display_name: Optional[str]
    mode: Mode
    phase: Phase
    item_index: int
    item_count: int
    reveal_button: ControlState
    text_input: ControlState
    next_button: ControlState
    status_text: str = ""
    answer_correct: Optional[bool] = None
    score_summary: Optional[ScoreSummary] = None

    @property
    def presents_score(self) -> bool:
        return self.score_summary is not None


# ----------------------------------------------------------------------
#  Answer records
# ----------------------------------------------------------------------
@dataclass
class AnswerRecord:
    item_name: str
    given_text: str
    correct: bool
    timestamp: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)
