"""
controller.py
======================

QuizController: the flashcard / quiz state machine.

States are (Mode, Phase). The controller owns the Session, applies the
transitions below and derives a RenderDirective from the result. The UI
only reads directives and calls the operations; it never touches the
Session.

    set_mode(m)          any state      -> (m, QUESTION), index 0
    reveal_answer()      (FLASHCARD, QUESTION) -> (FLASHCARD, ANSWER)
    submit_answer(text)  (QUIZ, QUESTION) -> (QUIZ, ANSWER)
    advance()            next item -> QUESTION, past the last item:
                         QUIZ -> SCORE, FLASHCARD -> first card
    acknowledge_score()  (QUIZ, SCORE)  -> (FLASHCARD, QUESTION)

Operations called in a state where they do not apply are ignored.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Sequence, Union

from .history import AnswerHistory
from .models import (
    HIDDEN,
    AnswerRecord,
    ControlState,
    Item,
    Mode,
    Phase,
    RenderDirective,
    ScoreSummary,
    Session,
)

logger = logging.getLogger(__name__)

Listener = Callable[[RenderDirective], None]

CORRECT_TEXT = "Correct!"
WRONG_TEXT = "❌\nCorrect Answer: {name}"


# ----------------------------------------------------------------------
#  Directive computation
# ----------------------------------------------------------------------
def build_directive(session: Session) -> RenderDirective:
    """Pure mapping from the session to what the UI shows."""
    item = session.current_item
    phase = session.phase

    if session.mode == Mode.FLASHCARD:
        revealed = phase == Phase.ANSWER
        return RenderDirective(
            image_key=item.image_key,
            display_name=item.name if revealed else None,
            mode=session.mode,
            phase=phase,
            item_index=session.current_index,
            item_count=session.total,
            reveal_button=ControlState(
                visible=True, enabled=phase == Phase.QUESTION, label="Show Answer"
            ),
            text_input=HIDDEN,
            next_button=ControlState(visible=True, enabled=True, label="Next Element"),
            status_text=item.name if revealed else "",
        )

    # quiz
    answer_correct = None
    if phase == Phase.QUESTION:
        text_input = ControlState(visible=True, enabled=True, focused=True, cleared=True)
        status = ""
    elif phase == Phase.ANSWER:
        text_input = ControlState(visible=True, enabled=False)
        answer_correct = session.last_answer_correct
        status = (
            CORRECT_TEXT
            if session.last_answer_correct
            else WRONG_TEXT.format(name=item.name)
        )
    else:
        text_input = HIDDEN
        status = ""

    summary = None
    if phase == Phase.SCORE:
        summary = ScoreSummary(correct_count=session.correct_count, total=session.total)

    return RenderDirective(
        image_key=item.image_key,
        display_name=None,
        mode=session.mode,
        phase=phase,
        item_index=session.current_index,
        item_count=session.total,
        reveal_button=HIDDEN,
        text_input=text_input,
        next_button=ControlState(
            visible=True,
            enabled=phase == Phase.ANSWER,
            label="Show Score" if session.is_last_item else "Next Question",
        ),
        status_text=status,
        answer_correct=answer_correct,
        score_summary=summary,
    )


# ----------------------------------------------------------------------
#  QuizController
# ----------------------------------------------------------------------
class QuizController:
    """
    Sole owner of the quiz Session.

    catalog:
        the fixed item list, in flashcard order. Must not be empty.
    rng:
        random source used to shuffle the quiz order. Pass a seeded
        random.Random for deterministic runs.
    history:
        optional AnswerHistory that receives every quiz answer.
    """

    def __init__(
        self,
        catalog: Sequence[Item],
        rng: Optional[random.Random] = None,
        history: Optional[AnswerHistory] = None,
    ):
        if not catalog:
            raise ValueError("catalog must contain at least one item")
        self.catalog: List[Item] = list(catalog)
        self.rng = rng or random.Random()
        self.history = history
        self._listeners: List[Listener] = []
        self.session = Session(active_order=list(self.catalog))

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def mode(self) -> Mode:
        return self.session.mode

    @property
    def phase(self) -> Phase:
        return self.session.phase

    @property
    def current_item(self) -> Item:
        return self.session.current_item

    def current_directive(self) -> RenderDirective:
        return build_directive(self.session)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with the new directive after every
        applied transition. Returns a function that removes it again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> RenderDirective:
        directive = self.current_directive()
        for listener in list(self._listeners):
            listener(directive)
        return directive

    def _ignore(self, operation: str) -> None:
        logger.debug(
            "ignored %s in (%s, %s)", operation, self.session.mode.value, self.session.phase.value
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def set_mode(self, mode: Union[Mode, str]) -> RenderDirective:
        mode = Mode(mode)
        s = self.session

        if mode == Mode.QUIZ:
            order = list(self.catalog)
            self.rng.shuffle(order)
            s.active_order = order
            s.correct_count = 0
            s.last_answer_correct = False
        else:
            s.active_order = list(self.catalog)

        s.mode = mode
        s.current_index = 0
        s.phase = Phase.QUESTION
        logger.info(
            "mode -> %s (order: %s)", mode.value, ", ".join(i.name for i in s.active_order)
        )
        return self._notify()

    def reveal_answer(self) -> None:
        """Flashcard only; a quiz item is answered through submit_answer()."""
        if self.session.mode != Mode.FLASHCARD or self.session.phase != Phase.QUESTION:
            self._ignore("reveal_answer")
            return
        self.session.phase = Phase.ANSWER
        logger.info("revealed %s", self.session.current_item.name)
        self._notify()

    def submit_answer(self, text: str) -> Optional[AnswerRecord]:
        """
        Check text against the current item. Returns the AnswerRecord, or
        None when the call does not apply (flashcard mode, not in QUESTION).
        """
        s = self.session
        if s.mode != Mode.QUIZ or s.phase != Phase.QUESTION:
            self._ignore("submit_answer")
            return None

        item = s.current_item
        correct = item.matches(text)
        s.last_answer_correct = correct
        if correct:
            s.correct_count += 1
        s.phase = Phase.ANSWER

        if self.history is not None:
            record = self.history.record(
                item_name=item.name,
                given_text=text,
                correct=correct,
                extra={"position": s.current_index + 1, "total": s.total},
            )
        else:
            record = AnswerRecord(item_name=item.name, given_text=text, correct=correct)

        logger.info(
            "answer %r for %s: %s (%d/%d)",
            text,
            item.name,
            "correct" if correct else "wrong",
            s.correct_count,
            s.total,
        )
        self._notify()
        return record

    def advance(self) -> None:
        s = self.session
        if s.mode == Mode.QUIZ and s.phase != Phase.ANSWER:
            self._ignore("advance")
            return

        if s.current_index + 1 < s.total:
            s.current_index += 1
            s.phase = Phase.QUESTION
        else:
            s.current_index = 0
            if s.mode == Mode.QUIZ:
                # order is kept; only set_mode(QUIZ) reshuffles
                s.phase = Phase.SCORE
                logger.info("quiz finished: %d/%d", s.correct_count, s.total)
            else:
                s.phase = Phase.QUESTION
        self._notify()

    def acknowledge_score(self) -> None:
        if self.session.phase != Phase.SCORE:
            self._ignore("acknowledge_score")
            return
        self.set_mode(Mode.FLASHCARD)
