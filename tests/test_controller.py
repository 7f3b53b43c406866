# tests/test_controller.py
"""Tests for element_quiz.controller.QuizController.

Tests cover:
- initial state and mode switching
- flashcard reveal / advance / looping
- quiz answers, scoring and the score phase
- ignored operations
- invariants over random operation sequences
- listeners
"""

import random

import pytest

from element_quiz.catalog import get_all_items
from element_quiz.controller import QuizController
from element_quiz.models import Mode, Phase


def names(items):
    return [i.name for i in items]


def finish_quiz(controller, answers=None):
    """Answer every quiz question (wrong unless given) and advance past the end."""
    answers = answers or {}
    for _ in range(controller.session.total):
        item = controller.current_item
        controller.submit_answer(answers.get(item.name, "nope"))
        controller.advance()


# =============================================================================
# Initial state / set_mode
# =============================================================================


class TestInitialState:
    def test_starts_in_flashcard_question(self, controller, catalog):
        s = controller.session
        assert controller.mode == Mode.FLASHCARD
        assert controller.phase == Phase.QUESTION
        assert s.current_index == 0
        assert s.active_order == catalog
        assert controller.current_item.name == "Carbon"
        assert s.correct_count == 0

    def test_empty_catalog_rejected(self):
        with pytest.raises(ValueError):
            QuizController([])

    def test_unknown_mode_rejected(self, controller):
        with pytest.raises(ValueError):
            controller.set_mode("exam")


class TestSetMode:
    def test_quiz_order_is_permutation(self, controller, catalog):
        controller.set_mode(Mode.QUIZ)
        s = controller.session
        assert sorted(names(s.active_order)) == sorted(names(catalog))
        assert s.current_index == 0
        assert s.phase == Phase.QUESTION
        assert s.correct_count == 0
        assert s.last_answer_correct is False

    def test_quiz_accepts_string(self, controller):
        controller.set_mode("quiz")
        assert controller.mode == Mode.QUIZ

    def test_flashcard_restores_fixed_order(self, quiz_controller, catalog):
        assert names(quiz_controller.session.active_order) != names(catalog)
        quiz_controller.set_mode(Mode.FLASHCARD)
        assert quiz_controller.session.active_order == catalog
        assert quiz_controller.session.current_index == 0
        assert quiz_controller.phase == Phase.QUESTION

    def test_seeded_rng_is_deterministic(self, catalog):
        a = QuizController(catalog, rng=random.Random(7))
        b = QuizController(catalog, rng=random.Random(7))
        a.set_mode("quiz")
        b.set_mode("quiz")
        assert a.session.active_order == b.session.active_order

    def test_quiz_resets_score(self, quiz_controller):
        quiz_controller.submit_answer("gold")
        assert quiz_controller.session.correct_count == 1
        quiz_controller.set_mode("quiz")
        assert quiz_controller.session.correct_count == 0
        assert quiz_controller.session.last_answer_correct is False

    def test_set_mode_mid_answer_returns_to_question(self, controller):
        controller.reveal_answer()
        controller.set_mode(Mode.FLASHCARD)
        assert controller.phase == Phase.QUESTION

    def test_returns_directive(self, controller):
        directive = controller.set_mode("quiz")
        assert directive.mode == Mode.QUIZ
        assert directive.phase == Phase.QUESTION


# =============================================================================
# Flashcard mode
# =============================================================================


class TestFlashcards:
    def test_reveal_then_advance(self, controller):
        controller.reveal_answer()
        assert controller.phase == Phase.ANSWER
        assert controller.current_directive().status_text == "Carbon"

        controller.advance()
        assert controller.phase == Phase.QUESTION
        assert controller.session.current_index == 1
        assert controller.current_item.name == "Gold"

    def test_reveal_twice_is_noop(self, controller):
        controller.reveal_answer()
        before = (controller.mode, controller.phase, controller.session.current_index)
        controller.reveal_answer()
        assert (controller.mode, controller.phase, controller.session.current_index) == before

    def test_advance_without_reveal(self, controller):
        controller.advance()
        assert controller.session.current_index == 1
        assert controller.phase == Phase.QUESTION

    def test_loops_after_last_card(self, controller):
        for _ in range(4):
            controller.advance()
        assert controller.session.current_index == 0
        assert controller.phase == Phase.QUESTION
        assert controller.current_item.name == "Carbon"

    def test_submit_answer_ignored(self, controller, history):
        assert controller.submit_answer("Carbon") is None
        assert controller.phase == Phase.QUESTION
        assert controller.session.correct_count == 0
        assert len(history) == 0


# =============================================================================
# Quiz mode
# =============================================================================


class TestQuizAnswers:
    def test_correct_answer(self, quiz_controller):
        assert quiz_controller.current_item.name == "Gold"
        record = quiz_controller.submit_answer("gold")
        s = quiz_controller.session
        assert record.correct is True
        assert s.last_answer_correct is True
        assert s.correct_count == 1
        assert s.phase == Phase.ANSWER

    def test_uppercase_answer_is_correct(self, quiz_controller):
        quiz_controller.advance()  # ignored in QUESTION
        quiz_controller.submit_answer("GOLD")
        assert quiz_controller.session.last_answer_correct is True

    def test_partial_answer_is_wrong(self, quiz_controller):
        quiz_controller.submit_answer("gol")
        s = quiz_controller.session
        assert s.last_answer_correct is False
        assert s.correct_count == 0
        assert s.phase == Phase.ANSWER

    def test_whitespace_not_trimmed(self, quiz_controller):
        quiz_controller.submit_answer("gold ")
        assert quiz_controller.session.last_answer_correct is False

    def test_carbon_case_insensitive(self, quiz_controller):
        quiz_controller.submit_answer("x")
        quiz_controller.advance()
        quiz_controller.submit_answer("x")
        quiz_controller.advance()
        assert quiz_controller.current_item.name == "Carbon"
        quiz_controller.submit_answer("CARBON")
        assert quiz_controller.session.last_answer_correct is True

    def test_second_submit_ignored(self, quiz_controller):
        quiz_controller.submit_answer("gold")
        assert quiz_controller.submit_answer("gold") is None
        assert quiz_controller.session.correct_count == 1

    def test_advance_moves_to_next_question(self, quiz_controller):
        quiz_controller.submit_answer("gold")
        quiz_controller.advance()
        assert quiz_controller.session.current_index == 1
        assert quiz_controller.phase == Phase.QUESTION
        assert quiz_controller.current_item.name == "Sodium"

    def test_advance_ignored_before_answer(self, quiz_controller):
        quiz_controller.advance()
        assert quiz_controller.session.current_index == 0
        assert quiz_controller.phase == Phase.QUESTION

    def test_reveal_answer_ignored_in_quiz(self, quiz_controller):
        quiz_controller.submit_answer("gold")
        quiz_controller.advance()
        seen = []
        quiz_controller.subscribe(seen.append)

        quiz_controller.reveal_answer()

        assert seen == []
        assert quiz_controller.phase == Phase.QUESTION
        assert quiz_controller.current_item.name == "Sodium"
        assert quiz_controller.session.correct_count == 1
        directive = quiz_controller.current_directive()
        assert directive.status_text == ""
        assert directive.answer_correct is None

    def test_answers_recorded_in_history(self, quiz_controller, history):
        quiz_controller.submit_answer("gold")
        quiz_controller.advance()
        quiz_controller.submit_answer("salt")
        records = history.get_records()
        assert [(r.item_name, r.given_text, r.correct) for r in records] == [
            ("Gold", "gold", True),
            ("Sodium", "salt", False),
        ]
        assert records[1].extra == {"position": 2, "total": 4}

    def test_submit_without_history(self, catalog):
        c = QuizController(catalog, rng=random.Random(0))
        c.set_mode("quiz")
        record = c.submit_answer(c.current_item.name)
        assert record.correct is True
        assert record.item_name == c.current_item.name


class TestScore:
    def test_last_advance_enters_score(self, quiz_controller):
        finish_quiz(quiz_controller, {"Gold": "gold", "Carbon": "Carbon"})
        s = quiz_controller.session
        assert s.phase == Phase.SCORE
        assert s.current_index == 0
        assert s.correct_count == 2

        summary = quiz_controller.current_directive().score_summary
        assert summary.correct_count == 2
        assert summary.total == 4

    def test_score_keeps_order(self, quiz_controller):
        order = list(quiz_controller.session.active_order)
        finish_quiz(quiz_controller)
        assert quiz_controller.session.active_order == order

    def test_acknowledge_returns_to_flashcards(self, quiz_controller, catalog):
        finish_quiz(quiz_controller)
        quiz_controller.acknowledge_score()
        s = quiz_controller.session
        assert s.mode == Mode.FLASHCARD
        assert s.phase == Phase.QUESTION
        assert s.current_index == 0
        assert s.active_order == catalog

    def test_operations_ignored_in_score(self, quiz_controller, history):
        finish_quiz(quiz_controller)
        recorded = len(history)
        assert quiz_controller.submit_answer("gold") is None
        quiz_controller.reveal_answer()
        quiz_controller.advance()
        assert quiz_controller.phase == Phase.SCORE
        assert quiz_controller.session.correct_count == 0
        assert len(history) == recorded

    def test_acknowledge_outside_score_is_noop(self, quiz_controller):
        quiz_controller.acknowledge_score()
        assert quiz_controller.mode == Mode.QUIZ
        assert quiz_controller.phase == Phase.QUESTION

    def test_set_mode_quiz_from_score_reshuffles(self, catalog):
        c = QuizController(catalog, rng=random.Random(3))
        c.set_mode("quiz")
        finish_quiz(c)
        c.set_mode("quiz")
        assert c.phase == Phase.QUESTION
        assert c.session.correct_count == 0
        assert sorted(names(c.session.active_order)) == sorted(names(catalog))


# =============================================================================
# Invariants
# =============================================================================


class TestInvariants:
    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_random_operation_sequences(self, seed):
        catalog = get_all_items()
        driver = random.Random(seed)
        c = QuizController(catalog, rng=random.Random(seed))
        answers = [i.name for i in catalog] + ["", "x", "GOLD", "carbo"]

        last_count = 0
        answered = 0
        for _ in range(500):
            op = driver.choice(
                ["quiz", "flashcard", "reveal", "submit", "advance", "ack"]
            )
            was_quiz = c.mode == Mode.QUIZ
            if op == "quiz":
                c.set_mode(Mode.QUIZ)
                last_count = 0
                answered = 0
            elif op == "flashcard":
                c.set_mode(Mode.FLASHCARD)
            elif op == "reveal":
                c.reveal_answer()
            elif op == "submit":
                if c.submit_answer(driver.choice(answers)) is not None:
                    answered += 1
            elif op == "advance":
                c.advance()
            else:
                c.acknowledge_score()

            s = c.session
            assert 0 <= s.current_index < len(s.active_order)
            assert sorted(names(s.active_order)) == sorted(names(catalog))
            assert 0 <= s.correct_count
            if was_quiz and c.mode == Mode.QUIZ and op != "quiz":
                assert s.correct_count >= last_count
                assert s.correct_count <= answered
            if c.mode == Mode.FLASHCARD:
                assert s.active_order == catalog
                assert s.phase != Phase.SCORE
            last_count = s.correct_count


# =============================================================================
# Listeners
# =============================================================================


class TestListeners:
    def test_listener_receives_directives(self, controller):
        seen = []
        controller.subscribe(seen.append)
        controller.reveal_answer()
        controller.advance()
        assert [d.phase for d in seen] == [Phase.ANSWER, Phase.QUESTION]
        assert seen[-1].image_key == "Gold"

    def test_ignored_operation_does_not_notify(self, controller):
        controller.reveal_answer()
        seen = []
        controller.subscribe(seen.append)
        controller.reveal_answer()
        controller.acknowledge_score()
        assert seen == []

    def test_unsubscribe(self, controller):
        seen = []
        unsubscribe = controller.subscribe(seen.append)
        unsubscribe()
        unsubscribe()
        controller.advance()
        assert seen == []

    def test_acknowledge_notifies_flashcard_directive(self, quiz_controller):
        finish_quiz(quiz_controller)
        seen = []
        quiz_controller.subscribe(seen.append)
        quiz_controller.acknowledge_score()
        assert len(seen) == 1
        assert seen[0].mode == Mode.FLASHCARD
        assert seen[0].score_summary is None
