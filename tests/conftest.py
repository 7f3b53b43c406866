"""Shared fixtures for the element_quiz tests."""

import random

import pytest

from element_quiz.catalog import get_all_items
from element_quiz.controller import QuizController
from element_quiz.history import AnswerHistory


class FixedOrderRandom(random.Random):
    """random.Random whose shuffle() puts items in a given name order."""

    def __init__(self, names):
        super().__init__(0)
        self.names = list(names)

    def shuffle(self, x):
        x.sort(key=lambda item: self.names.index(item.name))


@pytest.fixture
def catalog():
    return get_all_items()


@pytest.fixture
def history():
    return AnswerHistory()


@pytest.fixture
def controller(catalog, history):
    return QuizController(catalog, rng=random.Random(1234), history=history)


@pytest.fixture
def quiz_controller(catalog, history):
    """Quiz order fixed to Gold, Sodium, Carbon, Chlorine."""
    rng = FixedOrderRandom(["Gold", "Sodium", "Carbon", "Chlorine"])
    c = QuizController(catalog, rng=rng, history=history)
    c.set_mode("quiz")
    return c
