"""
element_quiz package
======================

Logic of the Element Quiz app.

Modules:
- models      : Item, Mode, Phase, Session, RenderDirective
- catalog     : the fixed element list
- controller  : QuizController (flashcard / quiz state machine)
- history     : in-memory answer log
- config      : AppConfig and config.toml loading
- logging_config : log setup
- ui          : Streamlit components

app.py only does Streamlit page handling; everything else is here.
"""

from .models import Item, Mode, Phase, RenderDirective, ScoreSummary
from .catalog import ELEMENTS, get_all_items, get_item_by_name
from .controller import QuizController, build_directive
from .history import AnswerHistory
from .config import AppConfig, load_config

__all__ = [
    "Item",
    "Mode",
    "Phase",
    "RenderDirective",
    "ScoreSummary",
    "ELEMENTS",
    "get_all_items",
    "get_item_by_name",
    "QuizController",
    "build_directive",
    "AnswerHistory",
    "AppConfig",
    "load_config",
]
