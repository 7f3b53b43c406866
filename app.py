"""
app.py
======================

Element Quiz (Streamlit) entry point.

Features:
- Flash card mode: browse the elements in fixed order, reveal names
- Quiz mode: shuffled order, type the name, score at the end
- Answer history of the current session (in memory only)
- Light / dark / blue themes

Assumptions:
- element images live in images/<Name>.png (configurable in config.toml)
- the app runs with `streamlit run app.py`
"""

from __future__ import annotations

import logging

import streamlit as st

from element_quiz.catalog import get_all_items
from element_quiz.config import AppConfig, load_config, make_rng
from element_quiz.controller import QuizController
from element_quiz.history import AnswerHistory
from element_quiz.logging_config import setup_logging
from element_quiz.ui import render_quiz_page, render_score_dialog, render_theme_selector

logger = logging.getLogger("element_quiz.app")


# ----------------------------------------------------------------------
#  Session-scoped objects
# ----------------------------------------------------------------------
def get_app_config() -> AppConfig:
    if "app_config" not in st.session_state:
        st.session_state["app_config"] = load_config()
    return st.session_state["app_config"]


def get_history() -> AnswerHistory:
    if "answer_history" not in st.session_state:
        st.session_state["answer_history"] = AnswerHistory()
    return st.session_state["answer_history"]  # type: ignore[return-value]


def get_controller() -> QuizController:
    """QuizController kept in the Streamlit session."""
    if "quiz_controller" not in st.session_state:
        cfg = get_app_config()
        controller = QuizController(
            get_all_items(),
            rng=make_rng(cfg),
            history=get_history(),
        )
        st.session_state["quiz_controller"] = controller
        logger.info("new session, seed=%s", cfg.seed)
    return st.session_state["quiz_controller"]  # type: ignore[return-value]


def set_page(page: str) -> None:
    st.session_state["page"] = page


def get_page() -> str:
    return st.session_state.get("page", "quiz")


def render_nav() -> None:
    col1, col2, col3 = st.columns(3)
    with col1:
        if st.button("🧪 Quiz", use_container_width=True):
            set_page("quiz")
            st.rerun()
    with col2:
        if st.button("📋 History", use_container_width=True):
            set_page("history")
            st.rerun()
    with col3:
        if st.button("❓ Help", use_container_width=True):
            set_page("help")
            st.rerun()


# ----------------------------------------------------------------------
#  Page: quiz
# ----------------------------------------------------------------------
def render_quiz_main_page() -> None:
    cfg = get_app_config()
    controller = get_controller()

    directive = controller.current_directive()
    actions = render_quiz_page(
        directive,
        images_dir=cfg.images_dir,
        image_extension=cfg.image_extension,
        app_name=cfg.app_name,
    )

    if actions["selected_mode"] is not None:
        controller.set_mode(actions["selected_mode"])
        st.rerun()
    elif actions["clicked_reveal"]:
        controller.reveal_answer()
        st.rerun()
    elif actions["submitted_text"] is not None:
        controller.submit_answer(actions["submitted_text"])
        st.rerun()
    elif actions["clicked_next"]:
        controller.advance()
        st.rerun()

    if directive.score_summary is not None:
        render_score_dialog(directive.score_summary, controller.acknowledge_score)


# ----------------------------------------------------------------------
#  Page: history
# ----------------------------------------------------------------------
def render_history_page() -> None:
    history = get_history()
    st.markdown("## 📋 Answer history")

    summary = history.summary()
    if not summary["answered"]:
        st.info("No quiz answers yet. Switch to Quiz mode to start.")
        return

    accuracy = summary["accuracy"] or 0.0
    st.write(f"- Answered: **{summary['answered']}**")
    st.write(f"- Correct: **{summary['correct']}** ({accuracy:.0%})")
    st.dataframe(history.to_dataframe(), use_container_width=True, hide_index=True)

    if st.button("Clear history", use_container_width=True):
        history.clear()
        st.rerun()


# ----------------------------------------------------------------------
#  Page: help
# ----------------------------------------------------------------------
def render_help_page() -> None:
    st.markdown("## ❓ How to use")

    st.markdown(
        """
1. **Flash Cards**: an element is shown. Press "Show Answer" to see its name
   and "Next Element" to move on. After the last card the deck starts over.
2. **Quiz**: the elements come in random order. Type the name and press
   Enter. Capitalization does not matter, spelling does.
3. After the last question press "Show Score". Confirming the score takes
   you back to flash cards.
        """
    )

    st.markdown("### Theme")
    render_theme_selector(st.session_state.get("theme", get_app_config().theme))


# ----------------------------------------------------------------------
#  Main
# ----------------------------------------------------------------------
def main() -> None:
    cfg = get_app_config()
    st.set_page_config(
        page_title=cfg.app_name,
        page_icon="🧪",
        layout="centered",
    )

    setup_logging(cfg)
    if "theme" not in st.session_state:
        st.session_state["theme"] = cfg.theme

    render_nav()

    page = get_page()
    if page == "history":
        render_history_page()
    elif page == "help":
        render_help_page()
    else:
        set_page("quiz")
        render_quiz_main_page()


if __name__ == "__main__":
    main()
