"""
ui.py
======================

Streamlit UI components.

Responsibilities:
- layout and styling (themes, CSS)
- drawing one RenderDirective: mode selector, element image, status text,
  Show Answer / answer form / Next controls
- the score dialog

State transitions are not decided here. render_quiz_page() returns what
the user did and app.py forwards it to QuizController.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Set

import streamlit as st

from .catalog import image_path
from .models import Mode, RenderDirective, ScoreSummary

logger = logging.getLogger(__name__)

_MISSING_IMAGES: Set[str] = set()

MODE_LABELS: Dict[Mode, str] = {
    Mode.FLASHCARD: "Flash Cards",
    Mode.QUIZ: "Quiz",
}

# ----------------------------------------------------------------------
#  Themes
# ----------------------------------------------------------------------


THEMES: Dict[str, Dict[str, str]] = {
    "light": {
        "bg": "#ffffff",
        "text": "#1c1c1e",
        "surface": "#f2f2f7",
        "surface_alt": "#ffffff",
        "border": "#d1d1d6",
        "primary": "#007aff",
        "correct": "#34c759",
        "incorrect": "#ff3b30",
    },
    "dark": {
        "bg": "#000000",
        "text": "#f5f5f7",
        "surface": "#1c1c1e",
        "surface_alt": "#2c2c2e",
        "border": "#3a3a3c",
        "primary": "#0a84ff",
        "correct": "#30d158",
        "incorrect": "#ff453a",
    },
    "blue": {
        "bg": "#f5f9ff",
        "text": "#0a1a2f",
        "surface": "#e8f0ff",
        "surface_alt": "#ffffff",
        "border": "#c9d6e8",
        "primary": "#0066cc",
        "correct": "#1f9d55",
        "incorrect": "#d64545",
    },
}


# ----------------------------------------------------------------------
#  CSS
# ----------------------------------------------------------------------
def _generate_css(theme: Dict[str, str]) -> str:
    """Global CSS for the given theme."""

    return f"""
    <style>
    html, body {{
        background: {theme['bg']};
        color: {theme['text']};
        font-family: -apple-system, BlinkMacSystemFont, "Helvetica Neue",
                     Arial, sans-serif;
    }}

    .eq-title {{
        font-weight: 600;
        font-size: 1.2rem;
    }}

    .eq-progress {{
        display: flex;
        align-items: center;
        gap: 0.5rem;
        font-size: 0.75rem;
        margin: 0.25rem 0 0.5rem 0;
    }}

    .eq-progress-bar {{
        flex: 1;
        height: 8px;
        background: {theme['border']}55;
        border-radius: 4px;
        overflow: hidden;
    }}

    .eq-progress-fill {{
        height: 8px;
        background: {theme['primary']};
        border-radius: 4px;
    }}

    .eq-card {{
        background: {theme['surface_alt']};
        border: 1px solid {theme['border']};
        border-radius: 12px;
        padding: 1rem;
        text-align: center;
        margin-bottom: 0.75rem;
    }}

    .eq-placeholder {{
        font-size: 4rem;
        padding: 2rem 0;
    }}

    .eq-status {{
        min-height: 3rem;
        text-align: center;
        font-size: 1.3rem;
        white-space: pre-line;
        padding: 0.5rem;
        border-radius: 10px;
    }}

    .eq-status-correct {{
        background: {theme['correct']}22;
        border: 1px solid {theme['correct']};
    }}

    .eq-status-incorrect {{
        background: {theme['incorrect']}22;
        border: 1px solid {theme['incorrect']};
    }}

    .eq-footer {{
        margin-top: 0.75rem;
        font-size: 0.8rem;
        color: {theme['text']}aa;
        text-align: center;
    }}
    </style>
    """


# ----------------------------------------------------------------------
#  Theme helpers
# ----------------------------------------------------------------------
def _ensure_theme(default: str = "light") -> str:
    """Make sure st.session_state has a valid theme key and return it."""
    if "theme" not in st.session_state:
        st.session_state["theme"] = default
    theme_key = st.session_state.get("theme", default)
    if theme_key not in THEMES:
        theme_key = "light"
        st.session_state["theme"] = "light"
    return theme_key


def render_theme_selector(theme_key: str) -> str:
    options = list(THEMES.keys())
    idx = options.index(theme_key) if theme_key in options else 0
    selected = st.radio(
        "Theme",
        options,
        index=idx,
        horizontal=True,
        format_func=lambda k: k.title(),
    )
    st.session_state["theme"] = selected
    return selected


# ----------------------------------------------------------------------
#  Image
# ----------------------------------------------------------------------
def _render_image(
    image_key: str,
    images_dir: Path,
    extension: str,
    caption: Optional[str],
) -> None:
    path = image_path(image_key, images_dir, extension)
    if path.exists():
        st.image(str(path), caption=caption, width=280)
        return

    if image_key not in _MISSING_IMAGES:
        _MISSING_IMAGES.add(image_key)
        logger.warning("Image not found: %s", path)

    # no name here; in quiz mode it would give the answer away
    html = "<div class='eq-card'><div class='eq-placeholder'>🧪</div>"
    if caption:
        html += f"<div>{caption}</div>"
    html += "</div>"
    st.markdown(html, unsafe_allow_html=True)


def _status_class(directive: RenderDirective) -> str:
    if directive.answer_correct is None:
        return "eq-status"
    if directive.answer_correct:
        return "eq-status eq-status-correct"
    return "eq-status eq-status-incorrect"


# ----------------------------------------------------------------------
#  Public API: quiz page
# ----------------------------------------------------------------------
def render_quiz_page(
    directive: RenderDirective,
    *,
    images_dir: Path,
    image_extension: str = ".png",
    app_name: str = "Element Quiz",
) -> Dict[str, Any]:
    """
    Draw the quiz page for one directive and report the user's actions.

    Returns:
        {
          "selected_mode": Optional[Mode],   # set when the selector changed
          "clicked_reveal": bool,
          "submitted_text": Optional[str],   # set when the answer form was sent
          "clicked_next": bool,
          "theme": str,
        }
    """
    theme_key = _ensure_theme()
    st.markdown(_generate_css(THEMES[theme_key]), unsafe_allow_html=True)

    selected_mode: Optional[Mode] = None
    clicked_reveal = False
    submitted_text: Optional[str] = None
    clicked_next = False

    # ----------------------------------------
    # Header
    # ----------------------------------------
    st.markdown(f"<div class='eq-title'>{app_name}</div>", unsafe_allow_html=True)

    modes = list(MODE_LABELS.keys())
    # no widget key: the index changes with the controller's mode, which
    # gives Streamlit a fresh widget whenever the mode is changed elsewhere
    chosen = st.radio(
        "Mode",
        modes,
        index=modes.index(directive.mode),
        horizontal=True,
        format_func=lambda m: MODE_LABELS[m],
        label_visibility="collapsed",
    )
    if chosen != directive.mode:
        selected_mode = chosen

    if directive.item_count > 0:
        percent = int((directive.item_index + 1) * 100 / directive.item_count)
        st.markdown(
            "<div class='eq-progress'>"
            f"<div>{directive.item_index + 1} / {directive.item_count}</div>"
            "<div class='eq-progress-bar'>"
            f"<div class='eq-progress-fill' style='width:{percent}%'></div>"
            "</div>"
            "</div>",
            unsafe_allow_html=True,
        )

    # ----------------------------------------
    # Card
    # ----------------------------------------
    _render_image(
        directive.image_key,
        images_dir,
        image_extension,
        caption=directive.display_name,
    )

    st.markdown(
        f"<div class='{_status_class(directive)}'>"
        f"{directive.status_text}</div>",
        unsafe_allow_html=True,
    )

    # ----------------------------------------
    # Controls
    # ----------------------------------------
    if directive.reveal_button.visible:
        if st.button(
            directive.reveal_button.label or "Show Answer",
            key="eq_reveal",
            disabled=not directive.reveal_button.enabled,
            use_container_width=True,
        ):
            clicked_reveal = True

    if directive.text_input.visible:
        enabled = directive.text_input.enabled
        # one key per question: the typed answer stays visible (disabled)
        # in ANSWER and a new question starts with an empty field
        with st.form("eq_answer_form"):
            text = st.text_input(
                "Which element is this?",
                key=f"eq_answer_{directive.item_index}",
                disabled=not enabled,
                placeholder="Type the element name and press Enter",
            )
            if st.form_submit_button(
                "Submit", key="eq_submit", disabled=not enabled, use_container_width=True
            ):
                submitted_text = text

    if directive.next_button.visible:
        if st.button(
            directive.next_button.label,
            key="eq_next",
            disabled=not directive.next_button.enabled,
            type="primary",
            use_container_width=True,
        ):
            clicked_next = True

    st.markdown(
        "<div class='eq-footer'>Learn the elements by sight</div>",
        unsafe_allow_html=True,
    )

    return {
        "selected_mode": selected_mode,
        "clicked_reveal": clicked_reveal,
        "submitted_text": submitted_text,
        "clicked_next": clicked_next,
        "theme": theme_key,
    }


# ----------------------------------------------------------------------
#  Score dialog
# ----------------------------------------------------------------------
def render_score_dialog(summary: ScoreSummary, on_dismiss: Callable[[], None]) -> None:
    """
    Show the score as a modal. OK calls on_dismiss and reruns the script.

    If the dialog is closed without OK the phase stays SCORE and the
    dialog comes back on the next rerun.
    """

    @st.dialog(summary.title)
    def _score_dialog() -> None:
        st.write(summary.message)
        if st.button("OK", key="eq_score_ok", use_container_width=True):
            on_dismiss()
            st.rerun()

    _score_dialog()
