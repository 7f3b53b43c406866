"""
config.py
=========

Settings shared by app.py and the element_quiz package.

Values come from three layers, later ones winning:
1. AppConfig defaults
2. config.toml at the repository root (optional)
3. environment variables (ELEMENT_QUIZ_*)

A missing or broken config.toml never stops the app; defaults are used.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional
import logging
import os
import random

import toml

logger = logging.getLogger(__name__)


# ------------------------------------------------------------
# Base paths
# ------------------------------------------------------------

ROOT_DIR = Path(__file__).resolve().parent.parent
CONFIG_PATH = ROOT_DIR / "config.toml"
IMAGES_DIR = ROOT_DIR / "images"
LOG_DIR = ROOT_DIR / "log"

THEME_KEYS = ("light", "dark", "blue")


# ------------------------------------------------------------
# AppConfig
# ------------------------------------------------------------

@dataclass
class AppConfig:
    """
    Application settings.

    - app name / theme / image location
    - quiz shuffle seed (None = non-deterministic)
    - logging level and file
    """

    # ---------- app ----------
    app_name: str = "Element Quiz"
    theme: str = "light"
    images_dir: Path = IMAGES_DIR
    image_extension: str = ".png"

    # ---------- quiz ----------
    seed: Optional[int] = None

    # ---------- logging ----------
    log_level: str = "INFO"
    log_dir: Path = LOG_DIR
    log_file: str = "element_quiz.log"

    def __post_init__(self):
        self.images_dir = Path(self.images_dir)
        self.log_dir = Path(self.log_dir)
        if self.theme not in THEME_KEYS:
            logger.warning("Unknown theme %r, using 'light'", self.theme)
            self.theme = "light"

    @property
    def log_path(self) -> Path:
        return self.log_dir / self.log_file

    # ============================================================
    # Construction
    # ============================================================

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Build from the parsed config.toml ([app], [quiz], [logging])."""
        app = data.get("app") if isinstance(data.get("app"), dict) else {}
        quiz = data.get("quiz") if isinstance(data.get("quiz"), dict) else {}
        log = data.get("logging") if isinstance(data.get("logging"), dict) else {}

        kwargs: Dict[str, Any] = {}
        if "name" in app:
            kwargs["app_name"] = str(app["name"])
        if "theme" in app:
            kwargs["theme"] = str(app["theme"])
        if "images_dir" in app:
            kwargs["images_dir"] = _resolve(app["images_dir"])
        if "image_extension" in app:
            kwargs["image_extension"] = str(app["image_extension"])
        if quiz.get("seed") is not None:
            kwargs["seed"] = int(quiz["seed"])
        if "level" in log:
            kwargs["log_level"] = str(log["level"]).upper()
        if "dir" in log:
            kwargs["log_dir"] = _resolve(log["dir"])
        if "file" in log:
            kwargs["log_file"] = str(log["file"])
        return cls(**kwargs)

    def apply_env(self, environ: Optional[Dict[str, str]] = None) -> "AppConfig":
        env = os.environ if environ is None else environ

        images_dir = env.get("ELEMENT_QUIZ_IMAGES_DIR")
        if images_dir:
            self.images_dir = _resolve(images_dir)

        seed = env.get("ELEMENT_QUIZ_SEED")
        if seed:
            try:
                self.seed = int(seed)
            except ValueError:
                logger.warning("Ignoring non-integer ELEMENT_QUIZ_SEED=%r", seed)

        level = env.get("ELEMENT_QUIZ_LOG_LEVEL")
        if level:
            self.log_level = level.upper()
        return self


# ============================================================
# Loading
# ============================================================

def load_config(
    path: Optional[Path] = None,
    environ: Optional[Dict[str, str]] = None,
) -> AppConfig:
    """
    Read config.toml (if present) and the environment.
    Falls back to defaults when the file is missing or invalid.
    """
    path = CONFIG_PATH if path is None else Path(path)

    data: Dict[str, Any] = {}
    if path.exists():
        try:
            data = toml.load(str(path))
        except (toml.TomlDecodeError, OSError) as e:
            logger.warning("Could not read %s, using defaults: %s", path, e)
            data = {}

    try:
        config = AppConfig.from_dict(data)
    except (TypeError, ValueError) as e:
        logger.warning("Invalid settings in %s, using defaults: %s", path, e)
        config = AppConfig()

    return config.apply_env(environ)


def make_rng(config: AppConfig) -> random.Random:
    """Random source for quiz shuffling."""
    return random.Random(config.seed)


def _resolve(value: Any) -> Path:
    p = Path(str(value)).expanduser()
    return p if p.is_absolute() else ROOT_DIR / p
