"""
Runtime settings for the dirs tool.

Values come from the environment, optionally seeded from a .env file in the
working directory. Real environment variables win over .env entries.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_KIND = "desktop"
TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Settings read once at startup."""
    default_kind: str = DEFAULT_KIND
    open_selected: bool = False


def load_settings(env: dict | None = None, dotenv: bool = True) -> Settings:
    """
    Build Settings from the environment.

    Args:
        env: Mapping to read instead of os.environ (used by tests).
        dotenv: Whether to load a .env file first. Ignored when env is given.

    Returns:
        The resolved Settings.
    """
    if env is None:
        if dotenv:
            load_dotenv()
        env = os.environ

    default_kind = env.get("DIRS_DEFAULT_KIND", "").strip() or DEFAULT_KIND
    open_selected = env.get("DIRS_OPEN_SELECTED", "").strip().lower() in TRUTHY

    return Settings(default_kind=default_kind, open_selected=open_selected)
