"""
Project ``.env`` discovery and loading.

Settings such as ``CUSTOMER_PROCESSING_LOG_LEVEL`` may be kept in a ``.env``
file at the project root (the nearest directory holding ``pyproject.toml``).
``CUSTOMER_PROCESSING_DOTENV`` points at a different file instead. Variables
already present in the process environment are never overridden unless asked.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

__all__ = ["DOTENV_PATH_ENV_VAR", "find_project_root", "resolve_dotenv_path", "load_project_dotenv"]

DOTENV_PATH_ENV_VAR = "CUSTOMER_PROCESSING_DOTENV"
DOTENV_FILENAME = ".env"
PROJECT_MARKER = "pyproject.toml"
MAX_SEARCH_DEPTH = 10


def find_project_root(start: Path | None = None) -> Path | None:
    """Nearest directory at or above ``start`` that contains ``pyproject.toml``."""
    start = (start or Path(__file__).resolve().parent).resolve()
    for candidate in [start, *start.parents][:MAX_SEARCH_DEPTH]:
        if (candidate / PROJECT_MARKER).is_file():
            return candidate
    return None


def resolve_dotenv_path(start: Path | None = None) -> Path | None:
    """
    Locate the ``.env`` file to load.

    An explicit ``CUSTOMER_PROCESSING_DOTENV`` wins; otherwise the project
    root's ``.env`` is used. Returns None when no such file exists.
    """
    explicit = os.getenv(DOTENV_PATH_ENV_VAR)
    if explicit:
        path = Path(explicit).expanduser()
        return path if path.is_file() else None

    project_root = find_project_root(start)
    if project_root is None:
        return None
    path = project_root / DOTENV_FILENAME
    return path if path.is_file() else None


def load_project_dotenv(start: Path | None = None, override: bool = False) -> Path | None:
    """
    Load the project's ``.env`` into ``os.environ``.

    Returns:
        Path | None: The file that was loaded, or None if there was none.
    """
    dotenv_path = resolve_dotenv_path(start)
    if dotenv_path is not None:
        load_dotenv(dotenv_path=dotenv_path, override=override)
    return dotenv_path
