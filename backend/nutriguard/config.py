"""
Environment configuration and paths.
All resolution relative to the backend directory.
"""
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Repo root: backend/nutriguard/config.py -> parent=nutriguard, parent.parent=backend, parent.parent.parent=repo
_BACKEND_DIR = Path(__file__).resolve().parent.parent
_REPO_ROOT = _BACKEND_DIR.parent


# --- Data paths ---
def get_taxonomy_path() -> Path:
    """Optional keyword taxonomy override; the built-in tables are used when the file is absent."""
    override = os.environ.get("NUTRIGUARD_TAXONOMY_PATH", "").strip()
    if override:
        return Path(override)
    return _REPO_ROOT / "data" / "taxonomy.json"


def get_env_file_path() -> Path:
    return _BACKEND_DIR / ".env"


# --- Logging ---
def get_log_level() -> int:
    name = os.environ.get("NUTRIGUARD_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


# --- Startup logging ---
def log_config() -> None:
    path = get_taxonomy_path()
    logger.info(
        "CONFIG: taxonomy_path=%s taxonomy_override=%s log_level=%s",
        path, path.exists(), logging.getLevelName(get_log_level()),
    )
