#------------------------------------------------------------
#                          config.py
#   Centralizes environment names, defaults, markup constants,
#            file paths and JSON config loading helpers.

import json
import os
from typing import Mapping, Optional, Set

# Environment variable names for configuration
ENV_GITHUB_USERNAME = "GITHUB_USERNAME"
ENV_GITHUB_TOKEN = "GITHUB_TOKEN"
ENV_EXP_CAP = "EXP_CAP"
ENV_BAR_WIDTH = "BAR_WIDTH"
ENV_MAX_TABLE_ROWS = "MAX_TABLE_ROWS"
ENV_README_PATH = "README_PATH"
ENV_UPDATE_TIMEZONE = "UPDATE_TIMEZONE"

# Default values for configuration parameters
DEFAULT_GITHUB_USERNAME = "chious"
DEFAULT_EXP_CAP = 2200
DEFAULT_BAR_WIDTH = 14
DEFAULT_MAX_TABLE_ROWS = 10
DEFAULT_BASE_LEVEL_EXP = 400

# Constants for GitHub API interaction
GITHUB_API_ACCEPT_HEADER = "application/vnd.github+json"
GITHUB_API_BASE_URL = "https://api.github.com"
GITHUB_REPOS_PER_PAGE = 100
GITHUB_REQUEST_TIMEOUT_SECONDS = 30

# Glyphs used by the progress bar.
BAR_FILLED_GLYPH = "█"
BAR_EMPTY_GLYPH = "░"

# Element identifiers used in README.md to locate the mutable fragments.
LEVEL_ELEMENT_TAG = "li"
LEVEL_ELEMENT_ID = "level"
EXP_ELEMENT_TAG = "li"
EXP_ELEMENT_ID = "exp"
SKILLS_SECTION_TAG = "section"
SKILLS_SECTION_ID = "skills-section"

# Skill table layout.
SKILL_COLUMN_WIDTH = 10
SKILL_TABLE_HEADER = (
    "| Skill      | Level | EXP Bar        | Usage    |\n"
    "| ---------- | ----- | -------------- | -------- |\n"
)
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %Z"

# Messages shown on the console.
NO_GITHUB_TOKEN_MESSAGE = "No GITHUB_TOKEN found - using anonymous GitHub API access"
SUCCESS_MESSAGE = "README.md has been updated successfully!"

# Directory paths for the project and configuration files.
SCRIPTS_DIR = os.path.dirname(os.path.dirname(__file__))
ROOT_DIR = os.path.dirname(SCRIPTS_DIR)
README_PATH = os.path.join(ROOT_DIR, "README.md")
CONFIG_DIR = os.path.join(SCRIPTS_DIR, "config")
IGNORE_LANGUAGES_PATH = os.path.join(CONFIG_DIR, "language_ignore_list.json")

def resolve_readme_path(environ: Optional[Mapping[str, str]] = None) -> str:
    environ = os.environ if environ is None else environ
    configured = (environ.get(ENV_README_PATH) or "").strip()
    if configured:
        if os.path.isabs(configured):
            return configured
        return os.path.join(ROOT_DIR, configured)
    return README_PATH

# This function does load JSON content from disk safely.
# It returns None when the file is missing or invalid.
def _load_json(path: str):
    if not os.path.exists(path):
        return None
    try:
        with open(path, "r", encoding="utf-8") as file_handle:
            return json.load(file_handle)
    except (OSError, ValueError):
        return None

# This function does load the language ignore list.
# It returns normalized lowercase language names as a set.
def load_ignored_languages(path: str = IGNORE_LANGUAGES_PATH) -> Set[str]:
    data = _load_json(path)
    if not isinstance(data, list):
        return set()
    return {str(item).strip().lower() for item in data if str(item).strip()}
