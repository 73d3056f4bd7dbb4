#------------------------------------------------------------
#                        controller.py
#          Coordinates the EXP increment, the stats
#             fetch and the skills section update.

import os
import sys
from datetime import datetime, tzinfo
from typing import Mapping, Optional
from dateutil import tz
from .config import (
    DEFAULT_BAR_WIDTH,
    DEFAULT_EXP_CAP,
    DEFAULT_GITHUB_USERNAME,
    DEFAULT_MAX_TABLE_ROWS,
    ENV_BAR_WIDTH,
    ENV_EXP_CAP,
    ENV_GITHUB_TOKEN,
    ENV_GITHUB_USERNAME,
    ENV_MAX_TABLE_ROWS,
    ENV_UPDATE_TIMEZONE,
    NO_GITHUB_TOKEN_MESSAGE,
    SUCCESS_MESSAGE,
    load_ignored_languages,
    resolve_readme_path,
)
from .models import FETCH_STATUS_EMPTY, FETCH_STATUS_OK, UpdateConfig
from .services.experience_service import apply_experience_update
from .services.github_service import GitHubService
from .services.readme_service import ensure_skills_section, load_readme, save_readme, update_skills_section
from .views.markdown_view import render_skill_table, render_skills_section

UNKNOWN_TIMEZONE_TEMPLATE = "Unknown time zone: {name!r}"
FETCH_SUMMARY_MESSAGES = {
    FETCH_STATUS_OK: "Fetched stats for {count} languages",
    FETCH_STATUS_EMPTY: "No repositories with a language found",
}
FETCH_FAILED_MESSAGE = "WARNING: stats unavailable ({error}); writing an empty skill table"

def _read_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = (environ.get(name) or "").strip()
    if not raw:
        return default
    value = int(raw)
    if value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}")
    return value

# This function does build the run configuration from the environment.
# Invalid numeric values or zone names raise so the run fails before touching the README.
def build_config(environ: Optional[Mapping[str, str]] = None) -> UpdateConfig:
    environ = os.environ if environ is None else environ
    timezone_name = environ.get(ENV_UPDATE_TIMEZONE, "").strip()
    resolve_timezone(timezone_name)
    return UpdateConfig(
        github_username=(environ.get(ENV_GITHUB_USERNAME) or DEFAULT_GITHUB_USERNAME).strip(),
        github_token=environ.get(ENV_GITHUB_TOKEN, ""),
        exp_cap=_read_int(environ, ENV_EXP_CAP, DEFAULT_EXP_CAP),
        bar_width=_read_int(environ, ENV_BAR_WIDTH, DEFAULT_BAR_WIDTH),
        max_table_rows=_read_int(environ, ENV_MAX_TABLE_ROWS, DEFAULT_MAX_TABLE_ROWS),
        readme_path=resolve_readme_path(environ),
        timezone=timezone_name,
        ignored_languages=frozenset(load_ignored_languages()),
    )

def resolve_timezone(timezone_name: str = "") -> tzinfo:
    if not timezone_name:
        return tz.tzlocal()
    zone = tz.gettz(timezone_name)
    if zone is None:
        raise ValueError(UNKNOWN_TIMEZONE_TEMPLATE.format(name=timezone_name))
    return zone

# This function does execute the full update workflow end-to-end.
# Each step finishes (and persists) before the next one starts; the zone
# and the skills section are checked first so a doomed run writes nothing.
def run_update(config: UpdateConfig) -> None:
    zone = resolve_timezone(config.timezone)
    ensure_skills_section(load_readme(config.readme_path))
    if not config.github_token:
        print(NO_GITHUB_TOKEN_MESSAGE)

    apply_experience_update(config.readme_path, config)

    print(f"Fetching repos for {config.github_username} …")
    result = GitHubService(config).fetch_language_stats()
    if result.is_failed:
        print(FETCH_FAILED_MESSAGE.format(error=result.error), file=sys.stderr)
    else:
        print(FETCH_SUMMARY_MESSAGES[result.status].format(count=len(result.stats)))

    table = render_skill_table(result.stats, config.max_table_rows, config.bar_width)
    section = render_skills_section(table, datetime.now(zone))

    readme = load_readme(config.readme_path)
    readme = update_skills_section(readme, section)
    save_readme(config.readme_path, readme)
    print(SUCCESS_MESSAGE)

def main() -> int:
    try:
        run_update(build_config())
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0
