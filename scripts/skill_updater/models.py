#------------------------------------------------------------
#                          models.py
#     Defines dataclasses used by the updater pipeline.

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional
from .config import DEFAULT_BAR_WIDTH, DEFAULT_EXP_CAP, DEFAULT_MAX_TABLE_ROWS, README_PATH

FETCH_STATUS_OK = "ok"
FETCH_STATUS_EMPTY = "empty"
FETCH_STATUS_FAILED = "failed"

@dataclass
class UpdateConfig:
    github_username: str
    github_token: str = ""
    exp_cap: int = DEFAULT_EXP_CAP
    bar_width: int = DEFAULT_BAR_WIDTH
    max_table_rows: int = DEFAULT_MAX_TABLE_ROWS
    readme_path: str = README_PATH
    timezone: str = ""
    ignored_languages: FrozenSet[str] = frozenset()

@dataclass(frozen=True)
class LevelInfo:
    current_level: int
    next_level: int
    exp_to_next: int

@dataclass
class ExperienceUpdate:
    old_exp: int
    new_exp: int
    percent_text: str
    bar: str
    level: LevelInfo

@dataclass
class LanguageStat:
    count: int
    bytes: int
    percent: float = 0.0
    level: int = 0

# Outcome of a stats fetch. "empty" means the API answered
# but no repository carried a language; "failed" carries the reason.
@dataclass
class FetchResult:
    status: str
    stats: Dict[str, LanguageStat] = field(default_factory=dict)
    error: Optional[str] = None

    @classmethod
    def ok(cls, stats: Dict[str, LanguageStat]) -> "FetchResult":
        return cls(FETCH_STATUS_OK, stats)

    @classmethod
    def empty(cls) -> "FetchResult":
        return cls(FETCH_STATUS_EMPTY)

    @classmethod
    def failed(cls, reason: str) -> "FetchResult":
        return cls(FETCH_STATUS_FAILED, error=reason)

    @property
    def is_failed(self) -> bool:
        return self.status == FETCH_STATUS_FAILED
