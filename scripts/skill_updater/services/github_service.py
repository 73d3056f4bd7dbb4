#------------------------------------------------------------
#                      github_service.py
#          Handles the GitHub repository listing and
#              per-language statistics shaping.

import math
import sys
from typing import Dict, Iterable, List
import requests
from ..config import (
    GITHUB_API_ACCEPT_HEADER,
    GITHUB_API_BASE_URL,
    GITHUB_REPOS_PER_PAGE,
    GITHUB_REQUEST_TIMEOUT_SECONDS,
)
from ..models import FetchResult, LanguageStat, UpdateConfig

USER_REPOS_ENDPOINT_TEMPLATE = "/users/{username}/repos"
FETCH_ERROR_TEMPLATE = "Error fetching stats: {error}"
UNEXPECTED_PAYLOAD_TEMPLATE = "expected a list of repositories, got {kind}"
UNEXPECTED_RECORD_TEMPLATE = "expected a repository object, got {kind}"
UNEXPECTED_SIZE_TEMPLATE = "expected an integer repository size, got {value!r}"

# This function does aggregate repository sizes by primary language.
# It derives each language's byte share and log2 repo-count level.
def aggregate_language_stats(repos: List[dict], ignored_languages: Iterable[str] = ()) -> Dict[str, LanguageStat]:
    if not isinstance(repos, list):
        raise TypeError(UNEXPECTED_PAYLOAD_TEMPLATE.format(kind=type(repos).__name__))

    ignored = {language.lower() for language in ignored_languages}
    stats: Dict[str, LanguageStat] = {}
    for repo in repos:
        if not isinstance(repo, dict):
            raise TypeError(UNEXPECTED_RECORD_TEMPLATE.format(kind=type(repo).__name__))
        language = repo.get("language")
        if not language or language.strip().lower() in ignored:
            continue
        size = repo.get("size")
        if size is None:
            size = 0
        elif isinstance(size, bool) or not isinstance(size, int):
            raise ValueError(UNEXPECTED_SIZE_TEMPLATE.format(value=size))
        stat = stats.get(language)
        if stat is None:
            stats[language] = LanguageStat(count=1, bytes=size)
        else:
            stat.count += 1
            stat.bytes += size

    total_bytes = sum(stat.bytes for stat in stats.values())
    for stat in stats.values():
        stat.percent = (stat.bytes / total_bytes) * 100 if total_bytes else 0.0
        stat.level = math.floor(math.log2(stat.count + 1))
    return stats

class GitHubService:

    def __init__(self, config: UpdateConfig):
        self.config = config

    # This function does build request headers for GitHub API calls.
    # It adds auth headers when a token is configured.
    def headers(self) -> Dict[str, str]:
        headers = {"Accept": GITHUB_API_ACCEPT_HEADER}
        if self.config.github_token:
            headers["Authorization"] = f"Bearer {self.config.github_token}"
        return headers

    # This function does fetch the account's public repositories.
    # It issues a single request and raises on HTTP errors.
    def fetch_repos(self) -> List[dict]:
        url = f"{GITHUB_API_BASE_URL}{USER_REPOS_ENDPOINT_TEMPLATE.format(username=self.config.github_username)}"
        response = requests.get(
            url,
            headers=self.headers(),
            params={"per_page": GITHUB_REPOS_PER_PAGE},
            timeout=GITHUB_REQUEST_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
        return response.json()

    # This function does fetch and aggregate language statistics.
    # Failures are reported and returned as a failed result, never raised.
    def fetch_language_stats(self) -> FetchResult:
        try:
            repos = self.fetch_repos()
            stats = aggregate_language_stats(repos, self.config.ignored_languages)
        except (requests.RequestException, ValueError, TypeError, AttributeError) as exc:
            print(FETCH_ERROR_TEMPLATE.format(error=exc), file=sys.stderr)
            return FetchResult.failed(str(exc))

        if not stats:
            return FetchResult.empty()
        return FetchResult.ok(stats)
