"""
Shared fixtures: a sample gamified README and a canned GitHub response
so the updater can be exercised without real network calls.

Run:  pytest -q
"""
import json

import pytest
import requests

SAMPLE_README = (
    "# Hi there\n"
    "\n"
    "<ul>\n"
    '<li style="text-align: left" id="level"><strong>Level</strong> 3 → 4 (401 EXP to next)</li>\n'
    '<li style="text-align: left; display: flex; align-items: center; gap: 10px;" id="exp">'
    "<strong>Total Experience</strong> `1999 / 2200 EXP` | ████████████░░ (90.9%)</li>\n"
    '<li id="quest">Daily quest: ship something</li>\n'
    "</ul>\n"
    "\n"
    '<section id="skills-section">\n'
    "<h2>stale</h2>\n"
    "</section>\n"
    "\n"
    "Thanks for visiting!\n"
)

REPOS_JSON = [
    {"name": "api", "language": "Python", "size": 300},
    {"name": "cli", "language": "Python", "size": 100},
    {"name": "proxy", "language": "Go", "size": 600},
    {"name": "notes", "language": None, "size": 999},
]


class FakeResp:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code
        self.text = json.dumps(payload)

    def json(self):
        return self.payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


@pytest.fixture
def sample_readme():
    return SAMPLE_README


@pytest.fixture
def readme_file(tmp_path):
    path = tmp_path / "README.md"
    path.write_text(SAMPLE_README, encoding="utf-8")
    return path


@pytest.fixture
def repos_payload():
    return [dict(repo) for repo in REPOS_JSON]


@pytest.fixture
def fake_response():
    return FakeResp
