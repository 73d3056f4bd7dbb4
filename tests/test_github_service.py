from unittest.mock import patch

import pytest
import requests

from skill_updater.models import FETCH_STATUS_EMPTY, FETCH_STATUS_FAILED, FETCH_STATUS_OK, UpdateConfig
from skill_updater.services.github_service import GitHubService, aggregate_language_stats


def _service(**overrides):
    return GitHubService(UpdateConfig(github_username="chious", **overrides))


def test_aggregate_groups_by_language(repos_payload):
    stats = aggregate_language_stats(repos_payload)

    assert list(stats) == ["Python", "Go"]
    assert stats["Python"].count == 2
    assert stats["Python"].bytes == 400
    assert stats["Python"].percent == pytest.approx(40.0)
    assert stats["Python"].level == 1
    assert stats["Go"].bytes == 600
    assert stats["Go"].percent == pytest.approx(60.0)
    assert stats["Go"].level == 1


def test_aggregate_level_is_log2_of_repo_count():
    repos = [{"language": "C", "size": 1}] * 3 + [{"language": "Lua", "size": 1}] * 7
    stats = aggregate_language_stats(repos)
    assert stats["C"].level == 2
    assert stats["Lua"].level == 3


def test_aggregate_skips_ignored_languages(repos_payload):
    stats = aggregate_language_stats(repos_payload, {"python"})
    assert list(stats) == ["Go"]
    assert stats["Go"].percent == pytest.approx(100.0)


def test_aggregate_zero_sizes_give_zero_share():
    stats = aggregate_language_stats([{"language": "Shell", "size": 0}, {"language": "Shell"}])
    assert stats["Shell"].count == 2
    assert stats["Shell"].percent == 0.0


def test_aggregate_rejects_unexpected_payload():
    with pytest.raises(TypeError):
        aggregate_language_stats({"message": "API rate limit exceeded"})
    with pytest.raises(ValueError):
        aggregate_language_stats([{"language": "Go", "size": "huge"}])


def test_fetch_requests_user_repos(fake_response, repos_payload):
    with patch("requests.get", return_value=fake_response(repos_payload)) as mock_get:
        result = _service(github_token="secret").fetch_language_stats()

    assert result.status == FETCH_STATUS_OK
    assert set(result.stats) == {"Python", "Go"}
    args, kwargs = mock_get.call_args
    assert args[0] == "https://api.github.com/users/chious/repos"
    assert kwargs["headers"]["Authorization"] == "Bearer secret"
    assert kwargs["params"] == {"per_page": 100}
    assert kwargs["timeout"] == 30


def test_fetch_without_token_is_anonymous(fake_response):
    with patch("requests.get", return_value=fake_response([])) as mock_get:
        _service().fetch_language_stats()
    assert "Authorization" not in mock_get.call_args.kwargs["headers"]


@pytest.mark.parametrize(
    "payload",
    [[], [{"name": "notes", "language": None, "size": 10}, {"name": "blank", "size": 3}]],
)
def test_fetch_without_languages_is_empty(fake_response, payload):
    with patch("requests.get", return_value=fake_response(payload)):
        result = _service().fetch_language_stats()

    assert result.status == FETCH_STATUS_EMPTY
    assert result.stats == {}
    assert result.error is None


def test_fetch_network_error_is_reported(capsys):
    with patch("requests.get", side_effect=requests.ConnectionError("boom")):
        result = _service().fetch_language_stats()

    assert result.status == FETCH_STATUS_FAILED
    assert result.is_failed
    assert result.stats == {}
    assert "boom" in result.error
    assert "Error fetching stats: boom" in capsys.readouterr().err


def test_fetch_http_error_is_reported(fake_response):
    with patch("requests.get", return_value=fake_response({"message": "Not Found"}, status_code=404)):
        result = _service().fetch_language_stats()
    assert result.status == FETCH_STATUS_FAILED
    assert "404" in result.error


def test_fetch_bad_shape_is_reported(fake_response):
    with patch("requests.get", return_value=fake_response({"message": "weird"})):
        result = _service().fetch_language_stats()
    assert result.status == FETCH_STATUS_FAILED
    assert "expected a list of repositories" in result.error


@pytest.mark.parametrize("size", [12.7, "300", True])
def test_aggregate_rejects_non_integer_sizes(size):
    with pytest.raises(ValueError):
        aggregate_language_stats([{"language": "Go", "size": size}])


def test_fetch_float_size_is_reported(fake_response):
    with patch("requests.get", return_value=fake_response([{"language": "Go", "size": 1.5}])):
        result = _service().fetch_language_stats()
    assert result.status == FETCH_STATUS_FAILED
    assert "expected an integer repository size" in result.error
