from unittest import mock

from click.testing import CliRunner

from hk._impl.cli.main import hk
from hk._impl.config.constants import API_ENDPOINT
from tests.util import addon_json
from tests.util import app_json
from tests.util import attachment_json
from tests.util import dyno_json
from tests.util import release_json


def test_ls_apps(httpx_mock):
    httpx_mock.add_response(
        url=f"{API_ENDPOINT}/apps",
        method="GET",
        json=[app_json("myapp2"), app_json("myapp")],
        match_headers={"Authorization": "Bearer mock-api-key"},
    )

    result = CliRunner().invoke(hk, ["ls"])

    assert result.exit_code == 0
    assert result.stdout == "myapp\nmyapp2\n"


def test_ls_long_dynos_are_aligned(httpx_mock):
    httpx_mock.add_response(
        url=f"{API_ENDPOINT}/apps/myapp/dynos",
        method="GET",
        json=[
            dyno_json("web.2", "blog /app /tmp/dst", hours=8),
            dyno_json("web.1", "blog /app /tmp/dst", hours=15),
            dyno_json("run.3794", "bash", seconds=90),
        ],
    )

    result = CliRunner().invoke(hk, ["ls", "-l", "-a", "myapp", "dynos"])

    assert result.exit_code == 0
    assert result.stdout == (
        "run.3794  up  90s  bash\n"
        'web.1     up  15h  "blog /app /tmp/dst"\n'
        'web.2     up   8h  "blog /app /tmp/dst"\n'
    )


def test_ls_addons_uses_app_from_env(httpx_mock, monkeypatch):
    monkeypatch.setenv("HKAPP", "myapp")
    httpx_mock.add_response(
        url=f"{API_ENDPOINT}/apps/myapp/addons",
        method="GET",
        json=[addon_json("soaring-ably-1234", "redistogo:nano", ["REDIS_URL"], "me@example.com")],
    )
    httpx_mock.add_response(
        url=f"{API_ENDPOINT}/apps/myapp/attachments",
        method="GET",
        json=[attachment_json("DATABASE_URL", "flying-pony-42", "heroku-postgresql:dev", "me@example.com")],
    )

    result = CliRunner().invoke(hk, ["ls", "-l", "addons", "REDIS_URL"])

    assert result.exit_code == 0
    assert result.stdout == "redistogo:nano  me  soaring-ably-1234  REDIS_URL\n"


def test_ls_named_releases_keeps_partial_results(httpx_mock):
    httpx_mock.add_response(
        url=f"{API_ENDPOINT}/apps/myapp/releases/v1",
        method="GET",
        json=release_json("v1", "3ae20c2aaaaaaaaa"),
    )
    httpx_mock.add_response(
        url=f"{API_ENDPOINT}/apps/myapp/releases/v7",
        method="GET",
        status_code=404,
        json={"id": "not_found", "message": "Couldn't find that release."},
    )

    with mock.patch("hk._impl.ls.lister.describe_commits", return_value={}):
        result = CliRunner().invoke(hk, ["ls", "-a", "myapp", "rel", "v7", "v1"])

    assert result.exit_code == 0
    assert result.stdout == "v1\n"
    assert "HTTP 404: Couldn't find that release." in result.stderr


def test_ls_requires_app():
    result = CliRunner().invoke(hk, ["ls", "dynos"])

    assert result.exit_code == 1
    assert "must specify app" in result.stderr


def test_ls_requires_api_key(monkeypatch):
    monkeypatch.delenv("HEROKU_API_KEY")

    result = CliRunner().invoke(hk, ["ls"])

    assert result.exit_code == 1
    assert "HEROKU_API_KEY" in result.stderr


def test_ls_fails_when_listing_all_fails(httpx_mock):
    httpx_mock.add_response(
        url=f"{API_ENDPOINT}/apps",
        method="GET",
        status_code=401,
        json={"id": "unauthorized", "message": "Invalid credentials provided."},
    )

    result = CliRunner().invoke(hk, ["ls"])

    assert result.exit_code == 1
    assert "Invalid credentials provided." in result.stderr
    assert result.stdout == ""
