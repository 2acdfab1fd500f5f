"""Tests for the official examples lister (infra/official_examples.py).

HTTP is served by :class:`httpx.MockTransport` — no internet access.
"""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from create_razzle_app.config import AppSettings
from create_razzle_app.exceptions import ExampleListingError
from create_razzle_app.infra.http_client import build_client
from create_razzle_app.infra.official_examples import OfficialExamplesLister

LISTING = [
    {"name": "basic", "type": "dir"},
    {"name": "README.md", "type": "file"},
    {"name": "with-typescript", "type": "dir"},
    {"name": ".gitkeep", "type": "file"},
]


def _factory(
    settings: AppSettings,
    handler: Callable[[httpx.Request], httpx.Response],
    seen: list[httpx.Request] | None = None,
) -> Callable[[], httpx.Client]:
    def _handle(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return handler(request)

    return lambda: build_client(settings, transport=httpx.MockTransport(_handle))


def _json(payload: object, status: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    return lambda _request: httpx.Response(status, content=json.dumps(payload).encode())


class TestContinuousIntegration:
    @pytest.mark.parametrize("verbose", [True, False])
    def test_ci_returns_basic_without_network(
        self, settings: AppSettings, verbose: bool,
    ) -> None:
        def _explode() -> httpx.Client:
            raise AssertionError("network must not be used in CI")

        lines: list[str] = []
        lister = OfficialExamplesLister(settings, client_factory=_explode, log=lines.append)
        assert lister.list(verbose=verbose, is_ci=True) == ["basic"]
        assert lines == []


class TestListing:
    def test_filters_directories(self, settings: AppSettings) -> None:
        seen: list[httpx.Request] = []
        lister = OfficialExamplesLister(
            settings, client_factory=_factory(settings, _json(LISTING), seen),
        )
        assert lister.list(verbose=False, is_ci=False) == ["basic", "with-typescript"]
        assert len(seen) == 1
        assert str(seen[0].url) == settings.examples_api_url
        assert seen[0].headers["User-Agent"].startswith("create-razzle-app/")

    def test_logs_url_always(self, settings: AppSettings) -> None:
        lines: list[str] = []
        lister = OfficialExamplesLister(
            settings,
            client_factory=_factory(settings, _json(LISTING)),
            log=lines.append,
        )
        lister.list(verbose=False, is_ci=False)
        assert lines == [f"Getting data from {settings.examples_api_url}:"]

    def test_verbose_logs_names(self, settings: AppSettings) -> None:
        lines: list[str] = []
        lister = OfficialExamplesLister(
            settings,
            client_factory=_factory(settings, _json(LISTING)),
            log=lines.append,
        )
        lister.list(verbose=True, is_ci=False)
        assert lines == [
            f"Getting data from {settings.examples_api_url}:",
            f"Got data from {settings.examples_api_url}:",
            "['basic', 'with-typescript']",
        ]

    def test_token_is_sent(self) -> None:
        settings = AppSettings(github_token="s3cret")
        seen: list[httpx.Request] = []
        lister = OfficialExamplesLister(
            settings, client_factory=_factory(settings, _json([]), seen),
        )
        lister.list(verbose=False, is_ci=False)
        assert seen[0].headers["Authorization"] == "Bearer s3cret"

    def test_master_url_has_no_ref(self) -> None:
        settings = AppSettings(branch="master")
        lister = OfficialExamplesLister(settings)
        assert "?ref=" not in lister.url


class TestFailures:
    def test_http_error_status(self, settings: AppSettings) -> None:
        lister = OfficialExamplesLister(
            settings,
            client_factory=_factory(settings, _json({"message": "rate limited"}, status=403)),
        )
        with pytest.raises(ExampleListingError, match="403") as exc_info:
            lister.list(verbose=False, is_ci=False)
        assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)

    def test_transport_error(self, settings: AppSettings) -> None:
        def _fail(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("offline", request=request)

        lister = OfficialExamplesLister(settings, client_factory=_factory(settings, _fail))
        with pytest.raises(ExampleListingError, match="Could not reach"):
            lister.list(verbose=False, is_ci=False)

    def test_malformed_json(self, settings: AppSettings) -> None:
        lister = OfficialExamplesLister(
            settings,
            client_factory=_factory(
                settings, lambda _r: httpx.Response(200, content=b"<html>"),
            ),
        )
        with pytest.raises(ExampleListingError, match="parse"):
            lister.list(verbose=False, is_ci=False)

    def test_non_list_payload(self, settings: AppSettings) -> None:
        lister = OfficialExamplesLister(
            settings, client_factory=_factory(settings, _json({"message": "Not Found"})),
        )
        with pytest.raises(ExampleListingError, match="JSON array"):
            lister.list(verbose=False, is_ci=False)
