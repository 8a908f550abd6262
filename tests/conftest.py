# Fixtures standing in for the upstream stats site (httpx MockTransport).

from __future__ import annotations

import pytest

from factories import SQUAD_URL, FakeSite, profile_html, profile_url, squad_html


@pytest.fixture
def site() -> FakeSite:
    return FakeSite()


@pytest.fixture
def two_player_site(site: FakeSite) -> FakeSite:
    site.add(SQUAD_URL, squad_html(["Alpha", "Bravo"]))
    site.add(profile_url("Alpha"), profile_html("Alpha", 10, 4, 6))
    site.add(profile_url("Bravo"), profile_html("Bravo", 0, 0, 0))
    return site


@pytest.fixture(autouse=True)
def _no_site_password(monkeypatch):
    # Tests opt in to the login gate explicitly
    monkeypatch.delenv("SITE_PASSWORD", raising=False)
