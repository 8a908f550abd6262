from __future__ import annotations

import httpx

from core import async_http
from domain.models import PlayerRecord, Snapshot

CLUB_ID = "420295"
BASE = "https://proclubshead.com"
SQUAD_URL = f"{BASE}/26/club-squad/gen5-{CLUB_ID}/"


def profile_url(slug: str) -> str:
    return f"{BASE}/26/club-player/gen5-{CLUB_ID}-{slug}/"


def squad_html(slugs: list[str]) -> str:
    links = "".join(
        f'<li><a href="/26/club-player/gen5-{CLUB_ID}-{s}/">{s}</a></li>' for s in slugs
    )
    return f"<html><body><h1>Squad</h1><ul>{links}</ul></body></html>"


def profile_html(name: str, games: int, goals: int, assists: int) -> str:
    return (
        f"<html><body><h1>{name}</h1>"
        "<table>"
        f"<tr><th>Matches played</th><td>{games}</td></tr>"
        f"<tr><th>Goals</th><td>{goals}</td></tr>"
        f"<tr><th>Assists</th><td>{assists}</td></tr>"
        "</table></body></html>"
    )


def make_snapshot(*players: tuple[str, int, int, int]) -> Snapshot:
    return Snapshot.create(
        PlayerRecord(name=n, games=g, goals=gl, assists=a, source=profile_url(n))
        for n, g, gl, a in players
    )


class FakeSite:
    """URL -> (status, body) table served through ``httpx.MockTransport``."""

    def __init__(self) -> None:
        self.pages: dict[str, tuple[int, str]] = {}
        self.requests: list[str] = []

    def add(self, url: str, body: str, status: int = 200) -> None:
        self.pages[url] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        status, body = self.pages.get(url, (404, "not found"))
        return httpx.Response(status, text=body)

    def client(self) -> httpx.AsyncClient:
        return async_http.make_client(transport=httpx.MockTransport(self.handler))
