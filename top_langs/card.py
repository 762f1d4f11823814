# card.py

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler
from typing import Optional
from urllib.parse import parse_qs, urlparse

from .aggregator import aggregate
from .config import Settings
from .errors import UpstreamFetchError
from .github_base import GitHubClient
from .renderer import render

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}
ROUTE_PREFIX = ("api", "top_languages")
FETCH_FAILED = "Failed to fetch repository data"


@dataclass(frozen=True)
class Response:
    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


def parse_top(raw: Optional[str], default: int) -> int:
    """Positive integer from the ``top`` parameter, else ``default``."""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


def resolve_username(path: str) -> str:
    parsed = urlparse(path)
    query = parse_qs(parsed.query)
    username = query.get("username", [""])[0].strip()
    if username:
        return username

    parts = [p for p in parsed.path.split("/") if p]
    # Drop the Vercel route prefix ("/api/top_languages[.py]") when present
    head = tuple(p.removesuffix(".py") for p in parts[:len(ROUTE_PREFIX)])
    if head == ROUTE_PREFIX:
        parts = parts[len(ROUTE_PREFIX):]
    return parts[0] if parts else ""


class TopLanguagesCard:
    def __init__(self, username: str, query_params: dict, settings: Optional[Settings] = None,
                 client: Optional[GitHubClient] = None):
        self.user = username
        self.params = query_params
        self.settings = settings or Settings.from_env()
        self.client = client or GitHubClient(self.settings)
        self.top = parse_top(query_params.get("top", [None])[0], self.settings.default_top)

    def fetch_data(self):
        return self.client.fetch_repos(self.user)

    def process(self) -> str:
        """Main execution flow. Errors propagate to the caller."""
        repos = self.fetch_data()
        ranked = aggregate(repos)
        logger.debug("%s: %d repos, %d languages, showing %d", self.user, len(repos), len(ranked), self.top)
        return render(ranked, self.top)


def _json_error(status: int, error: str, message: str) -> Response:
    body = json.dumps({"error": error, "message": message}).encode()
    return Response(status, {"Content-Type": "application/json", **CORS_HEADERS}, body)


def build_response(method: str, path: str, settings: Optional[Settings] = None,
                   client: Optional[GitHubClient] = None) -> Response:
    """Answer one request to the top languages endpoint."""
    method = method.upper()
    if method == "OPTIONS":
        return Response(200, dict(CORS_HEADERS))
    if method != "GET":
        return Response(405, {"Content-Type": "text/plain; charset=utf-8", **CORS_HEADERS}, b"Method not allowed")

    username = resolve_username(path)
    if not username:
        return _json_error(400, "Missing username", "Missing ?username= parameter")

    query = parse_qs(urlparse(path).query)
    try:
        svg = TopLanguagesCard(username, query, settings=settings, client=client).process()
    except UpstreamFetchError as e:
        logger.warning("GitHub request for %s failed: %s", username, e)
        return _json_error(500, FETCH_FAILED, str(e))
    except Exception as e:
        logger.exception("Failed to build card for %s", username)
        return _json_error(500, FETCH_FAILED, str(e) or type(e).__name__)

    headers = {
        "Content-Type": "image/svg+xml",
        "Cache-Control": "no-cache, max-age=0",
        **CORS_HEADERS,
    }
    return Response(200, headers, svg.encode("utf-8"))


def _respond_with_card(handler: BaseHTTPRequestHandler, settings: Optional[Settings] = None):
    response = build_response(handler.command, handler.path, settings=settings)
    handler.send_response(response.status)
    for name, value in response.headers.items():
        handler.send_header(name, value)
    handler.send_header("Content-Length", str(len(response.body)))
    handler.end_headers()
    if response.body:
        handler.wfile.write(response.body)
