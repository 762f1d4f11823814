# github_base.py

import json
import logging
import urllib.error
import urllib.request
from urllib.parse import quote, urlencode

from .config import Settings
from .errors import UpstreamFetchError
from .models import RepositoryRecord

logger = logging.getLogger(__name__)


def build_headers(settings):
    """Request headers for the GitHub REST API, with auth when a token is set."""
    headers = {
        "User-Agent": settings.user_agent,
        "Accept": "application/vnd.github.v3+json",
    }
    if settings.token:
        headers["Authorization"] = f"Bearer {settings.token}"
    return headers


class GitHubClient:
    def __init__(self, settings=None):
        self.settings = settings or Settings.from_env()
        self.headers = build_headers(self.settings)

    def _make_request(self, url):
        """Shared HTTP handler with Authentication."""
        req = urllib.request.Request(url, headers=self.headers)
        try:
            with urllib.request.urlopen(req) as resp:
                return json.load(resp)
        except urllib.error.HTTPError as e:
            raise UpstreamFetchError(e.code, e.reason) from e

    def repos_url(self, username):
        query = urlencode({"page": 1, "per_page": self.settings.per_page, "sort": "updated"})
        return f"{self.settings.api_url}/users/{quote(username, safe='')}/repos?{query}"

    def fetch_repos(self, username):
        """First page of the user's repositories, most recently updated first."""
        url = self.repos_url(username)
        logger.debug("Fetching %s", url)
        payload = self._make_request(url)
        return [RepositoryRecord.from_api(item) for item in payload]
