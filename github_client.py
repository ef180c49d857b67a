import os
import time
from typing import Callable

import requests
from dotenv import load_dotenv

GITHUB_API = "https://api.github.com"
DEFAULT_USER_AGENT = "project-gallery/1.0"

# Seconds, or a callable returning the seconds left before a deadline
Timeout = float | Callable[[], float] | None


class GitHubClient:
    """Minimal GitHub REST v3 client for repo listings and READMEs."""

    def __init__(
        self,
        token: str | None = None,
        user_agent: str | None = None,
        wait_on_rate_limit: bool = False,
        session: requests.Session | None = None,
    ):
        # Load .env lazily the first time a client is created
        load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), ".env"), override=False)
        self.token = token or os.environ.get("GITHUB_TOKEN", "").strip()
        self.wait_on_rate_limit = wait_on_rate_limit
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "User-Agent": user_agent or DEFAULT_USER_AGENT,
            }
        )
        if self.token:
            self.session.headers.update({"Authorization": f"Bearer {self.token}"})

    def _sleep_until_reset(self, reset_header: str | None) -> None:
        try:
            reset_epoch = int(reset_header) if reset_header else 0
        except ValueError:
            reset_epoch = 0
        now = int(time.time())
        wait_seconds = max(1, reset_epoch - now + 1) if reset_epoch else 10
        time.sleep(min(wait_seconds, 60))

    def _is_rate_limited(self, resp: requests.Response) -> bool:
        return resp.status_code == 403 and (
            "rate limit" in resp.text.lower() or resp.headers.get("X-RateLimit-Remaining") == "0"
        )

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        while True:
            resp = self.session.request(method, url, **kwargs)
            if self.wait_on_rate_limit and self._is_rate_limited(resp):
                self._sleep_until_reset(resp.headers.get("X-RateLimit-Reset"))
                continue
            if resp.status_code >= 400:
                resp.raise_for_status()
            return resp

    def get_json(self, url: str, params: dict | None = None, timeout: float | None = None):
        resp = self._request("GET", url, params=params, timeout=timeout)
        return resp.json()

    # -------- Repos ---------
    def _list_paged(
        self,
        url: str,
        params: dict | None = None,
        per_page: int = 100,
        limit: int | None = None,
        timeout: Timeout = None,
    ) -> list[dict]:
        """All pages of a list endpoint.

        `timeout` may be a callable returning the budget left; it is asked
        again before every page.
        """
        assert per_page <= 100
        results: list[dict] = []
        page = 1
        while True:
            if limit is not None and len(results) >= limit:
                break
            page_timeout = timeout() if callable(timeout) else timeout
            data = self.get_json(url, {**(params or {}), "per_page": per_page, "page": page}, page_timeout)
            if not isinstance(data, list):
                raise ValueError(f"expected a list from {url}, got {type(data).__name__}")
            if not data:
                break
            results.extend(data)
            if len(data) < per_page:
                break
            page += 1
        return results[: limit or None]

    def list_repos(
        self,
        login: str,
        sort: str = "full_name",
        per_page: int = 100,
        limit: int | None = None,
        timeout: Timeout = None,
    ) -> list[dict]:
        return self._list_paged(
            f"{GITHUB_API}/users/{login}/repos", {"sort": sort}, per_page, limit, timeout
        )

    def list_org_repos(
        self,
        org: str,
        per_page: int = 100,
        limit: int | None = None,
        timeout: Timeout = None,
    ) -> list[dict]:
        return self._list_paged(f"{GITHUB_API}/orgs/{org}/repos", None, per_page, limit, timeout)

    def get_repo_readme(self, full_name: str, timeout: float | None = None) -> str | None:
        """Raw README text for "owner/repo", or None when the repo has no README."""
        try:
            resp = self._request(
                "GET",
                f"{GITHUB_API}/repos/{full_name}/readme",
                headers={"Accept": "application/vnd.github.v3.raw"},
                timeout=timeout,
            )
        except requests.HTTPError as e:
            if e.response is not None and e.response.status_code == 404:
                return None
            raise
        return resp.text
