"""Retrieval of raw repository records and their READMEs from GitHub."""
import time
from logging import getLogger
from typing import Optional, Protocol

import requests
from pydantic import ValidationError

from config import Settings
from github_client import GitHubClient
from models import RawRecord

logger = getLogger(__name__)


class RetrievalFailure(Exception):
    """The repo listing could not be retrieved (network, status or timeout)."""


class ReadmeFailure(Exception):
    """One record's README could not be retrieved."""


class RecordSource(Protocol):
    """Anything that can supply raw records and READMEs."""

    def list_records(self, timeout: float) -> list[RawRecord]:
        ...

    def fetch_readme(self, record: RawRecord, timeout: float) -> Optional[str]:
        ...


def raw_record_from_repo(repo: dict) -> RawRecord:
    """Build a RawRecord from a GitHub repo payload."""
    name = repo.get("name") or ""
    owner_login = (repo.get("owner") or {}).get("login") or ""
    return RawRecord(
        id=repo.get("full_name") or f"{owner_login}/{name}",
        name=name,
        description=repo.get("description"),
        topics=[t for t in (repo.get("topics") or []) if isinstance(t, str)],
        language=repo.get("language"),
        fork=bool(repo.get("fork")),
        default_branch=repo.get("default_branch") or "main",
        html_url=repo.get("html_url") or "",
    )


class GitHubGateway:
    """Lists a user's (and optionally some organizations') showcase repos."""

    def __init__(
        self,
        client: GitHubClient,
        user: str,
        orgs: list[str] | None = None,
        excluded_repos: list[str] | None = None,
        max_records: int = 30,
    ):
        self.client = client
        self.user = user
        self.orgs = list(orgs or [])
        self.excluded = {n.lower() for n in (excluded_repos or [])}
        self.max_records = max_records

    @classmethod
    def from_settings(cls, settings: Settings) -> "GitHubGateway":
        return cls(
            GitHubClient(token=settings.github_token or None),
            user=settings.github_user,
            orgs=settings.github_orgs,
            excluded_repos=settings.excluded_repos,
            max_records=settings.max_records,
        )

    def _keep(self, repo: dict) -> bool:
        name = (repo.get("name") or "").lower()
        return bool(name) and not repo.get("fork") and name not in self.excluded

    def list_records(self, timeout: float) -> list[RawRecord]:
        """Owner repos plus org repos, deduped by full_name, forks and denylist removed.

        The whole listing shares one deadline of `timeout` seconds. Every
        page request gets the time left as its timeout.

        Raises:
            RetrievalFailure: owner listing failed or the deadline passed
        """
        deadline = time.monotonic() + timeout

        def remaining() -> float:
            left = deadline - time.monotonic()
            if left <= 0:
                raise RetrievalFailure(f"repo listing timed out after {timeout}s")
            return left

        remaining()
        try:
            repos = self.client.list_repos(self.user, timeout=remaining)
        except (requests.RequestException, ValueError) as e:
            raise RetrievalFailure(f"listing repos for {self.user} failed: {e}") from e

        for org in self.orgs:
            try:
                repos = repos + self.client.list_org_repos(org, timeout=remaining)
            except requests.Timeout as e:
                raise RetrievalFailure(f"listing repos for org {org} timed out: {e}") from e
            except (requests.RequestException, ValueError) as e:
                logger.warning("[gateway] org repos unavailable org=%s err=%s", org, e)

        # Results that arrive after the deadline count as a timeout
        remaining()

        seen: set[str] = set()
        records: list[RawRecord] = []
        for repo in repos:
            if not isinstance(repo, dict) or not self._keep(repo):
                continue
            try:
                record = raw_record_from_repo(repo)
            except ValidationError as e:
                logger.warning("[gateway] skipping malformed repo payload name=%s err=%s", repo.get("name"), e)
                continue
            if record.id in seen:
                continue
            seen.add(record.id)
            records.append(record)

        logger.info("[gateway] listed %d repos (%d kept) for %s", len(repos), len(records), self.user)
        return records[: self.max_records]

    def fetch_readme(self, record: RawRecord, timeout: float) -> Optional[str]:
        """Raw README text, None if the repo has none.

        Raises:
            ReadmeFailure: any other retrieval error
        """
        try:
            return self.client.get_repo_readme(record.id, timeout=timeout)
        except requests.RequestException as e:
            raise ReadmeFailure(f"readme for {record.id} failed: {e}") from e
