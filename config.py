"""Runtime settings for the project gallery.

Values come from the environment (a local .env is loaded first, without
overriding variables that are already set).
"""
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_GITHUB_USER = "georgekalf"
DEFAULT_GITHUB_ORGS = ["imdb-helpful-reviews-detection-nlp"]
# Repos that are the site itself rather than projects to show
DEFAULT_EXCLUDED_REPOS = [
    "georgekalf",
    "georgekalf.github.io",
    "portfolio",
    "portfolio-website",
]


def _split_csv(value: str | None) -> list[str]:
    return [item.strip() for item in (value or "").split(",") if item.strip()]


def _env_number(name: str, default, cast=int):
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError:
        return default


class Settings(BaseModel):
    """Gallery configuration."""

    github_user: str = DEFAULT_GITHUB_USER
    github_orgs: list[str] = Field(default_factory=lambda: list(DEFAULT_GITHUB_ORGS))
    github_token: str = ""
    request_timeout: float = 10.0  # seconds, covers the whole repo listing
    max_records: int = 30
    readme_workers: int = 8
    excluded_repos: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDED_REPOS))
    allowed_origins: list[str] = Field(default_factory=list)
    api_key: str = ""

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), ".env"), override=False)
        orgs = os.environ.get("GALLERY_GITHUB_ORGS")
        excluded = os.environ.get("GALLERY_EXCLUDED_REPOS")
        return cls(
            github_user=(os.environ.get("GALLERY_GITHUB_USER") or DEFAULT_GITHUB_USER).strip(),
            github_orgs=_split_csv(orgs) if orgs is not None else list(DEFAULT_GITHUB_ORGS),
            github_token=(os.environ.get("GITHUB_TOKEN") or "").strip(),
            request_timeout=_env_number("GALLERY_REQUEST_TIMEOUT", 10.0, float),
            max_records=_env_number("GALLERY_MAX_RECORDS", 30),
            readme_workers=_env_number("GALLERY_README_WORKERS", 8),
            excluded_repos=_split_csv(excluded) if excluded is not None else list(DEFAULT_EXCLUDED_REPOS),
            allowed_origins=_split_csv(os.environ.get("ALLOWED_ORIGINS")),
            api_key=(os.environ.get("API_KEY") or "").strip(),
        )
