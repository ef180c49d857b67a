"""Tests for Settings.from_env."""

from config import DEFAULT_EXCLUDED_REPOS, DEFAULT_GITHUB_ORGS, Settings

ENV_VARS = [
    "GALLERY_GITHUB_USER",
    "GALLERY_GITHUB_ORGS",
    "GITHUB_TOKEN",
    "GALLERY_REQUEST_TIMEOUT",
    "GALLERY_MAX_RECORDS",
    "GALLERY_README_WORKERS",
    "GALLERY_EXCLUDED_REPOS",
    "ALLOWED_ORIGINS",
    "API_KEY",
]


class TestSettings:
    def _clear(self, monkeypatch) -> None:
        for name in ENV_VARS:
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self, monkeypatch) -> None:
        self._clear(monkeypatch)
        s = Settings.from_env()
        assert s.github_user == "georgekalf"
        assert s.github_orgs == DEFAULT_GITHUB_ORGS
        assert s.request_timeout == 10.0
        assert s.max_records == 30
        assert s.excluded_repos == DEFAULT_EXCLUDED_REPOS
        assert s.allowed_origins == []

    def test_reads_environment(self, monkeypatch) -> None:
        self._clear(monkeypatch)
        monkeypatch.setenv("GALLERY_GITHUB_USER", "octocat")
        monkeypatch.setenv("GALLERY_GITHUB_ORGS", "a, b ,")
        monkeypatch.setenv("GALLERY_REQUEST_TIMEOUT", "2.5")
        monkeypatch.setenv("GALLERY_MAX_RECORDS", "12")
        monkeypatch.setenv("ALLOWED_ORIGINS", "http://localhost:3000")
        s = Settings.from_env()
        assert s.github_user == "octocat"
        assert s.github_orgs == ["a", "b"]
        assert s.request_timeout == 2.5
        assert s.max_records == 12
        assert s.allowed_origins == ["http://localhost:3000"]

    def test_empty_org_list_disables_orgs(self, monkeypatch) -> None:
        self._clear(monkeypatch)
        monkeypatch.setenv("GALLERY_GITHUB_ORGS", "")
        assert Settings.from_env().github_orgs == []

    def test_malformed_numbers_fall_back(self, monkeypatch) -> None:
        self._clear(monkeypatch)
        monkeypatch.setenv("GALLERY_MAX_RECORDS", "lots")
        monkeypatch.setenv("GALLERY_REQUEST_TIMEOUT", "soon")
        s = Settings.from_env()
        assert s.max_records == 30
        assert s.request_timeout == 10.0
