"""Shared test fixtures for the project gallery."""

from typing import Callable, Optional

import pytest

from gateway import RetrievalFailure
from models import RawRecord


class FakeSource:
    """In-memory RecordSource.

    readmes maps repo id to README text, or to an exception to raise.
    """

    def __init__(
        self,
        records: list[RawRecord] | None = None,
        readmes: dict[str, object] | None = None,
        fail_listing: bool = False,
    ) -> None:
        self.records = records or []
        self.readmes = readmes or {}
        self.fail_listing = fail_listing
        self.readme_calls: list[str] = []

    def list_records(self, timeout: float) -> list[RawRecord]:
        if self.fail_listing:
            raise RetrievalFailure("listing timed out")
        return list(self.records)

    def fetch_readme(self, record: RawRecord, timeout: float) -> Optional[str]:
        self.readme_calls.append(record.id)
        value = self.readmes.get(record.id)
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def make_raw() -> Callable[..., RawRecord]:
    """Factory for RawRecords with sensible defaults."""

    def _make(name: str = "sample-project", **overrides) -> RawRecord:
        data = {
            "id": f"acme/{name}",
            "name": name,
            "html_url": f"https://github.com/acme/{name}",
        }
        data.update(overrides)
        return RawRecord(**data)

    return _make


@pytest.fixture
def sample_readme() -> str:
    return (
        "# Widget\n\n"
        "![build badge](https://img.shields.io/badge/build-passing-green)\n\n"
        "![screenshot](./docs/screen.png)\n\n"
        "Widget turns messy spreadsheets into tidy dashboards. It ships a CLI and a small web UI. "
        "Charts are rendered with Plotly. Data never leaves your machine.\n\n"
        "## Install\n\n"
        "```bash\npip install widget\n```\n"
    )


@pytest.fixture
def fake_source_cls() -> type[FakeSource]:
    return FakeSource
