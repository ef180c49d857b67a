"""Project catalog: the enriched collection behind the gallery page."""
from enum import Enum
from logging import getLogger
from typing import Callable, Iterable

from enrich import enrich
from models import EnrichedRecord, RawRecord
from overrides import PREFERRED_CATEGORY_ORDER
from utils import dedupe_preserving_order

logger = getLogger(__name__)

ALL_FILTER = "all"


class CatalogState(str, Enum):
    EMPTY = "empty"
    LOADED = "loaded"


class ProjectCatalog:
    """Owns the enriched records and answers filter queries over them.

    The stored collection is swapped in one assignment, so readers see
    either the previous load or the new one, never a partial list.
    """

    def __init__(
        self,
        preferred_order: Iterable[str] = PREFERRED_CATEGORY_ORDER,
        enricher: Callable[[RawRecord], EnrichedRecord] = enrich,
    ):
        self.preferred_order = tuple(preferred_order)
        self._enrich = enricher
        self._records: tuple[EnrichedRecord, ...] = ()
        self._state = CatalogState.EMPTY

    @property
    def state(self) -> CatalogState:
        return self._state

    @property
    def records(self) -> tuple[EnrichedRecord, ...]:
        return self._records

    def load(self, raw_records: Iterable[RawRecord]) -> None:
        """Enrich every raw record (order preserved) and replace the collection."""
        self.replace(self._enrich(raw) for raw in raw_records)

    def replace(self, records: Iterable[EnrichedRecord]) -> None:
        built = tuple(records)
        self._records = built
        self._state = CatalogState.LOADED
        logger.info("[catalog] loaded %d projects", len(built))

    def list_filter_values(self) -> list[str]:
        """Distinct categories: known ones in preferred order, then the rest by first appearance."""
        return self._filter_values(self._records)

    def visible_set(self, filter_key: str = ALL_FILTER) -> list[EnrichedRecord]:
        return self._select(self._records, filter_key)

    def view(self, filter_key: str = ALL_FILTER) -> tuple[list[EnrichedRecord], list[str]]:
        """Visible records and filter values, both taken from the same load."""
        records = self._records
        return self._select(records, filter_key), self._filter_values(records)

    def _filter_values(self, records: tuple[EnrichedRecord, ...]) -> list[str]:
        found = dedupe_preserving_order(c for r in records for c in r.categories)
        present = set(found)
        known = [c for c in self.preferred_order if c in present]
        preferred = set(self.preferred_order)
        return known + [c for c in found if c not in preferred]

    @staticmethod
    def _select(records: tuple[EnrichedRecord, ...], filter_key: str) -> list[EnrichedRecord]:
        if filter_key == ALL_FILTER:
            return list(records)
        return [r for r in records if filter_key in r.categories]
