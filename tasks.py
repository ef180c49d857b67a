"""One retrieval cycle: list repos, fetch READMEs concurrently, enrich, load."""
from concurrent.futures import ThreadPoolExecutor
from logging import getLogger

from config import Settings
from gallery import ProjectCatalog
from gateway import RecordSource, RetrievalFailure
from models import RawRecord
from overrides import FALLBACK_RECORDS

logger = getLogger(__name__)


def _fetch_one_readme(source: RecordSource, record: RawRecord, timeout: float) -> RawRecord:
    """Attach the README to a record; any failure leaves the record without one."""
    try:
        text = source.fetch_readme(record, timeout)
    except Exception as e:
        logger.warning("[task] readme unavailable repo=%s err=%s", record.name, e)
        return record
    if not text:
        return record
    return record.model_copy(update={"readme": text})


def fetch_readmes(
    source: RecordSource,
    records: list[RawRecord],
    timeout: float = 10.0,
    max_workers: int = 8,
) -> list[RawRecord]:
    """Fetch every record's README in parallel and wait for all of them.

    Returns records in input order. Each fetch fails independently.
    """
    if not records:
        return []
    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(records)))) as executor:
        futures = [executor.submit(_fetch_one_readme, source, r, timeout) for r in records]
        return [f.result() for f in futures]


def refresh_catalog(catalog: ProjectCatalog, source: RecordSource, settings: Settings) -> bool:
    """Run a full retrieval cycle into `catalog`.

    Returns:
        True if live data was loaded, False if the static fallback was used.
    """
    logger.info("[task] refresh_catalog start user=%s", settings.github_user)
    try:
        records = source.list_records(timeout=settings.request_timeout)
    except RetrievalFailure as e:
        logger.warning("[task] repo listing failed, using fallback projects: %s", e)
        catalog.replace(FALLBACK_RECORDS)
        return False

    records = fetch_readmes(
        source,
        records,
        timeout=settings.request_timeout,
        max_workers=settings.readme_workers,
    )
    with_readme = sum(1 for r in records if r.readme)
    catalog.load(records)
    logger.info(
        "[task] refresh_catalog done projects=%d with_readme=%d", len(records), with_readme
    )
    return True
