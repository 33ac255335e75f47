"""
Job posting aggregation.

Fetches the listing, fetches detail pages in concurrent batches and joins the
two by job id. Listing rows without a usable detail page are dropped.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, TypeVar

from jobboard.config.settings import settings
from jobboard.core.document import parse_html
from jobboard.core.errors import ParseFailure, UpstreamLayoutError
from jobboard.core.models import DetailRecord, JobPosting
from jobboard.gateways.base import JobBoardGateway
from jobboard.portal.extraction.details import DetailOptions, parse_details
from jobboard.portal.extraction.listing import parse_table

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class BatchResult:
    """Parsed details and per-id parse failures of one batch."""

    details: Dict[str, DetailRecord] = field(default_factory=dict)
    failures: Dict[str, ParseFailure] = field(default_factory=dict)


def chunk(items: Sequence[T], size: int) -> List[List[T]]:
    """
    Split `items` into consecutive lists of at most `size` elements.
    """
    if size < 1:
        raise ValueError(f"Batch size must be positive, got {size}")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def parse_detail_pages(
    pages: Dict[str, str], options: Optional[DetailOptions] = None
) -> BatchResult:
    """
    Parse raw detail pages. A page that fails to parse is recorded as a
    failure for its id; it never affects the other pages.
    """
    result = BatchResult()
    for job_id, html in pages.items():
        try:
            result.details[job_id] = parse_details(parse_html(html), options)
        except ParseFailure as e:
            logger.warning(f"Dropping job {job_id}: {e}")
            result.failures[job_id] = e
    return result


async def fetch_batch(
    gateway: JobBoardGateway,
    job_ids: List[str],
    options: Optional[DetailOptions] = None,
) -> BatchResult:
    pages = await gateway.fetch_details(job_ids)
    return parse_detail_pages(pages, options)


async def fetch_details(
    gateway: JobBoardGateway,
    job_ids: List[str],
    options: Optional[DetailOptions] = None,
    batch_size: Optional[int] = None,
) -> Dict[str, DetailRecord]:
    """
    Fetch and parse detail pages for `job_ids`, one gateway request per batch,
    all batches in flight at once.

    Raises UpstreamLayoutError when pages were fetched but none of them parsed,
    which points at a portal layout change rather than a bad posting.
    """
    if batch_size is None:
        batch_size = settings.DETAIL_BATCH_SIZE
    batches = chunk(job_ids, batch_size)
    logger.info(
        f"Fetching {len(job_ids)} detail pages in {len(batches)} batches of up to {batch_size}"
    )

    results = await asyncio.gather(
        *(fetch_batch(gateway, batch, options) for batch in batches)
    )

    # Batches cover disjoint ids, so a plain merge cannot overwrite anything
    details: Dict[str, DetailRecord] = {}
    failures: Dict[str, ParseFailure] = {}
    for result in results:
        details.update(result.details)
        failures.update(result.failures)

    if failures and not details:
        raise UpstreamLayoutError(len(failures))
    if failures:
        logger.warning(
            f"{len(failures)} of {len(details) + len(failures)} detail pages failed to parse"
        )
    return details


async def load_job_postings(
    gateway: JobBoardGateway,
    options: Optional[DetailOptions] = None,
    batch_size: Optional[int] = None,
) -> List[JobPosting]:
    """
    Run the whole pipeline and return postings in listing order.
    """
    listing_html = await gateway.fetch_listing()
    records = parse_table(parse_html(listing_html))

    job_ids = [record.id for record in records]
    details = await fetch_details(gateway, job_ids, options, batch_size)

    postings = [
        JobPosting.from_parts(record, details[record.id])
        for record in records
        if record.id in details
    ]

    dropped = len(records) - len(postings)
    if dropped:
        logger.info(f"{dropped} listings had no usable detail page")
    logger.info(f"Loaded {len(postings)} job postings")
    return postings
