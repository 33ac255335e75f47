"""
Direct access to the YES portal.

Does the proxy worker's job in-process: outside a browser there is no
same-origin restriction, so the listing and each detail page are requested
from the portal itself.
"""

import asyncio
import logging
from typing import Dict, List, Optional, Tuple

from playwright.async_api import APIRequestContext

from jobboard.config.settings import settings
from jobboard.core.errors import GatewayError
from jobboard.core.rate_limit import RateLimiter
from jobboard.gateways.base import JobBoardGateway
from jobboard.portal.config import JOB_BOARD_URL, JOB_DETAILS_URL

logger = logging.getLogger(__name__)


class DirectGateway(JobBoardGateway):
    """
    Fetches pages straight from the portal, one request per detail page.
    """

    def __init__(
        self,
        context: APIRequestContext,
        max_concurrent: int = settings.MAX_CONCURRENT_PAGES,
    ):
        super().__init__(context)
        self.limiter = RateLimiter(max_concurrent)

    async def fetch_listing(self) -> str:
        logger.info(f"Fetching listing from {JOB_BOARD_URL}")
        return await self._get_text(JOB_BOARD_URL)

    async def _fetch_one(self, job_id: str) -> Tuple[str, Optional[str]]:
        async with self.limiter:
            try:
                return job_id, await self._get_text(JOB_DETAILS_URL + job_id)
            except GatewayError as e:
                if e.status is None:
                    # Transport failure, not a missing posting
                    raise
                logger.warning(f"Skipping details for job {job_id}: {e}")
                return job_id, None

    async def fetch_details(self, job_ids: List[str]) -> Dict[str, str]:
        results = await asyncio.gather(*(self._fetch_one(job_id) for job_id in job_ids))
        details = {job_id: html for job_id, html in results if html is not None}
        logger.info(f"Fetched {len(details)}/{len(job_ids)} detail pages from portal")
        return details
