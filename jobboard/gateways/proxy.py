"""
Client for the CORS proxy worker sitting in front of the portal.

GET <proxy>/                 -> listing HTML
GET <proxy>/?jobIds=1,2,3    -> JSON object mapping each id to its detail HTML
"""

import logging
from typing import Dict, List

from playwright.async_api import APIRequestContext

from jobboard.config.settings import settings
from jobboard.core.errors import GatewayError
from jobboard.gateways.base import JobBoardGateway
from jobboard.portal.config import JOB_IDS_PARAM

logger = logging.getLogger(__name__)


class ProxyGateway(JobBoardGateway):
    """
    Fetches the listing and batches of detail pages through the proxy worker.
    """

    def __init__(self, context: APIRequestContext, proxy_url: str = settings.PROXY_URL):
        super().__init__(context)
        self.proxy_url = proxy_url

    async def fetch_listing(self) -> str:
        logger.info(f"Fetching listing via proxy {self.proxy_url}")
        return await self._get_text(self.proxy_url)

    async def fetch_details(self, job_ids: List[str]) -> Dict[str, str]:
        params = {JOB_IDS_PARAM: ",".join(job_ids)}
        response = await self._get(self.proxy_url, params)

        try:
            payload = await response.json()
        except ValueError as e:
            raise GatewayError(self.proxy_url, f"Invalid JSON payload: {e}") from e

        if not isinstance(payload, dict):
            raise GatewayError(
                self.proxy_url, f"Expected a JSON object, got {type(payload).__name__}"
            )

        details = {
            str(job_id): html
            for job_id, html in payload.items()
            if isinstance(html, str)
        }
        logger.info(f"Fetched {len(details)}/{len(job_ids)} detail pages via proxy")
        return details
