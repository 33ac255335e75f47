from abc import ABC, abstractmethod
from typing import Dict, List, Optional
import logging
from playwright.async_api import APIRequestContext, APIResponse
from playwright.async_api import Error as PlaywrightError

from jobboard.core.errors import GatewayError

logger = logging.getLogger(__name__)


class JobBoardGateway(ABC):
    """
    Abstract base class for the ways of reaching the job board.
    """

    def __init__(self, context: APIRequestContext):
        self.context = context

    @abstractmethod
    async def fetch_listing(self) -> str:
        """
        Fetch the listing page.
        Returns:
            str: Raw listing HTML.
        """
        pass

    @abstractmethod
    async def fetch_details(self, job_ids: List[str]) -> Dict[str, str]:
        """
        Fetch the detail pages for a batch of postings.
        Args:
            job_ids (List[str]): Posting identifiers.
        Returns:
            Dict[str, str]: Raw detail HTML keyed by identifier. Ids that could
            not be fetched may be missing.
        """
        pass

    # --- Shared request helpers ---

    async def _get(
        self, url: str, params: Optional[Dict[str, str]] = None
    ) -> APIResponse:
        """
        GET `url` and return the response, raising GatewayError on transport
        failures and non-2xx statuses. No retries.
        """
        try:
            response = await self.context.get(url, params=params)
        except PlaywrightError as e:
            raise GatewayError(url, f"Request failed: {e}") from e

        if not response.ok:
            raise GatewayError(url, "Unexpected response", status=response.status)
        return response

    async def _get_text(self, url: str, params: Optional[Dict[str, str]] = None) -> str:
        response = await self._get(url, params)
        text = await response.text()
        logger.debug(f"Fetched {url} ({len(text)} chars)")
        return text
