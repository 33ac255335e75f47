import logging
from typing import Optional

from playwright.async_api import APIRequestContext, Playwright, async_playwright

from jobboard.config.settings import settings
from jobboard.transport.user_agent import UserAgentProvider

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Manages the lifecycle of Playwright and its HTTP request context.
    """

    _playwright: Optional[Playwright] = None
    _context: Optional[APIRequestContext] = None

    @classmethod
    async def initialize(cls):
        """
        Starts Playwright and the request context if not already running.
        """
        UserAgentProvider.initialize()

        if cls._playwright is None:
            cls._playwright = await async_playwright().start()
            logger.info("Playwright started.")

        if cls._context is None:
            user_agent = UserAgentProvider.get()
            logger.info(f"Using User Agent: {user_agent}")

            cls._context = await cls._playwright.request.new_context(
                user_agent=user_agent,
                ignore_https_errors=settings.IGNORE_HTTPS_ERRORS,
                timeout=settings.REQUEST_TIMEOUT,
            )
            logger.info("Request context created.")

    @classmethod
    async def get_context(cls) -> APIRequestContext:
        """
        Returns the shared request context. Initializes if necessary.
        """
        if cls._context is None:
            await cls.initialize()
        return cls._context

    @classmethod
    async def close(cls):
        """
        Disposes the request context and stops Playwright.
        """
        if cls._context:
            await cls._context.dispose()
            cls._context = None
            logger.info("Request context disposed.")

        if cls._playwright:
            await cls._playwright.stop()
            cls._playwright = None
            logger.info("Playwright stopped.")
