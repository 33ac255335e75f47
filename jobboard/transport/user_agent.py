import logging
from typing import Optional

from fake_useragent import UserAgent

from jobboard.config.settings import settings

logger = logging.getLogger(__name__)


class UserAgentProvider:
    """
    Supplies the User-Agent header for portal requests.

    The portal only rejects non-browser agents, so the configured fixed agent
    is used by default. With RANDOM_USER_AGENT enabled a random desktop agent
    is drawn from fake_useragent instead.
    """

    _ua: Optional[UserAgent] = None

    @classmethod
    def initialize(cls):
        """
        Initialize the UserAgent provider if random agents are enabled.
        """
        if settings.RANDOM_USER_AGENT and cls._ua is None:
            try:
                cls._ua = UserAgent(
                    browsers=["chrome", "firefox", "safari"],
                    os=["windows", "macos"],
                    fallback=settings.USER_AGENT,
                )
            except Exception as e:
                logger.warning(
                    f"Failed to initialize fake_useragent, using {settings.USER_AGENT!r}: {e}"
                )

    @classmethod
    def get(cls) -> str:
        """
        Return the agent to send: random when enabled and available, else the configured one.
        """
        if settings.RANDOM_USER_AGENT and cls._ua:
            return cls._ua.random
        return settings.USER_AGENT
