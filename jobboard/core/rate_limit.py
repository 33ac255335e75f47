import asyncio


class RateLimiter:
    """
    Caps how many per-id detail page requests the direct gateway has in
    flight against the portal at once (MAX_CONCURRENT_PAGES).
    """

    def __init__(self, max_concurrent: int):
        self._semaphore = asyncio.Semaphore(max_concurrent)

    async def acquire(self):
        await self._semaphore.acquire()

    def release(self):
        self._semaphore.release()

    async def __aenter__(self):
        await self.acquire()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.release()
