from starlette.concurrency import run_in_threadpool

from oauthrevoke.oauth2.rfc7009 import RevocationEndpoint


class StarletteRevocationEndpoint(RevocationEndpoint):
    """Revocation endpoint running blocking authenticators in the
    thread pool, so they do not stall the event loop.
    """

    async def run_sync(self, func, *args):
        return await run_in_threadpool(func, *args)
