from typing import Optional

import httpx

from util.logging import setup_logger

from .errors import FetchFailure

log = setup_logger("ddragon.client")

class RemoteFetcher:
    """
    One GET per call against the Data Dragon CDN.

    No retries, no caching: a non-2xx answer and a transport error both
    come back as FetchFailure so callers only handle one kind.
    """
    def __init__(self, timeout: float = 30.0, client: Optional[httpx.Client] = None):
        self.client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    def get(self, url: str) -> bytes:
        log.info(f"GET {url}")
        try:
            r = self.client.get(url, headers={"User-Agent": "ddragon-cache/1.0"})
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            code = e.response.status_code
            raise FetchFailure(url, f"GET {url} answered {code}", status_code=code) from e
        except httpx.HTTPError as e:
            raise FetchFailure(url, f"GET {url} failed: {e}") from e
        return r.content

    def close(self):
        self.client.close()
