from typing import Dict, Optional

from util.logging import setup_logger

from .catalog import CatalogCache
from .client import RemoteFetcher
from .config import Settings
from .dedup import AssetDeduplicator
from .paths import PathResolver
from .query import CatalogQueryEngine
from .resources import get_resource
from .storage import LocalStore
from .versions import VersionProvider

log = setup_logger("ddragon.service")

class DataDragon:
    """
    Wires the cache layers together and hands out one query engine per resource type.

    `fetcher` and `versions` can be injected (tests, batch jobs sharing a client).
    """
    def __init__(
        self,
        settings: Optional[Settings] = None,
        fetcher: Optional[RemoteFetcher] = None,
        versions: Optional[VersionProvider] = None,
    ):
        self.settings = settings or Settings.from_env()
        self.fetcher = fetcher or RemoteFetcher(timeout=self.settings.timeout)
        self.versions = versions or VersionProvider(self.fetcher, self.settings)
        self.resolver = PathResolver(self.settings.base_dir)
        self.store = LocalStore()
        self.cache = CatalogCache(self.resolver, self.store, self.fetcher, self.settings.cdn_base)
        self.assets = AssetDeduplicator(
            self.resolver, self.store, self.fetcher, self.versions, self.settings.cdn_base
        )
        self._engines: Dict[str, CatalogQueryEngine] = {}
        log.debug(f"upload tree at {self.settings.base_dir.resolve()}, cdn {self.settings.cdn_base}")

    def engine(self, resource_type: str) -> CatalogQueryEngine:
        resource = get_resource(resource_type)
        if resource.name not in self._engines:
            self._engines[resource.name] = CatalogQueryEngine(
                resource, self.cache, self.assets, page_cap=self.settings.page_cap
            )
        return self._engines[resource.name]

    def close(self):
        self.fetcher.close()
