import json
from typing import Any, Optional

from util.logging import setup_logger

from .client import RemoteFetcher
from .errors import DecodeFailure, error_context
from .paths import PathResolver
from .singleflight import KeyedLock
from .storage import LocalStore

log = setup_logger("ddragon.catalog")

def decode_json(raw: bytes, source: str) -> Any:
    try:
        return json.loads(raw)
    except (ValueError, UnicodeDecodeError) as e:
        raise DecodeFailure(source, f"invalid JSON in {source}: {e}") from e


class CatalogCache:
    """
    Read-through cache for Data Dragon JSON documents.

    A document cached for (type, version, language) is never revalidated:
    published versions do not change upstream. A cached file that fails to
    read or decode raises instead of being refetched.
    """
    def __init__(self, resolver: PathResolver, store: LocalStore, fetcher: RemoteFetcher, cdn_base: str):
        self.resolver = resolver
        self.store = store
        self.fetcher = fetcher
        self.cdn_base = cdn_base.rstrip("/")
        self._inflight = KeyedLock()

    def data_url(self, version: str, language: str, filename: str) -> str:
        return f"{self.cdn_base}/{version}/data/{language}/{filename}"

    def get_dataset(self, resource_type: str, version: str, language: str, filename: Optional[str] = None) -> Any:
        with error_context(resource_type, version, language):
            path = self.resolver.resolve(version, language, resource_type, filename)

            cached = self.store.read_if_exists(path.abs_path)
            if cached is not None:
                log.debug(f"cache hit {path.rel_path}")
                return decode_json(cached, path.rel_path)

            with self._inflight.hold((resource_type, version, language, path.filename)):
                # another caller may have populated it while we waited
                cached = self.store.read_if_exists(path.abs_path)
                if cached is not None:
                    return decode_json(cached, path.rel_path)

                url = self.data_url(version, language, path.filename)
                data = decode_json(self.fetcher.get(url), url)
                self.store.write_json(path.abs_dir, path.filename, data)
                log.info(f"cached {resource_type} {version}/{language} -> {path.rel_path}")
                return data
