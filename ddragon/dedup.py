from typing import Iterable, Optional, Protocol

from util.logging import setup_logger

from .client import RemoteFetcher
from .errors import error_context
from .paths import PathResolver, ResolvedDir, relative_dir
from .resources import Resource
from .singleflight import KeyedLock
from .storage import LocalStore

log = setup_logger("ddragon.dedup")

class KnownVersions(Protocol):
    def get_versions(self) -> Iterable[str]: ...


class AssetDeduplicator:
    """
    Puts image files on disk, at most one physical copy per identical content.

    Most icons do not change between patches. When the freshly downloaded
    bytes match the same filename under another version, the new path is a
    hard link to that file instead of a second copy.
    """
    def __init__(
        self,
        resolver: PathResolver,
        store: LocalStore,
        fetcher: RemoteFetcher,
        versions: KnownVersions,
        cdn_base: str,
    ):
        self.resolver = resolver
        self.store = store
        self.fetcher = fetcher
        self.versions = versions
        self.cdn_base = cdn_base.rstrip("/")
        self._inflight = KeyedLock()

    def image_url(self, resource: Resource, version: str, filename: str) -> str:
        return resource.image_base(self.cdn_base, version) + filename

    def materialize_image(
        self,
        filename: str,
        version: str,
        resource: Resource,
        language: str = "",
        directory: Optional[ResolvedDir] = None,
        force: bool = False,
    ) -> str:
        with error_context(resource.name, version, language or None):
            if directory is None:
                directory = self.resolver.resolve_dir(version, language, resource.name, is_image=True)
            path = self.resolver.resolve_in(directory, filename)

            if not force and self.store.exists(path.abs_path):
                return path.rel_path

            # keyed without the version: a concurrent miss for the same file
            # under another version must see this one's copy before scanning
            with self._inflight.hold((resource.name, filename)):
                if not force and self.store.exists(path.abs_path):
                    return path.rel_path

                data = self.fetcher.get(self.image_url(resource, version, filename))
                duplicate = self.find_duplicate(data, filename, resource.name, skip_version=version)
                if duplicate and self.store.hard_link(self.resolver.base_dir / duplicate, path.abs_path):
                    return path.rel_path
                self.store.write_binary(path.abs_path, data)
                return path.rel_path

    def find_duplicate(self, data: bytes, filename: str, resource_type: str, skip_version: Optional[str] = None) -> Optional[str]:
        """
        Relative path of the first cached version holding exactly `data`, else None.

        A candidate that exists but cannot be read raises ReadFailure.
        """
        if not data:
            return None
        for version in self.versions.get_versions():
            if version == skip_version:
                continue
            candidate = self.resolver.image_candidate(version, resource_type, filename)
            if not self.store.exists(candidate):
                continue
            if self.store.size(candidate) != len(data):
                continue
            if self.store.read_if_exists(candidate) == data:
                rel = f"{relative_dir(version, '', resource_type, True)}/{filename}"
                log.debug(f"{filename} for {resource_type} already stored as {rel}")
                return rel
        return None
