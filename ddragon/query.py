"""Lookup, search, image manifests and pagination over one resource type.

A single engine class serves every resource type; the differences (where
entities live in the document, which field is the key, where the image
filename sits, the image URL shape) come from the `Resource` descriptor.
Rune trees are the one structural special case: their manifest nests
slots -> runes under each tree.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import islice
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from util.logging import setup_logger

from .catalog import CatalogCache
from .config import DEFAULT_PAGE_CAP
from .dedup import AssetDeduplicator
from .errors import DecodeFailure, InvalidQuery, NotFound
from .paths import ResolvedDir
from .resources import Resource

log = setup_logger("ddragon.query")

QUERY_MIN_LEN = 2
QUERY_MAX_LEN = 50

Entities = Union[Dict[str, Any], List[Any]]


@dataclass(frozen=True)
class PageWindow:
    current_page: int
    page_count: int
    items_per_page: int
    total_items: int
    resource_type: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "currentPage": self.current_page,
            "pageCount": self.page_count,
            "itemsPerPage": self.items_per_page,
            "totalItems": self.total_items,
            "resourceType": self.resource_type,
        }


@dataclass
class Page:
    items: Entities
    images: Dict[str, Any]
    meta: PageWindow

    def to_dict(self) -> Dict[str, Any]:
        return {
            f"{self.meta.resource_type}s": self.items,
            "images": self.images,
            "meta": self.meta.to_dict(),
        }


class CatalogQueryEngine:
    def __init__(
        self,
        resource: Resource,
        cache: CatalogCache,
        assets: AssetDeduplicator,
        page_cap: int = DEFAULT_PAGE_CAP,
    ):
        self.resource = resource
        self.cache = cache
        self.assets = assets
        self.page_cap = page_cap

    @property
    def resource_type(self) -> str:
        return self.resource.name

    # --- documents ---
    def get_dataset(self, version: str, lang: str) -> Any:
        return self.cache.get_dataset(self.resource.name, version, lang, self.resource.json_filename)

    def _collection(self, version: str, lang: str) -> Entities:
        document = self.get_dataset(version, lang)
        field = self.resource.data_field
        collection = document.get(field) if field and isinstance(document, dict) else document
        if not isinstance(collection, (dict, list)):
            raise DecodeFailure(
                self.resource.json_filename,
                f"{self.resource.json_filename} has no usable entity collection",
                resource_type=self.resource.name, version=version, language=lang,
            )
        return collection

    def _iter(self, collection: Entities) -> Iterator[Tuple[Optional[str], Any]]:
        if isinstance(collection, dict):
            yield from collection.items()
            return
        field = self.resource.key_field or self.resource.expose_key_as or "id"
        for entity in collection:
            if isinstance(entity, dict):
                yield entity.get(field), entity

    def _expose(self, key: Optional[str], entity: Dict[str, Any]) -> Dict[str, Any]:
        if self.resource.expose_key_as and key is not None:
            return {**entity, self.resource.expose_key_as: key}
        return entity

    # --- lookups ---
    def get_by_key(self, key: str, version: str, lang: str) -> Dict[str, Any]:
        collection = self._collection(version, lang)
        field = self.resource.key_field
        if field is None and isinstance(collection, dict):
            entity = collection.get(key)
            if isinstance(entity, dict):
                return self._expose(key, entity)
        else:
            for k, entity in self._iter(collection):
                if isinstance(entity, dict) and entity.get(field or "id") == key:
                    return self._expose(k, entity)
        raise NotFound(
            key,
            f"no {self.resource.name} {key!r} in version {version} / {lang}",
            resource_type=self.resource.name, version=version, language=lang,
        )

    def search(self, query: str, version: str, lang: str, max_results: int = 0) -> List[Dict[str, Any]]:
        if not isinstance(query, str) or not QUERY_MIN_LEN <= len(query) <= QUERY_MAX_LEN:
            raise InvalidQuery(
                str(query),
                f"search needs between {QUERY_MIN_LEN} and {QUERY_MAX_LEN} characters",
                resource_type=self.resource.name, version=version, language=lang,
            )
        needle = query.lower()
        results: List[Dict[str, Any]] = []
        for key, entity in self._iter(self._collection(version, lang)):
            if max_results > 0 and len(results) >= max_results:
                break
            if not isinstance(entity, dict):
                continue
            for field in self.resource.search_fields:
                value = entity.get(field)
                if value is not None and needle in str(value).lower():
                    results.append(self._expose(key, entity))
                    break
        return results

    def sorted_by_name(self, version: str, lang: str) -> List[Dict[str, Any]]:
        """Every entity, ordered case-insensitively by display name. Document order is kept for ties."""
        field = self.resource.name_field
        entities = [
            self._expose(key, entity)
            for key, entity in self._iter(self._collection(version, lang))
            if isinstance(entity, dict)
        ]
        return sorted(entities, key=lambda e: str(e.get(field) or "").lower())

    # --- images ---
    def _image_of(self, entity: Any) -> Optional[str]:
        value = entity
        for part in self.resource.image_field:
            if not isinstance(value, dict):
                return None
            value = value.get(part)
        return value if isinstance(value, str) and value else None

    def get_image(
        self,
        filename: str,
        version: str,
        directory: Optional[ResolvedDir] = None,
        force: bool = False,
        lang: str = "",
    ) -> str:
        return self.assets.materialize_image(filename, version, self.resource, lang, directory, force)

    def get_images(
        self,
        version: str,
        lang: str,
        force: bool = False,
        entities: Optional[Entities] = None,
    ) -> Dict[str, Any]:
        if entities is None:
            entities = self._collection(version, lang)
        directory = self.assets.resolver.resolve_dir(version, lang, self.resource.name, is_image=True)
        if self.resource.nested:
            return self._nested_images(entities, version, directory, force)

        result: Dict[str, str] = {}
        for key, entity in self._iter(entities):
            image = self._image_of(entity)
            # placeholder entries without a name or picture are normal upstream
            if not key or not image or not entity.get(self.resource.name_field):
                continue
            result[key] = self.get_image(image, version, directory, force)
        return result

    def _nested_images(self, trees: Entities, version: str, directory: ResolvedDir, force: bool) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for key, tree in self._iter(trees):
            icon = self._image_of(tree)
            if not key or not icon:
                continue
            slots = []
            for slot in tree.get("slots") or []:
                paths: Dict[str, str] = {}
                for rune in slot.get("runes") or []:
                    rune_key = rune.get(self.resource.key_field or "key")
                    rune_icon = self._image_of(rune)
                    if not rune_key or not rune_icon:
                        continue
                    paths[rune_key] = self.get_image(rune_icon, version, directory, force)
                slots.append(paths)
            result[key] = {"icon": self.get_image(icon, version, directory, force), "slots": slots}
        return result

    # --- pages ---
    def paginate(self, version: str, lang: str, page_size: int = 1, page_number: int = 1) -> Page:
        collection = self._collection(version, lang)
        total = len(collection)

        if page_size <= 0 or page_size > total:
            page_size = min(total, self.page_cap)
        page_count = math.ceil(total / page_size) if page_size else 0

        if page_number > page_count or page_number < 1:
            page_number = 1
        offset = page_size * (page_number - 1)

        if isinstance(collection, dict):
            items: Entities = dict(islice(collection.items(), offset, offset + page_size))
        else:
            items = collection[offset:offset + page_size]

        images = self.get_images(version, lang, False, items)
        log.debug(f"{self.resource.name} {version}/{lang} page {page_number}/{page_count} ({len(items)} items)")
        return Page(
            items=items,
            images=images,
            meta=PageWindow(
                current_page=page_number,
                page_count=page_count,
                items_per_page=page_size,
                total_items=total,
                resource_type=self.resource.name,
            ),
        )
