import json
import time
from dataclasses import dataclass, field
from threading import Lock
from typing import Dict, List, Optional, Tuple

from util.logging import setup_logger

from .client import RemoteFetcher
from .config import Settings
from .errors import DDragonError

log = setup_logger("ddragon.versions")

LANGUAGE_LABELS: Dict[str, str] = {
    "ar_AE": "Arabic (United Arab Emirates)",
    "cs_CZ": "Czech",
    "de_DE": "German",
    "el_GR": "Greek",
    "en_AU": "English (Australia)",
    "en_GB": "English (United Kingdom)",
    "en_PH": "English (Philippines)",
    "en_SG": "English (Singapore)",
    "en_US": "English (United States)",
    "es_AR": "Spanish (Argentina)",
    "es_ES": "Spanish (Spain)",
    "es_MX": "Spanish (Mexico)",
    "fr_FR": "French",
    "hu_HU": "Hungarian",
    "id_ID": "Indonesian",
    "it_IT": "Italian",
    "ja_JP": "Japanese",
    "ko_KR": "Korean",
    "pl_PL": "Polish",
    "pt_BR": "Portuguese (Brazil)",
    "ro_RO": "Romanian",
    "ru_RU": "Russian",
    "th_TH": "Thai",
    "tr_TR": "Turkish",
    "vi_VN": "Vietnamese",
    "zh_CN": "Chinese (Simplified)",
    "zh_MY": "Chinese (Malaysia)",
    "zh_TW": "Chinese (Traditional)",
}

@dataclass
class SelectionReport:
    ok: bool
    errors: Dict[str, str] = field(default_factory=dict)


class VersionProvider:
    """
    Version and language lists published by Data Dragon, memoised in process.

    versions.json is newest first. A failed refresh is logged and yields an
    empty list; the dedup scan then simply finds nothing to link against.
    """
    def __init__(self, fetcher: RemoteFetcher, settings: Optional[Settings] = None):
        self.fetcher = fetcher
        self.settings = settings or Settings.from_env()
        self._lock = Lock()
        self._memo: Dict[str, Tuple[float, List[str]]] = {}

    def get_versions(self) -> List[str]:
        return self._cached(self.settings.versions_url, self.settings.versions_ttl)

    def get_languages(self) -> List[str]:
        return self._cached(self.settings.languages_url, self.settings.languages_ttl)

    def latest_version(self) -> Optional[str]:
        versions = self.get_versions()
        return versions[0] if versions else None

    def version_exists(self, version: Optional[str]) -> bool:
        if not isinstance(version, str) or version == "":
            return False
        return version in self.get_versions()

    def language_exists(self, language: Optional[str]) -> bool:
        if not isinstance(language, str) or language == "":
            return False
        languages = self.get_languages() or list(LANGUAGE_LABELS)
        return language in languages

    def validate_selection(self, version: Optional[str], language: Optional[str]) -> SelectionReport:
        errors: Dict[str, str] = {}
        if version and not self.version_exists(version):
            errors["version"] = f"unknown version: {version}"
        if language and not self.language_exists(language):
            errors["language"] = f"unsupported language: {language}"
        return SelectionReport(ok=not errors, errors=errors)

    def invalidate(self):
        with self._lock:
            self._memo.clear()

    def _cached(self, url: str, ttl: float) -> List[str]:
        now = time.monotonic()
        with self._lock:
            hit = self._memo.get(url)
            if hit and now - hit[0] < ttl:
                return list(hit[1])
        try:
            values = json.loads(self.fetcher.get(url))
        except (DDragonError, ValueError) as e:
            log.error(f"could not load {url}: {e}")
            return []
        if not isinstance(values, list):
            log.error(f"unexpected payload from {url}: {type(values).__name__}")
            return []
        values = [str(v) for v in values]
        with self._lock:
            self._memo[url] = (now, values)
        return list(values)
