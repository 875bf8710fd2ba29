# ddragon/config.py
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_HOST = "https://ddragon.leagueoflegends.com"
DEFAULT_PAGE_CAP = 20

@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    base_dir: Path = Path("public")
    timeout: float = 30.0
    page_cap: int = DEFAULT_PAGE_CAP
    versions_ttl: float = 600.0
    languages_ttl: float = 2592000.0

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            host=os.getenv("DDRAGON_HOST", DEFAULT_HOST).rstrip("/"),
            base_dir=Path(os.getenv("DDRAGON_BASE_DIR", "public")),
            timeout=float(os.getenv("DDRAGON_TIMEOUT", "30")),
            page_cap=int(os.getenv("DDRAGON_PAGE_CAP", str(DEFAULT_PAGE_CAP))),
            versions_ttl=float(os.getenv("DDRAGON_VERSIONS_TTL", "600")),
            languages_ttl=float(os.getenv("DDRAGON_LANGUAGES_TTL", "2592000")),
        )

    @property
    def cdn_base(self) -> str:
        return f"{self.host}/cdn"

    @property
    def versions_url(self) -> str:
        return f"{self.host}/api/versions.json"

    @property
    def languages_url(self) -> str:
        return f"{self.host}/cdn/languages.json"
