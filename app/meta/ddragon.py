# app/meta/ddragon.py
from typing import Optional

from fastapi import HTTPException

from ddragon.service import DataDragon

DEFAULT_LANG = "en_US"

_dd: Optional[DataDragon] = None

def get_ddragon() -> DataDragon:
    """Process-wide DataDragon service, built on first use from the environment."""
    global _dd
    if _dd is None:
        _dd = DataDragon()
    return _dd

def resolve_selection(dd: DataDragon, version: Optional[str], lang: Optional[str]) -> tuple[str, str]:
    """Latest version / en_US when not given; unknown versions or languages are a 400."""
    report = dd.versions.validate_selection(version, lang)
    if not report.ok:
        raise HTTPException(status_code=400, detail={"error": "invalid_selection", "errors": report.errors})
    version = version or dd.versions.latest_version()
    if not version:
        raise HTTPException(status_code=503, detail={"error": "no_versions", "message": "version list unavailable"})
    return version, lang or DEFAULT_LANG
