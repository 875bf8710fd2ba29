from fastapi import APIRouter, Depends

from ddragon.service import DataDragon
from ddragon.versions import LANGUAGE_LABELS
from .ddragon import get_ddragon

router = APIRouter(prefix="/meta", tags=["Meta"])

@router.get("/versions")
def meta_versions(dd: DataDragon = Depends(get_ddragon)):
    """Data Dragon versions, newest first."""
    versions = dd.versions.get_versions()
    return {"latest": versions[0] if versions else None, "versions": versions}

@router.get("/languages")
def meta_languages(dd: DataDragon = Depends(get_ddragon)):
    """Language codes with a readable label when we have one."""
    languages = dd.versions.get_languages() or sorted(LANGUAGE_LABELS)
    return {"languages": [{"code": code, "label": LANGUAGE_LABELS.get(code, code)} for code in languages]}

@router.get("/refresh")
def meta_refresh(dd: DataDragon = Depends(get_ddragon)):
    """Drop the memoised version and language lists and report the fresh latest version."""
    dd.versions.invalidate()
    return {"ok": True, "latest": dd.versions.latest_version()}
