from typing import Any, Callable, Dict, Optional
from fastapi import HTTPException
from pydantic import BaseModel, field_validator
import re
from difflib import get_close_matches

from ddragon.config import DEFAULT_PAGE_CAP
from ddragon.query import QUERY_MAX_LEN, QUERY_MIN_LEN
from ddragon.versions import LANGUAGE_LABELS

VERSION_RE = re.compile(r"^(\d+(\.\d+){1,3}|lolpatch_\d+\.\d+)$")  # e.g., 15.1.1
LANG_RE = re.compile(r"^[a-z]{2}_[A-Z]{2}$")  # e.g., fr_FR

def _err(param: str, value: Any, allowed: list[str], suggestions: list[str] = []):
    raise HTTPException(
        status_code=400,
        detail={
            "error": "invalid_param",
            "param": param,
            "value": value,
            "allowed": allowed,
            "suggestions": suggestions,
        },
    )

def _suggest(value: str, universe: list[str], n=3):
    return get_close_matches(value, universe, n=n, cutoff=0.6)

def normalize_version(raw: Optional[str]) -> Optional[str]:
    if raw is None or raw == "":
        return None
    if VERSION_RE.match(raw.strip()):
        return raw.strip()
    _err("version", raw, ["<major.minor.patch> like 15.1.1"])

def normalize_lang(raw: Optional[str]) -> Optional[str]:
    if raw is None or raw == "":
        return None
    value = raw.strip()
    # accept fr-fr / FR_fr typed by hand
    parts = re.split(r"[-_]", value)
    if len(parts) == 2:
        value = f"{parts[0].lower()}_{parts[1].upper()}"
    if LANG_RE.match(value):
        return value
    allowed = sorted(LANGUAGE_LABELS)
    _err("lang", raw, allowed, _suggest(value, allowed))

def _as_int(param: str, raw: Any) -> int:
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and raw.strip().isdigit():
        return int(raw.strip())
    _err(param, raw, ["non-negative integer"])

def normalize_page(raw: Any) -> int:
    if raw is None or raw == "":
        return 1
    page = _as_int("numpage", raw)
    return page if page >= 1 else 1

def normalize_per_page(raw: Any) -> int:
    if raw is None or raw == "":
        return DEFAULT_PAGE_CAP
    size = _as_int("itemperpage", raw)
    return min(size, DEFAULT_PAGE_CAP)

def normalize_name(raw: Optional[str]) -> str:
    value = (raw or "").strip()
    if not QUERY_MIN_LEN <= len(value) <= QUERY_MAX_LEN:
        _err("name", raw, [f"{QUERY_MIN_LEN} to {QUERY_MAX_LEN} characters"])
    return value

# explicit table, one entry per accepted parameter
VALIDATORS: Dict[str, Callable[[Any], Any]] = {
    "version": normalize_version,
    "lang": normalize_lang,
    "numpage": normalize_page,
    "itemperpage": normalize_per_page,
    "name": normalize_name,
}

def validate_params(raw: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for param, value in raw.items():
        validator = VALIDATORS.get(param)
        if validator is None:
            _err(param, value, sorted(VALIDATORS))
        out[param] = validator(value)
    return out


class CatalogQueryParams(BaseModel):
    version: Optional[str] = None
    lang: Optional[str] = None
    numpage: int = 1
    itemperpage: int = DEFAULT_PAGE_CAP

    @field_validator("version", mode="before")
    @classmethod
    def _v_version(cls, v):
        return VALIDATORS["version"](v)

    @field_validator("lang", mode="before")
    @classmethod
    def _v_lang(cls, v):
        return VALIDATORS["lang"](v)

    @field_validator("numpage", mode="before")
    @classmethod
    def _v_numpage(cls, v):
        return VALIDATORS["numpage"](v)

    @field_validator("itemperpage", mode="before")
    @classmethod
    def _v_itemperpage(cls, v):
        return VALIDATORS["itemperpage"](v)
