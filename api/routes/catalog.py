# api/routes/catalog.py
from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.meta.ddragon import get_ddragon, resolve_selection
from app.schemas.params import CatalogQueryParams, validate_params
from ddragon.query import CatalogQueryEngine
from ddragon.resources import UnknownResource
from ddragon.service import DataDragon

SEARCH_LIMIT = 20

router = APIRouter(prefix="/catalog", tags=["catalog"])

def _engine(dd: DataDragon, resource: str) -> CatalogQueryEngine:
    try:
        return dd.engine(resource)
    except UnknownResource:
        raise HTTPException(status_code=404, detail={"error": "unknown_resource", "resource": resource})

@router.get("/{resource}")
def page(resource: str, params: CatalogQueryParams = Depends(), dd: DataDragon = Depends(get_ddragon)):
    engine = _engine(dd, resource)
    version, lang = resolve_selection(dd, params.version, params.lang)
    return engine.paginate(version, lang, params.itemperpage, params.numpage).to_dict()

@router.get("/{resource}/search/{name}")
def search(
    resource: str,
    name: str,
    version: Optional[str] = Query(None),
    lang: Optional[str] = Query(None),
    dd: DataDragon = Depends(get_ddragon),
):
    engine = _engine(dd, resource)
    p = validate_params({"name": name, "version": version, "lang": lang})
    version, lang = resolve_selection(dd, p["version"], p["lang"])
    results = engine.search(p["name"], version, lang, SEARCH_LIMIT)
    images = engine.get_images(version, lang, False, results)
    return {"version": version, "lang": lang, "results": results, "images": images}

# registered before /{resource}/{key} so "sorted" is never read as a key
@router.get("/{resource}/sorted")
def sorted_listing(
    resource: str,
    version: Optional[str] = Query(None),
    lang: Optional[str] = Query(None),
    dd: DataDragon = Depends(get_ddragon),
):
    """Every entity ordered by display name, case-insensitive."""
    engine = _engine(dd, resource)
    p = validate_params({"version": version, "lang": lang})
    version, lang = resolve_selection(dd, p["version"], p["lang"])
    return {"version": version, "lang": lang, "resourceType": engine.resource_type,
            "results": engine.sorted_by_name(version, lang)}

@router.get("/{resource}/{key}")
def detail(
    resource: str,
    key: str,
    version: Optional[str] = Query(None),
    lang: Optional[str] = Query(None),
    dd: DataDragon = Depends(get_ddragon),
):
    engine = _engine(dd, resource)
    p = validate_params({"version": version, "lang": lang})
    version, lang = resolve_selection(dd, p["version"], p["lang"])
    entity = engine.get_by_key(key, version, lang)
    images = engine.get_images(version, lang, False, [entity])
    return {"version": version, "lang": lang, "resourceType": engine.resource_type, "data": entity, "images": images}
