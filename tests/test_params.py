import pytest
from fastapi import HTTPException

from app.schemas.params import CatalogQueryParams, VALIDATORS, validate_params


def test_validator_table_is_explicit():
    assert set(VALIDATORS) == {"version", "lang", "numpage", "itemperpage", "name"}


def test_lang_is_normalised():
    assert VALIDATORS["lang"]("fr-fr") == "fr_FR"
    assert VALIDATORS["lang"]("en_US") == "en_US"
    assert VALIDATORS["lang"]("") is None


def test_bad_lang_suggests_close_codes():
    with pytest.raises(HTTPException) as exc:
        VALIDATORS["lang"]("french")
    assert exc.value.status_code == 400
    assert exc.value.detail["param"] == "lang"


def test_version_format():
    assert VALIDATORS["version"]("15.1.1") == "15.1.1"
    assert VALIDATORS["version"]("lolpatch_7.17") == "lolpatch_7.17"
    with pytest.raises(HTTPException):
        VALIDATORS["version"]("../../etc")


def test_page_params():
    assert VALIDATORS["itemperpage"]("50") == 20
    assert VALIDATORS["itemperpage"]("0") == 0
    assert VALIDATORS["numpage"]("0") == 1
    assert VALIDATORS["numpage"](None) == 1
    with pytest.raises(HTTPException):
        VALIDATORS["numpage"]("two")


def test_name_length():
    assert VALIDATORS["name"](" ah ") == "ah"
    with pytest.raises(HTTPException):
        VALIDATORS["name"]("a")


def test_validate_params_rejects_unknown_names():
    assert validate_params({"version": "15.1.1", "numpage": "3"}) == {"version": "15.1.1", "numpage": 3}
    with pytest.raises(HTTPException) as exc:
        validate_params({"sort": "name"})
    assert exc.value.detail["param"] == "sort"


def test_query_model():
    params = CatalogQueryParams(version="15.1.1", lang="fr-FR", numpage="2", itemperpage="99")
    assert (params.version, params.lang, params.numpage, params.itemperpage) == ("15.1.1", "fr_FR", 2, 20)
