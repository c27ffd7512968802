"""Swagger 2.0 parameter and header translation."""

from typing import Any

from ..model import HttpParam
from ..refs import is_dictionary
from ..schema import translate_schema_object

# Keys of a Swagger 2.0 parameter/header that describe the parameter itself
# rather than its value; everything else is a type keyword.
_PARAM_KEYS = ("name", "in", "description", "required", "collectionFormat", "allowEmptyValue", "schema")

_QUERY_STYLES = {
    "csv": ("form", False),
    "ssv": ("spaceDelimited", False),
    "tsv": ("tabDelimited", False),
    "pipes": ("pipeDelimited", False),
    "multi": ("form", True),
}


def _is_extension(key: Any) -> bool:
    return isinstance(key, str) and key.startswith("x-")


def schema_from_type_keywords(document: Any, raw: dict) -> dict:
    keywords = {k: v for k, v in raw.items() if k not in _PARAM_KEYS and not _is_extension(k)}
    return translate_schema_object(document, keywords)


def translate_header_params(raw_headers: dict) -> list[HttpParam]:
    """Translate a response's ``headers`` map, one param per header."""
    if not is_dictionary(raw_headers):
        return []

    params = []
    for name, header in raw_headers.items():
        if not is_dictionary(header):
            continue
        data: dict = {"name": name, "style": "simple"}
        if "description" in header:
            data["description"] = header["description"]
        data["schema"] = schema_from_type_keywords({}, header)
        params.append(HttpParam.model_validate(data))
    return params


def translate_param(document: Any, parameter: dict) -> HttpParam:
    """Translate a header, query or path parameter."""
    location = parameter.get("in")
    data: dict = {"name": parameter.get("name")}

    if location == "query":
        style, explode = _QUERY_STYLES.get(str(parameter.get("collectionFormat", "csv")), ("form", False))
        data["style"] = style
        if parameter.get("type") == "array":
            data["explode"] = explode
    else:
        data["style"] = "simple"

    for key in ("description", "required", "allowEmptyValue"):
        if key in parameter:
            data[key] = parameter[key]
    data.update({k: v for k, v in parameter.items() if _is_extension(k)})

    data["schema"] = schema_from_type_keywords(document, parameter)
    return HttpParam.model_validate(data)
