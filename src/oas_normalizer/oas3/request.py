"""OpenAPI 3 parameters and request body -> normalized request."""

import logging
from typing import Any

from ..model import HttpParam, NormalizedRequest, NormalizedRequestBody
from ..refs import is_dictionary, maybe_resolve_local_ref
from ..schema import translate_schema_object
from .content import translate_media_type_object
from .examples import flatten_examples, merge_examples
from .guards import RequestBodyObject, classify_request_body

logger = logging.getLogger(__name__)

PARAMETER_LOCATIONS = ("header", "query", "cookie", "path")

# Parameter fields dropped from the output when falsy. Anything else copied
# over from the source parameter (vendor extensions) is kept as is.
PRUNABLE_PARAMETER_FIELDS = (
    "name",
    "description",
    "required",
    "deprecated",
    "allowEmptyValue",
    "style",
    "explode",
    "allowReserved",
    "schema",
    "examples",
    "content",
)


def prune_parameter_fields(data: dict) -> dict:
    return {
        key: value
        for key, value in data.items()
        if key not in PRUNABLE_PARAMETER_FIELDS or value
    }


def translate_parameter_object(document: Any, parameter: dict) -> HttpParam:
    examples = flatten_examples(parameter.get("examples"))

    schema = None
    if is_dictionary(parameter.get("schema")):
        raw_schema = dict(parameter["schema"])
        if "example" in parameter:
            raw_schema["example"] = parameter["example"]
        schema = translate_schema_object(document, raw_schema)

    data = {
        key: value
        for key, value in parameter.items()
        if isinstance(key, str) and key not in ("in", "schema", "example")
    }
    data.update(
        name=parameter.get("name"),
        style=parameter.get("style"),
        schema=schema,
        examples=merge_examples(parameter, examples),
    )
    return HttpParam.model_validate(prune_parameter_fields(data))


def translate_request_body(document: Any, request_body: RequestBodyObject) -> NormalizedRequestBody:
    data: dict = {}
    for key in ("required", "description"):
        if key in request_body.fields:
            data[key] = getattr(request_body, key)

    contents = []
    for media_type, media_type_object in request_body.content.items():
        content = translate_media_type_object(document, media_type_object, media_type)
        if content is not None:
            contents.append(content)
    data["contents"] = contents
    return NormalizedRequestBody.model_validate(data)


def translate_to_request(document: Any, parameters: list[dict], request_body: Any = None) -> NormalizedRequest:
    params: dict[str, list[HttpParam]] = {location: [] for location in PARAMETER_LOCATIONS}

    for parameter in parameters:
        if not is_dictionary(parameter):
            continue
        location = parameter.get("in")
        if not isinstance(location, str) or location not in params:
            continue
        params[location].append(translate_parameter_object(document, parameter))

    body = NormalizedRequestBody(contents=[])
    if is_dictionary(request_body):
        variant = classify_request_body(maybe_resolve_local_ref(document, request_body))
        if isinstance(variant, RequestBodyObject):
            body = translate_request_body(document, variant)
        else:
            logger.debug(f"Request body is not a request body object ({type(variant).__name__}), using empty body")

    return NormalizedRequest(
        body=body,
        headers=params["header"],
        query=params["query"],
        cookie=params["cookie"],
        path=params["path"],
    )
