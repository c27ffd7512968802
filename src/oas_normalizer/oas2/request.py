"""Swagger 2.0 parameters -> normalized request."""

from typing import Any

from ..model import MediaTypeContent, NormalizedRequest, NormalizedRequestBody
from ..refs import is_dictionary
from ..schema import JSON_SCHEMA_DIALECT, translate_schema_object
from .params import schema_from_type_keywords, translate_param

FORM_MEDIA_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def translate_to_request(document: Any, parameters: list[dict], consumes: list[str]) -> NormalizedRequest:
    params: dict[str, list] = {"header": [], "query": [], "path": []}
    body_param = None
    form_params = []

    for parameter in parameters:
        if not is_dictionary(parameter):
            continue
        location = parameter.get("in")
        if isinstance(location, str) and location in params:
            params[location].append(translate_param(document, parameter))
        elif location == "body":
            body_param = parameter
        elif location == "formData":
            form_params.append(parameter)

    if body_param is not None:
        body = _translate_body_param(document, body_param, consumes)
    elif form_params:
        body = _translate_form_params(document, form_params, consumes)
    else:
        body = NormalizedRequestBody(contents=[])

    return NormalizedRequest(
        body=body,
        headers=params["header"],
        query=params["query"],
        cookie=[],
        path=params["path"],
    )


def _body_fields(parameter: dict) -> dict:
    return {key: parameter[key] for key in ("required", "description") if key in parameter}


def _translate_body_param(document: Any, parameter: dict, consumes: list[str]) -> NormalizedRequestBody:
    raw_schema = parameter.get("schema")
    schema = translate_schema_object(document, raw_schema) if is_dictionary(raw_schema) else None

    contents = []
    for media_type in consumes:
        content: dict = {"mediaType": media_type, "examples": []}
        if schema is not None:
            content["schema"] = schema
        contents.append(MediaTypeContent.model_validate(content))

    return NormalizedRequestBody.model_validate({**_body_fields(parameter), "contents": contents})


def _translate_form_params(document: Any, parameters: list[dict], consumes: list[str]) -> NormalizedRequestBody:
    properties = {}
    required = []
    for parameter in parameters:
        name = parameter.get("name")
        if not name or not isinstance(name, str):
            continue
        prop = schema_from_type_keywords(document, parameter)
        prop.pop("$schema", None)
        if "description" in parameter:
            prop["description"] = parameter["description"]
        properties[name] = prop
        if parameter.get("required"):
            required.append(name)

    schema: dict = {"$schema": JSON_SCHEMA_DIALECT, "type": "object", "properties": properties}
    if required:
        schema["required"] = required

    media_types = [m for m in consumes if m in FORM_MEDIA_TYPES] or [FORM_MEDIA_TYPES[0]]
    contents = [
        MediaTypeContent(media_type=media_type, schema=schema, examples=[])
        for media_type in media_types
    ]
    return NormalizedRequestBody(contents=contents)
