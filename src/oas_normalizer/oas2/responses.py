"""Swagger 2.0 responses -> normalized responses.

Swagger 2.0 declares one schema per response and the media types once per
operation (``produces``); examples are keyed by media type. Each produced
media type gets its own content entry carrying the examples keyed by it.
Examples keyed by a media type that is not produced are kept too: they are
appended to the first content entry, which is synthesized with an empty
media type when nothing is produced.
"""

from ..model import MediaTypeContent, NormalizedResponse
from ..refs import is_dictionary
from .params import translate_header_params


def translate_to_responses(responses: dict[str, dict], produces: list[str]) -> list[NormalizedResponse]:
    """Translate a status code -> response map, preserving its order."""
    return [
        _translate_to_response(produces, response, str(status_code))
        for status_code, response in responses.items()
    ]


def _translate_to_response(produces: list[str], response: dict, status_code: str) -> NormalizedResponse:
    if not is_dictionary(response):
        response = {}

    headers = translate_header_params(response.get("headers") or {})
    raw_examples = response.get("examples")
    examples = (
        [{"key": key, "value": value} for key, value in raw_examples.items()]
        if is_dictionary(raw_examples)
        else []
    )

    declared = []
    for media_type in produces:
        if media_type not in declared:
            declared.append(media_type)

    contents = []
    for media_type in declared:
        content: dict = {"mediaType": media_type}
        if "schema" in response:
            content["schema"] = response["schema"]
        content["examples"] = [e for e in examples if e["key"] == media_type]
        contents.append(content)

    foreign_examples = [e for e in examples if e["key"] not in produces]
    if foreign_examples:
        if not contents:
            contents.append({"mediaType": "", "schema": {}, "examples": []})
        contents[0]["examples"].extend(foreign_examples)

    data: dict = {"code": status_code}
    if "description" in response:
        data["description"] = response["description"]
    data["headers"] = headers
    data["contents"] = [MediaTypeContent.model_validate(c) for c in contents]
    return NormalizedResponse.model_validate(data)
