"""OpenAPI 3 responses -> normalized responses."""

import logging
from typing import Any

from ..model import NormalizedResponse
from ..refs import is_dictionary, maybe_resolve_local_ref
from .content import translate_media_type_object
from .request import translate_parameter_object

logger = logging.getLogger(__name__)


def translate_header_objects(document: Any, headers: Any) -> list:
    """Header objects are parameter objects without ``name`` and ``in``."""
    if not is_dictionary(headers):
        return []

    params = []
    for name, header in headers.items():
        resolved = maybe_resolve_local_ref(document, header)
        if not is_dictionary(resolved):
            continue
        params.append(translate_parameter_object(document, {"style": "simple", **resolved, "name": name, "in": "header"}))
    return params


def translate_to_responses(document: Any, responses: dict) -> list[NormalizedResponse]:
    translated = []
    for status_code, response in responses.items():
        resolved = maybe_resolve_local_ref(document, response)
        if not is_dictionary(resolved):
            logger.debug(f"Skipping response {status_code}: not a response object")
            continue

        data: dict = {"code": str(status_code)}
        if "description" in resolved:
            data["description"] = resolved["description"]
        data["headers"] = translate_header_objects(document, resolved.get("headers"))

        contents = []
        content_map = resolved.get("content")
        if is_dictionary(content_map):
            for media_type, media_type_object in content_map.items():
                content = translate_media_type_object(document, media_type_object, media_type)
                if content is not None:
                    contents.append(content)
        data["contents"] = contents
        translated.append(NormalizedResponse.model_validate(data))
    return translated
