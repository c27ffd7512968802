"""OpenAPI 3 media type objects -> normalized content entries."""

from functools import partial
from typing import Any

from ..model import HttpEncoding, MediaTypeContent
from ..refs import is_dictionary, maybe_resolve_local_ref
from ..schema import translate_schema_object
from .examples import flatten_examples, merge_examples


def translate_media_type_object(
    document: Any, media_type_object: Any, media_type_key: str
) -> MediaTypeContent | None:
    """Translate one entry of a ``content`` map.

    Returns None when the entry is not an object even after resolving a
    reference; callers drop such entries.
    """
    resolved = maybe_resolve_local_ref(document, media_type_object)
    if not is_dictionary(resolved):
        return None

    data: dict = {"mediaType": media_type_key}
    if is_dictionary(resolved.get("schema")):
        data["schema"] = translate_schema_object(document, resolved["schema"])

    examples = flatten_examples(resolved.get("examples"), partial(maybe_resolve_local_ref, document))
    data["examples"] = merge_examples(resolved, examples)

    encodings = _translate_encodings(resolved.get("encoding"))
    if encodings:
        data["encodings"] = encodings
    return MediaTypeContent.model_validate(data)


def _translate_encodings(encoding: Any) -> list[HttpEncoding]:
    if not is_dictionary(encoding):
        return []

    encodings = []
    for property_name, raw in encoding.items():
        if not is_dictionary(raw):
            continue
        data: dict = {"property": property_name}
        if "contentType" in raw:
            data["mediaType"] = raw["contentType"]
        for key in ("style", "explode", "allowReserved"):
            if key in raw:
                data[key] = raw[key]
        encodings.append(HttpEncoding.model_validate(data))
    return encodings
