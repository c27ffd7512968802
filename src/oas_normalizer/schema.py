"""OpenAPI schema object -> JSON Schema draft-07.

Only the dialect differences are converted. A top-level local ``$ref`` is
followed one hop; nested references are left for the consumer.
"""

import copy
from typing import Any

from .refs import is_dictionary, maybe_resolve_local_ref

JSON_SCHEMA_DIALECT = "http://json-schema.org/draft-07/schema#"

_SUBSCHEMA_KEYS = ("items", "additionalProperties", "not")
_SUBSCHEMA_LIST_KEYS = ("allOf", "anyOf", "oneOf")
_BOUNDS = (("exclusiveMinimum", "minimum"), ("exclusiveMaximum", "maximum"))


def translate_schema_object(document: Any, raw_schema: dict) -> dict:
    """Translate one schema, given the whole document for reference context."""
    resolved = maybe_resolve_local_ref(document, raw_schema)
    if not is_dictionary(resolved):
        return {}

    schema = _convert(copy.deepcopy(resolved))
    if "$ref" not in schema:
        schema = {"$schema": JSON_SCHEMA_DIALECT, **schema}
    return schema


def _convert(schema: dict) -> dict:
    if schema.pop("nullable", False) is True:
        schema_type = schema.get("type")
        if isinstance(schema_type, str):
            schema["type"] = [schema_type, "null"]
        elif isinstance(schema_type, list) and "null" not in schema_type:
            schema["type"] = [*schema_type, "null"]

    for exclusive, bound in _BOUNDS:
        flag = schema.get(exclusive)
        if isinstance(flag, bool):
            if flag and bound in schema:
                schema[exclusive] = schema.pop(bound)
            else:
                del schema[exclusive]

    if "example" in schema:
        example = schema.pop("example")
        schema.setdefault("examples", [example])

    properties = schema.get("properties")
    if is_dictionary(properties):
        schema["properties"] = {
            name: _convert(sub) if is_dictionary(sub) else sub
            for name, sub in properties.items()
        }

    for key in _SUBSCHEMA_KEYS:
        if is_dictionary(schema.get(key)):
            schema[key] = _convert(schema[key])

    for key in _SUBSCHEMA_LIST_KEYS:
        if isinstance(schema.get(key), list):
            schema[key] = [_convert(sub) if is_dictionary(sub) else sub for sub in schema[key]]

    return schema
