"""Shape checks for OpenAPI 3 objects that may also be references."""

import dataclasses
from typing import Any

from ..refs import is_dictionary


@dataclasses.dataclass(frozen=True)
class Reference:
    ref: str


@dataclasses.dataclass(frozen=True)
class RequestBodyObject:
    content: dict[str, Any]
    required: bool | None = None
    description: str | None = None
    fields: frozenset[str] = frozenset()  # keys present in the source object


@dataclasses.dataclass(frozen=True)
class Unrecognized:
    value: Any


RequestBodyVariant = Reference | RequestBodyObject | Unrecognized


def is_reference(value: Any) -> bool:
    return is_dictionary(value) and isinstance(value.get("$ref"), str)


def classify_request_body(value: Any) -> RequestBodyVariant:
    """Tell a request body object apart from a reference or anything else."""
    if is_reference(value):
        return Reference(ref=value["$ref"])
    if is_dictionary(value) and is_dictionary(value.get("content")):
        return RequestBodyObject(
            content=value["content"],
            required=value.get("required"),
            description=value.get("description"),
            fields=frozenset(value),
        )
    return Unrecognized(value=value)


def is_request_body_object(value: Any) -> bool:
    return isinstance(classify_request_body(value), RequestBodyObject)
