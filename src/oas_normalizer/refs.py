"""Local ``$ref`` resolution within a single document."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


def is_dictionary(value: Any) -> bool:
    return isinstance(value, dict)


def is_local_ref(value: Any) -> bool:
    """True for ``{"$ref": "#/..."}``; external and remote refs are not local."""
    if not is_dictionary(value):
        return False
    ref = value.get("$ref")
    return isinstance(ref, str) and ref.startswith("#")


def resolve_pointer(document: Any, pointer: str) -> Any:
    """Resolve a JSON pointer fragment (``#/components/schemas/Pet``).

    Raises KeyError if any part of the pointer does not exist.
    """
    fragment = pointer[1:] if pointer.startswith("#") else pointer
    if not fragment:
        return document

    target = document
    for raw_part in fragment.lstrip("/").split("/"):
        part = raw_part.replace("~1", "/").replace("~0", "~")
        if isinstance(target, dict) and part in target:
            target = target[part]
        elif isinstance(target, list) and part.isdigit() and int(part) < len(target):
            target = target[int(part)]
        else:
            raise KeyError(f"Reference part '{part}' not found in path '{pointer}'")
    return target


def maybe_resolve_local_ref(document: Any, value: Any) -> Any:
    """Return the object a local reference points to, or ``value`` unchanged.

    Chains of references are followed. An unresolvable pointer or a cycle
    yields the last reference reached, never an exception.
    """
    seen: set[str] = set()
    current = value
    while is_local_ref(current):
        ref = current["$ref"]
        if ref in seen:
            logger.debug(f"Circular reference '{ref}', leaving it unresolved")
            return current
        seen.add(ref)
        try:
            current = resolve_pointer(document, ref)
        except KeyError as e:
            logger.debug(f"Cannot resolve '{ref}': {e}")
            return current
    return current
