"""Reconcile OpenAPI 3 ``example`` and ``examples`` into one ordered list.

A parameter or media type may carry a singular ``example`` value, a map of
named example objects, or both (invalid OpenAPI, but seen in the wild).
The singular form is keyed ``"default"`` and goes first, unless a named
example already uses that key; then the named one wins and the singular
value is not repeated.
"""

from collections.abc import Callable
from typing import Any

from ..refs import is_dictionary

DEFAULT_EXAMPLE_KEY = "default"


def flatten_examples(examples: Any, resolve: Callable[[Any], Any] | None = None) -> list[dict]:
    """``{name: example_object}`` -> ``[{"key": name, **example_object}]``."""
    if not is_dictionary(examples):
        return []

    flattened = []
    for key, example in examples.items():
        if resolve is not None:
            example = resolve(example)
        fields = {k: v for k, v in example.items() if isinstance(k, str)} if is_dictionary(example) else {}
        flattened.append({"key": key, **fields})
    return flattened


def merge_examples(source: dict, flattened: list[dict]) -> list[dict]:
    """Prepend ``source["example"]`` as the default example where allowed."""
    has_default_example = any(example["key"] == DEFAULT_EXAMPLE_KEY for example in flattened)
    if "example" in source and not has_default_example:
        return [{"key": DEFAULT_EXAMPLE_KEY, "value": source["example"]}, *flattened]
    return flattened
