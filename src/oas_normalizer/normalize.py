"""Walk a whole document and normalize every operation in it.

Swagger 2.0 and OpenAPI 3.x documents both end up as a list of HttpOperation.
A malformed path item or operation is skipped; it does not stop the rest of
the document from being normalized.
"""

import logging
from typing import Any

from .errors import UnsupportedDocumentError
from .model import HttpOperation, NormalizedRequest, NormalizedResponse
from .oas2 import request as oas2_request
from .oas2 import responses as oas2_responses
from .oas3 import request as oas3_request
from .oas3 import responses as oas3_responses
from .refs import is_dictionary, maybe_resolve_local_ref

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


def detect_version(document: dict) -> str | None:
    """Return 'oas2', 'oas3', or None if the document is neither."""
    if str(document.get("swagger", "")).startswith("2"):
        return "oas2"
    if str(document.get("openapi", "")).startswith("3"):
        return "oas3"
    return None


def normalize_document(document: dict) -> list[HttpOperation]:
    version = detect_version(document)
    if version is None:
        raise UnsupportedDocumentError("Document declares neither 'swagger: 2.x' nor 'openapi: 3.x'")

    operations = []
    paths = document.get("paths") or {}
    if not is_dictionary(paths):
        logger.debug("Document 'paths' is not a mapping, no operations to normalize")
        return operations

    for path, path_item in paths.items():
        path_item = maybe_resolve_local_ref(document, path_item)
        if not is_dictionary(path_item):
            logger.debug(f"Skipping path {path}: not a path item object")
            continue

        for method, operation in path_item.items():
            if str(method).lower() not in HTTP_METHODS:
                continue
            if not is_dictionary(operation):
                logger.debug(f"Skipping {method.upper()} {path}: not an operation object")
                continue

            parameters = _merge_parameters(
                document, path_item.get("parameters"), operation.get("parameters")
            )
            if version == "oas2":
                request, responses = _translate_oas2(document, operation, parameters)
            else:
                request, responses = _translate_oas3(document, operation, parameters)
            operations.append(_build_operation(method.lower(), path, operation, request, responses))

    return operations


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _as_dict(value: Any) -> dict:
    return value if is_dictionary(value) else {}


def _merge_parameters(document: Any, path_params: Any, operation_params: Any) -> list[dict]:
    """Path-level parameters first; an operation parameter overrides one with the same name and location."""
    merged: dict[tuple, dict] = {}
    for raw in [*_as_list(path_params), *_as_list(operation_params)]:
        parameter = maybe_resolve_local_ref(document, raw)
        if not is_dictionary(parameter):
            continue
        merged[(str(parameter.get("name")), str(parameter.get("in")))] = parameter
    return list(merged.values())


def _translate_oas2(
    document: dict, operation: dict, parameters: list[dict]
) -> tuple[NormalizedRequest, list[NormalizedResponse]]:
    produces = _as_list(operation.get("produces", document.get("produces")))
    consumes = _as_list(operation.get("consumes", document.get("consumes")))

    responses = {
        code: maybe_resolve_local_ref(document, response)
        for code, response in _as_dict(operation.get("responses")).items()
    }
    return (
        oas2_request.translate_to_request(document, parameters, consumes),
        oas2_responses.translate_to_responses(responses, produces),
    )


def _translate_oas3(
    document: dict, operation: dict, parameters: list[dict]
) -> tuple[NormalizedRequest, list[NormalizedResponse]]:
    return (
        oas3_request.translate_to_request(document, parameters, operation.get("requestBody")),
        oas3_responses.translate_to_responses(document, _as_dict(operation.get("responses"))),
    )


def _build_operation(
    method: str,
    path: str,
    operation: dict,
    request: NormalizedRequest,
    responses: list[NormalizedResponse],
) -> HttpOperation:
    data: dict = {"method": method, "path": path}
    if "operationId" in operation:
        data["id"] = operation["operationId"]
    for key in ("summary", "description", "deprecated"):
        if key in operation:
            data[key] = operation[key]
    data["tags"] = _as_list(operation.get("tags"))
    data["request"] = request
    data["responses"] = responses
    return HttpOperation.model_validate(data)
