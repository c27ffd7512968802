"""Exceptions raised at the I/O edge.

The translators themselves never raise on malformed input; they degrade to
empty results instead. These are only raised while loading a document or
deciding which translator family applies to it.
"""


class NormalizerError(Exception):
    """Base class for all oas-normalizer errors."""


class DocumentLoadError(NormalizerError):
    """The document could not be read or is not a YAML/JSON mapping."""


class UnsupportedDocumentError(NormalizerError):
    """The document is neither Swagger 2.0 nor OpenAPI 3.x."""
