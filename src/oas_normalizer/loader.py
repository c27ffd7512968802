"""Read an API description document from disk."""

from pathlib import Path

import yaml

from .errors import DocumentLoadError


def load_document(file_path: Path) -> dict:
    """Load a YAML or JSON document. JSON is parsed as YAML."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentLoadError(f"Cannot read {file_path}: {e}") from e

    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentLoadError(f"{file_path} is not valid YAML or JSON: {e}") from e

    if not isinstance(doc, dict):
        raise DocumentLoadError(f"{file_path} does not contain a mapping at the top level")
    return doc
