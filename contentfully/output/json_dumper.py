"""JSON output for resolved model graphs.

Resolved graphs share objects and may contain cycles, which ``json`` cannot
encode directly. Models already on the current path are written as
``{"_id": ...}`` back-references; shared (non-cyclic) models are written in
full at every occurrence.
"""

import json
import os
import re
from typing import Any

from contentfully.domain.constants import MODEL_ID


def to_serializable(value: Any, _path: frozenset[int] = frozenset()) -> Any:
    """Copy a model graph into plain JSON-compatible data, breaking cycles."""
    if isinstance(value, dict):
        if id(value) in _path:
            return {MODEL_ID: value.get(MODEL_ID)}
        path = _path | {id(value)}
        return {str(k): to_serializable(v, path) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        if id(value) in _path:
            return []
        path = _path | {id(value)}
        return [to_serializable(v, path) for v in value]
    return value


def dumps(value: Any, pretty: bool = True) -> str:
    """Serialize a (possibly cyclic) model graph to a JSON string."""
    return json.dumps(
        to_serializable(value),
        indent=2 if pretty else None,
        ensure_ascii=False,
        default=str,
    )


def _sanitize_filename(model_id: str) -> str:
    return re.sub(r'[^\w\-]', '_', model_id or 'unknown')[:80] + '.json'


def dump_models(models: list[dict[str, Any]], output_dir: str, pretty: bool = True) -> list[str]:
    """Write one JSON file per model into ``output_dir``.

    Returns:
        Paths of the written files.
    """
    os.makedirs(output_dir, exist_ok=True)
    paths = []
    for model in models:
        path = os.path.join(output_dir, _sanitize_filename(str(model.get(MODEL_ID, ''))))
        with open(path, 'w', encoding='utf-8') as f:
            f.write(dumps(model, pretty=pretty))
        paths.append(path)
    return paths
