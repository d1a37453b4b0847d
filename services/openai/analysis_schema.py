"""Output schema for the photo analysis response.

The schema is generated from `models.analysis_models.AnalysisResult`, the
same model used to validate the response, and flattened into the plain
JSON-schema subset accepted by the Responses API structured output.
"""

from typing import Any, Dict

from models.analysis_models import AnalysisResult

SCHEMA_NAME = "chroma_restore_analysis"

_DROPPED_KEYS = {"title", "default", "$defs"}


def _simplify(node: Dict[str, Any], defs: Dict[str, Any]) -> Dict[str, Any]:
    """Inline references and collapse nullable unions."""
    if "$ref" in node:
        return _simplify(defs[node["$ref"].rsplit("/", 1)[-1]], defs)

    if len(node.get("allOf", ())) == 1:
        merged = {key: value for key, value in node.items() if key != "allOf"}
        merged.update(_simplify(node["allOf"][0], defs))
        node = merged

    if "anyOf" in node:
        branches = [branch for branch in node["anyOf"] if branch.get("type") != "null"]
        merged = {key: value for key, value in node.items() if key != "anyOf"}
        if len(branches) == 1:
            merged.update(branches[0])
        else:
            merged["anyOf"] = branches
        node = merged

    simplified: Dict[str, Any] = {}
    for key, value in node.items():
        if key in _DROPPED_KEYS:
            continue
        if key == "properties":
            value = {name: _simplify(prop, defs) for name, prop in value.items()}
        elif key == "items":
            value = _simplify(value, defs)
        elif key == "anyOf":
            value = [_simplify(branch, defs) for branch in value]
        simplified[key] = value
    return simplified


def build_response_schema() -> Dict[str, Any]:
    """Return the JSON schema every analysis response must conform to."""
    raw = AnalysisResult.model_json_schema(by_alias=True)
    return _simplify(raw, raw.get("$defs", {}))


ANALYSIS_RESPONSE_SCHEMA: Dict[str, Any] = build_response_schema()


def build_response_format() -> Dict[str, Any]:
    """Return the Responses API `text` option requesting schema-shaped JSON.

    `strict` stays off because `sceneDetection.textAnalysis` is optional,
    which strict structured output does not allow.
    """
    return {
        "format": {
            "type": "json_schema",
            "name": SCHEMA_NAME,
            "schema": ANALYSIS_RESPONSE_SCHEMA,
            "strict": False,
        }
    }
