"""Lottie document validator: JSON Schema pass, then bounds pass."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from jsonschema import Draft202012Validator

from lottiekit.lottie.schema import LOTTIE_SCHEMA

_VALIDATOR = Draft202012Validator(LOTTIE_SCHEMA)


@dataclass(frozen=True)
class ValidationError:
    path: str
    message: str
    keyword: str


@dataclass
class ValidationResult:
    valid: bool
    errors: List[ValidationError] = field(default_factory=list)


def _pointer(parts: Iterable[Any]) -> str:
    tokens = [str(p).replace("~", "~0").replace("/", "~1") for p in parts]
    return "/" + "/".join(tokens) if tokens else "/"


def validate_structure(document: Any) -> ValidationResult:
    """Collect every schema violation; paths are JSON pointers."""
    errors = [
        ValidationError(
            path=_pointer(err.absolute_path),
            message=err.message,
            keyword=str(err.validator),
        )
        for err in _VALIDATOR.iter_errors(document)
    ]
    errors.sort(key=lambda e: (e.path, e.keyword, e.message))
    return ValidationResult(valid=not errors, errors=errors)


def validate_bounds(document: Dict[str, Any]) -> ValidationResult:
    """Semantic range checks. Assumes the document is structurally valid."""
    errors: List[ValidationError] = []

    if document["op"] <= document["ip"]:
        errors.append(ValidationError("/op", "Out-point must be greater than in-point", "range"))

    if document["fr"] < 1 or document["fr"] > 120:
        errors.append(ValidationError("/fr", "Frame rate must be between 1 and 120", "range"))

    if document["w"] < 1:
        errors.append(ValidationError("/w", "Canvas width must be positive", "range"))
    if document["h"] < 1:
        errors.append(ValidationError("/h", "Canvas height must be positive", "range"))

    for index, layer in enumerate(document["layers"]):
        if layer["op"] > document["op"]:
            errors.append(ValidationError(
                f"/layers/{index}/op",
                f'Layer "{layer.get("nm", index)}" out-point exceeds animation duration',
                "range",
            ))

    return ValidationResult(valid=not errors, errors=errors)


def validate_animation(document: Any) -> ValidationResult:
    """Structural pass first; bounds only run on a structurally valid document."""
    structural = validate_structure(document)
    if not structural.valid:
        return structural
    return validate_bounds(document)


def format_validation_errors(errors: List[ValidationError]) -> str:
    if not errors:
        return ""
    return "\n".join(f"{err.path}: {err.message}" for err in errors)
