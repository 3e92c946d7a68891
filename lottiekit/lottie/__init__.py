"""Lottie export and validation."""

from lottiekit.lottie.schema import LOTTIE_SCHEMA, AnimatedChannel, ChannelEntry, StaticChannel
from lottiekit.lottie.validator import (
    ValidationError,
    ValidationResult,
    format_validation_errors,
    validate_animation,
    validate_bounds,
    validate_structure,
)
from lottiekit.lottie.serializer import (
    ExportOptions,
    ExportResult,
    export_animation,
    serialize_animation,
    to_json,
)

__all__ = [
    "LOTTIE_SCHEMA",
    "AnimatedChannel",
    "ChannelEntry",
    "StaticChannel",
    "ValidationError",
    "ValidationResult",
    "format_validation_errors",
    "validate_animation",
    "validate_bounds",
    "validate_structure",
    "ExportOptions",
    "ExportResult",
    "export_animation",
    "serialize_animation",
    "to_json",
]
