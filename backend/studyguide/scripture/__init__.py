"""Detection, validation and canonicalization of scripture references."""
from .localize import display_name, to_english
from .normalizer import Normalizer, normalize, normalizer_for
from .registry import Registry, RegistryConfigError, build_registry, default_registry
from .scanner import ReferenceCandidate, scan
from .validator import (
    INPUT_POLICY,
    OUTPUT_POLICY,
    ReasonCode,
    ValidationPolicy,
    ValidationReport,
    ValidationVerdict,
    Validator,
    validate,
    validate_text,
)

__all__ = [
    "INPUT_POLICY",
    "OUTPUT_POLICY",
    "Normalizer",
    "ReasonCode",
    "ReferenceCandidate",
    "Registry",
    "RegistryConfigError",
    "ValidationPolicy",
    "ValidationReport",
    "ValidationVerdict",
    "Validator",
    "build_registry",
    "default_registry",
    "display_name",
    "normalize",
    "normalizer_for",
    "scan",
    "to_english",
    "validate",
    "validate_text",
]
