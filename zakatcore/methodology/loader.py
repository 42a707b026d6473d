"""Methodology validation and loading.

``validate_methodology`` is the single gate through which an untrusted
document (a community preset, an uploaded JSON file, an API payload) becomes
a ``MethodologyPolicy``. It never partially applies a candidate: a document
either passes as a whole or the system default is returned in its place.
"""
import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from zakatcore.data.methodologies import BUILTIN_METHODOLOGIES, DEFAULT_METHODOLOGY_ID
from . import MethodologyValidationError, ValidationResult
from .schema import SECTION_MODELS, MethodologyPolicy

logger = logging.getLogger(__name__)

DEFAULT_POLICY = MethodologyPolicy.model_validate(BUILTIN_METHODOLOGIES[DEFAULT_METHODOLOGY_ID])


def format_errors(error: ValidationError) -> list[str]:
    """Render pydantic errors as ``dotted.path: message`` strings."""
    messages = []
    for err in error.errors():
        path = '.'.join(str(part) for part in err['loc']) or '<root>'
        messages.append(f"{path}: {err['msg']}")
    return messages


def check_methodology(candidate: Any) -> list[str]:
    """Return validation errors for a candidate document (empty when valid)."""
    if isinstance(candidate, MethodologyPolicy):
        return []
    if not isinstance(candidate, Mapping):
        return [f'<root>: expected a mapping, got {type(candidate).__name__}']
    try:
        MethodologyPolicy.model_validate(candidate)
    except ValidationError as e:
        return format_errors(e)
    return []


def validate_methodology(candidate: Any, fallback: MethodologyPolicy = DEFAULT_POLICY) -> ValidationResult:
    """Validate a candidate document, falling back to the default on failure.

    Args:
        candidate: Raw document (e.g. from ``json.loads``) or an existing policy.
        fallback: Policy returned verbatim when the candidate is rejected.

    Returns:
        ValidationResult with the parsed policy and no errors, or the fallback
        policy, the list of errors and ``used_fallback=True``.
    """
    if isinstance(candidate, MethodologyPolicy):
        return ValidationResult(policy=candidate)

    errors = []
    policy = None
    if not isinstance(candidate, Mapping):
        errors = [f'<root>: expected a mapping, got {type(candidate).__name__}']
    else:
        try:
            policy = MethodologyPolicy.model_validate(candidate)
        except ValidationError as e:
            errors = format_errors(e)

    if policy is not None:
        logger.info(f"Loaded methodology {policy.meta.id} v{policy.meta.version}")
        return ValidationResult(policy=policy)

    logger.warning(
        f"Methodology validation failed, using {fallback.meta.id} fallback: {errors}"
    )
    return ValidationResult(policy=fallback, errors=errors, used_fallback=True)


def load_methodology(candidate: Any) -> MethodologyPolicy:
    """Strict variant of ``validate_methodology``: raise instead of falling back."""
    if isinstance(candidate, MethodologyPolicy):
        return candidate
    errors = check_methodology(candidate)
    if errors:
        methodology_id = None
        if isinstance(candidate, Mapping) and isinstance(candidate.get('meta'), Mapping):
            methodology_id = candidate['meta'].get('id')
        raise MethodologyValidationError(errors, methodology_id)
    return MethodologyPolicy.model_validate(candidate)


def policy_from_json(text: str) -> ValidationResult:
    """Parse and validate a JSON methodology document."""
    try:
        candidate = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning(f"Methodology JSON could not be parsed: {e}")
        return ValidationResult(policy=DEFAULT_POLICY, errors=[f'<root>: invalid JSON ({e.msg})'], used_fallback=True)
    return validate_methodology(candidate)


def replace_sections(base: MethodologyPolicy, **sections: Any) -> MethodologyPolicy:
    """Return a copy of ``base`` with whole sections replaced.

    Each keyword (``meta``, ``thresholds``, ``assets``, ``liabilities``) must
    be a complete section, either a section model or a plain mapping. Sections
    are swapped wholesale; fields are never merged individually.

    Raises:
        MethodologyValidationError: Unknown section name or invalid section.
    """
    unknown = sorted(set(sections) - set(SECTION_MODELS))
    if unknown:
        raise MethodologyValidationError([f'{name}: unknown section' for name in unknown], base.meta.id)

    document = base.to_dict()
    errors = []
    for name, section in sections.items():
        if section is None:
            continue
        model = SECTION_MODELS[name]
        if isinstance(section, model):
            document[name] = section.model_dump(mode='json', exclude_none=True)
            continue
        try:
            document[name] = model.model_validate(section).model_dump(mode='json', exclude_none=True)
        except ValidationError as e:
            errors.extend(f'{name}.{message}' for message in format_errors(e))

    if errors:
        raise MethodologyValidationError(errors, base.meta.id)
    return load_methodology(document)
