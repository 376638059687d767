# pet_identity_validator/adapters/diagnostics/_formatter.py

"""Explain a verdict in plain text for logs and manual-review queues"""

# Local imports
from pet_identity_validator.core.domain.enums import ConfidenceBand
from pet_identity_validator.core.domain.enums import FIELD_LABELS
from pet_identity_validator.core.domain.enums import MatchField
from pet_identity_validator.core.domain.enums import SkipReason
from pet_identity_validator.core.domain.match_result import AgeMatchResult
from pet_identity_validator.core.domain.match_result import FieldMatchResult
from pet_identity_validator.core.domain.verdict import ValidationVerdict

# Fields in the order an explanation lists them
_ATTRIBUTE_FIELDS = (MatchField.NAME, MatchField.AGE, MatchField.BREED, MatchField.GENDER)

_GUIDANCE = {
    ConfidenceBand.LOW: (
        "High-confidence fields match - this may still be the same pet. "
        "Consider manual review."
    ),
    ConfidenceBand.VERY_LOW: "Need at least 2 matching fields for validation.",
}


def _percent(similarity: float | None) -> str:
    if similarity is None:
        return "n/a"
    return f"{similarity * 100:.0f}%"


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def _describe_fuzzy(result: FieldMatchResult, label: str, hint: str) -> tuple[bool, str]:
    """Describe a name or breed result as (matched, text)"""
    similarity = _percent(result.similarity)
    if result.matches:
        return True, f"{label} ('{result.extracted_value}', {similarity} similarity)"
    text = (
        f"{label} ('{result.extracted_value}' vs '{result.expected_value}', "
        f"{similarity} similarity)"
    )
    if result.is_near_variation:
        text += f" - {hint}"
    return False, text


def _describe_age(result: AgeMatchResult) -> tuple[bool, str]:
    """Describe an available age result as (matched, text)"""
    if result.matches:
        return True, "age"
    actual = result.actual_years or 0.0
    difference = result.difference or 0.0
    return False, (
        f"age ('{result.extracted_value}' vs expected ~{actual:.1f} years, "
        f"{difference:.1f} year difference)"
    )


def _describe_gender(result: FieldMatchResult) -> tuple[bool, str]:
    if result.matches:
        return True, "gender"
    return False, f"gender ('{result.extracted_value}' vs '{result.expected_value}')"


def _explain_attributes(verdict: ValidationVerdict) -> str:
    """Partition attribute evidence into matched, mismatched and missing fields"""
    details = verdict.match_details
    results: dict[MatchField, FieldMatchResult | None] = {
        MatchField.NAME: details.name,
        MatchField.AGE: details.age,
        MatchField.BREED: details.breed,
        MatchField.GENDER: details.gender,
    }

    matched: list[str] = []
    mismatched: list[str] = []
    missing: list[str] = []

    for field in _ATTRIBUTE_FIELDS:
        result = results[field]
        if result is None or not result.is_available:
            if isinstance(result, AgeMatchResult) and result.extracted_value is not None:
                missing.append(f"age ('{result.extracted_value}' - could not compare)")
            else:
                missing.append(field.value)
            continue

        if field is MatchField.NAME:
            is_match, text = _describe_fuzzy(result, "name", "may be a nickname")
        elif field is MatchField.BREED:
            is_match, text = _describe_fuzzy(result, "breed", "may be abbreviated")
        elif isinstance(result, AgeMatchResult):
            is_match, text = _describe_age(result)
        else:
            is_match, text = _describe_gender(result)

        (matched if is_match else mismatched).append(text)

    parts: list[str] = []
    if len(mismatched) == 1:
        parts.append(f"{_capitalize(mismatched[0])}.")
    elif mismatched:
        parts.append(f"Multiple mismatches found: {', '.join(mismatched)}.")
    if matched:
        parts.append(f"Matched: {', '.join(matched)}.")
    if missing:
        parts.append(f"Missing: {', '.join(missing)}.")

    confidence = verdict.confidence
    parts.append(f"Overall confidence: {confidence.confidence:.0f}% ({confidence.band.value}).")

    guidance = _GUIDANCE.get(confidence.band)
    if guidance:
        parts.append(guidance)

    return " ".join(parts)


def format_verdict(verdict: ValidationVerdict) -> str:
    """Explain why a document was accepted or rejected

    Args:
        verdict: Verdict returned by the validator

    Returns:
        One-paragraph explanation suitable for a reviewer
    """
    pet = verdict.pet
    extracted = verdict.extracted

    if verdict.is_valid:
        return f"Validation passed for {pet.name}"

    if verdict.skip_reason is SkipReason.NO_PET_INFO:
        searched = [
            FIELD_LABELS[MatchField.MICROCHIP] if extracted.microchip is None else None,
            FIELD_LABELS[MatchField.NAME] if extracted.name is None else None,
            FIELD_LABELS[MatchField.AGE] if extracted.age is None else None,
            FIELD_LABELS[MatchField.BREED] if extracted.breed is None else None,
            FIELD_LABELS[MatchField.GENDER] if extracted.gender is None else None,
        ]
        absent = ", ".join(label for label in searched if label)
        return f"No pet identification found. Document did not contain: {absent}."

    if verdict.skip_reason is SkipReason.MICROCHIP_MISMATCH:
        return (
            f"Microchip number mismatch. Document shows: '{extracted.microchip}' "
            f"but expected: '{pet.microchip_number}' for {pet.name}."
        )

    if verdict.skip_reason is SkipReason.ATTRIBUTES_MISMATCH:
        return _explain_attributes(verdict)

    return "Validation failed for unknown reason."


def _mark(result: FieldMatchResult) -> str:
    return "match" if result.matches else "no match"


def format_validation_summary(verdict: ValidationVerdict) -> str:
    """Multi-line summary of a verdict for logging

    Args:
        verdict: Verdict returned by the validator

    Returns:
        Outcome line, extracted values line and one line per computed field
    """
    extracted = verdict.extracted
    lines = [
        f"Validation: {'PASSED' if verdict.is_valid else 'FAILED'} "
        f"(method: {verdict.method.value})",
        f'Extracted: name="{extracted.name}", age="{extracted.age}", '
        f'breed="{extracted.breed}", gender="{extracted.gender}", '
        f'microchip="{extracted.microchip}"',
    ]

    for result in verdict.match_details.results():
        line = f"  {_capitalize(result.field.value)}: {_mark(result)}"
        if result.similarity is not None:
            line += f" ({_percent(result.similarity)})"
        elif not result.is_available:
            line += " (not comparable)"
        lines.append(line)

    lines.append(
        f"Confidence: {verdict.confidence.confidence:.0f}% ({verdict.confidence.band.value})"
    )
    return "\n".join(lines)
