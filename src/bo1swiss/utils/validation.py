"""Competitor name checks used by the roster and the JSON import."""

from typing import Iterable, Optional

from bo1swiss.exceptions import InvalidPlayerDataException

MAX_NAME_LENGTH = 100


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[str] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


def normalize_name(name: str) -> str:
    """Key used for case-insensitive name comparisons."""
    return name.strip().casefold()


# ========== Name Validation ==========


def validate_name(name: Optional[str]) -> ValidationResult:
    """Validate a competitor name.

    Surrounding whitespace is stripped; inner whitespace runs collapse to a
    single space.

    Example:
        >>> validate_name("  Monkey   D. Luffy ").sanitized_value
        'Monkey D. Luffy'
    """
    if name is None or not name.strip():
        return ValidationResult(is_valid=False, error_message="Name is required")

    sanitized = " ".join(name.split())
    if len(sanitized) > MAX_NAME_LENGTH:
        return ValidationResult(
            is_valid=False,
            error_message=f"Name is longer than {MAX_NAME_LENGTH} characters",
        )
    return ValidationResult(is_valid=True, sanitized_value=sanitized)


def validate_name_strict(name: Optional[str]) -> str:
    """Validate a competitor name, raising on failure.

    Raises:
        InvalidPlayerDataException: If the name is empty or too long
    """
    result = validate_name(name)
    if not result:
        raise InvalidPlayerDataException(result.error_message)
    return result.sanitized_value


def is_name_taken(name: str, existing: Iterable[str]) -> bool:
    """Check whether ``name`` clashes case-insensitively with ``existing``."""
    key = normalize_name(name)
    return any(normalize_name(other) == key for other in existing)
