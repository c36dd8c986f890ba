import re
from abc import ABC, abstractmethod
from typing import ClassVar

from br_validators.documents.exceptions import (
    BrazilianValidationError,
    InvalidCharactersError,
    InvalidDocumentFormatError,
    InvalidLengthError,
)
from br_validators.documents.models import DocumentKind
from br_validators.logging.logger import Log

_NON_DIGITS_RE = re.compile(r"[^0-9]+")


def only_digits(value: str | None) -> str:
    """Strip everything except ASCII digits."""
    return _NON_DIGITS_RE.sub("", value or "")


class BaseDocumentValidator(ABC):
    """Contract for all document validators."""

    kind: ClassVar[DocumentKind]
    document_type: ClassVar[str]

    @abstractmethod
    def normalize(self, value: str) -> str:
        """Strip *value* down to its canonical characters."""

    @abstractmethod
    def validate(self, value: str) -> str:
        """Validate *value* and return its normalized form.

        Raises:
            BrazilianValidationError: on any structural or semantic failure.
        """

    @abstractmethod
    def format(self, value: str) -> str:
        """Insert canonical punctuation, or return *value* unchanged if malformed."""

    @abstractmethod
    def is_format(self, value: str) -> bool:
        """Structural shape test only, no checksum."""

    @abstractmethod
    def mask(self, value: str) -> str:
        """Partially redact *value* for display, or return it unchanged if malformed."""

    def _reject(self, error: BrazilianValidationError, value: str) -> BrazilianValidationError:
        Log.rejected(self.document_type, error.code, len(value))
        return error


class FixedLengthDocumentValidator(BaseDocumentValidator):
    """Shared steps for digit-only documents of a fixed length."""

    length: ClassVar[int]
    pattern: ClassVar[re.Pattern[str]]

    def normalize(self, value: str) -> str:
        return only_digits(value)

    def is_format(self, value: str) -> bool:
        return isinstance(value, str) and self.pattern.fullmatch(value) is not None

    def _require_digits(self, value: str) -> str:
        """Normalize *value* and enforce type, length and digit-only content."""
        if not isinstance(value, str):
            raise InvalidDocumentFormatError(self.document_type)
        cleaned = self.normalize(value)
        if len(cleaned) != self.length:
            raise self._reject(InvalidLengthError(self.length, len(cleaned)), value)
        if not (cleaned.isascii() and cleaned.isdigit()):
            raise self._reject(InvalidCharactersError(), value)
        return cleaned

    @staticmethod
    def _is_repeated(cleaned: str) -> bool:
        return cleaned == cleaned[0] * len(cleaned)
