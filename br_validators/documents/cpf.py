"""CPF (Cadastro de Pessoas Físicas) validation and formatting.

Brazilian individual taxpayer ID: 11 digits, the last two being
modulo-11 check digits.
"""

import re
from typing import ClassVar

from br_validators.documents.base import FixedLengthDocumentValidator, only_digits
from br_validators.documents.checksum import compute_check_digits, has_valid_check_digits
from br_validators.documents.exceptions import (
    InvalidCheckDigitsError,
    InvalidCpfError,
    InvalidLengthError,
)
from br_validators.documents.models import DocumentKind


class CpfValidator(FixedLengthDocumentValidator):
    """Validator for the 11-digit individual taxpayer ID."""

    kind: ClassVar[DocumentKind] = DocumentKind.CPF
    document_type: ClassVar[str] = "CPF"
    length: ClassVar[int] = 11
    pattern: ClassVar[re.Pattern[str]] = re.compile(r"^\d{3}\.?\d{3}\.?\d{3}-?\d{2}$")

    WEIGHTS: ClassVar[tuple[tuple[int, ...], ...]] = (
        tuple(range(10, 1, -1)),
        tuple(range(11, 1, -1)),
    )

    def validate(self, value: str) -> str:
        cleaned = self._require_digits(value)
        if self._is_repeated(cleaned):
            raise self._reject(InvalidCpfError("sequência de dígitos repetidos"), value)
        if not has_valid_check_digits([int(c) for c in cleaned], self.WEIGHTS):
            raise self._reject(InvalidCheckDigitsError(self.document_type), value)
        return cleaned

    def format(self, value: str) -> str:
        cleaned = self.normalize(value)
        if len(cleaned) != self.length:
            return value
        return f"{cleaned[0:3]}.{cleaned[3:6]}.{cleaned[6:9]}-{cleaned[9:11]}"

    def mask(self, value: str) -> str:
        cleaned = self.normalize(value)
        if len(cleaned) != self.length:
            return value
        return f"{cleaned[0:3]}.***.***-{cleaned[9:11]}"

    def compute_check_digits(self, base: str) -> str:
        """Return the two check digits for a 9-digit CPF base."""
        digits = only_digits(base)
        if len(digits) != 9:
            raise InvalidLengthError(9, len(digits))
        checks = compute_check_digits([int(c) for c in digits], self.WEIGHTS)
        return "".join(str(d) for d in checks)


_validator = CpfValidator()


def normalize_cpf(cpf: str) -> str:
    return _validator.normalize(cpf)


def validate_cpf(cpf: str) -> str:
    """Validate a CPF and return its 11 digits.

    >>> validate_cpf("123.456.789-09")
    '12345678909'
    """
    return _validator.validate(cpf)


def format_cpf(cpf: str) -> str:
    return _validator.format(cpf)


def is_cpf_format(cpf: str) -> bool:
    return _validator.is_format(cpf)


def mask_cpf(cpf: str) -> str:
    return _validator.mask(cpf)
