"""CNPJ (Cadastro Nacional da Pessoa Jurídica) validation and formatting.

Brazilian business taxpayer ID: 14 digits laid out as an 8-digit company
base, a 4-digit branch code and two weighted modulo-11 check digits.
"""

import re
from typing import ClassVar

from br_validators.documents.base import FixedLengthDocumentValidator, only_digits
from br_validators.documents.checksum import compute_check_digits, has_valid_check_digits
from br_validators.documents.exceptions import (
    InvalidCheckDigitsError,
    InvalidCnpjError,
    InvalidLengthError,
)
from br_validators.documents.models import DocumentKind

MAIN_BRANCH = "0001"


class CnpjValidator(FixedLengthDocumentValidator):
    """Validator for the 14-digit business taxpayer ID."""

    kind: ClassVar[DocumentKind] = DocumentKind.CNPJ
    document_type: ClassVar[str] = "CNPJ"
    length: ClassVar[int] = 14
    pattern: ClassVar[re.Pattern[str]] = re.compile(
        r"^\d{2}\.?\d{3}\.?\d{3}/?\d{4}-?\d{2}$"
    )

    WEIGHTS: ClassVar[tuple[tuple[int, ...], ...]] = (
        (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2),
        (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2),
    )

    def validate(self, value: str) -> str:
        cleaned = self._require_digits(value)
        if self._is_repeated(cleaned):
            raise self._reject(InvalidCnpjError("sequência de dígitos repetidos"), value)
        if not has_valid_check_digits([int(c) for c in cleaned], self.WEIGHTS):
            raise self._reject(InvalidCheckDigitsError(self.document_type), value)
        return cleaned

    def format(self, value: str) -> str:
        cleaned = self.normalize(value)
        if len(cleaned) != self.length:
            return value
        return (
            f"{cleaned[0:2]}.{cleaned[2:5]}.{cleaned[5:8]}"
            f"/{cleaned[8:12]}-{cleaned[12:14]}"
        )

    def mask(self, value: str) -> str:
        cleaned = self.normalize(value)
        if len(cleaned) != self.length:
            return value
        return f"{cleaned[0:2]}.***.***/**{cleaned[10:12]}-{cleaned[12:14]}"

    def extract_base(self, value: str) -> str | None:
        """Company identifier shared by every branch (first 8 digits)."""
        cleaned = self.normalize(value)
        return cleaned[0:8] if len(cleaned) == self.length else None

    def extract_branch(self, value: str) -> str | None:
        cleaned = self.normalize(value)
        return cleaned[8:12] if len(cleaned) == self.length else None

    def is_main_branch(self, value: str) -> bool:
        return self.extract_branch(value) == MAIN_BRANCH

    def compute_check_digits(self, base: str) -> str:
        """Return the two check digits for a 12-digit CNPJ base."""
        digits = only_digits(base)
        if len(digits) != 12:
            raise InvalidLengthError(12, len(digits))
        checks = compute_check_digits([int(c) for c in digits], self.WEIGHTS)
        return "".join(str(d) for d in checks)


_validator = CnpjValidator()


def normalize_cnpj(cnpj: str) -> str:
    return _validator.normalize(cnpj)


def validate_cnpj(cnpj: str) -> str:
    """Validate a CNPJ and return its 14 digits.

    >>> validate_cnpj("11.222.333/0001-81")
    '11222333000181'
    """
    return _validator.validate(cnpj)


def format_cnpj(cnpj: str) -> str:
    return _validator.format(cnpj)


def is_cnpj_format(cnpj: str) -> bool:
    return _validator.is_format(cnpj)


def mask_cnpj(cnpj: str) -> str:
    return _validator.mask(cnpj)


def extract_base(cnpj: str) -> str | None:
    return _validator.extract_base(cnpj)


def extract_branch(cnpj: str) -> str | None:
    return _validator.extract_branch(cnpj)


def is_main_branch(cnpj: str) -> bool:
    return _validator.is_main_branch(cnpj)
