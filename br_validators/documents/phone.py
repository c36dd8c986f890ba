"""Brazilian phone number validation and formatting.

A national number is a 2-digit area code (DDD) followed by an 8-digit
landline or a 9-digit mobile number starting with ``9``.  Input may carry
the ``+55`` country code, with or without the plus sign.
"""

import re
from typing import ClassVar

from br_validators.documents.base import BaseDocumentValidator, only_digits
from br_validators.documents.exceptions import (
    InvalidCharactersError,
    InvalidDocumentFormatError,
    InvalidLengthError,
    InvalidPhoneError,
)
from br_validators.documents.models import DocumentKind

COUNTRY_CODE = "55"
LANDLINE_LENGTH = 10
MOBILE_LENGTH = 11
MOBILE_MARKER = "9"

_DDD_REGIONS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("11",), "São Paulo (Capital e Grande SP)"),
    (("12",), "São Paulo (Vale do Paraíba)"),
    (("13",), "São Paulo (Baixada Santista)"),
    (("14",), "São Paulo (Bauru)"),
    (("15",), "São Paulo (Sorocaba)"),
    (("16",), "São Paulo (Ribeirão Preto)"),
    (("17",), "São Paulo (São José do Rio Preto)"),
    (("18",), "São Paulo (Presidente Prudente)"),
    (("19",), "São Paulo (Campinas)"),
    (("21",), "Rio de Janeiro (Capital e Região)"),
    (("22",), "Rio de Janeiro (Interior)"),
    (("24",), "Rio de Janeiro (Petrópolis)"),
    (("27", "28"), "Espírito Santo"),
    (("31",), "Minas Gerais (BH e Região)"),
    (("32", "33", "34", "35", "37", "38"), "Minas Gerais"),
    (("41",), "Paraná (Curitiba e Região)"),
    (("42", "43", "44", "45", "46"), "Paraná"),
    (("47", "48", "49"), "Santa Catarina"),
    (("51",), "Rio Grande do Sul (Porto Alegre)"),
    (("53", "54", "55"), "Rio Grande do Sul"),
    (("61",), "Distrito Federal"),
    (("62",), "Goiás (Goiânia)"),
    (("63",), "Tocantins"),
    (("64",), "Goiás"),
    (("65", "66"), "Mato Grosso"),
    (("67",), "Mato Grosso do Sul"),
    (("68",), "Acre"),
    (("69",), "Rondônia"),
    (("71",), "Bahia (Salvador)"),
    (("73", "74", "75", "77"), "Bahia"),
    (("79",), "Sergipe"),
    (("81",), "Pernambuco (Recife)"),
    (("82",), "Alagoas"),
    (("83",), "Paraíba"),
    (("84",), "Rio Grande do Norte"),
    (("85", "88"), "Ceará"),
    (("86", "89"), "Piauí"),
    (("87",), "Pernambuco"),
    (("91", "93", "94"), "Pará"),
    (("92", "97"), "Amazonas"),
    (("95",), "Roraima"),
    (("96",), "Amapá"),
    (("98", "99"), "Maranhão"),
)

DDD_STATES: dict[str, str] = {
    ddd: label for ddds, label in _DDD_REGIONS for ddd in ddds
}
VALID_DDDS: frozenset[str] = frozenset(DDD_STATES)


class PhoneValidator(BaseDocumentValidator):
    """Validator for landline and mobile numbers with area code."""

    kind: ClassVar[DocumentKind] = DocumentKind.PHONE
    document_type: ClassVar[str] = "phone"
    pattern: ClassVar[re.Pattern[str]] = re.compile(
        r"^(\+55\s?)?(\(?\d{2}\)?\s?)?(\d{4,5}[-\s]?\d{4})$"
    )

    def normalize(self, value: str) -> str:
        """Keep digits, plus a ``+`` only when it leads the input."""
        digits = only_digits(value)
        if (value or "").strip().startswith("+"):
            return f"+{digits}"
        return digits

    def validate(self, value: str) -> str:
        """Validate a phone number and return it as ``+55`` + national number."""
        if not isinstance(value, str):
            raise InvalidDocumentFormatError(self.document_type)
        national = self._split_country_code(self.normalize(value))[1]
        if len(national) not in (LANDLINE_LENGTH, MOBILE_LENGTH):
            raise self._reject(InvalidLengthError(LANDLINE_LENGTH, len(national)), value)
        if not national.isdigit():
            raise self._reject(InvalidCharactersError(), value)
        ddd = national[0:2]
        if ddd not in VALID_DDDS:
            raise self._reject(InvalidPhoneError(f"DDD {ddd} inválido"), value)
        if len(national) == MOBILE_LENGTH and national[2] != MOBILE_MARKER:
            raise self._reject(InvalidPhoneError("celular deve começar com 9"), value)
        return f"+{COUNTRY_CODE}{national}"

    def format(self, value: str) -> str:
        has_country, national = self._split_country_code(self.normalize(value))
        prefix = f"+{COUNTRY_CODE} " if has_country else ""
        if not national.isdigit():
            return value
        if len(national) == MOBILE_LENGTH:
            return f"{prefix}({national[0:2]}) {national[2:7]}-{national[7:11]}"
        if len(national) == LANDLINE_LENGTH:
            return f"{prefix}({national[0:2]}) {national[2:6]}-{national[6:10]}"
        return value

    def is_format(self, value: str) -> bool:
        return isinstance(value, str) and self.pattern.fullmatch(value) is not None

    def mask(self, value: str) -> str:
        national = self._split_country_code(self.normalize(value))[1]
        if len(national) not in (LANDLINE_LENGTH, MOBILE_LENGTH) or not national.isdigit():
            return value
        hidden = "*" * (len(national) - 6)
        return f"({national[0:2]}) {hidden}-{national[-4:]}"

    def is_mobile(self, value: str) -> bool:
        # Length decides first: a legacy 10-digit mobile counts as a landline.
        national = self._split_country_code(self.normalize(value))[1]
        return len(national) == MOBILE_LENGTH and national[2] == MOBILE_MARKER

    def is_landline(self, value: str) -> bool:
        national = self._split_country_code(self.normalize(value))[1]
        return len(national) == LANDLINE_LENGTH

    def extract_ddd(self, value: str) -> str | None:
        national = self._split_country_code(self.normalize(value))[1]
        return national[0:2] if len(national) >= 2 else None

    @staticmethod
    def get_state_for_ddd(ddd: str) -> str | None:
        return DDD_STATES.get(ddd)

    @staticmethod
    def _split_country_code(cleaned: str) -> tuple[bool, str]:
        """Return (had_country_code, national_number)."""
        if cleaned.startswith(f"+{COUNTRY_CODE}"):
            return True, cleaned[3:]
        if cleaned.startswith(COUNTRY_CODE) and len(cleaned) > MOBILE_LENGTH:
            return True, cleaned[2:]
        return False, cleaned


_validator = PhoneValidator()


def normalize_phone(phone: str) -> str:
    return _validator.normalize(phone)


def validate_phone(phone: str) -> str:
    """Validate a phone number.

    >>> validate_phone("(11) 98765-4321")
    '+5511987654321'
    """
    return _validator.validate(phone)


def format_phone(phone: str) -> str:
    return _validator.format(phone)


def is_phone_format(phone: str) -> bool:
    return _validator.is_format(phone)


def mask_phone(phone: str) -> str:
    return _validator.mask(phone)


def is_mobile(phone: str) -> bool:
    return _validator.is_mobile(phone)


def is_landline(phone: str) -> bool:
    return _validator.is_landline(phone)


def extract_ddd(phone: str) -> str | None:
    return _validator.extract_ddd(phone)


def get_state_for_ddd(ddd: str) -> str | None:
    return PhoneValidator.get_state_for_ddd(ddd)
