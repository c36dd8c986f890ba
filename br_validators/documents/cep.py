"""CEP (Código de Endereçamento Postal) validation and formatting.

Brazilian postal code with 8 digits and no check digit.  The first digit
selects one of ten macro-regions, the first two a sub-region and the first
five a sector.
"""

import re
from typing import ClassVar

from br_validators.documents.base import FixedLengthDocumentValidator
from br_validators.documents.exceptions import InvalidCepError
from br_validators.documents.models import DocumentKind

UNKNOWN_REGION = "Região desconhecida"

REGION_NAMES: dict[int, str] = {
    0: "Grande São Paulo",
    1: "Interior de São Paulo",
    2: "Rio de Janeiro e Espírito Santo",
    3: "Minas Gerais",
    4: "Bahia e Sergipe",
    5: "Pernambuco, Alagoas, Paraíba e Rio Grande do Norte",
    6: "Ceará, Piauí, Maranhão, Pará, Amazonas, Acre, Amapá e Roraima",
    7: "Distrito Federal, Goiás, Tocantins, Mato Grosso, Mato Grosso do Sul e Rondônia",
    8: "Paraná e Santa Catarina",
    9: "Rio Grande do Sul",
}


class CepValidator(FixedLengthDocumentValidator):
    """Validator for the 8-digit postal code."""

    kind: ClassVar[DocumentKind] = DocumentKind.CEP
    document_type: ClassVar[str] = "CEP"
    length: ClassVar[int] = 8
    pattern: ClassVar[re.Pattern[str]] = re.compile(r"^\d{5}-?\d{3}$")

    def validate(self, value: str) -> str:
        cleaned = self._require_digits(value)
        if cleaned == "0" * self.length:
            raise self._reject(InvalidCepError("CEP inválido"), value)
        return cleaned

    def format(self, value: str) -> str:
        cleaned = self.normalize(value)
        if len(cleaned) != self.length:
            return value
        return f"{cleaned[0:5]}-{cleaned[5:8]}"

    def mask(self, value: str) -> str:
        """Keep the sector, hide the 3-digit suffix."""
        cleaned = self.normalize(value)
        if len(cleaned) != self.length:
            return value
        return f"{cleaned[0:5]}-***"

    def extract_region(self, value: str) -> int | None:
        cleaned = self.normalize(value)
        return int(cleaned[0]) if cleaned else None

    def get_region_name(self, value: str) -> str | None:
        region = self.extract_region(value)
        if region is None:
            return None
        return REGION_NAMES.get(region, UNKNOWN_REGION)

    def extract_subregion(self, value: str) -> str | None:
        cleaned = self.normalize(value)
        return cleaned[0:2] if len(cleaned) >= 2 else None

    def extract_sector(self, value: str) -> str | None:
        cleaned = self.normalize(value)
        return cleaned[0:5] if len(cleaned) >= 5 else None


_validator = CepValidator()


def normalize_cep(cep: str) -> str:
    return _validator.normalize(cep)


def validate_cep(cep: str) -> str:
    return _validator.validate(cep)


def format_cep(cep: str) -> str:
    """Format as ``DDDDD-DDD``.

    >>> format_cep("12345678")
    '12345-678'
    >>> format_cep("1234")
    '1234'
    """
    return _validator.format(cep)


def is_cep_format(cep: str) -> bool:
    return _validator.is_format(cep)


def mask_cep(cep: str) -> str:
    return _validator.mask(cep)


def extract_region(cep: str) -> int | None:
    return _validator.extract_region(cep)


def get_region_name(cep: str) -> str | None:
    return _validator.get_region_name(cep)


def extract_subregion(cep: str) -> str | None:
    return _validator.extract_subregion(cep)


def extract_sector(cep: str) -> str | None:
    return _validator.extract_sector(cep)
