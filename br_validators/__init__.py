"""Validation, formatting and masking of Brazilian documents.

CPF, CNPJ, CEP, phone numbers and PIX keys::

    >>> from br_validators import format_cpf, validate_cpf
    >>> validate_cpf("123.456.789-09")
    '12345678909'
    >>> format_cpf("12345678909")
    '123.456.789-09'
"""

from br_validators.config.settings import Settings
from br_validators.documents.cep import (
    extract_region,
    extract_sector,
    extract_subregion,
    format_cep,
    get_region_name,
    is_cep_format,
    mask_cep,
    normalize_cep,
    validate_cep,
)
from br_validators.documents.cnpj import (
    extract_base,
    extract_branch,
    format_cnpj,
    is_cnpj_format,
    is_main_branch,
    mask_cnpj,
    normalize_cnpj,
    validate_cnpj,
)
from br_validators.documents.cpf import (
    format_cpf,
    is_cpf_format,
    mask_cpf,
    normalize_cpf,
    validate_cpf,
)
from br_validators.documents.exceptions import (
    BrazilianValidationError,
    InvalidCepError,
    InvalidCharactersError,
    InvalidCheckDigitsError,
    InvalidCnpjError,
    InvalidCpfError,
    InvalidDocumentFormatError,
    InvalidLengthError,
    InvalidPhoneError,
    InvalidPixKeyError,
)
from br_validators.documents.factory import DocumentValidatorFactory
from br_validators.documents.models import DocumentKind, ErrorDetail
from br_validators.documents.phone import (
    extract_ddd,
    format_phone,
    get_state_for_ddd,
    is_landline,
    is_mobile,
    is_phone_format,
    mask_phone,
    normalize_phone,
    validate_phone,
)
from br_validators.logging.logger import Log
from br_validators.pix import (
    PixKeyClassification,
    PixKeyType,
    detect_type,
    mask_pix_key,
    normalize_pix_key,
    validate_pix_key,
    validate_with_type,
)


def configure(settings: Settings | None = None) -> None:
    """Apply logging configuration from *settings* (loaded from env when omitted)."""
    settings = settings or Settings()
    Log.configure(settings.log_level)


__all__ = [
    "BrazilianValidationError",
    "DocumentKind",
    "DocumentValidatorFactory",
    "ErrorDetail",
    "InvalidCepError",
    "InvalidCharactersError",
    "InvalidCheckDigitsError",
    "InvalidCnpjError",
    "InvalidCpfError",
    "InvalidDocumentFormatError",
    "InvalidLengthError",
    "InvalidPhoneError",
    "InvalidPixKeyError",
    "PixKeyClassification",
    "PixKeyType",
    "Settings",
    "configure",
    "detect_type",
    "extract_base",
    "extract_branch",
    "extract_ddd",
    "extract_region",
    "extract_sector",
    "extract_subregion",
    "format_cep",
    "format_cnpj",
    "format_cpf",
    "format_phone",
    "get_region_name",
    "get_state_for_ddd",
    "is_cep_format",
    "is_cnpj_format",
    "is_cpf_format",
    "is_landline",
    "is_main_branch",
    "is_mobile",
    "is_phone_format",
    "mask_cep",
    "mask_cnpj",
    "mask_cpf",
    "mask_phone",
    "mask_pix_key",
    "normalize_cep",
    "normalize_cnpj",
    "normalize_cpf",
    "normalize_phone",
    "normalize_pix_key",
    "validate_cep",
    "validate_cnpj",
    "validate_cpf",
    "validate_phone",
    "validate_pix_key",
    "validate_with_type",
]
