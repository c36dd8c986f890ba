from dataclasses import asdict
from typing import ClassVar

from br_validators.documents.models import ErrorDetail


class BrazilianValidationError(Exception):
    """Base exception for all document validation failures."""

    code: ClassVar[str] = "VALIDATION_ERROR"

    def __init__(self, message: str, document_type: str = "document") -> None:
        super().__init__(message)
        self.document_type = document_type

    def to_detail(self) -> ErrorDetail:
        """Build the (code, document_type, message) triple for API adapters."""
        return ErrorDetail(
            code=self.code,
            document_type=self.document_type,
            message=str(self),
        )

    def to_dict(self) -> dict[str, str]:
        return asdict(self.to_detail())


class InvalidLengthError(BrazilianValidationError):
    """Raised when the normalized value does not have the expected length."""

    code: ClassVar[str] = "INVALID_LENGTH"

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Tamanho inválido: esperado {expected}, recebido {actual}")
        self.expected = expected
        self.actual = actual


class InvalidCharactersError(BrazilianValidationError):
    """Raised when non-digit characters remain where only digits are allowed."""

    code: ClassVar[str] = "INVALID_CHARACTERS"

    def __init__(self) -> None:
        super().__init__("Caracteres inválidos no documento")


class InvalidCheckDigitsError(BrazilianValidationError):
    """Raised when the check digits do not match the computed ones."""

    code: ClassVar[str] = "INVALID_CHECK_DIGITS"

    def __init__(self, document_type: str) -> None:
        super().__init__(
            f"Dígitos verificadores inválidos para {document_type}",
            document_type=document_type,
        )


class InvalidDocumentFormatError(BrazilianValidationError):
    """Raised when the input cannot be interpreted as a document at all."""

    code: ClassVar[str] = "INVALID_DOCUMENT_FORMAT"

    def __init__(self, document_type: str) -> None:
        super().__init__(
            f"Formato de documento inválido: {document_type}",
            document_type=document_type,
        )


class InvalidCpfError(BrazilianValidationError):
    code: ClassVar[str] = "INVALID_CPF"

    def __init__(self, detail: str) -> None:
        super().__init__(f"CPF inválido: {detail}", document_type="CPF")


class InvalidCnpjError(BrazilianValidationError):
    code: ClassVar[str] = "INVALID_CNPJ"

    def __init__(self, detail: str) -> None:
        super().__init__(f"CNPJ inválido: {detail}", document_type="CNPJ")


class InvalidCepError(BrazilianValidationError):
    code: ClassVar[str] = "INVALID_CEP"

    def __init__(self, detail: str) -> None:
        super().__init__(f"CEP inválido: {detail}", document_type="CEP")


class InvalidPhoneError(BrazilianValidationError):
    code: ClassVar[str] = "INVALID_PHONE"

    def __init__(self, detail: str) -> None:
        super().__init__(f"Telefone inválido: {detail}", document_type="phone")


class InvalidPixKeyError(BrazilianValidationError):
    code: ClassVar[str] = "INVALID_PIX_KEY"

    def __init__(self, detail: str) -> None:
        super().__init__(f"Chave PIX inválida: {detail}", document_type="PIX key")
