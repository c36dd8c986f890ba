from dataclasses import dataclass
from enum import Enum


class DocumentKind(str, Enum):
    """Document kinds handled by a BaseDocumentValidator."""

    CPF = "cpf"
    CNPJ = "cnpj"
    CEP = "cep"
    PHONE = "phone"


@dataclass(frozen=True)
class ErrorDetail:
    """Machine-readable description of a validation failure."""

    code: str  # e.g. "INVALID_CPF", "INVALID_LENGTH"
    document_type: str  # e.g. "CPF", "phone", "document"
    message: str  # human-readable, Portuguese
