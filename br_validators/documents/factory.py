from typing import ClassVar

from br_validators.documents.base import BaseDocumentValidator
from br_validators.documents.cep import CepValidator
from br_validators.documents.cnpj import CnpjValidator
from br_validators.documents.cpf import CpfValidator
from br_validators.documents.models import DocumentKind
from br_validators.documents.phone import PhoneValidator


class DocumentValidatorFactory:
    """Creates the validator for a document kind."""

    VALIDATORS: ClassVar[dict[DocumentKind, type[BaseDocumentValidator]]] = {
        DocumentKind.CPF: CpfValidator,
        DocumentKind.CNPJ: CnpjValidator,
        DocumentKind.CEP: CepValidator,
        DocumentKind.PHONE: PhoneValidator,
    }

    @classmethod
    def create(cls, kind: DocumentKind | str) -> BaseDocumentValidator:
        """Create a validator from a DocumentKind or its (case-insensitive) value."""
        return cls.VALIDATORS[cls._resolve_kind(kind)]()

    @classmethod
    def _resolve_kind(cls, kind: DocumentKind | str) -> DocumentKind:
        if isinstance(kind, DocumentKind):
            return kind
        try:
            return DocumentKind(kind.strip().lower())
        except ValueError:
            supported = sorted(k.value for k in cls.VALIDATORS)
            raise ValueError(
                f"Unknown document kind '{kind}'. Choose from: {supported}"
            ) from None
