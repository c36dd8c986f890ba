from br_validators.documents.base import BaseDocumentValidator
from br_validators.documents.cep import CepValidator
from br_validators.documents.cnpj import CnpjValidator
from br_validators.documents.cpf import CpfValidator
from br_validators.documents.factory import DocumentValidatorFactory
from br_validators.documents.models import DocumentKind
from br_validators.documents.phone import PhoneValidator

__all__ = [
    "BaseDocumentValidator",
    "CepValidator",
    "CnpjValidator",
    "CpfValidator",
    "DocumentKind",
    "DocumentValidatorFactory",
    "PhoneValidator",
]
