import pytest

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
from br_validators.documents.models import ErrorDetail


class TestErrorCodes:
    @pytest.mark.parametrize(
        ("error", "code", "document_type"),
        [
            (InvalidCpfError("x"), "INVALID_CPF", "CPF"),
            (InvalidCnpjError("x"), "INVALID_CNPJ", "CNPJ"),
            (InvalidCepError("x"), "INVALID_CEP", "CEP"),
            (InvalidPhoneError("x"), "INVALID_PHONE", "phone"),
            (InvalidPixKeyError("x"), "INVALID_PIX_KEY", "PIX key"),
            (InvalidDocumentFormatError("CPF"), "INVALID_DOCUMENT_FORMAT", "CPF"),
            (InvalidCheckDigitsError("CNPJ"), "INVALID_CHECK_DIGITS", "CNPJ"),
            (InvalidCharactersError(), "INVALID_CHARACTERS", "document"),
            (InvalidLengthError(11, 3), "INVALID_LENGTH", "document"),
        ],
    )
    def test_code_and_document_type(
        self, error: BrazilianValidationError, code: str, document_type: str
    ) -> None:
        assert error.code == code
        assert error.document_type == document_type
        assert isinstance(error, BrazilianValidationError)


class TestMessages:
    def test_kind_specific_detail(self) -> None:
        assert str(InvalidCpfError("sequência de dígitos repetidos")) == (
            "CPF inválido: sequência de dígitos repetidos"
        )

    def test_length(self) -> None:
        assert str(InvalidLengthError(11, 10)) == "Tamanho inválido: esperado 11, recebido 10"

    def test_check_digits(self) -> None:
        assert str(InvalidCheckDigitsError("CPF")) == "Dígitos verificadores inválidos para CPF"


class TestSerialization:
    def test_to_detail(self) -> None:
        detail = InvalidPhoneError("DDD 00 inválido").to_detail()
        assert detail == ErrorDetail(
            code="INVALID_PHONE",
            document_type="phone",
            message="Telefone inválido: DDD 00 inválido",
        )

    def test_to_dict(self) -> None:
        assert InvalidLengthError(8, 5).to_dict() == {
            "code": "INVALID_LENGTH",
            "document_type": "document",
            "message": "Tamanho inválido: esperado 8, recebido 5",
        }

    def test_detail_is_frozen(self) -> None:
        detail = InvalidCepError("CEP inválido").to_detail()
        with pytest.raises(AttributeError):
            detail.code = "OTHER"  # type: ignore[misc]
