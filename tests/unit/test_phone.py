import pytest

from br_validators.documents.exceptions import (
    InvalidCharactersError,
    InvalidLengthError,
    InvalidPhoneError,
)
from br_validators.documents.phone import (
    DDD_STATES,
    VALID_DDDS,
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


class TestValidatePhone:
    @pytest.mark.parametrize(
        "raw",
        ["+55 11 98765-4321", "(11) 98765-4321", "11987654321", "5511987654321"],
    )
    def test_mobile(self, raw: str) -> None:
        assert validate_phone(raw) == "+5511987654321"

    @pytest.mark.parametrize("raw", ["1134567890", "(11) 3456-7890", "+55 (11) 3456-7890"])
    def test_landline(self, raw: str) -> None:
        assert validate_phone(raw) == "+551134567890"

    def test_leading_55_kept_as_ddd_when_short(self) -> None:
        assert validate_phone("55987654321") == "+5555987654321"

    def test_too_short(self) -> None:
        with pytest.raises(InvalidLengthError) as exc_info:
            validate_phone("12345")
        assert exc_info.value.expected == 10
        assert exc_info.value.actual == 5

    def test_too_long(self) -> None:
        with pytest.raises(InvalidLengthError):
            validate_phone("119876543210")

    def test_invalid_ddd(self) -> None:
        with pytest.raises(InvalidPhoneError, match="DDD 00"):
            validate_phone("00987654321")

    def test_mobile_without_nine(self) -> None:
        with pytest.raises(InvalidPhoneError, match="celular") as exc_info:
            validate_phone("11887654321")
        assert exc_info.value.code == "INVALID_PHONE"
        assert exc_info.value.document_type == "phone"

    def test_foreign_country_code(self) -> None:
        with pytest.raises(InvalidCharactersError):
            validate_phone("+1 212 555 123")


class TestNormalizePhone:
    def test_keeps_leading_plus(self) -> None:
        assert normalize_phone("+55 11 98765-4321") == "+5511987654321"

    def test_without_plus(self) -> None:
        assert normalize_phone("(11) 98765-4321") == "11987654321"

    def test_drops_inner_plus(self) -> None:
        assert normalize_phone("11 +98765-4321") == "11987654321"

    @pytest.mark.parametrize("raw", ["+55 11 98765-4321", " +1", "+", "1+1", ""])
    def test_idempotent(self, raw: str) -> None:
        assert normalize_phone(normalize_phone(raw)) == normalize_phone(raw)


class TestFormatPhone:
    def test_mobile(self) -> None:
        assert format_phone("11987654321") == "(11) 98765-4321"

    def test_mobile_with_country_code(self) -> None:
        assert format_phone("+5511987654321") == "+55 (11) 98765-4321"

    def test_country_code_without_plus(self) -> None:
        assert format_phone("551134567890") == "+55 (11) 3456-7890"

    def test_landline(self) -> None:
        assert format_phone("1134567890") == "(11) 3456-7890"

    @pytest.mark.parametrize("raw", ["12345", "+55 123", "1198765432100"])
    def test_unrecognized_length_unchanged(self, raw: str) -> None:
        assert format_phone(raw) == raw


class TestIsPhoneFormat:
    @pytest.mark.parametrize(
        "raw",
        ["+55 11 98765-4321", "(11) 98765-4321", "11987654321", "3456-7890"],
    )
    def test_matches(self, raw: str) -> None:
        assert is_phone_format(raw)

    @pytest.mark.parametrize("raw", ["123", "abc", "+1 212 555 1234"])
    def test_rejects(self, raw: str) -> None:
        assert not is_phone_format(raw)


class TestClassification:
    def test_mobile(self) -> None:
        assert is_mobile("11987654321")
        assert not is_landline("11987654321")

    def test_landline(self) -> None:
        assert is_landline("1134567890")
        assert not is_mobile("1134567890")

    def test_eleven_digits_without_marker_is_neither(self) -> None:
        assert not is_mobile("11887654321")
        assert not is_landline("11887654321")

    def test_legacy_ten_digit_mobile_is_landline(self) -> None:
        assert is_landline("1187654321")
        assert not is_mobile("1187654321")

    def test_does_not_check_ddd(self) -> None:
        assert is_mobile("00987654321")

    def test_country_code(self) -> None:
        assert is_mobile("+55 11 98765-4321")


class TestDdd:
    def test_extract(self) -> None:
        assert extract_ddd("11987654321") == "11"
        assert extract_ddd("+55 21 98765-4321") == "21"

    def test_extract_too_short(self) -> None:
        assert extract_ddd("1") is None

    def test_state(self) -> None:
        assert get_state_for_ddd("11") == "São Paulo (Capital e Grande SP)"
        assert get_state_for_ddd("21") == "Rio de Janeiro (Capital e Região)"
        assert get_state_for_ddd("27") == get_state_for_ddd("28") == "Espírito Santo"

    def test_unknown_state(self) -> None:
        assert get_state_for_ddd("00") is None
        assert get_state_for_ddd("20") is None

    def test_valid_ddd_set(self) -> None:
        assert len(VALID_DDDS) == 67
        assert VALID_DDDS == frozenset(DDD_STATES)
        assert "23" not in VALID_DDDS


class TestMaskPhone:
    def test_mobile(self) -> None:
        assert mask_phone("11987654321") == "(11) *****-4321"

    def test_landline(self) -> None:
        assert mask_phone("1134567890") == "(11) ****-7890"

    def test_country_code_dropped(self) -> None:
        assert mask_phone("+55 11 98765-4321") == "(11) *****-4321"

    def test_wrong_length_unchanged(self) -> None:
        assert mask_phone("12345") == "12345"
