import logging
from unittest.mock import patch

import pytest

from br_validators.documents.cpf import validate_cpf
from br_validators.documents.exceptions import InvalidCheckDigitsError, InvalidPixKeyError
from br_validators.logging.logger import Log
from br_validators.pix import validate_pix_key


class TestLogConfigure:
    def test_sets_level(self) -> None:
        Log.configure("debug")
        assert Log._logger.level == logging.DEBUG
        Log.configure("INFO")
        assert Log._logger.level == logging.INFO

    def test_handler_added_once(self) -> None:
        Log.configure("INFO")
        Log.configure("INFO")
        assert len(Log._logger.handlers) == 1


class TestRejected:
    def test_message_carries_type_code_and_length(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="br_validators")
        Log.rejected("CPF", "INVALID_LENGTH", 10)
        assert "CPF rejected: INVALID_LENGTH (length=10)" in caplog.messages


class TestRejectionLogging:
    def test_document_rejection(self) -> None:
        with patch("br_validators.documents.base.Log") as mock_log:
            with pytest.raises(InvalidCheckDigitsError):
                validate_cpf("123.456.789-00")
        mock_log.rejected.assert_called_once_with("CPF", "INVALID_CHECK_DIGITS", 14)

    def test_success_not_logged(self) -> None:
        with patch("br_validators.documents.base.Log") as mock_log:
            validate_cpf("123.456.789-09")
        mock_log.rejected.assert_not_called()

    def test_unrecognized_pix_key(self) -> None:
        with patch("br_validators.pix.dispatcher.Log") as mock_log:
            with pytest.raises(InvalidPixKeyError):
                validate_pix_key("secret-value")
        mock_log.rejected.assert_called_once_with("PIX key", "INVALID_PIX_KEY", 12)

    def test_pix_detection_logged_without_value(self) -> None:
        with patch("br_validators.pix.dispatcher.Log") as mock_log:
            validate_pix_key("user@example.com")
        messages = [c[0][0] for c in mock_log.debug.call_args_list]
        assert "PIX key detected as EMAIL" in messages
        assert all("user@example.com" not in m for m in messages)
