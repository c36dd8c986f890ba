"""The five PIX key kinds.

Tax-ID keys delegate to the document validators; e-mail, phone and random
keys are accepted on shape alone.
"""

import re
from typing import ClassVar

from br_validators.documents.base import FixedLengthDocumentValidator
from br_validators.documents.cnpj import CnpjValidator
from br_validators.documents.cpf import CpfValidator
from br_validators.pix.base import BasePixKey
from br_validators.pix.models import PixKeyType


class _DocumentPixKey(BasePixKey):
    """PIX key backed by a tax-ID document validator."""

    validator: ClassVar[FixedLengthDocumentValidator]

    def matches(self, key: str) -> bool:
        return self.validator.is_format(key)

    def validate(self, key: str) -> str:
        return self.validator.validate(key)

    def normalize(self, key: str) -> str:
        return self.validator.normalize(key)

    def mask(self, key: str) -> str:
        return self.validator.mask(key)


class CpfPixKey(_DocumentPixKey):
    key_type: ClassVar[PixKeyType] = PixKeyType.CPF
    validator: ClassVar[FixedLengthDocumentValidator] = CpfValidator()


class CnpjPixKey(_DocumentPixKey):
    key_type: ClassVar[PixKeyType] = PixKeyType.CNPJ
    validator: ClassVar[FixedLengthDocumentValidator] = CnpjValidator()


class EmailPixKey(BasePixKey):
    key_type: ClassVar[PixKeyType] = PixKeyType.EMAIL

    _EMAIL_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
    )

    def matches(self, key: str) -> bool:
        return self._EMAIL_RE.fullmatch(key) is not None

    def validate(self, key: str) -> str:
        return self.normalize(key)

    def normalize(self, key: str) -> str:
        return key.lower()

    def mask(self, key: str) -> str:
        """``user@example.com`` -> ``u***@example.com``."""
        local, at, domain = key.partition("@")
        if not at:
            return key
        if len(local) > 1:
            return f"{local[0]}***@{domain}"
        return f"***@{domain}"


class PhonePixKey(BasePixKey):
    """Phone key: ``+55`` followed by exactly 11 digits, stricter than PhoneValidator."""

    key_type: ClassVar[PixKeyType] = PixKeyType.PHONE

    _PHONE_RE: ClassVar[re.Pattern[str]] = re.compile(r"^\+55\d{11}$")

    def matches(self, key: str) -> bool:
        return self._PHONE_RE.fullmatch(key) is not None

    def validate(self, key: str) -> str:
        return key

    def normalize(self, key: str) -> str:
        return key

    def mask(self, key: str) -> str:
        """``+5511987654321`` -> ``+55 (11) *****-4321``."""
        if len(key) < 14:
            return key
        return f"+55 ({key[3:5]}) *****-{key[-4:]}"


class RandomPixKey(BasePixKey):
    """Random key: a UUID, case-insensitive on input, lowercase when canonical."""

    key_type: ClassVar[PixKeyType] = PixKeyType.RANDOM_KEY

    _RANDOM_KEY_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"
    )

    def matches(self, key: str) -> bool:
        return self._RANDOM_KEY_RE.fullmatch(key.lower()) is not None

    def validate(self, key: str) -> str:
        return self.normalize(key)

    def normalize(self, key: str) -> str:
        return key.lower()

    def mask(self, key: str) -> str:
        if len(key) < 8:
            return key
        return f"{key[0:4]}****-****-****-****-****"
