from abc import ABC, abstractmethod
from typing import ClassVar

from br_validators.pix.models import PixKeyType


class BasePixKey(ABC):
    """Contract for one PIX key kind."""

    key_type: ClassVar[PixKeyType]

    @abstractmethod
    def matches(self, key: str) -> bool:
        """Structural test only; *key* is already stripped."""

    @abstractmethod
    def validate(self, key: str) -> str:
        """Run semantic checks on a matching *key* and return its canonical value.

        Raises:
            BrazilianValidationError: when the key has the right shape but is invalid.
        """

    @abstractmethod
    def normalize(self, key: str) -> str:
        """Canonical value without semantic checks."""

    @abstractmethod
    def mask(self, key: str) -> str:
        """Partially redact a matching *key* for display."""
