"""PIX key classification and validation.

Key kinds are tried in a fixed order and the first structural match wins;
later kinds are never consulted.  An 11-digit string therefore always
resolves as a CPF, even when it could also pass for something else.
"""

from collections.abc import Sequence

from br_validators.documents.exceptions import InvalidPixKeyError
from br_validators.logging.logger import Log
from br_validators.pix.base import BasePixKey
from br_validators.pix.models import PixKeyClassification, PixKeyType


class PixDispatcher:
    """Routes a PIX key to the first key kind whose shape it matches."""

    def __init__(self, key_kinds: Sequence[BasePixKey]) -> None:
        self._key_kinds: tuple[BasePixKey, ...] = tuple(key_kinds)

    @property
    def key_types(self) -> list[PixKeyType]:
        """Key types in precedence order."""
        return [kind.key_type for kind in self._key_kinds]

    def detect_type(self, key: str) -> PixKeyType | None:
        """Return the key type by shape alone, or ``None`` when nothing matches."""
        kind = self._match(key.strip())
        return kind.key_type if kind is not None else None

    def validate(self, key: str) -> str:
        """Validate *key* and return its canonical value.

        Raises:
            InvalidPixKeyError: when no key kind matches.
            BrazilianValidationError: when a CPF/CNPJ-shaped key fails its checks.
        """
        return self.validate_with_type(key).value

    def validate_with_type(self, key: str) -> PixKeyClassification:
        key = key.strip()
        kind = self._match(key)
        if kind is None:
            Log.rejected("PIX key", InvalidPixKeyError.code, len(key))
            raise InvalidPixKeyError("formato não reconhecido")
        return PixKeyClassification(key_type=kind.key_type, value=kind.validate(key))

    def normalize(self, key: str) -> str:
        key = key.strip()
        kind = self._match(key)
        return kind.normalize(key) if kind is not None else key

    def mask(self, key: str) -> str:
        key = key.strip()
        kind = self._match(key)
        return kind.mask(key) if kind is not None else key

    def _match(self, key: str) -> BasePixKey | None:
        for kind in self._key_kinds:
            if kind.matches(key):
                Log.debug(f"PIX key detected as {kind.key_type.value}")
                return kind
        return None
