from dataclasses import dataclass
from enum import Enum


class PixKeyType(str, Enum):
    """PIX key kinds, in no particular order (see PixDispatcher for precedence)."""

    CPF = "CPF"
    CNPJ = "CNPJ"
    EMAIL = "EMAIL"
    PHONE = "PHONE"
    RANDOM_KEY = "RANDOM_KEY"

    @property
    def label(self) -> str:
        """Portuguese display name."""
        return _LABELS[self]

    def __str__(self) -> str:
        return self.label


_LABELS: dict[PixKeyType, str] = {
    PixKeyType.CPF: "CPF",
    PixKeyType.CNPJ: "CNPJ",
    PixKeyType.EMAIL: "E-mail",
    PixKeyType.PHONE: "Telefone",
    PixKeyType.RANDOM_KEY: "Chave aleatória",
}


@dataclass(frozen=True)
class PixKeyClassification:
    """A validated PIX key and its canonical value."""

    key_type: PixKeyType
    value: str
