from br_validators.pix.dispatcher import PixDispatcher
from br_validators.pix.keys import (
    CnpjPixKey,
    CpfPixKey,
    EmailPixKey,
    PhonePixKey,
    RandomPixKey,
)


class PixDispatcherFactory:
    """Creates a dispatcher with the standard key precedence."""

    @classmethod
    def create(cls) -> PixDispatcher:
        """CPF, CNPJ, e-mail, phone, random key: the order is part of the contract."""
        return PixDispatcher(
            [CpfPixKey(), CnpjPixKey(), EmailPixKey(), PhonePixKey(), RandomPixKey()]
        )
