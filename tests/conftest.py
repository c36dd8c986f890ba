import pytest

from br_validators.pix.dispatcher import PixDispatcher
from br_validators.pix.factory import PixDispatcherFactory


@pytest.fixture()
def dispatcher() -> PixDispatcher:
    """Dispatcher with the standard key precedence."""
    return PixDispatcherFactory.create()


@pytest.fixture()
def valid_cpfs() -> list[str]:
    """Known-good CPFs, formatted and bare."""
    return ["123.456.789-09", "12345678909", "529.982.247-25", "52998224725"]


@pytest.fixture()
def valid_cnpjs() -> list[str]:
    """Known-good CNPJs: a main branch and a second branch of the same company."""
    return ["11.222.333/0001-81", "11222333000181", "11222333000262"]
