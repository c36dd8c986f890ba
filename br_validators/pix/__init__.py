"""PIX instant-payment key validation.

Module-level functions share one dispatcher with the standard precedence.
"""

from br_validators.pix.base import BasePixKey
from br_validators.pix.dispatcher import PixDispatcher
from br_validators.pix.factory import PixDispatcherFactory
from br_validators.pix.models import PixKeyClassification, PixKeyType

_dispatcher = PixDispatcherFactory.create()


def validate_pix_key(key: str) -> str:
    """Validate a PIX key of any kind and return its canonical value.

    >>> validate_pix_key("User@Example.COM")
    'user@example.com'
    """
    return _dispatcher.validate(key)


def detect_type(key: str) -> PixKeyType | None:
    return _dispatcher.detect_type(key)


def validate_with_type(key: str) -> PixKeyClassification:
    return _dispatcher.validate_with_type(key)


def normalize_pix_key(key: str) -> str:
    return _dispatcher.normalize(key)


def mask_pix_key(key: str) -> str:
    return _dispatcher.mask(key)


__all__ = [
    "BasePixKey",
    "PixDispatcher",
    "PixDispatcherFactory",
    "PixKeyClassification",
    "PixKeyType",
    "detect_type",
    "mask_pix_key",
    "normalize_pix_key",
    "validate_pix_key",
    "validate_with_type",
]
