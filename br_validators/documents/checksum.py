"""Weighted modulo-11 check digits shared by CPF and CNPJ.

Both documents derive each check digit the same way: multiply a window of
leading digits by a weight sequence, sum, and map the remainder mod 11 to
``0`` when it is below 2 or to ``11 - remainder`` otherwise.  Only the
weights (and therefore the window length) differ.
"""

from collections.abc import Sequence


def mod11_check_digit(digits: Sequence[int], weights: Sequence[int]) -> int:
    """Return the check digit for the first ``len(weights)`` *digits*."""
    if len(digits) < len(weights):
        raise ValueError(
            f"Need at least {len(weights)} digits, got {len(digits)}"
        )
    total = sum(d * w for d, w in zip(digits, weights))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def has_valid_check_digits(
    digits: Sequence[int],
    weight_sets: Sequence[Sequence[int]],
) -> bool:
    """Verify every check digit described by *weight_sets*.

    Each weight sequence covers the digits before its check digit, so the
    check digit for ``weights`` sits at index ``len(weights)``.
    """
    for weights in weight_sets:
        position = len(weights)
        if position >= len(digits):
            return False
        if mod11_check_digit(digits, weights) != digits[position]:
            return False
    return True


def compute_check_digits(
    base: Sequence[int],
    weight_sets: Sequence[Sequence[int]],
) -> list[int]:
    """Append check digits to *base* one at a time and return them."""
    digits = list(base)
    computed: list[int] = []
    for weights in weight_sets:
        check = mod11_check_digit(digits, weights)
        digits.append(check)
        computed.append(check)
    return computed
