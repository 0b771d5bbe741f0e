"""
Tax ID Check Digits

Structural and check-digit validation for the two national tax identifier forms:
- CNPJ: 14 digits, issued to organizations (suppliers)
- CPF: 11 digits, issued to individuals (customers)

Both carry two trailing mod-11 check digits computed over the preceding digits.
"""

from typing import Sequence

CNPJ_FIRST_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_SECOND_WEIGHTS = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CPF_FIRST_WEIGHTS = tuple(range(10, 1, -1))
CPF_SECOND_WEIGHTS = tuple(range(11, 1, -1))


def _check_digit(digits: Sequence[int], weights: Sequence[int]) -> int:
    remainder = sum(d * w for d, w in zip(digits, weights)) % 11
    return 0 if remainder < 2 else 11 - remainder


def _is_valid(value: str, length: int, first: Sequence[int], second: Sequence[int]) -> bool:
    # isdigit() alone also accepts non-ASCII digits such as Arabic-Indic numerals
    if not isinstance(value, str) or len(value) != length or not (value.isascii() and value.isdigit()):
        return False

    # Sequences like 00000000000 pass the arithmetic but are never issued
    if len(set(value)) == 1:
        return False

    digits = [int(ch) for ch in value]
    body = digits[:-2]
    d1 = _check_digit(body, first)
    d2 = _check_digit(body + [d1], second)
    return digits[-2] == d1 and digits[-1] == d2


def is_valid_cnpj(value: str) -> bool:
    """
    Validate an organization tax ID.

    Args:
        value: Exactly 14 digits, no punctuation

    Returns:
        True if the shape and both check digits are correct
    """
    return _is_valid(value, 14, CNPJ_FIRST_WEIGHTS, CNPJ_SECOND_WEIGHTS)


def is_valid_cpf(value: str) -> bool:
    """
    Validate an individual tax ID.

    Args:
        value: Exactly 11 digits, no punctuation

    Returns:
        True if the shape and both check digits are correct
    """
    return _is_valid(value, 11, CPF_FIRST_WEIGHTS, CPF_SECOND_WEIGHTS)
