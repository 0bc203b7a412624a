from dataclasses import dataclass
from typing import Optional
import re

from power import (InvalidArgument, MAX_EXACT_DIGITS, U64_MAX, check_arguments,
                   check_u64, digits_required, fast_exp)


UNDEFINED = "undefined"
FALLBACK_SUFFIX = " (modulo 10^9+7)"

_U64_PATTERN = re.compile(r"\s*0*([0-9]+)\s*")
_U64_DIGITS = len(str(U64_MAX))


@dataclass(frozen=True)
class Evaluation:
    base: int
    exponent: int
    modulus: Optional[int]
    value: Optional[int]
    reduced: bool
    text: str


def parse_u64(text: str, name: str) -> int:
    match = _U64_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidArgument(f"{name} is not an unsigned integer: {text!r}")
    digits = match.group(1)
    if len(digits) > _U64_DIGITS:
        raise InvalidArgument(f"{name} does not fit in 64 bits")
    return check_u64(int(digits), name)


def evaluate(base: int, exponent: int,
             modulus: Optional[int] = None) -> Evaluation:
    """
    computes base**exponent the way it is shown to the user
    """
    check_arguments(base, exponent, modulus)
    if base == 0 and exponent == 0:
        return Evaluation(base, exponent, modulus, None, False, UNDEFINED)

    value = fast_exp(base, exponent, modulus)
    reduced = (modulus is None and base != 0
               and digits_required(base, exponent) > MAX_EXACT_DIGITS)

    text = str(value)
    if reduced:
        text += FALLBACK_SUFFIX
    return Evaluation(base, exponent, modulus, value, reduced, text)


def format_line(evaluation: Evaluation) -> str:
    if evaluation.modulus is None:
        return f"{evaluation.base}^{evaluation.exponent} = {evaluation.text}"
    return (f"{evaluation.base}^{evaluation.exponent} mod {evaluation.modulus}"
            f" = {evaluation.text}")
