import logging
import math
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

U64_MAX = 2**64 - 1

# modulus used when the exact result would not fit in 64 bits
FALLBACK_MODULUS = 1_000_000_007
MAX_EXACT_DIGITS = 19


class InvalidArgument(ValueError):
    pass


def check_u64(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgument(f"{name} must not be negative, got {value}")
    if value > U64_MAX:
        raise InvalidArgument(f"{name} does not fit in 64 bits: {value}")
    return value


def check_arguments(base: int, exponent: int, modulus: Optional[int] = None):
    check_u64(base, "base")
    check_u64(exponent, "exponent")
    if modulus is not None and check_u64(modulus, "modulus") == 0:
        raise InvalidArgument("modulus must be positive")


def bits(n: int) -> Iterator[int]:
    """
    yields bits of n starting from the most significant one
    """
    for i in reversed(range(n.bit_length())):
        yield n >> i & 1


def square(value: int) -> int:
    return value * value & U64_MAX


def digits_required(base: int, exponent: int) -> int:
    """
    number of decimal digits in base**exponent

    float based, so it can be off by one right next to a power of ten
    """
    if base < 1:
        raise InvalidArgument("log10 is undefined for base 0")
    return math.floor(exponent * math.log10(base)) + 1


def effective_modulus(base: int, exponent: int,
                      modulus: Optional[int] = None) -> Optional[int]:
    """
    returns the modulus fast_exp actually reduces by, None for exact u64 math
    """
    if modulus is not None:
        return modulus
    if base and digits_required(base, exponent) > MAX_EXACT_DIGITS:
        logger.debug("%d^%d needs more than %d digits, reducing modulo %d",
                     base, exponent, MAX_EXACT_DIGITS, FALLBACK_MODULUS)
        return FALLBACK_MODULUS
    return None


def fast_exp(base: int, exponent: int, modulus: Optional[int] = None) -> int:
    """
    base**exponent by squaring, every product wraps like u64 arithmetic

    without a modulus the exact value is returned, unless it needs more
    than MAX_EXACT_DIGITS digits: then it is taken modulo FALLBACK_MODULUS
    """
    check_arguments(base, exponent, modulus)

    m = effective_modulus(base, exponent, modulus)

    def reduce(value: int) -> int:
        return value if m is None else value % m

    if exponent == 0:
        return reduce(1)
    if base == 0:
        return 0

    # f(e) = f(e - 1) * base for odd e, f(e / 2)**2 for even e
    s = 1
    for bit in bits(exponent):
        s = reduce(square(s))
        if bit:
            s = reduce(s * base & U64_MAX)
    return s


if __name__ == "__main__":
    import random
    from tqdm import tqdm

    def random_params():
        return (random.randint(0, 2**32), random.randint(0, 2**20),
                random.randint(1, 2**32))

    print(list(bits(0b101001)))
    print(fast_exp(12, 5, 7), pow(12, 5, 7))
    print(fast_exp(2, 100), pow(2, 100, FALLBACK_MODULUS))
    for _ in tqdm(range(10000)):
        a, b, m = random_params()
        assert fast_exp(a, b, m) == pow(a, b, m), (a, b, m)
