"""Small numeric and text utilities: temperatures, Fibonacci, maxima, primes, palindromes."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from math import isqrt

_I32_MAX = 2**31 - 1
DEFAULT_BASES: tuple[int, ...] = (2, 3, 5, 7, 11, 13, 17, 19, 23)


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert a temperature in degrees Celsius to degrees Fahrenheit."""
    return 32.0 + (celsius * 9.0) / 5.0


def fibonacci(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers, starting at 0.

    As with the reference behaviour, ``n == 0`` still yields ``[0, 1]``.
    Values must fit a signed 32-bit integer; larger ones raise ``OverflowError``.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 1:
        return [0]
    sequence = [0, 1]
    a, b = 0, 1
    while len(sequence) < n:
        a, b = b, a + b
        if b > _I32_MAX:
            raise OverflowError(f"Fibonacci value {b} does not fit in 32 bits")
        sequence.append(b)
    return sequence


def largest(values: Iterable[int]) -> int | None:
    """Return the largest value, or ``None`` when there are none."""
    return max(values, default=None)


def is_prime_brute_force(n: int) -> bool:
    """Decide primality by trial division with odd divisors."""
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    limit = isqrt(n) + 1
    return all(n % i for i in range(3, limit + 1, 2))


def mod_exp(base: int, exp: int, modulo: int) -> int:
    """Compute ``base ** exp % modulo`` by square-and-multiply."""
    result = 1
    base %= modulo
    while exp > 0:
        if exp % 2 == 1:
            result = result * base % modulo
        base = base * base % modulo
        exp //= 2
    return result


def miller_rabin(n: int, bases: Iterable[int]) -> bool:
    """Run the Miller-Rabin test on ``n`` with the given witness bases."""
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False

    d = n - 1
    r = 0
    while d % 2 == 0:
        d //= 2
        r += 1

    for a in bases:
        if a >= n - 1:
            continue
        x = mod_exp(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(r - 1):
            x = mod_exp(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def is_prime_probabilistic(n: int) -> bool:
    """Decide primality with Miller-Rabin over the first nine prime bases."""
    return miller_rabin(n, DEFAULT_BASES)


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same backwards, ignoring non-alphanumerics and ASCII case."""
    cleaned = [c.lower() if c.isascii() else c for c in text if c.isalnum()]
    return cleaned == cleaned[::-1]


def filter_primes(numbers: Iterable[int]) -> list[int]:
    """Keep only the prime numbers, in their original order."""
    return [n for n in numbers if is_prime_brute_force(n)]


def _describe_largest(values: Sequence[int]) -> str:
    value = largest(values)
    return "O array está vazio" if value is None else f"O maior valor é {value}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print a demonstration of every utility."""
    parser = argparse.ArgumentParser(description="Demonstrate the basic utilities.")
    parser.parse_args(argv)

    celsius = 52.0
    print(f"{celsius:g}°C são {celsius_to_fahrenheit(celsius):g}°F")

    print(fibonacci(20))

    print(_describe_largest([3, 7, -2, 10, 5]))

    n = 32416190071
    print(f"Força bruta: {n} é primo? {is_prime_brute_force(n)}")
    print(f"Probabilístico: {n} é primo? {is_prime_probabilistic(n)}")

    for example in ("Ame a ema", "Roma me tem amor", "Rust não é palíndromo"):
        print(f"'{example}' é palíndromo? {is_palindrome(example)}")

    print(f"Números primos: {filter_primes([2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 13, 15, 17])}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())