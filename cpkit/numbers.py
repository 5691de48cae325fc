"""Modular combinatorics and prime sieving."""

from __future__ import annotations

DEFAULT_MODULUS = 1_000_000_007


def modular_inverses(limit: int, modulus: int = DEFAULT_MODULUS) -> list[int]:
    """Inverses of 0..limit modulo a prime; entry 0 is 1 by convention."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    if modulus <= limit:
        raise ValueError("modulus must exceed limit")
    inverses = [1] * (limit + 1)
    for i in range(2, limit + 1):
        inverses[i] = inverses[modulus % i] * (modulus - modulus // i) % modulus
    return inverses


class Combinatorics:
    """Factorials and inverse factorials modulo a prime, for fast binomials."""

    def __init__(self, limit: int, modulus: int = DEFAULT_MODULUS) -> None:
        inverses = modular_inverses(limit, modulus)
        self.limit = limit
        self.modulus = modulus
        self.factorials = [1] * (limit + 1)
        self.inverse_factorials = [1] * (limit + 1)
        for i in range(2, limit + 1):
            self.factorials[i] = self.factorials[i - 1] * i % modulus
            self.inverse_factorials[i] = self.inverse_factorials[i - 1] * inverses[i] % modulus

    def ncr(self, n: int, r: int) -> int:
        """Binomial coefficient C(n, r) modulo the prime; 0 when r is outside 0..n."""
        if r < 0 or r > n:
            return 0
        if n > self.limit:
            raise ValueError(f"n={n} exceeds the precomputed limit {self.limit}")
        return (
            self.factorials[n]
            * self.inverse_factorials[n - r]
            % self.modulus
            * self.inverse_factorials[r]
            % self.modulus
        )


def sieve(n: int) -> list[bool]:
    """Primality flags for 0..n by the sieve of Eratosthenes."""
    if n < 0:
        raise ValueError("n must be non-negative")
    is_prime = [True] * (n + 1)
    is_prime[0] = False
    if n >= 1:
        is_prime[1] = False
    i = 2
    while i * i <= n:
        if is_prime[i]:
            is_prime[i * i :: i] = [False] * len(range(i * i, n + 1, i))
        i += 1
    return is_prime


def primes_up_to(n: int) -> list[int]:
    """All primes not greater than n."""
    return [value for value, prime in enumerate(sieve(n)) if prime]