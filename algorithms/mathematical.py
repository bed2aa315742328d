"""
mathematical.py — Number-Theory Tracers
========================================
Five classic routines, each instrumented to emit a trace:

  • Euclidean GCD            – one step per division
  • Sieve of Eratosthenes    – found-prime / marked-multiples step pairs
  • Fast exponentiation      – read bit → multiply/skip → square
  • Fibonacci (iterative)    – one step per new term
  • Prime factorisation      – one step per extracted factor

Every tracer returns [] for inputs outside its domain instead of raising.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from algorithms.step import Step, TraceBuilder


# ---------------------------------------------------------------------------
# Step records
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class GCDStep(Step):
    kind = "gcd"

    a:           int           = 0
    b:           int           = 0
    operation:   str           = ""
    remainder:   Optional[int] = None
    is_complete: bool          = False
    result:      Optional[int] = None


@dataclass(frozen=True)
class SieveStep(Step):
    kind = "sieve"

    n:              int              = 0
    primes:         List[int]        = field(default_factory=list)
    current_number: Optional[int]    = None
    sieve:          List[bool]       = field(default_factory=list)
    marked_numbers: List[int]        = field(default_factory=list)


@dataclass(frozen=True)
class FastExpStep(Step):
    kind = "fast_exp"

    base:          int           = 0
    exponent:      int           = 0
    current_power: int           = 0
    result:        int           = 1
    binary_rep:    str           = ""
    current_bit:   Optional[int] = None


@dataclass(frozen=True)
class FibonacciStep(Step):
    kind = "fibonacci"

    n:             int           = 0
    sequence:      List[int]     = field(default_factory=list)
    current_index: int           = 0
    formula:       Optional[str] = None


@dataclass(frozen=True)
class PrimeFactorStep(Step):
    kind = "prime_factor"

    n:              int           = 0
    original_n:     int           = 0
    factors:        List[int]     = field(default_factory=list)
    current_factor: Optional[int] = None
    is_complete:    bool          = False


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
GCD_PSEUDOCODE: List[str] = [
    "def GCD(a, b):",
    "    while b != 0:",
    "        a, b ← b, a mod b",
    "    return a",
]

SIEVE_PSEUDOCODE: List[str] = [
    "def Sieve(n):",
    "    is_prime ← [True] * (n + 1); is_prime[0..1] ← False",
    "    for i in 2 … √n:",
    "        if is_prime[i]:",
    "            for j in i², i²+i, … n: is_prime[j] ← False",
    "    return [i for i if is_prime[i]]",
]

FAST_EXP_PSEUDOCODE: List[str] = [
    "def Power(base, exp):",
    "    result ← 1; power ← base",
    "    for bit in bits(exp) from right to left:",
    "        if bit == 1: result ← result × power",
    "        power ← power × power",
    "    return result",
]

FIBONACCI_PSEUDOCODE: List[str] = [
    "def Fib(n):",
    "    seq ← [0, 1]",
    "    for i in 2 … n: seq.append(seq[i-1] + seq[i-2])",
    "    return seq[n]",
]

PRIME_FACTOR_PSEUDOCODE: List[str] = [
    "def Factor(n):",
    "    while n mod 2 == 0: emit 2; n ← n / 2",
    "    for i in 3, 5, 7, … while i² ≤ n:",
    "        while n mod i == 0: emit i; n ← n / i",
    "    if n > 1: emit n",
]


# ---------------------------------------------------------------------------
# Euclidean GCD
# ---------------------------------------------------------------------------
def gcd_steps(a: int, b: int) -> List[GCDStep]:
    if a <= 0 or b <= 0:
        return []

    trace = TraceBuilder()
    x, y = max(a, b), min(a, b)

    trace.add(GCDStep(
        a=x, b=y, operation="start",
        explanation=(
            f"Finding GCD of {a} and {b}. Starting with larger number {x} "
            f"and smaller number {y}"
        ),
    ))

    while y != 0:
        quotient, remainder = divmod(x, y)
        trace.add(GCDStep(
            a=x, b=y, remainder=remainder,
            operation=f"{x} = {y} × {quotient} + {remainder}",
            explanation=f"Divide {x} by {y}: quotient = {quotient}, remainder = {remainder}",
        ))
        x, y = y, remainder
        if y != 0:
            trace.add(GCDStep(
                a=x, b=y, operation="continue",
                explanation=f"Continue with a = {x} and b = {y}",
            ))

    trace.add(GCDStep(
        a=x, b=0, operation="complete", is_complete=True, result=x,
        explanation=f"GCD found! The remainder is 0, so GCD({a}, {b}) = {x}",
    ))
    return trace.build()


# ---------------------------------------------------------------------------
# Sieve of Eratosthenes
# ---------------------------------------------------------------------------
def sieve_steps(n: int) -> List[SieveStep]:
    if n < 2:
        return []

    trace  = TraceBuilder()
    sieve  = [True] * (n + 1)
    sieve[0] = sieve[1] = False
    primes: List[int] = []

    trace.add(SieveStep(
        n=n, sieve=list(sieve),
        explanation=f"Initialize array for numbers 0 to {n}. Mark 0 and 1 as not prime.",
    ))

    i = 2
    while i * i <= n:
        if sieve[i]:
            trace.add(SieveStep(
                n=n, primes=list(primes), current_number=i, sieve=list(sieve),
                explanation=f"{i} is prime. Mark all multiples of {i} as composite.",
            ))
            marked = []
            for j in range(i * i, n + 1, i):
                if sieve[j]:
                    sieve[j] = False
                    marked.append(j)
            if marked:
                trace.add(SieveStep(
                    n=n, primes=list(primes), current_number=i, sieve=list(sieve),
                    marked_numbers=marked,
                    explanation=(
                        f"Marked multiples of {i}: {', '.join(map(str, marked))} as composite."
                    ),
                ))
            primes.append(i)
        i += 1

    # everything still standing above √n is prime
    primes.extend(k for k in range(i, n + 1) if sieve[k])

    trace.add(SieveStep(
        n=n, primes=list(primes), sieve=list(sieve),
        explanation=(
            f"Complete! Found {len(primes)} prime numbers: {', '.join(map(str, primes))}"
        ),
    ))
    return trace.build()


# ---------------------------------------------------------------------------
# Fast (binary) exponentiation
# ---------------------------------------------------------------------------
def fast_exp_steps(base: int, exponent: int) -> List[FastExpStep]:
    if exponent < 0:
        return []

    trace      = TraceBuilder()
    binary_rep = format(exponent, "b")
    result     = 1
    power      = base
    last       = len(binary_rep) - 1

    def snap(bit: Optional[int], explanation: str) -> FastExpStep:
        return FastExpStep(
            base=base, exponent=exponent, current_power=power, result=result,
            binary_rep=binary_rep, current_bit=bit, explanation=explanation,
        )

    trace.add(snap(None, (
        f"Calculate {base}^{exponent}. Binary representation of {exponent} is "
        f"{binary_rep}. Start with result = 1, power = {base}"
    )))

    # bit 0 is the rightmost character of binary_rep
    for bit_pos in range(len(binary_rep)):
        bit = binary_rep[last - bit_pos]
        trace.add(snap(bit_pos, f"Reading bit {bit_pos}: {bit} (from right to left)"))

        if bit == "1":
            result *= power
            trace.add(snap(bit_pos, f"Bit is 1: multiply result by current power. result = {result}"))
        else:
            trace.add(snap(bit_pos, "Bit is 0: skip multiplication"))

        if bit_pos < last:
            power *= power
            trace.add(snap(bit_pos, f"Square the current power for next bit: power = {power}"))

    trace.add(snap(None, f"Complete! {base}^{exponent} = {result}"))
    return trace.build()


# ---------------------------------------------------------------------------
# Fibonacci sequence
# ---------------------------------------------------------------------------
def fibonacci_steps(n: int) -> List[FibonacciStep]:
    if n < 0:
        return []

    trace = TraceBuilder()
    if n == 0:
        trace.add(FibonacciStep(n=0, sequence=[0], current_index=0, explanation="F(0) = 0"))
        return trace.build()

    sequence = [0, 1]
    trace.add(FibonacciStep(n=n, sequence=[0], current_index=0, explanation="Initialize: F(0) = 0"))
    trace.add(FibonacciStep(n=n, sequence=[0, 1], current_index=1, explanation="F(1) = 1"))

    for i in range(2, n + 1):
        prev1, prev2 = sequence[i - 1], sequence[i - 2]
        sequence.append(prev1 + prev2)
        trace.add(FibonacciStep(
            n=n, sequence=list(sequence), current_index=i,
            formula=f"F({i}) = {prev1} + {prev2}",
            explanation=f"F({i}) = F({i - 1}) + F({i - 2}) = {prev1} + {prev2} = {sequence[i]}",
        ))

    trace.add(FibonacciStep(
        n=n, sequence=list(sequence), current_index=n,
        explanation=f"Complete! The {n}th Fibonacci number is {sequence[n]}",
    ))
    return trace.build()


# ---------------------------------------------------------------------------
# Prime factorisation
# ---------------------------------------------------------------------------
def prime_factor_steps(n: int) -> List[PrimeFactorStep]:
    if n < 2:
        return []

    trace   = TraceBuilder()
    factors: List[int] = []
    num     = n

    trace.add(PrimeFactorStep(n=num, original_n=n, explanation=f"Finding prime factors of {n}"))

    def extract(divisor: int) -> None:
        nonlocal num
        while num % divisor == 0:
            factors.append(divisor)
            num //= divisor
            trace.add(PrimeFactorStep(
                n=num, original_n=n, factors=list(factors), current_factor=divisor,
                explanation=(
                    f"{num * divisor} is divisible by {divisor}. Add {divisor} to factors. "
                    f"Continue with {num}"
                ),
            ))

    extract(2)
    divisor = 3
    while divisor * divisor <= num:
        extract(divisor)
        divisor += 2

    if num > 1:
        factors.append(num)
        trace.add(PrimeFactorStep(
            n=1, original_n=n, factors=list(factors), current_factor=num,
            explanation=f"{num} is prime. Add {num} to factors.",
        ))

    trace.add(PrimeFactorStep(
        n=1, original_n=n, factors=list(factors), is_complete=True,
        explanation=(
            f"Complete! Prime factors of {n}: {' × '.join(map(str, factors))} = {n}"
        ),
    ))
    return trace.build()
