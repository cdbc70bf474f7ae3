"""Pluggable ID checksum gate.

No checksum is published for the national ID format, so verification is
disabled by default. If an issuer confirms an algorithm later it can be
switched on per Rule (``Rule(checksum="luhn")``) or used standalone through
enable_checksum().

The registry maps algorithm names to check functions taking a digit string
and returning whether the checksum holds.
"""

from collections.abc import Callable

ChecksumFn = Callable[[str], bool]


def luhn_check(digits: str) -> bool:
    """Return True if ``digits`` passes the Luhn (mod 10) check.

    Example:
        >>> luhn_check("79927398713")
        True
        >>> luhn_check("79927398710")
        False
    """
    if not digits or not digits.isascii() or not digits.isdigit():
        return False

    total = 0
    double = False
    for char in reversed(digits):
        n = int(char)
        if double:
            n *= 2
            if n > 9:
                n -= 9
        total += n
        double = not double
    return total % 10 == 0


# Registry mapping algorithm names to check functions
CHECKSUM_ALGORITHMS: dict[str, ChecksumFn] = {
    "luhn": luhn_check,
}


def register_checksum(name: str, fn: ChecksumFn) -> None:
    """Register a checksum algorithm under ``name``."""
    CHECKSUM_ALGORITHMS[name] = fn


def get_checksum(name: str) -> ChecksumFn:
    """Get a checksum function by name.

    Raises:
        KeyError: If the algorithm is not registered, with message listing
                 available algorithms
    """
    if name not in CHECKSUM_ALGORITHMS:
        available = ", ".join(sorted(CHECKSUM_ALGORITHMS)) or "none"
        raise KeyError(f"Unknown checksum algorithm '{name}'. Available: {available}")
    return CHECKSUM_ALGORITHMS[name]


def enable_checksum(enabled: bool = False, algorithm: str = "luhn") -> ChecksumFn:
    """Build a checksum gate.

    The returned callable accepts an ID digit string. A disabled gate, or one
    configured with an unregistered algorithm, accepts every ID.

    Example:
        >>> gate = enable_checksum()
        >>> gate("934265782412")
        True
        >>> enable_checksum(enabled=True)("79927398710")
        False
    """

    def gate(id_number: str) -> bool:
        if not enabled:
            return True
        fn = CHECKSUM_ALGORITHMS.get(algorithm)
        if fn is None:
            return True
        return fn(id_number)

    return gate
