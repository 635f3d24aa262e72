from .errors import NoModularInverseError


def mod(n: int, m: int) -> int:
    """
    Returns n modulo m in the range [0, m), also for negative n.
    Python's % already floors, so (-3) % 26 == 23.
    """
    return n % m


def gcd(a: int, b: int) -> int:
    """
    Euclidean algorithm. gcd(a, 0) == a.
    """
    while b != 0:
        a, b = b, a % b
    return a


def is_coprime(a: int, m: int) -> bool:
    return gcd(a, m) == 1


def mod_inverse(a: int, m: int) -> int:
    """
    Returns the smallest x in [1, m) with (a * x) mod m == 1.
    Simple linear search; m is 26 (or 256) in this toolkit.
    Raises NoModularInverseError when gcd(a, m) != 1.
    """
    a = mod(a, m)
    for x in range(1, m):
        if (a * x) % m == 1:
            return x
    raise NoModularInverseError(a, m)
