"""
Exceptions raised by the cipher engines.

Every error is a ValueError: they all describe bad input (a blank key, an
empty text, a key that has no inverse mod 26, ...) and the caller recovers
by fixing the input and trying again.
"""


class CipherError(ValueError):
    """Base class for all input-validation failures."""


class EmptyKeyError(CipherError):
    def __init__(self, message="Please enter a key."):
        super().__init__(message)


class EmptyTextError(CipherError):
    def __init__(self, message="Please enter valid text."):
        super().__init__(message)


class NonCoprimeKeyError(CipherError):
    pass


class NonInvertibleMatrixError(CipherError):
    def __init__(self, message="The key matrix is not invertible modulo 26."):
        super().__init__(message)


class LengthMismatchError(CipherError):
    pass


class InvalidMatrixError(CipherError):
    pass


class NoModularInverseError(CipherError):
    def __init__(self, a, m):
        self.a = a
        self.m = m
        super().__init__(f"No modular inverse for {a} modulo {m}.")
