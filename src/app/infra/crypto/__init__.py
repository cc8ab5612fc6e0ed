"""Criptografia de tokens em repouso.

Localizado em app/infra: usado apenas pelo gateway de persistência durável.
"""

from .errors import TokenCipherError
from .token_cipher import TokenCipher

__all__ = [
    "TokenCipher",
    "TokenCipherError",
]
