"""Cifra simétrica (Fernet) de tokens OAuth em repouso.

Sem chave configurada o cipher é transparente (apenas desenvolvimento).
"""

from __future__ import annotations

import logging

from cryptography.fernet import Fernet, InvalidToken

from app.infra.crypto.errors import TokenCipherError

logger = logging.getLogger(__name__)


class TokenCipher:
    """Cifra/decifra strings com Fernet (AES-128-CBC + HMAC-SHA256)."""

    __slots__ = ("_fernet",)

    def __init__(self, key: str | bytes | None = None) -> None:
        if not key:
            self._fernet: Fernet | None = None
            return
        try:
            self._fernet = Fernet(key)
        except (ValueError, TypeError) as exc:
            raise TokenCipherError("TOKEN_ENCRYPTION_KEY inválida") from exc

    @property
    def enabled(self) -> bool:
        return self._fernet is not None

    def encrypt(self, value: str) -> str:
        if self._fernet is None or not value:
            return value
        return self._fernet.encrypt(value.encode()).decode()

    def decrypt(self, value: str) -> str:
        if self._fernet is None or not value:
            return value
        try:
            return self._fernet.decrypt(value.encode()).decode()
        except InvalidToken as exc:
            logger.error("token_decrypt_failed")
            raise TokenCipherError("falha ao decifrar token armazenado") from exc

    @staticmethod
    def generate_key() -> str:
        return Fernet.generate_key().decode()
