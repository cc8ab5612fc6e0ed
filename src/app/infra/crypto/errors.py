"""Erros de criptografia de tokens em repouso."""

from utils.errors import InternalPersistenceError


class TokenCipherError(InternalPersistenceError):
    """Chave inválida ou token cifrado corrompido."""
