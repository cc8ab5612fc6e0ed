"""Stores — implementações concretas do PersistenceGateway.

Módulos disponíveis:
    - memory_gateway: Gateway em memória para desenvolvimento/testes
    - redis_gateway: Gateway durável em Redis (tokens cifrados com Fernet)
"""

from __future__ import annotations

from app.infra.stores.memory_gateway import MemoryPersistenceGateway
from app.infra.stores.redis_gateway import RedisPersistenceGateway

__all__ = [
    "MemoryPersistenceGateway",
    "RedisPersistenceGateway",
]
