"""Protocolo de persistência consumido pelo core.

Cada escrita de entidade é atômica isoladamente; não há transações entre
entidades. Implementações: MemoryPersistenceGateway (dev/test) e
RedisPersistenceGateway (staging/production).

Falhas do storage devem ser levantadas como InternalPersistenceError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.account import Account
    from app.domain.ai_model import AIModelConfig
    from app.domain.comment import RemoteComment
    from app.domain.credential import Credential
    from app.domain.interaction import InteractionRecord
    from app.sessions.models import Session


class PersistenceGatewayProtocol(ABC):
    """Contrato assíncrono de storage por entidade."""

    # Comentários

    @abstractmethod
    async def get_comments(self, video_id: str) -> list[RemoteComment]:
        """Comentários salvos do vídeo (lista vazia se nenhum)."""

    @abstractmethod
    async def save_comments(self, video_id: str, comments: list[RemoteComment]) -> None:
        """Upsert por comment_id; nunca duplica."""

    @abstractmethod
    async def get_comment(self, comment_id: str) -> RemoteComment | None: ...

    @abstractmethod
    async def mark_comment_replied(self, comment_id: str) -> bool:
        """Define replied_to=True. Retorna False se o comentário não existe."""

    # Contas

    @abstractmethod
    async def save_account(self, account: Account) -> None: ...

    @abstractmethod
    async def get_account(self, account_id: str) -> Account | None: ...

    # Credenciais

    @abstractmethod
    async def save_credential(self, credential: Credential) -> None:
        """Substitui a credencial corrente da conta."""

    @abstractmethod
    async def get_credential(self, account_id: str) -> Credential | None: ...

    # Sessões

    @abstractmethod
    async def create_session(self, session: Session) -> None: ...

    @abstractmethod
    async def get_session(self, session_id: str) -> Session | None: ...

    @abstractmethod
    async def end_session(self, session_id: str) -> bool:
        """Desativa a sessão. Retorna False se não existe."""

    # Interações

    @abstractmethod
    async def append_interaction(self, record: InteractionRecord) -> None:
        """Append-only; ID repetido é rejeitado com ValidationError."""

    @abstractmethod
    async def query_interactions_by_account(
        self, account_id: str, limit: int
    ) -> list[InteractionRecord]:
        """Mais recentes primeiro, no máximo `limit`."""

    @abstractmethod
    async def query_interactions_by_comment(self, comment_id: str) -> list[InteractionRecord]:
        """Ordem cronológica."""

    # Modelos de IA

    @abstractmethod
    async def save_ai_model(self, config: AIModelConfig) -> None: ...

    @abstractmethod
    async def get_ai_model(self, model_id: str) -> AIModelConfig | None: ...

    @abstractmethod
    async def list_ai_models(self) -> list[AIModelConfig]: ...
