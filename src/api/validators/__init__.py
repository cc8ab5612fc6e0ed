"""Validators — validação de entradas antes de chegar ao core.

Estrutura:
- youtube/: IDs e URLs de vídeo
"""

__all__: list[str] = []
