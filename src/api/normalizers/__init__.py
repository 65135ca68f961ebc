"""Normalizers — conversão de payloads externos para modelos internos.

Estrutura:
- discord/: decoder do envelope de interação
"""

from .discord import decode_interaction

__all__ = ["decode_interaction"]
