"""Decoder Discord — envelope de interação para modelo de domínio."""

from api.normalizers.discord.decoder import decode_interaction

__all__ = ["decode_interaction"]
