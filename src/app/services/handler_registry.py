"""Registro de handlers de comandos e componentes.

Três escopos:
- global: nome do comando
- guild: ID remoto do comando (lembrando a guild de origem)
- component: custom_id (componentes e modais)

Escrita copy-on-write: writers serializam no lock e publicam um novo
mapeamento imutável; leituras pegam o snapshot atual sem lock. Chamadas
remotas acontecem fora do lock.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from app.domain import ManipulationScope

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain import ApplicationCommand
    from app.protocols.discord_rest import DiscordRestProtocol
    from app.protocols.interaction_handler import InteractionHandlerProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GuildCommandEntry:
    """Handler de um comando registrado numa guild."""

    guild_id: str
    handler: InteractionHandlerProtocol


class HandlerRegistry:
    """Tabela de despacho de interações.

    Args:
        application_id: ID da aplicação (rotas remotas de comandos)
        rest: Cliente REST, exigido apenas pelos escopos DISCORD e ALL
    """

    def __init__(
        self,
        application_id: str = "",
        rest: DiscordRestProtocol | None = None,
    ) -> None:
        self._application_id = application_id
        self._rest = rest
        self._lock = threading.Lock()
        self._global: Mapping[str, InteractionHandlerProtocol] = MappingProxyType({})
        self._guild: Mapping[str, GuildCommandEntry] = MappingProxyType({})
        self._components: Mapping[str, InteractionHandlerProtocol] = MappingProxyType({})

    # ──────────────────────────────────────────────────────────────────────
    # Escrita local
    # ──────────────────────────────────────────────────────────────────────

    def register_global(self, name: str, handler: InteractionHandlerProtocol) -> None:
        """Registra handler de comando global (última escrita vence)."""
        with self._lock:
            self._global = _with(self._global, name, handler)
        logger.debug("handler_registered", extra={"scope": "global", "key": name})

    def deregister_global(self, name: str) -> None:
        with self._lock:
            self._global = _without(self._global, name)

    def register_component(self, custom_id: str, handler: InteractionHandlerProtocol) -> None:
        """Registra handler de componente ou modal pelo custom_id."""
        with self._lock:
            self._components = _with(self._components, custom_id, handler)
        logger.debug("handler_registered", extra={"scope": "component", "key": custom_id})

    def deregister_component(self, custom_id: str) -> None:
        with self._lock:
            self._components = _without(self._components, custom_id)

    # ──────────────────────────────────────────────────────────────────────
    # Comandos de guild
    # ──────────────────────────────────────────────────────────────────────

    async def register_guild(
        self,
        guild_id: str,
        command: ApplicationCommand,
        handler: InteractionHandlerProtocol,
        scope: ManipulationScope = ManipulationScope.ALL,
    ) -> ApplicationCommand:
        """Registra comando de guild no escopo pedido.

        - LOCAL: insere sob `command.id` (obrigatório)
        - DISCORD: só registra na API; mapa local intocado
        - ALL: registra na API e, em caso de sucesso, insere sob o ID remoto

        Returns:
            Comando efetivo (o devolvido pelo Discord nos escopos remotos).

        Raises:
            ValueError: LOCAL sem `command.id`, ou escopo remoto sem cliente REST.
            RemoteApiError: Falha na API (mapa local não é alterado).
        """
        if scope == ManipulationScope.LOCAL:
            if not command.id:
                raise ValueError("LOCAL guild registration requires command.id")
            self._put_guild(command.id, guild_id, handler)
            return command

        rest = self._require_rest()
        registered = await rest.register_guild_command(self._application_id, guild_id, command)
        logger.info(
            "guild_command_registered",
            extra={"guild_id": guild_id, "command_id": registered.id, "scope": scope.value},
        )
        if scope == ManipulationScope.ALL and registered.id:
            self._put_guild(registered.id, guild_id, handler)
        return registered

    async def deregister_guild(
        self,
        guild_id: str,
        command_id: str,
        scope: ManipulationScope = ManipulationScope.ALL,
    ) -> None:
        """Remove comando de guild no escopo pedido.

        Raises:
            RemoteApiError: Falha na API (mapa local não é alterado).
        """
        if scope != ManipulationScope.LOCAL:
            rest = self._require_rest()
            await rest.delete_guild_command(self._application_id, guild_id, command_id)
            logger.info(
                "guild_command_deleted",
                extra={"guild_id": guild_id, "command_id": command_id, "scope": scope.value},
            )
            if scope == ManipulationScope.DISCORD:
                return

        with self._lock:
            self._guild = _without(self._guild, command_id)

    def _put_guild(self, command_id: str, guild_id: str, handler: InteractionHandlerProtocol) -> None:
        with self._lock:
            self._guild = _with(self._guild, command_id, GuildCommandEntry(guild_id, handler))

    def _require_rest(self) -> DiscordRestProtocol:
        if self._rest is None:
            raise ValueError("remote command scopes require a Discord REST client")
        return self._rest

    # ──────────────────────────────────────────────────────────────────────
    # Leitura (sem lock)
    # ──────────────────────────────────────────────────────────────────────

    def lookup_command(
        self,
        guild_id: str | None,
        command_id: str | None,
        name: str | None,
    ) -> InteractionHandlerProtocol | None:
        """Busca guild (por ID remoto) antes de global (por nome)."""
        if command_id:
            entry = self._guild.get(command_id)
            if entry is not None and (guild_id is None or entry.guild_id == guild_id):
                return entry.handler
        if name:
            return self._global.get(name)
        return None

    def lookup_component(self, custom_id: str | None) -> InteractionHandlerProtocol | None:
        if not custom_id:
            return None
        return self._components.get(custom_id)

    def counts(self) -> dict[str, int]:
        """Quantidade de handlers por escopo (usado pelo readiness)."""
        return {
            "global": len(self._global),
            "guild": len(self._guild),
            "component": len(self._components),
        }


def _with(current: Mapping[str, object], key: str, value: object) -> Mapping:
    updated = dict(current)
    updated[key] = value
    return MappingProxyType(updated)


def _without(current: Mapping[str, object], key: str) -> Mapping:
    if key not in current:
        return current
    updated = dict(current)
    del updated[key]
    return MappingProxyType(updated)
