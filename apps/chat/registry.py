# apps/chat/registry.py

import logging
from typing import Dict, Iterable, Optional

logger = logging.getLogger(__name__)


class ConnectionRegistry:
    """
    Mapa user id -> channel name do socket vivo

    Um socket por usuário: o último ``register`` vence. ``unregister``
    só remove a entrada se ela ainda aponta para o mesmo socket, então
    o close atrasado de uma conexão antiga não derruba a nova.

    Uma instância por processo (criada no routing e injetada no
    consumer); todos os acessos acontecem no event loop do servidor.
    """

    def __init__(self):
        self._conexoes: Dict[int, str] = {}

    def register(self, user_id: int, channel_name: str) -> Optional[str]:
        """Registra o socket e devolve o channel name substituído (se houver)"""
        anterior = self._conexoes.get(user_id)
        self._conexoes[user_id] = channel_name

        if anterior and anterior != channel_name:
            logger.info(f"♻️ Usuário {user_id} reconectou; socket anterior substituído")
        return anterior

    def unregister(self, user_id: int, channel_name: str) -> bool:
        if self._conexoes.get(user_id) != channel_name:
            return False
        del self._conexoes[user_id]
        return True

    def get(self, user_id: int) -> Optional[str]:
        return self._conexoes.get(user_id)

    def live_channels(self, user_ids: Iterable[int]) -> Dict[int, str]:
        """Channel names dos usuários conectados (ignora os offline)"""
        return {
            user_id: self._conexoes[user_id]
            for user_id in user_ids
            if user_id in self._conexoes
        }

    def __contains__(self, user_id):
        return user_id in self._conexoes

    def __len__(self):
        return len(self._conexoes)
