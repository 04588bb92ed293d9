# apps/core/principal.py

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Principal:
    """
    Identidade autenticada de um request

    Handlers e checagens de permissão recebem o principal, nunca o
    objeto de sessão. ``None`` representa um request anônimo.
    """

    id: int
    username: str
    display_name: str
    role: str

    @classmethod
    def from_user(cls, user) -> Optional['Principal']:
        if user is None or not user.is_authenticated:
            return None
        return cls(
            id=user.id,
            username=user.username,
            display_name=user.display_name,
            role=user.role,
        )

    @property
    def is_admin(self) -> bool:
        return self.role == 'admin'

    @property
    def is_producer(self) -> bool:
        return self.role == 'producer'

    @property
    def is_read_only(self) -> bool:
        return self.role == 'employed'
