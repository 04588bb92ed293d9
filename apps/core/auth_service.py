# apps/core/auth_service.py

"""
Serviço de Autenticação - Encapsula toda lógica de auth do sistema
Registro, login por username ou email, logout e bloqueio por tentativas
"""

import logging
from typing import Dict, Optional, Tuple

from django.contrib.auth import authenticate, login, logout
from django.core.cache import cache

from .models import User
from .storage import storage

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Serviço encapsulado para gerenciar autenticação

    Os métodos públicos devolvem tuplas (sucesso, mensagem, ...);
    quem decide o status HTTP é a view.
    """

    def __init__(self):
        # Atributos privados - encapsulados
        self._max_login_attempts = 5
        self._lockout_duration_minutes = 15

    def registrar_usuario(self, request, dados: Dict) -> Tuple[bool, str, Optional[User]]:
        """
        Cria o usuário e já abre a sessão

        O primeiro usuário do sistema vira admin; os seguintes entram
        como ``employed``.

        Returns:
            Tuple[sucesso, mensagem, usuario_criado]
        """
        if storage.get_user_by_username(dados['username']):
            return False, "Username already exists", None

        if storage.get_user_by_email(dados['email']):
            return False, "Email already exists", None

        dados = dict(dados)
        dados['role'] = self._papel_inicial()

        usuario = storage.create_user(dados)
        login(request, usuario, backend='django.contrib.auth.backends.ModelBackend')

        return True, "Usuário criado com sucesso!", usuario

    def fazer_login(self, request, username: str, password: str) -> Tuple[bool, str, Optional[User]]:
        """
        Realiza login com verificações de segurança encapsuladas

        Args:
            request: Request do Django
            username: Nome de usuário ou email
            password: Senha

        Returns:
            Tuple[sucesso, mensagem, usuario]
        """
        # Verificar se conta está bloqueada
        if self._conta_esta_bloqueada(username):
            return False, "Too many failed attempts, try again later", None

        usuario = self._autenticar_usuario(request, username, password)

        if usuario:
            login(request, usuario)
            self._resetar_tentativas_login(username)
            logger.info(f"🔓 Login: {usuario.username}")
            return True, f"Bem-vindo, {usuario.display_name}!", usuario

        # Login falhou - registrar tentativa
        self._registrar_tentativa_falha(username)
        return False, "Invalid username or password", None

    def fazer_logout(self, request) -> bool:
        """Realiza logout (idempotente)"""
        logout(request)
        return True

    # =================== MÉTODOS PRIVADOS (ENCAPSULADOS) ===================

    def _papel_inicial(self) -> str:
        """Primeiro usuário do sistema é admin"""
        return 'employed' if User.objects.exists() else 'admin'

    def _autenticar_usuario(self, request, username: str, password: str) -> Optional[User]:
        """Autentica usuário (username ou email)"""
        # Tentar por username primeiro
        usuario = authenticate(request, username=username, password=password)

        if not usuario and '@' in username:
            # Tentar por email se username falhar
            user_obj = storage.get_user_by_email(username)
            if user_obj is not None:
                usuario = authenticate(request, username=user_obj.username, password=password)

        return usuario

    def _chave_tentativas(self, username: str) -> str:
        return f"claquete:login-falhas:{username.lower()}"

    def _conta_esta_bloqueada(self, username: str) -> bool:
        """Verifica se conta está bloqueada por tentativas"""
        return cache.get(self._chave_tentativas(username), 0) >= self._max_login_attempts

    def _registrar_tentativa_falha(self, username: str):
        """Registra tentativa de login falhada no cache"""
        chave = self._chave_tentativas(username)
        tentativas = cache.get(chave, 0) + 1
        cache.set(chave, tentativas, self._lockout_duration_minutes * 60)
        logger.warning(f"⚠️ Tentativa de login falhada para: {username} ({tentativas})")

    def _resetar_tentativas_login(self, username: str):
        """Reseta contador de tentativas"""
        cache.delete(self._chave_tentativas(username))


# Instância global do serviço (Singleton pattern)
auth_service = AuthenticationService()
