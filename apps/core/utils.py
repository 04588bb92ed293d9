# apps/core/utils.py

import hashlib
import json
from datetime import date, datetime
from typing import Dict, Optional


# Paleta usada pelos avatares do quadro
PALETA_AVATAR = [
    '#3B82F6', '#8B5CF6', '#EC4899', '#EF4444',
    '#F59E0B', '#10B981', '#14B8A6', '#6366F1',
]


def gerar_cor_usuario(username: str) -> str:
    """
    Gera uma cor consistente baseada no username
    Útil para avatares quando não há cor escolhida
    """
    # Gerar hash do username
    hash_obj = hashlib.md5(username.encode())
    indice = int(hash_obj.hexdigest(), 16) % len(PALETA_AVATAR)

    return PALETA_AVATAR[indice]


def gerar_iniciais(nome: str) -> str:
    """
    Iniciais do avatar a partir do nome de exibição
    Ex: "John Doe" -> "JD", "madonna" -> "MA"
    """
    partes = [p for p in (nome or '').split() if p]
    if not partes:
        return '?'
    if len(partes) == 1:
        return partes[0][:2].upper()
    return (partes[0][0] + partes[-1][0]).upper()


def formatar_data(valor) -> Optional[str]:
    """Serializa date/datetime em ISO 8601 (None passa direto)"""
    if valor is None:
        return None
    if isinstance(valor, (datetime, date)):
        return valor.isoformat()
    return str(valor)


def carregar_json(request) -> Dict:
    """
    Lê o corpo JSON do request

    Corpo vazio vira dict vazio; JSON inválido ou que não seja
    objeto gera ValidationFailed (400).
    """
    from .exceptions import ValidationFailed

    if not request.body:
        return {}

    try:
        dados = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ValidationFailed("JSON inválido no corpo da requisição")

    if not isinstance(dados, dict):
        raise ValidationFailed("O corpo da requisição deve ser um objeto JSON")

    return dados
