# apps/core/tests/fabricas.py

"""Helpers de criação de dados para os testes"""

from apps.core.storage import storage

SENHA_PADRAO = 'claquete123'


def criar_usuario(username, role='actor', **extra):
    dados = {
        'username': username,
        'password': SENHA_PADRAO,
        'email': f"{username}@claquete.test",
        'display_name': extra.pop('display_name', username.title()),
        'role': role,
    }
    dados.update(extra)
    return storage.create_user(dados)


def criar_projeto(criador, membros=(), nome='Curta', tipo='short_film'):
    return storage.create_project(
        {'name': nome, 'type': tipo, 'description': None},
        created_by=criador,
        member_ids=[m.id for m in membros],
    )
