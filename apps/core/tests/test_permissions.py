# apps/core/tests/test_permissions.py

from django.test import TestCase

from apps.core.permissions import ClaquetePermissions
from apps.core.principal import Principal
from .fabricas import criar_usuario, criar_projeto


class PermissoesPorPapelTest(TestCase):

    def setUp(self):
        self.admin = Principal.from_user(criar_usuario('chefe', role='admin'))
        self.produtor_user = criar_usuario('prod', role='producer')
        self.produtor = Principal.from_user(self.produtor_user)
        self.ator_user = criar_usuario('ator', role='actor')
        self.ator = Principal.from_user(self.ator_user)
        self.colaborador_user = criar_usuario('colab', role='employed')
        self.colaborador = Principal.from_user(self.colaborador_user)

        self.projeto = criar_projeto(
            self.produtor_user, membros=(self.ator_user, self.colaborador_user)
        )

    def test_papeis_do_principal(self):
        self.assertTrue(self.admin.is_admin)
        self.assertTrue(self.produtor.is_producer)
        self.assertTrue(self.colaborador.is_read_only)
        self.assertFalse(self.ator.is_admin or self.ator.is_producer or self.ator.is_read_only)

    def test_criacao_de_projeto(self):
        self.assertTrue(ClaquetePermissions.pode_criar_projeto(self.admin))
        self.assertTrue(ClaquetePermissions.pode_criar_projeto(self.produtor))
        self.assertFalse(ClaquetePermissions.pode_criar_projeto(self.ator))
        self.assertFalse(ClaquetePermissions.pode_criar_projeto(None))

    def test_edicao_de_conteudo(self):
        self.assertTrue(ClaquetePermissions.pode_editar_conteudo(self.admin, self.projeto))
        self.assertTrue(ClaquetePermissions.pode_editar_conteudo(self.ator, self.projeto))
        self.assertFalse(ClaquetePermissions.pode_editar_conteudo(self.colaborador, self.projeto))

    def test_admin_acessa_projeto_sem_ser_membro(self):
        self.assertTrue(ClaquetePermissions.tem_acesso_projeto(self.admin, self.projeto))
        self.assertTrue(ClaquetePermissions.pode_gerenciar_projeto(self.admin, self.projeto))
        self.assertFalse(ClaquetePermissions.pode_gerenciar_projeto(self.ator, self.projeto))
