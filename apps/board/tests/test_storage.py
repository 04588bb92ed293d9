# apps/board/tests/test_storage.py

from django.test import TestCase

from apps.board.storage import board_storage
from apps.core.models import Content
from apps.core.tests.fabricas import criar_usuario, criar_projeto


class OrdemCartoesTest(TestCase):
    """A ordem dos cartões de cada coluna é sempre 0..n-1"""

    def setUp(self):
        self.usuario = criar_usuario('jane', role='producer')
        self.projeto = criar_projeto(self.usuario)
        self.origem, self.destino = list(self.projeto.columns.order_by('order'))[:2]

    def criar(self, titulo, coluna):
        return board_storage.create_content({
            'title': titulo,
            'type': 'task',
            'column_id': coluna.id,
            'project_id': self.projeto.id,
            'created_by_id': self.usuario.id,
        })

    def titulos(self, coluna):
        return [c.title for c in board_storage.get_content_by_column(coluna.id)]

    def ordens(self, coluna):
        return [c.order for c in board_storage.get_content_by_column(coluna.id)]

    def test_criacao_vai_para_o_fim(self):
        for titulo in ['a', 'b', 'c']:
            self.criar(titulo, self.origem)

        self.assertEqual(self.titulos(self.origem), ['a', 'b', 'c'])
        self.assertEqual(self.ordens(self.origem), [0, 1, 2])

    def test_mover_entre_colunas(self):
        a = self.criar('a', self.origem)
        self.criar('b', self.origem)
        self.criar('c', self.origem)
        self.criar('x', self.destino)
        self.criar('y', self.destino)

        board_storage.move_content(a.id, self.destino.id, 1)

        self.assertEqual(self.titulos(self.origem), ['b', 'c'])
        self.assertEqual(self.ordens(self.origem), [0, 1])
        self.assertEqual(self.titulos(self.destino), ['x', 'a', 'y'])
        self.assertEqual(self.ordens(self.destino), [0, 1, 2])

    def test_mover_na_mesma_coluna(self):
        a = self.criar('a', self.origem)
        self.criar('b', self.origem)
        c = self.criar('c', self.origem)

        board_storage.move_content(a.id, self.origem.id, 2)
        self.assertEqual(self.titulos(self.origem), ['b', 'c', 'a'])
        self.assertEqual(self.ordens(self.origem), [0, 1, 2])

        board_storage.move_content(c.id, self.origem.id, 0)
        self.assertEqual(self.titulos(self.origem), ['c', 'b', 'a'])
        self.assertEqual(self.ordens(self.origem), [0, 1, 2])

    def test_posicao_fora_do_intervalo_e_limitada(self):
        a = self.criar('a', self.origem)
        b = self.criar('b', self.origem)
        self.criar('x', self.destino)

        board_storage.move_content(a.id, self.destino.id, 99)
        self.assertEqual(self.titulos(self.destino), ['x', 'a'])

        board_storage.move_content(b.id, self.destino.id, -5)
        self.assertEqual(self.titulos(self.destino), ['b', 'x', 'a'])
        self.assertEqual(self.ordens(self.destino), [0, 1, 2])
        self.assertEqual(self.titulos(self.origem), [])

    def test_exclusao_compacta_a_coluna(self):
        self.criar('a', self.origem)
        b = self.criar('b', self.origem)
        self.criar('c', self.origem)

        board_storage.delete_content(b.id)

        self.assertEqual(self.titulos(self.origem), ['a', 'c'])
        self.assertEqual(self.ordens(self.origem), [0, 1])

    def test_coluna_com_cartoes_traz_responsavel_e_anexos(self):
        a = self.criar('a', self.origem)
        Content.objects.filter(id=a.id).update(assigned_to=self.usuario)
        board_storage.create_attachment({
            'content_id': a.id, 'name': 'ref.pdf', 'url': 'https://cdn/ref.pdf',
            'created_by_id': self.usuario.id,
        })

        coluna = board_storage.get_column_with_contents(self.origem.id)

        self.assertEqual(len(coluna.cards), 1)
        self.assertEqual(coluna.cards[0].assigned_to, self.usuario)
        self.assertEqual(coluna.cards[0].attachment_count, 1)

    def test_excluir_coluna_leva_cartoes(self):
        self.criar('a', self.origem)

        contagens = board_storage.delete_column(self.origem.id)

        self.assertEqual(contagens['core.Content'], 1)
        self.assertFalse(Content.objects.filter(column_id=self.origem.id).exists())
