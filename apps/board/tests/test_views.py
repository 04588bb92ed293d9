# apps/board/tests/test_views.py

from django.test import TestCase

from apps.board.storage import board_storage
from apps.core.tests.fabricas import criar_usuario, criar_projeto


class QuadroApiTest(TestCase):

    def setUp(self):
        self.produtora = criar_usuario('jane', role='producer')
        self.ator = criar_usuario('bob', role='actor')
        self.colaborador = criar_usuario('carl', role='employed')
        self.projeto = criar_projeto(self.produtora, membros=[self.ator, self.colaborador])
        self.colunas = list(self.projeto.columns.order_by('order'))
        self.client.force_login(self.ator)

    def criar_cartao(self, titulo, coluna=None):
        return self.client.post('/api/contents', {
            'title': titulo,
            'type': 'script',
            'columnId': (coluna or self.colunas[0]).id,
            'projectId': self.projeto.id,
            'priority': 'high',
        }, content_type='application/json')

    def test_quadro_do_projeto(self):
        self.criar_cartao('Roteiro')

        resposta = self.client.get(f'/api/projects/{self.projeto.id}/columns')

        self.assertEqual(resposta.status_code, 200)
        colunas = resposta.json()
        self.assertEqual([c['name'] for c in colunas][0], 'Ideation')
        cartao = colunas[0]['contents'][0]
        self.assertEqual(cartao['title'], 'Roteiro')
        self.assertEqual(cartao['attachmentCount'], 0)
        self.assertIsNone(cartao['assignee'])

    def test_criacao_ignora_order_do_cliente(self):
        self.criar_cartao('a')
        resposta = self.client.post('/api/contents', {
            'title': 'b', 'type': 'task', 'order': 0,
            'columnId': self.colunas[0].id, 'projectId': self.projeto.id,
        }, content_type='application/json')

        self.assertEqual(resposta.status_code, 201)
        self.assertEqual(resposta.json()['order'], 1)
        self.assertEqual(resposta.json()['progress'], 0)

    def test_coluna_de_outro_projeto(self):
        outro = criar_projeto(self.produtora, nome='Outro')

        resposta = self.criar_cartao('a', coluna=outro.columns.first())
        self.assertEqual(resposta.status_code, 404)

    def test_colaborador_so_le(self):
        self.client.force_login(self.colaborador)

        self.assertEqual(self.criar_cartao('a').status_code, 403)
        self.assertEqual(self.client.get(f'/api/projects/{self.projeto.id}/columns').status_code, 200)

    def test_mover_cartao(self):
        a = self.criar_cartao('a').json()
        self.criar_cartao('b')

        resposta = self.client.post(f"/api/contents/{a['id']}/move", {
            'columnId': self.colunas[1].id, 'order': 0,
        }, content_type='application/json')

        self.assertEqual(resposta.status_code, 200)
        self.assertEqual(resposta.json()['columnId'], self.colunas[1].id)
        restantes = board_storage.get_content_by_column(self.colunas[0].id)
        self.assertEqual([(c.title, c.order) for c in restantes], [('b', 0)])

    def test_mover_para_outro_projeto(self):
        a = self.criar_cartao('a').json()
        outro = criar_projeto(self.produtora, nome='Outro')

        resposta = self.client.post(f"/api/contents/{a['id']}/move", {
            'columnId': outro.columns.first().id, 'order': 0,
        }, content_type='application/json')
        self.assertEqual(resposta.status_code, 400)

    def test_atualizar_e_excluir_cartao(self):
        a = self.criar_cartao('a').json()

        resposta = self.client.put(f"/api/contents/{a['id']}", {
            'progress': 50, 'assignedTo': self.ator.id,
        }, content_type='application/json')
        self.assertEqual(resposta.json()['progress'], 50)
        self.assertEqual(resposta.json()['assignedTo'], self.ator.id)

        detalhe = self.client.get(f"/api/contents/{a['id']}").json()
        self.assertEqual(detalhe['assignee']['username'], 'bob')

        resposta = self.client.delete(f"/api/contents/{a['id']}")
        self.assertEqual(resposta.status_code, 200)
        self.assertEqual(self.client.get(f"/api/contents/{a['id']}").status_code, 404)

    def test_progresso_invalido(self):
        a = self.criar_cartao('a').json()

        resposta = self.client.put(f"/api/contents/{a['id']}", {'progress': 150}, content_type='application/json')
        self.assertEqual(resposta.status_code, 400)
        self.assertTrue(resposta.json()['message'].startswith('progress:'))

    def test_anexos(self):
        a = self.criar_cartao('a').json()

        resposta = self.client.post('/api/attachments', {
            'contentId': a['id'], 'name': 'storyboard.png', 'url': 'https://cdn/sb.png',
        }, content_type='application/json')
        self.assertEqual(resposta.status_code, 201)

        anexos = self.client.get(f"/api/contents/{a['id']}/attachments").json()
        self.assertEqual([x['name'] for x in anexos], ['storyboard.png'])

        resposta = self.client.delete(f"/api/attachments/{anexos[0]['id']}")
        self.assertEqual(resposta.status_code, 200)

    def test_colunas_crud(self):
        resposta = self.client.post('/api/columns', {
            'projectId': self.projeto.id, 'name': 'Delivery', 'color': '#111111',
        }, content_type='application/json')
        self.assertEqual(resposta.status_code, 201)
        self.assertEqual(resposta.json()['order'], 4)

        coluna_id = resposta.json()['id']
        resposta = self.client.put(f'/api/columns/{coluna_id}', {'name': 'Entrega'}, content_type='application/json')
        self.assertEqual(resposta.json()['name'], 'Entrega')

        resposta = self.client.delete(f'/api/columns/{coluna_id}')
        self.assertEqual(resposta.status_code, 200)
