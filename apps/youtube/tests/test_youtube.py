# apps/youtube/tests/test_youtube.py

from django.test import TestCase

from apps.core.tests.fabricas import criar_usuario, criar_projeto


class YoutubeVideosTest(TestCase):

    def setUp(self):
        self.usuario = criar_usuario('bob', role='actor')
        self.projeto = criar_projeto(criar_usuario('jane', role='producer'), membros=[self.usuario])
        self.client.force_login(self.usuario)

    def test_crud(self):
        resposta = self.client.post(f'/api/projects/{self.projeto.id}/youtube-videos', {
            'title': 'Teaser', 'tags': ['ai', ' science ', ''],
            'scheduledPublishTime': '2025-07-01T15:00:00Z',
        }, content_type='application/json')

        self.assertEqual(resposta.status_code, 201)
        video = resposta.json()
        self.assertEqual(video['tags'], ['ai', 'science'])
        self.assertEqual(video['visibility'], 'private')

        resposta = self.client.put(f"/api/youtube-videos/{video['id']}", {
            'visibility': 'public', 'tags': 'trailer, launch',
        }, content_type='application/json')
        self.assertEqual(resposta.json()['visibility'], 'public')
        self.assertEqual(resposta.json()['tags'], ['trailer', 'launch'])
        self.assertEqual(resposta.json()['title'], 'Teaser')

        lista = self.client.get(f'/api/projects/{self.projeto.id}/youtube-videos').json()
        self.assertEqual([v['id'] for v in lista], [video['id']])

        resposta = self.client.delete(f"/api/youtube-videos/{video['id']}")
        self.assertEqual(resposta.status_code, 200)
        self.assertEqual(self.client.get(f"/api/youtube-videos/{video['id']}").status_code, 404)

    def test_criacao_com_projeto_no_corpo(self):
        resposta = self.client.post('/api/youtube-videos', {
            'projectId': self.projeto.id, 'title': 'Episódio 1',
        }, content_type='application/json')

        self.assertEqual(resposta.status_code, 201)
        self.assertEqual(resposta.json()['projectId'], self.projeto.id)

    def test_visibilidade_invalida(self):
        resposta = self.client.post(f'/api/projects/{self.projeto.id}/youtube-videos', {
            'title': 'Teaser', 'visibility': 'secret',
        }, content_type='application/json')
        self.assertEqual(resposta.status_code, 400)

    def test_nao_membro(self):
        self.client.force_login(criar_usuario('eve', role='producer'))

        resposta = self.client.get(f'/api/projects/{self.projeto.id}/youtube-videos')
        self.assertEqual(resposta.status_code, 403)

    def test_nao_membro_com_corpo_invalido(self):
        self.client.force_login(criar_usuario('eve', role='producer'))

        resposta = self.client.post(f'/api/projects/{self.projeto.id}/youtube-videos', {
            'visibility': 'secret',
        }, content_type='application/json')
        self.assertEqual(resposta.status_code, 403)
