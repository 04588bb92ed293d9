# apps/core/tests/test_projects.py

from django.test import TestCase

from apps.core.models import Project, Column, Content
from apps.core.storage import storage
from .fabricas import criar_usuario, criar_projeto


class CriacaoProjetoTest(TestCase):

    def setUp(self):
        self.produtora = criar_usuario('jane', role='producer')
        self.client.force_login(self.produtora)

    def test_projeto_nasce_com_criador_e_colunas_padrao(self):
        resposta = self.client.post('/api/projects', {
            'name': 'IMMORTALITY', 'type': 'youtube',
        }, content_type='application/json')

        self.assertEqual(resposta.status_code, 201)
        corpo = resposta.json()
        self.assertEqual([m['id'] for m in corpo['members']], [self.produtora.id])

        colunas = list(Column.objects.filter(project_id=corpo['id']).order_by('order'))
        self.assertEqual(
            [(c.name, c.color, c.order) for c in colunas],
            [
                ('Ideation', '#EAB308', 0),
                ('Pre-Production', '#3B82F6', 1),
                ('Production', '#8B5CF6', 2),
                ('Post-Production', '#10B981', 3),
            ]
        )

    def test_membros_extras(self):
        ator = criar_usuario('bob', role='actor')

        resposta = self.client.post('/api/projects', {
            'name': 'Pitch', 'type': 'pitch', 'memberIds': [ator.id],
        }, content_type='application/json')

        ids = {m['id'] for m in resposta.json()['members']}
        self.assertEqual(ids, {self.produtora.id, ator.id})

    def test_membro_desconhecido_nao_grava_nada(self):
        resposta = self.client.post('/api/projects', {
            'name': 'Pitch', 'type': 'pitch', 'memberIds': [9999],
        }, content_type='application/json')

        self.assertEqual(resposta.status_code, 400)
        self.assertFalse(Project.objects.exists())

    def test_ator_nao_cria_projeto(self):
        self.client.force_login(criar_usuario('bob', role='actor'))

        resposta = self.client.post('/api/projects', {'name': 'X', 'type': 'x'}, content_type='application/json')
        self.assertEqual(resposta.status_code, 403)
        self.assertEqual(resposta.json(), {'message': 'Forbidden'})

    def test_sem_sessao(self):
        self.client.logout()
        self.assertEqual(self.client.get('/api/projects').status_code, 401)


class AcessoProjetoTest(TestCase):

    def setUp(self):
        self.admin = criar_usuario('root', role='admin')
        self.criador = criar_usuario('jane', role='producer')
        self.membro = criar_usuario('bob', role='actor')
        self.estranho = criar_usuario('eve', role='producer')
        self.projeto = criar_projeto(self.criador, membros=[self.membro])

    def test_listagem_so_mostra_projetos_do_usuario(self):
        criar_projeto(self.estranho, nome='Outro')

        self.client.force_login(self.membro)
        nomes = [p['name'] for p in self.client.get('/api/projects').json()]
        self.assertEqual(nomes, ['Curta'])

        self.client.force_login(self.admin)
        self.assertEqual(len(self.client.get('/api/projects').json()), 2)

    def test_nao_membro_nao_le(self):
        self.client.force_login(self.estranho)

        resposta = self.client.get(f'/api/projects/{self.projeto.id}')
        self.assertEqual(resposta.status_code, 403)

    def test_projeto_inexistente(self):
        self.client.force_login(self.admin)

        resposta = self.client.get('/api/projects/9999')
        self.assertEqual(resposta.status_code, 404)
        self.assertEqual(resposta.json()['message'], 'Project not found')

    def test_membro_nao_exclui_projeto(self):
        self.client.force_login(self.membro)

        resposta = self.client.delete(f'/api/projects/{self.projeto.id}')
        self.assertEqual(resposta.status_code, 403)
        self.assertTrue(Project.objects.filter(id=self.projeto.id).exists())

    def test_criador_edita_projeto(self):
        self.client.force_login(self.criador)

        resposta = self.client.put(f'/api/projects/{self.projeto.id}', {
            'name': 'Longa',
        }, content_type='application/json')

        self.assertEqual(resposta.status_code, 200)
        self.assertEqual(resposta.json()['name'], 'Longa')
        self.assertEqual(resposta.json()['type'], 'short_film')

    def test_exclusao_remove_tudo_do_projeto(self):
        coluna = self.projeto.columns.first()
        Content.objects.create(
            title='Cena 1', type='task', column=coluna, project=self.projeto,
            order=0, created_by=self.criador,
        )
        self.client.force_login(self.criador)

        resposta = self.client.delete(f'/api/projects/{self.projeto.id}')

        self.assertEqual(resposta.status_code, 200)
        self.assertEqual(resposta.json()['deleted']['core.Content'], 1)
        self.assertFalse(Column.objects.filter(project_id=self.projeto.id).exists())
        self.assertFalse(Content.objects.exists())


class MembrosProjetoTest(TestCase):

    def setUp(self):
        self.criador = criar_usuario('jane', role='producer')
        self.ator = criar_usuario('bob', role='actor')
        self.projeto = criar_projeto(self.criador)
        self.client.force_login(self.criador)

    def test_adicionar_membro_e_idempotente(self):
        url = f'/api/projects/{self.projeto.id}/members'

        self.client.post(url, {'userId': self.ator.id}, content_type='application/json')
        resposta = self.client.post(url, {'userId': self.ator.id}, content_type='application/json')

        self.assertEqual(resposta.status_code, 201)
        self.assertEqual(len(storage.get_project_members(self.projeto.id)), 2)

    def test_criador_nao_pode_ser_removido(self):
        resposta = self.client.delete(f'/api/projects/{self.projeto.id}/members/{self.criador.id}')

        self.assertEqual(resposta.status_code, 400)
        self.assertEqual(resposta.json()['message'], 'Cannot remove project creator')
        self.assertTrue(storage.is_project_member(self.projeto.id, self.criador.id))

    def test_remover_membro(self):
        storage.add_project_member(self.projeto.id, self.ator.id)

        resposta = self.client.delete(f'/api/projects/{self.projeto.id}/members/{self.ator.id}')

        self.assertEqual(resposta.status_code, 200)
        self.assertFalse(storage.is_project_member(self.projeto.id, self.ator.id))

    def test_remover_quem_nao_e_membro(self):
        resposta = self.client.delete(f'/api/projects/{self.projeto.id}/members/{self.ator.id}')
        self.assertEqual(resposta.status_code, 404)


class UsuariosTest(TestCase):

    def setUp(self):
        self.admin = criar_usuario('root', role='admin')
        self.ator = criar_usuario('bob', role='actor')

    def test_listagem_sem_senha(self):
        self.client.force_login(self.ator)

        usuarios = self.client.get('/api/users').json()
        self.assertEqual(len(usuarios), 2)
        self.assertTrue(all('password' not in u for u in usuarios))

    def test_so_admin_muda_papel(self):
        self.client.force_login(self.ator)
        resposta = self.client.patch(f'/api/users/{self.ator.id}', {'role': 'admin'}, content_type='application/json')
        self.assertEqual(resposta.status_code, 403)

        self.client.force_login(self.admin)
        resposta = self.client.patch(f'/api/users/{self.ator.id}', {'role': 'producer'}, content_type='application/json')
        self.assertEqual(resposta.status_code, 200)
        self.assertEqual(resposta.json()['role'], 'producer')

    def test_admin_cria_usuario_com_papel(self):
        self.client.force_login(self.admin)

        resposta = self.client.post('/api/users', {
            'username': 'ana', 'password': 'segredo123', 'displayName': 'Ana Lima',
            'email': 'ana@claquete.test', 'role': 'producer',
        }, content_type='application/json')

        self.assertEqual(resposta.status_code, 201)
        self.assertEqual(resposta.json()['role'], 'producer')
        self.assertEqual(resposta.json()['avatarInitials'], 'AL')
