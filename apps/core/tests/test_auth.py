# apps/core/tests/test_auth.py

from django.core.cache import cache
from django.test import Client, TestCase

from apps.core.models import User
from .fabricas import criar_usuario, SENHA_PADRAO


class RegistroTest(TestCase):

    def setUp(self):
        cache.clear()

    def registrar(self, username, email):
        return self.client.post('/api/auth/register', {
            'username': username,
            'password': 'segredo123',
            'displayName': username.title(),
            'email': email,
        }, content_type='application/json')

    def test_primeiro_usuario_vira_admin(self):
        resposta = self.registrar('john', 'john@claquete.test')

        self.assertEqual(resposta.status_code, 201)
        self.assertEqual(resposta.json()['role'], 'admin')

        resposta = self.registrar('jane', 'jane@claquete.test')
        self.assertEqual(resposta.json()['role'], 'employed')

    def test_registro_nao_devolve_senha_e_abre_sessao(self):
        resposta = self.registrar('john', 'john@claquete.test')
        self.assertNotIn('password', resposta.json())

        me = self.client.get('/api/auth/me')
        self.assertEqual(me.status_code, 200)
        self.assertEqual(me.json()['username'], 'john')

    def test_senha_guardada_com_hash(self):
        self.registrar('john', 'john@claquete.test')
        usuario = User.objects.get(username='john')

        self.assertNotEqual(usuario.password, 'segredo123')
        self.assertTrue(usuario.check_password('segredo123'))

    def test_username_duplicado(self):
        self.registrar('john', 'john@claquete.test')
        self.client.logout()

        resposta = self.registrar('john', 'outro@claquete.test')
        self.assertEqual(resposta.status_code, 400)
        self.assertEqual(resposta.json()['message'], 'Username already exists')

    def test_campo_faltando(self):
        resposta = self.client.post('/api/auth/register', {'username': 'john'}, content_type='application/json')

        self.assertEqual(resposta.status_code, 400)
        self.assertIn('errors', resposta.json())

    def test_json_invalido(self):
        resposta = self.client.post('/api/auth/register', '{nope', content_type='application/json')
        self.assertEqual(resposta.status_code, 400)


class LoginTest(TestCase):

    def setUp(self):
        cache.clear()
        self.usuario = criar_usuario('bob', role='actor')

    def login(self, username, password):
        return self.client.post('/api/auth/login', {
            'username': username, 'password': password,
        }, content_type='application/json')

    def test_login_por_username(self):
        resposta = self.login('bob', SENHA_PADRAO)

        self.assertEqual(resposta.status_code, 200)
        self.assertEqual(resposta.json()['id'], self.usuario.id)

    def test_login_por_email(self):
        resposta = self.login('bob@claquete.test', SENHA_PADRAO)
        self.assertEqual(resposta.status_code, 200)

    def test_senha_errada(self):
        resposta = self.login('bob', 'errada')

        self.assertEqual(resposta.status_code, 401)
        self.assertEqual(resposta.json()['message'], 'Invalid username or password')

    def test_bloqueio_apos_tentativas(self):
        for _ in range(5):
            self.login('bob', 'errada')

        resposta = self.login('bob', SENHA_PADRAO)
        self.assertEqual(resposta.status_code, 401)

    def test_me_sem_sessao(self):
        resposta = self.client.get('/api/auth/me')

        self.assertEqual(resposta.status_code, 401)
        self.assertEqual(resposta.json(), {'message': 'Unauthorized'})

    def test_logout_encerra_sessao(self):
        self.login('bob', SENHA_PADRAO)

        resposta = self.client.post('/api/auth/logout')
        self.assertEqual(resposta.status_code, 200)
        self.assertEqual(self.client.get('/api/auth/me').status_code, 401)


class HealthTest(TestCase):

    def test_health_sem_autenticacao(self):
        resposta = self.client.get('/api/health')

        self.assertEqual(resposta.status_code, 200)
        self.assertEqual(resposta.json()['database'], 'ok')
        self.assertIn('csrftoken', resposta.cookies)


class CsrfTest(TestCase):

    def setUp(self):
        cache.clear()
        criar_usuario('bob')
        self.client = Client(enforce_csrf_checks=True)

    def login(self, **extra):
        return self.client.post('/api/auth/login', {
            'username': 'bob', 'password': SENHA_PADRAO,
        }, content_type='application/json', **extra)

    def test_sem_token_responde_json(self):
        resposta = self.login()

        self.assertEqual(resposta.status_code, 403)
        self.assertEqual(resposta['Content-Type'], 'application/json')
        self.assertEqual(resposta.json(), {'message': 'CSRF verification failed'})

    def test_token_do_health_libera_login(self):
        token = self.client.get('/api/health').cookies['csrftoken'].value

        resposta = self.login(HTTP_X_CSRFTOKEN=token)

        self.assertEqual(resposta.status_code, 200)
