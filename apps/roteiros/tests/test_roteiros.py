# apps/roteiros/tests/test_roteiros.py

import re

from django.test import TestCase

from apps.core.tests.fabricas import criar_usuario, criar_projeto
from apps.roteiros.storage import roteiros_storage


def linha(numero, correlacionada=False):
    return {
        'id': numero, 'generalData': '', 'shotNumber': numero,
        'shotData1': '', 'shotData2': '', 'shotData3': '', 'shotData4': '',
        'hasCorrelation': correlacionada,
    }


class CorrelacaoTest(TestCase):

    def setUp(self):
        self.usuario = criar_usuario('jane', role='producer')
        self.projeto = criar_projeto(self.usuario)
        self.script = roteiros_storage.create_script_data(self.projeto.id, {
            'script_content': '<p>INT. LAB - NIGHT. The robot wakes. The robot speaks.</p>',
            'correlations': [],
            'spreadsheet_data': [linha(1), linha(2), linha(3)],
        }, self.usuario.id)

    def test_marca_primeira_ocorrencia(self):
        script = roteiros_storage.correlate_text(self.script.id, 'The robot', 2)

        correlacao = script.correlations[0]
        self.assertRegex(correlacao['textId'], r'^text-\d+$')
        self.assertEqual(correlacao['shotNumber'], 2)
        self.assertEqual(correlacao['text'], 'The robot')

        span = (
            f'<span class="text-blue-500 cursor-pointer" data-text-id="{correlacao["textId"]}" '
            f'data-shot="2">The robot</span>'
        )
        self.assertEqual(
            script.script_content,
            f'<p>INT. LAB - NIGHT. {span} wakes. The robot speaks.</p>'
        )

    def test_marca_linhas_do_plano(self):
        script = roteiros_storage.correlate_text(self.script.id, 'wakes', 3)

        marcadas = [r['shotNumber'] for r in script.spreadsheet_data if r['hasCorrelation']]
        self.assertEqual(marcadas, [3])

    def test_texto_ausente_registra_sem_alterar(self):
        original = self.script.script_content

        script = roteiros_storage.correlate_text(self.script.id, 'EXT. BEACH', 1)

        self.assertEqual(script.script_content, original)
        self.assertEqual(len(script.correlations), 1)

    def test_ids_nao_se_repetem(self):
        roteiros_storage.correlate_text(self.script.id, 'INT.', 1)
        script = roteiros_storage.correlate_text(self.script.id, 'LAB', 2)

        ids = [c['textId'] for c in script.correlations]
        self.assertEqual(len(set(ids)), 2)
        self.assertEqual(len(re.findall('data-text-id', script.script_content)), 2)


class RoteiroApiTest(TestCase):

    def setUp(self):
        self.usuario = criar_usuario('jane', role='producer')
        self.projeto = criar_projeto(self.usuario)
        self.url = f'/api/projects/{self.projeto.id}/script-data'
        self.client.force_login(self.usuario)

    def test_ciclo_do_roteiro(self):
        self.assertEqual(self.client.get(self.url).status_code, 404)

        resposta = self.client.post(self.url, {
            'scriptContent': '<p>FADE IN.</p>', 'correlations': [], 'spreadsheetData': [linha(1)],
        }, content_type='application/json')
        self.assertEqual(resposta.status_code, 201)
        self.assertIsNone(resposta.json()['finalContent'])

        resposta = self.client.post(self.url, {'scriptContent': 'x'}, content_type='application/json')
        self.assertEqual(resposta.status_code, 400)

        resposta = self.client.put(self.url, {'finalContent': '<p>FIM</p>'}, content_type='application/json')
        self.assertEqual(resposta.json()['finalContent'], '<p>FIM</p>')
        self.assertEqual(resposta.json()['scriptContent'], '<p>FADE IN.</p>')

        resposta = self.client.post(f'{self.url}/correlations', {
            'text': 'FADE IN', 'shotNumber': 1,
        }, content_type='application/json')
        self.assertEqual(resposta.status_code, 201)
        self.assertTrue(resposta.json()['spreadsheetData'][0]['hasCorrelation'])

    def test_planilha_invalida(self):
        resposta = self.client.post(self.url, {
            'scriptContent': '', 'spreadsheetData': 'nope',
        }, content_type='application/json')
        self.assertEqual(resposta.status_code, 400)


class VersoesPublicadasTest(TestCase):

    def setUp(self):
        self.usuario = criar_usuario('jane', role='producer')
        self.projeto = criar_projeto(self.usuario)
        self.url = f'/api/projects/{self.projeto.id}/published-finals'
        self.client.force_login(self.usuario)

    def publicar(self, titulo):
        return self.client.post(self.url, {'title': titulo, 'content': '<p>...</p>'}, content_type='application/json')

    def test_versoes_crescentes_por_projeto(self):
        self.assertEqual(self.publicar('Corte 1').json()['version'], 1)
        self.assertEqual(self.publicar('Corte 2').json()['version'], 2)

        outro = criar_projeto(self.usuario, nome='Outro')
        primeira = roteiros_storage.publish_final(outro.id, {'title': 'A', 'content': ''}, self.usuario.id)
        self.assertEqual(primeira.version, 1)

        lista = self.client.get(self.url).json()
        self.assertEqual([v['version'] for v in lista], [2, 1])
        self.assertNotIn('content', lista[0])

    def test_detalhe(self):
        final = self.publicar('Corte 1').json()

        resposta = self.client.get(f"/api/published-finals/{final['id']}")
        self.assertEqual(resposta.json()['content'], '<p>...</p>')

        self.client.force_login(criar_usuario('eve', role='producer'))
        self.assertEqual(self.client.get(f"/api/published-finals/{final['id']}").status_code, 403)
