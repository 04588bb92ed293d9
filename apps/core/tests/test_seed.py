# apps/core/tests/test_seed.py

from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from apps.chat.models import ChatChannel
from apps.core.models import User, Project, Content


class SeedTest(TestCase):

    def rodar(self, *args):
        call_command('seed', *args, stdout=StringIO())

    def test_dados_demo(self):
        self.rodar()

        self.assertEqual(User.objects.count(), 3)
        self.assertEqual(User.objects.get(username='johndoe').role, 'admin')
        self.assertTrue(User.objects.get(username='bobsmith').check_password('password123'))

        projeto = Project.objects.get(name='IMMORTALITY')
        self.assertEqual(projeto.members.count(), 3)
        ordens = list(
            Content.objects.filter(column__project=projeto, column__order=0)
            .order_by('order').values_list('order', flat=True)
        )
        self.assertEqual(ordens, [0, 1])

        self.assertEqual(ChatChannel.objects.get(name='general').memberships.count(), 3)

    def test_segunda_execucao_exige_reset(self):
        self.rodar()

        with self.assertRaises(CommandError):
            self.rodar()

        self.rodar('--reset')
        self.assertEqual(Project.objects.count(), 2)
