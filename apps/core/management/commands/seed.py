# apps/core/management/commands/seed.py

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from apps.core.models import User, Project, ProjectMember, Column, Content


USUARIOS_DEMO = [
    {
        'username': 'johndoe', 'display_name': 'John Doe', 'email': 'john@example.com',
        'avatar_initials': 'JD', 'avatar_color': '#4F46E5', 'role': 'admin',
    },
    {
        'username': 'janedoe', 'display_name': 'Jane Doe', 'email': 'jane@example.com',
        'avatar_initials': 'JD', 'avatar_color': '#06B6D4', 'role': 'producer',
    },
    {
        'username': 'bobsmith', 'display_name': 'Bob Smith', 'email': 'bob@example.com',
        'avatar_initials': 'BS', 'avatar_color': '#10B981', 'role': 'actor',
    },
]

SENHA_DEMO = 'password123'

PROJETOS_DEMO = [
    {
        'name': 'IMMORTALITY',
        'description': 'BREAKTHROUGH SCIENTIFIC BREAKTHROUGHS WITH AI',
        'type': 'youtube',
        'criador': 'johndoe',
        'membros': ['janedoe', 'bobsmith'],
        'colunas': [
            ('Ideation', '#4F46E5'),
            ('Pre-Production', '#06B6D4'),
            ('Production', '#10B981'),
            ('Post-Production', '#EF4444'),
        ],
        'conteudos': [
            (0, 'Research latest AI trends',
             'Gather information on recent breakthroughs in AI and longevity research',
             'research', 'johndoe', 'high', 'johndoe'),
            (0, 'Create script outline',
             'Develop the main talking points and structure for the video',
             'script', 'janedoe', 'medium', 'johndoe'),
            (1, 'Find interview subjects',
             'Contact researchers and experts for potential interviews',
             'task', 'bobsmith', 'high', 'janedoe'),
            (1, 'Location scouting',
             'Find appropriate lab settings for filming',
             'task', 'johndoe', 'low', 'bobsmith'),
        ],
    },
    {
        'name': 'Product Launch Video Series',
        'description': 'Series of videos for the new product launch',
        'type': 'pitch',
        'criador': 'janedoe',
        'membros': ['johndoe', 'bobsmith'],
        'colunas': [
            ('Research', '#EF4444'),
            ('Drafting', '#F59E0B'),
            ('Review', '#10B981'),
            ('Final', '#4F46E5'),
        ],
        'conteudos': [
            (0, 'Market analysis',
             'Research current market trends and competitor products',
             'research', 'bobsmith', 'high', 'janedoe'),
            (0, 'Value proposition',
             'Define clear value proposition for the product',
             'task', 'janedoe', 'high', 'janedoe'),
            (1, 'Create pitch deck',
             'Design initial slide deck for the pitch video',
             'task', 'johndoe', 'medium', 'bobsmith'),
        ],
    },
]


class Command(BaseCommand):
    help = 'Popula o banco com os dados de demonstração (usuários, projetos, quadro e chat)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--reset',
            action='store_true',
            help='Apaga projetos, canais e os usuários demo antes de popular',
        )

    def handle(self, *args, **options):
        self.stdout.write('🌱 Populando banco com dados demo...')

        if not options['reset'] and User.objects.filter(
            username__in=[u['username'] for u in USUARIOS_DEMO]
        ).exists():
            raise CommandError(
                'Usuários demo já existem. Use --reset para recriar os dados.'
            )

        with transaction.atomic():
            if options['reset']:
                self._limpar_dados()

            usuarios = self._criar_usuarios()
            projetos = self._criar_projetos(usuarios)
            self._criar_canal_geral(usuarios)

        self.stdout.write(
            self.style.SUCCESS(
                '\n✅ DADOS DEMO CRIADOS!\n'
                f'  👤 Usuários: {len(usuarios)}\n'
                f'  🎬 Projetos: {len(projetos)}\n'
                f'  🔑 Senha de todos: {SENHA_DEMO}\n'
            )
        )

    def _limpar_dados(self):
        """Remove os dados na ordem das FKs protegidas"""
        from apps.chat.models import ChatChannel

        self.stdout.write('  🧹 Limpando dados anteriores...')
        ChatChannel.objects.all().delete()
        Project.objects.all().delete()
        User.objects.filter(username__in=[u['username'] for u in USUARIOS_DEMO]).delete()

    def _criar_usuarios(self):
        self.stdout.write('  👤 Criando usuários...')
        usuarios = {}
        for dados in USUARIOS_DEMO:
            dados = dict(dados)
            usuarios[dados['username']] = User.objects.create_user(
                password=SENHA_DEMO, **dados
            )
        return usuarios

    def _criar_projetos(self, usuarios):
        self.stdout.write('  🎬 Criando projetos, colunas e cartões...')
        projetos = []

        for dados in PROJETOS_DEMO:
            projeto = Project.objects.create(
                name=dados['name'],
                description=dados['description'],
                type=dados['type'],
                created_by=usuarios[dados['criador']],
            )
            for username in [dados['criador']] + dados['membros']:
                ProjectMember.objects.create(project=projeto, user=usuarios[username])

            colunas = [
                Column.objects.create(project=projeto, name=nome, color=cor, order=ordem)
                for ordem, (nome, cor) in enumerate(dados['colunas'])
            ]

            for indice, titulo, descricao, tipo, responsavel, prioridade, criador in dados['conteudos']:
                coluna = colunas[indice]
                Content.objects.create(
                    title=titulo,
                    description=descricao,
                    type=tipo,
                    column=coluna,
                    project=projeto,
                    assigned_to=usuarios[responsavel],
                    priority=prioridade,
                    order=coluna.contents.count(),
                    created_by=usuarios[criador],
                )

            self.stdout.write(f'    ✅ {projeto.name} ({len(colunas)} colunas)')
            projetos.append(projeto)

        return projetos

    def _criar_canal_geral(self, usuarios):
        from apps.chat.storage import chat_storage

        self.stdout.write('  💬 Criando canal #general...')
        criador = usuarios['johndoe']
        canal = chat_storage.create_channel(
            {'name': 'general', 'description': 'Canal da equipe', 'is_private': False},
            created_by=criador,
            member_ids=[u.id for u in usuarios.values()],
        )
        chat_storage.create_message(canal.id, criador.id, 'Bem-vindos ao Claquete! 🎬')
