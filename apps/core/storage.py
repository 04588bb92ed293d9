# apps/core/storage.py

"""
Access layer de usuários, projetos e membros

Fachada única entre as views e o ORM. As views nunca montam queries
diretamente; chamam os métodos do singleton ``storage``.
"""

import logging
from typing import Dict, Iterable, List, Optional

from django.conf import settings
from django.db import transaction

from .models import User, Project, ProjectMember, Column

logger = logging.getLogger(__name__)


class ClaqueteStorage:
    """Operações de CRUD de usuários e projetos"""

    # === USUÁRIOS ===

    def get_user(self, user_id) -> Optional[User]:
        return User.objects.filter(id=user_id).first()

    def get_user_by_username(self, username: str) -> Optional[User]:
        return User.objects.filter(username=username).first()

    def get_user_by_email(self, email: str) -> Optional[User]:
        return User.objects.filter(email__iexact=email).first()

    def get_users(self) -> List[User]:
        return list(User.objects.filter(is_active=True).order_by('id'))

    def create_user(self, dados: Dict) -> User:
        """
        Cria usuário com senha criptografada

        ``dados`` usa os nomes de campo do model (display_name, role...).
        """
        dados = dict(dados)
        password = dados.pop('password')
        username = dados.pop('username')
        email = dados.pop('email')

        user = User.objects.create_user(
            username=username,
            email=email,
            password=password,
            **dados
        )
        logger.info(f"👤 Usuário criado: {user.username} ({user.role})")
        return user

    def update_user(self, user_id, dados: Dict) -> Optional[User]:
        user = self.get_user(user_id)
        if user is None:
            return None

        for campo, valor in dados.items():
            if campo == 'password':
                user.set_password(valor)
            else:
                setattr(user, campo, valor)
        user.save()
        return user

    # === PROJETOS ===

    def get_project(self, project_id) -> Optional[Project]:
        return Project.objects.select_related('created_by').filter(id=project_id).first()

    def get_project_with_members(self, project_id) -> Optional[Project]:
        """Projeto com ``members`` pré-carregado"""
        return (
            Project.objects
            .select_related('created_by')
            .prefetch_related('members')
            .filter(id=project_id)
            .first()
        )

    def get_projects_by_user_id(self, user_id) -> List[Project]:
        return list(
            Project.objects
            .filter(members__id=user_id)
            .prefetch_related('members')
            .distinct()
        )

    def get_all_projects(self) -> List[Project]:
        return list(Project.objects.prefetch_related('members'))

    @transaction.atomic
    def create_project(self, dados: Dict, created_by: User,
                       member_ids: Iterable[int] = ()) -> Project:
        """
        Cria o projeto com o criador como membro e as colunas padrão

        Tudo na mesma transação: se um membro extra não existir,
        nada é gravado.
        """
        project = Project.objects.create(created_by=created_by, **dados)

        ProjectMember.objects.create(project=project, user=created_by)
        for member_id in member_ids:
            if member_id == created_by.id:
                continue
            user = User.objects.get(id=member_id)
            ProjectMember.objects.get_or_create(project=project, user=user)

        for ordem, coluna in enumerate(settings.CLAQUETE_DEFAULT_COLUMNS):
            Column.objects.create(
                project=project,
                name=coluna['name'],
                color=coluna['color'],
                order=ordem,
            )

        logger.info(f"🎬 Projeto criado: {project.name} por {created_by.username}")
        return self.get_project_with_members(project.id)

    def update_project(self, project_id, dados: Dict) -> Optional[Project]:
        project = self.get_project(project_id)
        if project is None:
            return None

        for campo, valor in dados.items():
            setattr(project, campo, valor)
        project.save()
        return self.get_project_with_members(project.id)

    @transaction.atomic
    def delete_project(self, project_id) -> Dict[str, int]:
        """
        Exclui o projeto e tudo que pertence a ele

        As FKs usam CASCADE; o retorno traz a contagem por tabela
        (ex: ``{'core.Content': 3, ...}``). Projeto inexistente devolve {}.
        """
        project = Project.objects.select_for_update().filter(id=project_id).first()
        if project is None:
            return {}

        nome = project.name
        _, contagens = project.delete()
        logger.info(f"🗑️ Projeto excluído: {nome} {contagens}")
        return contagens

    # === MEMBROS ===

    def add_project_member(self, project_id, user_id) -> ProjectMember:
        """Idempotente: adicionar membro existente não duplica"""
        member, _ = ProjectMember.objects.get_or_create(
            project_id=project_id,
            user_id=user_id,
        )
        return member

    def remove_project_member(self, project_id, user_id) -> bool:
        apagados, _ = ProjectMember.objects.filter(
            project_id=project_id,
            user_id=user_id,
        ).delete()
        return apagados > 0

    def get_project_members(self, project_id) -> List[User]:
        return list(
            User.objects
            .filter(projectmember__project_id=project_id)
            .order_by('projectmember__id')
        )

    def is_project_member(self, project_id, user_id) -> bool:
        return ProjectMember.objects.filter(project_id=project_id, user_id=user_id).exists()


# Instância global do access layer
storage = ClaqueteStorage()
