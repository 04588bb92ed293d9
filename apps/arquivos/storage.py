# apps/arquivos/storage.py

"""
Access layer de pastas e arquivos dos projetos
"""

import logging
from typing import Dict, List, Optional

from django.db import transaction

from .models import ProjectFolder, ProjectFile

logger = logging.getLogger(__name__)


class ArquivosStorage:
    """Operações de CRUD de pastas e arquivos"""

    # === PASTAS ===

    def get_folder(self, folder_id) -> Optional[ProjectFolder]:
        return ProjectFolder.objects.select_related('parent').filter(id=folder_id).first()

    def get_folder_contents(self, project_id, folder_id=None) -> Optional[Dict]:
        """
        Conteúdo de uma pasta: ``{id, name, parent, files, subfolders}``

        ``folder_id=None`` devolve a raiz do projeto (id/name/parent nulos).
        """
        folder = None
        if folder_id is not None:
            folder = ProjectFolder.objects.select_related('parent').filter(
                id=folder_id, project_id=project_id
            ).first()
            if folder is None:
                return None

        return {
            'id': folder.id if folder else None,
            'name': folder.name if folder else None,
            'parent': folder.parent if folder else None,
            'files': list(ProjectFile.objects.filter(project_id=project_id, folder_id=folder_id)),
            'subfolders': list(ProjectFolder.objects.filter(project_id=project_id, parent_id=folder_id)),
        }

    def create_folder(self, dados: Dict) -> ProjectFolder:
        folder = ProjectFolder.objects.create(**dados)
        logger.info(f"📁 Pasta criada: {folder.name} (projeto {folder.project_id})")
        return folder

    def rename_folder(self, folder_id, name: str) -> Optional[ProjectFolder]:
        folder = self.get_folder(folder_id)
        if folder is None:
            return None

        folder.name = name
        folder.save(update_fields=['name'])
        return folder

    def get_subtree_ids(self, folder_id) -> List[int]:
        """Ids da pasta e de todas as descendentes (busca em largura)"""
        ids = [folder_id]
        nivel = [folder_id]
        while nivel:
            nivel = list(ProjectFolder.objects.filter(parent_id__in=nivel).values_list('id', flat=True))
            ids.extend(nivel)
        return ids

    @transaction.atomic
    def delete_folder(self, folder_id) -> Dict[str, int]:
        """
        Exclui a pasta, as subpastas e os arquivos de todas elas

        Devolve as contagens ``{'folders': n, 'files': n}``; pasta
        inexistente devolve {}.
        """
        if not ProjectFolder.objects.select_for_update().filter(id=folder_id).exists():
            return {}

        ids = self.get_subtree_ids(folder_id)
        arquivos, _ = ProjectFile.objects.filter(folder_id__in=ids).delete()

        # Das folhas para a raiz para não depender da ordem do cascade
        for pasta_id in reversed(ids):
            ProjectFolder.objects.filter(id=pasta_id).delete()

        contagens = {'folders': len(ids), 'files': arquivos}
        logger.info(f"🗑️ Pasta {folder_id} excluída: {contagens}")
        return contagens

    # === ARQUIVOS ===

    def get_file(self, file_id) -> Optional[ProjectFile]:
        return ProjectFile.objects.select_related('folder').filter(id=file_id).first()

    def get_files(self, project_id) -> List[ProjectFile]:
        return list(ProjectFile.objects.filter(project_id=project_id).select_related('folder'))

    def create_file(self, dados: Dict) -> ProjectFile:
        arquivo = ProjectFile.objects.create(**dados)
        logger.info(f"📎 Arquivo registrado: {arquivo.filename} (projeto {arquivo.project_id})")
        return arquivo

    def update_file(self, file_id, dados: Dict) -> Optional[ProjectFile]:
        arquivo = self.get_file(file_id)
        if arquivo is None:
            return None

        for campo, valor in dados.items():
            setattr(arquivo, campo, valor)
        arquivo.save()
        return arquivo

    def delete_file(self, file_id) -> bool:
        apagados, _ = ProjectFile.objects.filter(id=file_id).delete()
        return apagados > 0


# Instância global do access layer de arquivos
arquivos_storage = ArquivosStorage()
