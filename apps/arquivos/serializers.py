# apps/arquivos/serializers.py

from apps.core.utils import formatar_data


def serializar_pasta(folder):
    if folder is None:
        return None
    return {
        'id': folder.id,
        'projectId': folder.project_id,
        'name': folder.name,
        'parentId': folder.parent_id,
        'createdBy': folder.created_by_id,
        'createdAt': formatar_data(folder.created_at),
    }


def serializar_arquivo(arquivo):
    return {
        'id': arquivo.id,
        'projectId': arquivo.project_id,
        'filename': arquivo.filename,
        'originalFilename': arquivo.original_filename,
        'filepath': arquivo.filepath,
        'mimetype': arquivo.mimetype,
        'size': arquivo.size,
        'isPublic': arquivo.is_public,
        'folderId': arquivo.folder_id,
        'createdBy': arquivo.created_by_id,
        'createdAt': formatar_data(arquivo.created_at),
        'updatedAt': formatar_data(arquivo.updated_at),
    }


def serializar_conteudo_pasta(conteudo):
    """Resposta de GET .../folders/root e .../folders/:id"""
    return {
        'id': conteudo['id'],
        'name': conteudo['name'],
        'parent': serializar_pasta(conteudo['parent']),
        'files': [serializar_arquivo(a) for a in conteudo['files']],
        'subfolders': [serializar_pasta(p) for p in conteudo['subfolders']],
    }
