# apps/roteiros/serializers.py

from apps.core.utils import formatar_data


def serializar_roteiro(script):
    return {
        'id': script.id,
        'projectId': script.project_id,
        'scriptContent': script.script_content,
        'finalContent': script.final_content,
        'correlations': script.correlations,
        'spreadsheetData': script.spreadsheet_data,
        'createdBy': script.created_by_id,
        'createdAt': formatar_data(script.created_at),
        'updatedAt': formatar_data(script.updated_at),
    }


def serializar_versao(final, incluir_conteudo=True):
    """A listagem omite o HTML; o detalhe traz tudo"""
    dados = {
        'id': final.id,
        'projectId': final.project_id,
        'title': final.title,
        'version': final.version,
        'createdBy': final.created_by_id,
        'createdAt': formatar_data(final.created_at),
    }
    if incluir_conteudo:
        dados['content'] = final.content
    return dados
