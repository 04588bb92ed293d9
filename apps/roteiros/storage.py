# apps/roteiros/storage.py

"""
Access layer do roteiro: ScriptData, correlações e versões publicadas
"""

import logging
from typing import Dict, List, Optional

from django.db import transaction
from django.db.models import Max
from django.utils import timezone

from apps.core.models import Project
from .models import ScriptData, PublishedFinal

logger = logging.getLogger(__name__)

# Marcação inserida no roteiro para o trecho correlacionado
SPAN_CORRELACAO = (
    '<span class="text-blue-500 cursor-pointer" '
    'data-text-id="{text_id}" data-shot="{shot}">{text}</span>'
)


class RoteirosStorage:
    """Operações de CRUD do roteiro"""

    # === SCRIPT DATA ===

    def get_script_data(self, project_id) -> Optional[ScriptData]:
        return ScriptData.objects.filter(project_id=project_id).first()

    def create_script_data(self, project_id, dados: Dict, created_by_id) -> ScriptData:
        script = ScriptData.objects.create(project_id=project_id, created_by_id=created_by_id, **dados)
        logger.info(f"📝 Roteiro criado para o projeto {project_id}")
        return script

    def update_script_data(self, project_id, dados: Dict) -> Optional[ScriptData]:
        script = self.get_script_data(project_id)
        if script is None:
            return None

        for campo, valor in dados.items():
            setattr(script, campo, valor)
        script.save()
        return script

    def _novo_text_id(self, correlations) -> str:
        """``text-<millis>``, sem repetir um id já usado no roteiro"""
        usados = {c.get('textId') for c in correlations}
        millis = int(timezone.now().timestamp() * 1000)
        while f"text-{millis}" in usados:
            millis += 1
        return f"text-{millis}"

    @transaction.atomic
    def correlate_text(self, script_id, text: str, shot_number: int) -> Optional[ScriptData]:
        """
        Liga um trecho do roteiro a um plano da planilha

        Envolve a PRIMEIRA ocorrência de ``text`` no roteiro com o span
        de correlação, registra ``{textId, shotNumber, text}`` e marca as
        linhas do plano com ``hasCorrelation``. Se o trecho não aparece no
        roteiro a correlação é registrada e o conteúdo fica como está.
        """
        script = ScriptData.objects.select_for_update().filter(id=script_id).first()
        if script is None:
            return None

        correlations = list(script.correlations or [])
        text_id = self._novo_text_id(correlations)

        if text in script.script_content:
            span = SPAN_CORRELACAO.format(text_id=text_id, shot=shot_number, text=text)
            script.script_content = script.script_content.replace(text, span, 1)
        else:
            logger.warning(f"⚠️ Trecho não encontrado no roteiro {script.id}; correlação sem marcação")

        correlations.append({'textId': text_id, 'shotNumber': shot_number, 'text': text})
        script.correlations = correlations

        linhas = []
        for linha in script.spreadsheet_data or []:
            if isinstance(linha, dict) and linha.get('shotNumber') == shot_number:
                linha = dict(linha, hasCorrelation=True)
            linhas.append(linha)
        script.spreadsheet_data = linhas

        script.save()
        logger.info(f"🔗 Correlação {text_id} -> plano {shot_number} (roteiro {script.id})")
        return script

    # === VERSÕES PUBLICADAS ===

    def get_published_finals(self, project_id) -> List[PublishedFinal]:
        return list(PublishedFinal.objects.filter(project_id=project_id).order_by('-version'))

    def get_published_final(self, final_id) -> Optional[PublishedFinal]:
        return PublishedFinal.objects.select_related('project').filter(id=final_id).first()

    @transaction.atomic
    def publish_final(self, project_id, dados: Dict, created_by_id) -> PublishedFinal:
        """Publica nova versão: maior versão do projeto + 1"""
        # Trava o projeto para serializar publicações concorrentes
        Project.objects.select_for_update().filter(id=project_id).first()

        atual = PublishedFinal.objects.filter(project_id=project_id).aggregate(maior=Max('version'))['maior']
        final = PublishedFinal.objects.create(
            project_id=project_id,
            created_by_id=created_by_id,
            version=(atual or 0) + 1,
            **dados
        )
        logger.info(f"📤 Versão {final.version} publicada no projeto {project_id}")
        return final


# Instância global do access layer do roteiro
roteiros_storage = RoteirosStorage()
