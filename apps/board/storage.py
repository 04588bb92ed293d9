# apps/board/storage.py

"""
Access layer do quadro Kanban: colunas, cartões e anexos

Invariante: dentro de uma coluna, ``Content.order`` forma a sequência
0..n-1. create/move/delete mantêm a sequência dentro de transações.
"""

import logging
from typing import Dict, List, Optional

from django.db import transaction
from django.db.models import Count, F

from apps.core.models import Column, Content, Attachment

logger = logging.getLogger(__name__)


class BoardStorage:
    """Operações de CRUD do quadro"""

    # === COLUNAS ===

    def get_columns(self, project_id) -> List[Column]:
        return list(Column.objects.filter(project_id=project_id).order_by('order', 'id'))

    def get_column(self, column_id) -> Optional[Column]:
        return Column.objects.select_related('project').filter(id=column_id).first()

    def get_column_with_contents(self, column_id) -> Optional[Column]:
        """
        Coluna com ``column.cards``: cartões ordenados por ``order``, cada um
        com o responsável carregado e ``attachment_count`` anotado
        """
        column = self.get_column(column_id)
        if column is None:
            return None

        column.cards = list(
            Content.objects
            .filter(column_id=column.id)
            .select_related('assigned_to')
            .annotate(attachment_count=Count('attachments'))
            .order_by('order', 'id')
        )
        return column

    def get_columns_with_contents(self, project_id) -> List[Column]:
        return [self.get_column_with_contents(c.id) for c in self.get_columns(project_id)]

    def create_column(self, project_id, dados: Dict) -> Column:
        """Nova coluna vai para o fim se ``order`` não for informado"""
        if dados.get('order') is None:
            dados = dict(dados, order=Column.objects.filter(project_id=project_id).count())
        return Column.objects.create(project_id=project_id, **dados)

    def update_column(self, column_id, dados: Dict) -> Optional[Column]:
        column = self.get_column(column_id)
        if column is None:
            return None

        for campo, valor in dados.items():
            setattr(column, campo, valor)
        column.save()
        return column

    @transaction.atomic
    def delete_column(self, column_id) -> Dict[str, int]:
        """Exclui a coluna com cartões e anexos (contagens por tabela)"""
        column = Column.objects.select_for_update().filter(id=column_id).first()
        if column is None:
            return {}

        _, contagens = column.delete()
        logger.info(f"🗑️ Coluna excluída: {column_id} {contagens}")
        return contagens

    # === CARTÕES ===

    def get_content(self, content_id) -> Optional[Content]:
        return Content.objects.select_related('column', 'project').filter(id=content_id).first()

    def get_content_by_project(self, project_id) -> List[Content]:
        return list(Content.objects.filter(project_id=project_id).order_by('column__order', 'order', 'id'))

    def get_content_by_column(self, column_id) -> List[Content]:
        return list(Content.objects.filter(column_id=column_id).order_by('order', 'id'))

    def get_content_with_assignee(self, content_id) -> Optional[Content]:
        return (
            Content.objects
            .select_related('assigned_to')
            .annotate(attachment_count=Count('attachments'))
            .filter(id=content_id)
            .first()
        )

    @transaction.atomic
    def create_content(self, dados: Dict) -> Content:
        """
        Cria o cartão no fim da coluna

        ``order`` = quantidade atual de cartões na coluna.
        """
        column_id = dados['column_id']
        # Trava a coluna para serializar inserções concorrentes
        Column.objects.select_for_update().filter(id=column_id).first()

        dados = dict(dados)
        dados['order'] = Content.objects.filter(column_id=column_id).count()
        content = Content.objects.create(**dados)

        logger.info(f"🆕 Cartão criado: {content.title} (coluna {column_id}, ordem {content.order})")
        return content

    def update_content(self, content_id, dados: Dict) -> Optional[Content]:
        """Atualização parcial; coluna/ordem mudam só via move_content"""
        content = self.get_content(content_id)
        if content is None:
            return None

        for campo, valor in dados.items():
            setattr(content, campo, valor)
        content.save()
        return content

    @transaction.atomic
    def move_content(self, content_id, new_column_id, new_order) -> Optional[Content]:
        """
        Move o cartão para ``new_column_id`` na posição ``new_order``

        Fecha o buraco na coluna de origem, abre espaço no destino e grava
        a nova posição. ``new_order`` é limitado a [0, n] onde n é a
        quantidade de cartões do destino sem o próprio cartão.
        """
        content = Content.objects.select_for_update().filter(id=content_id).first()
        if content is None:
            return None

        old_column_id = content.column_id
        old_order = content.order

        # Travar os cartões das duas colunas
        list(
            Content.objects
            .select_for_update()
            .filter(column_id__in={old_column_id, new_column_id})
            .values_list('id', flat=True)
        )

        destino = Content.objects.filter(column_id=new_column_id).exclude(id=content.id)
        new_order = max(0, min(int(new_order), destino.count()))

        # Origem: cartões acima da vaga liberada sobem uma posição
        (
            Content.objects
            .filter(column_id=old_column_id, order__gt=old_order)
            .exclude(id=content.id)
            .update(order=F('order') - 1)
        )

        # Destino: abre espaço a partir da posição de inserção
        (
            Content.objects
            .filter(column_id=new_column_id, order__gte=new_order)
            .exclude(id=content.id)
            .update(order=F('order') + 1)
        )

        content.column_id = new_column_id
        content.order = new_order
        content.save(update_fields=['column', 'order'])

        logger.info(
            f"🔀 Cartão {content.id} movido: coluna {old_column_id}#{old_order} "
            f"-> coluna {new_column_id}#{new_order}"
        )
        return self.get_content(content.id)

    @transaction.atomic
    def delete_content(self, content_id) -> bool:
        """Exclui o cartão (anexos em cascata) e compacta a coluna"""
        content = Content.objects.select_for_update().filter(id=content_id).first()
        if content is None:
            return False

        column_id, order = content.column_id, content.order
        content.delete()

        Content.objects.filter(column_id=column_id, order__gt=order).update(order=F('order') - 1)
        return True

    # === ANEXOS ===

    def get_attachments(self, content_id) -> List[Attachment]:
        return list(Attachment.objects.filter(content_id=content_id).order_by('created_at', 'id'))

    def get_attachment(self, attachment_id) -> Optional[Attachment]:
        return Attachment.objects.select_related('content__project').filter(id=attachment_id).first()

    def create_attachment(self, dados: Dict) -> Attachment:
        return Attachment.objects.create(**dados)

    def delete_attachment(self, attachment_id) -> bool:
        apagados, _ = Attachment.objects.filter(id=attachment_id).delete()
        return apagados > 0


# Instância global do access layer do quadro
board_storage = BoardStorage()
