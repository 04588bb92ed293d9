# apps/roteiros/models.py

from django.conf import settings
from django.db import models

from apps.core.models import Project


class ScriptData(models.Model):
    """
    Roteiro do projeto (um por projeto)

    correlations: lista de ``{textId, shotNumber, text}``
    spreadsheet_data: linhas da decupagem ``{id, generalData, shotNumber,
    shotData1..shotData4, hasCorrelation}``
    """

    project = models.OneToOneField(
        Project,
        on_delete=models.CASCADE,
        related_name='script_data'
    )
    script_content = models.TextField()
    final_content = models.TextField(null=True, blank=True)
    correlations = models.JSONField(default=list)
    spreadsheet_data = models.JSONField(default=list)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='script_data'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'script_data'

    def __str__(self):
        return f"Roteiro de {self.project}"


class PublishedFinal(models.Model):
    """Versão final publicada do roteiro (versão 1..n por projeto)"""

    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name='published_finals'
    )
    title = models.CharField(max_length=200)
    content = models.TextField()
    version = models.PositiveIntegerField()
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='published_finals'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'published_finals'
        ordering = ['-version']
        unique_together = ['project', 'version']

    def __str__(self):
        return f"{self.title} v{self.version}"
