# apps/arquivos/models.py

from django.conf import settings
from django.db import models

from apps.core.models import Project


class ProjectFolder(models.Model):
    """Pasta do projeto; ``parent`` nulo = pasta na raiz"""

    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name='folders'
    )
    name = models.CharField(max_length=255)
    parent = models.ForeignKey(
        'self',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='subfolders'
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='project_folders'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'project_folders'
        ordering = ['name', 'id']

    def __str__(self):
        return self.name


class ProjectFile(models.Model):
    """
    Metadados de um arquivo do projeto

    O conteúdo fica fora do banco; ``filepath`` aponta para ele.
    """

    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name='files'
    )
    filename = models.CharField(max_length=255)
    original_filename = models.CharField(max_length=255)
    filepath = models.TextField()
    mimetype = models.CharField(max_length=255)
    size = models.BigIntegerField()
    is_public = models.BooleanField(default=False)
    folder = models.ForeignKey(
        ProjectFolder,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='files'
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='project_files'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'project_files'
        ordering = ['filename', 'id']

    def __str__(self):
        return self.filename
