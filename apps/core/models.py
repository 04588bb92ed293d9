# apps/core/models.py

from django.contrib.auth.models import AbstractUser
from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator

from .utils import gerar_iniciais, gerar_cor_usuario


class User(AbstractUser):
    """
    Usuário do Claquete

    Além das credenciais, guarda o nome de exibição e o avatar
    (iniciais + cor) usados pelo quadro e pelo chat.
    """

    ROLE_CHOICES = [
        ('admin', 'Administrador'),
        ('producer', 'Produtor'),
        ('actor', 'Ator'),
        ('employed', 'Colaborador'),
    ]

    email = models.EmailField(unique=True)
    display_name = models.CharField(max_length=150)
    avatar_initials = models.CharField(max_length=4, blank=True)
    avatar_color = models.CharField(max_length=7, blank=True)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default='employed')

    class Meta:
        db_table = 'users'
        ordering = ['display_name', 'id']

    def save(self, *args, **kwargs):
        """Preenche o avatar a partir do nome quando não informado"""
        if not self.display_name:
            self.display_name = self.username
        if not self.avatar_initials:
            self.avatar_initials = gerar_iniciais(self.display_name)
        if not self.avatar_color:
            self.avatar_color = gerar_cor_usuario(self.username)
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.display_name} (@{self.username})"


class Project(models.Model):
    """Projeto de produção - agrega colunas, roteiro, arquivos e agenda"""

    name = models.CharField(max_length=200)
    description = models.TextField(null=True, blank=True)
    type = models.CharField(max_length=50)
    created_by = models.ForeignKey(
        User,
        on_delete=models.PROTECT,
        related_name='created_projects'
    )
    members = models.ManyToManyField(
        User,
        through='ProjectMember',
        related_name='projects'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'projects'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.name


class ProjectMember(models.Model):
    """Vínculo usuário/projeto - sem papel por projeto"""

    project = models.ForeignKey(Project, on_delete=models.CASCADE)
    user = models.ForeignKey(User, on_delete=models.CASCADE)

    class Meta:
        db_table = 'project_members'
        unique_together = ['project', 'user']

    def __str__(self):
        return f"{self.user.username} @ {self.project.name}"


class Column(models.Model):
    """Coluna do quadro Kanban do projeto"""

    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name='columns'
    )
    name = models.CharField(max_length=100)
    color = models.CharField(max_length=7, default='#6B7280')
    order = models.IntegerField(default=0)

    class Meta:
        db_table = 'columns'
        ordering = ['order', 'id']

    def __str__(self):
        return f"{self.name} ({self.project.name})"


class Content(models.Model):
    """
    Cartão do quadro (vídeo, roteiro, pitch...)

    ``order`` é a posição dentro da coluna; a sequência 0..n-1 é mantida
    pelo access layer (create/move/delete).
    """

    PRIORITY_CHOICES = [
        ('low', '🟢 Baixa'),
        ('medium', '🟡 Média'),
        ('high', '🔴 Alta'),
    ]

    title = models.CharField(max_length=200)
    description = models.TextField(null=True, blank=True)
    type = models.CharField(max_length=50)
    column = models.ForeignKey(
        Column,
        on_delete=models.CASCADE,
        related_name='contents'
    )
    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name='contents'
    )
    assigned_to = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='assigned_contents'
    )
    due_date = models.DateTimeField(null=True, blank=True)
    priority = models.CharField(max_length=20, choices=PRIORITY_CHOICES, null=True, blank=True)
    progress = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0), MaxValueValidator(100)]
    )
    order = models.IntegerField(default=0)
    created_by = models.ForeignKey(
        User,
        on_delete=models.PROTECT,
        related_name='created_contents'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'contents'
        ordering = ['order', 'id']
        indexes = [
            models.Index(fields=['column', 'order'], name='contents_column_order_idx'),
        ]

    def __str__(self):
        return f"{self.title} [{self.column.name} #{self.order}]"


class Attachment(models.Model):
    """Link anexado a um cartão"""

    content = models.ForeignKey(
        Content,
        on_delete=models.CASCADE,
        related_name='attachments'
    )
    name = models.CharField(max_length=255)
    url = models.TextField()
    created_by = models.ForeignKey(
        User,
        on_delete=models.PROTECT,
        related_name='attachments'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'attachments'
        ordering = ['created_at', 'id']

    def __str__(self):
        return self.name
