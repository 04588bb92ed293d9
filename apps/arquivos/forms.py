# apps/arquivos/forms.py

from django import forms

from apps.core.forms import ApiForm


class FolderForm(ApiForm):
    """POST /api/folders"""

    projectId = forms.IntegerField(min_value=1)
    name = forms.CharField(max_length=255)
    parentId = forms.IntegerField(min_value=1, required=False)


class FolderRenameForm(ApiForm):
    name = forms.CharField(max_length=255)


class FileForm(ApiForm):
    """Metadados enviados pelo cliente depois do upload"""

    projectId = forms.IntegerField(min_value=1)
    filename = forms.CharField(max_length=255)
    originalFilename = forms.CharField(max_length=255)
    filepath = forms.CharField()
    mimetype = forms.CharField(max_length=255)
    size = forms.IntegerField(min_value=0)
    isPublic = forms.BooleanField(required=False)
    folderId = forms.IntegerField(min_value=1, required=False)


class FileUpdateForm(ApiForm):
    """Renomear, mover de pasta ou mudar visibilidade"""

    filename = forms.CharField(max_length=255)
    isPublic = forms.BooleanField(required=False)
    folderId = forms.IntegerField(min_value=1, required=False)

    def __init__(self, data=None, *args, **kwargs):
        super().__init__(data, *args, partial=True, **kwargs)
