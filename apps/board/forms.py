# apps/board/forms.py

from django import forms

from apps.core.forms import ApiForm, CorField
from apps.core.models import Content, User


class ColumnForm(ApiForm):
    """POST /api/columns e PUT /api/columns/:id"""

    projectId = forms.IntegerField(min_value=1)
    name = forms.CharField(max_length=100)
    color = CorField()
    order = forms.IntegerField(min_value=0, required=False)


class ContentForm(ApiForm):
    """
    Cartão do quadro

    ``order`` não é aceito: a posição é definida pelo servidor.
    """

    title = forms.CharField(max_length=200)
    description = forms.CharField(required=False)
    type = forms.CharField(max_length=50)
    columnId = forms.IntegerField(min_value=1)
    projectId = forms.IntegerField(min_value=1)
    assignedTo = forms.ModelChoiceField(queryset=User.objects.all(), required=False)
    dueDate = forms.DateTimeField(required=False)
    priority = forms.ChoiceField(choices=Content.PRIORITY_CHOICES, required=False)
    progress = forms.IntegerField(min_value=0, max_value=100, required=False)

    def clean_description(self):
        return self.cleaned_data.get('description') or None

    def clean_priority(self):
        return self.cleaned_data.get('priority') or None

    def clean_progress(self):
        progress = self.cleaned_data.get('progress')
        return 0 if progress is None else progress


class ContentUpdateForm(ContentForm):
    """Atualização parcial: coluna e projeto só mudam via move"""

    def __init__(self, data=None, *args, **kwargs):
        super().__init__(data, *args, partial=True, **kwargs)
        self.fields.pop('columnId', None)
        self.fields.pop('projectId', None)


class MoveContentForm(ApiForm):
    """POST /api/contents/:id/move"""

    columnId = forms.IntegerField(min_value=1)
    order = forms.IntegerField()


class AttachmentForm(ApiForm):
    contentId = forms.IntegerField(min_value=1)
    name = forms.CharField(max_length=255)
    url = forms.CharField(max_length=2000)
