# apps/roteiros/forms.py

from django import forms
from django.core.exceptions import ValidationError

from apps.core.forms import ApiForm


class ListaObjetosField(forms.Field):
    """Lista JSON de objetos (correlações, linhas da planilha)"""

    def to_python(self, value):
        if value in (None, ''):
            return []
        if not isinstance(value, list) or not all(isinstance(v, dict) for v in value):
            raise ValidationError("Expected a list of objects")
        return value


class ScriptDataForm(ApiForm):
    """POST/PUT /api/projects/:id/script-data"""

    scriptContent = forms.CharField(required=False, strip=False)
    finalContent = forms.CharField(required=False, strip=False, empty_value=None)
    correlations = ListaObjetosField(required=False)
    spreadsheetData = ListaObjetosField(required=False)


class CorrelationForm(ApiForm):
    """POST /api/projects/:id/script-data/correlations"""

    text = forms.CharField(strip=False)
    shotNumber = forms.IntegerField(min_value=1)


class PublishedFinalForm(ApiForm):
    title = forms.CharField(max_length=200)
    content = forms.CharField(strip=False)
