# apps/chat/forms.py

from django import forms
from django.core.exceptions import ValidationError

from apps.core.forms import ApiForm, ListaIdsField
from apps.core.models import User


class ChannelForm(ApiForm):
    """POST /api/chat/channels"""

    name = forms.CharField(max_length=100)
    description = forms.CharField(required=False)
    isPrivate = forms.BooleanField(required=False)
    memberIds = ListaIdsField(required=False)

    def clean_description(self):
        return self.cleaned_data.get('description') or None

    def clean_memberIds(self):
        ids = self.cleaned_data.get('memberIds') or []
        encontrados = set(User.objects.filter(id__in=ids).values_list('id', flat=True))
        faltando = [i for i in ids if i not in encontrados]
        if faltando:
            raise ValidationError(f"Unknown user ids: {faltando}")
        return ids


class DirectChannelForm(ApiForm):
    otherUserId = forms.IntegerField(min_value=1)


class ChannelMemberForm(ApiForm):
    userId = forms.IntegerField(min_value=1)
    isAdmin = forms.BooleanField(required=False)
