# apps/youtube/forms.py

from django import forms

from apps.core.forms import ApiForm, ListaTextosField
from .models import YoutubeVideo


class TagsField(ListaTextosField):
    """Lista de tags; aceita também "a, b, c" """

    def to_python(self, value):
        if isinstance(value, str):
            value = value.split(',')
        return super().to_python(value)


class YoutubeVideoForm(ApiForm):
    title = forms.CharField(max_length=100)
    description = forms.CharField(required=False, empty_value=None)
    tags = TagsField(required=False)
    thumbnailUrl = forms.CharField(required=False, empty_value=None)
    videoUrl = forms.CharField(required=False, empty_value=None)
    visibility = forms.ChoiceField(choices=YoutubeVideo.VISIBILITY_CHOICES, required=False)
    category = forms.CharField(max_length=100, required=False, empty_value=None)
    playlist = forms.CharField(max_length=200, required=False, empty_value=None)
    scheduledPublishTime = forms.DateTimeField(required=False)

    def clean_visibility(self):
        return self.cleaned_data.get('visibility') or 'private'


class YoutubeVideoCreateForm(YoutubeVideoForm):
    """POST /api/youtube-videos traz o projeto no corpo"""

    projectId = forms.IntegerField(min_value=1)
