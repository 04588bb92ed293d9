# apps/core/forms.py

import re

from django import forms
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError

from .exceptions import ValidationFailed
from .models import User


def camel_para_snake(nome: str) -> str:
    """displayName -> display_name"""
    return re.sub(r'(?<!^)(?=[A-Z])', '_', nome).lower()


class ApiForm(forms.Form):
    """
    Form base para corpos JSON da API

    Os campos usam os nomes camelCase do JSON. Com ``partial=True``
    (PUT/PATCH) só os campos presentes no corpo são validados.
    """

    def __init__(self, data=None, *args, partial=False, **kwargs):
        super().__init__(data, *args, **kwargs)
        self.partial = partial
        if partial and data is not None:
            for nome in list(self.fields):
                if nome not in data:
                    del self.fields[nome]

    def validar(self):
        """Devolve cleaned_data ou levanta ValidationFailed (400)"""
        if not self.is_valid():
            raise ValidationFailed.from_form(self)
        return self.cleaned_data

    def dados_model(self, excluir=()):
        """cleaned_data com os nomes de campo do model"""
        return {
            camel_para_snake(nome): valor
            for nome, valor in self.validar().items()
            if nome not in excluir
        }


class ListaIdsField(forms.Field):
    """Lista JSON de ids inteiros (ex: memberIds)"""

    def to_python(self, value):
        if value in (None, ''):
            return []
        if not isinstance(value, (list, tuple)):
            raise ValidationError("Expected a list of ids")
        ids = []
        for item in value:
            if isinstance(item, bool):
                raise ValidationError("Expected a list of ids")
            try:
                ids.append(int(item))
            except (TypeError, ValueError):
                raise ValidationError("Expected a list of ids")
        return ids

    def validate(self, value):
        if self.required and not value:
            raise ValidationError(self.error_messages['required'], code='required')


class ListaTextosField(forms.Field):
    """Lista JSON de strings (ex: tags)"""

    def to_python(self, value):
        if value in (None, ''):
            return []
        if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
            raise ValidationError("Expected a list of strings")
        return [v.strip() for v in value if v.strip()]


class CorField(forms.RegexField):
    """Cor hexadecimal #RRGGBB"""

    def __init__(self, **kwargs):
        super().__init__(regex=r'^#[0-9A-Fa-f]{6}$', max_length=7, **kwargs)


# === AUTENTICAÇÃO ===

class RegisterForm(ApiForm):
    """Auto-cadastro (POST /api/auth/register)"""

    username = forms.RegexField(regex=r'^[\w.@+-]+$', min_length=3, max_length=150)
    password = forms.CharField(min_length=6, max_length=128, strip=False)
    displayName = forms.CharField(max_length=150)
    email = forms.EmailField()
    avatarInitials = forms.CharField(max_length=4, required=False)
    avatarColor = CorField(required=False)

    def clean_password(self):
        password = self.cleaned_data['password']
        try:
            validate_password(password)
        except ValidationError as exc:
            raise ValidationError(exc.messages[0])
        return password


class LoginForm(ApiForm):
    """Login por username ou email"""

    username = forms.CharField(max_length=254)
    password = forms.CharField(strip=False)


# === USUÁRIOS ===

class UserCreateForm(RegisterForm):
    """Cadastro feito por um admin, com papel explícito"""

    role = forms.ChoiceField(choices=User.ROLE_CHOICES, required=False)

    def clean_username(self):
        username = self.cleaned_data['username']
        if User.objects.filter(username=username).exists():
            raise ValidationError("Username already exists")
        return username

    def clean_email(self):
        email = self.cleaned_data['email']
        if User.objects.filter(email__iexact=email).exists():
            raise ValidationError("Email already exists")
        return email


class UserUpdateForm(ApiForm):
    """Atualização parcial de usuário (admin)"""

    displayName = forms.CharField(max_length=150)
    email = forms.EmailField()
    role = forms.ChoiceField(choices=User.ROLE_CHOICES)
    avatarInitials = forms.CharField(max_length=4)
    avatarColor = CorField()

    def __init__(self, data=None, *args, instance=None, **kwargs):
        self.instance = instance
        super().__init__(data, *args, partial=True, **kwargs)

    def clean_email(self):
        email = self.cleaned_data['email']
        existe = User.objects.filter(email__iexact=email)
        if self.instance is not None:
            existe = existe.exclude(id=self.instance.id)
        if existe.exists():
            raise ValidationError("Email already exists")
        return email


# === PROJETOS ===

class ProjectForm(ApiForm):
    """Criação/edição de projeto"""

    name = forms.CharField(max_length=200)
    description = forms.CharField(required=False)
    type = forms.CharField(max_length=50)
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


class ProjectMemberForm(ApiForm):
    """POST /api/projects/:id/members"""

    userId = forms.IntegerField(min_value=1)
