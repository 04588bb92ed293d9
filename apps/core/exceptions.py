# apps/core/exceptions.py

"""
Erros da API JSON

Cada erro carrega o status HTTP e a mensagem devolvida no corpo
``{"message": ...}``. O ApiErrorMiddleware faz a conversão.
"""


class ApiError(Exception):
    """Base dos erros que viram resposta JSON"""

    status_code = 500
    default_message = "Server error"

    def __init__(self, message=None, errors=None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)

    def as_dict(self):
        corpo = {'message': self.message}
        if self.errors:
            corpo['errors'] = self.errors
        return corpo


class ValidationFailed(ApiError):
    status_code = 400
    default_message = "Invalid request"

    @classmethod
    def from_form(cls, form):
        """Monta o erro a partir de um Django form inválido"""
        errors = form.errors.get_json_data()
        campo, lista = next(iter(errors.items()))
        prefixo = '' if campo == '__all__' else f"{campo}: "
        return cls(f"{prefixo}{lista[0]['message']}", errors={
            nome: [e['message'] for e in erros] for nome, erros in errors.items()
        })


class NotAuthenticated(ApiError):
    status_code = 401
    default_message = "Unauthorized"


class Forbidden(ApiError):
    status_code = 403
    default_message = "Forbidden"


class NotFound(ApiError):
    status_code = 404
    default_message = "Not found"
