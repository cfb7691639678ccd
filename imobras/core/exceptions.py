"""
Imobras - Domain Exceptions
Erros de validação, autenticação e acesso ao banco
"""
from typing import Optional


class ImobrasError(Exception):
    """Erro base do sistema"""
    status_code = 400

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ImobrasError):
    """Dado inválido detectado antes de chegar ao banco"""
    status_code = 422


class AuthError(ImobrasError):
    """Credenciais inválidas, cadastro duplicado ou sessão expirada"""
    status_code = 401


class StoreError(ImobrasError):
    """Falha no acesso ao banco (rede, permissão, registro inexistente)"""
    status_code = 503


class PermissionDeniedError(StoreError):
    """Acesso negado pela política de acesso"""
    status_code = 403


class NotFoundError(StoreError):
    """Registro inexistente ou fora do escopo do usuário"""
    status_code = 404
