# app/core/exceptions.py
"""
Erros de domínio da API.

Os serviços levantam estas exceções; os handlers registrados em app.main
convertem cada uma em uma resposta JSON ``{"error": <mensagem>}``.
"""
from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    """Entrada ausente ou malformada."""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    """Violação da máquina de estados (ex: abrir dois caixas, fechar duas vezes)."""
    status_code = status.HTTP_400_BAD_REQUEST


class UpstreamError(AppError):
    """Falha no provedor de pagamentos (Asaas)."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class StoreError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
