"""Exceções compartilhadas entre gateway, conectores e bootstrap."""

from __future__ import annotations


class GatewayError(RuntimeError):
    """Base para falhas tratadas na borda do gateway."""


class InvalidRequestError(GatewayError):
    """Requisição de entrada malformada (campo ausente, JSON inválido, método).

    Attributes:
        reason: Mensagem legível devolvida ao chamador.
        status_code: Status HTTP da resposta (400 por padrão, 405 para método).
    """

    def __init__(self, reason: str, status_code: int = 400) -> None:
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code
