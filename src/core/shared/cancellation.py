"""
Sinal de cancelamento cooperativo.

Use cases repassam o token aos colaboradores (repositórios, UoW),
que decidem se abortam antes de concluir a operação. O core não
implementa timeouts próprios.

Example:
    token = CancellationToken()
    task = asyncio.create_task(use_case.handle(input_dto, token))
    token.cancel()
"""

import asyncio


class CancellationToken:
    """Flag de cancelamento compartilhada entre chamador e colaboradores."""

    def __init__(self):
        self._cancelled = False

    @classmethod
    def none(cls) -> "CancellationToken":
        """Token que nunca é cancelado (equivalente a não passar token)."""
        return cls()

    def cancel(self) -> None:
        """Solicita cancelamento. Idempotente."""
        self._cancelled = True

    @property
    def is_cancellation_requested(self) -> bool:
        return self._cancelled

    def raise_if_cancellation_requested(self) -> None:
        """
        Interrompe a operação corrente se cancelamento foi solicitado.

        Raises:
            asyncio.CancelledError: Se cancel() já foi chamado
        """
        if self._cancelled:
            raise asyncio.CancelledError("Operation was cancelled")

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self._cancelled})"
