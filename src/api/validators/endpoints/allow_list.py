"""Allow-list de usernames alvo das notificações."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


class AllowListChecker:
    """Confere se todos os usernames pedidos estão na allow-list.

    A allow-list é imutável após a construção. A ordem configurada é
    mantida apenas para exibição; a checagem é por pertinência.
    """

    def __init__(self, usernames: Iterable[str]) -> None:
        self._ordered = tuple(dict.fromkeys(usernames))
        self._allowed = frozenset(self._ordered)

    @property
    def usernames(self) -> tuple[str, ...]:
        return self._ordered

    def check(self, requested: Sequence[str]) -> bool:
        """True se todos os usernames pedidos são permitidos."""
        return all(username in self._allowed for username in requested)
