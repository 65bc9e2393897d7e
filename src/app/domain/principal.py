"""Principal — identidade autenticada que executa a requisição."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from utils.errors import AuthenticationError

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class Principal:
    """Usuário autenticado; `uid` é o owner de tudo que ele cria."""

    uid: str
    email: str | None = None
    claims: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> Principal:
        """Cria Principal a partir das claims de um ID token decodificado.

        Raises:
            AuthenticationError: Se as claims não trazem um uid.
        """
        uid = claims.get("uid") or claims.get("sub")
        if not isinstance(uid, str) or not uid:
            raise AuthenticationError("missing_uid_claim")
        email = claims.get("email")
        return cls(uid=uid, email=email if isinstance(email, str) else None, claims=dict(claims))
