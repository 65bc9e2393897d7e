"""Auth — verificação de identidade por provedor."""

from __future__ import annotations

from app.infra.auth.firebase_token_verifier import FirebaseTokenVerifier

__all__ = ["FirebaseTokenVerifier"]
