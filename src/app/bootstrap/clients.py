"""Factories de clientes externos — Firestore e Firebase Admin."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from config.settings import get_firebase_settings, get_firestore_settings

if TYPE_CHECKING:
    from firebase_admin import App
    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)

FIREBASE_APP_NAME = "notify-endpoints"


# ──────────────────────────────────────────────────────────────────────────────
# Firestore Client Factory
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def create_firestore_client() -> FirestoreClient:
    """Cria cliente Firestore (singleton).

    Returns:
        Cliente Firestore para o projeto/database configurados
    """
    from google.cloud import firestore

    settings = get_firestore_settings()
    client = firestore.Client(project=settings.project_id or None, database=settings.database)
    logger.info(
        "firestore_client_created",
        extra={"project": settings.project_id, "database": settings.database},
    )
    return client


# ──────────────────────────────────────────────────────────────────────────────
# Firebase Admin App Factory
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def create_firebase_app() -> App:
    """Inicializa o app do Firebase Admin (singleton).

    Usa FIREBASE_CREDENTIALS_FILE quando definido; caso contrário,
    Application Default Credentials.
    """
    import firebase_admin
    from firebase_admin import credentials

    settings = get_firebase_settings()
    if settings.credentials_file:
        credential = credentials.Certificate(settings.credentials_file)
    else:
        credential = credentials.ApplicationDefault()

    options = {"projectId": settings.project_id} if settings.project_id else None
    app = firebase_admin.initialize_app(credential, options, name=FIREBASE_APP_NAME)
    logger.info("firebase_app_created", extra={"project": settings.project_id})
    return app
