"""MongoDB connection settings read from the environment."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pymongo import MongoClient

logger = logging.getLogger(__name__)

CONNECT_TIMEOUT_MS = 10_000


class ConfigError(Exception):
    """Required configuration is missing."""


@dataclass(frozen=True)
class MongoSettings:
    uri: str
    database: str
    collection: str

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "MongoSettings":
        """Read MONGO_URI, MONGO_DB and COLLECTION_NAME."""
        env = os.environ if environ is None else environ
        uri = env.get("MONGO_URI", "")
        database = env.get("MONGO_DB", "")
        collection = env.get("COLLECTION_NAME", "")
        if not uri or not database or not collection:
            raise ConfigError(
                "faltan variables de entorno: MONGO_URI, MONGO_DB o COLLECTION_NAME"
            )
        return cls(uri=uri, database=database, collection=collection)


@dataclass
class MongoConnection:
    """An open client together with the collection it serves."""

    client: Any
    collection: Any

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
            self.client = None

    def __enter__(self) -> "MongoConnection":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def connect_mongo(environ: Mapping[str, str] | None = None) -> MongoConnection:
    """Connect, confirm with a ping and return the configured collection."""
    settings = MongoSettings.from_env(environ)
    client: MongoClient = MongoClient(
        settings.uri,
        serverSelectionTimeoutMS=CONNECT_TIMEOUT_MS,
        connectTimeoutMS=CONNECT_TIMEOUT_MS,
    )
    try:
        client.admin.command("ping")
    except Exception:
        client.close()
        raise
    collection = client[settings.database][settings.collection]
    logger.info("Conectado a MongoDB correctamente.")
    return MongoConnection(client=client, collection=collection)