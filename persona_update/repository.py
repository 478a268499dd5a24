"""Storage of persons."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import pymongo

from .models import Persona

OPERATION_TIMEOUT_S = 5


class PersonaNotFoundError(LookupError):
    """No person is stored under the given document number."""


class PersonaRepository(ABC):
    @abstractmethod
    def find_by_documento(self, documento: str) -> Persona:
        """Return the person or raise PersonaNotFoundError."""

    @abstractmethod
    def update(self, documento: str, persona: Persona) -> None:
        """Overwrite the stored fields of the person."""


def _persona_from_document(document: dict[str, Any]) -> Persona:
    object_id = document.get("_id")
    return Persona.from_dict({**document, "id": str(object_id) if object_id else None})


class MongoPersonaRepository(PersonaRepository):
    """Repository backed by a MongoDB collection."""

    def __init__(self, collection: Any) -> None:
        self.collection = collection

    def find_by_documento(self, documento: str) -> Persona:
        with pymongo.timeout(OPERATION_TIMEOUT_S):
            document = self.collection.find_one({"documento": documento})
        if document is None:
            raise PersonaNotFoundError(documento)
        return _persona_from_document(document)

    def update(self, documento: str, persona: Persona) -> None:
        with pymongo.timeout(OPERATION_TIMEOUT_S):
            self.collection.update_one(
                {"documento": documento}, {"$set": persona.to_document()}
            )