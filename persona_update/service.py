"""Validation and update rules for persons."""

from __future__ import annotations

from .models import Persona
from .repository import PersonaNotFoundError, PersonaRepository


class PersonaError(ValueError):
    """A request about a person cannot be carried out."""


def validate_persona(persona: Persona) -> None:
    """Raise PersonaError describing the first invalid field."""
    if not persona.documento.strip():
        raise PersonaError("el documento no puede estar vacío")
    if not persona.nombre.strip():
        raise PersonaError("el nombre no puede estar vacío")
    if not persona.apellido.strip():
        raise PersonaError("el apellido no puede estar vacío")
    if persona.edad <= 0:
        raise PersonaError("la edad debe ser un número entero mayor a 0")
    if not persona.correo.strip() or "@" not in persona.correo:
        raise PersonaError("el correo es inválido")
    if not persona.telefono.strip():
        raise PersonaError("el teléfono no puede estar vacío")
    if not persona.direccion.strip():
        raise PersonaError("la dirección no puede estar vacía")


class PersonaService:
    def __init__(self, repository: PersonaRepository) -> None:
        self.repository = repository

    def find_by_documento(self, documento: str) -> Persona:
        if not documento.strip():
            raise PersonaError("el documento no puede estar vacío")
        try:
            return self.repository.find_by_documento(documento)
        except PersonaNotFoundError:
            raise PersonaError("persona no encontrada") from None

    def update_persona(self, documento: str, persona: Persona) -> None:
        if not documento.strip():
            raise PersonaError("el documento no puede estar vacío")
        validate_persona(persona)
        try:
            self.repository.find_by_documento(documento)
        except PersonaNotFoundError:
            raise PersonaError("persona no encontrada") from None
        if persona.documento != documento:
            raise PersonaError("no se puede modificar el documento de una persona")
        self.repository.update(documento, persona)