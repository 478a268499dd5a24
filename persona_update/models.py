"""The person record as it travels over HTTP and into MongoDB."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from bson import ObjectId

ZERO_OBJECT_ID = "0" * 24

_TEXT_FIELDS = ("documento", "nombre", "apellido", "correo", "telefono", "direccion")


def _parse_id(value: Any) -> str | None:
    if value is None or value == "":
        return None
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise ValueError(f"invalid object id: {value!r}")
    if value == ZERO_OBJECT_ID:
        return None
    return value.lower()


@dataclass
class Persona:
    """A person identified by their document number."""

    id: str | None = None
    documento: str = ""
    nombre: str = ""
    apellido: str = ""
    edad: int = 0
    correo: str = ""
    telefono: str = ""
    direccion: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Persona":
        """Build a person from decoded JSON; missing or null fields keep their defaults."""
        if not isinstance(data, Mapping):
            raise ValueError("a person must be a JSON object")

        values: dict[str, Any] = {}
        for name in _TEXT_FIELDS:
            value = data.get(name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise ValueError(f"field {name!r} must be a string")
            values[name] = value

        edad = data.get("edad")
        if edad is not None:
            if isinstance(edad, bool) or not isinstance(edad, int):
                raise ValueError("field 'edad' must be an integer")
            values["edad"] = edad

        return cls(id=_parse_id(data.get("id")), **values)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation."""
        return {
            "id": self.id or ZERO_OBJECT_ID,
            "documento": self.documento,
            "nombre": self.nombre,
            "apellido": self.apellido,
            "edad": self.edad,
            "correo": self.correo,
            "telefono": self.telefono,
            "direccion": self.direccion,
        }

    def to_document(self) -> dict[str, Any]:
        """Return the MongoDB representation; ``_id`` is left out when unset."""
        document: dict[str, Any] = {}
        if self.id:
            document["_id"] = ObjectId(self.id)
        document.update(
            documento=self.documento,
            nombre=self.nombre,
            apellido=self.apellido,
            edad=self.edad,
            correo=self.correo,
            telefono=self.telefono,
            direccion=self.direccion,
        )
        return document