from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from persona_update.models import Persona
from persona_update.repository import PersonaNotFoundError, PersonaRepository
from persona_update.service import PersonaError, PersonaService, validate_persona

LAURA = Persona(
    documento="123",
    nombre="Laura",
    apellido="Gomez",
    edad=25,
    correo="laura@example.com",
    telefono="555-1234",
    direccion="Calle Falsa 123",
)


@pytest.fixture
def repo():
    return MagicMock(spec=PersonaRepository)


@pytest.fixture
def service(repo):
    return PersonaService(repo)


def test_buscar_exito(repo, service):
    juan = Persona(
        documento="123",
        nombre="Juan",
        apellido="Pérez",
        edad=30,
        correo="juan@example.com",
        telefono="1234567890",
        direccion="Calle 123",
    )
    repo.find_by_documento.return_value = juan
    assert service.find_by_documento("123").nombre == "Juan"
    repo.find_by_documento.assert_called_once_with("123")


def test_buscar_vacio(repo, service):
    with pytest.raises(PersonaError) as info:
        service.find_by_documento("")
    assert str(info.value) == "el documento no puede estar vacío"
    repo.find_by_documento.assert_not_called()


def test_buscar_no_encontrado(repo, service):
    repo.find_by_documento.side_effect = PersonaNotFoundError("999")
    with pytest.raises(PersonaError) as info:
        service.find_by_documento("999")
    assert str(info.value) == "persona no encontrada"


def test_buscar_error_base_de_datos(repo, service):
    repo.find_by_documento.side_effect = RuntimeError("error de base de datos")
    with pytest.raises(RuntimeError) as info:
        service.find_by_documento("123")
    assert str(info.value) == "error de base de datos"


def test_modificar_exito(repo, service):
    repo.find_by_documento.return_value = LAURA
    service.update_persona("123", LAURA)
    repo.find_by_documento.assert_called_once_with("123")
    repo.update.assert_called_once_with("123", LAURA)


def test_modificar_documento_vacio(service):
    with pytest.raises(PersonaError, match="^el documento no puede estar vacío$"):
        service.update_persona("", LAURA)


def test_modificar_validacion_incorrecta(repo, service):
    with pytest.raises(PersonaError, match="^el nombre no puede estar vacío$"):
        service.update_persona("123", replace(LAURA, nombre=""))
    repo.update.assert_not_called()


def test_modificar_cambio_de_documento(repo, service):
    repo.find_by_documento.return_value = LAURA
    with pytest.raises(PersonaError, match="^no se puede modificar el documento de una persona$"):
        service.update_persona("123", replace(LAURA, documento="456"))
    repo.update.assert_not_called()


def test_modificar_persona_no_existe(repo, service):
    repo.find_by_documento.side_effect = PersonaNotFoundError("123")
    with pytest.raises(PersonaError, match="^persona no encontrada$"):
        service.update_persona("123", LAURA)
    repo.update.assert_not_called()


def test_modificar_falla_actualizacion(repo, service):
    repo.find_by_documento.return_value = LAURA
    repo.update.side_effect = RuntimeError("error al actualizar")
    with pytest.raises(RuntimeError, match="^error al actualizar$"):
        service.update_persona("123", LAURA)


@pytest.mark.parametrize(
    "changes, message",
    [
        ({"documento": "  "}, "el documento no puede estar vacío"),
        ({"apellido": ""}, "el apellido no puede estar vacío"),
        ({"edad": 0}, "la edad debe ser un número entero mayor a 0"),
        ({"correo": "sin-arroba"}, "el correo es inválido"),
        ({"correo": " "}, "el correo es inválido"),
        ({"telefono": ""}, "el teléfono no puede estar vacío"),
        ({"direccion": ""}, "la dirección no puede estar vacía"),
    ],
)
def test_validate_persona_reports_field(changes, message):
    with pytest.raises(PersonaError) as info:
        validate_persona(replace(LAURA, **changes))
    assert str(info.value) == message


def test_validate_persona_reports_first_problem():
    with pytest.raises(PersonaError) as info:
        validate_persona(Persona())
    assert str(info.value) == "el documento no puede estar vacío"