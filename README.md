# persona-update

A small HTTP service that updates person records ("personas") stored in a
MongoDB collection.

## Installation

```
pip install .
```

## Configuration

The service reads its MongoDB settings from the environment. All three are
required:

| Variable          | Meaning                                  |
|-------------------|------------------------------------------|
| `MONGO_URI`       | Connection string, e.g. `mongodb://localhost:27017` |
| `MONGO_DB`        | Database name                            |
| `COLLECTION_NAME` | Collection holding the persona documents |

`MongoSettings.from_env()` raises `ConfigError` if any of them is missing or
empty. `connect_mongo()` reads the settings, connects, checks the connection
with a `ping` and returns a `MongoConnection` holding the client and the
collection. The connection can be used as a context manager and is closed
with `close()`.

## Running

```
persona-update
```

Options:

- `--host`: address to bind, default `0.0.0.0`.
- `--port`: port to listen on, default `8080`.

If the configuration is missing or MongoDB cannot be reached, the error is
logged and the command exits with status 1.

The server exposes:

- `GET /`: a plain-text greeting.
- `PUT /actualizar-personas/<documento>`: replaces the stored data of the
  persona with that document number.

### Updating a persona

The request body is a JSON object:

```json
{
  "documento": "123",
  "nombre": "Juan",
  "apellido": "Pérez",
  "edad": 30,
  "correo": "juan@example.com",
  "telefono": "0000",
  "direccion": "Calle Falsa 123"
}
```

An optional `id` field may hold a 24-character hexadecimal object id. Fields
that are missing or `null` are taken as empty (or 0 for `edad`); text fields
must be strings and `edad` an integer, otherwise the body is rejected as
malformed.

The update is then checked in this order:

1. the document number in the URL is not blank;
2. `documento`, `nombre` and `apellido` are not blank, `edad` is greater
   than 0, `correo` is not blank and contains `@`, and `telefono` and
   `direccion` are not blank;
3. a persona with that document number exists;
4. `documento` in the body matches the one in the URL, since a document
   number cannot be changed.

On success the response is:

```json
{"mensaje": "Persona actualizada exitosamente"}
```

A malformed body is answered with status 400 and the text
`El formato del cuerpo es inválido`. A validation failure, an unknown persona
or a database error is answered with status 400 and the error message as a
plain-text body.

## Using it as a library

```python
from persona_update.config import connect_mongo
from persona_update.repository import MongoPersonaRepository
from persona_update.service import PersonaService
from persona_update.app import create_app

connection = connect_mongo()
service = PersonaService(MongoPersonaRepository(connection.collection))
app = create_app(service)
```

- `persona_update.models.Persona` is a dataclass with `from_dict`, `to_dict`
  (the JSON form) and `to_document` (the MongoDB form, without `_id` when no
  id is set).
- `persona_update.service.validate_persona(persona)` raises `PersonaError`
  naming the first invalid field.
- `PersonaService.update_persona(documento, persona)` and
  `PersonaService.find_by_documento(documento)` raise `PersonaError` with a
  descriptive message when the request cannot be fulfilled.
- `PersonaRepository` is the abstract base for storage, with
  `find_by_documento` (raising `PersonaNotFoundError` when nothing is stored)
  and `update`. `MongoPersonaRepository` implements it over a MongoDB
  collection; any other implementation can stand in for it, which makes the
  service easy to test.

## What it does not do

The service only updates existing personas. It has no endpoints to create,
list, fetch or delete them; records must already be in the collection.

## Tests

```
pip install ".[test]"
pytest
```