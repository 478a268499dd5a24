"""HTTP interface for updating persons."""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Sequence

from flask import Flask, Response, jsonify, request
from pymongo.errors import PyMongoError

from .config import ConfigError, connect_mongo
from .models import Persona
from .repository import MongoPersonaRepository
from .service import PersonaService

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080


def _text_error(message: str, status: int) -> Response:
    response = Response(message + "\n", status=status, mimetype="text/plain")
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response


def create_app(service: PersonaService) -> Flask:
    """Build the application around the given service."""
    app = Flask(__name__)

    @app.get("/")
    def index() -> Response:
        return Response(
            "Hola, desde la actualización de personas\n", mimetype="text/plain"
        )

    @app.put("/actualizar-personas/<documento>")
    def actualizar_persona(documento: str) -> Response:
        try:
            persona = Persona.from_dict(json.loads(request.get_data(as_text=True)))
        except ValueError:
            return _text_error("El formato del cuerpo es inválido", 400)
        try:
            service.update_persona(documento, persona)
        except Exception as exc:  # every failure is reported to the client
            return _text_error(str(exc), 400)
        return jsonify({"mensaje": "Persona actualizada exitosamente"})

    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Connect to MongoDB and serve the API."""
    parser = argparse.ArgumentParser(description="Servicio de actualización de personas")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    try:
        connection = connect_mongo()
    except (ConfigError, PyMongoError) as exc:
        logger.error("Error conectando a MongoDB: %s", exc)
        return 1

    with connection:
        app = create_app(PersonaService(MongoPersonaRepository(connection.collection)))
        print(f"Servidor escuchando en http://localhost:{args.port}")
        app.run(host=args.host, port=args.port)
    return 0