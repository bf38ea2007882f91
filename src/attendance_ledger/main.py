from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container, make_segment_provider
from .core.constants import DEFAULT_MAX_RECORD_SIZE
from .core.enums import ErrorKind, StorageBackend
from .core.exceptions import DomainError, StorageError
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "database" / "schema.sql"

_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.ALREADY_EXISTS: 409,
    ErrorKind.VALIDATION: 400,
}


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify(e.to_dict()), _STATUS_BY_KIND.get(e.kind, 400)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({e.name.replace(" ", ""): {"msg": e.description}}), e.code

    @app.errorhandler(StorageError)
    def handle_storage_error(e: StorageError):
        logger.exception("storage fault: %s", e)
        return jsonify({"StorageError": {"msg": "Storage failure"}}), 500


def _container_from_settings(settings) -> Container:
    backend = StorageBackend(getattr(settings, "STORAGE_BACKEND", StorageBackend.FILE.value))
    db_config = getattr(settings, "DB_CONFIG", None)

    if backend == StorageBackend.MYSQL and bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=SCHEMA_PATH)
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

    provider = make_segment_provider(
        backend=backend,
        data_dir=getattr(settings, "DATA_DIR", None),
        db_config=db_config,
    )
    return build_container(
        provider,
        max_record_size=int(getattr(settings, "MAX_RECORD_SIZE", DEFAULT_MAX_RECORD_SIZE)),
        strict_employee_create=bool(getattr(settings, "EMPLOYEE_STRICT_CREATE", False)),
    )


def create_app(container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info(
        "settings=%s backend=%s",
        settings_module,
        getattr(settings, "STORAGE_BACKEND", StorageBackend.FILE.value),
    )

    if container is None:
        container = _container_from_settings(settings)
    app.extensions["attendance_ledger"] = container

    _register_error_handlers(app)
    register_attendance(app, container)
    register_employees(app, container)

    return app
