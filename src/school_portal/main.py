from __future__ import annotations

import importlib
import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .config import get_settings_module
from .container import Container, build_container
from .dashboard.controller import register as register_dashboard
from .documents.controller import register as register_documents
from .fees.controller import register as register_fees
from .leave.controller import register as register_leave
from .requests.controller import register as register_requests

logger = logging.getLogger(__name__)


def create_app(*, container: Optional[Container] = None, **overrides: Any) -> Flask:
    """Application factory.

    ``container`` replaces the one built from settings (tests pass one wired to
    a fake backend); ``overrides`` are applied on top of the settings module.
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    def setting(name: str, default: Any = None) -> Any:
        return overrides.get(name, getattr(settings, name, default))

    app.secret_key = setting("SECRET_KEY")
    app.config["DEBUG"] = bool(setting("DEBUG", False))
    app.config["TESTING"] = bool(setting("TESTING", False))
    app.config["API_BASE_URL"] = setting("API_BASE_URL")

    logging.basicConfig(
        level=getattr(logging, str(setting("LOG_LEVEL", "INFO")).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("starting school portal (settings=%s, api=%s)", settings_module, app.config["API_BASE_URL"])

    if container is None:
        container = build_container(
            api_base_url=setting("API_BASE_URL"),
            api_timeout=float(setting("API_TIMEOUT")),
            weekly_holidays=setting("WEEKLY_HOLIDAYS"),
            payment_currency=setting("PAYMENT_CURRENCY"),
            upload_handler_path=setting("UPLOAD_HANDLER_PATH"),
        )
    app.extensions["school_portal"] = container

    register_auth(app, container)
    register_dashboard(app, container)
    register_attendance(app, container)
    register_leave(app, container)
    register_requests(app, container)
    register_fees(app, container)
    register_documents(app, container)

    return app
