from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from openspace_admin.config.loader import load_global_config
from openspace_admin.core.entity_registry import default_registry
from openspace_admin.services.session_service import ConsoleSessionManager, controller_factory_from_config
from openspace_admin.ui.config import AppConfig
from openspace_admin.ui.layout.build_layout import build_layout
from openspace_admin.ui.callbacks.callbacks_session import register_session_callbacks
from openspace_admin.ui.callbacks.callbacks_records import register_records_callbacks
from openspace_admin.ui.callbacks.callbacks_details import register_detail_callbacks
from openspace_admin.ui.callbacks.callbacks_notifications import register_notification_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Initialize Service Layer
    registry = default_registry()
    sessions = ConsoleSessionManager(
        registry,
        controller_factory_from_config(global_config),
    )

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        registry=registry,
        sessions=sessions,
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
        suppress_callback_exceptions=True,
    )

    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_session_callbacks(app, ctx)
    for profile in registry.all_profiles():
        register_records_callbacks(app, ctx, profile)
    register_detail_callbacks(app, ctx)
    register_notification_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "entities": [p.key for p in registry.all_profiles()]},
    )
    return app
