from __future__ import annotations

from flask import Flask

from palette_sync.synchroniser import PaletteSynchroniser


def create_app(
    synchroniser: PaletteSynchroniser,
    config: dict | None = None,
    extra: list[tuple[str, str]] | None = None,
) -> Flask:
    """Create and configure the Flask app serving one stylesheet's palette.

    *extra* swatches are added to the permissive legacy table.
    """
    app = Flask(__name__)
    app.config.update(config or {})

    app.extensions["synchroniser"] = synchroniser
    app.extensions["legacy_extra"] = list(extra or [])

    from palette_sync.web.routes.api import api_bp
    from palette_sync.web.routes.assets import assets_bp

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(assets_bp)

    return app
