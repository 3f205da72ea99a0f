from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from palette_sync.errors import ParseError
from palette_sync.synchroniser import PaletteSynchroniser

api_bp = Blueprint("api", __name__)


def _synchroniser() -> PaletteSynchroniser:
    return current_app.extensions["synchroniser"]


@api_bp.after_request
def add_cors_headers(response):
    """Allow editor pages on other origins to read the palette."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET, OPTIONS"
    return response


@api_bp.errorhandler(ParseError)
def parse_error(exc: ParseError):
    """No palette could be derived and none was cached."""
    return jsonify({"error": str(exc), "line": exc.line, "column": exc.column}), 500


def _disabled(surface: str):
    return jsonify({"error": f"{surface} synchronisation is disabled"}), 404


@api_bp.route("/palette")
def palette():
    """Block-editor palette registration."""
    sync = _synchroniser()
    if not sync.config.enabled("blocks"):
        return _disabled("blocks")
    return jsonify({
        "palette": sync.editor_palette(),
        "disable_custom_colors": sync.config.strict,
    })


@api_bp.route("/palette/legacy")
def legacy_palette():
    """Legacy toolbar options: textcolor_map, textcolor_rows, textcolor_cols."""
    sync = _synchroniser()
    if not sync.config.enabled("legacy"):
        return _disabled("legacy")
    result = sync.legacy_palette(extra=current_app.extensions["legacy_extra"])
    data = result.to_dict()
    # The color picker plugin is withdrawn when choices are restricted.
    data["colorpicker"] = not sync.config.strict
    return jsonify(data)


@api_bp.route("/palette/client")
def client_settings():
    """Settings for the client-side color widget."""
    sync = _synchroniser()
    if not sync.config.enabled("acf"):
        return _disabled("acf")
    return jsonify(sync.client_settings())


@api_bp.route("/palette/refresh", methods=["POST"])
def refresh():
    """Rescan the stylesheet now, ignoring the cache."""
    sync = _synchroniser()
    palette = sync.refresh(force=True)
    return jsonify({"colors": len(palette), "slugs": list(palette.slugs)})
