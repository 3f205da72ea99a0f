from __future__ import annotations

from flask import Blueprint, Response, current_app

from palette_sync.errors import ParseError

assets_bp = Blueprint("assets", __name__)


@assets_bp.errorhandler(ParseError)
def parse_error(exc: ParseError):
    message = str(exc).replace("*/", "* /")
    return Response(f"/* {message} */\n", status=500, mimetype="text/css")


@assets_bp.route("/palette.css")
def palette_css():
    """Color helper classes for the palette."""
    sync = current_app.extensions["synchroniser"]
    return Response(sync.css_classes(), mimetype="text/css")
