from flask import Blueprint
from flask import current_app as app

import catserver
from catserver import utils

bp = Blueprint("info", __name__)


@bp.route("/")
@bp.route("/info", methods=["GET", "POST"])
@utils.main_handler
def info(_args):
    """Get version information and the list of loaded plugins and cat actions."""
    yield {
        "version": catserver.__version__,
        "plugins": list(app.config["PLUGINS"]),
        "cat_actions": [action.name for action in app.extensions.get("cat_actions", [])]
    }
