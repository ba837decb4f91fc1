from flask import Blueprint, Response
from flask import current_app as app

bp = Blueprint("cat", __name__)


@bp.route("/_cat", methods=["GET"])
def cat_index():
    """List the documentation of all registered cat actions."""
    docs = ["=^.^=\n"]
    for action in app.extensions.get("cat_actions", []):
        docs.append(action.documentation())
    return Response("".join(docs), mimetype="text/plain")
