import functools
import json
import sys
import time
import traceback
from abc import ABC, abstractmethod

from flask import Response, request
from flask import current_app as app
from flask.blueprints import Blueprint
from werkzeug.exceptions import HTTPException

from catserver import table as cat_table


def request_args():
    """Get the request parameters, either from a JSON body or from the query string and form data.

    Values from a JSON body are converted to strings, so that they are handled like query string parameters.
    """
    if request.is_json:
        args = request.get_json(silent=True)
        if isinstance(args, dict):
            # Query string parameters are still honored for JSON requests
            return {**request.args.to_dict(), **{k: _arg_string(v) for k, v in args.items() if v is not None}}
    return request.values.to_dict()


def _arg_string(value):
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return ",".join(_arg_string(v) for v in value)
    # Booleans become "true"/"false"
    return json.dumps(value)


def main_handler(generator):
    """Decorator wrapping JSON endpoints, handling errors and formatting.

    Global parameters are
     - callback: an identifier that the result should be wrapped in
     - indent: pretty-print the result with a specific indentation
     - debug: if set, return some extra information (for debugging)
    """
    @functools.wraps(generator)  # Copy original function's information, needed by Flask
    def decorated(*pargs, **kwargs):
        args = request_args()
        starttime = time.time()
        callback = args.get("callback")
        indent = None
        status = 200

        result = {}
        try:
            indent = int(args.get("indent", 0)) or None
            for response in generator(args, *pargs, **kwargs):
                result.update(response)
        except GeneratorExit:
            raise
        except Exception:
            exc = sys.exc_info()
            result = format_error(exc, args)
            status = error_status(exc[1])

        result["time"] = time.time() - starttime

        if callback:
            return Response(callback + "(" + json.dumps(result, indent=indent) + ")",
                            status=status, mimetype="application/javascript")
        return Response(json.dumps(result, indent=indent), status=status, mimetype="application/json")

    return decorated


def cat_handler(action):
    """Create a view function for a cat action.

    The action builds a table which is then rendered in the format the client asked for. Any error
    raised while building or rendering the table is turned into an error response.
    """
    def view():
        args = request_args()
        try:
            if parse_bool(args, "help", False):
                return cat_table.build_help_response(action.table_with_header(args))
            return cat_table.build_response(action.handle(args), args)
        except Exception:
            exc = sys.exc_info()
            app.logger.exception("Error in cat action %s", action.name)
            return error_response(exc, args)

    view.__name__ = action.name
    view.__doc__ = action.documentation()
    return view


def format_error(exc, args):
    """Format exception info for output to user."""
    error = {"ERROR": {"type": exc[0].__name__,
                       "value": str(exc[1])
                       }}
    if "debug" in args:
        error["ERROR"]["traceback"] = "".join(traceback.format_exception(*exc)).splitlines()
    return error


def error_status(exception):
    """Get the HTTP status code to use for an exception."""
    if isinstance(exception, HTTPException) and exception.code:
        return exception.code
    if isinstance(exception, (ValueError, KeyError)):
        return 400
    return 500


def error_response(exc, args):
    return Response(json.dumps(format_error(exc, args)), status=error_status(exc[1]),
                    mimetype="application/json")


def parse_bool(args, key, default=True):
    if default:
        return args.get(key, "").lower() != "false"
    else:
        return args.get(key, "").lower() == "true"


class CatAction(ABC):
    """Class to subclass when implementing a cat action.

    A cat action returns a table which is rendered as plain text, JSON or YAML depending on the request.
    Instances are registered on a route using Plugin.add_cat_action.
    """

    name = None

    @abstractmethod
    def handle(self, args) -> cat_table.Table:
        """Build the table for a request."""
        pass

    @abstractmethod
    def table_with_header(self, args) -> cat_table.Table:
        """Return a table with headers but no rows, used for the response as well as for help."""
        pass

    @staticmethod
    @abstractmethod
    def documentation() -> str:
        """Return the documentation line(s) listed under /_cat."""
        pass


class Plugin(Blueprint):
    """Flask's Blueprint with methods for accessing the plugin's configuration and
    registering cat actions."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.cat_actions = []

    def config(self, key, default=None):
        return app.config["PLUGINS_CONFIG"].get(self.import_name, {}).get(key, default)

    def add_cat_action(self, rule, action, methods=("GET",)):
        if not action.name:
            raise ValueError("Cat action %s has no name" % type(action).__name__)
        self.add_url_rule(rule, endpoint=action.name, view_func=cat_handler(action), methods=list(methods))
        self.cat_actions.append(action)
