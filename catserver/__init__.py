import importlib
from pathlib import Path

from flask import Flask
from flask.blueprints import Blueprint
from flask_cors import CORS

from catserver import utils

# The version of this script
__version__ = "1.0.0"


def create_app(config_override=None):
    """Application factory, creating and configuring the Flask app."""

    app = Flask(__name__)

    # Enable CORS
    CORS(app, supports_credentials=True)

    # Load default config
    app.config.from_object("config")

    # Overwrite with instance config
    instance_config_path = Path(app.instance_path) / "config.py"
    if instance_config_path.is_file():
        app.config.from_pyfile(str(instance_config_path))
    else:
        print(f"Configure the server by copying config.py to '{app.instance_path}' and modifying that copy")

    if config_override is not None:
        app.config.update(config_override)

    # Register blueprints
    from .views import cat, info
    app.register_blueprint(cat.bp)
    app.register_blueprint(info.bp)

    # Load plugins
    cat_actions = []
    for plugin in app.config["PLUGINS"]:
        module = importlib.import_module(plugin)
        # Find all blueprints defined in module and register them
        for name in dir(module):
            v = getattr(module, name)
            if isinstance(v, Blueprint):
                app.register_blueprint(v)
                if isinstance(v, utils.Plugin):
                    cat_actions.extend(v.cat_actions)

    # Cat actions are listed under /_cat in the order they were registered
    app.extensions["cat_actions"] = cat_actions

    return app
