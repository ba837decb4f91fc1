"""
Default configuration file.

Settings can be overridden by placing a copy of this file in a directory named 'instance', and editing that copy.
"""

# Host and port for the WSGI server
WSGI_HOST = "0.0.0.0"
WSGI_PORT = 9200

# Format used by cat actions when the client asks for none ("text", "json" or "yaml")
CAT_DEFAULT_FORMAT = "text"

# Plugins to load
PLUGINS = ["plugins.hello"]

# Plugin configuration
PLUGINS_CONFIG = {}
