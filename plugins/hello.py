"""Example of adding a cat action with a plugin.

Enable and configure by updating the configuration as follows:

PLUGINS = ["plugins.hello"]

PLUGINS_CONFIG = {
    "plugins.hello": {
        "default_message": "Hello World"
    }
}
"""

from catserver.table import Table
from catserver.utils import CatAction, Plugin

bp = Plugin("hello", __name__)

DEFAULT_MESSAGE = "Hello World"


class HelloAction(CatAction):

    name = "rest_handler_cat_hello"

    def handle(self, args):
        message = args.get("message") or bp.config("default_message", DEFAULT_MESSAGE)

        table = self.table_with_header(args)
        table.start_row()
        table.add_cell(message)
        table.end_row()
        return table

    def table_with_header(self, args):
        table = Table()
        table.start_headers()
        table.add_cell("test", "desc:test")
        table.end_headers()
        return table

    @staticmethod
    def documentation():
        return "/_cat/hello\n"


bp.add_cat_action("/_cat/hello", HelloAction(), methods=["GET", "POST"])
