"""
test_info.py

Pytest tests for the /info and /_cat endpoints.
"""


from catserver import create_app
from tests.testutils import get_response_json, get_response_text


class TestInfo:

    """Tests for the /info endpoint"""

    def test_info_contains_version(self, client):
        """Test that /info response contains version info."""
        data = get_response_json(client, "/info")
        assert data["version"] and data["version"] != ""

    def test_info_lists_plugins_and_cat_actions(self, client):
        data = get_response_json(client, "/info")
        assert data["plugins"] == ["plugins.hello"]
        assert data["cat_actions"] == ["rest_handler_cat_hello"]

    def test_info_root(self, client):
        data = get_response_json(client, "/")
        assert "version" in data
        assert "time" in data

    def test_info_indent(self, client):
        response = client.get("/info", query_string={"indent": "2"})
        assert response.status_code == 200
        assert response.get_data(as_text=True).startswith("{\n  ")

    def test_info_callback(self, client):
        response = client.get("/info", query_string={"callback": "cb"})
        assert response.status_code == 200
        text = response.get_data(as_text=True)
        assert text.startswith("cb(") and text.endswith(")")

    def test_info_bad_indent(self, client):
        response = client.get("/info", query_string={"indent": "x"})
        assert response.status_code == 400
        assert response.is_json
        assert response.get_json()["ERROR"]["type"] == "ValueError"


class TestCatIndex:

    """Tests for the /_cat endpoint"""

    def test_cat_index(self, client):
        assert get_response_text(client, "/_cat") == "=^.^=\n/_cat/hello\n"

    def test_cat_index_without_plugins(self):
        app = create_app({"TESTING": True, "PLUGINS": []})
        assert get_response_text(app.test_client(), "/_cat") == "=^.^=\n"
