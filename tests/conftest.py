"""
conftest.py

Pytest fixtures for testing the server as a Flask app.
"""


import pytest

from catserver import create_app


# Functions in tests.testutils and tests.yamlrunner are called by
# tests and contain assertions that should be rewritten
pytest.register_assert_rewrite("tests.testutils", "tests.yamlrunner")


@pytest.fixture()
def app():
    """Create and configure an app instance."""
    app = create_app({
        # https://flask.palletsprojects.com/en/2.2.x/config/#TESTING
        "TESTING": True,
    })
    yield app


@pytest.fixture()
def client(app):
    """Create and return a test client."""
    return app.test_client()
