"""
tests.testutils

Utility functions that can be called from tests. The functions may
contain assertions that are subject to rewriting.
"""


def get_response_json(client, *args, method="get", **kwargs):
    """Call client.get (or another method) with given args, assert success, return response JSON."""
    # This function helps in making actual test functions for
    # endpoints slightly more compact and less repetitive
    response = getattr(client, method)(*args, **kwargs)
    assert response.status_code == 200
    assert response.is_json
    return response.get_json()


def get_response_text(client, *args, method="get", **kwargs):
    """Call client.get (or another method) with given args, assert a plain text success, return the text."""
    response = getattr(client, method)(*args, **kwargs)
    assert response.status_code == 200
    assert response.mimetype == "text/plain"
    return response.get_data(as_text=True)


def get_error(client, *args, status=400, method="get", **kwargs):
    """Call client.get (or another method) with given args, assert an error response, return the error."""
    response = getattr(client, method)(*args, **kwargs)
    assert response.status_code == status
    assert response.is_json
    data = response.get_json()
    assert "ERROR" in data
    return data["ERROR"]
