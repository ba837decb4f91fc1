"""
test_rest_yaml.py

Run the YAML REST test suites in data/rest-api-spec against the app.
"""


import pytest

from tests.yamlrunner import YamlTestRunner, collect_candidates, load_apis

_candidates = collect_candidates()


@pytest.fixture(scope="module")
def apis():
    return load_apis()


@pytest.mark.parametrize("steps", [steps for _, steps in _candidates], ids=[name for name, _ in _candidates])
def test_rest_yaml(client, apis, steps):
    YamlTestRunner(client, apis).run(steps)


def test_candidates_collected():
    names = [name for name, _ in _candidates]
    assert "cat.hello/10_basic/Default message" in names
    assert "cat.hello/20_formats/Unsupported format" in names
