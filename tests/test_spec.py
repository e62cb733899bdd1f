import json

from officerev.spec import swagger_spec


def _refs(node):
    if isinstance(node, dict):
        for key, value in node.items():
            if key == "$ref":
                yield value
            else:
                yield from _refs(value)
    elif isinstance(node, list):
        for item in node:
            yield from _refs(item)


def test_spec_version_and_title():
    spec = swagger_spec("", "")
    assert spec["swagger"] == "2.0"
    assert spec["info"]["title"] == "Office Reservation API"


def test_spec_host_and_base_path_passed_through():
    spec = swagger_spec("example.com:8080", "/api")
    assert spec["host"] == "example.com:8080"
    assert spec["basePath"] == "/api"


def test_spec_paths_and_methods():
    paths = swagger_spec("", "")["paths"]
    assert set(paths) == {"/calculate", "/manual"}
    assert set(paths["/calculate"]) == {"post"}
    assert set(paths["/manual"]) == {"get"}


def test_spec_refs_resolve():
    spec = swagger_spec("", "")
    refs = list(_refs(spec["paths"]))
    assert refs
    for ref in refs:
        assert ref.removeprefix("#/definitions/") in spec["definitions"]


def test_spec_json_round_trip():
    spec = swagger_spec("h", "/b")
    assert json.loads(json.dumps(spec)) == spec