import json

import pytest

from releasehooks.admission import (
    AdmissionResponse,
    Operation,
    PatchOperation,
    WebhookValidationError,
    allowed,
    create_patch,
    errored,
    patch_response_from_raw,
)


def test_allowed_response():
    rsp = allowed("Success")
    assert rsp.allowed is True
    assert rsp.code == 200
    assert rsp.message == "Success"
    assert rsp.patches == []
    assert rsp.patch is None


def test_errored_response_from_exception():
    rsp = errored(400, ValueError("bad thing"))
    assert rsp == AdmissionResponse(allowed=False, code=400, message="bad thing")


def test_patch_response_adds_labels_to_pod():
    pod = {"metadata": {}}
    raw = json.dumps(pod).encode()
    pod["metadata"]["labels"] = {"foo": "bar"}
    rsp = patch_response_from_raw(raw, pod)
    assert rsp.allowed is True
    assert rsp.patches == [PatchOperation("add", "/metadata/labels", {"foo": "bar"})]


def test_patch_response_no_change():
    doc = {"metadata": {"name": "x"}, "spec": {"a": [1, 2]}}
    rsp = patch_response_from_raw(json.dumps(doc), doc)
    assert rsp.allowed is True
    assert rsp.patches == []
    assert rsp.patch is None


def test_patch_response_invalid_raw():
    rsp = patch_response_from_raw(b"{not json", {})
    assert rsp.allowed is False
    assert rsp.code == 500


def test_patch_bytes_encoding():
    rsp = patch_response_from_raw(b'{"a": 1}', {"b": 2})
    assert json.loads(rsp.patch) == [
        {"op": "add", "path": "/b", "value": 2},
        {"op": "remove", "path": "/a"},
    ]


def test_create_patch_escapes_pointer_tokens():
    ops = create_patch({"l": {"x/y": "1"}}, {"l": {"x/y": "2", "a~b": "3"}})
    assert ops == [
        PatchOperation("replace", "/l/x~1y", "2"),
        PatchOperation("add", "/l/a~0b", "3"),
    ]


def test_create_patch_lists():
    assert create_patch([1, 2], [1, 3, 4]) == [
        PatchOperation("replace", "/1", 3),
        PatchOperation("add", "/2", 4),
    ]
    assert create_patch([1, 2, 3], [1]) == [
        PatchOperation("remove", "/2"),
        PatchOperation("remove", "/1"),
    ]


def test_create_patch_type_change_is_replace():
    assert create_patch({"a": True}, {"a": 1}) == [PatchOperation("replace", "/a", 1)]
    assert create_patch({"a": {"b": 1}}, {"a": [1]}) == [PatchOperation("replace", "/a", [1])]


def test_patch_operation_to_dict_remove_has_no_value():
    assert PatchOperation("remove", "/a").to_dict() == {"op": "remove", "path": "/a"}


def test_operation_values():
    assert Operation("CREATE") is Operation.CREATE
    assert Operation.UPDATE == "UPDATE"


def test_validation_error_is_value_error():
    err = WebhookValidationError("nope")
    assert str(err) == "nope"
    assert issubclass(WebhookValidationError, ValueError)
    with pytest.raises(ValueError, match="nope"):
        raise err