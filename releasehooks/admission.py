"""Admission request and response types and JSON patch generation."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any


class Operation(str, enum.Enum):
    """Operation carried by an admission request."""

    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    CONNECT = "CONNECT"


@dataclass
class AdmissionRequest:
    """An incoming admission request with raw JSON object payloads."""

    kind: str
    operation: Operation
    username: str = ""
    object: bytes | str | None = None
    old_object: bytes | str | None = None


@dataclass
class PatchOperation:
    """A single JSON patch operation."""

    op: str
    path: str
    value: Any = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"op": self.op, "path": self.path}
        if self.op != "remove":
            data["value"] = self.value
        return data


@dataclass
class AdmissionResponse:
    """The outcome of handling an admission request."""

    allowed: bool
    code: int | None = None
    message: str | None = None
    patches: list[PatchOperation] = field(default_factory=list)

    @property
    def patch(self) -> bytes | None:
        """The JSON encoded patch, or None when there is nothing to patch."""
        if not self.patches:
            return None
        return json.dumps([p.to_dict() for p in self.patches]).encode()


class WebhookValidationError(ValueError):
    """Raised when a webhook rejects an object."""


def allowed(message: str) -> AdmissionResponse:
    """Return a response that allows the request."""
    return AdmissionResponse(allowed=True, code=HTTPStatus.OK, message=message or None)


def errored(code: int, message: str | BaseException) -> AdmissionResponse:
    """Return a response that rejects the request with the given status code."""
    return AdmissionResponse(allowed=False, code=int(code), message=str(message))


def _escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def _same(a: Any, b: Any) -> bool:
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    return a == b


def _compare(old: Any, new: Any, path: str, ops: list[PatchOperation]) -> None:
    if isinstance(old, dict) and isinstance(new, dict):
        _diff_objects(old, new, path, ops)
    elif isinstance(old, list) and isinstance(new, list):
        _diff_lists(old, new, path, ops)
    elif not _same(old, new):
        ops.append(PatchOperation("replace", path, new))


def _diff_objects(old: dict, new: dict, path: str, ops: list[PatchOperation]) -> None:
    for key, value in new.items():
        child = f"{path}/{_escape(key)}"
        if key not in old:
            ops.append(PatchOperation("add", child, value))
        else:
            _compare(old[key], value, child, ops)
    for key in old:
        if key not in new:
            ops.append(PatchOperation("remove", f"{path}/{_escape(key)}"))


def _diff_lists(old: list, new: list, path: str, ops: list[PatchOperation]) -> None:
    for index, (a, b) in enumerate(zip(old, new)):
        _compare(a, b, f"{path}/{index}", ops)
    for index in range(len(old), len(new)):
        ops.append(PatchOperation("add", f"{path}/{index}", new[index]))
    for index in reversed(range(len(new), len(old))):
        ops.append(PatchOperation("remove", f"{path}/{index}"))


def create_patch(original: Any, current: Any) -> list[PatchOperation]:
    """Return the JSON patch operations that turn original into current."""
    ops: list[PatchOperation] = []
    _compare(original, current, "", ops)
    return ops


def _load(document: bytes | str | Any) -> Any:
    if isinstance(document, (bytes, bytearray, str)):
        return json.loads(document)
    return document


def patch_response_from_raw(raw: bytes | str, current: Any) -> AdmissionResponse:
    """Return an allowing response patching the raw document into current."""
    try:
        original = _load(raw)
        updated = _load(current)
    except (ValueError, TypeError) as exc:
        return errored(HTTPStatus.INTERNAL_SERVER_ERROR, exc)
    return AdmissionResponse(allowed=True, patches=create_patch(original, updated))