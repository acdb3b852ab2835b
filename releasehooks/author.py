"""Mutating webhook that records who authored Releases and ReleasePlans."""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any

from .admission import (
    AdmissionRequest,
    AdmissionResponse,
    Operation,
    allowed,
    errored,
    patch_response_from_raw,
)
from .labels import (
    ATTRIBUTION_LABEL,
    AUTHOR_LABEL,
    AUTOMATED_LABEL,
    get_labels,
    sanitize_label_value,
    set_author_label,
)

PATH = "/mutate-appstudio-redhat-com-v1alpha1-author"


class _DecodeError(Exception):
    pass


def _decode(raw: bytes | str | None) -> dict[str, Any]:
    try:
        obj = json.loads(raw if raw is not None else b"")
    except (ValueError, TypeError) as exc:
        raise _DecodeError(f"error decoding object: {exc}") from exc
    if not isinstance(obj, dict):
        raise _DecodeError("error decoding object: expected a JSON object")
    return obj


def _remove_label(obj: dict[str, Any], key: str) -> None:
    metadata = obj.get("metadata") or {}
    labels = metadata.get("labels")
    if labels and key in labels:
        del labels[key]
        if not labels:
            del metadata["labels"]


class AuthorWebhook:
    """Sets the author label on Releases and ReleasePlans."""

    path = PATH

    def handle(self, request: AdmissionRequest) -> AdmissionResponse:
        """Build the admission response for a Release or ReleasePlan request."""
        try:
            if request.kind == "Release":
                return self._handle_release(request)
            if request.kind == "ReleasePlan":
                return self._handle_release_plan(request)
        except _DecodeError as exc:
            return errored(HTTPStatus.BAD_REQUEST, exc)
        return errored(
            HTTPStatus.INTERNAL_SERVER_ERROR,
            f"webhook tried to handle an unsupported resource: {request.kind}",
        )

    def patch_response(self, raw: bytes | str, obj: dict[str, Any]) -> AdmissionResponse:
        """Return a response patching the raw object into obj."""
        return patch_response_from_raw(raw, obj)

    def _handle_release(self, request: AdmissionRequest) -> AdmissionResponse:
        release = _decode(request.object)

        if request.operation == Operation.CREATE:
            if get_labels(release).get(AUTOMATED_LABEL) != "true":
                set_author_label(request.username, release)
            return self.patch_response(request.object, release)

        if request.operation == Operation.UPDATE:
            old_release = _decode(request.old_object)
            if get_labels(release).get(AUTHOR_LABEL, "") != get_labels(old_release).get(
                AUTHOR_LABEL, ""
            ):
                return errored(
                    HTTPStatus.BAD_REQUEST, "release author label cannnot be updated"
                )

        return allowed("Success")

    def _handle_release_plan(self, request: AdmissionRequest) -> AdmissionResponse:
        release_plan = _decode(request.object)
        # The author label must not exist unless attribution is enabled.
        if get_labels(release_plan).get(ATTRIBUTION_LABEL) != "true":
            _remove_label(release_plan, AUTHOR_LABEL)

        attributed = get_labels(release_plan).get(ATTRIBUTION_LABEL) == "true"

        if request.operation == Operation.CREATE:
            if attributed:
                set_author_label(request.username, release_plan)
        elif request.operation == Operation.UPDATE:
            old_release_plan = _decode(request.old_object)
            if attributed:
                old_labels = get_labels(old_release_plan)
                author = get_labels(release_plan).get(AUTHOR_LABEL, "")
                if old_labels.get(ATTRIBUTION_LABEL) != "true" or author == sanitize_label_value(
                    request.username
                ):
                    set_author_label(request.username, release_plan)
                else:
                    # Keep the previous author when someone else edits the label.
                    set_author_label(old_labels.get(AUTHOR_LABEL, ""), release_plan)

        return self.patch_response(request.object, release_plan)