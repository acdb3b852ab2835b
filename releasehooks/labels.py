"""Label names and helpers for working with Kubernetes object labels."""

from __future__ import annotations

from typing import Any

LABEL_PREFIX = "release.appstudio.openshift.io"
AUTHOR_LABEL = f"{LABEL_PREFIX}/author"
AUTOMATED_LABEL = f"{LABEL_PREFIX}/automated"
ATTRIBUTION_LABEL = f"{LABEL_PREFIX}/attribution"
AUTO_RELEASE_LABEL = f"{LABEL_PREFIX}/auto-release"

MAX_LABEL_LENGTH = 63


def get_labels(obj: dict[str, Any]) -> dict[str, str]:
    """Return the object's labels mapping, or an empty dict if it has none.

    When the object carries labels, the returned dict is the object's own,
    so changes to it are visible on the object.
    """
    metadata = obj.get("metadata") or {}
    labels = metadata.get("labels")
    return labels if labels is not None else {}


def sanitize_label_value(username: str) -> str:
    """Turn a username into a string usable as a label value."""
    author = username.replace(":", "_")  # colons are not allowed in label values
    author = author.replace("@", ".", 1)  # support usernames that are e-mail addresses
    return author[:MAX_LABEL_LENGTH]


def set_author_label(username: str, obj: dict[str, Any]) -> None:
    """Set the author label on the object to the sanitized username."""
    metadata = obj.get("metadata")
    if metadata is None:
        metadata = obj["metadata"] = {}
    labels = metadata.get("labels")
    if labels is None:
        labels = metadata["labels"] = {}
    labels[AUTHOR_LABEL] = sanitize_label_value(username)