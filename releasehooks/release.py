"""Defaulting and validating webhook for Release objects."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from .admission import WebhookValidationError

MUTATE_PATH = "/mutate-appstudio-redhat-com-v1alpha1-release"
VALIDATE_PATH = "/validate-appstudio-redhat-com-v1alpha1-release"

log = logging.getLogger(__name__)


class NotFoundError(LookupError):
    """Raised by a loader when the requested object does not exist."""


class ReleasePlanLoader(Protocol):
    """Anything able to find the ReleasePlan a Release refers to."""

    def get_release_plan(self, release: dict[str, Any]) -> dict[str, Any]:
        ...


def _no_warnings(obj: Any) -> list[str]:
    """Return an empty warning list for an admitted object, which must be a mapping."""
    if not isinstance(obj, Mapping):
        raise TypeError(f"expected a Release object, got {type(obj).__name__}")
    return []


class ReleaseWebhook:
    """Fills in defaults for Releases and keeps their spec immutable."""

    kind = "Release"
    mutate_path = MUTATE_PATH
    validate_path = VALIDATE_PATH

    def __init__(self, loader: ReleasePlanLoader) -> None:
        self.loader = loader

    def default(self, release: dict[str, Any]) -> None:
        """Copy the ReleasePlan's grace period into the Release when unset."""
        spec = release.setdefault("spec", {})
        if spec.get("gracePeriodDays", 0) != 0:
            return

        try:
            release_plan = self.loader.get_release_plan(release)
        except NotFoundError:
            log.info("releasePlan not found. Not setting ReleaseGracePeriodDays")
            return

        plan_spec = release_plan.get("spec") or {}
        spec["gracePeriodDays"] = plan_spec.get("releaseGracePeriodDays", 0)

    def validate_create(self, release: dict[str, Any]) -> list[str]:
        """Accept every new Release; return the warnings (none)."""
        return _no_warnings(release)

    def validate_update(
        self, old_release: dict[str, Any], new_release: dict[str, Any]
    ) -> list[str]:
        """Reject any change to the Release spec."""
        if (new_release.get("spec") or {}) != (old_release.get("spec") or {}):
            raise WebhookValidationError("release resources spec cannot be updated")
        return []

    def validate_delete(self, release: dict[str, Any]) -> list[str]:
        """Accept every deletion; return the warnings (none)."""
        return _no_warnings(release)