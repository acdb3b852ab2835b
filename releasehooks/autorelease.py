"""Webhooks guarding the auto-release label of ReleasePlans and ReleasePlanAdmissions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .admission import WebhookValidationError
from .labels import AUTO_RELEASE_LABEL, get_labels


class AutoReleaseWebhook:
    """Defaults the auto-release label to true and checks its value."""

    kind = ""
    mutate_path = ""
    validate_path = ""

    def default(self, obj: dict[str, Any]) -> None:
        """Add the auto-release label set to true when the object has no labels."""
        if AUTO_RELEASE_LABEL in get_labels(obj):
            return
        metadata = obj.setdefault("metadata", {})
        if metadata.get("labels") is None:
            metadata["labels"] = {AUTO_RELEASE_LABEL: "true"}

    def validate_create(self, obj: dict[str, Any]) -> list[str]:
        """Check the auto-release label of a new object."""
        return self._validate_auto_release_label(obj)

    def validate_update(self, old_obj: dict[str, Any], new_obj: dict[str, Any]) -> list[str]:
        """Check the auto-release label of the updated object."""
        return self._validate_auto_release_label(new_obj)

    def validate_delete(self, obj: dict[str, Any]) -> list[str]:
        """Accept every deletion; return the warnings (none)."""
        if not isinstance(obj, Mapping):
            raise TypeError(f"expected a {self.kind or 'resource'} object, got {type(obj).__name__}")
        return []

    @staticmethod
    def _validate_auto_release_label(obj: dict[str, Any]) -> list[str]:
        labels = get_labels(obj)
        if AUTO_RELEASE_LABEL in labels and labels[AUTO_RELEASE_LABEL] not in ("true", "false"):
            raise WebhookValidationError(
                f"'{AUTO_RELEASE_LABEL}' label can only be set to true or false"
            )
        return []


class ReleasePlanWebhook(AutoReleaseWebhook):
    """Auto-release label webhook for ReleasePlans."""

    kind = "ReleasePlan"
    mutate_path = "/mutate-appstudio-redhat-com-v1alpha1-releaseplan"
    validate_path = "/validate-appstudio-redhat-com-v1alpha1-releaseplan"


class ReleasePlanAdmissionWebhook(AutoReleaseWebhook):
    """Auto-release label webhook for ReleasePlanAdmissions."""

    kind = "ReleasePlanAdmission"
    mutate_path = "/mutate-appstudio-redhat-com-v1alpha1-releaseplanadmission"
    validate_path = "/validate-appstudio-redhat-com-v1alpha1-releaseplanadmission"