"""The set of webhooks the service registers."""

from __future__ import annotations

from typing import Any

from .author import AuthorWebhook
from .autorelease import ReleasePlanAdmissionWebhook, ReleasePlanWebhook
from .release import ReleasePlanLoader, ReleaseWebhook


def enabled_webhooks(loader: ReleasePlanLoader) -> list[Any]:
    """Return every webhook that has to be registered, in registration order."""
    return [
        AuthorWebhook(),
        ReleaseWebhook(loader),
        ReleasePlanWebhook(),
        ReleasePlanAdmissionWebhook(),
    ]