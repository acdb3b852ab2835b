from releasehooks.author import AuthorWebhook
from releasehooks.autorelease import ReleasePlanAdmissionWebhook, ReleasePlanWebhook
from releasehooks.registry import enabled_webhooks
from releasehooks.release import ReleaseWebhook


class FakeLoader:
    def get_release_plan(self, release):
        return {"spec": {"releaseGracePeriodDays": 5}}


def test_webhooks_in_registration_order():
    hooks = enabled_webhooks(FakeLoader())
    assert [type(h) for h in hooks] == [
        AuthorWebhook,
        ReleaseWebhook,
        ReleasePlanWebhook,
        ReleasePlanAdmissionWebhook,
    ]


def test_release_webhook_uses_given_loader():
    loader = FakeLoader()
    release_hook = enabled_webhooks(loader)[1]
    assert release_hook.loader is loader
    release = {"spec": {"releasePlan": "plan"}}
    release_hook.default(release)
    assert release["spec"]["gracePeriodDays"] == 5


def test_each_call_returns_fresh_webhooks():
    first = enabled_webhooks(FakeLoader())
    second = enabled_webhooks(FakeLoader())
    assert all(a is not b for a, b in zip(first, second))
    assert len(first) == len(second) == 4