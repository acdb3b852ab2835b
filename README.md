# releasehooks

Admission logic for release resources, written as plain Python objects that
work on JSON-style dictionaries. It has no dependencies outside the standard
library.

## What it provides

- **Author attribution** (`releasehooks.author.AuthorWebhook`): `handle(request)`
  takes an `AdmissionRequest` for a `Release` or `ReleasePlan`.
  - On create, a Release is given an author label holding the requesting
    user's name, unless its automated label is `"true"`. On update, a change to
    the author label is rejected with status 400 and the message
    `release author label cannnot be updated`.
  - A ReleasePlan keeps an author label only while its attribution label is
    `"true"`; otherwise the label is removed. On update with attribution on,
    the author becomes the requesting user if attribution was just switched on
    or the submitted author already is that user; otherwise the previous author
    is kept.
  - Any other kind is answered with status 500. An object that cannot be
    decoded is answered with status 400.
  - Allowing responses carry a JSON patch against the submitted object.
- **Label helpers** (`releasehooks.labels`): `get_labels`, `set_author_label`
  and `sanitize_label_value`. The last turns a user name into a label value:
  colons become underscores, the first `@` becomes a dot, and the result is cut
  to 63 characters. The module also holds the label names (`AUTHOR_LABEL`,
  `AUTOMATED_LABEL`, `ATTRIBUTION_LABEL`, `AUTO_RELEASE_LABEL`).
- **Admission primitives** (`releasehooks.admission`): `AdmissionRequest`,
  `AdmissionResponse` (with a `patch` property giving the encoded JSON patch,
  or `None`), `PatchOperation`, `Operation`, `WebhookValidationError`, and the
  functions `allowed`, `errored`, `create_patch` and
  `patch_response_from_raw`.
- **Release defaults and validation** (`releasehooks.release.ReleaseWebhook`):
  built with a loader object that has a `get_release_plan(release)` method.
  `default` copies the ReleasePlan's `releaseGracePeriodDays` into the
  Release's `gracePeriodDays` when that is unset or zero, and leaves it alone
  if the loader raises `NotFoundError`. `validate_update` raises
  `WebhookValidationError` on any change to the spec.
- **Auto-release label** (`releasehooks.autorelease`): `ReleasePlanWebhook`
  and `ReleasePlanAdmissionWebhook` (both `AutoReleaseWebhook`s) add the
  auto-release label, set to `"true"`, to objects that have no labels at all,
  and raise `WebhookValidationError` on create or update when its value is
  anything but `"true"` or `"false"`.
- **Field indexes** (`releasehooks.indexes.IndexedCache`): an in-memory store
  searched through registered indexes (`index_field`, `add`, `list`).
  Registering the same index twice raises `ValueError`; listing through an
  unknown index raises `KeyError`. The `setup_*_cache` functions register the
  standard indexes: Components by `spec.application`, Releases by
  `spec.releasePlan`, ReleasePlans by `spec.target` and ReleasePlanAdmissions
  by `spec.origin`.
- **Registry** (`releasehooks.registry.enabled_webhooks(loader)`): a list of
  every webhook to enable, in registration order, with the given loader handed
  to the `ReleaseWebhook`.

## What it does not do

The package holds the decisions only. It does not serve HTTP, decode admission
review envelopes, talk to a cluster, or look up ReleasePlans itself: the caller
supplies the loader for `ReleaseWebhook` and wires the webhooks' `path`,
`mutate_path` and `validate_path` attributes into whatever server it uses.
`IndexedCache` keeps objects in memory only. There is no command-line entry
point.

## Installing

```
pip install .
```

Add the `test` extra to get the test suite's dependencies:

```
pip install .[test]
```

## Example

```python
import json

from releasehooks.admission import AdmissionRequest, Operation
from releasehooks.author import AuthorWebhook

release = {
    "apiVersion": "appstudio.redhat.com/v1alpha1",
    "kind": "Release",
    "metadata": {"name": "test-release", "namespace": "default"},
    "spec": {"snapshot": "test-snapshot", "releasePlan": "test-releaseplan"},
}

request = AdmissionRequest(
    kind="Release",
    operation=Operation.CREATE,
    username="admin",
    object=json.dumps(release).encode(),
)

response = AuthorWebhook().handle(request)
assert response.allowed
print(response.patches)  # one "add" operation at /metadata/labels
```

## Running the tests

```
pytest
```