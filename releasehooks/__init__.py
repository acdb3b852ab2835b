"""Admission webhooks, label helpers and field indexes for release resources."""

__version__ = "0.1.0"

__all__ = [
    "admission",
    "author",
    "autorelease",
    "indexes",
    "labels",
    "registry",
    "release",
]