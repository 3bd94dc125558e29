"""Validation strictness policy.

A ValidationPolicy decides whether payload violations raise or are let
through. Records, fields and clients hold a reference to one policy and
read it at validation time, so flipping ``strict`` affects everything
sharing that object from the next assignment or serialization on.

``default_policy`` is the process-wide instance used whenever no policy
is passed explicitly. It is plain shared mutable state: the last write
wins and nothing is locked. Code that needs isolation (tests running
with different strictness, for example) should pass its own policy.
"""

from __future__ import annotations

from dataclasses import dataclass

from measurement.config import settings


@dataclass
class ValidationPolicy:
    """Fail-fast (strict) or best-effort (lenient) payload validation."""
    strict: bool = True


default_policy = ValidationPolicy(strict=settings.throw_on_validation_error)


def resolve_policy(policy: ValidationPolicy | None) -> ValidationPolicy:
    """Return ``policy`` or the shared default when none is given."""
    return policy if policy is not None else default_policy
