"""The RFC 7807 problem value object.

See https://tools.ietf.org/html/rfc7807
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from problem_details.domain.status import StatusCode
from problem_details.errors import ReservedKeyError

if TYPE_CHECKING:
    from problem_details.domain.builder import ProblemBuilder

# Assumed problem type when none is given.
ABOUT_BLANK = "about:blank"

# Member names that extension attributes may not use.
RESERVED_NAMES = frozenset({"type", "title", "status", "detail", "instance", "cause"})


@dataclass(frozen=True, slots=True)
class Problem:
    """Immutable problem details.

    Members:
    - type: URI reference identifying the problem type; ``about:blank`` when
      not given.
    - title: short, human-readable summary of the problem type.
    - status: the HTTP status generated for this occurrence.
    - detail: explanation specific to this occurrence.
    - instance: URI reference identifying this occurrence.
    - cause: the problem that caused this one. A cause is always an already
      built problem, so causal chains cannot form cycles.
    - parameters: extension attributes, read-only.

    Build instances with :class:`ProblemBuilder` or :meth:`value_of`.
    """

    type: str = ABOUT_BLANK
    title: str | None = None
    status: StatusCode | None = None
    detail: str | None = None
    instance: str | None = None
    cause: Problem | None = None
    parameters: Mapping[str, Any] = field(default_factory=dict, hash=False)
    # False when ``type`` holds the default rather than a caller's value.
    explicit_type: bool = field(default=False, compare=False, repr=False)

    def __post_init__(self):
        for key in self.parameters:
            if key in RESERVED_NAMES:
                raise ReservedKeyError(key)
        object.__setattr__(
            self, "parameters", MappingProxyType(dict(self.parameters))
        )

    @staticmethod
    def builder() -> ProblemBuilder:
        from problem_details.domain.builder import ProblemBuilder

        return ProblemBuilder()

    @staticmethod
    def value_of(
        status: StatusCode,
        detail: str | None = None,
        instance: str | None = None,
    ) -> Problem:
        """Problem for ``status`` titled with its reason phrase."""
        from problem_details.domain.builder import ProblemBuilder

        builder = ProblemBuilder.create(status)
        if detail is not None:
            builder.with_detail(detail)
        if instance is not None:
            builder.with_instance(instance)
        return builder.build()

    def causes(self) -> Iterator[Problem]:
        cause = self.cause
        while cause is not None:
            yield cause
            cause = cause.cause

    def __str__(self) -> str:
        parts = [
            None if self.status is None else str(self.status.code),
            self.title,
            self.detail,
            None if self.instance is None else f"instance={self.instance}",
        ]
        parts.extend(f"{key}={value}" for key, value in self.parameters.items())
        return f"{self.type}{{{', '.join(part for part in parts if part is not None)}}}"
