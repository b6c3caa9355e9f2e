from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from problem_details.domain.problem import ABOUT_BLANK, RESERVED_NAMES, Problem
from problem_details.domain.status import StatusCode
from problem_details.errors import ReservedKeyError


class ProblemBuilder:
    """Fluent, mutable staging area for a :class:`Problem`.

    Every ``with_*`` call stages one value (last write wins) and returns the
    builder. ``build()`` snapshots the staged values and may be called again
    after further changes. A builder is meant for a single construction
    sequence and is not shared between threads.
    """

    def __init__(self):
        self._type: str | None = None
        self._title: str | None = None
        self._status: StatusCode | None = None
        self._detail: str | None = None
        self._instance: str | None = None
        self._cause: Problem | None = None
        self._parameters: dict[str, Any] = {}

    def with_type(self, type: str | None) -> ProblemBuilder:
        self._type = type
        return self

    def with_title(self, title: str | None) -> ProblemBuilder:
        self._title = title
        return self

    def with_status(self, status: StatusCode | None) -> ProblemBuilder:
        self._status = status
        return self

    def with_detail(self, detail: str | None) -> ProblemBuilder:
        self._detail = detail
        return self

    def with_instance(self, instance: str | None) -> ProblemBuilder:
        self._instance = instance
        return self

    def with_cause(self, cause: Problem | None) -> ProblemBuilder:
        self._cause = cause
        return self

    def with_(self, key: str, value: Any) -> ProblemBuilder:
        """Stage the extension attribute ``key``.

        Raises:
            ReservedKeyError: If ``key`` is type, title, status, detail,
                instance or cause.
        """
        if key in RESERVED_NAMES:
            raise ReservedKeyError(key)
        self._parameters[key] = value
        return self

    def with_parameters(self, parameters: Mapping[str, Any]) -> ProblemBuilder:
        """Stage several extension attributes; nothing is staged if any key is reserved."""
        for key in parameters:
            if key in RESERVED_NAMES:
                raise ReservedKeyError(key)
        self._parameters.update(parameters)
        return self

    def build(self) -> Problem:
        return Problem(
            type=ABOUT_BLANK if self._type is None else self._type,
            title=self._title,
            status=self._status,
            detail=self._detail,
            instance=self._instance,
            cause=self._cause,
            parameters=self._parameters,
            explicit_type=self._type is not None,
        )

    @staticmethod
    def create(status: StatusCode) -> ProblemBuilder:
        """Builder seeded with ``status`` and its reason phrase as title."""
        return ProblemBuilder().with_title(status.reason_phrase).with_status(status)
