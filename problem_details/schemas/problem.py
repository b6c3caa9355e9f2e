"""Wire schema of a problem details document."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from problem_details.schemas.status import StatusField


class ProblemDocument(BaseModel):
    """Flat RFC 7807 document.

    The named members are typed fields; extension attributes are kept as
    pydantic extras, so they are read from and written to the same object as
    siblings of the named members. ``cause`` is not part of RFC 7807 and is
    only written when the codec is asked to nest causes.
    """

    model_config = ConfigDict(
        extra="allow",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    type: str | None = Field(None, description="URI reference identifying the problem type")
    title: str | None = Field(None, description="Short, human-readable summary of the problem type")
    status: StatusField = Field(None, description="HTTP status code")
    detail: str | None = Field(None, description="Explanation specific to this occurrence")
    instance: str | None = Field(None, description="URI reference identifying this occurrence")
    cause: ProblemDocument | None = Field(None, description="Nested problem that caused this one")
