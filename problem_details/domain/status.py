"""HTTP status codes with their canonical reason phrases.

The registry is an explicit table built once, when this module is first
imported. Python's import lock guarantees the table is built a single time
even under concurrent first access; afterwards it is a read-only mapping and
lookups need no locking.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType

from problem_details.errors import UnknownStatusCodeError


class Family(enum.Enum):
    """Class of a status code, taken from its first digit."""

    INFORMATIONAL = 1
    SUCCESSFUL = 2
    REDIRECTION = 3
    CLIENT_ERROR = 4
    SERVER_ERROR = 5
    OTHER = 0

    @classmethod
    def of(cls, code: int) -> Family:
        if 100 <= code < 600:
            return cls(code // 100)
        return cls.OTHER


@dataclass(frozen=True, slots=True, order=True)
class StatusCode:
    """A (code, reason phrase) pair.

    Identity and ordering are defined by ``code`` alone: two entries with the
    same code and different phrases compare equal.
    """

    code: int
    reason_phrase: str = field(compare=False)

    @property
    def family(self) -> Family:
        return Family.of(self.code)

    @property
    def is_registered(self) -> bool:
        return _REGISTRY.get(self.code) is self

    def __str__(self) -> str:
        return self.reason_phrase


# 1xx
CONTINUE = StatusCode(100, "Continue")
SWITCHING_PROTOCOLS = StatusCode(101, "Switching Protocols")
PROCESSING = StatusCode(102, "Processing")
CHECKPOINT = StatusCode(103, "Checkpoint")

# 2xx
OK = StatusCode(200, "OK")
CREATED = StatusCode(201, "Created")
ACCEPTED = StatusCode(202, "Accepted")
NON_AUTHORITATIVE_INFORMATION = StatusCode(203, "Non-Authoritative Information")
NO_CONTENT = StatusCode(204, "No Content")
RESET_CONTENT = StatusCode(205, "Reset Content")
PARTIAL_CONTENT = StatusCode(206, "Partial Content")
MULTI_STATUS = StatusCode(207, "Multi-Status")
ALREADY_REPORTED = StatusCode(208, "Already Reported")
IM_USED = StatusCode(226, "IM Used")

# 3xx
MULTIPLE_CHOICES = StatusCode(300, "Multiple Choices")
MOVED_PERMANENTLY = StatusCode(301, "Moved Permanently")
FOUND = StatusCode(302, "Found")
SEE_OTHER = StatusCode(303, "See Other")
NOT_MODIFIED = StatusCode(304, "Not Modified")
USE_PROXY = StatusCode(305, "Use Proxy")
TEMPORARY_REDIRECT = StatusCode(307, "Temporary Redirect")
PERMANENT_REDIRECT = StatusCode(308, "Permanent Redirect")

# 4xx
BAD_REQUEST = StatusCode(400, "Bad Request")
UNAUTHORIZED = StatusCode(401, "Unauthorized")
PAYMENT_REQUIRED = StatusCode(402, "Payment Required")
FORBIDDEN = StatusCode(403, "Forbidden")
NOT_FOUND = StatusCode(404, "Not Found")
METHOD_NOT_ALLOWED = StatusCode(405, "Method Not Allowed")
NOT_ACCEPTABLE = StatusCode(406, "Not Acceptable")
PROXY_AUTHENTICATION_REQUIRED = StatusCode(407, "Proxy Authentication Required")
REQUEST_TIMEOUT = StatusCode(408, "Request Timeout")
CONFLICT = StatusCode(409, "Conflict")
GONE = StatusCode(410, "Gone")
LENGTH_REQUIRED = StatusCode(411, "Length Required")
PRECONDITION_FAILED = StatusCode(412, "Precondition Failed")
REQUEST_ENTITY_TOO_LARGE = StatusCode(413, "Request Entity Too Large")
REQUEST_URI_TOO_LONG = StatusCode(414, "Request-Uri Too Long")
UNSUPPORTED_MEDIA_TYPE = StatusCode(415, "Unsupported Media Type")
REQUESTED_RANGE_NOT_SATISFIABLE = StatusCode(416, "Requested Range Not Satisfiable")
EXPECTATION_FAILED = StatusCode(417, "Expectation Failed")
IM_A_TEAPOT = StatusCode(418, "I'm a teapot")
MISDIRECTED_REQUEST = StatusCode(421, "Misdirected Request")
UNPROCESSABLE_ENTITY = StatusCode(422, "Unprocessable Entity")
LOCKED = StatusCode(423, "Locked")
FAILED_DEPENDENCY = StatusCode(424, "Failed Dependency")
UPGRADE_REQUIRED = StatusCode(426, "Upgrade Required")
PRECONDITION_REQUIRED = StatusCode(428, "Precondition Required")
TOO_MANY_REQUESTS = StatusCode(429, "Too Many Requests")
REQUEST_HEADER_FIELDS_TOO_LARGE = StatusCode(431, "Request Header Fields Too Large")
CONNECTION_CLOSED_WITHOUT_RESPONSE = StatusCode(444, "Connection Closed Without Response")
UNAVAILABLE_FOR_LEGAL_REASONS = StatusCode(451, "Unavailable For Legal Reasons")
CLIENT_CLOSED_REQUEST = StatusCode(499, "Client Closed Request")

# 5xx
INTERNAL_SERVER_ERROR = StatusCode(500, "Internal Server Error")
NOT_IMPLEMENTED = StatusCode(501, "Not Implemented")
BAD_GATEWAY = StatusCode(502, "Bad Gateway")
SERVICE_UNAVAILABLE = StatusCode(503, "Service Unavailable")
GATEWAY_TIMEOUT = StatusCode(504, "Gateway Timeout")
HTTP_VERSION_NOT_SUPPORTED = StatusCode(505, "Http Version Not Supported")
VARIANT_ALSO_NEGOTIATES = StatusCode(506, "Variant Also Negotiates")
INSUFFICIENT_STORAGE = StatusCode(507, "Insufficient Storage")
LOOP_DETECTED = StatusCode(508, "Loop Detected")
BANDWIDTH_LIMIT_EXCEEDED = StatusCode(509, "Bandwidth Limit Exceeded")
NOT_EXTENDED = StatusCode(510, "Not Extended")
NETWORK_AUTHENTICATION_REQUIRED = StatusCode(511, "Network Authentication Required")
NETWORK_CONNECT_TIMEOUT_ERROR = StatusCode(599, "Network Connect Timeout Error")


_CATALOG = (
    CONTINUE, SWITCHING_PROTOCOLS, PROCESSING, CHECKPOINT,
    OK, CREATED, ACCEPTED, NON_AUTHORITATIVE_INFORMATION, NO_CONTENT,
    RESET_CONTENT, PARTIAL_CONTENT, MULTI_STATUS, ALREADY_REPORTED, IM_USED,
    MULTIPLE_CHOICES, MOVED_PERMANENTLY, FOUND, SEE_OTHER, NOT_MODIFIED,
    USE_PROXY, TEMPORARY_REDIRECT, PERMANENT_REDIRECT,
    BAD_REQUEST, UNAUTHORIZED, PAYMENT_REQUIRED, FORBIDDEN, NOT_FOUND,
    METHOD_NOT_ALLOWED, NOT_ACCEPTABLE, PROXY_AUTHENTICATION_REQUIRED,
    REQUEST_TIMEOUT, CONFLICT, GONE, LENGTH_REQUIRED, PRECONDITION_FAILED,
    REQUEST_ENTITY_TOO_LARGE, REQUEST_URI_TOO_LONG, UNSUPPORTED_MEDIA_TYPE,
    REQUESTED_RANGE_NOT_SATISFIABLE, EXPECTATION_FAILED, IM_A_TEAPOT,
    MISDIRECTED_REQUEST, UNPROCESSABLE_ENTITY, LOCKED, FAILED_DEPENDENCY,
    UPGRADE_REQUIRED, PRECONDITION_REQUIRED, TOO_MANY_REQUESTS,
    REQUEST_HEADER_FIELDS_TOO_LARGE, CONNECTION_CLOSED_WITHOUT_RESPONSE,
    UNAVAILABLE_FOR_LEGAL_REASONS, CLIENT_CLOSED_REQUEST,
    INTERNAL_SERVER_ERROR, NOT_IMPLEMENTED, BAD_GATEWAY, SERVICE_UNAVAILABLE,
    GATEWAY_TIMEOUT, HTTP_VERSION_NOT_SUPPORTED, VARIANT_ALSO_NEGOTIATES,
    INSUFFICIENT_STORAGE, LOOP_DETECTED, BANDWIDTH_LIMIT_EXCEEDED,
    NOT_EXTENDED, NETWORK_AUTHENTICATION_REQUIRED,
    NETWORK_CONNECT_TIMEOUT_ERROR,
)


def _build_registry(entries) -> MappingProxyType:
    table: dict[int, StatusCode] = {}
    for entry in sorted(entries):
        if entry.code in table:
            raise ValueError(f"Duplicate status code {entry.code} in registry")
        table[entry.code] = entry
    return MappingProxyType(table)


_REGISTRY = _build_registry(_CATALOG)
_ALL = tuple(_REGISTRY.values())


def lookup(code: int) -> StatusCode:
    """Return the registry entry for ``code``.

    Raises:
        UnknownStatusCodeError: If no entry has this code.
    """
    entry = _REGISTRY.get(code)
    if entry is None:
        raise UnknownStatusCodeError(code)
    return entry


def try_lookup(code: int) -> tuple[StatusCode | None, bool]:
    entry = _REGISTRY.get(code)
    return entry, entry is not None


def all_status_codes() -> tuple[StatusCode, ...]:
    """Every registered entry, ascending by code."""
    return _ALL


def resolve(code: int, *, strict: bool | None = None) -> StatusCode:
    """Return the registry entry for ``code``, or an ad hoc entry for it.

    Unknown codes yield ``StatusCode(code, "")`` unless strict resolution is
    requested (explicitly or via ``settings.strict_status``), in which case
    they raise like :func:`lookup`.
    """
    if strict is None:
        from problem_details.core.config import settings

        strict = settings.strict_status

    entry, found = try_lookup(code)
    if found:
        return entry
    if strict:
        raise UnknownStatusCodeError(code)
    return StatusCode(code, "")
