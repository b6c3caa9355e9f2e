import os

# Set environment variables BEFORE any imports that might use settings
# so a developer's .env does not change codec behaviour under test.
os.environ["PROBLEM_STRICT_STATUS"] = "false"
os.environ["PROBLEM_INCLUDE_CAUSE"] = "false"
os.environ["PROBLEM_JSON_INDENT"] = ""
os.environ["PROBLEM_MEDIA_TYPE"] = "application/problem+json"

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from problem_details.api.exception_handlers import register_exception_handlers
from problem_details.core.config import settings
from problem_details.domain import status
from problem_details.domain.builder import ProblemBuilder
from problem_details.domain.problem import Problem
from problem_details.domain.status import lookup
from problem_details.errors import ProblemException
from problem_details.services.codec import decode


@pytest.fixture(scope="function")
def balance_problem() -> Problem:
    """The problem used throughout the round-trip tests."""
    return (
        ProblemBuilder.create(status.OK)
        .with_type("about:blank")
        .with_detail("some detail")
        .with_instance("http://www.example.org/log/1")
        .with_("balance", "0")
        .build()
    )


@pytest.fixture(scope="function")
def out_of_credit() -> Problem:
    """A typed problem with a cause and several extension attributes."""
    cause = Problem.value_of(status.SERVICE_UNAVAILABLE, "ledger offline")
    return (
        Problem.builder()
        .with_type("https://example.com/probs/out-of-credit")
        .with_title("You do not have enough credit.")
        .with_status(status.FORBIDDEN)
        .with_detail("Your current balance is 30, but that costs 50.")
        .with_instance("/account/12345/msgs/abc")
        .with_cause(cause)
        .with_("balance", 30)
        .with_("accounts", ["/account/12345", "/account/67890"])
        .build()
    )


@pytest.fixture(scope="function")
def strict_status(monkeypatch):
    """Resolve unknown status codes strictly for the duration of a test."""
    monkeypatch.setattr(settings, "strict_status", True)


@pytest.fixture(scope="function")
def app() -> FastAPI:
    """A small app exercising every registered handler."""
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/problems/{code}")
    def raise_problem(code: int):
        raise ProblemException(Problem.value_of(lookup(code), detail="raised by route"))

    @app.get("/untyped")
    def raise_untyped():
        raise ProblemException(Problem.builder().with_title("Untyped").build())

    @app.get("/http/{code}")
    def raise_http(code: int):
        raise HTTPException(status_code=code, detail="plain http error", headers={"X-Trace": "t-1"})

    @app.post("/decode")
    async def decode_body(body: dict):
        problem = decode(body)
        return {"status": problem.status.code if problem.status else None}

    @app.get("/reserved")
    def reserved():
        ProblemBuilder().with_("instance", "x")

    return app


@pytest.fixture(scope="function")
def client(app: FastAPI):
    return TestClient(app)
