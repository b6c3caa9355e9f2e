import pytest

from problem_details.domain import status
from problem_details.domain.builder import ProblemBuilder
from problem_details.domain.problem import RESERVED_NAMES, Problem
from problem_details.errors import DomainValidationError, ReservedKeyError


def test_builder_stages_every_field():
    cause = Problem.value_of(status.BAD_GATEWAY)
    problem = (
        ProblemBuilder()
        .with_type("https://example.com/probs/out-of-credit")
        .with_title("You do not have enough credit.")
        .with_status(status.FORBIDDEN)
        .with_detail("Your current balance is 30, but that costs 50.")
        .with_instance("/account/12345/msgs/abc")
        .with_cause(cause)
        .with_("balance", 30)
        .build()
    )
    assert problem.type == "https://example.com/probs/out-of-credit"
    assert problem.title == "You do not have enough credit."
    assert problem.status is status.FORBIDDEN
    assert problem.detail == "Your current balance is 30, but that costs 50."
    assert problem.instance == "/account/12345/msgs/abc"
    assert problem.cause is cause
    assert dict(problem.parameters) == {"balance": 30}


def test_last_write_wins():
    problem = (
        ProblemBuilder()
        .with_title("first")
        .with_title("second")
        .with_("key", 1)
        .with_("key", 2)
        .build()
    )
    assert problem.title == "second"
    assert problem.parameters["key"] == 2


def test_create_seeds_title_and_status():
    problem = ProblemBuilder.create(status.TOO_MANY_REQUESTS).build()
    assert problem.title == "Too Many Requests"
    assert problem.status is status.TOO_MANY_REQUESTS


def test_create_title_can_be_overridden():
    problem = ProblemBuilder.create(status.NOT_FOUND).with_title("No such order").build()
    assert problem.title == "No such order"


def test_problem_builder_factory_returns_fresh_builder():
    first = Problem.builder()
    second = Problem.builder()
    assert isinstance(first, ProblemBuilder)
    assert first is not second


# ============================================================================
# RESERVED KEY TESTS
# ============================================================================


@pytest.mark.parametrize("key", sorted(RESERVED_NAMES))
def test_with_reserved_key_fails(key):
    """Test every reserved member name is rejected as an extension attribute."""
    with pytest.raises(ReservedKeyError) as exc_info:
        ProblemBuilder().with_(key, "x")
    assert exc_info.value.key == key
    assert key in str(exc_info.value)


def test_reserved_key_error_is_value_error():
    with pytest.raises(ValueError):
        ProblemBuilder().with_("type", "x")
    with pytest.raises(DomainValidationError):
        ProblemBuilder().with_("type", "x")


def test_failed_with_leaves_builder_state_unchanged():
    """Test a rejected status key does not disturb staged values."""
    builder = ProblemBuilder.create(status.OK).with_detail("d").with_("balance", "0")
    with pytest.raises(ReservedKeyError) as exc_info:
        builder.with_("status", "x")
    assert exc_info.value.key == "status"

    problem = builder.build()
    assert problem.status is status.OK
    assert problem.title == "OK"
    assert problem.detail == "d"
    assert dict(problem.parameters) == {"balance": "0"}


def test_reserved_names_are_case_sensitive():
    """Test only the exact lower-case names are reserved."""
    problem = ProblemBuilder().with_("Status", 1).build()
    assert problem.parameters["Status"] == 1


def test_with_parameters_stages_all():
    problem = ProblemBuilder().with_parameters({"a": 1, "b": [1, 2]}).build()
    assert dict(problem.parameters) == {"a": 1, "b": [1, 2]}


def test_with_parameters_is_all_or_nothing():
    builder = ProblemBuilder().with_("a", 1)
    with pytest.raises(ReservedKeyError) as exc_info:
        builder.with_parameters({"b": 2, "cause": "x", "c": 3})
    assert exc_info.value.key == "cause"
    assert dict(builder.build().parameters) == {"a": 1}


# ============================================================================
# BUILD SNAPSHOT TESTS
# ============================================================================


def test_build_produces_independent_snapshots():
    """Test build does not consume state and later changes do not leak."""
    builder = ProblemBuilder().with_title("first").with_("a", 1)
    first = builder.build()

    builder.with_title("second").with_("b", 2)
    second = builder.build()

    assert first.title == "first"
    assert dict(first.parameters) == {"a": 1}
    assert second.title == "second"
    assert dict(second.parameters) == {"a": 1, "b": 2}


def test_build_twice_without_changes_gives_equal_problems():
    builder = ProblemBuilder.create(status.CONFLICT).with_("id", 7)
    first = builder.build()
    second = builder.build()
    assert first == second
    assert first is not second


def test_with_type_none_restores_default():
    problem = ProblemBuilder().with_type("https://example.com/x").with_type(None).build()
    assert problem.type == "about:blank"
    assert problem.explicit_type is False
