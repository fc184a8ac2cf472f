"""
Tests for the combinator engine

Covers result types, check(), and the five combinators, including evaluation
order and short-circuiting via call-recording stub rules.
"""
import pytest
from user_validation import (
    Valid, Invalid, VALID, check, and_, or_, xor, all_of, none_of, evaluate,
    create_user,
)


@pytest.fixture
def user():
    """Any user; stub rules ignore the record."""
    return create_user("basic", "johndoe123", "john@site.il", "secret99", 30)


class Recorder:
    """Builds stub rules that record the order they were called in."""

    def __init__(self):
        self.calls = []

    def passing(self, name):
        def rule(user):
            self.calls.append(name)
            return VALID
        return rule

    def failing(self, name, reason=None):
        def rule(user):
            self.calls.append(name)
            return Invalid(reason or f"{name} failed")
        return rule


@pytest.fixture
def recorder():
    return Recorder()


class TestValidationResult:
    """Test Valid and Invalid."""

    def test_valid_has_no_reason(self):
        assert Valid().is_valid is True
        assert Valid().reason is None

    def test_invalid_has_reason(self):
        result = Invalid("Too short")
        assert result.is_valid is False
        assert result.reason == "Too short"

    def test_invalid_rejects_empty_reason(self):
        with pytest.raises(ValueError):
            Invalid("")

    def test_value_equality(self):
        assert Valid() == VALID
        assert Invalid("x") == Invalid("x")
        assert Invalid("x") != Invalid("y")


class TestCheck:
    """Test check() rule construction."""

    def test_predicate_true_is_valid(self, user):
        rule = check(lambda u: u.age > 18, "User must be older than 18")
        assert evaluate(rule, user) == VALID

    def test_predicate_false_is_invalid_with_reason(self, user):
        rule = check(lambda u: u.age > 99, "Too young")
        assert evaluate(rule, user) == Invalid("Too young")

    def test_predicate_error_propagates(self, user):
        rule = check(lambda u: 1 / 0, "never")
        with pytest.raises(ZeroDivisionError):
            evaluate(rule, user)


class TestAnd:
    """Test and_() fail-fast conjunction."""

    def test_first_failure_skips_second(self, user, recorder):
        rule = and_(recorder.failing("a"), recorder.passing("b"))
        assert evaluate(rule, user) == Invalid("a failed")
        assert recorder.calls == ["a"]

    def test_both_fail_reports_first_reason(self, user, recorder):
        rule = and_(recorder.failing("a"), recorder.failing("b"))
        assert evaluate(rule, user).reason == "a failed"
        assert recorder.calls == ["a"]

    def test_second_result_passes_through(self, user, recorder):
        rule = and_(recorder.passing("a"), recorder.failing("b"))
        assert evaluate(rule, user) == Invalid("b failed")
        assert recorder.calls == ["a", "b"]

    def test_both_pass(self, user, recorder):
        rule = and_(recorder.passing("a"), recorder.passing("b"))
        assert evaluate(rule, user).is_valid


class TestOr:
    """Test or_() disjunction without short-circuit."""

    def test_both_fail_joins_reasons(self, user, recorder):
        rule = or_(recorder.failing("a"), recorder.failing("b"))
        assert evaluate(rule, user) == Invalid("a failed or b failed")
        assert recorder.calls == ["a", "b"]

    def test_first_pass_still_evaluates_second(self, user, recorder):
        rule = or_(recorder.passing("a"), recorder.failing("b"))
        assert evaluate(rule, user) == VALID
        assert recorder.calls == ["a", "b"]

    def test_second_pass_is_valid(self, user, recorder):
        rule = or_(recorder.failing("a"), recorder.passing("b"))
        assert evaluate(rule, user).is_valid

    def test_missing_reason_reported_as_unknown(self, user):
        class Reasonless:
            is_valid = False
            reason = None

        rule = or_(lambda u: Reasonless(), lambda u: Invalid("b failed"))
        assert evaluate(rule, user).reason == "Unknown or b failed"


class TestXor:
    """Test xor() exclusive or."""

    def test_exactly_one_valid(self, user, recorder):
        assert evaluate(xor(recorder.passing("a"), recorder.failing("b")), user).is_valid
        assert evaluate(xor(recorder.failing("a"), recorder.passing("b")), user).is_valid

    def test_both_false_message(self, user, recorder):
        rule = xor(recorder.failing("a"), recorder.failing("b"))
        assert evaluate(rule, user) == Invalid("XOR failed: both validations were false")
        assert recorder.calls == ["a", "b"]

    def test_both_true_message(self, user, recorder):
        rule = xor(recorder.passing("a"), recorder.passing("b"))
        assert evaluate(rule, user) == Invalid("XOR failed: both validations were true")
        assert recorder.calls == ["a", "b"]


class TestAllOf:
    """Test all_of()."""

    def test_empty_is_valid(self, user):
        assert evaluate(all_of(), user) == VALID

    def test_returns_first_failure_in_order(self, user, recorder):
        rule = all_of(recorder.passing("a"), recorder.failing("b"), recorder.failing("c"))
        assert evaluate(rule, user) == Invalid("b failed")
        assert recorder.calls == ["a", "b"]

    def test_all_pass(self, user, recorder):
        rule = all_of(recorder.passing("a"), recorder.passing("b"), recorder.passing("c"))
        assert evaluate(rule, user).is_valid
        assert recorder.calls == ["a", "b", "c"]


class TestNoneOf:
    """Test none_of()."""

    def test_empty_is_valid(self, user):
        assert evaluate(none_of(), user) == VALID

    def test_any_pass_is_invalid(self, user, recorder):
        expected = Invalid("At least one validation passed, expected none.")
        assert evaluate(none_of(recorder.passing("a"), recorder.failing("b")), user) == expected
        assert evaluate(none_of(recorder.failing("c"), recorder.passing("d")), user) == expected

    def test_stops_at_first_pass(self, user, recorder):
        rule = none_of(recorder.failing("a"), recorder.passing("b"), recorder.passing("c"))
        evaluate(rule, user)
        assert recorder.calls == ["a", "b"]

    def test_all_fail_is_valid(self, user, recorder):
        assert evaluate(none_of(recorder.failing("a"), recorder.failing("b")), user).is_valid


class TestComposition:
    """Test nesting and determinism."""

    def test_combinators_nest(self, user, recorder):
        rule = all_of(
            or_(recorder.failing("a"), recorder.passing("b")),
            and_(recorder.passing("c"), xor(recorder.passing("d"), recorder.failing("e"))),
        )
        assert evaluate(rule, user).is_valid
        assert recorder.calls == ["a", "b", "c", "d", "e"]

    def test_idempotent(self, user, recorder):
        rule = or_(recorder.failing("a"), recorder.failing("b"))
        assert evaluate(rule, user) == evaluate(rule, user)
