"""Tests for OperationResult bookkeeping."""

from __future__ import annotations

import pytest

from opresult import Message, OperationResult, OutcomeCode, Severity, result_error, result_ok


def _with_code(code: OutcomeCode) -> OperationResult[None]:
    return OperationResult[None]().set_code(code)


def test_fresh_result_is_success_and_empty() -> None:
    result = OperationResult[int]()
    assert result.code is OutcomeCode.SUCCESS
    assert result.messages == []
    assert result.return_value is None
    assert result


@pytest.mark.parametrize("code", list(OutcomeCode))
def test_add_info_never_changes_code(code: OutcomeCode) -> None:
    result = _with_code(code)
    result.add_info("note")
    assert result.code is code
    assert result.messages[-1] == Message(Severity.INFO, "note")


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        (OutcomeCode.UNKNOWN, OutcomeCode.WARNING),
        (OutcomeCode.SUCCESS, OutcomeCode.WARNING),
        (OutcomeCode.WARNING, OutcomeCode.WARNING),
        (OutcomeCode.FAILURE, OutcomeCode.FAILURE),
    ],
)
def test_add_warning_escalates_but_never_downgrades(code: OutcomeCode, expected: OutcomeCode) -> None:
    result = _with_code(code).add_warning("slow")
    assert result.code is expected
    assert result.messages[-1] == Message(Severity.WARNING, "slow")


@pytest.mark.parametrize("code", list(OutcomeCode))
def test_add_error_always_fails(code: OutcomeCode) -> None:
    result = _with_code(code).add_error("boom")
    assert result.code is OutcomeCode.FAILURE


def test_stored_any_message_is_neutral() -> None:
    result = OperationResult[None]().add_message(Message(Severity.ANY, "whatever"))
    assert result.code is OutcomeCode.SUCCESS
    assert result.get_last_info() is None
    assert result.get_last() == Message(Severity.ANY, "whatever")


def test_no_dedup() -> None:
    result = OperationResult[None]()
    result.add_info("same")
    result.add_info("same")
    assert len(result.messages) == 2


def test_each_add_appends_exactly_one() -> None:
    result = OperationResult[None]()
    for n, add in enumerate([result.add_info, result.add_warning, result.add_error], start=1):
        add("x")
        assert len(result.messages) == n


def test_end_to_end_sequence() -> None:
    result = OperationResult[None]()
    result.add_info("start")
    result.add_warning("slow")
    result.add_error("boom")
    assert result.code is OutcomeCode.FAILURE
    assert result.messages == [
        Message(Severity.INFO, "start"),
        Message(Severity.WARNING, "slow"),
        Message(Severity.ERROR, "boom"),
    ]


def test_set_code_overrides_in_any_direction() -> None:
    result = OperationResult[None]().add_error("boom")
    result.set_code()
    assert result.code is OutcomeCode.SUCCESS
    result.set_code(OutcomeCode.UNKNOWN)
    assert result.code is OutcomeCode.UNKNOWN


def test_remove_messages_by_severity_keeps_order_and_code() -> None:
    result = OperationResult[None]()
    result.add_info("a").add_warning("w1").add_info("b").add_warning("w2").add_error("e")
    messages = result.messages
    result.remove_messages(Severity.WARNING)
    assert result.messages == [
        Message(Severity.INFO, "a"),
        Message(Severity.INFO, "b"),
        Message(Severity.ERROR, "e"),
    ]
    assert result.messages is messages
    assert result.code is OutcomeCode.FAILURE


def test_remove_messages_default_empties() -> None:
    result = OperationResult[None]().add_info("a").add_warning("w")
    result.remove_messages()
    assert result.messages == []
    assert result.code is OutcomeCode.WARNING


def test_get_last_by_severity() -> None:
    result = OperationResult[None]()
    result.add_info("a").add_error("b").add_info("c").add_error("d")
    assert result.get_last_error() == Message(Severity.ERROR, "d")
    assert result.get_last_info() == Message(Severity.INFO, "c")
    assert result.get_last_warning() is None


def test_messages_of_query() -> None:
    result = OperationResult[None]().add_info("a").add_warning("w").add_info("b")
    assert [m.text for m in result.messages_of(Severity.INFO)] == ["a", "b"]
    assert len(result.messages_of(Severity.ANY)) == 3
    assert result.has_warnings
    assert not result.has_errors


def test_truthiness_is_strict() -> None:
    assert OperationResult[None]()
    warned = OperationResult[None]().add_warning("w")
    assert not warned
    assert warned.succeeded
    failed = OperationResult[None]().add_error("e")
    assert not failed
    assert not failed.succeeded
    assert not _with_code(OutcomeCode.UNKNOWN)


def test_chaining_keeps_payload() -> None:
    result = OperationResult[str]().add_info("set").set_return_value("hello").add_warning("w")
    assert result.return_value == "hello"
    assert result.code is OutcomeCode.WARNING


def test_payload_is_independent_of_bookkeeping() -> None:
    result = OperationResult[int]().set_return_value(7).add_error("boom")
    assert result.return_value == 7
    result.return_value = 8
    assert result.code is OutcomeCode.FAILURE


@pytest.mark.parametrize(("value_type", "empty"), [(int, 0), (str, ""), (list, []), (dict, {})])
def test_typed_starts_at_empty_value(value_type: type, empty: object) -> None:
    result = OperationResult.typed(value_type)
    assert result.return_value == empty
    assert result.code is OutcomeCode.SUCCESS


def test_result_ok() -> None:
    result = result_ok(42, "found it", "took 3 tries")
    assert result.return_value == 42
    assert result.code is OutcomeCode.SUCCESS
    assert [m.text for m in result.messages] == ["found it", "took 3 tries"]


def test_result_error() -> None:
    result = result_error("a", "b")
    assert result.code is OutcomeCode.FAILURE
    assert [m.severity for m in result.messages] == [Severity.ERROR, Severity.ERROR]
    assert result_error().code is OutcomeCode.FAILURE


def test_repr() -> None:
    result = OperationResult[int](1).add_info("x")
    assert repr(result).startswith("OperationResult(SUCCESS, messages=[")
    assert "return_value=1" in repr(result)
