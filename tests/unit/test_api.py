# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# cumerr: module-level API tests
import logging

import pytest

from cumerr import (
    ErrorRecord,
    ErrorSettings,
    FatalError,
    Success,
    abort_if_error,
    combine,
    get_settings,
    is_error_value,
    raise_error,
)


# --- raise_error ---
def test_raise_error_without_arguments_is_a_factory():
    record = raise_error()
    assert isinstance(record, ErrorRecord)
    assert record.count() == 0
    assert record.tag() is None


def test_raise_error_creates_record_when_existing_is_none():
    record = raise_error(None, "ESTAT", "a.nofile", "datum")
    assert record.count() == 1
    assert record.tag() == "ESTAT"
    assert record.last_payload() == "datum"


def test_raise_error_aggregates_into_existing():
    record = raise_error()
    same = raise_error(record, "ESTAT", "a.nofile")
    assert same is record
    raise_error(record, "EOPEN", "b.nofile")
    assert record.count() == 2
    assert record.tag() == "ESTAT"


def test_raise_error_with_tag_first_shifts_arguments():
    handles = ["fh"]
    record = raise_error("ESTAT", "a.nofile", handles)
    assert record.last_message() == "(ESTAT) Cannot stat file:[a.nofile]"
    assert record.last_payload() is handles

    assert raise_error("WNOPE").last_message() == "(ETAG) Invalid tag:[WNOPE] "


def test_raise_error_tag_first_with_keyword_payload():
    handles = ["fh"]
    record = raise_error("ESTAT", "a.nofile", payload=handles)
    assert record.last_message() == "(ESTAT) Cannot stat file:[a.nofile]"
    assert record.last_payload() is handles


def test_raise_error_tag_first_with_keyword_params():
    record = raise_error("ESTAT", params="a.nofile")
    assert record.last_message() == "(ESTAT) Cannot stat file:[a.nofile]"
    assert record.last_payload() is None


def test_raise_error_all_keywords():
    record = raise_error()
    same = raise_error(existing=record, tag="EOPEN", params="b", payload=1)
    assert same is record
    assert record.last_message() == "(EOPEN) Cannot open file:[b]"
    assert record.last_payload() == 1

    fresh = raise_error(tag="ESTAT", payload=2)
    assert fresh.last_message() == "(ESTAT) Cannot stat file:[]"
    assert fresh.last_payload() == 2


def test_raise_error_existing_record_with_keyword_payload():
    record = raise_error()
    raise_error(record, "ESTAT", "a", payload="d")
    assert record.last_payload() == "d"


@pytest.mark.parametrize(
    "args,kwargs",
    [
        (("ESTAT", "a.nofile"), {"params": "b.nofile"}),
        (("ESTAT",), {"tag": "EOPEN"}),
        (("ESTAT", "a", "p", "extra"), {}),
        ((), {"existing": "ESTAT"}),
    ],
)
def test_raise_error_rejects_unbindable_arguments(args, kwargs):
    with pytest.raises(TypeError):
        raise_error(*args, **kwargs)


def test_raise_error_on_existing_without_tag_records_enotag():
    record = raise_error()
    raise_error(record)
    assert record.count() == 1
    assert record.last_message() == "(ENOTAG) Missing tag. Params:[]"


def test_raise_error_unregistered_tag_keeps_payload():
    record = raise_error(raise_error(), "EBOGUS", ["p1", "p2"], {"d": 1})
    assert record.last_message().startswith("(ETAG)")
    assert record.last_payload() == {"d": 1}


def test_raise_error_without_tag():
    record = raise_error(raise_error(), None, "p", "d")
    assert record.last_message().startswith("(ENOTAG)")


def test_raise_error_applies_settings_to_new_record():
    settings = ErrorSettings(checked_indices=False)
    record = raise_error(None, "ESTAT", "a", settings=settings)
    assert record.settings is settings
    assert record.message_at(7) is None


# --- is_error_value ---
@pytest.mark.parametrize(
    "value",
    [None, 0, 1, "", "ESTAT", [], {}, Success(1), ValueError("x")],
)
def test_is_error_value_false_for_plain_values(value):
    assert is_error_value(value) is False


def test_is_error_value_true_for_records():
    assert is_error_value(raise_error()) is True
    assert is_error_value(ErrorRecord()) is True
    assert is_error_value(raise_error("ESTAT", "x")) is True


# --- abort_if_error ---
@pytest.mark.parametrize("value", [None, 42, "text", [1], Success("ok")])
def test_abort_if_error_ignores_plain_values(value):
    assert abort_if_error(value) is None


def test_abort_if_error_joins_messages():
    record = raise_error("ESTAT", "a.nofile")
    raise_error(record, "EOPEN", "b.nofile")

    with pytest.raises(FatalError) as excinfo:
        abort_if_error(record)

    assert str(excinfo.value) == (
        "(ESTAT) Cannot stat file:[a.nofile] (EOPEN) Cannot open file:[b.nofile]"
    )
    assert excinfo.value.record is record
    assert excinfo.value.context == {"tag": "ESTAT", "count": 2}


def test_abort_if_error_logs(caplog):
    caplog.set_level(logging.ERROR, logger="cumerr")
    with pytest.raises(FatalError):
        abort_if_error(raise_error("ESTAT", "a"))
    assert "Aborting on error record" in caplog.messages


def test_abort_if_error_on_empty_record_is_noop_by_default():
    assert abort_if_error(raise_error()) is None


def test_abort_if_error_on_empty_record_when_configured():
    with pytest.raises(FatalError) as excinfo:
        abort_if_error(raise_error(), settings=ErrorSettings(abort_on_empty=True))
    assert str(excinfo.value) == ""


def test_abort_on_empty_from_environment(monkeypatch):
    monkeypatch.setenv("CUMERR_ABORT_ON_EMPTY", "true")
    get_settings.cache_clear()
    with pytest.raises(FatalError):
        abort_if_error(ErrorRecord())


# --- combine ---
def test_combine_all_successes():
    result = combine([1, Success(2), Success("three")])
    assert isinstance(result, Success)
    assert result.value == [1, 2, "three"]


def test_combine_merges_failures_in_order():
    first = raise_error("ESTAT", "a.nofile", "pa")
    second = raise_error("EOPEN", "b.nofile", "pb")

    result = combine([Success(1), first, 3, second])

    assert is_error_value(result)
    assert result is not first
    assert result.tag() == "ESTAT"
    assert result.all_messages() == [
        "(ESTAT) Cannot stat file:[a.nofile]",
        "(EOPEN) Cannot open file:[b.nofile]",
    ]
    assert result.all_payloads() == ["pa", "pb"]
    assert first.count() == 1


def test_combine_empty_input():
    assert combine([]) == Success([])
