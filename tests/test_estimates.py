import math

import pytest

from core.domain import PertTask, RoundingMode, TimeUnit, parse_dependency_ids
from core.exceptions import ValidationError
from core.services.scheduling import (
    estimates_from_likely,
    estimates_out_of_order,
    expected_duration,
    round_offset,
    validate_estimates,
)


@pytest.mark.parametrize(
    "o, m, p, expected",
    [
        (1, 2, 3, 2.0),
        (2, 3, 6, 20 / 6),
        (0, 0, 0, 0.0),
        (4, 4, 4, 4.0),
    ],
)
def test_expected_duration_weighted_mean(task_factory, o, m, p, expected):
    assert expected_duration(task_factory("t", o, m, p)) == pytest.approx(expected)


def test_expected_duration_does_not_validate(task_factory):
    assert expected_duration(task_factory("t", -6, 0, 0)) == pytest.approx(-1.0)


def test_round_offset_half_up_goes_away_from_zero():
    assert round_offset(2.5) == 3
    assert round_offset(3.5) == 4
    assert round_offset(-2.5) == -3
    assert round_offset(4.49) == 4


def test_round_offset_half_even():
    assert round_offset(2.5, RoundingMode.HALF_EVEN) == 2
    assert round_offset(3.5, RoundingMode.HALF_EVEN) == 4
    assert round_offset(4.51, RoundingMode.HALF_EVEN) == 5


def test_round_offset_rejects_non_finite():
    with pytest.raises(ValidationError):
        round_offset(math.nan)


def test_estimates_from_likely_applies_error_range():
    assert estimates_from_likely(10, 20) == (8, 10, 12)
    # optimistic never drops below one unit
    assert estimates_from_likely(1, 90) == (1, 1, 2)
    assert estimates_from_likely(5, 0) == (5, 5, 5)


def test_estimates_from_likely_rejects_negative_range():
    with pytest.raises(ValidationError) as excinfo:
        estimates_from_likely(5, -10)
    assert excinfo.value.code == "ESTIMATE_RANGE_INVALID"


def test_validate_estimates(task_factory):
    validate_estimates(task_factory("ok", 0, 1, 2))
    with pytest.raises(ValidationError):
        validate_estimates(task_factory("neg", 1, -1, 2))
    with pytest.raises(ValidationError):
        validate_estimates(task_factory("nan", 1, 1, math.nan))


def test_estimates_out_of_order(task_factory):
    assert not estimates_out_of_order(task_factory("a", 1, 2, 3))
    assert not estimates_out_of_order(task_factory("b", 2, 2, 2))
    assert estimates_out_of_order(task_factory("c", 3, 2, 1))
    assert estimates_out_of_order(task_factory("d", 1, 5, 4))


def test_parse_dependency_ids_from_editor_text():
    assert parse_dependency_ids("1, 2,,3 ") == ("1", "2", "3")
    assert parse_dependency_ids(["a", " b ", ""]) == ("a", "b")
    assert parse_dependency_ids(None) == ()


def test_new_task_template_defaults():
    task = PertTask.create()
    assert task.name == "New Task"
    assert (task.optimistic, task.likely, task.pessimistic) == (1, 2, 4)
    assert task.dependencies == ()
    assert len(task.id) == 9
    assert PertTask.create().id != task.id


def test_task_from_dict_reads_front_end_payload():
    task = PertTask.from_dict(
        {
            "id": "2",
            "name": "Market Research",
            "optimistic": 2,
            "likely": "3",
            "pessimistic": 6,
            "dependencies": ["1"],
            "category": "Research",
            "timeUnit": "hours",
        }
    )
    assert task.likely == 3.0
    assert task.dependencies == ("1",)
    assert task.category == "Research"
    assert task.time_unit is TimeUnit.HOURS
    assert task.to_dict()["timeUnit"] == "hours"


@pytest.mark.parametrize(
    "payload, code",
    [
        ({"name": "x", "optimistic": 1, "likely": 1, "pessimistic": 1}, "TASK_ID_MISSING"),
        ({"id": "1", "optimistic": 1, "likely": 1, "pessimistic": 1}, "TASK_NAME_MISSING"),
        ({"id": "1", "name": "x", "optimistic": "soon", "likely": 1, "pessimistic": 1}, "ESTIMATE_INVALID"),
        ({"id": "1", "name": "x", "optimistic": True, "likely": 1, "pessimistic": 1}, "ESTIMATE_INVALID"),
        ({"id": "1", "name": "x", "likely": 1, "pessimistic": 1}, "ESTIMATE_INVALID"),
        (
            {"id": "1", "name": "x", "optimistic": 1, "likely": 1, "pessimistic": 1, "timeUnit": "weeks"},
            "TASK_TIME_UNIT_INVALID",
        ),
    ],
)
def test_task_from_dict_rejects_bad_payload(payload, code):
    with pytest.raises(ValidationError) as excinfo:
        PertTask.from_dict(payload)
    assert excinfo.value.code == code
