"""Tests for import/delete result classification."""

from core.domain.models import DeleteOutcome
from core.services.results import classify_delete, classify_import


def test_import_partitions_are_read_and_nulls_become_empty():
    outcome = classify_import(
        {
            "succeeded": [{"index": 1, "id": "a", "name": "backup", "group": "ops"}],
            "skipped": None,
            "failed": [{"index": 2, "name": "broken", "error": "Invalid"}],
        }
    )
    assert [i.id for i in outcome.succeeded] == ["a"]
    assert outcome.skipped == []
    assert [i.name for i in outcome.failed] == ["broken"]
    assert outcome.total == 2
    assert not outcome.successful


def test_import_partitions_are_disjoint():
    outcome = classify_import(
        {
            "succeeded": [{"index": 1, "name": "x"}, {"index": 2, "name": "y"}],
            "skipped": [{"index": 2, "name": "y"}],
            "failed": [{"index": 1, "name": "x", "error": "boom"}],
        }
    )
    assert [i.index for i in outcome.failed] == [1]
    assert [i.index for i in outcome.skipped] == [2]
    assert outcome.succeeded == []
    assert outcome.total == 2


def test_import_empty_payload_is_success():
    outcome = classify_import({})
    assert outcome.successful
    assert outcome.total == 0


def test_delete_success_is_derived_from_failed_list():
    outcome = classify_delete(
        {"requestCount": 2, "allsuccessful": True, "failed": [{"id": "a", "message": "nope"}]}
    )
    assert outcome.all_successful is False
    assert outcome.request_count == 2
    assert outcome.failed[0].to_basic_string() == "[a] nope"


def test_delete_count_defaults_to_requested():
    outcome = classify_delete({"allsuccessful": True}, requested=["a", "b", "c"])
    assert outcome.request_count == 3
    assert outcome.all_successful


def test_delete_outcome_flag_matches_failed_list():
    assert DeleteOutcome().all_successful
    assert not DeleteOutcome(failed=[{"id": "a"}]).all_successful




def test_delete_failure_without_id_is_still_a_failure():
    outcome = classify_delete(
        {"allsuccessful": False, "failed": [{"errorCode": "api.error", "message": "unauthorized"}]},
        requested=["a"],
    )
    assert outcome.all_successful is False
    assert [item.to_basic_string() for item in outcome.failed] == ["[?] unauthorized"]


def test_delete_failure_falls_back_to_error_code():
    outcome = classify_delete({"failed": [{"id": "a", "errorCode": "notfound"}]})
    assert outcome.failed[0].to_basic_string() == "[a] notfound"
