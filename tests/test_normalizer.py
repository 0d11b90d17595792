import pytest

from apps.performance.normalizer import (
    ALTERNATE_LABELS,
    CANONICAL_KEYS,
    SEARCH_ORDER,
    UNAVAILABLE,
    camel_case,
    resolve,
    resolve_record,
    summary_fields,
)


def test_camel_case_transform():
    assert camel_case("no_of_ongoing_works") == "noOfOngoingWorks"
    assert camel_case("fin_year") == "finYear"
    assert camel_case("month") == "month"


def test_search_order_is_canonical_then_camel_then_alternates():
    assert SEARCH_ORDER["avg_wage_rate"] == (
        "avg_wage_rate",
        "avgWageRate",
        "Average_Wage_rate_per_day_per_person",
        "average_wage_rate",
    )
    assert SEARCH_ORDER["fin_year"] == ("fin_year", "finYear")


def test_search_order_table_is_read_only():
    with pytest.raises(TypeError):
        SEARCH_ORDER["fin_year"] = ("x",)


@pytest.mark.parametrize("key", CANONICAL_KEYS)
def test_camel_case_only_record_resolves_like_canonical(key):
    assert resolve({camel_case(key): 42}, key) == resolve({key: 42}, key) == 42


@pytest.mark.parametrize(
    "key,label",
    [(key, label) for key, labels in ALTERNATE_LABELS.items() for label in labels],
)
def test_alternate_label_only_record_resolves_like_canonical(key, label):
    assert resolve({label: "1,234"}, key) == resolve({key: "1,234"}, key) == "1,234"


def test_first_populated_alternate_wins():
    record = {
        "Total_Persondays_Generated": None,
        "Persondays_Generated": "",
        "Persondays_of_Central_Liability_so_far": 900,
    }
    assert resolve(record, "persondays_generated") == 900


def test_canonical_beats_alternates():
    record = {"Wages": 10, "total_wages": 20, "totalWages": 30}
    assert resolve(record, "total_wages") == 20


def test_null_and_empty_canonical_fall_through_to_camel_case():
    assert resolve({"month": None, "month_": 1}, "month") is UNAVAILABLE
    assert resolve({"fin_year": "", "finYear": "2024-2025"}, "fin_year") == "2024-2025"


def test_zero_is_a_real_value():
    assert resolve({"households_worked": 0}, "households_worked") == 0


@pytest.mark.parametrize("key", CANONICAL_KEYS)
def test_missing_key_resolves_to_unavailable(key):
    assert resolve({"unrelated": 1}, key) is UNAVAILABLE


def test_non_mapping_record_is_unavailable():
    assert resolve(None, "month") is UNAVAILABLE
    assert resolve(["month"], "month") is UNAVAILABLE


def test_unavailable_is_falsy_placeholder():
    assert not UNAVAILABLE
    assert str(UNAVAILABLE) == "-"


def test_resolve_record_covers_every_canonical_key():
    fields = resolve_record({"month": "Mar"})
    assert [f.key for f in fields] == list(CANONICAL_KEYS)
    assert fields[1].value == "Mar"
    assert not fields[0].available


def test_summary_fields_ignore_alternate_labels():
    record = {"month": "Mar", "Total_Households_Worked": 10, "avgWageRate": 250}
    keys = [f.key for f in summary_fields(record)]
    assert keys == ["month", "avg_wage_rate"]


def test_summary_fields_fall_back_to_raw_fields():
    record = {"a": 1, "b": None, "c": "x", "d": 2, "e": 3, "f": 4, "g": 5}
    fields = summary_fields(record)
    assert [f.key for f in fields] == ["a", "c", "d", "e", "f"]
    assert all(f.raw for f in fields)
    assert fields[0].value == "1"
