import json

import pytest

from studydesk.freerooms import (
    BUILDINGS,
    FreeRoomResult,
    RoomRecord,
    free_rooms_for_period,
    parse_free_rooms,
    section_number,
)


SAMPLE = {
    "理教": {
        "default": {
            "c1": ["理教101", "理教102"],
            "c3": ["理教201"],
        }
    },
    "一教": {
        "default": {"c2": ["一教101"]},
    },
}


def test_section_number_strips_non_digits():
    assert section_number("第3节课") == "3"
    assert section_number("c12") == "12"
    assert section_number("abc") == ""


def test_parse_all_sections():
    result = parse_free_rooms(json.dumps(SAMPLE), "理教")
    assert result.building == "理教"
    assert result.records == (
        RoomRecord("1", "理教101"),
        RoomRecord("1", "理教102"),
        RoomRecord("3", "理教201"),
    )
    assert result.status == "状态：共找到 3 条记录"


def test_parse_filters_selected_sections():
    result = parse_free_rooms(json.dumps(SAMPLE), "理教", ["第3节课"])
    assert [r.room for r in result.records] == ["理教201"]
    assert all(r.section == "3" for r in result.records)


def test_missing_building_falls_back_to_first_key():
    result = parse_free_rooms(json.dumps(SAMPLE), "哲学")
    assert result.building == min(SAMPLE)
    assert result.count == sum(
        len(v) for v in SAMPLE[min(SAMPLE)]["default"].values()
    )


def test_empty_text_means_no_data():
    result = parse_free_rooms("   ", "一教")
    assert result.building is None
    assert result.records == ()
    assert result.status == "状态：无可用数据"


def test_no_matching_rooms_status():
    result = parse_free_rooms(json.dumps(SAMPLE), "理教", ["第9节课"])
    assert result.count == 0
    assert result.status == "状态：未找到空闲教室"


def test_empty_rooms_and_non_strings_are_skipped():
    data = {"一教": {"d": {"c1": ["", 5, "一教103"]}}}
    result = parse_free_rooms(json.dumps(data).encode("utf-8"), "一教")
    assert result.records == (RoomRecord("1", "一教103"),)


@pytest.mark.parametrize("text", ["not json", "[1, 2]", "{broken"])
def test_parse_rejects_invalid_json(text):
    with pytest.raises(ValueError):
        parse_free_rooms(text, "一教")


def test_free_rooms_for_period_from_text_and_mapping():
    text = json.dumps(SAMPLE)
    assert free_rooms_for_period(text, "理教", 1) == ["理教101", "理教102"]
    assert free_rooms_for_period(SAMPLE, "理教", 1) == ["理教101", "理教102"]


def test_free_rooms_for_period_collects_across_dates():
    data = {"国关": {"a": {"c5": ["x"]}, "b": {"c5": ["y"]}, "c": {"c6": ["z"]}}}
    assert free_rooms_for_period(data, "国关", 5) == ["x", "y"]


def test_free_rooms_for_period_unknown_building_is_empty():
    assert free_rooms_for_period(SAMPLE, "政管", 1) == []


def test_free_rooms_for_period_errors():
    with pytest.raises(ValueError):
        free_rooms_for_period("", "一教", 1)
    with pytest.raises(ValueError):
        free_rooms_for_period("[]", "一教", 1)


def test_result_status_is_consistent_with_count():
    result = FreeRoomResult("一教", (RoomRecord("1", "a"),))
    assert str(result.count) in result.status
    assert "理教" in BUILDINGS