"""Unit tests for evolution_engine.conditions – classifying PokéAPI evolution details."""
import pytest
from evolution_engine.conditions import (
    TriggerKind, LevelCondition, ItemCondition, TradeCondition, FriendshipCondition,
    TimeOfDayCondition, OtherCondition, parse_condition, describe_condition,
)


def detail(trigger="level-up", **fields):
    record = {
        "trigger": {"name": trigger, "url": "https://pokeapi.co/api/v2/evolution-trigger/1/"},
        "item": None, "held_item": None, "known_move": None, "known_move_type": None,
        "location": None, "min_level": None, "min_happiness": None, "min_affection": None,
        "min_beauty": None, "time_of_day": "",
    }
    record.update(fields)
    return record


class TestParseCondition:
    def test_level(self):
        c = parse_condition(detail(min_level=16))
        assert isinstance(c, LevelCondition)
        assert c.kind is TriggerKind.LEVEL
        assert c.min_level == 16
        assert c.time_of_day is None

    def test_use_item(self):
        c = parse_condition(detail("use-item", item={"name": "thunder-stone"}))
        assert isinstance(c, ItemCondition)
        assert c.item == "thunder-stone"

    def test_trade_with_held_item(self):
        c = parse_condition(detail("trade", held_item={"name": "metal-coat"}))
        assert isinstance(c, TradeCondition)
        assert c.held_item == "metal-coat"

    def test_friendship_keeps_time_of_day(self):
        c = parse_condition(detail(min_happiness=160, time_of_day="night"))
        assert isinstance(c, FriendshipCondition)
        assert c.time_of_day == "night"

    def test_time_of_day_only(self):
        c = parse_condition(detail(time_of_day="day", held_item={"name": "oval-stone"}))
        assert isinstance(c, TimeOfDayCondition)
        assert c.held_item == "oval-stone"

    @pytest.mark.parametrize("fields, kind", [
        ({"known_move": {"name": "ancient-power"}}, TriggerKind.MOVE_KNOWN),
        ({"known_move_type": {"name": "fairy"}}, TriggerKind.MOVE_TYPE_KNOWN),
        ({"location": {"name": "mt-coronet"}}, TriggerKind.LOCATION),
        ({"min_affection": 2}, TriggerKind.AFFECTION),
        ({"min_beauty": 171}, TriggerKind.BEAUTY),
    ])
    def test_other_kinds(self, fields, kind):
        assert parse_condition(detail(**fields)).kind is kind

    def test_move_type_wins_over_affection(self):
        c = parse_condition(detail(known_move_type={"name": "fairy"}, min_affection=2))
        assert c.kind is TriggerKind.MOVE_TYPE_KNOWN

    def test_bare_level_up(self):
        c = parse_condition(detail())
        assert isinstance(c, LevelCondition)
        assert c.min_level is None

    def test_unknown_trigger(self):
        c = parse_condition(detail("shed"))
        assert isinstance(c, OtherCondition)
        assert c.trigger == "shed"

    def test_missing_trigger_defaults_to_level_up(self):
        c = parse_condition({"min_level": 7})
        assert c == LevelCondition("level-up", min_level=7)


class TestDescribeCondition:
    def test_root_has_no_label(self):
        assert describe_condition(None) == ""

    def test_level(self):
        assert describe_condition(LevelCondition("level-up", min_level=16)) == "Lv. 16"

    def test_item(self):
        assert describe_condition(ItemCondition("use-item", item="fire-stone")) == "Use fire stone"

    def test_trade(self):
        assert describe_condition(TradeCondition("trade")) == "Trade"
        assert describe_condition(TradeCondition("trade", held_item="kings-rock")) == "Trade holding kings rock"

    def test_friendship(self):
        assert describe_condition(FriendshipCondition("level-up", min_happiness=220)) == "High Friendship"
        assert describe_condition(
            FriendshipCondition("level-up", min_happiness=160, time_of_day="day")
        ) == "High Friendship (day)"

    def test_other(self):
        assert describe_condition(OtherCondition("tower-of-darkness")) == "Tower Of Darkness"


class TestUseItemWithoutItem:
    def test_use_item_trigger_alone_is_item(self):
        c = parse_condition({"trigger": {"name": "use-item"}, "item": None})
        assert isinstance(c, ItemCondition)
        assert c.item is None
        assert c.describe() == "Use an item"
