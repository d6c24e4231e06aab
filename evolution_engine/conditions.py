# evolution_engine/conditions.py

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Union


class TriggerKind(str, Enum):
    LEVEL = "level"
    ITEM = "item"
    TRADE = "trade"
    FRIENDSHIP = "friendship"
    AFFECTION = "affection"
    BEAUTY = "beauty"
    TIME_OF_DAY = "time_of_day"
    LOCATION = "location"
    MOVE_KNOWN = "move_known"
    MOVE_TYPE_KNOWN = "move_type_known"
    OTHER = "other"


def _pretty(name: str) -> str:
    return name.replace("-", " ")


def _suffix(time_of_day: Optional[str], held_item: Optional[str] = None) -> str:
    text = ""
    if time_of_day:
        text += f" ({time_of_day})"
    if held_item:
        text += f" holding {_pretty(held_item)}"
    return text


# --- One variant per evolution trigger kind ---
@dataclass(frozen=True)
class LevelCondition:
    kind: ClassVar[TriggerKind] = TriggerKind.LEVEL
    trigger: str
    min_level: Optional[int] = None
    time_of_day: Optional[str] = None
    held_item: Optional[str] = None

    def describe(self) -> str:
        base = f"Lv. {self.min_level}" if self.min_level else "Level up"
        return base + _suffix(self.time_of_day, self.held_item)


@dataclass(frozen=True)
class ItemCondition:
    kind: ClassVar[TriggerKind] = TriggerKind.ITEM
    trigger: str
    item: Optional[str] = None

    def describe(self) -> str:
        return f"Use {_pretty(self.item)}" if self.item else "Use an item"


@dataclass(frozen=True)
class TradeCondition:
    kind: ClassVar[TriggerKind] = TriggerKind.TRADE
    trigger: str
    held_item: Optional[str] = None

    def describe(self) -> str:
        return "Trade" + _suffix(None, self.held_item)


@dataclass(frozen=True)
class FriendshipCondition:
    kind: ClassVar[TriggerKind] = TriggerKind.FRIENDSHIP
    trigger: str
    min_happiness: int
    time_of_day: Optional[str] = None

    def describe(self) -> str:
        return "High Friendship" + _suffix(self.time_of_day)


@dataclass(frozen=True)
class AffectionCondition:
    kind: ClassVar[TriggerKind] = TriggerKind.AFFECTION
    trigger: str
    min_affection: int

    def describe(self) -> str:
        return "High Affection"


@dataclass(frozen=True)
class BeautyCondition:
    kind: ClassVar[TriggerKind] = TriggerKind.BEAUTY
    trigger: str
    min_beauty: int

    def describe(self) -> str:
        return "High Beauty"


@dataclass(frozen=True)
class TimeOfDayCondition:
    kind: ClassVar[TriggerKind] = TriggerKind.TIME_OF_DAY
    trigger: str
    time_of_day: str
    held_item: Optional[str] = None

    def describe(self) -> str:
        return "Level up" + _suffix(self.time_of_day, self.held_item)


@dataclass(frozen=True)
class LocationCondition:
    kind: ClassVar[TriggerKind] = TriggerKind.LOCATION
    trigger: str
    location: str

    def describe(self) -> str:
        return f"Level up at {_pretty(self.location)}"


@dataclass(frozen=True)
class MoveKnownCondition:
    kind: ClassVar[TriggerKind] = TriggerKind.MOVE_KNOWN
    trigger: str
    known_move: str

    def describe(self) -> str:
        return f"Know {_pretty(self.known_move)}"


@dataclass(frozen=True)
class MoveTypeKnownCondition:
    kind: ClassVar[TriggerKind] = TriggerKind.MOVE_TYPE_KNOWN
    trigger: str
    known_move_type: str

    def describe(self) -> str:
        return f"Know a {self.known_move_type} move"


@dataclass(frozen=True)
class OtherCondition:
    kind: ClassVar[TriggerKind] = TriggerKind.OTHER
    trigger: str

    def describe(self) -> str:
        return _pretty(self.trigger).title()


EvolutionCondition = Union[
    LevelCondition, ItemCondition, TradeCondition, FriendshipCondition,
    AffectionCondition, BeautyCondition, TimeOfDayCondition, LocationCondition,
    MoveKnownCondition, MoveTypeKnownCondition, OtherCondition,
]


def _name(obj: Optional[Dict[str, Any]]) -> Optional[str]:
    # Named resources come as {"name": ..., "url": ...} or null
    return obj.get("name") if obj else None


def parse_condition(detail: Dict[str, Any]) -> EvolutionCondition:
    """
    Classifies one PokéAPI `evolution_details` record into its variant.
    The first matching rule wins, so a record carrying several requirements
    is reported by its most specific one.
    """
    trigger = _name(detail.get("trigger")) or "level-up"
    time_of_day = detail.get("time_of_day") or None
    held_item = _name(detail.get("held_item"))
    item = _name(detail.get("item"))

    if trigger == "trade":
        return TradeCondition(trigger, held_item=held_item)
    if trigger == "use-item" or item:
        return ItemCondition(trigger, item=item)
    if detail.get("known_move"):
        return MoveKnownCondition(trigger, known_move=_name(detail["known_move"]))
    if detail.get("known_move_type"):
        return MoveTypeKnownCondition(trigger, known_move_type=_name(detail["known_move_type"]))
    if detail.get("location"):
        return LocationCondition(trigger, location=_name(detail["location"]))
    if detail.get("min_happiness"):
        return FriendshipCondition(trigger, min_happiness=detail["min_happiness"], time_of_day=time_of_day)
    if detail.get("min_affection"):
        return AffectionCondition(trigger, min_affection=detail["min_affection"])
    if detail.get("min_beauty"):
        return BeautyCondition(trigger, min_beauty=detail["min_beauty"])
    if detail.get("min_level"):
        return LevelCondition(trigger, min_level=detail["min_level"], time_of_day=time_of_day, held_item=held_item)
    if time_of_day:
        return TimeOfDayCondition(trigger, time_of_day=time_of_day, held_item=held_item)
    if trigger == "level-up":
        return LevelCondition(trigger, held_item=held_item)
    return OtherCondition(trigger)


def describe_condition(condition: Optional[EvolutionCondition]) -> str:
    """Short display label for an evolution condition, empty for the chain root."""
    return condition.describe() if condition else ""
