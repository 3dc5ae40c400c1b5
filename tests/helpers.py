"""
Builders for synthetic event streams used across the test suite.
"""

from datetime import datetime, timedelta

from combatlog.parser.events import Event, EventType
from combatlog.parser.units import Unit

BASE_TIME = datetime(2019, 3, 9, 19, 0, 0)

# Players
TELTA = Unit(0x137E20, "Telta")
ERLE = Unit(0x12DC52, "Erle")
HISTERA = Unit(0x160F5B, "Histera")

# Creatures
IRONHELM = Unit(0xF130005C3B000001, "Dragonflayer Ironhelm")
HANDLER = Unit(0xF130005C3B000002, "Proto-Drake Handler")
SKARVALD = Unit(0xF130005C3B000003, "Skarvald the Constructor")
RUNEMAGE = Unit(0xF130005C3B000004, "Dragonflayer Runecaster")

_DEFAULT = object()


def ev(i, event_type, source=None, target=None, amount=_DEFAULT, spell_id=None):
    """Event at second ``i`` after BASE_TIME. Amount defaults to 100 for kinds carrying one."""
    if amount is _DEFAULT:
        amount = 100 if event_type.has_amount else None
    return Event(
        timestamp=BASE_TIME + timedelta(seconds=i),
        event_type=event_type,
        source=source,
        target=target,
        amount=amount,
        spell_id=spell_id,
    )


def hit(i, source, target, amount=100):
    return ev(i, EventType.SPELL_DAMAGE, source, target, amount)


def heal(i, source, target, amount=100):
    return ev(i, EventType.SPELL_HEAL, source, target, amount)


def died(i, unit):
    return ev(i, EventType.UNIT_DIED, None, unit)


def buff(i, source, target):
    return ev(i, EventType.SPELL_AURA_APPLIED, source, target)


def two_pull_trace():
    """
    Two pulls separated by idle events, every hostile dies at its last appearance.

    Pull one spans positions 1..7, pull two spans positions 10..13.
    """
    return [
        buff(0, ERLE, TELTA),  # 0 pre-pull buff
        hit(1, TELTA, IRONHELM, 1500),  # 1 pull
        hit(2, IRONHELM, TELTA, 800),  # 2
        heal(3, ERLE, TELTA, 1709),  # 3
        hit(4, ERLE, RUNEMAGE, 300),  # 4 second hostile joins
        hit(5, TELTA, RUNEMAGE, 700),  # 5
        died(6, RUNEMAGE),  # 6
        died(7, IRONHELM),  # 7
        buff(8, ERLE, HISTERA),  # 8 idle
        ev(9, EventType.ENVIRONMENTAL_DAMAGE, None, HISTERA, 350),  # 9 idle
        hit(10, HISTERA, HANDLER, 2000),  # 10 second pull
        ev(11, EventType.SWING_DAMAGE, HANDLER, HISTERA, 400),  # 11
        heal(12, ERLE, HISTERA, 900),  # 12
        died(13, HANDLER),  # 13
        buff(14, ERLE, ERLE),  # 14 idle
    ]


def clean_pulls_trace():
    """Pulls where every hostile dies at its last appearance and no pull overlaps."""
    return [
        buff(0, ERLE, TELTA),
        hit(1, TELTA, IRONHELM),
        hit(2, IRONHELM, TELTA),
        heal(3, ERLE, TELTA),
        died(4, IRONHELM),
        buff(5, ERLE, HISTERA),
        hit(6, HISTERA, HANDLER),
        hit(7, ERLE, SKARVALD),
        ev(8, EventType.SWING_DAMAGE, SKARVALD, ERLE),
        died(9, HANDLER),
        ev(10, EventType.SPELL_PERIODIC_DAMAGE, HISTERA, SKARVALD),
        died(11, SKARVALD),
        heal(12, ERLE, HISTERA),
        ev(13, EventType.SWING_MISSED, RUNEMAGE, TELTA, None),
        hit(14, TELTA, RUNEMAGE),
        died(15, RUNEMAGE),
    ]
