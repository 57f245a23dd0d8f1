"""
Typed access to the system data a check carries.

configure() returns a chainable writer, inspect() a read-only reader.
Other modules never touch CheckAdditionalData fields directly.

Usage:
    configure(check).set_damage(DamageType.FIRE, 10).add_damage_bonus("Fire Sword", 5)

    damage = inspect(message).get_damage()
"""

from typing import Callable, Iterable

from ..state.schema import (
    SYSTEM,
    BonusDamage,
    ChatMessage,
    Check,
    DamageData,
    DamageType,
    Defense,
    Flags,
    TargetData,
)


BASE_DAMAGE_LABEL = "FU.BaseDamage"

# Callback run against a check while it is being prepared
CheckCallback = Callable[[Check], None]


def init_difficulty(difficulty: int) -> CheckCallback:
    """
    Callback that sets the check difficulty.

    Non-positive values mean "no difficulty" and leave the field absent.
    """
    def callback(check: Check) -> None:
        if difficulty > 0:
            configure(check).set_difficulty(difficulty)

    return callback


def init_hr_zero(hr_zero: bool) -> CheckCallback:
    """Callback that marks the check as hero-point-zero when hr_zero is truthy."""
    def callback(check: Check) -> None:
        if hr_zero:
            configure(check).set_hr_zero(True)

    return callback


def configure(check: Check) -> "CheckConfigurer":
    return CheckConfigurer(check)


class CheckConfigurer:
    """
    Chainable writer for a check's system data.

    set_* overwrites a field. modify_* hands the current value (None when
    absent) to a callback and stores whatever it returns.
    """

    def __init__(self, check: Check):
        self._data = check.additional_data

    def set_damage(self, damage_type: DamageType, base_damage: int) -> "CheckConfigurer":
        self._data.damage = DamageData(
            type=damage_type,
            modifiers=[BonusDamage(label=BASE_DAMAGE_LABEL, value=base_damage)],
        )
        return self

    def modify_damage(
        self, callback: Callable[[DamageData | None], DamageData | None]
    ) -> "CheckConfigurer":
        self._data.damage = callback(self._data.damage)
        return self

    def add_damage_bonus(self, label: str, value: int) -> "CheckConfigurer":
        """Append a damage modifier. Does nothing until damage is set."""
        if self._data.damage is not None:
            self._data.damage.modifiers.append(BonusDamage(label=label, value=value))
        return self

    def set_hr_zero(self, hr_zero: bool) -> "CheckConfigurer":
        self._data.hr_zero = hr_zero
        return self

    def modify_hr_zero(
        self, callback: Callable[[bool | None], bool | None]
    ) -> "CheckConfigurer":
        self._data.hr_zero = callback(self._data.hr_zero)
        return self

    def set_targeted_defense(self, targeted_defense: Defense) -> "CheckConfigurer":
        self._data.targeted_defense = targeted_defense
        return self

    def modify_targeted_defense(
        self, callback: Callable[[Defense | None], Defense | None]
    ) -> "CheckConfigurer":
        self._data.targeted_defense = callback(self._data.targeted_defense)
        return self

    def set_targets(self, targets: Iterable[TargetData]) -> "CheckConfigurer":
        self._data.targets = list(targets)
        return self

    def modify_targets(
        self, callback: Callable[[list[TargetData] | None], list[TargetData] | None]
    ) -> "CheckConfigurer":
        self._data.targets = callback(self._data.targets)
        return self

    def set_difficulty(self, difficulty: int) -> "CheckConfigurer":
        self._data.difficulty = difficulty
        return self

    def modify_difficulty(
        self, callback: Callable[[int | None], int | None]
    ) -> "CheckConfigurer":
        self._data.difficulty = callback(self._data.difficulty)
        return self


def get_message_check(message: ChatMessage) -> Check | None:
    """Check stored on a chat message, validating host-serialized data."""
    stored = message.get_flag(SYSTEM, Flags.CHECK_V2)
    if stored is None or isinstance(stored, Check):
        return stored
    return Check.model_validate(stored)


def inspect(source: Check | ChatMessage) -> "CheckInspector":
    """
    Reader for a check, or for the check stored on a chat message.

    Raises:
        ValueError: If the message carries no check
    """
    if isinstance(source, ChatMessage):
        check = get_message_check(source)
        if check is None:
            raise ValueError(f"Chat message {source.id} carries no check")
        source = check
    return CheckInspector(source)


class CheckInspector:
    """
    Read-only view of a check's system data.

    Compound values are returned as deep copies so callers cannot change
    the check through them.
    """

    def __init__(self, check: Check):
        self._data = check.additional_data

    def get_damage(self) -> DamageData | None:
        if self._data.damage is None:
            return None
        return self._data.damage.model_copy(deep=True)

    def get_hr_zero(self) -> bool | None:
        return self._data.hr_zero

    def get_targeted_defense(self) -> Defense | None:
        return self._data.targeted_defense

    def get_difficulty(self) -> int | None:
        return self._data.difficulty

    def get_targets(self) -> list[TargetData] | None:
        if self._data.targets is None:
            return None
        return [target.model_copy(deep=True) for target in self._data.targets]
