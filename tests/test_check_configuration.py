"""Tests for check configuration and inspection."""

import pytest

from projectfu.checks import (
    configure,
    get_message_check,
    init_difficulty,
    init_hr_zero,
    inspect,
)
from projectfu.state import (
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


def make_targets() -> list[TargetData]:
    return [
        TargetData(name="Goblin", uuid="Actor.goblin", link="@UUID[Actor.goblin]", difficulty=8),
        TargetData(name="Wolf", uuid="Actor.wolf", link="@UUID[Actor.wolf]", difficulty=10),
    ]


class TestConfigureDamage:
    """Test damage setters on CheckConfigurer."""

    def test_set_damage_stores_base_modifier(self):
        """set_damage records the base damage as the only modifier."""
        check = Check()
        configure(check).set_damage(DamageType.FIRE, 10)

        damage = inspect(check).get_damage()

        assert damage.type == DamageType.FIRE
        assert damage.modifiers == [BonusDamage(label="FU.BaseDamage", value=10)]
        assert damage.total is None
        assert damage.modifier_total is None
        assert damage.model_dump(exclude_none=True) == {
            "type": DamageType.FIRE,
            "modifiers": [{"label": "FU.BaseDamage", "value": 10}],
        }

    def test_set_damage_overwrites(self):
        """A second set_damage replaces the first, bonuses included."""
        check = Check()
        configure(check).set_damage(DamageType.FIRE, 10).add_damage_bonus("Bonus", 5)
        configure(check).set_damage(DamageType.ICE, 4)

        damage = inspect(check).get_damage()

        assert damage.type == DamageType.ICE
        assert len(damage.modifiers) == 1

    def test_add_damage_bonus_appends_in_order(self):
        """Bonuses are appended after the base damage in call order."""
        check = Check()
        configure(check).set_damage(DamageType.PHYSICAL, 8) \
            .add_damage_bonus("Sharp Edge", 2) \
            .add_damage_bonus("Heavy Blow", 5)

        labels = [m.label for m in inspect(check).get_damage().modifiers]

        assert labels == ["FU.BaseDamage", "Sharp Edge", "Heavy Blow"]

    def test_add_damage_bonus_without_damage_is_noop(self):
        """Bonus before set_damage neither raises nor creates damage."""
        check = Check()

        configurer = configure(check).add_damage_bonus("Orphan", 3)

        assert configurer is not None
        assert inspect(check).get_damage() is None
        assert "damage" not in check.additional_data.model_fields_set

    def test_modify_damage_receives_none_when_absent(self):
        """modify_damage passes None when no damage was set."""
        check = Check()
        seen = []

        configure(check).modify_damage(lambda damage: seen.append(damage) or damage)

        assert seen == [None]

    def test_modify_damage_replaces_wholesale(self):
        """The callback's return value replaces the stored damage."""
        check = Check()
        configure(check).set_damage(DamageType.FIRE, 10).add_damage_bonus("Bonus", 5)

        configure(check).modify_damage(
            lambda damage: DamageData(type=DamageType.DARK, modifiers=[])
        )

        damage = inspect(check).get_damage()
        assert damage.type == DamageType.DARK
        assert damage.modifiers == []

    def test_modify_damage_can_clear(self):
        """Returning None removes the damage."""
        check = Check()
        configure(check).set_damage(DamageType.FIRE, 10)

        configure(check).modify_damage(lambda damage: None)

        assert inspect(check).get_damage() is None

    def test_modify_after_bonus_wins(self):
        """Last write wins: modify_damage after add_damage_bonus overrides it."""
        check = Check()
        configure(check).set_damage(DamageType.BOLT, 6) \
            .add_damage_bonus("Bonus", 4) \
            .modify_damage(lambda damage: damage.model_copy(update={"modifiers": damage.modifiers[:1]}))

        assert len(inspect(check).get_damage().modifiers) == 1


class TestConfigureScalars:
    """Test hr_zero, difficulty and targeted defense setters."""

    def test_set_and_modify_hr_zero(self):
        check = Check()
        configure(check).set_hr_zero(False)
        assert inspect(check).get_hr_zero() is False

        configure(check).modify_hr_zero(lambda current: not current)
        assert inspect(check).get_hr_zero() is True

    def test_set_difficulty(self):
        check = Check()
        configure(check).set_difficulty(13)
        assert inspect(check).get_difficulty() == 13

    def test_modify_difficulty_from_absent(self):
        """modify_difficulty sees None before any difficulty is set."""
        check = Check()
        configure(check).modify_difficulty(lambda current: (current or 10) + 2)
        assert inspect(check).get_difficulty() == 12

    def test_set_targeted_defense(self):
        check = Check()
        configure(check).set_targeted_defense(Defense.MAGIC_DEFENSE)
        assert inspect(check).get_targeted_defense() == Defense.MAGIC_DEFENSE

    def test_modify_targeted_defense(self):
        check = Check()
        configure(check).modify_targeted_defense(lambda current: current or Defense.DEFENSE)
        assert inspect(check).get_targeted_defense() == Defense.DEFENSE


class TestConfigureTargets:
    """Test target setters."""

    def test_set_targets_copies_sequence(self):
        """Changing the caller's list afterwards does not affect the check."""
        check = Check()
        targets = make_targets()

        configure(check).set_targets(targets)
        targets.pop()

        assert len(inspect(check).get_targets()) == 2

    def test_set_targets_preserves_order(self):
        check = Check()
        configure(check).set_targets(make_targets())
        assert [t.name for t in inspect(check).get_targets()] == ["Goblin", "Wolf"]

    def test_modify_targets(self):
        check = Check()
        configure(check).set_targets(make_targets())

        configure(check).modify_targets(lambda targets: [t for t in targets if t.difficulty > 8])

        assert [t.name for t in inspect(check).get_targets()] == ["Wolf"]


class TestInspector:
    """Test CheckInspector reads."""

    def test_absent_fields_are_none(self):
        inspector = inspect(Check())

        assert inspector.get_damage() is None
        assert inspector.get_hr_zero() is None
        assert inspector.get_targeted_defense() is None
        assert inspector.get_difficulty() is None
        assert inspector.get_targets() is None

    def test_get_damage_returns_copy(self):
        """Mutating the returned damage leaves the check untouched."""
        check = Check()
        configure(check).set_damage(DamageType.FIRE, 10)

        damage = inspect(check).get_damage()
        damage.modifiers.append(BonusDamage(label="Sneaky", value=99))
        damage.modifiers[0].value = 1
        damage.total = 500

        again = inspect(check).get_damage()
        assert again.modifiers == [BonusDamage(label="FU.BaseDamage", value=10)]
        assert again.total is None

    def test_get_targets_returns_copy(self):
        """Mutating the returned targets leaves the check untouched."""
        check = Check()
        configure(check).set_targets(make_targets())

        targets = inspect(check).get_targets()
        targets[0].difficulty = 0
        targets.clear()

        again = inspect(check).get_targets()
        assert len(again) == 2
        assert again[0].difficulty == 8

    def test_inspect_does_not_mark_fields(self):
        """Reading never assigns fields."""
        check = Check()
        inspector = inspect(check)
        inspector.get_damage()
        inspector.get_targets()
        inspector.get_hr_zero()

        assert check.additional_data.model_fields_set == set()

    def test_inspect_chat_message(self):
        """inspect unwraps the check stored on a chat message."""
        check = Check()
        configure(check).set_difficulty(9)
        message = ChatMessage()
        message.set_flag(SYSTEM, Flags.CHECK_V2, check)

        assert inspect(message).get_difficulty() == 9

    def test_inspect_serialized_chat_message(self):
        """Host-serialized (camelCase) check data is validated."""
        message = ChatMessage()
        message.set_flag(SYSTEM, Flags.CHECK_V2, {
            "id": "abc12345",
            "details": {"name": "Fireball"},
            "additionalData": {
                "hrZero": True,
                "targetedDefense": "mdef",
                "damage": {"type": "fire", "modifiers": [{"label": "FU.BaseDamage", "value": 15}]},
                "otherModule": {"kept": 1},
            },
        })

        inspector = inspect(message)

        assert inspector.get_hr_zero() is True
        assert inspector.get_targeted_defense() == Defense.MAGIC_DEFENSE
        assert inspector.get_damage().type == DamageType.FIRE
        assert get_message_check(message).additional_data.model_extra == {"otherModule": {"kept": 1}}

    def test_inspect_message_without_check_raises(self):
        with pytest.raises(ValueError):
            inspect(ChatMessage())

    def test_serializes_with_host_keys(self):
        """Dumping by alias yields the host's camelCase keys."""
        check = Check()
        configure(check).set_hr_zero(True).set_targeted_defense(Defense.DEFENSE)

        data = check.additional_data.model_dump(by_alias=True, exclude_unset=True)

        assert data == {"hrZero": True, "targetedDefense": Defense.DEFENSE}


class TestInitializers:
    """Test check setup callbacks."""

    @pytest.mark.parametrize("difficulty", [0, -1])
    def test_init_difficulty_non_positive_leaves_unset(self, difficulty):
        check = Check()
        init_difficulty(difficulty)(check)

        assert inspect(check).get_difficulty() is None
        assert "difficulty" not in check.additional_data.model_fields_set

    def test_init_difficulty_positive_sets(self):
        check = Check()
        init_difficulty(5)(check)
        assert inspect(check).get_difficulty() == 5

    def test_init_hr_zero_false_leaves_absent(self):
        """False is encoded as absence, not as a stored False."""
        check = Check()
        init_hr_zero(False)(check)

        assert inspect(check).get_hr_zero() is None
        assert "hr_zero" not in check.additional_data.model_fields_set

    def test_init_hr_zero_true_sets(self):
        check = Check()
        init_hr_zero(True)(check)
        assert inspect(check).get_hr_zero() is True
