from ..models.enums import UpgradeKind

STAGE_COUNT = 5

# Boss scaling: attack = BASE + PER_STAGE * stage, and so on
BOSS_ATTACK_BASE = 10
BOSS_ATTACK_PER_STAGE = 5
BOSS_HEALTH_BASE = 70
BOSS_HEALTH_PER_STAGE = 20
BOSS_MANA = 60

POTION_DROP_MIN = 1
POTION_DROP_MAX = 3
HEALTH_POTION_AMOUNT = 30
MANA_POTION_AMOUNT = 20

ITEM_CHOICES = 3

UPGRADE_AMOUNTS: dict[UpgradeKind, int] = {
    UpgradeKind.HEAL: 30,
    UpgradeKind.RESTORE_MANA: 20,
    UpgradeKind.ATTACK: 5,
    UpgradeKind.DEFENSE: 3,
}
