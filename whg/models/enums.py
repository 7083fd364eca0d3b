from enum import Enum


class Side(str, Enum):
    PLAYER = "PLAYER"
    BOSS = "BOSS"


class UnitClass(str, Enum):
    WARRIOR = "WARRIOR"
    ARCHER = "ARCHER"
    MAGE = "MAGE"
    BOSS = "BOSS"


class StatusKind(str, Enum):
    """
    Timed modifiers a unit can carry. Declaration order is the order in which
    simultaneously active statuses tick.
    """

    POISON = "POISON"
    BLEED = "BLEED"
    STUN = "STUN"
    STRENGTH_UP = "STRENGTH_UP"
    WEAKNESS = "WEAKNESS"


class ItemKind(str, Enum):
    WEAPON = "WEAPON"
    ARMOR = "ARMOR"
    ACCESSORY = "ACCESSORY"
    POTION = "POTION"


class ResourceKind(str, Enum):
    HEALTH = "HEALTH"
    MANA = "MANA"


class CoinSide(str, Enum):
    HEADS = "HEADS"
    TAILS = "TAILS"


class UpgradeKind(str, Enum):
    HEAL = "HEAL"
    RESTORE_MANA = "RESTORE_MANA"
    ATTACK = "ATTACK"
    DEFENSE = "DEFENSE"


class RunPhase(str, Enum):
    COIN_FLIP = "COIN_FLIP"
    BATTLE = "BATTLE"
    REWARD = "REWARD"
    VICTORY = "VICTORY"
    DEFEAT = "DEFEAT"


class BattleStatus(str, Enum):
    IN_PROGRESS = "IN_PROGRESS"
    BOSS_DEFEATED = "BOSS_DEFEATED"
    PLAYER_DEFEATED = "PLAYER_DEFEATED"


class ActionKind(str, Enum):
    ATTACK = "ATTACK"
    USE_SKILL = "USE_SKILL"
    USE_POTION = "USE_POTION"
    PASS = "PASS"


class ActionLogResult(str, Enum):
    APPLIED = "APPLIED"
    SKIPPED = "SKIPPED"
    ILLEGAL = "ILLEGAL"
    ERROR = "ERROR"
