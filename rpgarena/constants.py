"""Game-wide keys, paths and lookup tables shared across the package."""

# Input locations
OFFLINE_IMG = "./offlines/attak/img/"
OFFLINE_ATK = "./offlines/attak/"
OFFLINE_WEARING_EQUIPMENT = "./offlines/equipment/Personnages/"
OFFLINE_ROOT_EQUIPMENT = "./offlines/equipment/corps/"
OFFLINE_RAND_NAME_STUFF = "./offlines/equipment/random/"
OFFLINE_CHARACTERS = "./offlines/Personnages/"
OFFLINE_SAVES = "./offlines/games"

# Saved games
GAMES_DIR = "./offlines/games/"
GAMES_CHARACTERS = "characters"
GAMES_EQUIPMENT = "equipment"
GAMES_EFFECTS = "effects"
GAMES_STATE = "game-state"
GAMES_LOOT_EQUIPMENT = "equipment/body"

SOUNDS_DIR = "./offlines/sounds/"

# Game state keys
GAME_STATE_DIED_ENNEMIES = "died-ennemies"
GAME_STATE_ORDER_PLAYERS = "order-players-last-turn"
GAME_STATE_CURRENT_TURN = "current-turn"
GAME_STATE_CURRENT_ROUND = "current-round"
GAME_STATE_GAME_NAME = "game-name"
GAME_STATE_STATS_IN_GAME = "/stats_in_game_{}.csv"

# Outputs
OUTPUT_DIR = "./output/"
OUTPUT_ENDGAME = "./output/endgame_{}.csv"
ENDGAME_TITLE_BAR = ("Name", "Player Type", "Life status")

# Attack keys
ATK_NAME = "Nom"
ATK_TARGET = "Cible"
ATK_REACH = "Portée"
ATK_DURATION = "Durée"
ATK_MANA_COST = "Coût de mana"
ATK_VIGOR_COST = "Coût de vigueur"
ATK_BERSECK_COST = "Coût de rage"
ATK_AGGRO = "Aggro"
ATK_PHOTO = "Photo"
ATK_DAMAGE = "Dégâts"
ATK_HEAL = "Soin"
ATK_REGEN_MANA = "Regen mana"
ATK_EFFECT = "Effet"
ATK_LEVEL = "Niveau"
ATK_REGEN_VIGOR = "Regen vigueur"
ATK_REGEN_BERSECK = "Regen rage"
ATK_FORM = "Forme"
ATK_SOUND = "Sound"

# Reach keys
REACH_ZONE = "Zone"
REACH_INDIVIDUAL = "Individuel"
REACH_RAND_INDIVIDUAL = "Aleatoire Individuel"
ALL_REACH = frozenset({"", REACH_ZONE, REACH_INDIVIDUAL, REACH_RAND_INDIVIDUAL})

# Target keys
TARGET_ENNEMY = "Ennemie"
TARGET_ALLY = "Allié"
TARGET_ONLY_ALLY = "Seulement les alliés"
TARGET_ALL_HEROES = "Tous les heroes"
TARGET_HIMSELF = "Soi-même"
ALL_TARGETS = frozenset(
    {"", TARGET_ENNEMY, TARGET_ALLY, TARGET_ALL_HEROES, TARGET_HIMSELF, TARGET_ONLY_ALLY}
)
ALLIES_TARGETS = frozenset(
    {TARGET_ALLY, TARGET_ALL_HEROES, TARGET_HIMSELF, TARGET_ONLY_ALLY}
)

# Stats keys
STATS_HP = "PV"
STATS_MANA = "Mana"
STATS_VIGOR = "Vigueur"
STATS_BERSECK = "Rage"
STATS_ARM_PHY = "Armure physique"
STATS_ARM_MAG = "Armure magique"
STATS_POW_PHY = "Pouvoir physique"
STATS_POW_MAG = "Pouvoir magique"
STATS_AGGRO = "Aggro"
STATS_SPEED = "Vitesse"
STATS_CRIT = "Cout critique"
STATS_DODGE = "Esquive"
STATS_REGEN_HP = "Regeneration PV"
STATS_REGEN_MANA = "Regeneration Mana"
STATS_REGEN_VIGOR = "Regeneration vigueur"
STATS_RATE_BERSECK = "Taux rage"
STATS_RATE_AGGRO = "Taux aggro"
STATS_REGEN_SPEED = "Regen vitesse"

ALL_STATS = frozenset(
    {
        "",
        STATS_HP,
        STATS_MANA,
        STATS_VIGOR,
        STATS_BERSECK,
        STATS_ARM_PHY,
        STATS_ARM_MAG,
        STATS_POW_PHY,
        STATS_POW_MAG,
        STATS_AGGRO,
        STATS_SPEED,
        STATS_CRIT,
        STATS_DODGE,
        STATS_REGEN_HP,
        STATS_REGEN_MANA,
        STATS_REGEN_VIGOR,
        STATS_RATE_BERSECK,
        STATS_RATE_AGGRO,
        STATS_REGEN_SPEED,
    }
)
ON_PERCENT_STATS = frozenset({STATS_MANA, STATS_VIGOR})
STATS_TO_LEVEL_UP = frozenset(
    {STATS_HP, STATS_MANA, STATS_VIGOR, STATS_POW_PHY, STATS_POW_MAG}
)

# Character keys
CH_NAME = "Nom"
CH_SHORT_NAME = "Nom court"
CH_PHOTO_NAME = "Photo"
CH_TYPE = "Type"
CH_TYPE_HERO = "Hero"
CH_TYPE_BOSS = "Boss"
CH_CURRENT_VALUE = "Current"
CH_MAX_VALUE = "Max"
CH_LEVEL = "Niveau"
CH_EXP = "Exp"
CH_COLOR = "Couleur"
CH_RANK = "Rang"
CH_FORM = "Forme"
CH_CLASS = "Classe"
CH_ACTIONS_IN_ROUND = "nb-actions-in-round"
CH_BLOCKING_ATK = "is-blocking-atk"
CH_MAX_NB_ACTIONS_ROUND = "m_MaxNbActionsInRound"
# buf - debuf
CH_BUF_DEBUF = "Buf-debuf"
CH_BUF_ALL_STATS = "Buf-all-stats"
CH_BUF_VALUE = "Buf-value"
CH_BUF_PASSIVE_ENABLED = "buf-passive-enabled"
CH_BUF_IS_PERCENT = "Buf-is-percent"
CH_BUF_TYPE = "Buf-type"
# last tx rx
CH_TXRX_TYPE = "Tx-rx-type"
CH_TXRX = "Tx-rx"
CH_TXRX_SIZE = "Tx-rx-size"
# powers
CH_POWERS_CRIT_AFTER_HEAL = "is_crit_heal_after_crit"
CH_POWERS_DMG_TX_ALLY = "is_damage_tx_heal_needy_ally"
# extended character
CH_EXT_RAND_TARGET = "is_random_target"
CH_EXT_HEAL_ATK_BLOCKED = "is_heal_atk_blocked"
CH_EXT_FIRST_ROUND = "is_first_round"

# Equipment keys
EQUIP_HEAD = "Tete"
EQUIP_NECKLACE = "Collier"
EQUIP_CHEST = "Torse"
EQUIP_PANTS = "Pantalon"
EQUIP_SHOES = "Chaussures"
EQUIP_ARM = "Bras"
EQUIP_RING_RIGHT = "Anneau droit"
EQUIP_RING_LEFT = "Anneau gauche"
EQUIP_NAME = "Nom"
EQUIP_UNIQUE_NAME = "Nom unique"
EQUIP_RIGHT_WEAPON = "Arme gauche"
EQUIP_LEFT_WEAPON = "Arme droite"
EQUIP_CATEGORY = "Categorie"
EQUIP_RUNIQUE_TATOO_1 = "Tatouage 1"
EQUIP_RUNIQUE_TATOO_2 = "Tatouage 2"
EQUIP_RUNIQUE_TATOO_3 = "Tatouage 3"
ALL_EQUIP = frozenset(
    {
        EQUIP_HEAD,
        EQUIP_NECKLACE,
        EQUIP_CHEST,
        EQUIP_SHOES,
        EQUIP_ARM,
        EQUIP_RING_RIGHT,
        EQUIP_RING_LEFT,
        EQUIP_PANTS,
        EQUIP_NAME,
        EQUIP_RIGHT_WEAPON,
        EQUIP_LEFT_WEAPON,
        EQUIP_CATEGORY,
        EQUIP_RUNIQUE_TATOO_1,
        EQUIP_RUNIQUE_TATOO_2,
        EQUIP_RUNIQUE_TATOO_3,
    }
)
ALL_EQUIP_ON_BODY = frozenset(
    {
        "",
        EQUIP_HEAD,
        EQUIP_NECKLACE,
        EQUIP_CHEST,
        EQUIP_SHOES,
        EQUIP_ARM,
        EQUIP_RING_RIGHT,
        EQUIP_RING_LEFT,
        EQUIP_PANTS,
        EQUIP_RIGHT_WEAPON,
        EQUIP_LEFT_WEAPON,
        EQUIP_RUNIQUE_TATOO_1,
        EQUIP_RUNIQUE_TATOO_2,
        EQUIP_RUNIQUE_TATOO_3,
    }
)
RAND_EQUIP_ON_BODY = (
    EQUIP_HEAD,
    EQUIP_NECKLACE,
    EQUIP_CHEST,
    EQUIP_SHOES,
    EQUIP_ARM,
    EQUIP_RING_RIGHT,
    EQUIP_RING_LEFT,
    EQUIP_PANTS,
    EQUIP_RIGHT_WEAPON,
    EQUIP_LEFT_WEAPON,
)

# Effect keys
EFFECT_REINIT = "Reinit"
EFFECT_NB_COOL_DOWN = "Tours de recharge"
# Launches an attack with a success rate that decreases by a step each time.
EFFECT_NB_DECREASE_ON_TURN = "Decroissement pendant le tour"
EFFECT_NB_DECREASE_BY_TURN = "Decroissement par tour"
EFFECT_VALUE_CHANGE = "Changement par valeur"
EFFECT_PERCENT_CHANGE = "Changement par %"
EFFECT_DELETE_BAD = "Supprime effet néfaste"
EFFECT_INTO_DAMAGE = "% (stats) en dégâts"
EFFECT_IMPROVE_HOTS = "Boost chaque HOT de .. %"
EFFECT_BOOSTED_BY_HOTS = "Boost l'effet par nb HOTS presents en %"
EFFECT_CHANGE_MAX_DAMAGES_BY_PERCENT = "Up/down degats en %"
EFFECT_CHANGE_DAMAGES_RX_BY_PERCENT = "Up/down degats RX en %"
EFFECT_CHANGE_HEAL_RX_BY_PERCENT = "Up/down heal RX en %"
EFFECT_CHANGE_HEAL_TX_BY_PERCENT = "Up/down heal TX en %"
EFFECT_REPEAT_AS_MANY_AS = "Répète tant que possible"
# Raises the max value of a stat; the current value follows by ratio.
EFFECT_IMPROVE_BY_PERCENT_CHANGE = "Up par %"
EFFECT_IMPROVEMENT_STAT_BY_VALUE = "Up par valeur"
EFFECT_NEXT_HEAL_IS_CRIT = "Prochaine attaque heal est crit"
EFFECT_BUF_MULTI = "Buf multi"
EFFECT_BLOCK_HEAL_ATK = "Bloque attaque de soin"
EFFECT_COND_DMG_PREV_TURN = "Active effet si Dégâts au tour précédent"
CONDITION_DMG_PREV_TURN = "Dégâts au tour précédent"
CONDITION_ENNEMIES_DIED = "Ennemis morts tours précédents"
EFFECT_REPEAT_IF_HEAL = "Répète l'attaque(en % de chance) après heal tour prec."
EFFECT_BUF_VALUE_AS_MUCH_AS_HEAL = "Buf par valeur d'autant de PV"

EFFECTS = frozenset(
    {
        "",
        EFFECT_REINIT,
        EFFECT_NB_COOL_DOWN,
        EFFECT_NB_DECREASE_ON_TURN,
        EFFECT_NB_DECREASE_BY_TURN,
        EFFECT_VALUE_CHANGE,
        EFFECT_PERCENT_CHANGE,
        EFFECT_DELETE_BAD,
        EFFECT_INTO_DAMAGE,
        EFFECT_IMPROVE_HOTS,
        EFFECT_BOOSTED_BY_HOTS,
        EFFECT_IMPROVE_BY_PERCENT_CHANGE,
        EFFECT_CHANGE_MAX_DAMAGES_BY_PERCENT,
        EFFECT_REPEAT_AS_MANY_AS,
        CONDITION_ENNEMIES_DIED,
        EFFECT_IMPROVEMENT_STAT_BY_VALUE,
        EFFECT_BUF_MULTI,
        EFFECT_BLOCK_HEAL_ATK,
        CONDITION_DMG_PREV_TURN,
        EFFECT_REPEAT_IF_HEAL,
        EFFECT_BUF_VALUE_AS_MUCH_AS_HEAL,
        EFFECT_COND_DMG_PREV_TURN,
    }
)
ACTIVE_EFFECTS_ON_LAUNCH = frozenset(
    {
        EFFECT_NB_DECREASE_BY_TURN,
        EFFECT_NB_COOL_DOWN,
        EFFECT_REINIT,
        EFFECT_DELETE_BAD,
        EFFECT_IMPROVE_HOTS,
        EFFECT_BOOSTED_BY_HOTS,
        EFFECT_CHANGE_MAX_DAMAGES_BY_PERCENT,
        EFFECT_IMPROVEMENT_STAT_BY_VALUE,
        EFFECT_IMPROVE_BY_PERCENT_CHANGE,
        EFFECT_INTO_DAMAGE,
        EFFECT_NEXT_HEAL_IS_CRIT,
        EFFECT_BUF_MULTI,
        EFFECT_BLOCK_HEAL_ATK,
        EFFECT_BUF_VALUE_AS_MUCH_AS_HEAL,
    }
)
EFFECTS_HOT_OR_DOT = frozenset(
    {
        EFFECT_VALUE_CHANGE,
        EFFECT_REPEAT_AS_MANY_AS,
        EFFECT_PERCENT_CHANGE,
        EFFECT_NB_DECREASE_ON_TURN,
    }
)
EFFECT_ARRAY = "Effet"
EFFECT_TYPE = "Type"
EFFECT_VALUE = "Value"
EFFECT_TARGET = "Cible"
EFFECT_REACH = "Portée"
EFFECT_STAT = "Stat"
EFFECT_ACTIVE_TURNS = "Tours actifs"
EFFECT_SUB_VALUE = "Valeur de l'effet"
EFFECT_PASSIVE_TALENT = "Passif"
EFFECT_COUNTER_TURN = "Compteur"
EFFECT_IS_MAGIC = "Est Magique"
EFFECT_LAUNCHER = "launcher"
EFFECT_INDEX_TURN = "index tour"

# Form keys
ENT_FORM = "Ent"
BEAR_FORM = "Ours"
STANDARD_FORM = "Standard"
ALL_FORMS = frozenset({STANDARD_FORM, ENT_FORM, BEAR_FORM})

# Class keys
STANDARD_CLASS = "standard"
TANK_CLASS = "tank"
ALL_CLASSES = frozenset({STANDARD_CLASS, TANK_CLASS})

# In game
NB_TURN_SUM_AGGRO = 5

KERNEL_PLAYERS = frozenset(
    {
        "Thalia",
        "Thrain",
        "Azrak Ombresang",
        "Elara la guerisseuse de la Lorien",
        "Test",
    }
)

# Sounds
CRITICAL_SOUND = "critical-hit.mp3"
VICTORY_SOUND = "victory.mp3"
PLAYER_DEATH_SOUND = "player-death-sound.mp3"
GAME_OVER_SOUND = "game-over.mp3"
POTION_SOUND = "potion.mp3"
KILL_SOUND = "kill.mp3"