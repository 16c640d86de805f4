"""Core data model for a turn-based role-playing arena: stats, attacks, effects, boss loot, themes, style sheets and INI parameters."""

__version__ = "0.1.0"