"""Class registrations.

Importing the classes module registers the playable classes via side effects.
"""

from .classes import ARCHER, MAGE, WARRIOR  # noqa: F401
