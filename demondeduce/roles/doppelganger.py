from demondeduce.core.model import Category, Status

from . import Role, register_role
from .abilities import Reach, TargetedRandom


@register_role
class Doppelganger(Role):
    """Copies a Villager in play. Shows and speaks as it, corrupted."""
    name = "doppelganger"
    category = Category.OUTCAST
    ability = TargetedRandom(effect=None, reach=Reach.ANYWHERE, copies=True)
    self_status = Status.CORRUPTED
