from demondeduce.core.model import Category, Status

from . import Role, register_role
from .abilities import Reach, TargetedRandom


@register_role
class Poisoner(Role):
    """Poisons one adjacent Villager."""
    name = "poisoner"
    category = Category.MINION
    ability = TargetedRandom(effect=Status.POISONED, reach=Reach.NEIGHBORS)
