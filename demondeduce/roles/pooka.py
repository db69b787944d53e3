from demondeduce.core.model import Category, Status

from . import Role, register_role
from .abilities import PassiveInfo, Reach


@register_role
class Pooka(Role):
    """Corrupts both adjacent Villagers."""
    name = "pooka"
    category = Category.DEMON
    ability = PassiveInfo(Status.CORRUPTED, Reach.NEIGHBORS)
