from demondeduce.core.model import Category, Status

from . import Role, register_role
from .abilities import Pool, SelfRandom


@register_role
class Drunk(Role):
    """Believes it is a Villager that is not in play, and speaks as one."""
    name = "drunk"
    category = Category.OUTCAST
    ability = SelfRandom(Pool.VILLAGERS_NOT_IN_PLAY)
    self_status = Status.DRUNK
