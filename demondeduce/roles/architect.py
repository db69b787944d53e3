from demondeduce.core.model import Category

from . import Role, register_role


@register_role
class Architect(Role):
    name = "architect"
    category = Category.VILLAGER
    supported = False
