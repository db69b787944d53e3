from demondeduce.core.model import Category

from . import Role, register_role


@register_role
class Alchemist(Role):
    name = "alchemist"
    category = Category.VILLAGER
    supported = False
