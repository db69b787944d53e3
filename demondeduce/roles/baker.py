from demondeduce.core.model import Category

from . import Role, register_role


@register_role
class Baker(Role):
    name = "baker"
    category = Category.VILLAGER
    supported = False
