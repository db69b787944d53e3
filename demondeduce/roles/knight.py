from demondeduce.core.model import Category

from . import Role, register_role


@register_role
class Knight(Role):
    name = "knight"
    category = Category.VILLAGER
