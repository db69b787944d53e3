from demondeduce.core.model import Category

from . import Role, register_role


@register_role
class Bombardier(Role):
    name = "bombardier"
    category = Category.OUTCAST
