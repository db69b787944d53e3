from demondeduce.core.model import Category

from . import Role, register_role


@register_role
class Wretch(Role):
    """Good, but every information role sees it as evil."""
    name = "wretch"
    category = Category.OUTCAST
    registers_as_evil = True
