from . import mul_div as MulDiv

__all__ = ("MulDiv",)
