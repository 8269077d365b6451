from .sympy_bridge import SympyBridge, to_sympy, equivalent

__all__ = ["SympyBridge", "to_sympy", "equivalent"]
