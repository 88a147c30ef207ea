from .numeric import finite_or_zero, round_money, safe_divide, safe_sum

__all__ = [
    "finite_or_zero",
    "safe_sum",
    "safe_divide",
    "round_money",
]
