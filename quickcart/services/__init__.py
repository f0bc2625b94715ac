# Services Module
from .money import floor_money, format_money, parse_display_price, to_decimal, to_float

__all__ = ["floor_money", "format_money", "parse_display_price", "to_decimal", "to_float"]
