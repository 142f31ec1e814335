from .selects import ColorSelect, IntSelect, PagedSpinBox, Select

__all__ = [
    "ColorSelect",
    "IntSelect",
    "PagedSpinBox",
    "Select",
]
