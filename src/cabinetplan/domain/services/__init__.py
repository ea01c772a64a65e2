"""Layout engine services: collision resolution, auto-fill and labelling."""

from .auto_fill import STANDARD_WIDTHS, AutoFillOptions, AutoFillService, auto_fill
from .collision import CollisionResolver, push_apart, resolve_collisions
from .labeling import assign_labels, highest_label_number
from .validation import check_zone_geometry

__all__ = [
    "STANDARD_WIDTHS",
    "AutoFillOptions",
    "AutoFillService",
    "CollisionResolver",
    "assign_labels",
    "auto_fill",
    "check_zone_geometry",
    "highest_label_number",
    "push_apart",
    "resolve_collisions",
]
