"""Services for fillnav."""

from .navigator import Navigator
from .tables import BUCKETS, HEADINGS
from .world import NavWorld, PlanContext

__all__ = ["Navigator", "NavWorld", "PlanContext", "BUCKETS", "HEADINGS"]
