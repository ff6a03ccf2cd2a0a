"""
Enumerations for the pay calculation system.

Job differentials are grouped into a handful of classes; each class carries a
fixed hourly add-on above the base rate.
"""

from decimal import Decimal
from enum import Enum


class DifferentialClass(Enum):
    """Hourly differential classes and their add-on amounts"""

    BASE = "BASE"
    """No differential"""

    CLASS_1 = "CLASS_1"
    """Trades: mechanics, millwrights, electricians, welders"""

    CLASS_2 = "CLASS_2"
    """Gantry crane operators"""

    CLASS_3 = "CLASS_3"
    """Heavy equipment: tractor trailers, lift trucks, loaders"""

    CLASS_4 = "CLASS_4"
    """Winch drivers, hatch tenders, gearpersons"""

    def __str__(self):
        return self.value

    @property
    def amount(self) -> Decimal:
        """Hourly add-on for this class"""
        return {
            DifferentialClass.BASE: Decimal("0.00"),
            DifferentialClass.CLASS_1: Decimal("2.50"),
            DifferentialClass.CLASS_2: Decimal("1.50"),
            DifferentialClass.CLASS_3: Decimal("0.65"),
            DifferentialClass.CLASS_4: Decimal("0.40"),
        }[self]

