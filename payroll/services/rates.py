"""
Rate table: job name -> differential class.
"""

import logging
from decimal import Decimal
from typing import List, NamedTuple

from .enums import DifferentialClass

logger = logging.getLogger(__name__)

JOB_DIFFERENTIALS = {
    "Labour": DifferentialClass.BASE,
    "First Aid": DifferentialClass.BASE,
    "Dock Checker": DifferentialClass.BASE,
    "Head Checker": DifferentialClass.BASE,
    "Wheat Machine": DifferentialClass.BASE,
    "Loci": DifferentialClass.BASE,
    "Bulk Operator": DifferentialClass.BASE,
    "Liquid Bulk": DifferentialClass.BASE,
    "Wheat Specialty": DifferentialClass.BASE,
    "Storesperson": DifferentialClass.BASE,
    "Dow Men": DifferentialClass.BASE,
    "Switchman": DifferentialClass.BASE,
    "Trainer": DifferentialClass.BASE,
    "Excavator": DifferentialClass.BASE,
    "Bulldozer": DifferentialClass.BASE,
    "Komatsu": DifferentialClass.BASE,
    "Trackmen": DifferentialClass.BASE,
    "Painter": DifferentialClass.BASE,
    "Carpenter": DifferentialClass.BASE,
    "Bunny Bus": DifferentialClass.BASE,
    "Pusher": DifferentialClass.BASE,
    "Lockerman": DifferentialClass.BASE,
    "40 Ton (Top Pick)": DifferentialClass.BASE,
    "Plumber": DifferentialClass.BASE,
    "Training": DifferentialClass.BASE,
    "Lines": DifferentialClass.BASE,
    "Ob": DifferentialClass.BASE,
    "Mobile Crane": DifferentialClass.BASE,
    "Hd Mechanic": DifferentialClass.CLASS_1,
    "Millwright": DifferentialClass.CLASS_1,
    "Electrician": DifferentialClass.CLASS_1,
    "Welder": DifferentialClass.CLASS_1,
    "Ship Gantry": DifferentialClass.CLASS_2,
    "Dock Gantry": DifferentialClass.CLASS_2,
    "Rail Mounted Gantry": DifferentialClass.CLASS_2,
    "Rubber Tire Gantry": DifferentialClass.CLASS_2,
    "Tractor Trailer": DifferentialClass.CLASS_3,
    "Lift Truck": DifferentialClass.CLASS_3,
    "Front End Loader": DifferentialClass.CLASS_3,
    "Reachstacker": DifferentialClass.CLASS_3,
    "Winch Driver": DifferentialClass.CLASS_4,
    "Hatch Tender/Signals": DifferentialClass.CLASS_4,
    "Gearperson": DifferentialClass.CLASS_4,
}


class DifferentialLookup(NamedTuple):
    job: str
    differential_class: DifferentialClass
    amount: Decimal
    matched: bool


def lookup_differential(job: str) -> DifferentialLookup:
    """
    Resolve a job to its differential.

    Unknown jobs fall back to BASE; the miss is reported through ``matched``
    and logged so it can be told apart from a real BASE job.
    """
    differential_class = JOB_DIFFERENTIALS.get(job)
    if differential_class is None:
        logger.info("Unknown job %r - falling back to BASE differential", job)
        return DifferentialLookup(job, DifferentialClass.BASE, DifferentialClass.BASE.amount, False)
    return DifferentialLookup(job, differential_class, differential_class.amount, True)


def get_differential_for_job(job: str) -> Decimal:
    return lookup_differential(job).amount


def known_jobs() -> List[DifferentialLookup]:
    """All jobs in the table, sorted by name"""
    return [
        DifferentialLookup(job, cls, cls.amount, True)
        for job, cls in sorted(JOB_DIFFERENTIALS.items())
    ]
