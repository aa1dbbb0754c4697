import math

from models import coerce_amount


def progress(current, target):
    """Percent of ``target`` reached by ``current``, as an int in [0, 100].

    A zero or missing target gives 0. Halves round up.
    """
    target = coerce_amount(target)
    if not target:
        return 0
    percent = math.floor(coerce_amount(current) * 100 / target + 0.5)
    return max(0, min(100, percent))
