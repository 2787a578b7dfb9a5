import os

from cubicseg.logging import (CubicSegError, CubicSegValueError,
                              DegenerateSegmentError, hide_segment_messages,
                              show_segment_messages)
from cubicseg.polynomial import (SplinePolynomial, degenerate_checks_enabled,
                                 enable_degenerate_checks, format_polynomial)
from cubicseg.vec2 import vec2


def read(fil):
    fil = os.path.join(os.path.dirname(__file__), fil)
    with open(fil, encoding="utf-8") as f:
        return f.read()


__version__ = read("version.txt")
