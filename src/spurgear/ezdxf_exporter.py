"""
DXF export of spurgear sketch entities.

Writes the entities built by :mod:`spurgear.sketch` as native DXF LINE, ARC,
CIRCLE and SPLINE entities using the ezdxf library.  Fitted splines keep
their involute samples as fit points so a CAD program refits the same curve.
"""

from pathlib import Path
from typing import Iterable, Union

import ezdxf
from ezdxf.math import ConstructionArc

from spurgear.geom import Point2D
from spurgear.sketch import Circle, Entity, FittedSpline, Line, ThreePointArc

__all__ = ["new_document", "add_entities", "write_dxf", "arc_is_ccw"]


def _xy(pt: Point2D) -> tuple:
    return float(pt.x), float(pt.y)


def arc_is_ccw(arc: ThreePointArc) -> bool:
    """True if start -> mid -> end runs counter-clockwise round the circle."""
    (x0, y0), (x1, y1), (x2, y2) = _xy(arc.start), _xy(arc.mid), _xy(arc.end)
    return (x1 - x0) * (y2 - y0) - (y1 - y0) * (x2 - x0) > 0


def new_document():
    # setup=False keeps out default blocks some importers choke on
    doc = ezdxf.new(dxfversion='R2010', setup=False)
    doc.layers.add(name='PATHS', color=7)
    return doc


def add_entities(msp, entities: Iterable[Entity], layer: str = 'PATHS') -> int:
    """Add ``entities`` to the modelspace ``msp``; return how many were written."""
    attribs = {'layer': layer}
    written = 0
    for entity in entities:
        if isinstance(entity, Line):
            msp.add_line(_xy(entity.start), _xy(entity.end), dxfattribs=attribs)
        elif isinstance(entity, Circle):
            msp.add_circle(_xy(entity.center), entity.radius, dxfattribs=attribs)
        elif isinstance(entity, ThreePointArc):
            arc = ConstructionArc.from_3p(
                _xy(entity.start), _xy(entity.end), _xy(entity.mid),
                ccw=arc_is_ccw(entity),
            )
            msp.add_arc(
                _xy(arc.center),
                arc.radius,
                start_angle=arc.start_angle,
                end_angle=arc.end_angle,
                dxfattribs=attribs,
            )
        elif isinstance(entity, FittedSpline):
            msp.add_spline(fit_points=[(p.x, p.y, 0.0) for p in entity.points],
                           dxfattribs=attribs)
        else:
            raise ValueError(f'cannot export entity of type {type(entity).__name__}')
        written += 1
    return written


def write_dxf(entities: Iterable[Entity], output_path: Union[str, Path],
              layer: str = 'PATHS') -> Path:
    """Write ``entities`` to a DXF file and return its path.

    A ``.dxf`` suffix is added when ``output_path`` has none.
    """
    path = Path(output_path)
    if path.suffix.lower() != '.dxf':
        path = path.with_suffix('.dxf')

    doc = new_document()
    if layer not in doc.layers:
        doc.layers.add(name=layer)
    if add_entities(doc.modelspace(), entities, layer=layer) == 0:
        raise ValueError('no sketch entities to export')
    doc.saveas(path)
    return path
