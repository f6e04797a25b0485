from collections.abc import Mapping, Sequence
from typing import NamedTuple

import numpy as np

from rating.errors import DegenerateGeometry, InsufficientLandmarks

# 68-point (iBUG / dlib / face-api) indices, 0-based
FACE68 = {
  'left_eye': 36,    # outer corner
  'right_eye': 45,   # outer corner
  'nose': 30,        # tip
  'left_mouth': 48,
  'right_mouth': 54,
}
REQUIRED_COUNT = max(FACE68.values()) + 1


class Point2D(NamedTuple):
  x: float
  y: float


class FacePoints(NamedTuple):
  left_eye: Point2D
  right_eye: Point2D
  nose: Point2D
  left_mouth: Point2D
  right_mouth: Point2D


def to_point(p):
  """Coerce a detector point ({'x','y'} dict, (x, y[, z]) sequence, ndarray row or Point2D).

  Returns None when the value has no usable x/y pair. z is dropped.
  """
  if isinstance(p, Point2D):
    return p
  if isinstance(p, np.ndarray):
    p = p.ravel().tolist()
  if isinstance(p, Mapping):
    if 'x' not in p or 'y' not in p:
      return None
    x, y = p['x'], p['y']
  elif isinstance(p, Sequence) and not isinstance(p, (str, bytes)) and len(p) >= 2:
    x, y = p[0], p[1]
  else:
    return None
  if isinstance(x, bool) or isinstance(y, bool):
    return None
  try:
    return Point2D(float(x), float(y))
  except (TypeError, ValueError):
    return None
  except OverflowError:
    raise DegenerateGeometry('input', 'coordinate out of float range')


def face_points(lms):
  if lms is None or len(lms) < REQUIRED_COUNT:
    raise InsufficientLandmarks(0 if lms is None else len(lms), REQUIRED_COUNT)
  pts = {}
  for name, idx in FACE68.items():
    pt = to_point(lms[idx])
    if pt is None:
      raise InsufficientLandmarks(len(lms), REQUIRED_COUNT, f'landmark {idx} ({name}) is missing or malformed')
    pts[name] = pt
  return FacePoints(**pts)
