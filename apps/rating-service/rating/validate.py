import math

from rating.errors import DegenerateGeometry
from rating.landmarks import face_points
from rating.metrics import dist, midpt


def _check_finite(fp):
  for name, pt in fp._asdict().items():
    if not (math.isfinite(pt.x) and math.isfinite(pt.y)):
      raise DegenerateGeometry('input', f'{name} has a non-finite coordinate')


def _reference_distances(fp):
  eye_c = midpt(fp.left_eye, fp.right_eye)
  mouth_c = midpt(fp.left_mouth, fp.right_mouth)
  return {
    'nose_left_eye': dist(fp.nose, fp.left_eye),
    'nose_right_eye': dist(fp.nose, fp.right_eye),
    'nose_left_mouth': dist(fp.nose, fp.left_mouth),
    'nose_right_mouth': dist(fp.nose, fp.right_mouth),
    'eye_span': dist(fp.left_eye, fp.right_eye),
    'eye_line_to_mouth_line': dist(eye_c, mouth_c),
    'nose_to_mouth': dist(mouth_c, fp.nose),
  }


def _check_geometry(fp):
  d = _reference_distances(fp)
  # coordinates near the float limit overflow once subtracted or averaged
  for name, v in d.items():
    if not math.isfinite(v):
      raise DegenerateGeometry('input', f'{name} distance overflows')
  # zero reference distances make a metric ratio undefined
  if d['nose_left_eye'] == 0 and d['nose_right_eye'] == 0:
    raise DegenerateGeometry('symmetry', 'both eye corners coincide with the nose tip')
  if d['nose_left_mouth'] == 0 and d['nose_right_mouth'] == 0:
    raise DegenerateGeometry('symmetry', 'both mouth corners coincide with the nose tip')
  if d['eye_line_to_mouth_line'] == 0:
    raise DegenerateGeometry('proportions', 'eye line and mouth line coincide')
  if min(d['nose_left_eye'], d['nose_right_eye']) == 0:
    raise DegenerateGeometry('landmarks', 'an eye corner coincides with the nose tip')
  if d['nose_to_mouth'] == 0:
    raise DegenerateGeometry('landmarks', 'mouth midpoint coincides with the nose tip')


def validate_landmarks(lms):
  """Resolve the five scoring points and reject sets no metric can score.

  Raises InsufficientLandmarks or DegenerateGeometry; returns FacePoints.
  """
  fp = face_points(lms)
  _check_finite(fp)
  _check_geometry(fp)
  return fp
