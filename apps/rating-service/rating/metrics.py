import math

import numpy as np

from rating.errors import DegenerateGeometry
from rating.landmarks import Point2D

GOLDEN_RATIO = 1.618
EYE_TILT_LIMIT = math.pi / 6  # 30 degrees


def dist(a, b):
  return float(np.hypot(a.x - b.x, a.y - b.y))


def midpt(a, b):
  return Point2D((a.x + b.x) / 2.0, (a.y + b.y) / 2.0)


def _balance(a, b, metric, what):
  hi = max(a, b)
  if hi == 0:
    raise DegenerateGeometry(metric, f'{what} distances are both zero')
  return min(a, b) / hi


def symmetry_score(fp):
  d_le, d_re = dist(fp.nose, fp.left_eye), dist(fp.nose, fp.right_eye)
  d_lm, d_rm = dist(fp.nose, fp.left_mouth), dist(fp.nose, fp.right_mouth)
  eye_sym = _balance(d_le, d_re, 'symmetry', 'nose-to-eye')
  mouth_sym = _balance(d_lm, d_rm, 'symmetry', 'nose-to-mouth')
  return (eye_sym + mouth_sym) / 2


def face_ratio(fp):
  face_w = dist(fp.left_eye, fp.right_eye)
  eye_c = midpt(fp.left_eye, fp.right_eye)
  mouth_c = midpt(fp.left_mouth, fp.right_mouth)
  face_h = dist(eye_c, mouth_c)
  if face_h == 0:
    raise DegenerateGeometry('proportions', 'eye line and mouth line coincide')
  return face_w / face_h


def proportion_score(fp):
  deviation = abs(face_ratio(fp) - GOLDEN_RATIO) / GOLDEN_RATIO
  return max(0.0, 1.0 - deviation)


def nose_position_ratio(fp):
  l_to_nose = dist(fp.left_eye, fp.nose)
  r_to_nose = dist(fp.right_eye, fp.nose)
  nose_to_mouth = dist(midpt(fp.left_mouth, fp.right_mouth), fp.nose)
  # nose should sit a third of the way from eye line to mouth line
  ideal = nose_to_mouth / 3
  actual = min(l_to_nose, r_to_nose)
  if actual == 0:
    raise DegenerateGeometry('landmarks', 'an eye corner coincides with the nose tip')
  if ideal == 0:
    raise DegenerateGeometry('landmarks', 'mouth midpoint coincides with the nose tip')
  return min(actual, ideal) / max(actual, ideal)


def eye_tilt(left_eye, right_eye):
  return abs(float(np.arctan2(right_eye.y - left_eye.y, right_eye.x - left_eye.x)))


def eye_alignment_score(fp):
  return max(0.0, 1.0 - eye_tilt(fp.left_eye, fp.right_eye) / EYE_TILT_LIMIT)


def positioning_score(fp):
  return (nose_position_ratio(fp) + eye_alignment_score(fp)) / 2
