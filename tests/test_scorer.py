import copy
import math

import numpy as np
import pytest

from conftest import make_face
from rating import DegenerateGeometry, InsufficientLandmarks, RatingResult, score_face


def test_mirror_face(mirror_face):
  r = score_face(mirror_face)
  assert r == RatingResult(total=7.3, symmetry=100, proportions=62, landmarks=62)


def test_golden_face(golden_face):
  r = score_face(golden_face)
  assert r.symmetry == 100
  assert r.proportions == 100
  assert r.landmarks == 60
  assert r.total == 8.8


def test_deterministic(webcam_face):
  assert score_face(webcam_face) == score_face(webcam_face)


def test_input_untouched(webcam_face):
  before = copy.deepcopy(webcam_face)
  score_face(webcam_face)
  assert webcam_face == before


@pytest.mark.parametrize('jitter', [0.0, 3.0, 17.0, 60.0])
def test_ranges(webcam_face, jitter):
  webcam_face[45] = {'x': 372.0 + jitter, 'y': 206.0 + 2 * jitter}
  webcam_face[54] = {'x': 352.0 - jitter, 'y': 321.0 + jitter}
  r = score_face(webcam_face)
  assert 0.0 <= r.total <= 10.0
  for v in (r.symmetry, r.proportions, r.landmarks):
    assert 0 <= v <= 100


def test_tuple_points(mirror_face):
  as_tuples = [(p['x'], p['y']) for p in mirror_face]
  assert score_face(as_tuples) == score_face(mirror_face)


def test_eye_on_nose_rejected():
  lms = make_face((0.0, 0.0), (1.0, -1.0), (0.0, 0.0), (-0.5, 1.0), (0.5, 1.0))
  with pytest.raises(DegenerateGeometry):
    score_face(lms)


def test_short_input_rejected(mirror_face):
  with pytest.raises(InsufficientLandmarks):
    score_face(mirror_face[:54])


def test_non_finite_rejected(mirror_face):
  mirror_face[36] = {'x': math.nan, 'y': 0.0}
  with pytest.raises(DegenerateGeometry) as ei:
    score_face(mirror_face)
  assert ei.value.metric == 'input'


def test_errors_are_value_errors(mirror_face):
  with pytest.raises(ValueError):
    score_face(mirror_face[:10])


def test_huge_integer_coordinate(mirror_face):
  mirror_face[36] = {'x': 10**400, 'y': 0}
  with pytest.raises(DegenerateGeometry) as ei:
    score_face(mirror_face)
  assert ei.value.metric == 'input'


def test_distances_overflow_float():
  lms = make_face((-1e308, -1e308), (1e308, -1e308), (0.0, 1e308), (-1.0, 0.0), (1.0, 0.0))
  with pytest.raises(DegenerateGeometry) as ei:
    score_face(lms)
  assert ei.value.metric == 'input'


def test_ndarray_input(mirror_face):
  arr = np.array([[p['x'], p['y']] for p in mirror_face])
  assert score_face(arr) == score_face(mirror_face)
