import pytest


def make_face(left_eye, right_eye, nose, left_mouth, right_mouth, n=68, fill=(0.5, 0.5)):
  lms = [{'x': fill[0], 'y': fill[1]} for _ in range(n)]
  for idx, (x, y) in ((36, left_eye), (45, right_eye), (30, nose), (48, left_mouth), (54, right_mouth)):
    if idx < n:
      lms[idx] = {'x': x, 'y': y}
  return lms


@pytest.fixture
def mirror_face():
  # eyes and mouth corners mirrored about the vertical through the nose
  return make_face((-1.0, -1.0), (1.0, -1.0), (0.0, 0.0), (-0.5, 1.0), (0.5, 1.0))


@pytest.fixture
def golden_face():
  # eye span 1.618, eye line to mouth line 1.0
  return make_face((0.0, 0.0), (1.618, 0.0), (0.809, 0.45), (0.309, 1.0), (1.309, 1.0))


@pytest.fixture
def webcam_face():
  # pixel coords from a 640x480 frame, slight head roll
  return make_face((250.0, 200.0), (372.0, 206.0), (309.0, 262.0), (268.0, 318.0), (352.0, 321.0))
