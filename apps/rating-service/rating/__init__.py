from rating.aggregate import WEIGHTS, RatingResult, aggregate
from rating.errors import DegenerateGeometry, InsufficientLandmarks, RatingError
from rating.landmarks import FACE68, REQUIRED_COUNT, FacePoints, Point2D, face_points
from rating.metrics import (
  GOLDEN_RATIO,
  eye_alignment_score,
  positioning_score,
  proportion_score,
  symmetry_score,
)
from rating.scorer import score_face
from rating.validate import validate_landmarks

__all__ = [
  'FACE68', 'GOLDEN_RATIO', 'REQUIRED_COUNT', 'WEIGHTS',
  'Point2D', 'FacePoints', 'RatingResult',
  'RatingError', 'InsufficientLandmarks', 'DegenerateGeometry',
  'face_points', 'validate_landmarks',
  'symmetry_score', 'proportion_score', 'positioning_score', 'eye_alignment_score',
  'aggregate', 'score_face',
]
