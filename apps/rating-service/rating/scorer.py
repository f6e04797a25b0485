from rating.aggregate import aggregate
from rating.metrics import positioning_score, proportion_score, symmetry_score
from rating.validate import validate_landmarks


def score_face(landmarks):
  """Rate a 68-point landmark set.

  Returns a RatingResult: total on a 0-10 scale (one decimal) plus the
  symmetry, proportions and landmark-positioning sub-scores as 0-100 ints.
  Raises InsufficientLandmarks or DegenerateGeometry; never a partial result.
  """
  fp = validate_landmarks(landmarks)
  return aggregate(symmetry_score(fp), proportion_score(fp), positioning_score(fp))
