import math
from dataclasses import asdict, dataclass

WEIGHTS = {'symmetry': 0.3, 'proportions': 0.4, 'landmarks': 0.3}


@dataclass(frozen=True)
class RatingResult:
  total: float
  symmetry: int
  proportions: int
  landmarks: int

  def to_dict(self):
    return asdict(self)


def round_half_up(v, ndigits=0):
  scale = 10 ** ndigits
  r = math.floor(v * scale + 0.5)
  return r / scale if ndigits else int(r)


def aggregate(symmetry, proportions, landmarks):
  raw = (symmetry * WEIGHTS['symmetry']
         + proportions * WEIGHTS['proportions']
         + landmarks * WEIGHTS['landmarks'])
  return RatingResult(
    total=round_half_up(raw * 10, 1),
    symmetry=round_half_up(symmetry * 100),
    proportions=round_half_up(proportions * 100),
    landmarks=round_half_up(landmarks * 100),
  )
