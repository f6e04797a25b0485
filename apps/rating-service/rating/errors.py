class RatingError(ValueError):
  code = 'rating_error'

  def as_payload(self):
    return {'error': self.code, 'detail': str(self)}


class InsufficientLandmarks(RatingError):
  code = 'insufficient_landmarks'

  def __init__(self, count, required, detail=None):
    self.count = count
    self.required = required
    super().__init__(detail or f'need at least {required} landmarks, got {count}')

  def as_payload(self):
    out = super().as_payload()
    out.update({'count': self.count, 'required': self.required})
    return out


class DegenerateGeometry(RatingError):
  code = 'degenerate_geometry'

  def __init__(self, metric, detail):
    self.metric = metric
    super().__init__(f'{metric}: {detail}')

  def as_payload(self):
    out = super().as_payload()
    out['metric'] = self.metric
    return out
