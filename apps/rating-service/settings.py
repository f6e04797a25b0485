import os

from pydantic import BaseModel, Field

DEFAULT_ORIGINS = ['http://localhost:3000', 'http://127.0.0.1:3000', '*']


def _env_bool(name, default=False):
  v = os.getenv(name)
  if v is None or v.strip() == '':
    return default
  return v.strip().lower() in ('1', 'true', 'yes', 'on')


class Settings(BaseModel):
  cors_origins: list[str] = Field(default_factory=lambda: list(DEFAULT_ORIGINS))
  log_level: str = 'INFO'
  log_json: bool = False
  allow_multiple_faces: bool = False

  @classmethod
  def from_env(cls):
    kw = {
      'log_level': os.getenv('RATING_LOG_LEVEL', 'INFO').upper(),
      'log_json': _env_bool('RATING_LOG_JSON'),
      'allow_multiple_faces': _env_bool('RATING_ALLOW_MULTIPLE_FACES'),
    }
    origins = os.getenv('RATING_CORS_ORIGINS')
    if origins:
      kw['cors_origins'] = [o.strip() for o in origins.split(',') if o.strip()]
    return cls(**kw)
