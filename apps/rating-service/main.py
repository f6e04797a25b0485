from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from log_utils import configure_logging, get_logger
from routes.analyze import invalid_request, router as analyze_router
from settings import Settings


def create_app(settings=None):
  settings = settings or Settings.from_env()
  configure_logging(settings.log_level, settings.log_json)

  app = FastAPI(title='Face rating service')
  app.state.settings = settings
  app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=['*'],
    allow_headers=['*']
  )

  @app.get('/')
  def health():
    return {'msg': 'Face rating service running'}

  app.add_exception_handler(RequestValidationError, invalid_request)
  app.include_router(analyze_router)
  get_logger(__name__).info('app_ready', cors_origins=settings.cors_origins)
  return app


app = create_app()
