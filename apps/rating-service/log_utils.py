import logging

import structlog


def configure_logging(level='INFO', json=False):
  """Set up structlog with ISO timestamps; JSON lines or console output."""
  renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
  structlog.configure(
    processors=[
      structlog.processors.add_log_level,
      structlog.processors.TimeStamper(fmt='iso'),
      renderer,
    ],
    wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.INFO)),
    cache_logger_on_first_use=False,
  )


def get_logger(name=__name__):
  return structlog.get_logger(name)
