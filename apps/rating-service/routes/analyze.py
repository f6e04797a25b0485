from typing import Any

from fastapi import APIRouter, Body, Request, WebSocket, WebSocketDisconnect
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import json

from log_utils import get_logger
from rating import RatingError, score_face
from settings import Settings

router = APIRouter()
LOGGER = get_logger(__name__)


def _error(code, detail, **extra):
  return {'error': code, 'detail': detail, **extra}


def _pick_face(p, settings):
  if 'faces' in p:
    faces = p['faces']
    if not isinstance(faces, list):
      return None, _error('invalid_payload', 'faces must be a list of landmark lists')
    if len(faces) == 0:
      return None, _error('no_face', 'No face detected')
    if len(faces) > 1 and not settings.allow_multiple_faces:
      return None, _error('multiple_faces', 'Multiple faces detected', count=len(faces))
    return faces[0], None
  lms = p.get('landmarks', p.get('positions'))
  if lms is None:
    return None, _error('invalid_payload', 'expected landmarks, positions or faces')
  return lms, None


def rate_payload(p, settings):
  if not isinstance(p, dict):
    return _error('invalid_payload', 'expected a JSON object')
  lms, err = _pick_face(p, settings)
  if err is None and not isinstance(lms, list):
    err = _error('invalid_payload', 'landmarks must be a list of points')
  if err is not None:
    LOGGER.info('rating_rejected', code=err['error'])
    return err
  try:
    result = score_face(lms)
  except RatingError as exc:
    LOGGER.info('rating_rejected', code=exc.code, detail=str(exc))
    return exc.as_payload()
  out = result.to_dict()
  LOGGER.info('rating_scored', **out)
  return {'rating': out}


def _settings(conn):
  return getattr(conn.app.state, 'settings', None) or Settings()


@router.post('/rate')
def rate(request: Request, payload: Any = Body(...)):
  out = rate_payload(payload, _settings(request))
  if 'error' in out:
    return JSONResponse(out, status_code=422)
  return out


@router.websocket('/ws/rate')
async def ws_rate(ws: WebSocket):
  await ws.accept()
  settings = _settings(ws)
  try:
    while True:
      msg = await ws.receive()
      if msg.get('type') == 'websocket.disconnect':
        break
      if msg.get('text') is None:
        await ws.send_text(json.dumps(_error('invalid_payload', 'expected JSON landmarks')))
        continue
      try:
        p = json.loads(msg['text'])
      except json.JSONDecodeError:
        await ws.send_text(json.dumps(_error('invalid_payload', 'invalid json')))
        continue
      await ws.send_text(json.dumps(rate_payload(p, settings)))
  except WebSocketDisconnect:
    LOGGER.debug('ws_closed')


async def invalid_request(request: Request, exc: RequestValidationError):
  bad_json = any(e.get('type') == 'json_invalid' for e in exc.errors())
  out = _error('invalid_payload', 'invalid json' if bad_json else 'request body is missing or malformed')
  LOGGER.info('rating_rejected', code=out['error'], detail=out['detail'])
  return JSONResponse(out, status_code=422)
