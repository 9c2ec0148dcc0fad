"""Admin settings endpoints.

``POST /settings`` accepts the settings form as ``application/x-www-form-urlencoded``
(or ``multipart/form-data``) or as a JSON object with the same keys.  Like the
form it replaces, an unticked checkbox is expressed by leaving the key out.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from slowapi import Limiter
from slowapi.util import get_remote_address

from llms_txt.deps import ConfigStore, Site
from llms_txt.models.configuration import Configuration
from llms_txt.models.settings_response import SettingsResponse

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("", response_model=SettingsResponse, summary="Read the effective llms.txt options")
def read_settings(request: Request, store: ConfigStore, site: Site) -> SettingsResponse:
    return SettingsResponse(
        options=store.read(),
        llms_txt_url=site.home_url + request.app.state.endpoint.strip("/"),
    )


@router.post("", response_model=Configuration, summary="Save llms.txt options")
@limiter.limit("10/minute")
async def update_settings(request: Request, store: ConfigStore) -> Configuration:
    """Sanitise and store the submitted options.

    Invalid emails and URLs are stored as empty strings rather than rejected;
    the response shows the values that were actually saved.
    """
    submission = await _read_submission(request)
    logger.info("Settings update received", extra={"fields": sorted(submission)})
    # The option store may do blocking file I/O
    return await run_in_threadpool(store.update, submission)


async def _read_submission(request: Request) -> Dict[str, Any]:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError as exc:  # JSONDecodeError or UnicodeDecodeError
            logger.warning("Malformed settings JSON: %s", exc)
            raise HTTPException(status_code=400, detail="Request body is not valid JSON.")
        if not isinstance(payload, dict):
            raise HTTPException(status_code=400, detail="Request body must be a JSON object.")
        return payload

    form = await request.form()
    # Uploaded files are not option values
    return {key: value for key, value in form.items() if isinstance(value, str)}
