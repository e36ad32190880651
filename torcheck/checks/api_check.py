from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import ValidationError

from torcheck.errors import ClientError, NotUsingTorError
from torcheck.models import CheckResponse

logger = logging.getLogger(__name__)

ClientT = TypeVar("ClientT")


def check_api_payload(client: ClientT, payload: Any) -> ClientT:
    try:
        result = CheckResponse.model_validate(payload)
    except ValidationError as exc:
        raise ClientError(exc, decode=True) from exc

    logger.debug("Tor check API reported IsTor=%s", result.is_tor)
    if not result.is_tor:
        raise NotUsingTorError()
    return client
