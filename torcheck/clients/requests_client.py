from __future__ import annotations

import requests

from torcheck.checks.api_check import check_api_payload
from torcheck.checks.page_check import scan_page, split_lines
from torcheck.config import settings
from torcheck.errors import ClientError

CHUNK_SIZE = 8192


def verify_page(session: requests.Session) -> requests.Session:
    try:
        resp = session.get(settings.TORCHECK_PAGE_URL, stream=True)
    except requests.RequestException as exc:
        raise ClientError(exc) from exc

    with resp:
        try:
            resp.raise_for_status()
        except requests.HTTPError as exc:
            raise ClientError(exc) from exc
        lines = split_lines(resp.iter_content(chunk_size=CHUNK_SIZE))
        return scan_page(session, lines, read_errors=(OSError,))


def verify_api(session: requests.Session) -> requests.Session:
    try:
        resp = session.get(settings.TORCHECK_API_URL)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise ClientError(exc) from exc

    try:
        payload = resp.json()
    except ValueError as exc:
        raise ClientError(exc, decode=True) from exc

    return check_api_payload(session, payload)
