from __future__ import annotations

import httpx

from torcheck.checks.api_check import check_api_payload
from torcheck.checks.page_check import ascan_page, asplit_lines, scan_page, split_lines
from torcheck.config import settings
from torcheck.errors import ClientError

READ_ERRORS: tuple[type[BaseException], ...] = (httpx.RequestError, httpx.StreamError)


def verify_page(client: httpx.Client) -> httpx.Client:
    try:
        with client.stream("GET", settings.TORCHECK_PAGE_URL) as resp:
            resp.raise_for_status()
            return scan_page(
                client, split_lines(resp.iter_bytes()), read_errors=READ_ERRORS
            )
    except httpx.HTTPError as exc:
        raise ClientError(exc) from exc


def verify_api(client: httpx.Client) -> httpx.Client:
    try:
        resp = client.get(settings.TORCHECK_API_URL)
        resp.raise_for_status()
    except httpx.HTTPError as exc:
        raise ClientError(exc) from exc

    try:
        payload = resp.json()
    except ValueError as exc:
        raise ClientError(exc, decode=True) from exc

    return check_api_payload(client, payload)


async def averify_page(client: httpx.AsyncClient) -> httpx.AsyncClient:
    try:
        async with client.stream("GET", settings.TORCHECK_PAGE_URL) as resp:
            resp.raise_for_status()
            return await ascan_page(
                client, asplit_lines(resp.aiter_bytes()), read_errors=READ_ERRORS
            )
    except httpx.HTTPError as exc:
        raise ClientError(exc) from exc


async def averify_api(client: httpx.AsyncClient) -> httpx.AsyncClient:
    try:
        resp = await client.get(settings.TORCHECK_API_URL)
        resp.raise_for_status()
    except httpx.HTTPError as exc:
        raise ClientError(exc) from exc

    try:
        payload = resp.json()
    except ValueError as exc:
        raise ClientError(exc, decode=True) from exc

    return check_api_payload(client, payload)
