"""
Entry point for verifying that an HTTP client routes its traffic through Tor.

`verify_connection` picks the implementation from the type of the client it
is given. Blocking clients are returned as-is on success; for
`httpx.AsyncClient` the call returns an awaitable that resolves to the client.
Every failure is raised as a `torcheck.errors.TorCheckError` subclass.
"""
from __future__ import annotations

from functools import singledispatch
from typing import Any, Awaitable, Literal, get_args

import httpx
import requests

from torcheck.clients import httpx_client, requests_client

Variant = Literal["page", "api"]

VARIANTS: tuple[str, ...] = get_args(Variant)


def _check_variant(variant: str) -> None:
    if variant not in VARIANTS:
        raise ValueError(f"Unknown Tor check variant: {variant!r}")


@singledispatch
def verify_connection(client: Any, variant: Variant = "page") -> Any:
    raise TypeError(f"Unsupported HTTP client: {type(client).__name__}")


@verify_connection.register
def _(client: requests.Session, variant: Variant = "page") -> requests.Session:
    _check_variant(variant)
    if variant == "api":
        return requests_client.verify_api(client)
    return requests_client.verify_page(client)


@verify_connection.register
def _(client: httpx.Client, variant: Variant = "page") -> httpx.Client:
    _check_variant(variant)
    if variant == "api":
        return httpx_client.verify_api(client)
    return httpx_client.verify_page(client)


@verify_connection.register
def _(
    client: httpx.AsyncClient, variant: Variant = "page"
) -> Awaitable[httpx.AsyncClient]:
    _check_variant(variant)
    if variant == "api":
        return httpx_client.averify_api(client)
    return httpx_client.averify_page(client)
