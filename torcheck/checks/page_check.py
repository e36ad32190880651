from __future__ import annotations

import logging
from typing import AsyncIterable, AsyncIterator, Iterable, Iterator, TypeVar

from torcheck.config import settings
from torcheck.errors import NotUsingTorError, ParsingError

logger = logging.getLogger(__name__)

# Only present in the "success" rendering of the check page.
SUCCESS_MARKER = '<a id="TorCheckResult" target="success" href="/"></a>'

ClientT = TypeVar("ClientT")
Line = bytes | str


def split_lines(chunks: Iterable[bytes]) -> Iterator[bytes]:
    """Split a raw body into lines on b"\\n" only, leaving bytes undecoded."""
    pending = b""
    for chunk in chunks:
        pending += chunk
        *lines, pending = pending.split(b"\n")
        yield from lines
    if pending:
        yield pending


async def asplit_lines(chunks: AsyncIterable[bytes]) -> AsyncIterator[bytes]:
    pending = b""
    async for chunk in chunks:
        pending += chunk
        *lines, pending = pending.split(b"\n")
        for line in lines:
            yield line
    if pending:
        yield pending


def _is_marker(raw: Line) -> bool:
    line = raw.decode("utf-8") if isinstance(raw, bytes) else raw
    if settings.TORCHECK_LOG_PAGE_LINES:
        logger.debug("%s", line)
    return line.strip() == SUCCESS_MARKER


def scan_page(
    client: ClientT,
    lines: Iterable[Line],
    *,
    read_errors: tuple[type[BaseException], ...] = (OSError,),
) -> ClientT:
    """
    Scan the check page top to bottom and return `client` on the first
    marker line. Stops consuming `lines` as soon as the marker is seen.
    """
    errors = (UnicodeDecodeError, *read_errors)
    try:
        for raw in lines:
            if _is_marker(raw):
                logger.debug("Tor check marker found")
                return client
    except errors as exc:
        raise ParsingError(exc) from exc

    logger.debug("Tor check marker not found")
    raise NotUsingTorError()


async def ascan_page(
    client: ClientT,
    lines: AsyncIterable[Line],
    *,
    read_errors: tuple[type[BaseException], ...] = (OSError,),
) -> ClientT:
    errors = (UnicodeDecodeError, *read_errors)
    try:
        async for raw in lines:
            if _is_marker(raw):
                logger.debug("Tor check marker found")
                return client
    except errors as exc:
        raise ParsingError(exc) from exc

    logger.debug("Tor check marker not found")
    raise NotUsingTorError()
