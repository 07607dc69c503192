"""HTTP client for the block catalog.

Fetches ``GET /blocks`` from a running carousel server and validates the
payload into BlockRecords. There is exactly one attempt per call.
"""

from __future__ import annotations

import aiohttp

from src.core.blocks import BlockRecord, parse_catalog
from src.core.errors import CatalogFetchError, ErrorCategory, category_for_status
from src.core.logging import get_logger

logger = get_logger(__name__)

BLOCKS_PATH = "/blocks"


def blocks_url(base_url: str) -> str:
    """Build the catalog URL for a server base URL."""
    return base_url.rstrip("/") + BLOCKS_PATH


async def fetch_blocks(base_url: str, timeout: float = 30.0) -> list[BlockRecord]:
    """Fetch the carousel blocks from a server.

    Args:
        base_url: Server root, e.g. ``http://localhost:3000``.
        timeout: Total request timeout in seconds.

    Returns:
        The blocks in catalog order.

    Raises:
        CatalogFetchError: If the request fails, the server answers with a
            non-200 status or the body is not JSON.
        CatalogValidationError: If the JSON is not a valid catalog.
    """
    url = blocks_url(base_url)
    logger.debug("catalog_fetch_started", url=url)

    try:
        async with aiohttp.ClientSession() as session:
            async with session.get(
                url,
                timeout=aiohttp.ClientTimeout(total=timeout),
            ) as response:
                if response.status != 200:
                    error_text = await response.text()
                    logger.error(
                        "catalog_fetch_bad_status",
                        url=url,
                        status=response.status,
                        body=error_text,
                    )
                    raise CatalogFetchError(
                        f"Catalog request failed with status {response.status}: {error_text}",
                        category=category_for_status(response.status),
                    )

                payload = await response.json()

    except aiohttp.ContentTypeError as ex:
        logger.error("catalog_fetch_not_json", url=url, error=str(ex))
        raise CatalogFetchError.from_exception(ex, ErrorCategory.INVALID_INPUT) from ex
    # aiohttp's ServerTimeoutError is both a ClientError and a TimeoutError
    except TimeoutError as ex:
        logger.error("catalog_fetch_timeout", url=url, timeout=timeout)
        raise CatalogFetchError.from_exception(ex, ErrorCategory.TIMEOUT) from ex
    except aiohttp.ClientError as ex:
        logger.error("catalog_fetch_network_error", url=url, error=str(ex))
        raise CatalogFetchError.from_exception(ex, ErrorCategory.NETWORK) from ex
    except ValueError as ex:
        logger.error("catalog_fetch_invalid_json", url=url, error=str(ex))
        raise CatalogFetchError.from_exception(ex, ErrorCategory.INVALID_INPUT) from ex

    blocks = parse_catalog(payload)
    logger.info("catalog_fetched", url=url, blocks=len(blocks))
    return blocks
