"""Request dispatcher for the LUIS query endpoints."""

import asyncio
import logging
from enum import Enum
from functools import partial
from urllib.parse import quote, urlencode

import requests

from .errors import UnsupportedVersionError

logger = logging.getLogger(__name__)

V1_ENDPOINT = "https://api.projectoxford.ai/luis/v1/application"
V1_PREVIEW_ENDPOINT = "https://api.projectoxford.ai/luis/v1/application/preview"


class ApiVersion(Enum):
    """Version of the LUIS API to invoke."""

    NONE = 0
    V1 = 1
    V1_PREVIEW = 2


_ENDPOINTS = {
    ApiVersion.V1: V1_ENDPOINT,
    ApiVersion.V1_PREVIEW: V1_PREVIEW_ENDPOINT,
}


def mask_key(subscription_key: str) -> str:
    """Hide all but the last four characters of a subscription key."""
    if not subscription_key:
        return ""
    return f"***{subscription_key[-4:]}"


def endpoint_for(version: ApiVersion) -> str:
    """Return the base endpoint for an API version."""
    try:
        return _ENDPOINTS[version]
    except KeyError:
        name = getattr(version, "name", version)
        raise UnsupportedVersionError(f"The specified version '{name}' is not supported.") from None


def build_query_uri(query: str, version: ApiVersion, application_id: str, subscription_key: str) -> str:
    """
    Build the request URI for a query.

    Args:
        query: Text to analyse
        version: API version selecting the endpoint
        application_id: LUIS application ID
        subscription_key: Subscription key sent with the request

    Returns:
        Endpoint URL with the ``id``, ``subscription-key`` and ``q`` parameters

    Raises:
        UnsupportedVersionError: If the version has no endpoint
    """
    params = {
        "id": application_id,
        "subscription-key": subscription_key,
        "q": query,
    }
    return f"{endpoint_for(version)}?{urlencode(params, quote_via=quote)}"


def call_api(query: str, version: ApiVersion, application_id: str, subscription_key: str):
    """
    Query the LUIS API and return the parsed response body.

    The request is sent once with no custom headers and no timeout beyond
    what the transport applies.

    Args:
        query: Text to analyse
        version: API version to invoke
        application_id: LUIS application ID
        subscription_key: Subscription key sent with the request

    Returns:
        The decoded JSON body

    Raises:
        UnsupportedVersionError: If the version has no endpoint, before any request is made
        requests.exceptions.RequestException: If the request fails or the service
            answers with an error status
        requests.exceptions.JSONDecodeError: If the body is not valid JSON
    """
    uri = build_query_uri(query, version, application_id, subscription_key)

    try:
        logger.debug(
            f"Querying LUIS {version.name} for application {application_id} "
            f"(key {mask_key(subscription_key)}): '{query[:50]}'"
        )

        response = requests.get(uri)
        response.raise_for_status()

        data = response.json()

        logger.debug(f"Received LUIS {version.name} response for application {application_id}")
        return data

    except requests.exceptions.JSONDecodeError as e:
        logger.error(f"Invalid JSON in LUIS {version.name} response: {e}")
        raise
    except requests.exceptions.RequestException as e:
        logger.error(f"Error querying LUIS {version.name}: {e}")
        raise


async def acall_api(query: str, version: ApiVersion, application_id: str, subscription_key: str):
    """
    Asynchronous version of call_api.

    The blocking request runs on the event loop's default executor.
    """
    # Fail before scheduling any work.
    endpoint_for(version)

    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None, partial(call_api, query, version, application_id, subscription_key)
    )
