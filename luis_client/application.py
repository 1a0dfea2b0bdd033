"""LUIS application bound to one set of credentials."""

import logging
from dataclasses import dataclass, field

from .client import ApiVersion, acall_api, mask_key
from .data_models import QueryResultV1, QueryResultV1Preview

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Application:
    """
    A LUIS application.

    Holds the application ID and subscription key and exposes one query
    coroutine per supported API version. Calls share no mutable state, so
    one instance can serve concurrent queries.
    """

    application_id: str
    subscription_key: str = field(repr=False)

    async def query_v1(self, query: str) -> QueryResultV1:
        """
        Query v1 of the LUIS API.

        Args:
            query: Text to analyse

        Returns:
            The query, its entities and all intents in the order ranked by the service

        Raises:
            requests.exceptions.RequestException: If the request fails
            ValueError: If the body is not valid JSON or not a v1 result
        """
        data = await acall_api(query, ApiVersion.V1, self.application_id, self.subscription_key)
        return QueryResultV1.from_dict(data)

    async def query_v1_preview(self, query: str) -> QueryResultV1Preview:
        """
        Query v1 preview of the LUIS API.

        Args:
            query: Text to analyse

        Returns:
            The query, its entities and the top-scoring intent

        Raises:
            requests.exceptions.RequestException: If the request fails
            ValueError: If the body is not valid JSON or not a v1 preview result
        """
        data = await acall_api(query, ApiVersion.V1_PREVIEW, self.application_id, self.subscription_key)
        return QueryResultV1Preview.from_dict(data)


def create(application_id: str, subscription_key: str) -> Application:
    """
    Create a LUIS application.

    No request is made and the credentials are not validated.

    Args:
        application_id: The unique ID identifying the application
        subscription_key: The subscription key

    Returns:
        The LUIS application
    """
    logger.info(f"Initialized LUIS application {application_id} (key {mask_key(subscription_key)})")
    return Application(application_id=application_id, subscription_key=subscription_key)
