# -----------------------------------------------------------------------------
# Copyright (c) 2025 PureFA PRTG Sensor contributors
# Licensed under the MIT License. See LICENSE in project root for details.
# -----------------------------------------------------------------------------

"""
Base collector for FlashArray REST 2.x list endpoints.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from purefa_sensor.errors import CollectionError

logger = logging.getLogger(__name__)

# Guard against an array that keeps handing out continuation tokens
MAX_PAGES = 100


class FlashArrayCollector(ABC):
    """
    Reads one endpoint and turns its items into schema models.

    Subclasses set ``category`` (used in error messages) and ``path``
    (relative to ``/api/<rest_version>/``) and implement collect().
    """

    category: str = ""
    path: str = ""

    def __init__(self, session):
        self.session = session

    def _fail(self, detail: str) -> CollectionError:
        logger.error(f"Collecting '{self.category}' from {self.path} failed: {detail}")
        return CollectionError(self.category, detail)

    def get_items(self, params: Optional[Dict[str, str]] = None) -> List[Dict[str, Any]]:
        """
        Return every item of the endpoint, following continuation tokens.

        Raises:
            CollectionError: transport error, non-200 status or malformed body
        """
        items: List[Dict[str, Any]] = []
        query = dict(params or {})

        for _ in range(MAX_PAGES):
            try:
                resp = self.session.get(self.path, params=query or None)
            except requests.exceptions.RequestException as e:
                raise self._fail(str(e)) from e

            if resp.status_code != 200:
                raise self._fail(f"{resp.reason} ({resp.status_code})")

            try:
                body = resp.json()
            except ValueError as e:
                raise self._fail(f"response is not valid JSON: {e}") from e

            page = body.get('items') if isinstance(body, dict) else None
            if not isinstance(page, list):
                raise self._fail("response has no 'items' list")
            items.extend(page)

            token = body.get('continuation_token')
            if not token:
                break
            query['continuation_token'] = token
        else:
            raise self._fail(f"more than {MAX_PAGES} pages returned")

        logger.debug(f"Collected {len(items)} {self.category} items from {self.path}")
        return items

    def first_item(self) -> Dict[str, Any]:
        """Return the single array-wide item of a per-array endpoint."""
        items = self.get_items()
        if not items or not isinstance(items[0], dict):
            raise self._fail("response contains no items")
        return items[0]

    def validate(self, model, data):
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise self._fail(f"unexpected response data: {e}") from e

    @abstractmethod
    def collect(self):
        """Return the collector's record(s) or raise CollectionError."""
