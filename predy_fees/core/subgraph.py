"""
Subgraph client - GraphQL queries against The Graph deployments.
"""

import requests

from predy_fees.config.settings import REQUEST_TIMEOUT
from predy_fees.core.errors import SubgraphError


class SubgraphClient:
    def __init__(self, endpoint: str, timeout: int = REQUEST_TIMEOUT):
        """Client bound to a single subgraph endpoint"""
        self.endpoint = endpoint
        self.timeout = timeout

    def query(self, query: str) -> dict:
        """
        Execute a GraphQL query and return its `data` object.

        Entities that do not exist come back absent or null in `data`;
        callers treat both as "no record".

        Raises:
            requests.HTTPError: on non-2xx responses
            SubgraphError: if the response carries GraphQL errors
        """
        response = requests.post(self.endpoint, json={"query": query}, timeout=self.timeout)
        response.raise_for_status()
        result = response.json()

        errors = result.get("errors")
        if errors:
            messages = [e.get("message", str(e)) if isinstance(e, dict) else str(e) for e in errors]
            raise SubgraphError(self.endpoint, messages)

        return result.get("data") or {}

    def get_entity(self, entity: str, entity_id: str, fields) -> dict:
        """Fetch a single entity by id; returns None when it does not exist."""
        selection = "\n            ".join(fields)
        query = f"""
        {{
          {entity}(id: "{entity_id}") {{
            {selection}
          }}
        }}
        """
        data = self.query(query)
        return data.get(entity)
