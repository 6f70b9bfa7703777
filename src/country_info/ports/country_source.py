from __future__ import annotations

from abc import ABC, abstractmethod

from country_info.domain.country import Country


class CountrySource(ABC):
    """
    Port for retrieving the full country dataset.

    Contract:
        - One call retrieves every record; no paging or filtering upstream
        - A single attempt: implementations never retry
        - Failures are raised as FetchError subclasses
          (TransportError, HttpStatusError, DecodeError)
    """

    @abstractmethod
    def fetch_all(self) -> list[Country]:
        """
        Fetch every country record.

        Returns:
            Countries in the order the provider returned them

        Raises:
            TransportError: Network unreachable, connection refused, timeout
            HttpStatusError: Non-2xx response
            DecodeError: Payload is not the expected shape
        """
        ...
