"""Employee catalog sources: the bundled mock roster and the live HR API."""

import json
import logging
import pathlib
from abc import ABC, abstractmethod
from datetime import date
from typing import List

import requests
from pydantic import ValidationError as PydanticValidationError

from daily_guess.domain.employee_mapper import map_huma_user_detail
from daily_guess.errors import CatalogAuthenticationError, CatalogUnavailable
from daily_guess.models.game_models import Employee
from daily_guess.models.huma_models import HumaListResponse, HumaUserDetail

MOCK_EMPLOYEES_PATH = pathlib.Path(__file__).parents[1] / "data" / "mock_employees.json"


class CatalogProvider(ABC):
    @abstractmethod
    def list_entities(self, day: date) -> List[Employee]:
        """Return every guessable employee for ``day``."""


class MockCatalogProvider(CatalogProvider):
    def __init__(self, path: pathlib.Path = MOCK_EMPLOYEES_PATH):
        self.path = path

    def list_entities(self, day: date) -> List[Employee]:
        with self.path.open("r", encoding="utf-8") as f:
            records = json.load(f)
        logging.info(f"Using mock employee data ({len(records)} employees)")
        return [Employee.model_validate(record) for record in records]


class HumaCatalogProvider(CatalogProvider):
    """Reads the roster from the HR API: list pages first, then one detail call per active user."""

    def __init__(
        self,
        base_url: str,
        access_token: str,
        page_size: int = 50,
        http: requests.Session | None = None,
        timeout: float = 10.0,
    ):
        if not access_token:
            raise CatalogAuthenticationError("No access token available. Please login first.")
        token = access_token.strip()
        if token.lower().startswith("bearer "):
            token = token[len("bearer "):].strip()
        self.base_url = base_url.rstrip("/")
        self.page_size = page_size
        self.timeout = timeout
        self.http = http or requests.Session()
        self.headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
        }

    def _get(self, url: str, params: dict | None = None) -> requests.Response:
        try:
            response = self.http.get(url, params=params, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise CatalogUnavailable(f"Failed to reach {url}: {e}") from e
        if response.status_code == 401:
            raise CatalogAuthenticationError("Authentication failed. Please login again.")
        return response

    def list_active_user_ids(self) -> List[str]:
        user_ids = []
        offset = 0
        while True:
            response = self._get(
                f"{self.base_url}/users",
                params={
                    "limit": self.page_size,
                    "offset": offset,
                    "orderBy": "name",
                    "orderDirection": "asc",
                },
            )
            if not response.ok:
                raise CatalogUnavailable(
                    f"Failed to fetch employees: {response.status_code} {response.reason}"
                )
            try:
                page = HumaListResponse.model_validate(response.json())
            except (ValueError, PydanticValidationError) as e:
                raise CatalogUnavailable(f"Unreadable employee list at offset {offset}: {e}") from e
            user_ids.extend(
                item.id for item in page.items if item.status is None or item.status.active
            )
            offset += len(page.items)
            if len(page.items) < self.page_size or (page.total and offset >= page.total):
                return user_ids

    def fetch_user_detail(self, user_id: str) -> HumaUserDetail | None:
        response = self._get(f"{self.base_url}/users/{user_id}")
        if not response.ok:
            logging.warning(f"Failed to fetch details for user {user_id}: {response.status_code}")
            return None
        try:
            return HumaUserDetail.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            logging.warning(f"Unreadable details for user {user_id}: {e}")
            return None

    def list_entities(self, day: date) -> List[Employee]:
        user_ids = self.list_active_user_ids()
        logging.info(f"Fetching details for {len(user_ids)} users...")

        employees = []
        for user_id in user_ids:
            detail = self.fetch_user_detail(user_id)
            if detail is not None:
                employees.append(map_huma_user_detail(detail, today=day))

        logging.info(f"Successfully loaded {len(employees)} employees")
        return employees
