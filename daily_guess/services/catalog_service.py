import asyncio
import logging
from datetime import date

from daily_guess.domain.catalog import EmployeeCatalog
from daily_guess.services.catalog_providers import CatalogProvider


class CatalogService:
    """Keeps one catalog snapshot per day so the target stays stable within the day."""

    def __init__(self, provider: CatalogProvider):
        self.provider = provider
        self._snapshots: dict[date, EmployeeCatalog] = {}
        self._lock = asyncio.Lock()

    async def refresh(self, day: date) -> EmployeeCatalog:
        # providers block on I/O, keep them off the event loop
        loop = asyncio.get_running_loop()
        employees = await loop.run_in_executor(None, self.provider.list_entities, day)
        catalog = EmployeeCatalog(employees)
        async with self._lock:
            self._snapshots = {day: catalog}
        logging.info(f"Catalog for {day.isoformat()} refreshed with {len(catalog)} employees")
        return catalog

    async def get_catalog(self, day: date) -> EmployeeCatalog:
        async with self._lock:
            catalog = self._snapshots.get(day)
        if catalog is None:
            catalog = await self.refresh(day)
        return catalog
