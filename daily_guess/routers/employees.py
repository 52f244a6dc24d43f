from fastapi import APIRouter, Depends

from daily_guess.models.dc_models import EmployeesModel
from daily_guess.routers.dependencies import get_catalog_service, resolve_day
from daily_guess.services.catalog_service import CatalogService

employees_router = APIRouter(prefix="/api")


class EmployeesAPI:
    @staticmethod
    @employees_router.get("/employees", response_model=EmployeesModel)
    async def get_employees(
        day=Depends(resolve_day),
        catalog_service: CatalogService = Depends(get_catalog_service),
    ):
        catalog = await catalog_service.get_catalog(day)
        return EmployeesModel(date=day, employees=list(catalog))
