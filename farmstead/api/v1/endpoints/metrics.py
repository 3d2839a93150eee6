from fastapi import APIRouter

from farmstead.core.deps import CurrentUser, StorageDep
from farmstead.schemas.metrics import FarmMetrics
from farmstead.services.metrics import get_farm_metrics

router = APIRouter(prefix="/metrics", tags=["metrics"])


@router.get("", response_model=FarmMetrics)
async def farm_metrics(current_user: CurrentUser, storage: StorageDep):
    return await get_farm_metrics(storage, current_user.id)
