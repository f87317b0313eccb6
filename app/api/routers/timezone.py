from datetime import datetime

from fastapi import APIRouter, Depends

from app.api.dependencies import get_now, get_timezone_service
from app.features.timezone.schemas import TimezoneDebugOut, TimezoneInfoOut
from app.features.timezone.services import TimezoneService

router = APIRouter(tags=["timezone"])


@router.get(
    "/timezone",
    summary="Fuseau horaire configuré et heure courante",
    response_model=TimezoneInfoOut,
)
def get_timezone_info(
    now: datetime = Depends(get_now),
    svc: TimezoneService = Depends(get_timezone_service),
):
    return svc.info(now)


@router.get(
    "/debug/timezone",
    summary="Infos de debug : heures UTC / fuseau / serveur et bucket courant",
    response_model=TimezoneDebugOut,
)
def debug_timezone(
    now: datetime = Depends(get_now),
    svc: TimezoneService = Depends(get_timezone_service),
):
    return svc.debug(now)
