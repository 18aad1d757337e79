# sampleshop/api/routers/config.py
from fastapi import APIRouter, Depends

from sampleshop.api.deps import get_config_service
from sampleshop.domain.schemas import SheetsConfig, SheetsConfigIn
from sampleshop.services.config_service import ConfigService

router = APIRouter(prefix="/config", tags=["config"])


@router.get("", response_model=SheetsConfig)
def get_config(svc: ConfigService = Depends(get_config_service)):
    return svc.get_config()


@router.put("", response_model=SheetsConfig)
def save_config(payload: SheetsConfigIn, svc: ConfigService = Depends(get_config_service)):
    return svc.save_config(payload)
