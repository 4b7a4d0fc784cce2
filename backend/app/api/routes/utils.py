from datetime import datetime, timezone

from fastapi import APIRouter

from app.api.deps import SettingsDep
from app.models import HealthStatus

router = APIRouter(tags=["utils"])


@router.get("/health", response_model=HealthStatus)
async def health_check(app_settings: SettingsDep) -> HealthStatus:
    return HealthStatus(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=app_settings.APP_VERSION,
        environment=app_settings.ENVIRONMENT,
    )
