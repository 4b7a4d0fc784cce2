import logging
import threading
from typing import Annotated

from fastapi import Depends, Request

from app.agent.llm_client import LLMClient
from app.core.config import Settings

logger = logging.getLogger(__name__)

_llm_lock = threading.Lock()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_llm_client(request: Request) -> LLMClient:
    """Build the LLM client on first use and reuse it for every later request."""
    state = request.app.state
    if getattr(state, "llm", None) is None:
        with _llm_lock:
            if getattr(state, "llm", None) is None:
                app_settings: Settings = state.settings
                logger.info("Creating LLM client for model %s", app_settings.MODEL_DEFAULT)
                state.llm = LLMClient(
                    model_name=app_settings.MODEL_DEFAULT,
                    base_url=app_settings.LLM_BASE_URL,
                    api_key=app_settings.resolved_api_key,
                    temperature=app_settings.LLM_TEMPERATURE,
                )
    return state.llm


SettingsDep = Annotated[Settings, Depends(get_settings)]
LLMDep = Annotated[LLMClient, Depends(get_llm_client)]
