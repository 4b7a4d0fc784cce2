from fastapi import APIRouter

from app.api.routes import agents, chat, ideas, prd

api_router = APIRouter()
api_router.include_router(ideas.router)
api_router.include_router(chat.router)
api_router.include_router(prd.router)
api_router.include_router(agents.router)
