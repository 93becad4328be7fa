import logging

from fastapi import FastAPI

from api.app.config import settings
from api.app.routers.vapi import router as vapi_router
from api.app.routers.marketplace import router as marketplace_router

if not logging.getLogger().handlers:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
else:
    logging.getLogger().setLevel(settings.log_level)

app = FastAPI(title="Voice Market Bridge API", version="0.1.0")

app.include_router(vapi_router)
app.include_router(marketplace_router)

@app.get("/health")
def health():
    return {
        "status": "OK",
        "version": app.version,
        "env": settings.app_env,
        "services": {
            "translation": "unknown",
        },
    }
