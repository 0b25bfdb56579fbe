# backend/studyguide/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from studyguide.env import ENV
from studyguide.routes import scripture as scripture_routes
from studyguide.scripture import default_registry

logging.basicConfig(level=ENV.LOG_LEVEL)

# A misconfigured registry must stop the process here, not on the first request.
registry = default_registry()

app = FastAPI(title="Study Guide Scripture Backend", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(scripture_routes.router, prefix="/api")


@app.get("/")
def root():
    return {"ok": True, "msg": "server is live", "locales": list(registry.locales)}
