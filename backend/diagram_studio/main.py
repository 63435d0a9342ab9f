from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from diagram_studio.api.routes import router
from diagram_studio.config import CORS_ORIGINS
from diagram_studio.patterns import get_pattern_registry

app = FastAPI(
    title="Architecture Diagram Prompt Studio",
    version="0.1.0",
)

# Middleware FIRST
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes AFTER middleware
app.include_router(router)


@app.on_event("startup")
def startup():
    # Build the read-only rule catalog once, before the first request
    registry = get_pattern_registry()
    print(f"✅ Pattern registry ready ({len(registry.groups)} rule groups)")
