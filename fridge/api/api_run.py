from typing import Optional
import logging

from fastapi import FastAPI, Depends, Query

from fridge.api.services import AppServices, get_services
from fridge.logic.voice.commands import detect_command, help_text
from fridge.utilities.config import LOAD_DEMO_DATA
from fridge.utilities.log_config import setup_logging
from fridge.utilities.validators import VoiceInput

# Routers
from fridge.api.routes import inventory, scan, recipes, shopping, meal_plan, budget, profile

# Logging
logger = logging.getLogger("fridge_app")


def create_app(services: Optional[AppServices] = None) -> FastAPI:
    """Build the API around one AppServices container (a fresh one when none is given)."""
    setup_logging()

    app = FastAPI(title="Fridge Tracker API")
    app.state.services = services or AppServices(load_demo=LOAD_DEMO_DATA)

    @app.on_event("startup")
    def _startup():
        logger.info("Fridge API started with %d items", len(app.state.services.fridge))

    @app.on_event("shutdown")
    async def _shutdown():
        await app.state.services.aclose()

    app.include_router(inventory.router)
    app.include_router(scan.router)
    app.include_router(recipes.router)
    app.include_router(shopping.router)
    app.include_router(meal_plan.router)
    app.include_router(budget.router)
    app.include_router(profile.router)

    @app.post('/api/voice/command')
    def voice_command(data: VoiceInput):
        command = detect_command(data.transcript)
        if command is None:
            return {"recognized": False, "command": None, "help": help_text()}
        logger.info("Voice command: %s", command.value)
        return {"recognized": True, "command": command.value, "name": command.name.lower()}

    # -------------------- API: Alerts feed --------------------
    @app.get('/api/events')
    def api_events(since: Optional[int] = Query(default=None),
                   services: AppServices = Depends(get_services)):
        """Return fridge events newer than 'since' (poll with next_cursor)."""
        snapshot = services.event_log.get_events(since)
        if since is None and not snapshot['events']:
            # Seed near-expiry alerts so a fresh client has something to show
            services.fridge.scan_and_notify()
            snapshot = services.event_log.get_events(None)
        return snapshot

    return app


app = create_app()
