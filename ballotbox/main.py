# main.py
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from ballotbox.ballot import Ballot
from ballotbox.config import BALLOT_ADMINISTRATOR, CORS_ORIGINS, LOG_LEVEL
from ballotbox.routes.ballot_routes import router as ballot_router
from ballotbox.security import normalize_identity

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app(administrator: Optional[str] = None) -> FastAPI:
    """
    Build the API around a fresh Ballot.

    The administrator is fixed here for the lifetime of the app; it defaults
    to BALLOT_ADMINISTRATOR from the environment.
    """
    admin = normalize_identity(administrator or BALLOT_ADMINISTRATOR)
    if not admin:
        raise ValueError("BALLOT_ADMINISTRATOR must not be empty")

    app = FastAPI(title="BALLOTBOX - Ballot Tallying API")
    app.state.ballot = Ballot(admin)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(ballot_router)

    @app.get("/", tags=["Root"])
    def read_root():
        return {"message": "Welcome to the BALLOTBOX API"}

    @app.get("/health", tags=["Root"])
    def health_check():
        return {"status": "healthy", "voting_active": app.state.ballot.voting_active()}

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=204)

    logger.info(f"App initialized, administrator: {admin}")
    return app


app = create_app()
