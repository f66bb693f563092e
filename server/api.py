"""FastAPI server exposing the outfit engine to the mobile client."""

from fastapi import FastAPI, HTTPException

from logic.validation import SuggestRequest, ValidateOutfitRequest
from stylist_app.app import WardrobeStylistApp
from stylist_app.logging_config import configure_logging

configure_logging()

stylist_app = WardrobeStylistApp()
app = FastAPI(title="Wardrobe Stylist", version="0.1.0")


@app.get("/healthz")
async def healthcheck() -> dict:
    """Lightweight readiness probe."""

    return {
        "status": "ok",
        "service": stylist_app.config.service_name,
        "environment": stylist_app.config.environment or "local",
    }


@app.post("/suggestions")
def suggest_outfits(request: SuggestRequest) -> dict:
    """Generate ranked outfit suggestions for the posted wardrobe snapshot."""

    response = stylist_app.suggest(request=request)
    if response.get("status") != "ok":
        raise HTTPException(status_code=400, detail=response.get("message", "suggestion failed"))
    return response


@app.post("/outfits/validate")
def validate_outfit(request: ValidateOutfitRequest) -> dict:
    """Return styling warnings for a hand-picked outfit without rejecting it."""

    response = stylist_app.validate(request=request)
    if response.get("status") != "ok":
        raise HTTPException(status_code=400, detail=response.get("message", "validation failed"))
    return response


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=int("8080"), reload=False)
