"""Local development server: replays CloudFront events against the responder."""
from __future__ import annotations

from typing import Any

from fastapi import Body, Depends, FastAPI, HTTPException

from edge_resizer.handlers.origin_request import OriginRequestResponder, get_responder

app = FastAPI(title="Edge Resizer")


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


@app.post("/origin-request")
def origin_request(
    event: dict[str, Any] = Body(...),
    responder: OriginRequestResponder = Depends(get_responder),
):
    try:
        request = event["Records"][0]["cf"]["request"]
    except (KeyError, IndexError, TypeError) as exc:
        raise HTTPException(status_code=400, detail="Bad CloudFront event") from exc
    return responder.handle(request)
