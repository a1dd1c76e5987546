from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/ready")
def ready(request: Request):
    service_ready = getattr(request.app.state, "deal_service", None) is not None
    return {
        "status": "ready" if service_ready else "not_ready",
        "deal_service": service_ready,
    }
