from fastapi import APIRouter, Request

from bizadmin.server.schemas.common import Message

router = APIRouter(tags=["system"])

HTTP_METHODS = {"get", "put", "post", "delete", "options", "head", "patch", "trace"}


@router.get("/health", response_model=Message)
def health():
    return {"message": "ok"}


@router.get("/__debug/routes")
def list_routes(request: Request):
    """
    Every API route with its methods and operation names.
    Built from the OpenAPI schema: app.routes holds wrapper objects for
    included routers on newer FastAPI releases, the schema is always flat.
    """
    out = []
    paths = request.app.openapi().get("paths", {})
    for path, operations in paths.items():
        methods = sorted(m.upper() for m in operations if m in HTTP_METHODS)
        out.append({
            "path": path,
            "methods": methods,
            "operations": [
                operations[m].get("operationId")
                for m in sorted(operations)
                if m in HTTP_METHODS
            ],
        })
    return out
