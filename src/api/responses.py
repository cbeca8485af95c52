from fastapi.responses import JSONResponse, Response


CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

NOT_CONFIGURED = "Payment system not configured"
CHECKOUT_FAILED = "Failed to create checkout session"
INTERNAL_ERROR = "Internal server error"


def json_response(content: dict, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers=dict(CORS_HEADERS))


def error_response(message: str, status_code: int) -> JSONResponse:
    return json_response({"error": message}, status_code=status_code)


def preflight_response() -> Response:
    return Response(status_code=200, headers=dict(CORS_HEADERS))
