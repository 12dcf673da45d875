from fastapi.responses import JSONResponse

from exam_server.errors import ExamServerError


def error_envelope(error: ExamServerError) -> JSONResponse:
    """Render a typed service failure without leaking store details."""
    return JSONResponse(
        status_code=error.status_code,
        content={"success": False, "message": error.message},
    )
