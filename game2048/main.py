import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from game2048.db import create_tables
from game2048.exceptions import CorruptBoardError, GameNotFoundError, InvalidArgumentError
from game2048.load_secrets import log_level
from game2048.models.dc_models import ErrorResponseModel
from game2048.routers import game

logging.basicConfig(level=log_level)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


@asynccontextmanager
async def lifespan(app):
    """Create the game_state table.
    This function is called to start the server.
    """
    await create_tables()
    try:
        yield
    finally:
        logging.info("Stop Server")


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponseModel(
        timestamp=datetime.now(timezone.utc),
        status=status_code,
        error=error,
        message=message,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


app = FastAPI(lifespan=lifespan)
app.include_router(game.game_router)


@app.exception_handler(InvalidArgumentError)
async def handle_invalid_argument(request: Request, exc: InvalidArgumentError):
    return error_response(status.HTTP_400_BAD_REQUEST, "Bad Request", str(exc))


@app.exception_handler(RequestValidationError)
async def handle_request_validation(request: Request, exc: RequestValidationError):
    messages = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return error_response(status.HTTP_400_BAD_REQUEST, "Bad Request", messages)


@app.exception_handler(GameNotFoundError)
async def handle_game_not_found(request: Request, exc: GameNotFoundError):
    return error_response(status.HTTP_404_NOT_FOUND, "Not Found", str(exc))


@app.exception_handler(CorruptBoardError)
async def handle_corrupt_board(request: Request, exc: CorruptBoardError):
    logging.error(f"Corrupt stored game state at {request.url.path}: {exc}")
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", UNEXPECTED_ERROR_MESSAGE
    )


@app.exception_handler(Exception)
async def handle_unexpected(request: Request, exc: Exception):
    logging.exception(f"Unhandled exception at {request.url.path}", exc_info=exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", UNEXPECTED_ERROR_MESSAGE
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8080)
