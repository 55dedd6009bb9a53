from typing import Any, Callable, Dict, List, Optional, Tuple

import uvicorn
from fastapi import Body, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from echo_handler import echo_get, echo_post
from echo_logging import get_logger, setup_logging
from echo_settings import EchoSettings, get_settings


logger = get_logger(__name__)


async def get_echo(request: Request) -> Dict[str, str]:
	headers = request.headers.raw
	res = echo_get(headers, request.url.netloc, request.url.scheme)
	logger.debug("echo_get", header_count=len(headers), entries=len(res))
	return res


async def post_echo(request: Request, body: Dict[str, str] = Body(...)) -> Dict[str, str]:
	headers = request.headers.raw
	res = echo_post(body, headers)
	logger.debug("echo_post", body_keys=len(body), header_count=len(headers), entries=len(res))
	return res


# (method, handler) pairs mounted at settings.echo_path.
ROUTES: List[Tuple[str, Callable[..., Any]]] = [
	("GET", get_echo),
	("POST", post_echo),
]


def setup_error_handlers(app: FastAPI) -> None:
	@app.exception_handler(RequestValidationError)
	async def malformed_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
		"""Body is not a JSON object of string to string."""
		logger.warning("malformed_body", path=request.url.path, errors=len(exc.errors()))
		return JSONResponse(
			status_code=400,
			content={
				"error": {
					"type": "malformed_body",
					"message": "Request body must be a JSON object mapping strings to strings",
					"details": jsonable_encoder(exc.errors()),
				}
			},
		)

	@app.exception_handler(Exception)
	async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
		logger.error("unhandled_exception", path=request.url.path, exc_info=True)
		return JSONResponse(
			status_code=500,
			content={
				"error": {
					"type": "internal_server_error",
					"message": "Internal server error occurred",
				}
			},
		)


def create_app(settings: Optional[EchoSettings] = None) -> FastAPI:
	if settings is None:
		settings = get_settings()

	setup_logging(json_logs=settings.json_logs, log_level=settings.log_level)

	app = FastAPI(title="Echo API", description="Echo request headers, host and scheme back to the caller.")
	for method, handler in ROUTES:
		app.add_api_route(settings.echo_path, handler, methods=[method])
	setup_error_handlers(app)

	logger.info("app_created", echo_path=settings.echo_path, routes=[method for method, _ in ROUTES])
	return app


app = create_app()


def run() -> None:
	settings = get_settings()
	uvicorn.run(
		"main:app",
		host=settings.host,
		port=settings.port,
		log_level=settings.log_level.lower(),
		log_config=None,
	)


if __name__ == "__main__":
	run()
