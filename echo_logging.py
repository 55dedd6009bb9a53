import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger


def configure_structlog() -> None:
	"""Configure structlog to hand events to the stdlib ProcessorFormatter."""
	structlog.configure(
		processors=[
			structlog.stdlib.filter_by_level,
			structlog.stdlib.add_logger_name,
			structlog.stdlib.add_log_level,
			structlog.stdlib.PositionalArgumentsFormatter(),
			structlog.processors.TimeStamper(fmt="iso"),
			structlog.processors.StackInfoRenderer(),
			structlog.processors.format_exc_info,
			structlog.processors.UnicodeDecoder(),
			# Rendering happens once, in the handler's formatter.
			structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
		],
		context_class=dict,
		logger_factory=structlog.stdlib.LoggerFactory(),
		wrapper_class=structlog.stdlib.BoundLogger,
		cache_logger_on_first_use=False,
	)


def setup_logging(json_logs: bool = False, log_level: str = "INFO") -> BoundLogger:
	"""
	Route structlog and stdlib (uvicorn, fastapi) records through one handler.
	Returns a structlog logger instance.
	"""
	level = getattr(logging, log_level.upper(), logging.INFO)

	root_logger = logging.getLogger()
	root_logger.setLevel(level)

	configure_structlog()

	renderer = (
		structlog.processors.JSONRenderer()
		if json_logs
		else structlog.dev.ConsoleRenderer()
	)

	handler = logging.StreamHandler(sys.stdout)
	handler.setFormatter(
		structlog.stdlib.ProcessorFormatter(
			processor=renderer,
			foreign_pre_chain=[
				structlog.stdlib.add_log_level,
				structlog.stdlib.add_logger_name,
				structlog.processors.TimeStamper(fmt="iso"),
			],
		)
	)
	root_logger.handlers = [handler]

	for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error", "fastapi"]:
		logger = logging.getLogger(logger_name)
		logger.handlers = []
		logger.propagate = True
		logger.setLevel(level)

	return structlog.get_logger()  # type: ignore[no-any-return]


def get_logger(name: Optional[str] = None) -> BoundLogger:
	return structlog.get_logger(name)  # type: ignore[no-any-return]
