from typing import Any, Dict, Iterable, List, Mapping, Tuple


HEADER_KEY_PREFIX = "[Header] "
HOST_KEY = "[Request] Host"
SCHEME_KEY = "[Request] Scheme"
VALUE_DELIMITER = ","

HeaderPairs = Iterable[Tuple[Any, Any]]


def _to_str(value: Any) -> str:
	if isinstance(value, bytes):
		# Header bytes are latin-1 on the wire.
		return value.decode("latin-1", errors="replace")
	return str(value)


def group_headers(raw: HeaderPairs) -> List[Tuple[str, List[str]]]:
	"""Collapse repeated header names into one entry, keeping first-seen order.

	ASGI servers deliver names lowercased, so ``X-Test`` arrives as ``x-test``;
	the original casing is not available here.
	"""
	grouped: Dict[str, List[str]] = {}
	for name, value in raw:
		grouped.setdefault(_to_str(name), []).append(_to_str(value))
	return list(grouped.items())


def format_header_key(name: str) -> str:
	return HEADER_KEY_PREFIX + name


def join_header_values(values: Iterable[str]) -> str:
	return VALUE_DELIMITER.join(values)


def format_headers(raw: HeaderPairs) -> Dict[str, str]:
	"""Render every header as ``"[Header] <name>" -> "<v1>,<v2>"``."""
	return {
		format_header_key(name): join_header_values(values)
		for name, values in group_headers(raw)
	}


def echo_get(headers: HeaderPairs, host: str, scheme: str) -> Dict[str, str]:
	"""Formatted headers followed by the request host and scheme."""
	res = format_headers(headers)
	res[HOST_KEY] = host
	res[SCHEME_KEY] = scheme
	return res


def echo_post(body: Mapping[str, str], headers: HeaderPairs) -> Dict[str, str]:
	"""Copy of the body with the formatted headers written on top.

	A body key equal to a formatted header key is overwritten by the header
	(last write wins).
	"""
	res = dict(body)
	res.update(format_headers(headers))
	return res
