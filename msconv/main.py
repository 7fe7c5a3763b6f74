import sys
from typing import Iterable, List, Optional

import uvicorn

from .cli import parse_args
from .durations import parse_duration
from .errors import DurationError
from .formatting import format_duration
from .log import get_logger, verbosity_level
from .units import UNIT_MS, aliases_for
from .webapp import create_app


def render_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def parse_values(values: Iterable[str], max_length: int) -> List[str]:
    return [render_number(parse_duration(value, max_length=max_length)) for value in values]


def format_values(values: Iterable[float], long: bool) -> List[str]:
    return [format_duration(value, long=long) for value in values]


def unit_table() -> List[str]:
    rows = []
    for unit, size in UNIT_MS.items():
        aliases = ", ".join(aliases_for(unit))
        rows.append(f"{unit:>12}: {render_number(float(size)):>12}  {aliases}")
    return rows


def serve(host: str, port: int, max_length: int) -> None:
    app = create_app(max_length=max_length)
    uvicorn.run(app, host=host, port=port)


def main(argv: Optional[List[str]] = None):
    params = parse_args(argv if argv is not None else sys.argv[1:])
    logger = get_logger(level=verbosity_level(params.verbose))
    try:
        if params.command == "parse":
            for line in parse_values(params.values, params.max_length):
                print(line)
        elif params.command == "format":
            for line in format_values(params.values, params.long):
                print(line)
        elif params.command == "units":
            for line in unit_table():
                print(line)
        elif params.command == "serve":
            logger.info("serving on http://%s:%s", params.host, params.port)
            try:
                serve(params.host, params.port, params.max_length)
            except KeyboardInterrupt:
                print("\n[interrupt] server exiting…")
    except DurationError as exc:
        logger.debug("%s command failed: %r", params.command, exc)
        print(f"[error] {exc}")
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover - exercised via CLI invocation
    main(sys.argv[1:])
