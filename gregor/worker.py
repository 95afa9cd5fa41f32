#!/usr/bin/env python3
"""Gregor Worker: JSON-lines protocol over the calendar engine.

A long-running process that answers conversion requests, one JSON object
per line, so that programs in other languages can use the engine
without reimplementing it.

Protocol:
  Ready:    {"status": "ready", "version": "<worker version>"}
  Request:  {"id": <any>, "op": "<operation>", ...params...}
  Response: {"id": <any>, "status": "ok"|"error", ...result OR error...}

Errors carry "error_code" and "message"; OutOfRange errors also carry
"details" with the field, the value and the legal bounds.

Operations:
  to_datetime   {"timestamp": int}                -> {"datetime": {...}, "text": str}
  to_timestamp  {"text": str} | {"datetime": {...}} -> {"timestamp": int}
  from_unix     {"unixtimestamp": int}            -> {"timestamp": int}
  to_unix       {"timestamp": int}                -> {"unixtimestamp": int}
  format        {"timestamp": int, "form": str}   -> {"text": str}
  parse         {"text": str}                     -> {"datetime": {...}}
  shutdown      {}                                -> {}

Logs go to stderr; stdout carries nothing but protocol messages.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from typing import Any, Callable, Optional, TextIO

from loguru import logger

from gregor import __version__
from gregor.calendar import (
    datetime_to_timestamp,
    timestamp_to_datetime,
    timestamp_to_unixtimestamp,
    unixtimestamp_to_timestamp,
)
from gregor.core.datetime import DateTime
from gregor.errors import IncompleteDateError, OutOfRangeError, ParseError
from gregor.format.iso8601 import parse_iso8601
from gregor.log import setup_logger


# =============================================================================
# Configuration
# =============================================================================

# Worker version
WORKER_VERSION = __version__

# Date forms accepted by the format operation
DATE_FORMS = ("calendar", "week", "ordinal")


# =============================================================================
# Worker State
# =============================================================================

@dataclass
class WorkerState:
    """Request counters reported at shutdown."""
    requests: int = 0
    errors: int = 0
    running: bool = True


# =============================================================================
# Argument Helpers
# =============================================================================

def _invalid_argument(message: str) -> dict:
    return {
        "status": "error",
        "error_code": "InvalidArgument",
        "message": message,
    }


def _int_argument(request: dict, name: str) -> Optional[int]:
    """Return an integer request parameter, or None if absent or not an int."""
    value = request.get(name)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


# =============================================================================
# Operation Handlers
# =============================================================================

def handle_to_datetime(state: WorkerState, request: dict) -> dict:
    """Handle 'to_datetime' operation."""
    timestamp = _int_argument(request, "timestamp")
    if timestamp is None:
        return _invalid_argument("timestamp must be an integer")

    resolved = timestamp_to_datetime(timestamp)
    return {
        "status": "ok",
        "datetime": resolved.to_json(),
        "text": str(resolved),
    }


def handle_to_timestamp(state: WorkerState, request: dict) -> dict:
    """Handle 'to_timestamp' operation."""
    text = request.get("text")
    data = request.get("datetime")

    if isinstance(text, str):
        value = parse_iso8601(text)
    elif isinstance(data, dict):
        value = DateTime.from_json(data)
    else:
        return _invalid_argument("text or datetime is required")

    return {
        "status": "ok",
        "timestamp": datetime_to_timestamp(value),
    }


def handle_from_unix(state: WorkerState, request: dict) -> dict:
    """Handle 'from_unix' operation."""
    unixtimestamp = _int_argument(request, "unixtimestamp")
    if unixtimestamp is None:
        return _invalid_argument("unixtimestamp must be an integer")

    return {
        "status": "ok",
        "timestamp": unixtimestamp_to_timestamp(unixtimestamp),
    }


def handle_to_unix(state: WorkerState, request: dict) -> dict:
    """Handle 'to_unix' operation."""
    timestamp = _int_argument(request, "timestamp")
    if timestamp is None:
        return _invalid_argument("timestamp must be an integer")

    return {
        "status": "ok",
        "unixtimestamp": timestamp_to_unixtimestamp(timestamp),
    }


def handle_format(state: WorkerState, request: dict) -> dict:
    """Handle 'format' operation."""
    timestamp = _int_argument(request, "timestamp")
    if timestamp is None:
        return _invalid_argument("timestamp must be an integer")

    form = request.get("form", "calendar")
    if form not in DATE_FORMS:
        return _invalid_argument(
            f"form must be one of {', '.join(DATE_FORMS)}, got {form!r}"
        )

    return {
        "status": "ok",
        "text": str(timestamp_to_datetime(timestamp).to_datetime(form)),
    }


def handle_parse(state: WorkerState, request: dict) -> dict:
    """Handle 'parse' operation."""
    text = request.get("text")
    if not isinstance(text, str):
        return _invalid_argument("text is required")

    return {
        "status": "ok",
        "datetime": parse_iso8601(text).to_json(),
    }


def handle_shutdown(state: WorkerState, request: dict) -> dict:
    """Handle 'shutdown' operation."""
    state.running = False
    return {
        "status": "ok",
    }


# Operation dispatch table
HANDLERS: dict[str, Callable[[WorkerState, dict], dict]] = {
    "to_datetime": handle_to_datetime,
    "to_timestamp": handle_to_timestamp,
    "from_unix": handle_from_unix,
    "to_unix": handle_to_unix,
    "format": handle_format,
    "parse": handle_parse,
    "shutdown": handle_shutdown,
}


# =============================================================================
# Request Dispatch
# =============================================================================

def handle_request(state: WorkerState, request: Any) -> dict:
    """Run one decoded request and return its response.

    Engine errors become error responses; nothing raised by a handler
    escapes.
    """
    if not isinstance(request, dict):
        state.errors += 1
        return {
            "id": None,
            "status": "error",
            "error_code": "InvalidRequest",
            "message": f"expected a JSON object, got {type(request).__name__}",
        }

    request_id = request.get("id")
    op = request.get("op", "")
    state.requests += 1

    # op comes straight from JSON and may be unhashable
    handler = HANDLERS.get(op) if isinstance(op, str) else None
    if handler is None:
        result = {
            "status": "error",
            "error_code": "UnknownOperation",
            "message": f"Unknown operation: {op!r}",
        }
    else:
        try:
            result = handler(state, request)
        except OutOfRangeError as e:
            result = {
                "status": "error",
                "error_code": "OutOfRange",
                "message": str(e),
                "details": {
                    "field": e.field,
                    "value": e.value,
                    "lower": e.lower,
                    "upper": e.upper,
                },
            }
        except IncompleteDateError as e:
            result = {
                "status": "error",
                "error_code": "IncompleteDate",
                "message": str(e),
            }
        except ParseError as e:
            result = {
                "status": "error",
                "error_code": "ParseError",
                "message": str(e),
            }
        except Exception as e:
            logger.exception(f"Operation {op} failed")
            result = {
                "status": "error",
                "error_code": "InternalError",
                "message": str(e),
            }

    if result["status"] == "error":
        state.errors += 1
        logger.debug(f"Request {request_id!r} ({op}): {result['error_code']}: {result['message']}")
    else:
        logger.debug(f"Request {request_id!r} ({op}): ok")

    result["id"] = request_id
    return result


def handle_line(state: WorkerState, line: str) -> dict:
    """Decode one protocol line and run it."""
    try:
        request = json.loads(line)
    except json.JSONDecodeError as e:
        state.errors += 1
        return {
            "id": None,
            "status": "error",
            "error_code": "InvalidRequest",
            "message": f"Invalid JSON: {e}",
        }
    return handle_request(state, request)


# =============================================================================
# Main Loop
# =============================================================================

def serve(stdin: TextIO, stdout: TextIO) -> WorkerState:
    """Answer requests from stdin until shutdown or end of input."""
    state = WorkerState()

    # Send ready message
    ready_msg = {
        "status": "ready",
        "version": WORKER_VERSION,
    }
    print(json.dumps(ready_msg), file=stdout, flush=True)
    logger.info(f"Worker {WORKER_VERSION} ready")

    # Read requests from stdin, one JSON per line
    for line in stdin:
        line = line.strip()
        if not line:
            continue

        result = handle_line(state, line)
        print(json.dumps(result), file=stdout, flush=True)

        # Exit after shutdown
        if not state.running:
            break

    logger.info(f"Worker stopped after {state.requests} requests ({state.errors} errors)")
    return state


def main(argv: Optional[list[str]] = None) -> int:
    """Main worker entry point."""
    parser = argparse.ArgumentParser(
        prog="gregor-worker",
        description="Answer calendar conversion requests as JSON lines on stdin/stdout.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="minimum log level written to stderr (default: $GREGOR_LOG_LEVEL or INFO)",
    )
    args = parser.parse_args(argv)

    setup_logger(args.log_level)
    serve(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
