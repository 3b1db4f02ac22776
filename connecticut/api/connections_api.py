"""
HTTP surface for connection runs.

Accepts a token and a list of usernames, runs connection detection and serves
the result as JSON, a text table, an export string and a graph.
Includes rate limiting for protection against abuse.
"""
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from threading import Lock
from typing import Dict, Optional
import bittensor as bt
import uvicorn

from connecticut.connections.connection_runner import ConnectionRunner
from connecticut.connections.connection_export import connections_to_json, render_connections_table
from connecticut.connections.connection_graph import connection_graph_to_dict
from connecticut.connections.run_state import RunState
from connecticut.utils.config import API_HOST, API_PORT
from connecticut.utils.error_handling import (
    AuthorizationFailure,
    EmptyInput,
    ErrorMessages,
    IdentifierNotFound,
    ResolutionError
)


# Initialize rate limiter
limiter = Limiter(key_func=get_remote_address)
app = FastAPI(title="Connecticut Connections API", version="1.0.0")
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

runner = ConnectionRunner()
run_state = RunState()
_run_lock = Lock()


class ConnectionsRequest(BaseModel):
    token: Optional[str] = None
    usernames: str = ""


def _error_detail(error: Exception, failed_identifier: Optional[str] = None) -> Dict:
    return {"error": str(error), "failed_identifier": failed_identifier}


def _require_connections():
    if run_state.connections is None:
        raise HTTPException(status_code=404, detail="No connections calculated yet")
    return run_state.connections


@app.get("/health")
@limiter.limit("60/minute")
async def health_check(request: Request):
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/connections")
@limiter.limit("30/minute")
def calculate_connections(request: Request, body: ConnectionsRequest) -> Dict:
    """
    Calculate connections for the submitted usernames.
    Rate limit: 30 requests per minute per IP.
    """
    if not _run_lock.acquire(blocking=False):
        raise HTTPException(status_code=409, detail=_error_detail(RuntimeError(ErrorMessages.RUN_IN_PROGRESS)))

    try:
        result = runner.run(run_state, body.usernames, body.token)
    except EmptyInput as e:
        raise HTTPException(status_code=400, detail=_error_detail(e))
    except AuthorizationFailure as e:
        raise HTTPException(status_code=401, detail=_error_detail(e, e.identifier))
    except IdentifierNotFound as e:
        raise HTTPException(status_code=404, detail=_error_detail(e, e.identifier))
    except ResolutionError as e:
        raise HTTPException(status_code=502, detail=_error_detail(e, e.identifier))
    finally:
        _run_lock.release()

    response = result.to_dict()
    response["table"] = render_connections_table(result.connections)
    response["graph"] = connection_graph_to_dict(result.connections)
    return response


@app.get("/connections")
@limiter.limit("60/minute")
async def get_connections(request: Request) -> Dict:
    """Current run state, including the last error if the last run failed."""
    return run_state.to_dict()


@app.get("/connections/export", response_class=PlainTextResponse)
@limiter.limit("60/minute")
async def export_connections(request: Request) -> str:
    """Latest connections as a JSON array, ready to copy."""
    return connections_to_json(_require_connections())


@app.get("/connections/graph")
@limiter.limit("60/minute")
async def get_connection_graph(request: Request) -> Dict:
    """Latest connections as nodes and links with layout positions."""
    return connection_graph_to_dict(_require_connections())


def run_api(host: str = API_HOST, port: int = API_PORT):
    """Run the connections API server."""
    bt.logging.info(f"Starting connections API on {host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level="info")


if __name__ == "__main__":
    run_api()
