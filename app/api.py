"""
FastAPI routes for wire message intake and retrieval.
Thin API layer: parsing, storage and auth live in core/ and services/.
"""
import asyncio
from functools import partial
from typing import Optional

from fastapi import Depends, FastAPI, Form, Request, Response
from fastapi.responses import JSONResponse

from core.auth import TokenService
from core.config import Settings, get_settings
from core.db import Database
from core.exceptions import (
    AuthenticationError,
    ConflictError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
    WireIntakeException,
)
from core.logger import setup_logger
from core.schema import Caller, LoginResponse, WireMessageRecord
from services.wire_message_service import WireMessageService

logger = setup_logger(__name__)

TOKEN_COOKIE = "token"

STATUS_CODES = {
    ValidationError: 400,
    AuthenticationError: 401,
    NotFoundError: 404,
    ConflictError: 409,
    InfrastructureError: 500,
}


def status_code_for(exc: WireIntakeException) -> int:
    """Map an exception to its HTTP status, walking the class hierarchy."""
    for cls in type(exc).__mro__:
        if cls in STATUS_CODES:
            return STATUS_CODES[cls]
    return 500


def parse_query_int(value: Optional[str], error_message: str) -> Optional[int]:
    """Convert an optional query parameter, reporting bad input as a ValidationError."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError(error_message, details={"value": value})


def get_wire_message_service(request: Request) -> WireMessageService:
    return request.app.state.wire_message_service


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_current_caller(
    request: Request,
    token_service: TokenService = Depends(get_token_service)
) -> Optional[Caller]:
    """
    Resolve the authenticated caller from the token cookie.

    Returns None when authentication is disabled.

    Raises:
        AuthenticationError: If the cookie is missing or the token is invalid
    """
    if not request.app.state.settings.auth_required:
        return None

    token = request.cookies.get(TOKEN_COOKIE)
    if not token:
        raise AuthenticationError("Authentication required")
    return token_service.verify_token(token)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Application settings (defaults to the global settings)

    Returns:
        Configured FastAPI app with an initialized database
    """
    settings = settings or get_settings()
    db = Database(settings)
    db.init_db()

    app = FastAPI(
        title="Pillar Bank Wire Messages",
        description="Intake and record-keeping for wire transfer messages",
        version="1.0.0"
    )
    app.state.settings = settings
    app.state.wire_message_service = WireMessageService(db, settings)
    app.state.token_service = TokenService.from_settings(settings)

    @app.exception_handler(WireIntakeException)
    async def handle_intake_exception(request: Request, exc: WireIntakeException):
        status_code = status_code_for(exc)
        if status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(status_code=status_code, content={"error": exc.message})

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"message": "API is working"}

    @app.post("/login", response_model=LoginResponse)
    async def login(
        response: Response,
        username: str = Form(...),
        password: str = Form(...),
        token_service: TokenService = Depends(get_token_service)
    ):
        """Exchange credentials for a session token cookie."""
        if not token_service.check_credentials(username, password):
            logger.warning(f"Failed login attempt for {username}")
            raise AuthenticationError("Invalid credentials")

        token = token_service.create_token(username)
        response.set_cookie(
            TOKEN_COOKIE,
            token,
            max_age=int(token_service.ttl.total_seconds()),
            httponly=True,
            samesite="strict",
        )
        logger.info(f"User {username} logged in")
        return LoginResponse()

    @app.post("/wire-messages", status_code=201, response_model=WireMessageRecord)
    async def post_wire_message(
        request: Request,
        caller: Optional[Caller] = Depends(get_current_caller),
        service: WireMessageService = Depends(get_wire_message_service)
    ):
        """
        Accept a raw wire message.

        The request body is the message text itself, not JSON.
        """
        body = await request.body()
        try:
            raw = body.decode("utf-8")
        except UnicodeDecodeError:
            raise ValidationError("Invalid request format")
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None,
            partial(service.ingest, raw, caller=caller.username if caller else None)
        )

    @app.get("/wire-messages")
    def get_wire_messages(
        page: Optional[str] = None,
        limit: Optional[str] = None,
        caller: Optional[Caller] = Depends(get_current_caller),
        service: WireMessageService = Depends(get_wire_message_service)
    ):
        """List wire messages, paginated when page or limit is given."""
        records = service.list_wire_messages(
            page=parse_query_int(page, "Invalid page number"),
            limit=parse_query_int(limit, "Invalid limit number")
        )
        if not records:
            return {"message": "No wire messages found"}
        return [record.model_dump(mode="json", by_alias=True) for record in records]

    @app.get("/wire-messages/{seq}", response_model=WireMessageRecord)
    def get_wire_message(
        seq: str,
        caller: Optional[Caller] = Depends(get_current_caller),
        service: WireMessageService = Depends(get_wire_message_service)
    ):
        """Get a single wire message by sequence number."""
        try:
            seq_num = int(seq)
        except ValueError:
            raise ValidationError("Invalid sequence number format", details={"seq": seq})
        return service.get_wire_message(seq_num)

    return app
