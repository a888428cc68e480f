"""HTTP routes for pushing content into Discord."""

import sys
from typing import Optional, Union

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.datastructures import UploadFile

from discord_relay.domain.delivery import DeliveryService
from discord_relay.domain.models import iso_timestamp
from discord_relay.errors import ChannelNotFound, MissingField
from discord_relay.ports.inbound import DeliveryRequest, FilePart

relay_router = APIRouter(tags=["Relay"])


def _log(msg: str):
    print(msg, file=sys.stderr)


class SendJsonRequest(BaseModel):
    channelId: Optional[Union[str, int]] = None
    content: Optional[str] = None
    mentionUserId: Optional[Union[str, int]] = None


class SendResponse(BaseModel):
    success: bool
    message: str


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    timestamp: str


def _error(status_code: int, error: str, detail: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=error, detail=detail).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


def _text_field(value) -> Optional[str]:
    if value is None or isinstance(value, UploadFile):
        return None
    return str(value)


async def read_delivery_request(request: Request) -> DeliveryRequest:
    """Build a DeliveryRequest from a multipart/urlencoded form or a JSON body."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        data = SendJsonRequest(**(await request.json() or {}))
        return DeliveryRequest(
            channel_id=_text_field(data.channelId),
            content=data.content,
            mention_user_id=_text_field(data.mentionUserId),
        )

    form = await request.form()
    files = []
    for upload in form.getlist("files"):
        if not isinstance(upload, UploadFile):
            continue
        files.append(
            FilePart(
                filename=upload.filename or "file",
                data=await upload.read(),
                content_type=upload.content_type,
            )
        )
    return DeliveryRequest(
        channel_id=_text_field(form.get("channelId")),
        content=_text_field(form.get("content")),
        mention_user_id=_text_field(form.get("mentionUserId")),
        files=files,
    )


@relay_router.post(
    "/send",
    response_model=SendResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def send(request: Request):
    """Publish text and files into a Discord text channel."""
    try:
        delivery = await read_delivery_request(request)
    except Exception as e:
        _log(f"[send] unreadable request body: {e}")
        return _error(400, "Malformed request body", str(e))

    if not (delivery.channel_id or "").strip():
        return _error(400, "channelId is required")

    chat = getattr(request.app.state, "chat", None)
    if chat is None:
        return _error(500, "Failed to send response to Discord", "Discord client not available")

    try:
        await DeliveryService(chat).deliver(delivery)
    except MissingField as e:
        return _error(400, str(e))
    except ChannelNotFound:
        return _error(404, "Invalid channel")
    except Exception as e:
        _log(f"[send] error sending response: {e}")
        return _error(500, "Failed to send response to Discord", str(e))

    return SendResponse(success=True, message="Response sent to Discord")


@relay_router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="OK", timestamp=iso_timestamp())
