import logging
from pathlib import Path

from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status

from chatlyzer.core.config import get_settings
from chatlyzer.schemas.conversion import AnalysisPayloadRead, ConversionRead, ConversionRequest
from chatlyzer.services.parsing import ConversionResult, Platform, convert_chat_export
from chatlyzer.services.parsing.errors import ConversionError, UnidentifiedPlatformError
from chatlyzer.services.parsing.titles import list_participants
from chatlyzer.services.sampling import build_analysis_messages

router = APIRouter(prefix="/conversions", tags=["conversions"])
logger = logging.getLogger(__name__)

UPLOAD_CHUNK_BYTES = 1024 * 1024


def _convert(raw_text: str, platform: Platform | str | None, timezone_name: str | None) -> ConversionResult:
    settings = get_settings()
    try:
        result = convert_chat_export(raw_text, platform, timezone_name or settings.default_timezone)
    except UnidentifiedPlatformError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    except ConversionError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    if not result.messages:
        logger.info("conversion_empty", extra={"platform": result.platform.value})
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "message": "Could not parse any messages from the chat export.",
                "platform": result.platform.value,
            },
        )
    return result


def _to_read(result: ConversionResult) -> ConversionRead:
    return ConversionRead(
        platform=result.platform,
        title=result.title,
        message_count=len(result.messages),
        participants=list_participants(result.messages),
        messages=result.messages,
    )


async def _read_upload_text(file: UploadFile) -> str:
    max_bytes = get_settings().max_upload_size_mb * 1024 * 1024
    chunks: list[bytes] = []
    total = 0
    try:
        while True:
            chunk = await file.read(UPLOAD_CHUNK_BYTES)
            if not chunk:
                break
            total += len(chunk)
            if total > max_bytes:
                raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail="File exceeds max size")
            chunks.append(chunk)
    finally:
        await file.close()
    if not total:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Uploaded file is empty.")
    return b"".join(chunks).decode("utf-8-sig", errors="replace")


@router.post("", response_model=ConversionRead)
def create_conversion(payload: ConversionRequest) -> ConversionRead:
    return _to_read(_convert(payload.raw_text, payload.platform, payload.timezone_name))


@router.post("/upload", response_model=ConversionRead)
async def create_conversion_from_upload(
    file: UploadFile = File(...),
    platform: str | None = Form(default=None),
    timezone_name: str | None = Form(default=None),
) -> ConversionRead:
    raw_text = await _read_upload_text(file)
    logger.info(
        "conversion_upload_received",
        extra={"upload_suffix": Path(file.filename or "").suffix.lower(), "decoded_chars": len(raw_text)},
    )
    return _to_read(_convert(raw_text, platform, timezone_name))


@router.post("/analysis-payload", response_model=AnalysisPayloadRead)
def create_analysis_payload(payload: ConversionRequest) -> AnalysisPayloadRead:
    """Convert and bound a chat the way the analysis service expects it."""
    settings = get_settings()
    result = _convert(payload.raw_text, payload.platform, payload.timezone_name)
    messages = build_analysis_messages(
        result.messages,
        max_chars=settings.analysis_max_message_chars,
        limit=settings.analysis_max_messages,
    )
    return AnalysisPayloadRead(
        platform=result.platform,
        title=result.title,
        participants=list_participants(messages),
        total_messages=len(result.messages),
        messages=messages,
    )
