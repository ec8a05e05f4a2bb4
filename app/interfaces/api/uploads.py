"""Upload API routes — single image upload."""

import structlog
from fastapi import APIRouter, Depends, Request, status

from app.application.services import upload_service
from app.core.exceptions import AppError, UploadRejectedException
from app.core.responses import success_response
from app.domain.schemas.auth import Principal
from app.interfaces.api.deps import get_current_user

router = APIRouter(prefix="/api/upload", tags=["Uploads"])
logger = structlog.get_logger(__name__)


@router.post("/image", status_code=status.HTTP_201_CREATED)
async def upload_image(request: Request, user: Principal = Depends(get_current_user)):
    try:
        form = await request.form()
    except Exception as e:
        logger.warning("Malformed upload body", error=str(e), user_id=user.id)
        raise UploadRejectedException(upload_service.NO_FILE_MESSAGE)

    try:
        upload = upload_service.select_single_image(form.multi_items())
        scheme = request.headers.get("x-forwarded-proto") or request.url.scheme
        host = request.headers.get("host") or request.url.netloc
        stored = await upload_service.store_image(upload, scheme, host)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Upload failed", user_id=user.id)
        raise AppError("Upload failed") from e
    finally:
        await form.close()

    return success_response(stored, "Image uploaded successfully")
