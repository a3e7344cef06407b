import os
import uuid
from datetime import datetime, timezone

from fastapi import UploadFile, HTTPException
from gireach.config import settings


def utcnow() -> datetime:
    # Naive UTC, matching what the database backend hands back.
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_id() -> str:
    return str(uuid.uuid4())


def file_extension(filename: str | None) -> str:
    name = filename or ""
    return name.rsplit(".", 1)[-1].lower() if "." in name else ""


def validate_image(file: UploadFile) -> str:
    ext = file_extension(file.filename)
    if ext not in settings.ALLOWED_IMAGE_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail=f"File type '{ext}' not allowed. Allowed: {', '.join(settings.ALLOWED_IMAGE_EXTENSIONS)}",
        )
    return ext


async def save_upload(file: UploadFile, subfolder: str = "") -> dict:
    ext = validate_image(file)
    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    if len(content) > settings.MAX_UPLOAD_SIZE:
        limit_mb = settings.MAX_UPLOAD_SIZE // (1024 * 1024)
        raise HTTPException(status_code=400, detail=f"File exceeds {limit_mb} MB limit")

    folder = os.path.join(settings.UPLOAD_DIR, subfolder)
    os.makedirs(folder, exist_ok=True)

    filename = f"{uuid.uuid4().hex}.{ext}"
    path = os.path.join(folder, filename)

    with open(path, "wb") as f:
        f.write(content)

    return {
        "file_name": filename,
        "original_name": file.filename,
        "mime_type": file.content_type or "application/octet-stream",
        "url": f"/uploads/{subfolder}/{filename}".replace("\\", "/").replace("//", "/"),
        "size": len(content),
    }
