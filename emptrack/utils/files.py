# emptrack/utils/files.py

import hashlib
import logging
import re
from pathlib import Path
from typing import Optional, Union

import aiofiles
from fastapi import UploadFile

logger = logging.getLogger(__name__)

# 파일명에 허용하지 않는 문자를 '_'로 치환합니다.
_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")
HASH_PREFIX_LENGTH = 16


def build_stored_name(content: bytes, original_name: str) -> str:
    """
    업로드된 파일의 저장 파일명을 결정합니다.

    - 파일 내용의 SHA-256 해시 앞부분과 정리된 원본 파일명을 조합합니다.
    - 같은 내용과 같은 이름은 항상 같은 파일명이 되고, 내용이 다르면 충돌하지 않습니다.

    Args:
        content (bytes): 업로드된 파일의 바이트 내용
        original_name (str): 클라이언트가 보낸 원본 파일명

    Returns:
        str: 저장에 사용할 파일명 (예: "3f1c0a9b2d7e4f60-profile.png")
    """
    digest = hashlib.sha256(content).hexdigest()[:HASH_PREFIX_LENGTH]
    # 경로 구분자를 제거해 디렉토리 탈출을 막습니다.
    base_name = Path(original_name.replace("\\", "/")).name
    safe_name = _UNSAFE_CHARS.sub("_", base_name).strip("._") or "upload"
    return f"{digest}-{safe_name}"


async def save_upload(
    content: bytes,
    original_name: str,
    upload_dir: Union[str, Path],
    url_prefix: str = "/uploads",
) -> str:
    """
    파일 내용을 업로드 디렉토리에 저장하고, 웹에서 접근 가능한 경로를 반환합니다.

    Returns:
        str: 저장된 파일의 웹 접근 경로 (예: "/uploads/3f1c0a9b2d7e4f60-profile.png")
    """
    upload_directory = Path(upload_dir)
    upload_directory.mkdir(parents=True, exist_ok=True)

    stored_name = build_stored_name(content, original_name)
    save_path = upload_directory / stored_name

    async with aiofiles.open(save_path, "wb") as f:
        await f.write(content)

    web_path = f"{url_prefix.rstrip('/')}/{stored_name}"
    logger.info("Stored upload '%s' (%d bytes) as %s", original_name, len(content), web_path)
    return web_path


async def store_upload_file(
    upload_file: Optional[UploadFile],
    upload_dir: Union[str, Path],
    url_prefix: str = "/uploads",
) -> Optional[str]:
    """
    FastAPI UploadFile을 저장합니다. 파일이 전송되지 않았으면 None을 반환합니다.
    """
    if upload_file is None or not upload_file.filename:
        return None

    try:
        content = await upload_file.read()
    finally:
        await upload_file.close()

    return await save_upload(content, upload_file.filename, upload_dir, url_prefix)
