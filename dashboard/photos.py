import base64
import logging
import mimetypes
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from .exceptions import ValidationFailure

logger = logging.getLogger(__name__)

MAX_WORKERS = 4


def is_image(blob):
    return isinstance(blob, str) and blob.startswith('data:image/')


def encode_photo(path):
    """Read one file into a ``data:`` URL"""
    path = Path(path)
    mime_type = mimetypes.guess_type(path.name)[0] or 'application/octet-stream'
    encoded = base64.b64encode(path.read_bytes()).decode('ascii')
    return f'data:{mime_type};base64,{encoded}'


def encode_photos(paths):
    """
    Read a batch of files concurrently. The result keeps the input order and
    is only returned once every read has finished; one failed read fails the
    whole batch.
    """
    paths = list(paths)
    if not paths:
        return []
    with ThreadPoolExecutor(max_workers=min(MAX_WORKERS, len(paths))) as pool:
        futures = [pool.submit(encode_photo, path) for path in paths]
        results, failures = [], []
        for path, future in zip(paths, futures):
            try:
                results.append(future.result())
            except OSError as exc:
                failures.append(f'{path}: {exc}')

    if failures:
        logger.warning(f"Could not read {len(failures)} of {len(paths)} photos")
        raise ValidationFailure('Could not read photos', {'photos': failures})
    return results
