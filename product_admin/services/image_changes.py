"""
Image input of a product create/update request.

A client can describe the images it wants in three shapes: new files in a
multipart form, a JSON-encoded ``existingImages`` keep list, or (legacy, JSON
bodies only) a flat ``images`` URL array. They are collapsed here into one of
three variants so the product service never branches on content type:

* ``NoChange``     nothing image related was sent, stored images are kept
* ``NewImages``    uploaded files and/or a keep list replace the stored images
* ``ReplaceUrls``  a flat URL list replaces the stored images
"""
import json
import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from flask import request
from werkzeug.datastructures import FileStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoChange:
    pass


@dataclass(frozen=True)
class NewImages:
    files: Tuple[FileStorage, ...] = ()
    # None when the client sent no keep list at all
    keep: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True)
class ReplaceUrls:
    urls: Tuple[str, ...]


ImageChanges = Union[NoChange, NewImages, ReplaceUrls]


def parse_keep_list(raw) -> Optional[Tuple[str, ...]]:
    """Decode ``existingImages``: a JSON array or a JSON-encoded array string"""
    if raw is None or raw == "":
        return None

    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            logger.warning(f"Ignoring unparsable existingImages value: {raw!r}")
            return None

    if not isinstance(raw, list):
        logger.warning(f"Ignoring existingImages that is not a list: {raw!r}")
        return None

    return tuple(url.strip() for url in raw if isinstance(url, str) and url.strip())


def parse_image_changes(req=None) -> ImageChanges:
    """Build the image variant for the current (or given) request"""
    req = req or request

    if req.mimetype == "multipart/form-data":
        files = tuple(f for f in req.files.getlist("images") if f and f.filename)
        keep = parse_keep_list(req.form.get("existingImages"))
    else:
        body = req.get_json(silent=True)
        if not isinstance(body, dict):
            body = {}

        urls = body.get("images")
        if isinstance(urls, list) and urls:
            return ReplaceUrls(tuple(urls))

        files = ()
        keep = parse_keep_list(body.get("existingImages"))

    if not files and keep is None:
        return NoChange()
    return NewImages(files=files, keep=keep)
