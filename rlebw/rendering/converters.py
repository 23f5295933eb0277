from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Set, Union

from PIL import Image, ImageOps

from .. import pbm
from ..errors import ImageIOError
from ..image.store import BWImage
from ..settings import DEFAULT_DITHER, DEFAULT_THRESHOLD_BIAS
from .renderer import bw_to_image, image_to_bw

logger = logging.getLogger(__name__)

PBM_EXTENSIONS: Set[str] = {".pbm"}
RASTER_EXTENSIONS: Set[str] = {".png", ".jpg", ".jpeg", ".gif", ".bmp", ".tif", ".tiff", ".webp"}
SUPPORTED_EXTENSIONS: Set[str] = PBM_EXTENSIONS | RASTER_EXTENSIONS

PathLike = Union[str, Path]


def _extension(path: PathLike) -> str:
    return os.path.splitext(str(path))[1].lower()


def _normalize_image(img: Image.Image) -> Image.Image:
    if img.mode not in ("RGB", "L", "1"):
        return img.convert("RGB")
    return img


def _resize_to_width(img: Image.Image, width: int) -> Image.Image:
    if img.width == width:
        return img
    ratio = width / float(img.width)
    height = max(1, int(img.height * ratio))
    return img.resize((width, height), Image.LANCZOS)


def load_raster(path: PathLike, width: Optional[int] = None) -> Image.Image:
    """Open a Pillow-readable file, honoring EXIF orientation."""
    ext = _extension(path)
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
    try:
        with Image.open(path) as img:
            img = ImageOps.exif_transpose(img)
            img = img.copy()
    except OSError as exc:
        raise ImageIOError(f"Cannot read {path}: {exc}") from exc
    img = _normalize_image(img)
    if width is not None:
        if width <= 0:
            raise ValueError("Width must be greater than zero")
        img = _resize_to_width(img, width)
    return img


def load_bw(
    path: PathLike,
    width: Optional[int] = None,
    dither: bool = DEFAULT_DITHER,
    threshold_bias: int = DEFAULT_THRESHOLD_BIAS,
) -> BWImage:
    """Load a PBM file with the native codec or any other raster through Pillow."""
    if _extension(path) in PBM_EXTENSIONS and width is None:
        return pbm.load(path)
    img = load_raster(path, width)
    bw = image_to_bw(img, dither=dither, threshold_bias=threshold_bias)
    logger.debug("Converted %s to a %dx%d BW image", path, bw.width, bw.height)
    return bw


def export(bw: BWImage, path: PathLike) -> None:
    """Write a BW image in the format implied by the file extension."""
    ext = _extension(path)
    if ext in PBM_EXTENSIONS:
        pbm.save(bw, path)
        return
    if ext not in RASTER_EXTENSIONS:
        raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
    img = bw_to_image(bw)
    if ext in (".jpg", ".jpeg"):
        img = img.convert("L")
    try:
        img.save(path)
    except OSError as exc:
        raise ImageIOError(f"Cannot write {path}: {exc}") from exc
