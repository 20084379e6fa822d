# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Seed color extraction from images.

Samples a fixed number of pixels regardless of image size, buckets them
into a coarse RGB histogram, and assigns the most frequent colorful
buckets to the brand roles:

- primary: the most frequent colorful bucket
- accent: the candidate that best combines saturation and hue distance
  from the primary
- secondary: the remaining candidate, provided it is at least 20° of
  hue away from the primary; otherwise left unresolved for inference

Extraction is all-or-nothing. It either returns a complete result or
raises ExtractionError; it never returns partial or degraded output.
"""

from __future__ import annotations

import io
import threading
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO, Optional, Union

import numpy as np
from loguru import logger
from numpy.typing import NDArray

from tonekit.errors import ExtractionCancelled, ExtractionError
from tonekit.engine.colorspace import hex_to_rgb, hue_distance, rgb_to_hex


ImageInput = Union[str, Path, bytes, BinaryIO, NDArray[np.uint8], Any]


@dataclass(frozen=True)
class ExtractionConfig:
    """Configuration for seed extraction."""

    # Approximate number of pixels sampled, independent of resolution
    sample_target: int = 1000

    # Pixels with alpha below this are ignored
    alpha_threshold: int = 128

    # Histogram bucket width per RGB channel
    quantize_step: int = 32

    # Colorful bucket: channel spread, max and min bounds (0-255)
    min_spread: int = 10
    min_max_channel: int = 20
    max_min_channel: int = 250

    # Minimum hue distance between primary and secondary (degrees)
    min_secondary_separation: float = 20.0

    # Weight of hue distance in the accent score (at 180° apart)
    accent_hue_weight: float = 200.0

    # Used when an image yields no candidates at all
    default_color: str = "#3b82f6"

    # How many sampled pixels between cancellation checks
    cancel_check_interval: int = 256


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    """
    Brand seed candidates found in an image.

    Attributes:
        primary: Most frequent colorful color
        secondary: Hue-separated candidate, or None when no candidate is far
            enough from the primary (left for role inference)
        accent: Best contrast candidate against the primary
        candidates: The (up to three, padded) candidates considered
        samples: Number of opaque pixels that were sampled
    """
    primary: str
    secondary: Optional[str]
    accent: str
    candidates: tuple[str, ...] = ()
    samples: int = 0

    def to_dict(self) -> dict:
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "accent": self.accent,
        }


# =============================================================================
# Public API
# =============================================================================


def extract_seed_colors(
    image: ImageInput,
    *,
    config: Optional[ExtractionConfig] = None,
    cancel_event: Optional[threading.Event] = None,
) -> ExtractionResult:
    """
    Extract primary/secondary/accent seed candidates from an image.

    Args:
        image: One of:
            - Path to an image file (str or Path), decoded with Pillow
            - Encoded image bytes or a binary file object (e.g. an upload)
            - A Pillow image
            - NumPy uint8 array of shape (H, W, 4) RGBA or (H, W, 3) RGB
              (treated as fully opaque)
        config: Sampling and assignment settings (defaults if None)
        cancel_event: When set during sampling, extraction stops with
            ExtractionCancelled instead of returning a result.

    Returns:
        ExtractionResult

    Raises:
        ExtractionError: the image could not be decoded or has no opaque
            pixels among the samples
        ExtractionCancelled: ``cancel_event`` was set
    """
    config = config or ExtractionConfig()
    rgba = _load_rgba(image)

    histogram, samples = sample_histogram(rgba, config, cancel_event)
    if samples == 0:
        raise ExtractionError("Image has no opaque pixels to sample")

    ranked = [rgb_to_hex(*key) for key, _ in histogram.most_common()]
    candidates = pick_candidates(ranked, config)
    primary, secondary, accent = assign_roles(candidates, config)

    logger.debug(
        "Extracted {} from {} samples ({} buckets): primary={} secondary={} accent={}",
        candidates, samples, len(histogram), primary, secondary, accent,
    )
    return ExtractionResult(
        primary=primary,
        secondary=secondary,
        accent=accent,
        candidates=tuple(candidates),
        samples=samples,
    )


# =============================================================================
# Sampling
# =============================================================================


def quantize_channel(value: int, step: int = 32) -> int:
    """Round a channel to the nearest multiple of ``step`` (half up), max 255."""
    return min(255, int(np.floor(value / step + 0.5)) * step)


def sample_histogram(
    rgba: NDArray[np.uint8],
    config: Optional[ExtractionConfig] = None,
    cancel_event: Optional[threading.Event] = None,
) -> tuple[Counter, int]:
    """
    Build a quantized color histogram from evenly strided pixels.

    Pixels are visited in row-major order at indices 0, stride, 2·stride…
    with stride = max(1, pixel_count // sample_target).

    Returns:
        (histogram keyed by quantized (r, g, b), number of opaque samples).
        Counter order is first-seen order, so frequency ties keep it.
    """
    config = config or ExtractionConfig()
    flat = rgba.reshape(-1, 4)
    stride = max(1, len(flat) // config.sample_target)
    sampled = flat[::stride]

    histogram: Counter = Counter()
    samples = 0
    for i, (r, g, b, a) in enumerate(sampled.tolist()):
        if cancel_event is not None and i % config.cancel_check_interval == 0:
            if cancel_event.is_set():
                raise ExtractionCancelled("Extraction cancelled")
        if a < config.alpha_threshold:
            continue
        key = (
            quantize_channel(r, config.quantize_step),
            quantize_channel(g, config.quantize_step),
            quantize_channel(b, config.quantize_step),
        )
        histogram[key] += 1
        samples += 1

    if cancel_event is not None and cancel_event.is_set():
        raise ExtractionCancelled("Extraction cancelled")
    return histogram, samples


# =============================================================================
# Candidate selection and role assignment
# =============================================================================


def rgb_hue_chroma(value: str) -> tuple[int, int]:
    """
    Hue (integer degrees on the RGB hex wheel) and chroma (max - min, 0-255).

    Gray has chroma 0 and hue 0.
    """
    r, g, b = hex_to_rgb(value)
    high, low = max(r, g, b), min(r, g, b)
    chroma = high - low
    if chroma == 0:
        return 0, 0
    if high == r:
        h = ((g - b) / chroma) % 6
    elif high == g:
        h = (b - r) / chroma + 2
    else:
        h = (r - g) / chroma + 4
    hue = int(np.floor(h * 60 + 0.5))
    if hue < 0:
        hue += 360
    return hue % 360, chroma


def is_colorful(value: str, config: Optional[ExtractionConfig] = None) -> bool:
    """Not grayish, not near-black, not near-white."""
    config = config or ExtractionConfig()
    r, g, b = hex_to_rgb(value)
    high, low = max(r, g, b), min(r, g, b)
    return (
        high - low > config.min_spread
        and high > config.min_max_channel
        and low < config.max_min_channel
    )


def pick_candidates(
    ranked: list[str],
    config: Optional[ExtractionConfig] = None,
) -> list[str]:
    """
    Choose three candidates from frequency-ranked hex colors.

    Colorful colors are preferred; neutrals only fill remaining slots.
    The list is padded with the first candidate (or the default color)
    so it always has exactly three entries.
    """
    config = config or ExtractionConfig()
    colorful = [c for c in ranked if is_colorful(c, config)]
    neutral = [c for c in ranked if not is_colorful(c, config)]

    candidates: list[str] = []
    for color in colorful + neutral:
        if len(candidates) >= 3:
            break
        if color not in candidates:
            candidates.append(color)

    while len(candidates) < 3:
        candidates.append(candidates[0] if candidates else config.default_color)
    return candidates


def accent_score(
    primary: str,
    candidate: str,
    config: Optional[ExtractionConfig] = None,
) -> float:
    """Chroma plus hue distance from primary, scaled to 0-200 at 180°."""
    config = config or ExtractionConfig()
    p_hue, _ = rgb_hue_chroma(primary)
    c_hue, c_chroma = rgb_hue_chroma(candidate)
    return c_chroma + config.accent_hue_weight * hue_distance(p_hue, c_hue) / 180.0


def assign_roles(
    candidates: list[str],
    config: Optional[ExtractionConfig] = None,
) -> tuple[str, Optional[str], str]:
    """
    Assign candidates to (primary, secondary, accent).

    Secondary is None when no candidate is both distinct from primary and
    accent and at least ``min_secondary_separation`` degrees from primary.
    """
    config = config or ExtractionConfig()
    if not candidates:
        raise ExtractionError("No candidate colors to assign")

    primary = candidates[0]
    # Stable sort: equal scores keep frequency order
    rest = sorted(
        candidates[1:],
        key=lambda c: accent_score(primary, c, config),
        reverse=True,
    )
    if not rest:
        return primary, None, primary

    accent = rest[0]
    secondary: Optional[str] = rest[1] if len(rest) > 1 else rest[0]

    p_hue, _ = rgb_hue_chroma(primary)

    def separation(color: str) -> float:
        return hue_distance(p_hue, rgb_hue_chroma(color)[0])

    if separation(secondary) < config.min_secondary_separation:
        secondary = next(
            (
                c for c in candidates
                if separation(c) >= config.min_secondary_separation
                and c != accent
                and c != primary
            ),
            None,
        )
    return primary, secondary, accent


# =============================================================================
# Image loading
# =============================================================================


def _load_rgba(image: ImageInput) -> NDArray[np.uint8]:
    """
    Load an image from file, encoded bytes, Pillow image, or array as
    (H, W, 4) uint8 RGBA.

    Applies ICC profile conversion to sRGB if a decoded file carries an
    embedded color profile. Any decode failure becomes ExtractionError.
    """
    if isinstance(image, np.ndarray):
        return _validate_array(image)

    if isinstance(image, (bytes, bytearray)):
        image = io.BytesIO(image)

    is_pil = hasattr(image, "convert") and hasattr(image, "mode")
    is_file = isinstance(image, (str, Path)) or hasattr(image, "read")
    if not (is_pil or is_file):
        raise TypeError(
            "Expected file path, encoded bytes, file object, Pillow image "
            f"or numpy array, got {type(image)}"
        )

    try:
        if is_pil:
            return _pil_to_rgba(image)

        try:
            from PIL import Image
        except ImportError as e:
            raise ImportError(
                "Pillow is required for image loading. "
                "Install with: pip install tonekit[image]"
            ) from e

        with Image.open(image) as img:
            img.load()
            return _pil_to_rgba(_to_srgb(img))
    except (OSError, ValueError) as e:
        source = image if isinstance(image, (str, Path)) else type(image).__name__
        logger.warning("Could not decode image {}: {}", source, e)
        raise ExtractionError(f"Could not decode image: {e}") from e


def _validate_array(pixels: NDArray) -> NDArray[np.uint8]:
    if pixels.dtype != np.uint8:
        raise ExtractionError(f"Expected uint8 array, got {pixels.dtype}")
    if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
        raise ExtractionError(
            f"Expected (H, W, 4) or (H, W, 3) array, got shape {pixels.shape}"
        )
    if pixels.shape[2] == 3:
        alpha = np.full(pixels.shape[:2] + (1,), 255, dtype=np.uint8)
        pixels = np.concatenate([pixels, alpha], axis=2)
    return pixels


def _to_srgb(img):
    """Convert an image with an embedded ICC profile to sRGB."""
    if 'icc_profile' not in img.info:
        return img

    from PIL import ImageCms

    try:
        embedded_profile = ImageCms.ImageCmsProfile(
            io.BytesIO(img.info['icc_profile'])
        )
        srgb_profile = ImageCms.createProfile('sRGB')
        mode = "RGBA" if "A" in img.getbands() else "RGB"
        if img.mode != mode:
            img = img.convert(mode)
        return ImageCms.profileToProfile(
            img, embedded_profile, srgb_profile, outputMode=mode
        )
    except (OSError, ImageCms.PyCMSError) as e:
        # Profile could not be applied; fall back to the raw pixel values
        logger.debug("ICC conversion skipped: {}", e)
        return img


def _pil_to_rgba(img) -> NDArray[np.uint8]:
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    return np.array(img, dtype=np.uint8)
