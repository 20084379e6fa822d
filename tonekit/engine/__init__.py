# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Color engine for Tonekit.

Deterministic color math: conversion, tonal scales, role inference,
contrast correction, image seed extraction, and edit propagation.
"""

from tonekit.engine.contrast import ContrastConfig, auto_fix_color, correct_palette, correct_scale
from tonekit.engine.edit import EditConfig, EditKind, EditOutcome, EditPropagationController
from tonekit.engine.extract import ExtractionConfig, ExtractionResult, extract_seed_colors
from tonekit.engine.inference import InferredSeeds, complete_seed_set, infer_missing_roles
from tonekit.engine.pipeline import build_palette, generate_palette, palette_from_image
from tonekit.engine.scale import ScaleProfile, generate_neutral_scale, generate_scale

__all__ = [
    # Pipeline
    "generate_palette",
    "build_palette",
    "palette_from_image",
    # Components
    "generate_scale",
    "generate_neutral_scale",
    "ScaleProfile",
    "infer_missing_roles",
    "complete_seed_set",
    "InferredSeeds",
    "auto_fix_color",
    "correct_scale",
    "correct_palette",
    "ContrastConfig",
    "extract_seed_colors",
    "ExtractionResult",
    "ExtractionConfig",
    "EditPropagationController",
    "EditOutcome",
    "EditKind",
    "EditConfig",
]
