from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class CategoryConfig:
    weight_tolerance: float = 0.005
    recompute_workers: int = int(os.getenv("CHOMPION_RECOMPUTE_WORKERS", "4"))
    default_categories: tuple[str, ...] = ("Taste", "Value", "Presentation")


DEFAULT_CATEGORY_CONFIG = CategoryConfig()
