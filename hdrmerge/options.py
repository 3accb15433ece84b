"""Options controlling how a stack is loaded and how the result is saved."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class LoadOptions:
    file_names: list[str] = field(default_factory=list)
    align: bool = True
    crop: bool = True
    use_custom_wl: bool = False
    custom_wl: int = 16383
    batch: bool = False
    batch_gap: float = 2.0
    with_singles: bool = False


@dataclass
class SaveOptions:
    bps: int = 16
    preview_size: int = 0
    file_name: str = ""
    save_mask: bool = False
    mask_file_name: str = ""
    feather_radius: int = 3