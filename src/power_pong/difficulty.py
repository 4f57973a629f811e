"""
CPU difficulty presets, keyed by the level picked on the start menu.
"""

from __future__ import annotations

from power_pong.controllers.cpu import CpuConfig

DIFFICULTY_LABELS = {
    1: "easy",
    2: "normal",
    3: "hard",
}

DIFFICULTY_PRESETS: dict[int, CpuConfig] = {
    1: CpuConfig(deviation_scale=90.0),
    2: CpuConfig(deviation_scale=45.0),
    3: CpuConfig(deviation_scale=30.0),
}

DEFAULT_DIFFICULTY = 2


def cpu_config_for(difficulty: int) -> CpuConfig:
    """
    Preset for ``difficulty``; unknown levels play as ``normal``.

    :param difficulty: Level 1 to 3.
    :type difficulty: int

    :return: CPU settings.
    :rtype: CpuConfig
    """
    return DIFFICULTY_PRESETS.get(
        difficulty, DIFFICULTY_PRESETS[DEFAULT_DIFFICULTY]
    )
