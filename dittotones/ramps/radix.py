# Copyright (c) 2026 DittoTones
# SPDX-License-Identifier: MIT

"""
Radix Colors light scales, steps 1 → 12, as sRGB hex.

Converted to OKLCH once when the ramp set is built.
"""

from __future__ import annotations

SHADES = tuple(str(step) for step in range(1, 13))

RADIX_HEX: dict[str, tuple[str, ...]] = {
    "gray": (
        "#fcfcfc", "#f9f9f9", "#f0f0f0", "#e8e8e8", "#e0e0e0", "#d9d9d9",
        "#cecece", "#bbbbbb", "#8d8d8d", "#838383", "#646464", "#202020",
    ),
    "mauve": (
        "#fdfcfd", "#faf9fb", "#f2eff3", "#eae7ec", "#e3dfe6", "#dbd8e0",
        "#d0cdd7", "#bcbac7", "#8e8c99", "#84828e", "#65636d", "#211f26",
    ),
    "slate": (
        "#fcfcfd", "#f9f9fb", "#f0f0f3", "#e8e8ec", "#e0e1e6", "#d9d9e0",
        "#cdced6", "#b9bbc6", "#8b8d98", "#80838d", "#60646c", "#1c2024",
    ),
    "sage": (
        "#fbfdfc", "#f7f9f8", "#eef1f0", "#e6e9e8", "#dfe2e0", "#d7dad9",
        "#cbcfcd", "#b8bcba", "#868e8b", "#7c8481", "#5f6563", "#1a211e",
    ),
    "olive": (
        "#fcfdfc", "#f8faf8", "#eff1ef", "#e7e9e7", "#dfe2df", "#d7dad7",
        "#cccfcc", "#b9bcb8", "#898e87", "#7f847d", "#60655f", "#1d211c",
    ),
    "sand": (
        "#fdfdfc", "#f9f9f8", "#f1f0ef", "#e9e8e6", "#e2e1de", "#dad9d6",
        "#cfceca", "#bcbbb5", "#8d8d86", "#82827c", "#63635e", "#21201c",
    ),
    "red": (
        "#fffcfc", "#fff7f7", "#feebec", "#ffdbdc", "#ffcdce", "#fdbdbe",
        "#f4a9aa", "#eb8e90", "#e5484d", "#dc3e42", "#ce2c31", "#641723",
    ),
    "crimson": (
        "#fffcfd", "#fef7f9", "#ffe9f0", "#fedce7", "#facedd", "#f3bed1",
        "#eaacc3", "#e093b2", "#e93d82", "#df3478", "#cb1d63", "#621639",
    ),
    "pink": (
        "#fffcfe", "#fef7fb", "#fee9f5", "#fbdcef", "#f6cee7", "#efbfdd",
        "#e7acd0", "#dd93c2", "#d6409f", "#cf3897", "#c2298a", "#651249",
    ),
    "purple": (
        "#fefcfe", "#fbf7fe", "#f7edfe", "#f2e2fc", "#ead5f9", "#e0c4f4",
        "#d1afec", "#be93e4", "#8e4ec6", "#8347b9", "#8145b5", "#402060",
    ),
    "violet": (
        "#fdfcfe", "#faf8ff", "#f4f0fe", "#ebe4ff", "#e1d9ff", "#d4cafe",
        "#c2b5f5", "#aa99ec", "#6e56cf", "#654dc4", "#6550b9", "#2f265f",
    ),
    "indigo": (
        "#fdfdfe", "#f7f9ff", "#edf2fe", "#e1e9ff", "#d2deff", "#c1d0ff",
        "#abbdf9", "#8da4ef", "#3e63dd", "#3358d4", "#3a5bc7", "#1f2d5c",
    ),
    "blue": (
        "#fbfdff", "#f4faff", "#e6f4fe", "#d5efff", "#c2e5ff", "#acd8fc",
        "#8ec8f6", "#5eb1ef", "#0090ff", "#0588f0", "#0d74ce", "#113264",
    ),
    "cyan": (
        "#fafdfe", "#f2fafb", "#def7f9", "#caf1f6", "#b5e9f0", "#9ddde7",
        "#7dcedc", "#3db9cf", "#00a2c7", "#0797b9", "#107d98", "#0d3c48",
    ),
    "teal": (
        "#fafefd", "#f3fbf9", "#e0f8f3", "#ccf3ea", "#b8eae0", "#a1ded2",
        "#83cdc1", "#53b9ab", "#12a594", "#0d9b8a", "#008573", "#0d3d38",
    ),
    "green": (
        "#fbfefc", "#f4fbf6", "#e6f6eb", "#d6f1df", "#c4e8d1", "#adddc0",
        "#8eceaa", "#5bb98b", "#30a46c", "#2b9a66", "#218358", "#193b2d",
    ),
    "orange": (
        "#fefcfb", "#fff7ed", "#ffefd6", "#ffdfb5", "#ffd19a", "#ffc182",
        "#f5ae73", "#ec9455", "#f76b15", "#ef5f00", "#cc4e00", "#582d1d",
    ),
    "amber": (
        "#fefdfb", "#fefbe9", "#fff7c2", "#ffee9c", "#fbe577", "#f3d673",
        "#e9c162", "#e2a336", "#ffc53d", "#ffba18", "#ab6400", "#4f3422",
    ),
    "yellow": (
        "#fdfdf9", "#fefce9", "#fffab8", "#fff394", "#ffe770", "#f3d768",
        "#e4c767", "#d5ae39", "#ffe629", "#ffdc00", "#9e6c00", "#473b1f",
    ),
}

NEUTRALS = ("gray", "mauve", "slate", "sage", "olive", "sand")
