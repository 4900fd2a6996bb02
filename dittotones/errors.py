# Copyright (c) 2026 DittoTones
# SPDX-License-Identifier: MIT

"""Exception types raised by DittoTones."""


class ConfigurationError(ValueError):
    """The reference ramp set is empty or its ramps disagree on shade keys."""


class InvalidColorError(ValueError):
    """An input could not be resolved to an OKLCH color."""
