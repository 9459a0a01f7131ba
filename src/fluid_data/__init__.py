# ------------------------------------------------------------------------------
#  fluid-data
#  Copyright (c) 2025 Fabio Oddi
#
#  This file is part of fluid-data, released under the BSD 3-Clause License.
#  You may use, modify, and redistribute this file according to the terms of the
#  license. Attribution is required if this code is used in other works.
# ------------------------------------------------------------------------------

"""Basic data types for the fluid dynamics simulation."""

from .config import Config  # noqa: F401
from .geometry_utils import DEFAULT_TOLERANCE, Vector3, Vector3D, ZeroLengthVectorError  # noqa: F401
from .logging_utils import configure_logging, get_logger  # noqa: F401

__version__ = "0.1.0"
