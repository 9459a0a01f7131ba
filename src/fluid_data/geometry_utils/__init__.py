# ------------------------------------------------------------------------------
#  fluid-data
#  Copyright (c) 2025 Fabio Oddi
#
#  This file is part of fluid-data, released under the BSD 3-Clause License.
#  You may use, modify, and redistribute this file according to the terms of the
#  license. Attribution is required if this code is used in other works.
# ------------------------------------------------------------------------------

"""Geometric primitives shared by the simulation code."""

from .vector3D import DEFAULT_TOLERANCE, Vector3, Vector3D, ZeroLengthVectorError  # noqa: F401
