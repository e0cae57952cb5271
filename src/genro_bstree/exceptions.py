# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BstTree exceptions."""

from __future__ import annotations


class BstTreeError(Exception):
    """Base exception for BstTree errors."""

    pass


class IteratorExhaustedError(BstTreeError, LookupError):
    """Raised when the current value of an exhausted iterator is requested."""

    pass


class TreeModifiedError(BstTreeError, RuntimeError):
    """Raised when a tree is modified while an iterator over it is live."""

    pass
