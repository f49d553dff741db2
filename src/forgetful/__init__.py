# This file is part of Forgetful.
#
# Copyright the Forgetful Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Forgetful tracks which items are currently being observed, and forgets
each one as soon as the scope that noticed it is over.

It is mostly useful for detecting cycles in recursive algorithms.
"""

from forgetful._settings import Verbosity, settings
from forgetful.observer import Observation, Observer, create_observer
from forgetful.version import __version__, __version_info__

__all__ = [
    "Observation",
    "Observer",
    "Verbosity",
    "create_observer",
    "settings",
    "__version__",
    "__version_info__",
]
