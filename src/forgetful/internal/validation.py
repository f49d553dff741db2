# This file is part of Forgetful.
#
# Copyright the Forgetful Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from forgetful.errors import InvalidArgument


def check_type(typ, arg, name=""):
    if name:
        name += "="
    if not isinstance(arg, typ):
        if isinstance(typ, type):
            typ_string = typ.__name__
        else:
            typ_string = "one of %s" % (", ".join(t.__name__ for t in typ))
        raise InvalidArgument(
            "Expected %s but got %s%r (type=%s)"
            % (typ_string, name, arg, type(arg).__name__)
        )


def check_hashable(arg, name=""):
    """Checks that arg can be stored in a set.

    Otherwise raises InvalidArgument.
    """
    if name:
        name += "="
    try:
        hash(arg)
    except TypeError:
        raise InvalidArgument(
            "Expected a hashable value but got %s%r (type=%s)"
            % (name, arg, type(arg).__name__)
        ) from None
