# This file is part of Forgetful.
#
# Copyright the Forgetful Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.


class ForgetfulException(Exception):
    """Generic parent class for exceptions thrown by Forgetful."""


class InvalidArgument(ForgetfulException, TypeError):
    """Used to indicate that the arguments to a Forgetful function were in
    some manner incorrect."""


class InvalidState(ForgetfulException):
    """The system is not in a state where you were allowed to do that.

    Raised when an observation is released twice, or when an observed item
    can no longer be found because its hash or equality changed while it was
    being observed.
    """


class ForgetfulWarning(ForgetfulException, Warning):
    """A generic warning issued by Forgetful."""


class UnreleasedObservation(ForgetfulWarning, ResourceWarning):
    """An observation was garbage collected before anything released it.

    The observed item has still been forgotten, but relying on the garbage
    collector makes the moment it happens implementation dependent. Use the
    observation as a context manager, or call its release method.
    """
