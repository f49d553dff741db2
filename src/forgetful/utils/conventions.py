# This file is part of Forgetful.
#
# Copyright the Forgetful Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

# Instances of these objects are used as singletons which serve as
# identifiers in various places, where None is a meaningful value.


class UniqueIdentifier:
    def __init__(self, identifier):
        self.identifier = identifier

    def __repr__(self):
        return self.identifier


not_set = UniqueIdentifier("not_set")
