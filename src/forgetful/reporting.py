# This file is part of Forgetful.
#
# Copyright the Forgetful Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import inspect

from forgetful._settings import Verbosity, settings
from forgetful.utils.dynamicvariables import DynamicVariable


def silent(value):
    pass


def default(value):
    try:
        print(value)
    except UnicodeEncodeError:
        print(value.encode("unicode_escape").decode("ascii"))


reporter = DynamicVariable(default)


def current_reporter():
    return reporter.value


def with_reporter(new_reporter):
    return reporter.with_value(new_reporter)


def current_verbosity():
    return settings.default.verbosity


def to_text(textish):
    if inspect.isfunction(textish):
        textish = textish()
    if isinstance(textish, bytes):
        textish = textish.decode()
    return textish


def base_report(verbosity, text, *, at_least=Verbosity.normal):
    if verbosity >= at_least:
        current_reporter()(to_text(text))


def verbose_report(text):
    base_report(current_verbosity(), text, at_least=Verbosity.verbose)


def debug_report(text):
    base_report(current_verbosity(), text, at_least=Verbosity.debug)


def report(text):
    base_report(current_verbosity(), text)
