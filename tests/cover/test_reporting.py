# This file is part of Forgetful.
#
# Copyright the Forgetful Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import pytest

from forgetful import Observer, Verbosity, reporting, settings
from forgetful._settings import local_settings

from tests.common.utils import capture_out


def test_debug_verbosity_reports_notice_and_release():
    observer = Observer(settings(verbosity=Verbosity.debug))
    with capture_out() as out:
        with observer.notice("foo"):
            assert observer.notice("foo") is None
    assert out.getvalue().splitlines() == [
        "Noticed 'foo'",
        "Already observing 'foo'",
        "Released observation of 'foo'",
    ]


@pytest.mark.parametrize(
    "verbosity", [Verbosity.quiet, Verbosity.normal, Verbosity.verbose]
)
def test_lower_verbosities_report_nothing(verbosity):
    observer = Observer(settings(verbosity=verbosity))
    with capture_out() as out:
        with observer.notice("foo"):
            assert observer.notice("foo") is None
    assert out.getvalue() == ""


def test_observer_follows_default_verbosity():
    observer = Observer()
    with local_settings(settings(verbosity=Verbosity.debug)):
        with capture_out() as out:
            with observer.notice(1):
                pass
    assert out.getvalue().splitlines() == ["Noticed 1", "Released observation of 1"]


def test_with_reporter_redirects_output():
    messages = []
    observer = Observer(settings(verbosity=Verbosity.debug))
    with reporting.with_reporter(messages.append):
        with observer.notice("foo"):
            pass
    assert messages == ["Noticed 'foo'", "Released observation of 'foo'"]


def test_silent_reporter_swallows_output():
    observer = Observer(settings(verbosity=Verbosity.debug))
    with capture_out() as out:
        with reporting.with_reporter(reporting.silent):
            with observer.notice("foo"):
                pass
    assert out.getvalue() == ""


def test_to_text_accepts_callables_and_bytes():
    assert reporting.to_text(lambda: "lazy") == "lazy"
    assert reporting.to_text(b"bytes") == "bytes"
    assert reporting.to_text("text") == "text"


@pytest.mark.parametrize(
    "verbosity, expected",
    [
        (Verbosity.quiet, []),
        (Verbosity.normal, ["report"]),
        (Verbosity.verbose, ["report", "verbose"]),
        (Verbosity.debug, ["report", "verbose", "debug"]),
    ],
)
def test_report_functions_follow_default_verbosity(verbosity, expected):
    messages = []
    with local_settings(settings(verbosity=verbosity)):
        with reporting.with_reporter(messages.append):
            reporting.report("report")
            reporting.verbose_report("verbose")
            reporting.debug_report("debug")
    assert messages == expected


def test_current_reporter_is_print_by_default():
    assert reporting.current_reporter() is reporting.default
