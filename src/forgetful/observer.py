# This file is part of Forgetful.
#
# Copyright the Forgetful Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Scope-bound observation of hashable items.

An :class:`Observer` remembers an item only for as long as the
:class:`Observation` it handed out for that item is live. This makes it
easy to notice when a recursive algorithm revisits something it is still in
the middle of processing, without having to pair every insertion into a
visited set with a removal:

.. code-block:: python

    seen = Observer()

    def walk(node):
        observation = seen.notice(node)
        if observation is None:
            raise CycleDetected(node)
        with observation:
            for child in node.children:
                walk(child)

Observers are not thread-safe.
"""

import warnings
import weakref
from typing import Generic, Hashable, Optional, TypeVar

from forgetful._settings import Verbosity, settings as Settings
from forgetful.errors import InvalidArgument, InvalidState, UnreleasedObservation
from forgetful.internal.validation import check_hashable, check_type
from forgetful.reporting import base_report
from forgetful.utils.conventions import UniqueIdentifier

__all__ = ["Observer", "Observation", "create_observer"]

T = TypeVar("T", bound=Hashable)

_issued_by_observer = UniqueIdentifier("issued_by_observer")


def _forget(recorder, item, settings):
    try:
        recorder.remove(item)
    except KeyError:
        raise InvalidState(
            "Observed item %r could not be found when its observation was "
            "released.  Its hash or equality must have changed while it was "
            "being observed." % (item,)
        ) from None
    base_report(
        settings.verbosity,
        lambda: "Released observation of %r" % (item,),
        at_least=Verbosity.debug,
    )


def _collected(recorder, item, settings):
    # The warning may be escalated to an error, so the item goes first.
    _forget(recorder, item, settings)
    if settings.warn_unreleased:
        warnings.warn(
            "Observation of %r was garbage collected without being released.  "
            "Use it as a context manager or call its release() method."
            % (item,),
            UnreleasedObservation,
        )


class Observation(Generic[T]):
    """A live observation of a single item.

    While an observation is live, its :class:`Observer` refuses to notice
    the same item again.  The observation ends, and the item is forgotten,
    exactly once: when a ``with`` block using it exits (normally or through
    an exception), when :meth:`release` is called, or failing both when the
    observation is garbage collected.

    Observations can only be obtained from :meth:`Observer.notice` and
    cannot be copied or pickled.

    The item must keep the same hash and equality while it is observed.
    If it changes, releasing the observation raises InvalidState and the
    stale entry stays in the Observer for good, so that item can never be
    noticed again by it.  When the release was triggered by garbage
    collection, the InvalidState is reported as an unraisable exception
    rather than propagated.
    """

    def __init__(self, recorder, item, settings, *, _issuer=None):
        if _issuer is not _issued_by_observer:
            raise InvalidArgument(
                "Observation objects cannot be constructed directly.  "
                "Use Observer.notice(item) instead."
            )
        recorder.add(item)
        self._item = item
        # The finalizer keeps the recorder alive after the Observer is gone.
        self._finalizer = weakref.finalize(self, _collected, recorder, item, settings)
        self._finalizer.atexit = False

    def release(self):
        """End this observation now, so that its item may be noticed again.

        Raises InvalidState if the observation has already been released.
        """
        detached = self._finalizer.detach()
        if detached is None:
            raise InvalidState("%r has already been released." % (self,))
        _, _, args, _ = detached
        _forget(*args)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, tb):
        # An early release() inside the block is allowed.
        if self._finalizer.alive:
            self.release()

    def __reduce__(self):
        raise TypeError(
            "Observation objects cannot be copied or pickled, as two "
            "copies would both try to end the same observation."
        )

    def __repr__(self):
        return "Observation(%r)" % (self._item,)


class Observer(Generic[T]):
    """Observer records observations of hashable items, and reports whether
    an item is currently being observed.

    This is useful when implementing an algorithm that must ensure items
    are encountered only once along any path, such as cycle detection in a
    graph traversal.

    Observations are scoped: when they are released, the Observer forgets
    about them.

    If ``settings`` is None, each operation uses whatever
    ``forgetful.settings.default`` is at the time.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        if settings is not None:
            check_type(Settings, settings, "settings")
        self._settings = settings
        self._recorder = set()

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            return Settings.default
        return self._settings

    def notice(self, item: T) -> Optional[Observation[T]]:
        """Begin observing ``item``.

        Returns a new :class:`Observation` if ``item`` is not currently
        being observed, or None if it is.  A None result changes nothing,
        and means e.g. that a cycle has been found.

        Raises InvalidArgument if ``item`` is not hashable.
        """
        check_hashable(item, "item")
        settings = self.settings
        if item in self._recorder:
            base_report(
                settings.verbosity,
                lambda: "Already observing %r" % (item,),
                at_least=Verbosity.debug,
            )
            return None
        observation = Observation(
            self._recorder, item, settings, _issuer=_issued_by_observer
        )
        base_report(
            settings.verbosity,
            lambda: "Noticed %r" % (item,),
            at_least=Verbosity.debug,
        )
        return observation

    def __len__(self):
        return len(self._recorder)

    def __contains__(self, item):
        return item in self._recorder

    def __repr__(self):
        if not self._recorder:
            return "Observer()"
        return "Observer({%s})" % (", ".join(map(repr, self._recorder)),)


def create_observer(settings: Optional[Settings] = None) -> Observer:
    """Return a new, empty :class:`Observer`."""
    return Observer(settings)
