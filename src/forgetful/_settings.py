# This file is part of Forgetful.
#
# Copyright the Forgetful Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""A module controlling settings for Forgetful.

Either an explicit settings object can be passed to an
:class:`~forgetful.Observer`, or the default object on this module can be
changed by loading a profile.
"""

import contextlib
from enum import IntEnum, unique
from typing import Any, Dict

import attr

from forgetful.errors import InvalidArgument, InvalidState
from forgetful.internal.validation import check_type
from forgetful.utils.conventions import not_set
from forgetful.utils.dynamicvariables import DynamicVariable

__all__ = ["settings", "Verbosity", "local_settings"]

all_settings = {}  # type: Dict[str, Setting]


class settingsProperty:
    def __init__(self, name, show_default):
        self.name = name
        self.show_default = show_default

    def __get__(self, obj, type=None):
        if obj is None:
            return self
        try:
            return obj.__dict__[self.name]
        except KeyError:
            raise AttributeError(self.name) from None

    def __set__(self, obj, value):
        obj.__dict__[self.name] = value

    def __delete__(self, obj):
        raise AttributeError("Cannot delete attribute %s" % (self.name,))

    @property
    def __doc__(self):
        description = all_settings[self.name].description
        default = (
            repr(getattr(settings.default, self.name))
            if self.show_default
            else "(dynamically calculated)"
        )
        return "%s\n\ndefault value: ``%s``" % (description, default)


default_variable = DynamicVariable(None)


class settingsMeta(type):
    @property
    def default(self):
        v = default_variable.value
        if v is not None:
            return v
        if hasattr(settings, "_current_profile"):
            settings.load_profile(settings._current_profile)
            assert default_variable.value is not None
        return default_variable.value

    def _assign_default_internal(self, value):
        default_variable.value = value

    def __setattr__(self, name, value):
        if name == "default":
            raise AttributeError(
                "Cannot assign to the property settings.default - "
                "consider using settings.load_profile instead."
            )
        elif not (isinstance(value, settingsProperty) or name.startswith("_")):
            raise AttributeError(
                "Cannot assign forgetful.settings.%s=%r - the settings "
                "class is immutable.  You can change the global default "
                "settings with settings.load_profile, or pass settings(...) "
                "to an Observer instead." % (name, value)
            )
        return type.__setattr__(self, name, value)


class settings(metaclass=settingsMeta):
    """A settings object controls how an Observer reports what it is doing
    and how it treats observations that were never explicitly released.

    Default values are picked up from the settings.default object and
    changes made there will be picked up in newly created settings.
    """

    __definitions_are_locked = False
    _profiles = {}  # type: dict
    __module__ = "forgetful"

    def __getattr__(self, name):
        if name in all_settings:
            return all_settings[name].default
        else:
            raise AttributeError("settings has no attribute %s" % (name,))

    def __init__(self, parent: "settings" = None, **kwargs: Any) -> None:
        if parent is not None and not isinstance(parent, settings):
            raise InvalidArgument(
                "Invalid argument: parent=%r is not a settings instance" % (parent,)
            )
        self._construction_complete = False
        defaults = parent or settings.default
        for setting in all_settings.values():
            if kwargs.get(setting.name, not_set) is not_set:
                if defaults is not None:
                    kwargs[setting.name] = getattr(defaults, setting.name)
                else:
                    kwargs[setting.name] = setting.default
            elif setting.validator:
                kwargs[setting.name] = setting.validator(kwargs[setting.name])
        for name, value in kwargs.items():
            if name not in all_settings:
                raise InvalidArgument(
                    "Invalid argument: %r is not a valid setting" % (name,)
                )
            setattr(self, name, value)
        self._construction_complete = True

    @classmethod
    def _define_setting(
        cls, name, description, default, options=None, validator=None, show_default=True
    ):
        """Add a new setting.

        - name is the name of the property that will be used to access the
          setting. This must be a valid python identifier.
        - description will appear in the property's docstring
        - default is the default value.
        """
        if settings.__definitions_are_locked:
            raise InvalidState(
                "settings have been locked and may no longer be defined."
            )
        if options is not None:
            options = tuple(options)
            assert default in options
        else:
            assert validator is not None

        all_settings[name] = Setting(
            name=name,
            description=description.strip(),
            default=default,
            options=options,
            validator=validator,
        )
        setattr(settings, name, settingsProperty(name, show_default))

    @classmethod
    def lock_further_definitions(cls):
        settings.__definitions_are_locked = True

    def __setattr__(self, name, value):
        if name == "_construction_complete":
            return object.__setattr__(self, name, value)
        elif name in all_settings:
            if self._construction_complete:
                raise AttributeError(
                    "settings objects are immutable and may not be assigned to"
                    " after construction."
                )
            setting = all_settings[name]
            if setting.options is not None and value not in setting.options:
                raise InvalidArgument(
                    "Invalid %s, %r. Valid options: %r"
                    % (name, value, setting.options)
                )
            return object.__setattr__(self, name, value)
        else:
            raise AttributeError("No such setting %s" % (name,))

    def __repr__(self):
        bits = ("%s=%r" % (name, getattr(self, name)) for name in all_settings)
        return "settings(%s)" % ", ".join(sorted(bits))

    def show_changed(self):
        bits = []
        for name, setting in all_settings.items():
            value = getattr(self, name)
            if value != setting.default:
                bits.append("%s=%r" % (name, value))
        return ", ".join(sorted(bits, key=len))

    @staticmethod
    def register_profile(name: str, parent: "settings" = None, **kwargs: Any) -> None:
        """Registers a collection of values to be used as a settings profile.

        Settings profiles can be loaded by name - for example, you might
        keep the 'default' profile for production and create a 'debug'
        profile that reports every notice and release.

        The arguments to this method are exactly as for
        :class:`~forgetful.settings`: optional ``parent`` settings, and
        keyword arguments for each setting that will be set differently to
        parent (or settings.default, if parent is None).
        """
        check_type(str, name, "name")
        settings._profiles[name] = settings(parent=parent, **kwargs)

    @staticmethod
    def get_profile(name: str) -> "settings":
        """Return the profile with the given name."""
        check_type(str, name, "name")
        try:
            return settings._profiles[name]
        except KeyError:
            raise InvalidArgument("Profile %r is not registered" % (name,)) from None

    @staticmethod
    def load_profile(name: str) -> None:
        """Loads in the settings defined in the profile provided.

        If the profile does not exist, InvalidArgument will be raised.
        Any setting not defined in the profile will be the library
        defined default for that setting.
        """
        check_type(str, name, "name")
        settings._current_profile = name
        settings._assign_default_internal(settings.get_profile(name))


@contextlib.contextmanager
def local_settings(s):
    check_type(settings, s, "s")
    with default_variable.with_value(s):
        yield s


@attr.s()
class Setting:
    name = attr.ib()
    description = attr.ib()
    default = attr.ib()
    options = attr.ib()
    validator = attr.ib()


@unique
class Verbosity(IntEnum):
    quiet = 0
    normal = 1
    verbose = 2
    debug = 3

    def __repr__(self):
        return "Verbosity.%s" % (self.name,)


settings._define_setting(
    "verbosity",
    options=tuple(Verbosity),
    default=Verbosity.normal,
    description="""
Control the verbosity level of Forgetful messages.  At ``Verbosity.debug``
every notice, refused notice and release is sent to the current reporter.
""",
)


settings._define_setting(
    "warn_unreleased",
    options=(True, False),
    default=True,
    description="""
If True, an observation that is garbage collected without having been
released emits an :class:`~forgetful.errors.UnreleasedObservation` warning.
The observed item is forgotten either way.  Turn this off if you
deliberately rely on reference counting to end observations.
""",
)

settings.lock_further_definitions()

settings.register_profile("default", settings())
settings.load_profile("default")
assert settings.default is not None
