"""Verification options value objects.

Purpose
-------
Hold the knobs that shape a single verification call: how strictly the
captured exception's type is matched, how its message is compared, and which
message is expected. The module belongs to the domain layer and performs no
I/O.

Contents
--------
* :class:`InheritanceMode` – accept subtypes (``INHERITS``) or exact type only.
* :class:`MessageCompareMode` – skip, case-insensitive equality, or
  case-sensitive substring comparison.
* :class:`VerifyOptions` – immutable bundle with the message-mode defaulting
  rule applied at construction.
* :func:`coerce_inheritance_mode` / :func:`coerce_message_mode` – accept enum
  members or their names and reject everything else.
* :data:`DEFAULT_OPTIONS` – options used when a caller supplies none.

System Role
-----------
The composition root and the CLI build :class:`VerifyOptions`; the application
layer reads it. Unrecognised values surface as
:class:`~lib_exception_assert.domain.errors.InvalidOptionError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import InvalidOptionError


class InheritanceMode(Enum):
    """How the captured exception's runtime type is matched.

    ``EXACT`` rejects subclasses of the expected type, ``INHERITS`` accepts
    them.
    """

    EXACT = "exact"
    INHERITS = "inherits"


class MessageCompareMode(Enum):
    """How the captured exception's message is compared.

    ``NONE`` skips the check, ``EXACT`` compares the whole message ignoring
    case, ``CONTAINS`` looks for a case-sensitive substring.
    """

    NONE = "none"
    EXACT = "exact"
    CONTAINS = "contains"


def coerce_inheritance_mode(value: InheritanceMode | str) -> InheritanceMode:
    """Return *value* as an :class:`InheritanceMode` member.

    Examples
    --------
    >>> coerce_inheritance_mode("Exact")
    <InheritanceMode.EXACT: 'exact'>
    >>> coerce_inheritance_mode(InheritanceMode.INHERITS)
    <InheritanceMode.INHERITS: 'inherits'>
    """

    return _coerce(InheritanceMode, value, "inheritance_mode")


def coerce_message_mode(value: MessageCompareMode | str) -> MessageCompareMode:
    """Return *value* as a :class:`MessageCompareMode` member.

    Examples
    --------
    >>> coerce_message_mode("contains")
    <MessageCompareMode.CONTAINS: 'contains'>
    """

    return _coerce(MessageCompareMode, value, "message_mode")


def _coerce(enum_type: type[Enum], value: object, parameter: str):
    if isinstance(value, enum_type):
        return value
    if isinstance(value, str):
        lookup = {member.value: member for member in enum_type}
        member = lookup.get(value.strip().lower())
        if member is not None:
            return member
    raise InvalidOptionError(parameter, value)


@dataclass(frozen=True, slots=True)
class VerifyOptions:
    """Immutable configuration for one verification call.

    Why
    ----
    Replaces a family of call-forwarding overloads with one structure whose
    fields carry the defaults.

    What
    ----
    ``message_mode`` left as ``None`` resolves to ``EXACT`` when an
    ``expected_message`` is given and to ``NONE`` otherwise. String modes are
    coerced to enum members; unknown values raise
    :class:`InvalidOptionError`.

    Parameters
    ----------
    expected_message:
        Message the captured exception should carry. ``None`` or ``""`` disables
        the message check regardless of ``message_mode``.
    message_mode:
        Comparison strategy, or ``None`` to derive it from ``expected_message``.
    inheritance_mode:
        Type strictness, ``INHERITS`` by default.

    Examples
    --------
    >>> VerifyOptions().message_mode
    <MessageCompareMode.NONE: 'none'>
    >>> VerifyOptions(expected_message="boom").message_mode
    <MessageCompareMode.EXACT: 'exact'>
    >>> VerifyOptions(expected_message="boom", message_mode="contains").message_mode
    <MessageCompareMode.CONTAINS: 'contains'>
    """

    expected_message: str | None = None
    message_mode: MessageCompareMode | None = None
    inheritance_mode: InheritanceMode = InheritanceMode.INHERITS

    def __post_init__(self) -> None:
        if self.message_mode is None:
            derived = MessageCompareMode.EXACT if self.expected_message is not None else MessageCompareMode.NONE
            object.__setattr__(self, "message_mode", derived)
        else:
            object.__setattr__(self, "message_mode", coerce_message_mode(self.message_mode))
        object.__setattr__(self, "inheritance_mode", coerce_inheritance_mode(self.inheritance_mode))

    @property
    def checks_message(self) -> bool:
        """Return ``True`` when a non-empty message expectation is present."""

        return bool(self.expected_message)


DEFAULT_OPTIONS = VerifyOptions()
