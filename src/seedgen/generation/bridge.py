"""Bridge unifying native generators and foreign generator objects behind one contract.

A foreign generator is any object exposing ``generate(state)`` and
``generate_dummy(state)`` that returns bytes, typically supplied by a plugin.
Every call into such an object runs under one process-wide lock, receives the
state through a :class:`StateHandle` that is invalidated when the call
returns, and has its failures converted into :class:`ForeignCallError`.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, MutableMapping, Sequence
from contextlib import contextmanager
from enum import Enum
from typing import Any

from seedgen.core.exceptions import ForeignCallError
from seedgen.core.schema import BytesInput
from seedgen.generation.rand_generators import RandBytesGenerator, RandPrintablesGenerator
from seedgen.protocols.generator import HasRand

log = logging.getLogger(__name__)

# Serializes every foreign invocation, whichever bridge started it.
# Re-entrant so a foreign generator may itself call through a bridge.
_FOREIGN_LOCK = threading.RLock()


@contextmanager
def foreign_lock() -> Iterator[None]:
    """Hold the global foreign-execution lock for the duration of the block."""
    with _FOREIGN_LOCK:
        yield


class StateHandle:
    """Reference to the fuzzing state handed to foreign code for a single call.

    Attribute reads and writes are forwarded to the wrapped state. Once the
    call returns the handle is released and any further use raises
    :class:`ReferenceError`. Copying a handle yields the handle itself, so a
    copy is released together with the original.
    """

    __slots__ = ("_state",)

    def __init__(self, state: HasRand) -> None:
        object.__setattr__(self, "_state", state)

    @property
    def state(self) -> HasRand:
        if self._state is None:
            raise ReferenceError("state handle used after the generator call returned")
        return self._state

    @property
    def rand(self) -> Any:
        return self.state.rand

    @property
    def released(self) -> bool:
        return self._state is None

    def release(self) -> None:
        object.__setattr__(self, "_state", None)

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not found on the handle; an unset slot or a
        # dunder lookup must not fall through to the state.
        if name == "_state" or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)
        return getattr(self.state, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "_state":
            object.__setattr__(self, name, value)
        else:
            setattr(self.state, name, value)

    def __delattr__(self, name: str) -> None:
        delattr(self.state, name)

    def __copy__(self) -> StateHandle:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> StateHandle:
        return self

    def __repr__(self) -> str:
        return "StateHandle(<released>)" if self._state is None else f"StateHandle({self._state!r})"


def _extract_bytes(method: str, value: Any) -> bytes:
    """Read a foreign return value as bytes, or raise ForeignCallError."""
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, BytesInput):
        return value.as_bytes()
    if callable(getattr(value, "as_bytes", None)):
        try:
            data = value.as_bytes()
        except Exception as e:
            raise ForeignCallError(method, f"as_bytes() on returned value failed: {e}") from e
        if isinstance(data, (bytes, bytearray, memoryview)):
            return bytes(data)
    elif isinstance(value, Sequence) and not isinstance(value, str):
        try:
            return bytes(value)
        except (TypeError, ValueError) as e:
            raise ForeignCallError(method, f"returned sequence is not a list of byte values: {e}") from e
    raise ForeignCallError(method, f"cannot extract bytes from {type(value).__name__}")


class ForeignGenerator:
    """Generator backed by a foreign object's ``generate`` / ``generate_dummy`` members."""

    def __init__(self, obj: Any) -> None:
        self._obj = obj

    @property
    def inner(self) -> Any:
        return self._obj

    def generate(self, state: HasRand) -> BytesInput:
        return BytesInput(data=self._call("generate", state))

    def generate_dummy(self, state: HasRand) -> BytesInput:
        return BytesInput(data=self._call("generate_dummy", state))

    def _invoke(self, method: str, handle: StateHandle) -> Any:
        try:
            member = getattr(self._obj, method)
        except AttributeError as e:
            raise ForeignCallError(method, f"{type(self._obj).__name__} has no member {method!r}") from e
        if not callable(member):
            raise ForeignCallError(method, f"{type(self._obj).__name__}.{method} is not callable")
        try:
            return member(handle)
        except Exception as e:
            raise ForeignCallError(method, f"{type(e).__name__}: {e}") from e

    def _call(self, method: str, state: HasRand) -> bytes:
        with foreign_lock():
            handle = StateHandle(state)
            try:
                return _extract_bytes(method, self._invoke(method, handle))
            except ForeignCallError as e:
                log.warning("%s", e)
                raise
            finally:
                handle.release()

    def __repr__(self) -> str:
        return f"ForeignGenerator({self._obj!r})"


class GeneratorKind(Enum):
    """Variant held by a :class:`GeneratorBridge`."""

    RAND_BYTES = "rand_bytes"
    RAND_PRINTABLES = "rand_printables"
    FOREIGN = "foreign"


# One dispatch arm per variant: the implementation type each kind wraps.
_ARMS: dict[GeneratorKind, type] = {
    GeneratorKind.RAND_BYTES: RandBytesGenerator,
    GeneratorKind.RAND_PRINTABLES: RandPrintablesGenerator,
    GeneratorKind.FOREIGN: ForeignGenerator,
}


class GeneratorBridge:
    """Generator dispatching to a native strategy or to a foreign object.

    The variant is fixed at construction; use :meth:`new_rand_bytes`,
    :meth:`new_rand_printables`, :meth:`new_foreign` or :meth:`from_native`.
    """

    def __init__(self, kind: GeneratorKind, inner: Any) -> None:
        arm = _ARMS[kind]
        if not isinstance(inner, arm):
            raise TypeError(f"{kind.name} variant requires {arm.__name__}, got {type(inner).__name__}")
        self._kind = kind
        self._inner = inner

    @classmethod
    def new_rand_bytes(cls, generator: RandBytesGenerator) -> GeneratorBridge:
        return cls(GeneratorKind.RAND_BYTES, generator)

    @classmethod
    def new_rand_printables(cls, generator: RandPrintablesGenerator) -> GeneratorBridge:
        return cls(GeneratorKind.RAND_PRINTABLES, generator)

    @classmethod
    def new_foreign(cls, obj: Any) -> GeneratorBridge:
        return cls(GeneratorKind.FOREIGN, ForeignGenerator(obj))

    @classmethod
    def from_native(cls, generator: Any) -> GeneratorBridge:
        """Wrap a native generator instance as its matching variant."""
        for kind, arm in _ARMS.items():
            if kind is not GeneratorKind.FOREIGN and isinstance(generator, arm):
                return cls(kind, generator)
        raise TypeError(f"not a native generator: {type(generator).__name__}")

    @property
    def kind(self) -> GeneratorKind:
        return self._kind

    @property
    def inner(self) -> Any:
        return self._inner

    def unwrap_foreign(self) -> Any | None:
        """Return the wrapped foreign object, or None for native variants."""
        if self._kind is GeneratorKind.FOREIGN:
            return self._inner.inner
        return None

    def generate(self, state: HasRand) -> BytesInput:
        log.debug("Dispatching generate() to %s", self._kind.value)
        return self._inner.generate(state)

    def generate_dummy(self, state: HasRand) -> BytesInput:
        log.debug("Dispatching generate_dummy() to %s", self._kind.value)
        return self._inner.generate_dummy(state)

    def __repr__(self) -> str:
        return f"GeneratorBridge({self._kind.name}, {self._inner!r})"


# Fixed names under which the generator types are visible to embedding code.
EXPORTED_TYPES: dict[str, type] = {
    "RandBytesGenerator": RandBytesGenerator,
    "RandPrintablesGenerator": RandPrintablesGenerator,
    "Generator": GeneratorBridge,
}


def register(namespace: Any) -> list[str]:
    """Expose the generator types in ``namespace`` (a mapping, module or object)."""
    for name, cls in EXPORTED_TYPES.items():
        if isinstance(namespace, MutableMapping):
            namespace[name] = cls
        else:
            setattr(namespace, name, cls)
    return list(EXPORTED_TYPES)
