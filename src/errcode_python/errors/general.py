"""
Hierarchical error nodes with stable codes.

A GeneralError is an immutable exception value. Roots are created from a
label; every other node is derived from an existing one through its
builder (``produce()``), which never mutates the source:

    >>> base = GeneralError.new_root("general error")
    >>> db = base.produce().sub_type("database").make()
    >>> timeout = db.produce().message("query took too long").make()
    >>> timeout.is_(db), timeout.is_(base), base.is_(db)
    (True, True, False)

Each node keeps two back-references. ``wrapped`` is the structural link
used for ancestry and exposed through ``__cause__``; ``cause`` is the
semantic cause, which diverges from ``wrapped`` only after a foreign error
has been attached with ``external_err_mess``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from errcode_python.codes.engine import (
    CodeCombiner,
    CodeGenerator,
    combine_codes,
    generate_code,
)
from errcode_python.errors.chain import ChainLink, is_error
from errcode_python.telemetry.logger import get_logger

if TYPE_CHECKING:
    from errcode_python.types.report import ErrorReport

logger = get_logger("errcode_python.errors")


class GeneralError(Exception):
    """An error node in a derivation tree.

    Instances are created with ``new_root`` or derived through
    ``produce()``; the constructor is internal. Raising a module-level node
    directly attaches a traceback to that shared object, so long-lived
    definitions are usually raised as ``raise err.produce().message(...).make()``.

    Attributes:
        error_code: Code accumulated along the derivation chain
        code_note: Derivation trace, ``<code>:<label> ~> <code>:<label> ...``
        message: Message set on this node, or "" when unset
        wrapped: Structural link
        cause: Semantic cause
    """

    def __init__(
        self,
        *,
        code: str,
        code_note: str,
        wrapped: ChainLink,
        cause: BaseException,
        message: str = "",
        code_gen: CodeGenerator = generate_code,
        sum_codes: CodeCombiner = combine_codes,
    ) -> None:
        super().__init__(code_note)
        self._code = code
        self._code_note = code_note
        self._wrapped = wrapped
        self._cause = cause
        self._message = message
        self._code_gen = code_gen
        self._sum_codes = sum_codes
        self._rendered = ""
        self.__cause__ = wrapped

    @classmethod
    def new_root(
        cls,
        label: str,
        *,
        code_gen: CodeGenerator = generate_code,
        sum_codes: CodeCombiner = combine_codes,
    ) -> GeneralError:
        """Create a root error from a label.

        Args:
            label: Root label; its hash becomes the root code
            code_gen: Label-to-code function for this tree
            sum_codes: Code combination function for this tree

        Returns:
            The root node
        """
        code = code_gen(label)
        link = ChainLink(code)
        logger.debug("Root error created", code=code, label=label)
        return cls(
            code=code,
            code_note=f"{code}:{label}",
            wrapped=link,
            cause=link,
            code_gen=code_gen,
            sum_codes=sum_codes,
        )

    def _fields(self) -> dict[str, Any]:
        return {
            "code": self._code,
            "code_note": self._code_note,
            "wrapped": self._wrapped,
            "cause": self._cause,
            "message": self._message,
            "code_gen": self._code_gen,
            "sum_codes": self._sum_codes,
        }

    def _derive(self, **changes: Any) -> GeneralError:
        fields = self._fields()
        fields.update(changes)
        return type(self)(**fields)

    def __reduce__(self) -> tuple[Any, ...]:
        # Exception.__reduce__ replays args positionally; rebuild from fields instead.
        # The render cache is not carried over.
        return (_restore_general_error, (type(self), self._fields()))

    @property
    def error_code(self) -> str:
        return self._code

    @property
    def code_note(self) -> str:
        return self._code_note

    @property
    def message(self) -> str:
        return self._message

    @property
    def display_message(self) -> str:
        """Message if set, otherwise the code note."""
        return self._message or self._code_note

    @property
    def wrapped(self) -> ChainLink:
        return self._wrapped

    @property
    def cause(self) -> BaseException:
        return self._cause

    def unwrap(self) -> ChainLink:
        """Return the structural link (one unwrap step)."""
        return self._wrapped

    def render(self) -> str:
        """Return ``[<code>: <link>] <display message>``, computed once.

        The cached string is reused only if it still carries both the code
        and the display message. Publishing is a single attribute store, so
        concurrent renders need no lock.
        """
        code = self._code
        display = self.display_message
        cached = self._rendered
        if cached and code in cached and display in cached:
            return cached

        rendered = f"[{code}: {self._wrapped}] {display}"
        self._rendered = rendered
        return rendered

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self._code!r}, code_note={self._code_note!r})"

    def fmt_response(self, template: str) -> str:
        """Append this error's code to a response template."""
        return f"{template}\nCODE: {self._code}"

    def to_report(self) -> ErrorReport:
        """Build a serializable report of this error."""
        from errcode_python.types.report import ErrorReport

        external = None
        if not isinstance(self._cause, ChainLink):
            external = str(self._cause)
        return ErrorReport(
            code=self._code,
            code_note=self._code_note,
            message=self.display_message,
            rendered=self.render(),
            external_cause=external,
        )

    def produce(self) -> ErrorSeed:
        """Return a builder for errors derived from this one."""
        return ErrorSeed(self)

    def is_(self, err: BaseException | None) -> bool:
        """Check whether this error derives from, or contains, ``err``.

        A GeneralError candidate is matched by its structural link, which
        is searched for first along this node's structural chain and then
        along its cause chain. A foreign candidate is searched for as is;
        if it exposes a legacy ``cause`` accessor, this node's cause chain
        is also searched for that cause.

        Args:
            err: Candidate ancestor or contained error

        Returns:
            True if ``err`` is found
        """
        if err is None:
            return False

        candidate = err._wrapped if isinstance(err, GeneralError) else err
        if is_error(self._wrapped, candidate) or is_error(self._cause, candidate):
            return True

        if isinstance(err, GeneralError):
            return False
        legacy = _legacy_cause(err)
        return legacy is not None and is_error(self._cause, legacy)


def _restore_general_error(cls: type[GeneralError], fields: dict[str, Any]) -> GeneralError:
    return cls(**fields)


def _legacy_cause(err: BaseException) -> BaseException | None:
    accessor = getattr(err, "cause", None)
    if callable(accessor):
        try:
            accessor = accessor()
        except TypeError:
            # Not a zero-argument accessor.
            return None
    if isinstance(accessor, BaseException):
        return accessor
    return None


class ErrorSeed:
    """Builder for errors derived from one source node.

    Every method returns a new seed around a new node; the source node is
    never modified.
    """

    __slots__ = ("_node",)

    def __init__(self, node: GeneralError) -> None:
        self._node = node

    def sub_type(self, label: str) -> ErrorSeed:
        """Derive a subtype whose code combines the parent code with ``label``'s code.

        Args:
            label: Subtype label

        Returns:
            Seed for the subtype
        """
        node = self._node
        child_code = node._code_gen(label)
        return ErrorSeed(
            node._derive(
                code=node._sum_codes(node._code, child_code),
                code_note=f"{node._code_note} ~> {child_code}:{label}",
                wrapped=ChainLink(f"{node._wrapped}.{child_code}", parent=node._wrapped),
            )
        )

    def message(self, message: str) -> ErrorSeed:
        """Replace the message; code and ancestry are unchanged."""
        return ErrorSeed(self._node._derive(message=message))

    def message_f(self, template: str, *args: Any, **kwargs: Any) -> ErrorSeed:
        """Replace the message with ``template.format(*args, **kwargs)``."""
        return ErrorSeed(self._node._derive(message=template.format(*args, **kwargs)))

    def external_err_mess(self, err: BaseException | None) -> ErrorSeed:
        """Attach a foreign error as the semantic cause.

        No-op when ``err`` is None, or when ``err`` is a GeneralError that
        already carries a message. Otherwise the new node's structural link
        wraps both the source link and ``err``, its cause is ``err``, and it
        keeps the source message, falling back to ``str(err)``.

        Args:
            err: Error to attach

        Returns:
            Seed for the new node, or this seed on a no-op
        """
        if err is None:
            return self
        if isinstance(err, GeneralError) and err._message:
            return self

        node = self._node
        logger.debug(
            "External error attached",
            code=node._code,
            external_type=type(err).__name__,
        )
        return ErrorSeed(
            node._derive(
                wrapped=ChainLink(f"{node._wrapped}: {err}", parent=node._wrapped, external=err),
                cause=err,
                message=node._message or str(err),
            )
        )

    def make(self) -> GeneralError:
        """Return the built error."""
        return self._node


def new_general_error(label: str) -> ErrorSeed:
    """Create a root error with the default code functions and return its builder."""
    return GeneralError.new_root(label).produce()


def new_general_error_with_custom_codes(
    label: str, code_gen: CodeGenerator, sum_codes: CodeCombiner
) -> ErrorSeed:
    """Create a root error in a custom code space and return its builder.

    Args:
        label: Root label
        code_gen: Label-to-code function
        sum_codes: Code combination function

    Returns:
        Builder for the root error
    """
    return GeneralError.new_root(label, code_gen=code_gen, sum_codes=sum_codes).produce()


def as_general_error(err: BaseException | None) -> tuple[GeneralError | None, bool]:
    """Try to view ``err`` as a GeneralError.

    Returns:
        ``(err, True)`` if it is one, else ``(None, False)``
    """
    if isinstance(err, GeneralError):
        return err, True
    return None, False


def is_general_error(err: BaseException | None) -> bool:
    """Check whether ``err`` is a GeneralError."""
    return isinstance(err, GeneralError)
