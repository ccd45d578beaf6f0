"""
Variable declaration semantics.

A Scope maps names to values and remembers HOW each name was declared:

    let    -> may be reassigned, may not be redeclared
    const  -> may not be reassigned or redeclared, needs an initializer
    var    -> may be reassigned and redeclared

IMPORTANT:
    const protects the BINDING, not the value.
    A dict or list bound with const can still be mutated in place.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator

from primer.errors import ScriptReferenceError, ScriptSyntaxError, ScriptTypeError
from primer.values import UNDEFINED


class DeclarationKind(Enum):
    """How a name was introduced into a scope."""

    VAR = "var"
    LET = "let"
    CONST = "const"


@dataclass
class Binding:
    """
    A single name -> value association.

    Properties:
        kind: Declaration keyword used for this name
        value: Current value (UNDEFINED until assigned)
    """

    kind: DeclarationKind
    value: Any = UNDEFINED


class Scope:
    """
    Flat declaration scope.

    Example:
        scope = Scope()
        scope.let("age", 30)
        scope.assign("age", 31)
        scope.const("PI", 3.14)
        scope.assign("PI", 3)   # raises ScriptTypeError
    """

    def __init__(self) -> None:
        self._bindings: Dict[str, Binding] = {}

    def _declare(self, kind: DeclarationKind, name: str, value: Any) -> Any:
        existing = self._bindings.get(name)
        if existing is not None:
            if kind is DeclarationKind.VAR and existing.kind is DeclarationKind.VAR:
                if value is not UNDEFINED:
                    existing.value = value
                return existing.value
            raise ScriptSyntaxError(f"Identifier '{name}' has already been declared")
        self._bindings[name] = Binding(kind=kind, value=value)
        return value

    def let(self, name: str, value: Any = UNDEFINED) -> Any:
        return self._declare(DeclarationKind.LET, name, value)

    def var(self, name: str, value: Any = UNDEFINED) -> Any:
        return self._declare(DeclarationKind.VAR, name, value)

    def const(self, name: str, value: Any = UNDEFINED) -> Any:
        if value is UNDEFINED:
            raise ScriptSyntaxError("Missing initializer in const declaration")
        return self._declare(DeclarationKind.CONST, name, value)

    def _lookup(self, name: str) -> Binding:
        binding = self._bindings.get(name)
        if binding is None:
            raise ScriptReferenceError(f"{name} is not defined")
        return binding

    def assign(self, name: str, value: Any) -> Any:
        """
        Rebind an existing name.

        Raises:
            ScriptReferenceError: If name was never declared
            ScriptTypeError: If name was declared with const
        """
        binding = self._lookup(name)
        if binding.kind is DeclarationKind.CONST:
            raise ScriptTypeError("Assignment to constant variable.")
        binding.value = value
        return value

    def get(self, name: str) -> Any:
        return self._lookup(name).value

    def kind_of(self, name: str) -> DeclarationKind:
        return self._lookup(name).kind

    def has(self, name: str) -> bool:
        return name in self._bindings

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)
