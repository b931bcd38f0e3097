"""Dialect compiler registry (Open/Closed Principle).

Adding a dialect means writing a :class:`~pagesql.compile.base.DialectCompiler`
subclass and registering it once; ``TableConfig`` validation and
``StatementBuilder`` look it up automatically.

Usage::

    from pagesql.compile.registry import DialectFactory

    @DialectFactory.register("mssql")
    class MSSQLCompiler(DialectCompiler):
        ...
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from pagesql.compile.base import DialectCompiler
from pagesql.errors import CompilationError


class DialectFactory:
    """Registry mapping dialect names to :class:`DialectCompiler` classes.

    Example::

        @DialectFactory.register("mssql")
        class MSSQLCompiler(DialectCompiler):
            ...

        compiler = DialectFactory.create("mssql")
    """

    _compilers: ClassVar[dict[str, type[DialectCompiler]]] = {}

    @classmethod
    def register(
        cls, name: str
    ) -> Callable[[type[DialectCompiler]], type[DialectCompiler]]:
        """Decorator that registers a compiler class under ``name``.

        Args:
            name: The dialect name (e.g. ``"postgres"``).

        Returns:
            A decorator that registers and returns the compiler class.
        """

        def decorator(compiler_cls: type[DialectCompiler]) -> type[DialectCompiler]:
            cls._compilers[name] = compiler_cls
            return compiler_cls

        return decorator

    @classmethod
    def register_class(cls, name: str, compiler_cls: type[DialectCompiler]) -> None:
        """Register a compiler class without using the decorator form.

        The same class may be registered under several names (aliases).
        """
        cls._compilers[name] = compiler_cls

    @classmethod
    def create(cls, name: str) -> DialectCompiler:
        """Instantiate the compiler registered for ``name``.

        Raises:
            CompilationError: If no compiler is registered for ``name``.
        """
        compiler_cls = cls._compilers.get(name)
        if compiler_cls is None:
            raise CompilationError(
                f"Unsupported dialect: '{name}'. Registered dialects: "
                f"{cls.registered_dialects()}.",
                clause="dialect",
            )
        return compiler_cls()

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._compilers

    @classmethod
    def registered_dialects(cls) -> list[str]:
        """Return the sorted list of registered dialect names."""
        return sorted(cls._compilers)
