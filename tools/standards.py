from __future__ import annotations

import ast
import tokenize
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from io import StringIO
from pathlib import Path

FORBIDDEN_TYPING = frozenset({"Any", "cast"})

# Built dynamically so the literal never appears in this file.
MARKER: str = "su" + "press"


@dataclass(frozen=True)
class Source:
    path: Path
    text: str
    tree: ast.Module

    @staticmethod
    def load(path: Path) -> Source:
        # Parse errors propagate so the run fails loudly.
        text = path.read_text(encoding="utf-8")
        return Source(path=path, text=text, tree=ast.parse(text, filename=str(path)))

    def at(self, line: int, message: str) -> str:
        return f"{self.path}:{line} {message}"


Check = Callable[[Source], list[str]]


def iter_python_files(roots: Iterable[str]) -> Iterable[Path]:
    for root in roots:
        base = Path(root)
        if base.is_file() and base.suffix == ".py":
            yield base
        elif base.is_dir():
            yield from sorted(base.rglob("*.py"))


def check_typing(src: Source) -> list[str]:
    errors: list[str] = []
    for node in ast.walk(src.tree):
        if isinstance(node, ast.ImportFrom) and node.module == "typing":
            errors.extend(
                src.at(node.lineno, f"forbidden typing import '{alias.name}'")
                for alias in node.names
                if alias.name in FORBIDDEN_TYPING
            )
        elif (
            isinstance(node, ast.Attribute)
            and isinstance(node.value, ast.Name)
            and node.value.id == "typing"
            and node.attr in FORBIDDEN_TYPING
        ):
            errors.append(src.at(node.lineno, f"forbidden use of typing.{node.attr}"))
        elif isinstance(node, ast.Name) and node.id in FORBIDDEN_TYPING:
            errors.append(src.at(node.lineno, f"forbidden name '{node.id}'"))

    # Tokenize so string literals mentioning the comment are not flagged
    for tok in tokenize.generate_tokens(StringIO(src.text).readline):
        if tok.type == tokenize.COMMENT and "type: ignore" in tok.string:
            errors.append(src.at(tok.start[0], "forbidden 'type: ignore'"))
    return errors


def check_exceptions(src: Source) -> list[str]:
    errors: list[str] = []
    for node in ast.walk(src.tree):
        if not isinstance(node, ast.ExceptHandler):
            continue
        if node.type is None:
            errors.append(src.at(node.lineno, "bare 'except' is forbidden"))
        if not any(isinstance(inner, ast.Raise) for inner in ast.walk(node)):
            errors.append(src.at(node.lineno, "except without re-raise is forbidden"))
    return errors


def check_print(src: Source) -> list[str]:
    return [
        src.at(node.lineno, "use logger; 'print' is forbidden")
        for node in ast.walk(src.tree)
        if isinstance(node, ast.Call)
        and isinstance(node.func, ast.Name)
        and node.func.id == "print"
    ]


def check_marker(src: Source) -> list[str]:
    return [
        src.at(number, f"forbidden marker '{MARKER}'")
        for number, line in enumerate(src.text.splitlines(), start=1)
        if MARKER in line.lower()
    ]


CHECKS: tuple[Check, ...] = (check_typing, check_exceptions, check_print, check_marker)


def scan(roots: Iterable[str], checks: Iterable[Check] = CHECKS) -> list[str]:
    selected = tuple(checks)
    errors: list[str] = []
    for path in iter_python_files(roots):
        src = Source.load(path)
        for check in selected:
            errors.extend(check(src))
    return errors
