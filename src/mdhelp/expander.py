"""Template expansion: scalar placeholders and one level of repeated blocks."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union

_IDENT_RE = re.compile(r"[A-Za-z0-9_-]+")
_BLOCK_CLOSE_RE = re.compile(r"^[ \t]*\}[ \t]*(?:\r?\n|\Z)", re.MULTILINE)


class TemplateError(ValueError):
    """Raised when a help template cannot be parsed."""

    def __init__(self, message: str, template: str, position: int) -> None:
        line = template.count("\n", 0, position) + 1
        column = position - (template.rfind("\n", 0, position) + 1) + 1
        super().__init__(f"{message} (line {line}, column {column})")
        self.reason = message
        self.template = template
        self.position = position
        self.line = line
        self.column = column


@dataclass(frozen=True)
class _Scalar:
    name: str


@dataclass(frozen=True)
class _Block:
    name: str
    parts: Tuple[Union[str, _Scalar], ...]


_Part = Union[str, _Scalar, _Block]


def _parse(template: str, start: int, stop: int, *, allow_blocks: bool) -> List[_Part]:
    """
    Split ``template[start:stop]`` into literal text, scalars and blocks.

    Positions in raised errors refer to the whole template so nested parsing of a
    block body still reports where the author made the mistake.
    """
    parts: List[_Part] = []
    index = start
    while index < stop:
        opening = template.find("${", index, stop)
        if opening < 0:
            parts.append(template[index:stop])
            break
        if opening > index:
            parts.append(template[index:opening])
        match = _IDENT_RE.match(template, opening + 2, stop)
        if match is None:
            raise TemplateError("missing or invalid placeholder name", template, opening)
        name = match.group(0)
        end = match.end()
        if end >= stop:
            raise TemplateError(f"unterminated placeholder '{name}'", template, opening)
        follower = template[end]
        if follower == "}":
            parts.append(_Scalar(name))
            index = end + 1
            continue
        # a block name may be followed by blanks before its line break
        line_break = end
        while line_break < stop and template[line_break] in " \t":
            line_break += 1
        if template.startswith("\n", line_break, stop) or template.startswith("\r\n", line_break, stop):
            if not allow_blocks:
                raise TemplateError(
                    f"block '{name}' cannot be nested inside another block", template, opening
                )
            body_start = line_break + (2 if template[line_break] == "\r" else 1)
            closing = _BLOCK_CLOSE_RE.search(template, body_start, stop)
            if closing is None:
                raise TemplateError(f"block '{name}' is never closed", template, opening)
            body = _parse(template, body_start, closing.start(), allow_blocks=False)
            parts.append(_Block(name, tuple(body)))  # type: ignore[arg-type]
            index = closing.end()
            continue
        raise TemplateError(
            f"unexpected {follower!r} after placeholder name '{name}'", template, end
        )
    return parts


def parse_template(template: str) -> List[_Part]:
    """Parse *template*, raising :class:`TemplateError` when it is malformed."""

    return _parse(template, 0, len(template), allow_blocks=True)


def validate_template(template: str) -> None:
    """Check that *template* parses; the parsed form is discarded."""

    parse_template(template)


def _fold_markdown(value: str) -> str:
    return " ".join(value.split())


class SubBinding:
    """One row of a repeated block, with its own scalar bindings."""

    def __init__(self) -> None:
        self._values: Dict[str, str] = {}

    def set(self, name: str, value: object) -> "SubBinding":
        self._values[name] = str(value)
        return self

    def set_md(self, name: str, value: object) -> "SubBinding":
        """Bind a markdown value, folded onto one line so it fits a table row."""
        self._values[name] = _fold_markdown(str(value))
        return self

    def get(self, name: str) -> Optional[str]:
        return self._values.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __repr__(self) -> str:
        return f"SubBinding({self._values!r})"


class TemplateExpander:
    """
    Variable bindings used to fill help templates.

    Scalars are stored verbatim and must already be valid markdown. Block rows are
    kept per block name in insertion order. Names that are never bound resolve to
    the default value instead of failing.
    """

    def __init__(self, default: str = "") -> None:
        self._values: Dict[str, str] = {}
        self._blocks: Dict[str, List[SubBinding]] = {}
        self._default = default

    @property
    def default(self) -> str:
        return self._default

    def set_default(self, value: object) -> "TemplateExpander":
        self._default = str(value)
        return self

    def set(self, name: str, value: object) -> "TemplateExpander":
        """
        Bind a top-level scalar, replacing any previous value.

        Parameters:
            name (str): Placeholder name as written in templates, e.g. ``version``.
            value (object): Value converted with ``str`` and inserted verbatim, so it must already be valid markdown.

        Returns:
            TemplateExpander: This expander, for chaining.
        """
        self._values[name] = str(value)
        return self

    def set_md(self, name: str, value: object) -> "TemplateExpander":
        """Like :meth:`set`, but fold the markdown *value* onto a single line first."""
        self._values[name] = _fold_markdown(str(value))
        return self

    def get(self, name: str) -> Optional[str]:
        return self._values.get(name)

    def unset(self, name: str) -> None:
        self._values.pop(name, None)

    def sub(self, name: str) -> SubBinding:
        """
        Append a new row to block *name*.

        Rows are emitted in the order they were added. Names bound on the row shadow
        top-level scalars for that row only.

        Parameters:
            name (str): Block name, e.g. ``option-lines``.

        Returns:
            SubBinding: The new, empty row; bind its variables with ``set``/``set_md``.
        """
        row = SubBinding()
        self._blocks.setdefault(name, []).append(row)
        return row

    begin_block = sub

    def rows(self, name: str) -> Sequence[SubBinding]:
        """
        Return the rows bound to block *name*.

        Parameters:
            name (str): Block name.

        Returns:
            Sequence[SubBinding]: The rows in insertion order; empty when the block has none. The rows themselves stay mutable.
        """
        return tuple(self._blocks.get(name, ()))

    def clear_block(self, name: str) -> None:
        self._blocks.pop(name, None)

    def _resolve(self, name: str, row: Optional[SubBinding] = None) -> str:
        if row is not None:
            value = row.get(name)
            if value is not None:
                return value
        value = self._values.get(name)
        if value is None:
            return self._default
        return value

    def expand(self, template: str) -> str:
        """Return *template* with every placeholder and block filled in."""
        chunks: List[str] = []
        for part in parse_template(template):
            if isinstance(part, str):
                chunks.append(part)
            elif isinstance(part, _Scalar):
                chunks.append(self._resolve(part.name))
            else:
                for row in self._blocks.get(part.name, ()):
                    for inner in part.parts:
                        if isinstance(inner, str):
                            chunks.append(inner)
                        else:
                            chunks.append(self._resolve(inner.name, row))
        return "".join(chunks)


__all__ = [
    "SubBinding",
    "TemplateError",
    "TemplateExpander",
    "parse_template",
    "validate_template",
]
