"""Build source files out of named, indented sections."""

from contextlib import contextmanager
from dataclasses import dataclass


@dataclass(frozen=True)
class Line:
    """A line of source code.

    Attributes:
        depth (int): Indentation level, relative to the section containing the line.
        text (str): The content of the line, without indentation. Empty for a blank line.
    """

    depth: int
    text: str


@dataclass(frozen=True)
class Section:
    """A named group of lines.

    Attributes:
        name (str): Name of the section, e.g. `imports`.
        lines (tuple[Line, ...]): The lines of the section.
        depth (int): Indentation level of the section.
        spaced (bool): If `True`, the section is separated from the previous one by a blank line.
    """

    name: str
    lines: tuple[Line, ...]
    depth: int = 0
    spaced: bool = True


class SectionWriter:
    """Accumulate the lines of a section.

    Example:
        >>> writer = SectionWriter("main")
        >>> with writer.block("function f() {", "}"):
        ...     writer.line("return;")
        >>> render_sections([writer.build()])
        'function f() {\\n    return;\\n}\\n'
    """

    def __init__(self, name: str, depth: int = 0, spaced: bool = True):
        """Initialise an empty section.

        Args:
            name (str): Name of the section.
            depth (int): Indentation level of the section.
            spaced (bool): Whether the section is preceded by a blank line when rendered.
        """
        self.name = name
        self.depth = depth
        self.spaced = spaced
        self._lines: list[Line] = []
        self._current_depth = 0

    def line(self, text: str):
        """Append a line at the current indentation."""
        self._lines.append(Line(self._current_depth, text))

    def lines(self, texts: list[str]):
        """Append several lines at the current indentation."""
        for text in texts:
            self.line(text)

    def blank(self):
        """Append a blank line."""
        self._lines.append(Line(0, ""))

    @contextmanager
    def indented(self):
        """Indent by one level the lines appended inside the context."""
        self._current_depth += 1
        try:
            yield self
        finally:
            self._current_depth -= 1

    @contextmanager
    def block(self, opener: str | list[str], closer: str):
        """Write `opener`, indent the lines appended inside the context, then write `closer`."""
        self.lines([opener] if isinstance(opener, str) else opener)
        with self.indented():
            yield self
        self.line(closer)

    def build(self) -> Section:
        """Return the section."""
        return Section(name=self.name, lines=tuple(self._lines), depth=self.depth, spaced=self.spaced)


def render_sections(sections: list[Section], indent: str = "    ") -> str:
    """Render sections as text.

    Args:
        sections (list[Section]): The sections, in order.
        indent (str): The string used for one level of indentation.

    Returns:
        The text, terminated by a newline. Spaced sections other than the first are preceded by a blank line.
    """
    out = []
    for ix, section in enumerate(sections):
        if ix > 0 and section.spaced:
            out.append("")
        for line in section.lines:
            out.append(indent * (section.depth + line.depth) + line.text if line.text else "")
    return "\n".join(out) + "\n"
