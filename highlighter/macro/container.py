# highlighter/macro/container.py

from dataclasses import dataclass, field


@dataclass
class CodeRow:
    """One line of highlighted code markup."""

    content: str
    highlighted: bool = False


@dataclass
class CodeContainer:
    """
    Tokenized code block plus the display options of the macro.

    Rows carry no line number of their own: row ``i`` shows line
    ``first_line + i``.
    """

    rows: list[CodeRow] = field(default_factory=list)
    brush: str = "text"
    first_line: int = 1
    show_line_nums: bool = False
    collapse: bool = False

    @property
    def last_line(self) -> int:
        return self.first_line + len(self.rows) - 1

    def numbered_rows(self):
        """(line number, row) pairs in display order."""
        return [(self.first_line + index, row) for index, row in enumerate(self.rows)]

    def highlight_lines(self, line_numbers) -> None:
        """
        Mark the rows showing the given line numbers as highlighted.

        Numbers before the first line or after the last one are ignored.
        """
        for line_number in line_numbers:
            index = line_number - self.first_line
            if 0 <= index < len(self.rows):
                self.rows[index].highlighted = True

    @property
    def highlighted_lines(self) -> list[int]:
        return [number for number, row in self.numbered_rows() if row.highlighted]
