from typing import List
from typing import TextIO


class TabWriter:
    """
    Aligns tab-separated columns, like Go's text/tabwriter.

    Text is buffered until flush(). Each tab terminates a cell; the last cell of
    a line is not tab-terminated and is written as is. Consecutive lines that all
    have a terminated cell at the same index form a column block, padded to the
    widest cell in the block plus `padding`.
    """

    def __init__(self, output: TextIO, minwidth: int = 1, padding: int = 2, padchar: str = " ") -> None:
        self._output = output
        self._minwidth = minwidth
        self._padding = padding
        self._padchar = padchar
        self._buf: List[str] = []

    def write(self, text: str) -> int:
        self._buf.append(text)
        return len(text)

    def flush(self) -> None:
        text = "".join(self._buf)
        self._buf = []
        if not text:
            return

        lines = text.split("\n")
        trailing_newline = lines[-1] == ""
        if trailing_newline:
            lines.pop()
        cells = [line.split("\t") for line in lines]

        out: List[str] = []
        self._format(cells, 0, len(cells), [], out)
        result = "\n".join(out)
        if trailing_newline:
            result += "\n"
        self._output.write(result)
        self._output.flush()

    def _format(self, cells: List[List[str]], line0: int, line1: int, widths: List[int], out: List[str]) -> None:
        column = len(widths)
        this = line0
        while this < line1:
            if column >= len(cells[this]) - 1:
                this += 1
                continue

            # This line starts a block in `column`; lines before it are done.
            self._write_lines(cells, line0, this, widths, out)
            line0 = this

            width = self._minwidth
            while this < line1 and column < len(cells[this]) - 1:
                width = max(width, len(cells[this][column]) + self._padding)
                this += 1

            self._format(cells, line0, this, widths + [width], out)
            line0 = this

        self._write_lines(cells, line0, line1, widths, out)

    def _write_lines(self, cells: List[List[str]], line0: int, line1: int, widths: List[int], out: List[str]) -> None:
        for line in cells[line0:line1]:
            parts = []
            for j, cell in enumerate(line):
                if j < len(widths):
                    parts.append(cell + self._padchar * (widths[j] - len(cell)))
                else:
                    parts.append(cell)
            out.append("".join(parts))
