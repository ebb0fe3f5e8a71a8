from collections.abc import Sequence


def _line(cells: Sequence[str]) -> str:
    return "|" + "".join(f" {cell.strip()} |" for cell in cells) + "\n"


def render_markdown(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render a GitHub-flavored Markdown table, one newline-terminated line per row."""
    parts = [_line(headers), _line(["---"] * len(headers))]
    parts.extend(_line(row) for row in rows)
    return "".join(parts)
