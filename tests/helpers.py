from __future__ import annotations


def header_lines(marker: str = "OCaml", copyright_offset: int = 4, marker_line: int = 3) -> list[str]:
    """A boxed comment header with the project marker on `marker_line`."""
    lines = ["(*" + "*" * 72 + "*)"]
    while len(lines) < marker_line - 1:
        lines.append("(*" + " " * 72 + "*)")
    lines.append(f"(*{marker:^72}*)")
    while len(lines) < marker_line + copyright_offset - 1:
        lines.append("(*" + " " * 72 + "*)")
    lines.append(f"(*{'Copyright 2024 Example Org.':^72}*)")
    lines.append("(*" + "*" * 72 + "*)")
    return lines


def with_header(body: str = "let x = 1\n") -> bytes:
    return ("\n".join(header_lines()) + "\n" + body).encode("latin-1")
