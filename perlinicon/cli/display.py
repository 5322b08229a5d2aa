"""Terminal preview of generated favicons."""

import io
import sys

from PIL import Image
from rich.console import Console
from rich.style import Style
from rich.text import Text

# Force UTF-8 for Windows console
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

console = Console()
err_console = Console(stderr=True)


def png_to_gray_rows(png: bytes) -> list[list[int]]:
    """Decode PNG bytes into rows of grayscale values."""
    with Image.open(io.BytesIO(png)) as image:
        gray = image.convert("L")
        width, height = gray.size
        data = gray.tobytes()
    return [list(data[row * width : (row + 1) * width]) for row in range(height)]


def _gray(value: int) -> str:
    return f"rgb({value},{value},{value})"


def render_preview(rows: list[list[int]]) -> Text:
    """Render grayscale rows using half-block characters.

    Each character covers two pixel rows: the foreground colors the top
    pixel and the background colors the bottom one.
    """
    text = Text()
    for row in range(0, len(rows), 2):
        top = rows[row]
        bottom = rows[row + 1] if row + 1 < len(rows) else None
        for col, value in enumerate(top):
            if bottom is None:
                text.append("▀", Style(color=_gray(value)))
            else:
                text.append("▀", Style(color=_gray(value), bgcolor=_gray(bottom[col])))
        text.append("\n")
    return text


def display_preview(png: bytes, size: int, seed: int | None = None) -> None:
    """Print a favicon preview with a short caption."""
    console.print(render_preview(png_to_gray_rows(png)))
    caption = f"{size}x{size}"
    if seed is not None:
        caption += f" seed={seed}"
    console.print(f"[dim]{caption}[/dim]")
