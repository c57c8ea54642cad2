"""Stored pictures of the gallows stages, drawn on demand when missing."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from PIL import Image, ImageDraw

from hangman.models import Drawing
from hangman.painter import HangmanPainter, Rect
from hangman.tools import file_name_for_drawing

DEFAULT_SIZE = (300, 300)
BITMAP_SUFFIX = ".bmp"


def _check_size(size: tuple[int, int]) -> tuple[int, int]:
    width, height = size
    if width <= 0 or height <= 0:
        raise ValueError(f"picture size must be positive, got {width}x{height}")
    return width, height


class BitmapLoader:
    """Reads stage pictures from a folder of ``.bmp`` files."""

    def __init__(self, folder: str | PathLike[str]) -> None:
        self.folder = Path(folder)

    def path(self, file_name: str) -> Path:
        """Return where the picture with this base name is stored."""
        return self.folder / f"{file_name}{BITMAP_SUFFIX}"

    def load(self, file_name: str) -> Image.Image:
        """Read a stored picture; raises OSError if it cannot be read."""
        with Image.open(self.path(file_name)) as image:
            return image.convert("RGB")

    def exists(self, file_name: str) -> bool:
        """Return True if a picture with this base name is stored."""
        return self.path(file_name).exists()


class BitmapCreator:
    """Draws stage pictures from scratch."""

    def create(self, size: tuple[int, int], drawing: Drawing | int) -> Image.Image:
        """Return a new picture of the given size showing the stage."""
        width, height = _check_size(size)
        image = Image.new("RGB", (width, height), "white")
        HangmanPainter(ImageDraw.Draw(image), Rect(0, 0, width, height)).paint(drawing)
        return image


class BitmapSaver:
    """Writes stage pictures into a folder as ``.bmp`` files."""

    def __init__(self, folder: str | PathLike[str]) -> None:
        self.folder = Path(folder)

    def save(self, image: Image.Image, file_name: str) -> Path:
        """Store the picture under the base name and return its path."""
        path = self.folder / f"{file_name}{BITMAP_SUFFIX}"
        path.parent.mkdir(parents=True, exist_ok=True)
        image.save(path, format="BMP")
        return path


class BitmapManager:
    """Holds one picture per stage, loading stored ones and drawing the rest.

    Pictures that were drawn rather than loaded are stored when the manager
    is closed, so later runs can load them.
    """

    def __init__(
        self, loader: BitmapLoader, creator: BitmapCreator, saver: BitmapSaver
    ) -> None:
        self._loader = loader
        self._creator = creator
        self._saver = saver
        self._closed = False
        self._images: dict[Drawing, Image.Image] = {}
        for drawing in Drawing:
            name = file_name_for_drawing(drawing)
            image = None
            if loader.exists(name):
                try:
                    image = loader.load(name)
                except OSError:
                    image = None
            if image is None:
                image = creator.create(DEFAULT_SIZE, drawing)
            self._images[drawing] = image

    def show(self, drawing: Drawing | int, size: tuple[int, int]) -> Image.Image:
        """Return the stage's picture stretched to the given size."""
        width, height = _check_size(size)
        return self._images[Drawing(drawing)].resize((width, height))

    def close(self) -> None:
        """Store every picture that is not yet on disk."""
        if self._closed:
            return
        self._closed = True
        for drawing, image in self._images.items():
            name = file_name_for_drawing(drawing)
            if not self._loader.exists(name):
                self._saver.save(image, name)

    def __enter__(self) -> BitmapManager:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()