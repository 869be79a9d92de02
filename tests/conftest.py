import os
from pathlib import Path
import sys

from PIL import Image
from loguru import logger
import pytest

# Allow importing app/core/infrastructure from repository root
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def write_image(path: Path, width: int = 40, height: int = 20, color=(10, 120, 200)) -> Path:
    """Write a solid-color image whose format follows the file suffix."""
    fmt = "PNG" if path.suffix == ".png" else "JPEG"
    Image.new("RGB", (width, height), color).save(path, fmt)
    return path


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    """Directory with three decodable images and assorted non-matching entries."""
    folder = tmp_path / "photos"
    folder.mkdir()
    write_image(folder / "a.jpg")
    write_image(folder / "b.png")
    write_image(folder / "c.jpeg")
    (folder / "notes.txt").write_text("not an image", encoding="utf-8")
    (folder / "UPPER.JPG").write_bytes(b"")
    (folder / "archive.png.bak").write_bytes(b"")
    (folder / "nested.jpg").mkdir()
    (folder / "nested.jpg" / "inner.png").write_bytes(b"")
    return folder


@pytest.fixture
def log_records():
    """Capture loguru output as (level, message) tuples."""
    records: list[tuple[str, str]] = []
    handler_id = logger.add(
        lambda msg: records.append((msg.record["level"].name, msg.record["message"])),
        level="DEBUG",
    )
    yield records
    logger.remove(handler_id)
