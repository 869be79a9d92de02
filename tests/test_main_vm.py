from __future__ import annotations

from pathlib import Path

import pytest

from app.viewmodels.main_vm import MainVM
from core.services.zoom_service import ZoomController


class FakeImage:
    def __init__(self, width: int, height: int) -> None:
        self._w = width
        self._h = height

    def width(self) -> int:
        return self._w

    def height(self) -> int:
        return self._h


class FakeImageService:
    """Every path decodes to 1000x500 except names listed as broken."""

    def __init__(self, broken: tuple[str, ...] = ()) -> None:
        self.broken = broken
        self.loaded: list[str] = []

    def load(self, path: str):
        self.loaded.append(path)
        if Path(path).name in self.broken:
            return None
        return FakeImage(1000, 500)

    def scale(self, image, width: int, height: int):
        return FakeImage(width, height)


@pytest.fixture
def vm() -> MainVM:
    return MainVM(FakeImageService())


def test_open_folder_and_render_first_image(image_dir: Path) -> None:
    service = FakeImageService()
    vm = MainVM(service)
    assert vm.open_folder(str(image_dir)) is True

    rendered = vm.render_current()

    assert (rendered.width(), rendered.height()) == (1000, 500)
    assert service.loaded == [vm.navigator.current()]
    assert vm.folder == str(image_dir)
    assert vm.last_error is None


def test_open_missing_folder_reports_error(vm: MainVM, tmp_path: Path, log_records) -> None:
    missing = tmp_path / "missing"

    assert vm.open_folder(str(missing)) is False
    assert vm.render_current() is None
    assert vm.navigator.is_empty
    assert "Could not open directory" in vm.status_text
    assert any(
        level == "ERROR" and "Could not open directory" in msg for level, msg in log_records
    )


def test_successful_open_clears_previous_error(
    vm: MainVM, tmp_path: Path, image_dir: Path
) -> None:
    vm.open_folder(str(tmp_path / "missing"))
    vm.open_folder(str(image_dir))

    assert vm.last_error is None
    assert vm.status_text.startswith("1/4")


def test_render_uses_zoom(image_dir: Path) -> None:
    vm = MainVM(FakeImageService(), zoom=ZoomController(step=2.0))
    vm.open_folder(str(image_dir))

    vm.zoom_in()
    rendered = vm.render_current()

    assert (rendered.width(), rendered.height()) == (2000, 1000)
    vm.zoom_out()
    assert vm.render_current().height() == 500


def test_decode_failure_renders_nothing(tmp_path: Path, log_records) -> None:
    (tmp_path / "bad.png").write_bytes(b"")
    vm = MainVM(FakeImageService(broken=("bad.png",)))
    vm.open_folder(str(tmp_path))

    assert vm.render_current() is None
    assert any(level == "WARNING" for level, _ in log_records)


def test_empty_folder(vm: MainVM, tmp_path: Path) -> None:
    assert vm.open_folder(str(tmp_path)) is True

    assert vm.show_next() is None
    assert vm.show_previous() is None
    assert vm.render_current() is None
    assert vm.current_file_name is None
    assert vm.status_text == "No images"


def test_navigation_wraps(vm: MainVM, image_dir: Path) -> None:
    vm.open_folder(str(image_dir))
    paths = vm.navigator.paths

    assert vm.show_previous() == paths[-1]
    assert vm.show_next() == paths[0]


def test_status_text_shows_position_name_and_zoom(vm: MainVM, image_dir: Path) -> None:
    vm.open_folder(str(image_dir))
    vm.show_next()
    vm.zoom_in()

    name = Path(vm.navigator.current()).name
    assert vm.status_text == f"2/4  {name}  110%"


def test_reset_zoom(vm: MainVM) -> None:
    vm.zoom_in()
    vm.zoom_in()

    assert vm.reset_zoom() == 1.0
