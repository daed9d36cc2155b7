from __future__ import annotations

from pathlib import Path

from utils.media_utils import get_gallery_images, get_gallery_names, get_video_names, is_image_file


def test_video_names_skip_hidden_entries_and_directories(media_root: Path) -> None:
    (media_root / "videos" / "img").mkdir()

    assert sorted(get_video_names(str(media_root / "videos"))) == ["a.mp4", "b.mp4"]


def test_gallery_names_are_visible_directories(media_root: Path) -> None:
    galleries = media_root / "galleries"
    (galleries / ".cache").mkdir()
    (galleries / "notes.txt").write_text("x")

    assert sorted(get_gallery_names(str(galleries))) == ["G1", "G2"]


def test_gallery_images_use_the_extension_allow_list(media_root: Path) -> None:
    g1 = media_root / "galleries" / "G1"
    (g1 / "clip.webp").write_bytes(b"x")
    (g1 / ".hidden.jpg").write_bytes(b"x")
    (g1 / "UPPER.JPG").write_bytes(b"x")
    (g1 / "sub.png").mkdir()

    images = get_gallery_images(str(media_root / "galleries"), ["G1", "G2"])

    assert sorted(Path(p).name for p in images["G1"]) == ["1.jpg", "2.png", "3.gif", "UPPER.JPG"]
    assert [Path(p).name for p in images["G2"]] == ["x.jpeg"]
    assert all(Path(p).is_absolute() for p in images["G1"])


def test_missing_directories_degrade_to_empty(tmp_path: Path) -> None:
    assert get_video_names(str(tmp_path / "nope")) == []
    assert get_gallery_names(str(tmp_path / "nope")) == []
    assert get_gallery_images(str(tmp_path), ["ghost"]) == {"ghost": []}


def test_is_image_file() -> None:
    assert is_image_file("a.bmp")
    assert is_image_file("b.JPEG")
    assert not is_image_file("c.heic")
    assert not is_image_file(".d.png")
    assert not is_image_file("noext")
