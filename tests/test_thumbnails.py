from __future__ import annotations

import os
import subprocess
from pathlib import Path

import pytest

from src import thumbnails as thumbnails_module
from src.errors import ThumbnailDirectoryError
from src.thumbnails import DEFAULT_TGP_SCRIPT, THUMBNAIL_TIMEOUT_SEC, ThumbnailPipeline, thumbnail_name


class FakeTool:
    """Stands in for subprocess.run; writes the image like the real tool"""

    def __init__(self, fail_for: tuple[str, ...] = (), hang_for: tuple[str, ...] = (),
                 missing: bool = False) -> None:
        self.calls: list[list[str]] = []
        self.timeouts: list[float | None] = []
        self.fail_for = fail_for
        self.hang_for = hang_for
        self.missing = missing

    def __call__(self, args, **kwargs):
        self.calls.append(list(args))
        self.timeouts.append(kwargs.get("timeout"))
        if self.missing:
            raise FileNotFoundError(args[0])
        tool, video_path, img_dir = args
        name = Path(video_path).name
        if name in self.fail_for:
            raise subprocess.CalledProcessError(1, args, stderr=b"boom")
        if name in self.hang_for:
            raise subprocess.TimeoutExpired(args, kwargs["timeout"])
        (Path(img_dir) / f"{name}.jpg").write_bytes(b"jpg")
        return subprocess.CompletedProcess(args, 0)


@pytest.fixture()
def fake_tool(monkeypatch: pytest.MonkeyPatch) -> FakeTool:
    tool = FakeTool()
    monkeypatch.setattr(thumbnails_module.subprocess, "run", tool)
    return tool


def _pipeline(tmp_path: Path) -> ThumbnailPipeline:
    return ThumbnailPipeline("/opt/gen_tgp.sh", str(tmp_path / "videos"), str(tmp_path / "videos" / "img"))


def test_thumbnail_name_keeps_the_video_extension() -> None:
    assert thumbnail_name("clip.mp4") == "clip.mp4.jpg"


def test_creates_output_dir_and_invokes_tool_per_video(tmp_path: Path, fake_tool: FakeTool) -> None:
    (tmp_path / "videos").mkdir()
    pipeline = _pipeline(tmp_path)

    report = pipeline.run(["a.mp4", "b.mp4"])

    assert (tmp_path / "videos" / "img").is_dir()
    assert fake_tool.calls == [
        ["/opt/gen_tgp.sh", str(tmp_path / "videos" / "a.mp4"), str(tmp_path / "videos" / "img")],
        ["/opt/gen_tgp.sh", str(tmp_path / "videos" / "b.mp4"), str(tmp_path / "videos" / "img")],
    ]
    assert report.generated == ["a.mp4", "b.mp4"]
    assert report.skipped == []


def test_second_run_invokes_nothing(tmp_path: Path, fake_tool: FakeTool) -> None:
    (tmp_path / "videos").mkdir()
    pipeline = _pipeline(tmp_path)
    pipeline.run(["a.mp4", "b.mp4"])
    fake_tool.calls.clear()

    report = pipeline.run(["a.mp4", "b.mp4"])

    assert fake_tool.calls == []
    assert report.skipped == ["a.mp4", "b.mp4"]
    assert report.total == 2


def test_failed_video_is_skipped_and_batch_continues(tmp_path: Path, fake_tool: FakeTool) -> None:
    (tmp_path / "videos").mkdir()
    fake_tool.fail_for = ("a.mp4",)

    report = _pipeline(tmp_path).run(["a.mp4", "b.mp4"])

    assert report.failed == ["a.mp4"]
    assert report.generated == ["b.mp4"]
    assert len(fake_tool.calls) == 2


def test_missing_tool_fails_each_video(tmp_path: Path, fake_tool: FakeTool) -> None:
    (tmp_path / "videos").mkdir()
    fake_tool.missing = True

    report = _pipeline(tmp_path).run(["a.mp4", "b.mp4"])

    assert report.failed == ["a.mp4", "b.mp4"]


def test_uncreatable_output_dir_is_fatal(tmp_path: Path, fake_tool: FakeTool) -> None:
    blocker = tmp_path / "videos"
    blocker.write_bytes(b"not a directory")

    with pytest.raises(ThumbnailDirectoryError):
        _pipeline(tmp_path).run(["a.mp4"])
    assert fake_tool.calls == []


def test_progress_is_reported_for_every_video(tmp_path: Path, fake_tool: FakeTool) -> None:
    (tmp_path / "videos").mkdir()
    seen: list[tuple[int, int, str]] = []

    _pipeline(tmp_path).run(["a.mp4", "b.mp4"], progress=lambda *args: seen.append(args))

    assert seen == [(1, 2, "a.mp4"), (2, 2, "b.mp4")]


def test_hung_tool_times_out_and_batch_continues(tmp_path: Path, fake_tool: FakeTool) -> None:
    (tmp_path / "videos").mkdir()
    fake_tool.hang_for = ("a.mp4",)

    report = _pipeline(tmp_path).run(["a.mp4", "b.mp4"])

    assert report.failed == ["a.mp4"]
    assert report.generated == ["b.mp4"]
    assert fake_tool.timeouts == [THUMBNAIL_TIMEOUT_SEC, THUMBNAIL_TIMEOUT_SEC]


def test_timeout_is_configurable(tmp_path: Path, fake_tool: FakeTool) -> None:
    (tmp_path / "videos").mkdir()
    pipeline = ThumbnailPipeline("/opt/gen_tgp.sh", str(tmp_path / "videos"),
                                 str(tmp_path / "videos" / "img"), timeout=5)

    pipeline.run(["a.mp4"])

    assert fake_tool.timeouts == [5]


def test_default_script_ships_inside_the_package() -> None:
    script = Path(DEFAULT_TGP_SCRIPT)

    assert script.parent.parent == Path(os.path.abspath(thumbnails_module.__file__)).parent
    assert script.is_file()
    assert os.access(script, os.X_OK)
