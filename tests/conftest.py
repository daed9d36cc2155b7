from __future__ import annotations

import os
from pathlib import Path

import pytest
from PyQt6.QtCore import QCoreApplication

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session", autouse=True)
def qapp() -> QCoreApplication:
    # QTimer needs an application instance on the test thread
    app = QCoreApplication.instance() or QCoreApplication([])
    return app


@pytest.fixture()
def media_root(tmp_path: Path) -> Path:
    """A video directory with a.mp4 and b.mp4 and a gallery root with G1 and G2"""
    videos = tmp_path / "videos"
    videos.mkdir()
    for name in ("a.mp4", "b.mp4"):
        (videos / name).write_bytes(b"video")
    (videos / ".DS_Store").write_bytes(b"")

    galleries = tmp_path / "galleries"
    for gallery, images in {"G1": ["1.jpg", "2.png", "3.gif"], "G2": ["x.jpeg"]}.items():
        gallery_dir = galleries / gallery
        gallery_dir.mkdir(parents=True)
        for image in images:
            (gallery_dir / image).write_bytes(b"img")
    return tmp_path
