import os
from typing import Dict, List, Tuple, Optional
from PIL import Image, ImageOps
from PyQt6.QtGui import QPixmap, QImage
from PyQt6.QtCore import Qt
from src.logger import warning

IMAGE_EXTENSIONS = {'png', 'jpg', 'jpeg', 'bmp', 'gif'}


def _is_hidden(name: str) -> bool:
    return name.startswith('.')


def get_video_names(video_dir: str) -> List[str]:
    """Names of the non-hidden plain entries in the video directory"""
    video_names = []
    try:
        with os.scandir(video_dir) as entries:
            for entry in entries:
                if _is_hidden(entry.name) or entry.is_dir():
                    continue
                video_names.append(entry.name)
    except OSError as e:
        warning(f"Error reading video directory {video_dir}: {e}")
        return []
    return video_names


def get_gallery_names(gallery_root: str) -> List[str]:
    """Names of the non-hidden directories under the gallery root"""
    gallery_names = []
    try:
        with os.scandir(gallery_root) as entries:
            for entry in entries:
                if _is_hidden(entry.name) or not entry.is_dir():
                    continue
                gallery_names.append(entry.name)
    except OSError as e:
        warning(f"Error reading gallery root {gallery_root}: {e}")
        return []
    return gallery_names


def is_image_file(name: str) -> bool:
    # .gif only shows its first frame
    ext = os.path.splitext(name)[1].lower().lstrip('.')
    return ext in IMAGE_EXTENSIONS and not _is_hidden(name)


def get_image_files(directory: str) -> List[str]:
    """Full paths of the images directly inside directory"""
    image_files = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.is_file() and is_image_file(entry.name):
                    image_files.append(entry.path)
    except OSError as e:
        warning(f"Error reading gallery {directory}: {e}")
    return image_files


def get_gallery_images(gallery_root: str, gallery_names: List[str]) -> Dict[str, List[str]]:
    """Image paths for each gallery; an unreadable gallery maps to an empty list"""
    return {
        name: get_image_files(os.path.join(gallery_root, name))
        for name in gallery_names
    }


def load_and_scale_image(image_path: str, target_size: Tuple[int, int],
                         maintain_aspect: bool = True) -> Optional[QPixmap]:
    """Load an image and scale it to target size"""
    try:
        with Image.open(image_path) as opened:
            pil_image = ImageOps.exif_transpose(opened)

            if pil_image.mode in ('RGBA', 'LA', 'PA') or (
                    pil_image.mode == 'P' and 'transparency' in pil_image.info):
                pil_image = pil_image.convert('RGBA')
                bytes_per_line = 4 * pil_image.width
                qimage_format = QImage.Format.Format_RGBA8888
            else:
                pil_image = pil_image.convert('RGB')
                bytes_per_line = 3 * pil_image.width
                qimage_format = QImage.Format.Format_RGB888

            img_data = pil_image.tobytes()
            # copy() detaches the QImage from img_data
            qimage = QImage(img_data, pil_image.width, pil_image.height,
                            bytes_per_line, qimage_format).copy()
    except (OSError, ValueError) as e:
        warning(f"Error loading image {image_path}: {e}")
        return None

    pixmap = QPixmap.fromImage(qimage)
    aspect_mode = (Qt.AspectRatioMode.KeepAspectRatio if maintain_aspect
                   else Qt.AspectRatioMode.IgnoreAspectRatio)
    return pixmap.scaled(
        target_size[0], target_size[1],
        aspect_mode,
        Qt.TransformationMode.SmoothTransformation
    )
