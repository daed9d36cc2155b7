"""
Configuration document for PV Organizer

The document is a JSON object:

    {
        "vidPath": "/abs/path/to/videos",
        "namPath": "/abs/path/to/galleries",
        "tags": ["tag", ...],
        "videoRelations": {
            "clip.mp4": {"galleries": ["G1"], "tags": ["tag"]}
        },
        "tgpScript": "/optional/path/to/gen_tgp.sh"
    }

Anything unreadable or of the wrong shape raises ConfigError; there is no
reduced mode without a valid document.
"""

import json
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from src.errors import ConfigError
from src.logger import debug

CONFIG_FILE_NAME = 'pvorg.json'
CONFIG_ENV_VAR = 'PVORG_CONFIG'
THUMBNAIL_DIR_NAME = 'img'


@dataclass
class VideoRelation:
    galleries: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)


@dataclass
class AppConfig:
    vid_path: str
    nam_path: str
    tags: List[str] = field(default_factory=list)
    video_relations: Dict[str, VideoRelation] = field(default_factory=dict)
    tgp_script: Optional[str] = None
    source_path: Optional[str] = None

    @property
    def img_path(self) -> str:
        """Directory the thumbnail tool writes into"""
        return os.path.join(self.vid_path, THUMBNAIL_DIR_NAME)


def default_config_path() -> str:
    """~/pvorg.json unless PVORG_CONFIG points elsewhere"""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return os.path.expanduser(env_path)
    return os.path.join(os.path.expanduser('~'), CONFIG_FILE_NAME)


def _require_str(data: dict, key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"'{key}' must be a non-empty string")
    return value


def _require_str_list(value, what: str) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{what} must be a list of strings")
    return list(value)


def parse_config(data) -> AppConfig:
    """Build an AppConfig from an already decoded JSON document"""
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a JSON object")

    vid_path = _require_str(data, 'vidPath')
    nam_path = _require_str(data, 'namPath')
    tags = _require_str_list(data.get('tags', []), "'tags'")

    raw_relations = data.get('videoRelations', {})
    if not isinstance(raw_relations, dict):
        raise ConfigError("'videoRelations' must be an object")

    relations: Dict[str, VideoRelation] = {}
    for video_name, raw in raw_relations.items():
        if not isinstance(raw, dict):
            raise ConfigError(f"relation for '{video_name}' must be an object")
        relations[video_name] = VideoRelation(
            galleries=_require_str_list(raw.get('galleries', []), f"galleries of '{video_name}'"),
            tags=_require_str_list(raw.get('tags', []), f"tags of '{video_name}'"),
        )

    tgp_script = data.get('tgpScript')
    if tgp_script is not None and not isinstance(tgp_script, str):
        raise ConfigError("'tgpScript' must be a string")

    return AppConfig(
        vid_path=os.path.expanduser(vid_path),
        nam_path=os.path.expanduser(nam_path),
        tags=tags,
        video_relations=relations,
        tgp_script=os.path.expanduser(tgp_script) if tgp_script else None,
    )


def load_config(path: Optional[str] = None) -> AppConfig:
    """Read and validate the configuration document at path"""
    path = path or default_config_path()
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Couldn't load {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Couldn't parse {path}: {e}") from e

    try:
        config = parse_config(data)
    except ConfigError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    config.source_path = path
    debug(f"Loaded configuration from {path}: {len(config.tags)} tags, "
          f"{len(config.video_relations)} video relations")
    return config
