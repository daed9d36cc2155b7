"""
Translation system for PV Organizer
Provides internationalization support for English and Chinese
"""

from PyQt6.QtCore import QSettings

SETTINGS_ORG = 'PVOrg'
SETTINGS_APP = 'Config'

TRANSLATIONS = {
    'en': {
        # Setup dialog
        'setup_title': 'PV Organizer',
        'generating_thumbnails': 'Generating thumbnails...',
        'generating_thumbnails_progress': 'Generating thumbnails... {}/{}',
        'thumbnail_dir_error_title': 'Thumbnail Directory',

        # Tabs
        'tab_view': 'View',
        'tab_config': 'Config',

        # Main Window Menus
        'file': 'File',
        'reload_config': 'Reload Configuration',
        'exit': 'Exit',
        'toggle_fullscreen': 'Toggle Fullscreen',
        'playback': 'Playback',
        'next_combination': 'Next',
        'previous_combination': 'Previous',
        'play_pause': 'Play/Pause',
        'toggle_gallery': 'Show/Hide Gallery',
        'fill': 'Fill',
        'blur_fill': 'Blur Fill',
        'fit': 'Fit',
        'zoom_fill': 'Zoom Fill',
        'english': 'English',
        'chinese': '中文',

        # View tab
        'no_combinations': 'No combinations available',
        'image_not_found': 'Image not found',
        'thumbnail_not_found': 'No thumbnail',
        'combination_status': '{} - {} ({}/{})',

        # Config tab
        'videos': 'Videos',
        'galleries': 'Galleries',
        'tags': 'Tags',
        'select_all': 'Select All',
        'select_none': 'Select None',
        'reload': 'Reload',
        'combination_count': '{} combinations',

        # Errors
        'config_error_title': 'Configuration Error',
    },
    'zh': {
        'setup_title': 'PV 整理器',
        'generating_thumbnails': '正在生成缩略图...',
        'generating_thumbnails_progress': '正在生成缩略图... {}/{}',
        'thumbnail_dir_error_title': '缩略图目录',

        'tab_view': '浏览',
        'tab_config': '设置',

        'file': '文件',
        'reload_config': '重新加载配置',
        'exit': '退出',
        'toggle_fullscreen': '切换全屏',
        'playback': '播放',
        'next_combination': '下一个',
        'previous_combination': '上一个',
        'play_pause': '播放/暂停',
        'toggle_gallery': '显示/隐藏图集',
        'fill': '填充',
        'blur_fill': '模糊填充',
        'fit': '适应',
        'zoom_fill': '缩放填充',
        'english': 'English',
        'chinese': '中文',

        'no_combinations': '没有可用的组合',
        'image_not_found': '未找到图片',
        'thumbnail_not_found': '没有缩略图',
        'combination_status': '{} - {} ({}/{})',

        'videos': '视频',
        'galleries': '图集',
        'tags': '标签',
        'select_all': '全选',
        'select_none': '全不选',
        'reload': '重新加载',
        'combination_count': '{} 个组合',

        'config_error_title': '配置错误',
    }
}

# Global language setting
_current_language = 'en'  # Default to English


def init_language():
    """Initialize language from settings"""
    global _current_language
    settings = QSettings(SETTINGS_ORG, SETTINGS_APP)
    language = settings.value('language', 'en')
    _current_language = language if language in TRANSLATIONS else 'en'


def get_language():
    """Get current language code"""
    return _current_language


def set_language(lang_code):
    """Set current language and save to settings"""
    global _current_language
    if lang_code in TRANSLATIONS:
        _current_language = lang_code
        settings = QSettings(SETTINGS_ORG, SETTINGS_APP)
        settings.setValue('language', lang_code)


def tr(key):
    """Translate a key to current language"""
    return TRANSLATIONS.get(_current_language, {}).get(key, key)


def format_tr(key, *args, **kwargs):
    """Translate and format a string"""
    translated = tr(key)
    if args:
        return translated.format(*args)
    elif kwargs:
        return translated.format(**kwargs)
    return translated
