"""
Модуль для работы с конфигурацией проекта

Функции:
- Загрузка config.yaml (+ профили: config.prod.yaml, config.test.yaml)
- ENV-переопределения (префикс SUBTITLE_FREQUENCY_, вложенность через __)
- Валидация параметров анализатора и политики ошибок
- Настройка логирования
"""

import os
import copy
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv
import logging
from datetime import datetime

logger = logging.getLogger(__name__)

ENV_PREFIX = 'SUBTITLE_FREQUENCY_'
ERROR_POLICIES = ('fail', 'skip')
ANALYZER_TYPES = ('jumanpp', 'sudachi')
EXPORT_FORMATS = ('csv', 'xlsx', 'json')

DEFAULT_CONFIG: Dict[str, Any] = {
    'corpus': {
        'root_dir': "srt",
        'encoding': "utf-8-sig",
        # Убирать <i>, <font> и {\an8} из текста реплик
        'strip_markup': True,
    },
    'analyzer': {
        'type': "jumanpp",
        'jumanpp': {
            'executable': "jumanpp",
            'model': "model/jumandic.jppmdl",
            'beam': 5,
            'global_beam': {
                'left': 6,
                'check': 1,
                'right': 5,
            },
        },
        'sudachi': {
            'dict': "core",
            'split_mode': "C",
        },
    },
    'stopwords': {
        'extra': [],
    },
    'pipeline': {
        # fail — прерывать запуск, skip — пропускать файл/реплику с предупреждением
        'error_policy': "fail",
        'show_progress': True,
    },
    'report': {
        'output_file': "output.txt",
        'extra_formats': [],
    },
    'logging': {
        'console_level': "INFO",
        'file_level': "DEBUG",
        'format': "%(asctime)s - %(levelname)s - %(message)s",
        'log_to_file': False,
        'log_dir': "logs",
        'max_log_files': 10,
    },
}


class Config:
    """Класс для работы с конфигурацией проекта"""

    def __init__(self, config_path: Optional[str] = None):
        """
        Инициализация конфигурации

        Args:
            config_path: Путь к файлу конфигурации
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            # Ищем config.yaml в текущей директории и выше
            current_dir = Path.cwd()
            config_path = current_dir / "config.yaml"

            while not config_path.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                config_path = current_dir / "config.yaml"

            self.config_path = config_path

        self.config_data: Dict[str, Any] = {}

        self._load_config()
        self._load_env()
        self._apply_env_overrides()
        self._validate()
        self._configure_logging_if_needed()

    def _resolve_config_path(self) -> Path:
        env = os.getenv(f'{ENV_PREFIX}ENV', '').lower().strip()
        root = self.config_path.parent
        if env == 'production':
            candidate = root / 'config.prod.yaml'
        elif env == 'testing':
            candidate = root / 'config.test.yaml'
        else:
            return self.config_path
        if candidate.exists():
            return candidate
        return self.config_path

    def _load_config(self) -> None:
        """Загружает конфигурацию из YAML файла поверх значений по умолчанию"""
        self.config_data = self._get_default_config()
        self.config_path = self._resolve_config_path()
        if not self.config_path.exists():
            logger.debug(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
            return
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Ошибка загрузки конфигурации {self.config_path}: {e}")
            return
        if not isinstance(loaded, dict):
            logger.error(f"Некорректный формат конфигурации {self.config_path}: ожидался словарь")
            return
        self._merge(self.config_data, loaded)
        logger.debug(f"Конфигурация загружена: {self.config_path}")

    def _load_env(self) -> None:
        """Загружает переменные окружения из .env файла (если есть)"""
        load_dotenv()

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (SUBTITLE_FREQUENCY_*)."""
        for key, val in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            if key == f'{ENV_PREFIX}ENV':
                continue
            tail = key[len(ENV_PREFIX):]
            # Вложенность разделяется двойным подчёркиванием
            dotted = tail.replace('__', '.').lower()
            parsed: Any = val
            if val.lower() in ('true', 'false'):
                parsed = (val.lower() == 'true')
            else:
                try:
                    if '.' in val:
                        parsed = float(val)
                    else:
                        parsed = int(val)
                except ValueError:
                    parsed = val
            self._set_nested(self.config_data, dotted, parsed)
        if os.getenv(f'{ENV_PREFIX}ENV'):
            logger.info(f"Активирован профиль: {os.getenv(f'{ENV_PREFIX}ENV')}")

    def _validate(self) -> None:
        """Проверяет диапазоны и допустимые значения, исправляя некорректные."""
        for dotted in ('analyzer.jumanpp.beam',
                       'analyzer.jumanpp.global_beam.left',
                       'analyzer.jumanpp.global_beam.check',
                       'analyzer.jumanpp.global_beam.right'):
            default = self._default_value(dotted)
            try:
                value = int(self.get(dotted, default))
            except (TypeError, ValueError):
                logger.warning(f"{dotted}: некорректное значение, используется {default}")
                value = default
            if value < 1:
                logger.warning(f"{dotted} < 1 — принудительно установлено в 1")
                value = 1
            self._set_nested(self.config_data, dotted, value)

        policy = str(self.get('pipeline.error_policy', 'fail')).lower()
        if policy not in ERROR_POLICIES:
            logger.warning(f"Неизвестная политика ошибок '{policy}', используется 'fail'")
            policy = 'fail'
        self._set_nested(self.config_data, 'pipeline.error_policy', policy)

        formats = self.get('report.extra_formats') or []
        if isinstance(formats, str):
            formats = [f.strip() for f in formats.split(',') if f.strip()]
        valid = [f.lower() for f in formats if str(f).lower() in EXPORT_FORMATS]
        if len(valid) != len(formats):
            logger.warning(f"Неизвестные форматы экспорта отброшены: {formats}")
        self._set_nested(self.config_data, 'report.extra_formats', valid)

    def _default_value(self, dotted: str) -> Any:
        value: Any = DEFAULT_CONFIG
        for k in dotted.split('.'):
            value = value[k]
        return value

    def _configure_logging_if_needed(self, force: bool = False) -> None:
        """Инициализирует/переинициализирует базовое логирование по config.

        Повторная конфигурация выполняется, если:
          - ранее не конфигурировалось, или
          - изменился уровень/формат/файл логирования, или
          - явно указан force=True
        """
        root = logging.getLogger()

        console_level_name = str(self.get_console_logging_level()).upper()
        file_level_name = str(self.get_file_logging_level()).upper()
        console_level = getattr(logging, console_level_name, logging.INFO)
        file_level = getattr(logging, file_level_name, logging.DEBUG)
        desired_fmt = self.get_logging_format()
        log_to_file = self.is_logging_to_file_enabled()

        if getattr(root, "_subtitle_frequency_configured", False) and not force:
            current = getattr(root, "_subtitle_frequency_settings", None)
            if current == (console_level_name, file_level_name, desired_fmt, log_to_file):
                return

        handlers: List[logging.Handler] = []
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)

        if log_to_file:
            self.cleanup_old_log_files()
            log_file = Path(self.get_session_log_file())
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setLevel(file_level)
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)
            except OSError as e:
                logger.debug(f"Не удалось открыть файл лога: {e}")

        root_level = min(console_level, file_level) if len(handlers) > 1 else console_level
        logging.basicConfig(level=root_level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_subtitle_frequency_configured", True)
        setattr(root, "_subtitle_frequency_settings",
                (console_level_name, file_level_name, desired_fmt, log_to_file))

    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        return copy.deepcopy(DEFAULT_CONFIG)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение конфигурации по ключу

        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию

        Returns:
            Значение параметра или default
        """
        try:
            value = self.config_data
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """Устанавливает значение (используется CLI для аргументов командной строки)."""
        self._set_nested(self.config_data, key, value)

    # --- Корпус ---
    def get_corpus_root(self) -> str:
        """Получает корневую папку с субтитрами"""
        return self.get('corpus.root_dir', "srt")

    def get_corpus_encoding(self) -> str:
        """Получает кодировку файлов субтитров"""
        return self.get('corpus.encoding', "utf-8-sig")

    def is_markup_stripping_enabled(self) -> bool:
        """Удалять ли разметку (<i>, {\\an8}) из реплик"""
        return bool(self.get('corpus.strip_markup', True))

    # --- Анализатор ---
    def get_analyzer_config(self) -> Dict[str, Any]:
        """Получает конфигурацию морфологического анализатора"""
        return self.config_data.get('analyzer', {})

    def get_analyzer_type(self) -> str:
        return str(self.get('analyzer.type', "jumanpp")).lower()

    # --- Стоп-слова ---
    def get_extra_stopwords(self) -> List[str]:
        extra = self.get('stopwords.extra', []) or []
        return [str(word) for word in extra]

    # --- Пайплайн ---
    def get_error_policy(self) -> str:
        """Политика обработки ошибок файлов и реплик: fail или skip"""
        return self.get('pipeline.error_policy', "fail")

    def is_progress_enabled(self) -> bool:
        return bool(self.get('pipeline.show_progress', True))

    # --- Отчёт ---
    def get_output_file(self) -> str:
        """Получает путь к файлу отчёта"""
        return self.get('report.output_file', "output.txt")

    def get_extra_formats(self) -> List[str]:
        """Дополнительные форматы экспорта (csv, xlsx, json)"""
        return list(self.get('report.extra_formats', []) or [])

    # --- Логирование ---
    def get_logging_config(self) -> Dict[str, Any]:
        """Получает конфигурацию логирования"""
        return self.config_data.get('logging', {})

    def get_console_logging_level(self) -> str:
        """Получает уровень логирования для консоли"""
        # Поддержка короткого формата logging.level
        return self.get('logging.console_level', self.get('logging.level', "INFO"))

    def get_file_logging_level(self) -> str:
        """Получает уровень логирования для файла"""
        return self.get('logging.file_level', "DEBUG")

    def get_logging_format(self) -> str:
        return self.get('logging.format', "%(asctime)s - %(levelname)s - %(message)s")

    def is_logging_to_file_enabled(self) -> bool:
        return bool(self.get('logging.log_to_file', False))

    def get_log_dir(self) -> str:
        return self.get('logging.log_dir', "logs")

    def get_session_log_file(self) -> str:
        """Генерирует имя файла лога для текущей сессии с временной меткой"""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return str(Path(self.get_log_dir()) / f"subtitle_frequency_{timestamp}.log")

    def get_max_log_files(self) -> int:
        return int(self.get('logging.max_log_files', 10))

    def cleanup_old_log_files(self) -> None:
        """Удаляет старые файлы логов, оставляя только последние max_log_files"""
        logs_dir = Path(self.get_log_dir())
        if not logs_dir.exists():
            return

        log_files = list(logs_dir.glob("subtitle_frequency_*.log"))
        max_files = self.get_max_log_files()
        if len(log_files) <= max_files:
            return

        # Самые новые последними
        log_files.sort(key=lambda f: f.stat().st_mtime)
        for old_file in log_files[:-max_files]:
            try:
                old_file.unlink()
                logger.debug(f"Удален старый лог файл: {old_file}")
            except OSError as e:
                logger.debug(f"Не удалось удалить лог файл {old_file}: {e}")


# Глобальный экземпляр конфигурации
config = Config()
