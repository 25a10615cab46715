# === FILE: cache_warmer/config.py ===
"""
Модуль для загрузки и валидации конфигурации CacheWarmer.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, HttpUrl, TypeAdapter, ValidationError, field_validator

#: Расширения, которые никогда не загружаются (картинки и документы).
SKIP_EXTENSIONS: Tuple[str, ...] = (
    "jpg", "jpeg", "png", "gif", "webp", "svg", "bmp", "tiff", "ico", "pdf",
)

_HTTP_URL: TypeAdapter[HttpUrl] = TypeAdapter(HttpUrl)


class WarmerConfig(BaseModel):
    """Конфигурация одного прогона прогрева кэша."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str = Field(..., description="Корневой URL сайта (хранится в том виде, как передан).")
    sitemap_url: Optional[HttpUrl] = Field(None, description="URL sitemap.xml для начального заполнения.")
    concurrency: int = Field(1, ge=1, description="Число одновременных запросов в пачке.")
    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field("CacheWarmer/1.0", min_length=1, description="Заголовок User-Agent.")
    verify_tls: bool = Field(False, description="Проверять TLS-сертификаты.")
    debug: bool = Field(False, description="Сохранять найденные на страницах ссылки в отчёте.")
    blacklist_file: Optional[Path] = Field(
        Path("blacklist"), description="Файл с подстроками для исключения URL."
    )
    seed_file: Optional[Path] = Field(
        Path("urls"), description="Файл с дополнительными стартовыми URL."
    )
    skip_extensions: Tuple[str, ...] = Field(
        SKIP_EXTENSIONS, description="Расширения файлов, которые не загружаются."
    )

    @field_validator("base_url")
    def _check_base_url(cls, v: str) -> str:
        # validated as HttpUrl but kept as written: host case, IDN and port stay untouched
        v = v.strip()
        try:
            _HTTP_URL.validate_python(v)
        except ValidationError as exc:
            raise ValueError(f"некорректный base_url {v!r}: {exc.errors()[0]['msg']}") from exc
        return v

    @field_validator("skip_extensions", mode="before")
    def _clean_extensions(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = [v]
        if isinstance(v, (list, tuple)):
            return tuple(str(ext).strip().lstrip(".").lower() for ext in v if str(ext).strip())
        return v


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def read_config_file(path: Union[str, Path]) -> dict[str, Any]:
    """Читает YAML или JSON и возвращает сырой словарь без валидации."""
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> WarmerConfig:
    """
    Собирает WarmerConfig из файла (если указан) и явных переопределений.
    Значения None в overrides игнорируются, чтобы не затирать файл.
    """
    data: dict[str, Any] = read_config_file(path) if path is not None else {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    return WarmerConfig(**data)
