# === FILE: cache_warmer/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска прогрева кэша через командную строку.

Использование:
  cache-warmer BASE_URL SITEMAP_URL [--debug] [CONCURRENCY]

Аргументы:
  BASE_URL            Корневой URL сайта
  SITEMAP_URL         URL sitemap.xml
  CONCURRENCY         Число одновременных запросов (default: 1)

Опции:
  --debug             Показать ссылки, найденные на каждой странице
  --config PATH       YAML/JSON-конфиг со значениями по умолчанию
  --blacklist PATH    Файл с подстроками-исключениями (default: ./blacklist)
  --urls PATH         Файл с дополнительными стартовыми URL (default: ./urls)
  --timeout SEC       Таймаут одного запроса
  --user-agent STR    Заголовок User-Agent
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблоном report.html.j2
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только stdout, если не указан)
  --version, -v       Показать версию

Пример:
  cache-warmer https://example.com https://example.com/sitemap.xml --debug 8
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from cache_warmer import __version__
from cache_warmer.config import load_config
from cache_warmer.engine import start_crawl
from cache_warmer.logger import init_logging
from cache_warmer.report import render_html, render_json, render_text

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='CacheWarmer, version %(version)s')
@click.argument('base_url')
@click.argument('sitemap_url')
@click.argument('concurrency', required=False, type=click.IntRange(min=1))
@click.option('--debug', is_flag=True, help='Показать ссылки, найденные на каждой странице')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='YAML/JSON-конфиг со значениями по умолчанию.'
)
@click.option(
    '--blacklist', 'blacklist_file',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Файл с подстроками-исключениями (default: ./blacklist)'
)
@click.option(
    '--urls', 'seed_file',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Файл с дополнительными стартовыми URL (default: ./urls)'
)
@click.option('--timeout', type=float, default=None, help='Таймаут одного запроса (секунд)')
@click.option('--user-agent', 'user_agent', default=None, help='Заголовок User-Agent')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблоном report.html.j2'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
def cli(base_url, sitemap_url, concurrency, debug, config_path, blacklist_file, seed_file,
        timeout, user_agent, json_output, html_output, template_dir, log_level, log_file):
    """Прогреть кэш сайта: обойти BASE_URL и все страницы из SITEMAP_URL."""
    init_logging(level=log_level, log_file=str(log_file) if log_file else None)
    try:
        cfg = load_config(
            config_path,
            base_url=base_url,
            sitemap_url=sitemap_url,
            concurrency=concurrency,
            debug=True if debug else None,
            timeout=timeout,
            user_agent=user_agent,
            blacklist_file=blacklist_file,
            seed_file=seed_file,
        )
    except (OSError, ValueError, TypeError, ValidationError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')

    try:
        report = asyncio.run(start_crawl(cfg, handle_signals=True))
    except Exception as e:
        print_error(f'Ошибка при прогреве: {e}')

    click.echo(render_text(report, debug=cfg.debug))

    if json_output:
        try:
            saved_json = render_json(report, json_output)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(report, html_output, template_dir)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


if __name__ == "__main__":
    cli()
