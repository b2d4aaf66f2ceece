# === FILE: faver/cli.py ===
#!/usr/bin/env python3
"""
Точка входа faver: поиск и загрузка favicon для списка сайтов.

Цели передаются позиционными аргументами; если их нет, читаются из stdin
(по одной на строку).

Опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: ./faver.yaml, если есть)
  --output-dir DIR    Каталог для сохранения иконок
  --timeout SEC       Таймаут на один HTTP-запрос
  --user-agent TEXT   Заголовок User-Agent
  --insecure          Не проверять TLS-сертификаты (небезопасно)
  --fail-fast         Остановиться после первой неудачной цели
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --version, -v       Показать версию faver

Пример:
  faver https://example.com https://python.org -o icons/
  cat sites.txt | faver --fail-fast
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError as ConfigValidationError

from faver import __version__
from faver.config import load_config
from faver.engine import fetch_all
from faver.logger import init_logging, logger
from faver.storage import save_icons
from faver.utils import read_targets, remove_duplicates

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str, exit_code: int | None = 1):
    click.secho(message, fg='red', err=True)
    if exit_code is not None:
        sys.exit(exit_code)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='faver, version %(version)s')
@click.argument('targets', nargs=-1)
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--output-dir', '-o', 'output_dir',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Каталог для сохранения иконок (override output_dir)'
)
@click.option(
    '--timeout', 'timeout',
    type=float,
    default=None,
    help='Таймаут на один HTTP-запрос, секунд (override timeout)'
)
@click.option(
    '--user-agent', 'user_agent',
    default=None,
    help='Заголовок User-Agent (override user_agent)'
)
@click.option(
    '--insecure', is_flag=True, default=False,
    help='Принимать любые TLS-сертификаты. Ослабляет безопасность соединения.'
)
@click.option(
    '--fail-fast', 'fail_fast', is_flag=True, default=False,
    help='Остановиться после первой цели, завершившейся ошибкой'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (только stderr, если не указан)'
)
def cli(targets, config_path, output_dir, timeout, user_agent, insecure, fail_fast,
        log_level, log_file):
    """Найти и скачать favicon для каждой цели TARGETS."""
    init_logging(level=log_level, log_file=str(log_file) if log_file else None)

    try:
        cfg = load_config(config_path)
    except (OSError, ValueError, TypeError, ConfigValidationError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')

    overrides = {
        'output_dir': output_dir,
        'timeout': timeout,
        'user_agent': user_agent,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    # Флаги могут только включить опцию из конфига
    if insecure:
        overrides['insecure_skip_verify'] = True
    if fail_fast:
        overrides['fail_fast'] = True
    cfg = cfg.model_copy(update=overrides)

    if targets:
        logger.info("Reading positional arguments")
        target_list = list(targets)
    else:
        logger.info("Reading from stdin")
        target_list = read_targets(click.get_text_stream('stdin'))
    target_list = remove_duplicates(target_list)

    if not target_list:
        print_error('Не указано ни одной цели')

    results = asyncio.run(fetch_all(target_list, cfg))

    failed = 0
    for result in results:
        if not result.ok:
            failed += 1
            print_error(f'error: {result.target}: {result.error}', exit_code=None)
            continue
        try:
            paths = save_icons(result.target, result.icons, cfg.output_dir)
        except OSError as e:
            failed += 1
            print_error(f'error: {result.target}: {e}', exit_code=None)
            continue
        for path in paths:
            click.echo(str(path))

    skipped = len(target_list) - len(results)
    if skipped:
        logger.warning("%d target(s) skipped after failure", skipped)

    if failed or skipped:
        sys.exit(1)


if __name__ == "__main__":
    cli()
